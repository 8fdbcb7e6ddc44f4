"""
CLI commands for zmanim registry introspection.

Commands:
- zmanreg list      - List every calculation method
- zmanreg show      - Names, explanation and related methods for one method
- zmanreg related   - Related methods for one method
- zmanreg groups    - The authored groups
- zmanreg check     - Validate a reference data file
"""

from __future__ import annotations

import json
from pathlib import Path

from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.table import Table

from ..errors import ConfigurationError, UnknownCalculationMethod
from ..methods import CalculationMethod
from ..registry import ZmanRegistry, initialize, load_registry
from ..zman import Zman

console = Console()
err = Console(stderr=True)


def _open_registry(data_path: Path | None) -> ZmanRegistry | None:
    try:
        return initialize(data_path)
    except ConfigurationError as e:
        err.print(str(e), style="bold red", markup=False)
        return None


def _resolve(token: str) -> Zman | None:
    try:
        return Zman.for_method(token)
    except UnknownCalculationMethod as e:
        err.print(f"Unknown calculation method: {e.token}", style="bold red", markup=False)
        return None


# ============================================================================
# zmanreg list
# ============================================================================


def run_list(data_path: Path | None = None, json_output: bool = False) -> int:
    """
    List every calculation method in catalog order.

    Args:
        data_path: Reference data file, or None for the bundled data
        json_output: Output as JSON

    Returns:
        Exit code (0 = success)
    """
    registry = _open_registry(data_path)
    if registry is None:
        return 1

    zmanim = Zman.all()

    if json_output:
        output = [
            {
                "token": z.token,
                "english": z.english_name(),
                "ashkenazic": z.transliterated_name_ashkenazic(),
                "related": [r.token for r in z.related_zmanim()],
            }
            for z in zmanim
        ]
        print(json.dumps(output, indent=2, ensure_ascii=False))
        return 0

    table = Table(title="Zmanim")
    table.add_column("Token", style="cyan")
    table.add_column("English")
    table.add_column("Ashkenazic")
    table.add_column("Related", justify="right")

    for z in zmanim:
        grouped = registry.grouping.is_grouped(z.method)
        table.add_row(
            escape(z.token),
            escape(z.english_name()),
            escape(z.transliterated_name_ashkenazic()),
            str(len(z.related_zmanim())) if grouped else "-",
            style=None if grouped else "dim",
        )

    console.print(table)
    console.print(
        f"\n[dim]Total: {len(zmanim)} calculation methods, "
        f"{len(registry.grouping.groups())} groups[/dim]"
    )
    return 0


# ============================================================================
# zmanreg show
# ============================================================================


def run_show(token: str, data_path: Path | None = None, json_output: bool = False) -> int:
    """
    Show names, explanation and related methods for one calculation method.

    Returns:
        Exit code (0 = success, 1 = unknown method or bad data)
    """
    if _open_registry(data_path) is None:
        return 1
    zman = _resolve(token)
    if zman is None:
        return 1

    if json_output:
        output = {
            "token": zman.token,
            "hebrew": zman.hebrew_name(),
            "ashkenazic": zman.transliterated_name_ashkenazic(),
            "sephardic": zman.transliterated_name_sephardic(),
            "english": zman.english_name(),
            "explanation": zman.explanation(),
            "related": [r.token for r in zman.related_zmanim()],
        }
        print(json.dumps(output, indent=2, ensure_ascii=False))
        return 0

    console.print(Markdown(zman.describe()))
    return 0


# ============================================================================
# zmanreg related
# ============================================================================


def run_related(token: str, data_path: Path | None = None, json_output: bool = False) -> int:
    """
    Show the methods related to one calculation method, in authored order.

    Returns:
        Exit code (0 = success, 1 = unknown method or bad data)
    """
    if _open_registry(data_path) is None:
        return 1
    zman = _resolve(token)
    if zman is None:
        return 1

    related = zman.related_zmanim()

    if json_output:
        print(json.dumps([r.token for r in related], indent=2))
        return 0

    console.print(f"\n[bold cyan]{escape(zman.token)}[/bold cyan] ({escape(zman.english_name())})\n")
    for other in related:
        marker = "[green]*[/green]" if other == zman else " "
        console.print(f"  {marker} {escape(other.token)}: {escape(other.english_name())}")
    if len(related) == 1:
        console.print("\n[dim]Not part of any group[/dim]")
    return 0


# ============================================================================
# zmanreg groups
# ============================================================================


def run_groups(data_path: Path | None = None, json_output: bool = False) -> int:
    """
    Show the authored groups of related calculation methods.

    Returns:
        Exit code (0 = success)
    """
    registry = _open_registry(data_path)
    if registry is None:
        return 1

    groups = registry.grouping.as_tokens()

    if json_output:
        print(json.dumps([list(g) for g in groups], indent=2))
        return 0

    table = Table(title="Related Zmanim Groups")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Zman")
    table.add_column("Calculation Methods", style="cyan")

    for index, group in enumerate(groups, start=1):
        concept = registry.metadata.ashkenazic_name(CalculationMethod(group[0]))
        table.add_row(str(index), escape(concept), escape(", ".join(group)))

    console.print(table)
    ungrouped = [m.token for m in CalculationMethod if not registry.grouping.is_grouped(m)]
    if ungrouped:
        console.print(f"\n[dim]Ungrouped: {escape(', '.join(ungrouped))}[/dim]")
    return 0


# ============================================================================
# zmanreg check
# ============================================================================


def run_check(data_path: Path | None = None, json_output: bool = False) -> int:
    """
    Validate a reference data file without installing it as the registry.

    Returns:
        Exit code (0 = valid, 1 = problems found)
    """
    problems: list[str] = []
    registry: ZmanRegistry | None = None
    try:
        registry = load_registry(data_path)
    except ConfigurationError as e:
        problems = list(e.problems)

    source = str(data_path) if data_path else "bundled data"

    if json_output:
        output = {
            "source": source,
            "valid": not problems,
            "problems": problems,
        }
        if registry is not None:
            output["methods"] = len(registry.metadata)
            output["groups"] = len(registry.grouping.groups())
        print(json.dumps(output, indent=2))
        return 1 if problems else 0

    if not problems:
        console.print(
            f"[green]✓[/green] {source}: {len(registry.metadata)} calculation methods, "
            f"{len(registry.grouping.groups())} groups"
        )
        return 0

    console.print(f"\n[red]✗[/red] {source}: {len(problems)} problem(s)\n")
    for problem in problems:
        console.print(f"  [red]✗[/red] {escape(problem)}")
    return 1
