"""Tests for registry loading and the init-once lifecycle."""

from pathlib import Path

import pytest

from zmanreg import registry as registry_module
from zmanreg.errors import ConfigurationError
from zmanreg.load import load_reference_data
from zmanreg.methods import CalculationMethod
from zmanreg.registry import (
    build_registry,
    get_registry,
    initialize,
    load_registry,
    metadata,
    related_zmanim_mapping,
    reset_registry,
)
from zmanreg.zman import Zman


def _with_ghost_group(text: str) -> str:
    return text.replace("groups = [\n", 'groups = [\n    ["ghost"],\n', 1)


def test_bundled_data_loads():
    registry = load_registry()
    assert len(registry.metadata) == len(CalculationMethod)
    assert len(registry.grouping.groups()) > 0
    assert registry.source is None


def test_get_registry_initializes_lazily():
    assert registry_module._REGISTRY is None
    registry = get_registry()
    assert registry is get_registry()
    assert registry_module._REGISTRY is registry


def test_initialize_from_file(bundled_text, write_data):
    path = write_data(bundled_text)
    registry = initialize(path)
    assert registry.source == path
    assert get_registry() is registry


def test_initialize_twice_keeps_first_registry(bundled_text, write_data):
    first = initialize()
    assert initialize(write_data(bundled_text)) is first


def test_ghost_group_fails_initialization(bundled_text, write_data):
    path = write_data(_with_ghost_group(bundled_text))

    with pytest.raises(ConfigurationError) as exc_info:
        initialize(path)
    assert exc_info.value.problems == ["group 1 references unknown calculation method 'ghost'"]
    assert exc_info.value.source == path


def test_registry_unusable_after_failed_initialization(bundled_text, write_data):
    path = write_data(_with_ghost_group(bundled_text))
    with pytest.raises(ConfigurationError):
        initialize(path)

    with pytest.raises(ConfigurationError, match="previously failed"):
        get_registry()
    with pytest.raises(ConfigurationError):
        Zman.for_method("sunrise").english_name()

    reset_registry()
    assert get_registry().metadata.english_name(CalculationMethod.SUNRISE) == "Sunrise"


def test_build_reports_problems_from_both_tables(reference_data):
    reference_data["groups"].append(["ghost"])
    del reference_data["zmanim"]["chatzos"]

    with pytest.raises(ConfigurationError) as exc_info:
        build_registry(reference_data)
    assert sorted(exc_info.value.problems) == sorted(
        [
            "no metadata for 'chatzos'",
            f"group {len(reference_data['groups'])} references unknown calculation method 'ghost'",
        ]
    )


# ============================================================================
# DATA FILE SHAPE
# ============================================================================


def test_missing_file_is_a_configuration_error(tmp_path: Path):
    with pytest.raises(ConfigurationError, match="cannot read"):
        load_reference_data(tmp_path / "missing.toml")


def test_invalid_toml_is_a_configuration_error(write_data):
    with pytest.raises(ConfigurationError, match="not valid TOML"):
        load_reference_data(write_data("groups = [\n"))


def test_schema_version_is_checked(bundled_text, write_data):
    path = write_data(bundled_text.replace("schema_version = 1", "schema_version = 2", 1))
    with pytest.raises(ConfigurationError, match="schema_version"):
        load_reference_data(path)


def test_required_sections(write_data):
    with pytest.raises(ConfigurationError) as exc_info:
        load_reference_data(write_data("schema_version = 1\nextra = true\n"))
    assert exc_info.value.problems == [
        "'groups' is required",
        "'zmanim' is required",
        "unknown top-level key(s): extra",
    ]


# ============================================================================
# RAW DATA ACCESSORS
# ============================================================================


def test_related_zmanim_mapping(reference_data):
    mapping = related_zmanim_mapping()
    assert mapping == tuple(tuple(group) for group in reference_data["groups"])
    assert all(isinstance(token, str) for group in mapping for token in group)


def test_metadata_accessor_returns_copies():
    data = metadata()
    assert list(data) == CalculationMethod.tokens()
    assert data["chatzos"]["sephardic"] == "Chatzot"

    data["chatzos"]["sephardic"] = "changed"
    assert metadata()["chatzos"]["sephardic"] == "Chatzot"
