"""Tests for the grouping table."""

import pytest

from zmanreg.errors import ConfigurationError
from zmanreg.grouping import GroupingTable
from zmanreg.methods import CalculationMethod as M


@pytest.fixture
def bundled_grouping(reference_data) -> GroupingTable:
    return GroupingTable.from_data(reference_data["groups"])


def test_every_method_is_related_to_itself(bundled_grouping):
    for method in M:
        assert method in bundled_grouping.related_to(method)


def test_relation_is_symmetric(bundled_grouping):
    for method in M:
        for other in M:
            assert (other in bundled_grouping.related_to(method)) == (
                method in bundled_grouping.related_to(other)
            )


def test_sunrise_group_in_authored_order(bundled_grouping):
    expected = (M.SUNRISE, M.SEA_LEVEL_SUNRISE, M.ELEVATION_ADJUSTED_SUNRISE)
    for method in expected:
        assert bundled_grouping.related_to(method) == expected


def test_ungrouped_method_is_related_only_to_itself(bundled_grouping):
    assert bundled_grouping.related_to(M.CHATZOS) == (M.CHATZOS,)
    assert not bundled_grouping.is_grouped(M.CHATZOS)
    assert bundled_grouping.is_grouped(M.SUNRISE)


def test_as_tokens_returns_authored_groups(reference_data, bundled_grouping):
    tokens = bundled_grouping.as_tokens()
    assert tokens == tuple(tuple(group) for group in reference_data["groups"])
    assert ("sunrise", "seaLevelSunrise", "elevationAdjustedSunrise") in tokens


def test_related_to_is_stable_across_calls(bundled_grouping):
    assert bundled_grouping.related_to(M.TZAIS_72) == bundled_grouping.related_to(M.TZAIS_72)


# ============================================================================
# VALIDATION
# ============================================================================


def test_unknown_token_is_rejected():
    with pytest.raises(ConfigurationError) as exc_info:
        GroupingTable.from_data([["sunrise", "seaLevelSunrise"], ["sunset", "ghost"]])
    assert exc_info.value.problems == ["group 2 references unknown calculation method 'ghost'"]


def test_overlapping_groups_are_rejected():
    with pytest.raises(ConfigurationError) as exc_info:
        GroupingTable.from_data([["sunrise", "seaLevelSunrise"], ["seaLevelSunrise", "sunset"]])
    assert exc_info.value.problems == ["'seaLevelSunrise' appears in both group 1 and group 2"]


def test_repeated_token_in_group_is_rejected():
    with pytest.raises(ConfigurationError, match="more than once"):
        GroupingTable.from_data([["sunrise", "sunrise"]])


@pytest.mark.parametrize(
    ("data", "problem"),
    [
        ([[]], "group 1 is empty"),
        (["sunrise"], "group 1 must be an array of tokens"),
    ],
)
def test_malformed_group_is_rejected(data, problem):
    with pytest.raises(ConfigurationError) as exc_info:
        GroupingTable.from_data(data)
    assert exc_info.value.problems == [problem]


def test_groups_must_be_an_array():
    with pytest.raises(ConfigurationError):
        GroupingTable.from_data({"sunrise": ["seaLevelSunrise"]})


def test_asymmetric_groups_fail_relation_check():
    with pytest.raises(ConfigurationError, match="not the reverse"):
        GroupingTable([[M.SUNRISE, M.SEA_LEVEL_SUNRISE], [M.SEA_LEVEL_SUNRISE, M.SUNSET]])


def test_empty_grouping_relates_every_method_to_itself():
    table = GroupingTable.from_data([])
    assert table.groups() == ()
    assert all(table.related_to(m) == (m,) for m in M)
