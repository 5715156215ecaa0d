"""Unit tests for business type to vertical id resolution."""

import pytest
from prometheus_client import REGISTRY

from switchboard.verticals import (
    DEFAULT_VERTICAL_ID,
    VERTICAL_KEYWORDS,
    normalize_business_type,
    resolve_vertical_id,
)


class TestNormalizeBusinessType:
    """Tests for normalize_business_type."""

    def test_lowercases(self) -> None:
        """Input is lowercased."""
        assert normalize_business_type("HVAC") == "hvac"

    def test_collapses_whitespace_and_hyphens(self) -> None:
        """Runs of spaces and hyphens become a single underscore."""
        assert normalize_business_type("Tree -  Service") == "tree_service"
        assert normalize_business_type("auto-repair") == "auto_repair"


class TestResolveVerticalId:
    """Tests for resolve_vertical_id."""

    @pytest.mark.parametrize(
        ("business_type", "expected"),
        [
            ("plumbing", 1),
            ("HVAC", 2),
            ("Air Conditioning", 2),
            ("electrician", 3),
            ("Tree-Service", 9),
            ("bail bonds", 14),
            ("PI Attorney", 16),
            ("dental", 17),
            ("Masonry", 20),
        ],
    )
    def test_exact_keyword_match(self, business_type: str, expected: int) -> None:
        """Normalized keywords resolve to their vertical."""
        assert resolve_vertical_id(business_type) == expected

    def test_keyword_contained_in_input(self) -> None:
        """A keyword inside a longer description matches."""
        assert resolve_vertical_id("Plumbing Company") == 1
        assert resolve_vertical_id("Joe's Locksmith Services") == 6

    def test_input_contained_in_keyword(self) -> None:
        """A fragment of a keyword matches too."""
        assert resolve_vertical_id("exterminat") == 12

    def test_first_declared_keyword_wins(self) -> None:
        """When several keywords match, declaration order decides."""
        assert resolve_vertical_id("heating and plumbing") == 1
        assert resolve_vertical_id("plumbing and heating") == 1

    def test_order_dependence_on_fragments(self) -> None:
        """A short fragment resolves to the first keyword that contains it.

        "mov" is contained in "tree_removal" before "moving" is reached.
        """
        assert resolve_vertical_id("mov") == 9

    @pytest.mark.parametrize("business_type", [None, ""])
    def test_missing_business_type_falls_back(self, business_type: str | None) -> None:
        """Missing input resolves to the generic vertical."""
        assert resolve_vertical_id(business_type) == DEFAULT_VERTICAL_ID

    def test_unknown_business_type_falls_back(self) -> None:
        """Unmatched input resolves to the generic vertical."""
        assert resolve_vertical_id("bakery") == DEFAULT_VERTICAL_ID

    def test_unknown_business_type_counts_fallback(self) -> None:
        """Unresolved types are counted."""
        labels = {"reason": "business_type_unresolved"}
        before = REGISTRY.get_sample_value("switchboard_vertical_fallback_total", labels) or 0.0
        resolve_vertical_id("florist")
        after = REGISTRY.get_sample_value("switchboard_vertical_fallback_total", labels)
        assert after == before + 1


class TestKeywordTable:
    """Tests for the keyword table itself."""

    def test_is_ordered_pairs(self) -> None:
        """The table is an ordered tuple of (keyword, id) pairs."""
        assert isinstance(VERTICAL_KEYWORDS, tuple)
        assert VERTICAL_KEYWORDS[0] == ("plumbing", 1)

    def test_every_core_vertical_reachable(self) -> None:
        """Each of the twenty industry verticals has at least one keyword."""
        assert {vertical_id for _, vertical_id in VERTICAL_KEYWORDS} == set(range(1, 21))

    def test_keywords_are_normalized(self) -> None:
        """Keywords are already in normalized form."""
        for keyword, _ in VERTICAL_KEYWORDS:
            assert normalize_business_type(keyword) == keyword
