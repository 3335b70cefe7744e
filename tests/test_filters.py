"""
Filter engine tests.

Covers every predicate of the candidate filter, their AND combination, and
the structural properties (order-preserving subset, idempotence).
"""

from __future__ import annotations

import pytest

from partnerlink.ranking import (
    ALL_AREAS,
    BlacklistView,
    Criteria,
    EntityType,
    Region,
    SpecialFilter,
    VendorRecord,
    filter_records,
    matches,
)


def vendor(vendor_id: str, **fields) -> VendorRecord:
    fields.setdefault("name", f"Shop {vendor_id}")
    return VendorRecord(id=vendor_id, **fields)


def ids(records) -> list[str]:
    return [record.id for record in records]


class TestScenarios:
    def test_non_blacklisted_view_drops_blacklisted_vendor(self):
        """Scenario A: only the non-blacklisted vendor survives."""
        master = [
            vendor("P1", rating=5, is_blacklisted=False),
            vendor("P2", rating=2, is_blacklisted=True),
        ]
        criteria = Criteria(blacklist_view=BlacklistView.NON_BLACKLISTED)

        assert ids(filter_records(master, criteria)) == ["P1"]

    def test_empty_master_set(self):
        assert filter_records([], Criteria()) == []


class TestTextMatch:
    @pytest.fixture()
    def record(self) -> VendorRecord:
        return vendor(
            "V-0042",
            name="Dafa Plumbing Works",
            tax_id="12345678",
            categories=("Plumbing", "HVAC"),
            tags=("Fast Response", "Fair Price"),
        )

    @pytest.mark.parametrize(
        "query",
        ["dafa", "PLUMBING WORKS", "hvac", "v-0042", "345", "fast resp", "FAIR"],
    )
    def test_matches_any_field_case_insensitively(self, record, query):
        assert matches(record, Criteria(query=query))

    def test_empty_query_matches_everything(self, record):
        assert matches(record, Criteria(query=""))

    def test_no_field_matches(self, record):
        assert not matches(record, Criteria(query="glass"))

    def test_missing_tax_id_is_a_non_match_not_an_error(self):
        record = vendor("A", name="Glassworks", tax_id=None)
        assert not matches(record, Criteria(query="9999"))


class TestFieldFilters:
    def test_category_membership(self):
        record = vendor("A", categories=("Plumbing", "Glass"))
        assert matches(record, Criteria(category="Glass"))
        assert not matches(record, Criteria(category="HVAC"))

    def test_region_and_entity_type_equality(self):
        record = vendor("A", region=Region.CHINA, entity_type=EntityType.INDIVIDUAL)
        assert matches(record, Criteria(region=Region.CHINA))
        assert not matches(record, Criteria(region=Region.TAIWAN))
        assert matches(record, Criteria(entity_type=EntityType.INDIVIDUAL))
        assert not matches(record, Criteria(entity_type=EntityType.COMPANY))

    def test_min_rating_is_inclusive(self):
        record = vendor("A", rating=3.5)
        assert matches(record, Criteria(min_rating=3.5))
        assert not matches(record, Criteria(min_rating=4))

    def test_favorites_only(self):
        assert matches(vendor("A", is_favorite=True), Criteria(favorites_only=True))
        assert not matches(vendor("B", is_favorite=False), Criteria(favorites_only=True))
        assert matches(vendor("C", is_favorite=False), Criteria(favorites_only=False))

    def test_blacklisted_view_shows_only_blacklisted(self):
        criteria = Criteria(blacklist_view=BlacklistView.BLACKLISTED)
        assert matches(vendor("A", is_blacklisted=True), criteria)
        assert not matches(vendor("B", is_blacklisted=False), criteria)


class TestServiceArea:
    def test_unset_filter_accepts_all(self):
        assert matches(vendor("A", service_area=()), Criteria())

    def test_wildcard_filter_accepts_all(self):
        assert matches(vendor("A", service_area=("Taipei",)), Criteria(service_area=ALL_AREAS))

    def test_listed_area(self):
        record = vendor("A", service_area=("Taipei", "Taoyuan"))
        assert matches(record, Criteria(service_area="Taoyuan"))
        assert not matches(record, Criteria(service_area="Tainan"))

    def test_vendor_serving_all_areas(self):
        assert matches(vendor("A", service_area=(ALL_AREAS,)), Criteria(service_area="Tainan"))


class TestSpecialFilter:
    def test_missed_contact(self):
        criteria = Criteria(special_filter=SpecialFilter.MISSED_CONTACT)
        assert matches(vendor("A", missed_contact_log_count=2), criteria)
        assert not matches(vendor("B", missed_contact_log_count=0), criteria)

    def test_actively_contacting(self):
        criteria = Criteria(special_filter=SpecialFilter.ACTIVELY_CONTACTING)
        contacted = vendor(
            "A", contact_logs=[{"id": "c1", "date": "2024-03-01", "status": "busy"}]
        )
        assert matches(contacted, criteria)
        assert not matches(vendor("B"), criteria)


class TestProperties:
    @pytest.fixture()
    def master(self) -> list[VendorRecord]:
        return [
            vendor("A", rating=4.5, categories=("Glass",), is_favorite=True),
            vendor("B", rating=1.0, categories=("Glass",)),
            vendor("C", rating=4.8, categories=("HVAC",), is_blacklisted=True),
            vendor("D", rating=4.9, categories=("Glass",), missed_contact_log_count=1),
            vendor("E", rating=3.0, categories=("Glass",)),
        ]

    def test_result_is_an_order_preserving_subsequence(self, master):
        result = filter_records(master, Criteria(category="Glass", min_rating=3))
        assert ids(result) == ["A", "D", "E"]
        positions = [master.index(record) for record in result]
        assert positions == sorted(positions)

    def test_idempotent(self, master):
        criteria = Criteria(category="Glass", min_rating=3)
        once = filter_records(master, criteria)
        assert filter_records(once, criteria) == once

    def test_all_predicates_are_combined(self, master):
        criteria = Criteria(
            category="Glass",
            min_rating=4,
            special_filter=SpecialFilter.MISSED_CONTACT,
        )
        assert ids(filter_records(master, criteria)) == ["D"]
