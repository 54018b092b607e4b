"""Tests for catalog indexing and draft quotation."""

import pytest

from src.exceptions import CatalogRecordError
from src.models.catalog.hotel import FlatPerPersonTransport, IndexedTransport, SingleTierTransport
from src.models.draft.booking import BookingDraft
from src.services import CatalogIndex, QuotationService, parse_hotel, parse_tour


class TestCatalogIndex:
    """Tests for building the catalog from raw records."""

    def test_invalid_records_are_skipped(self, catalog_data):
        """Test broken hotel and tour records are skipped, valid ones indexed."""
        catalog = CatalogIndex.from_dict(catalog_data)

        assert set(catalog.hotels) == {
            "h-grand-bosphorus",
            "h-uzungol-lake",
            "h-old-town-inn",
        }
        assert set(catalog.tours) == {"t-bosphorus-cruise", "t-princes-islands", "t-balloon"}
        assert {entry["id"] for entry in catalog.skipped} == {"h-broken", "t-broken"}

    def test_each_transportation_shape_is_detected(self, catalog_data):
        """Test the three fixture hotels carry the three transportation shapes."""
        catalog = CatalogIndex.from_dict(catalog_data)

        assert isinstance(catalog.hotel("h-grand-bosphorus").transport, IndexedTransport)
        assert isinstance(catalog.hotel("h-uzungol-lake").transport, SingleTierTransport)
        assert isinstance(catalog.hotel("h-old-town-inn").transport, FlatPerPersonTransport)

    def test_records_without_id_are_skipped(self):
        """Test records that cannot be referenced are skipped."""
        catalog = CatalogIndex(hotels=[{"name": "Anonymous"}], tours=[])

        assert catalog.hotels == {}
        assert len(catalog.skipped) == 1

    def test_parse_errors_raise_catalog_record_error(self):
        """Test single-record parsing raises a package error."""
        with pytest.raises(CatalogRecordError):
            parse_hotel({"_id": "h", "roomTypes": "nope"})
        with pytest.raises(CatalogRecordError):
            parse_tour({"_id": "t", "tourType": "Private"})


class TestQuotationService:
    """Tests for quoting booking drafts end to end."""

    def test_multi_hotel_quote(self, catalog_data, multi_hotel_draft):
        """Test the two-hotel draft with children, transfers and tours."""
        service = QuotationService(CatalogIndex.from_dict(catalog_data))

        breakdown = service.quote(BookingDraft(**multi_hotel_draft))

        istanbul, trabzon = breakdown.hotels
        # 2 May nights at 100 + 40 (child 6-12), 1 June night at 150 + 60
        assert istanbul.room_cost == 490
        assert istanbul.breakfast_cost == 30
        assert istanbul.transport_cost == 55
        assert istanbul.subtotal == 575
        assert [(s.month, s.night_count) for s in istanbul.segments] == [(5, 2), (6, 1)]
        assert istanbul.transport.airport == "SAW"

        assert trabzon.room_cost == 330
        assert trabzon.breakfast_cost == 0
        assert trabzon.transport.farewell_cost == 120
        assert trabzon.subtotal == 450

        # Cruise 30 x 3, VIP 200, balloon 150 x 3 + 75; unknown tour skipped
        assert [line.cost for line in breakdown.tour_lines] == [90, 200, 525]
        assert breakdown.tours == 815
        assert breakdown.transportation == 175
        assert breakdown.total == 1840
        assert breakdown.manual_price == 1900
        assert breakdown.manual_price_difference == 60

    def test_children_switch_off_ignores_children(self, catalog_data, multi_hotel_draft):
        """Test children counts are ignored when the children switch is off."""
        multi_hotel_draft["includeChildren"] = False
        service = QuotationService(CatalogIndex.from_dict(catalog_data))

        breakdown = service.quote(BookingDraft(**multi_hotel_draft))

        assert breakdown.hotels[0].room_cost == 2 * 100 + 150
        assert [line.cost for line in breakdown.tour_lines] == [60, 200, 300]

    def test_legacy_hotel_estimate(self, catalog_data):
        """Test a legacy per-person hotel with flat transfers and no allocations."""
        draft = BookingDraft(
            hotelEntries=[
                {
                    "hotelId": "h-old-town-inn",
                    "checkIn": "2024-09-01",
                    "checkOut": "2024-09-05",
                    "includeBreakfast": True,
                    "includeReception": True,
                    "includeFarewell": True,
                }
            ],
            numGuests=2,
            includeChildren=True,
            children6to12=1,
        )
        service = QuotationService(CatalogIndex.from_dict(catalog_data))

        breakdown = service.quote(draft)

        leg = breakdown.hotels[0]
        assert leg.room_cost == 50 * 4 * 2 + 25 * 4
        assert leg.breakfast_cost == 8 * 1 * 4
        assert leg.transport_cost == 20 * 3
        assert breakdown.total == 592

    def test_unknown_hotel_leg_is_skipped(self, catalog_data):
        """Test a leg referencing a deleted hotel is left out of the quote."""
        draft = BookingDraft(
            hotelEntries=[{"hotelId": "h-deleted", "checkIn": "2024-09-01", "checkOut": "2024-09-03"}],
            numGuests=2,
        )
        service = QuotationService(CatalogIndex.from_dict(catalog_data))

        breakdown = service.quote(draft)

        assert breakdown.hotels == []
        assert breakdown.total == 0

    def test_quote_recomputes_every_time(self, catalog_data, multi_hotel_draft):
        """Test editing the draft changes the next quote."""
        service = QuotationService(CatalogIndex.from_dict(catalog_data))
        draft = BookingDraft(**multi_hotel_draft)
        first = service.quote(draft)

        draft.selected_tours = []
        second = service.quote(draft)

        assert first.total - second.total == 815

    def test_breakdown_serializes_to_camel_case(self, catalog_data, multi_hotel_draft):
        """Test the stored breakdown shape uses camelCase keys."""
        service = QuotationService(CatalogIndex.from_dict(catalog_data))

        data = service.quote(BookingDraft(**multi_hotel_draft)).to_dict()

        assert data["total"] == 1840
        assert data["manualPrice"] == 1900
        assert data["hotels"][0]["roomCost"] == 490
        assert data["hotels"][0]["checkIn"] == "2024-05-30"
        assert data["hotels"][0]["segments"][0] == {"year": 2024, "month": 5, "nightCount": 2}
        assert data["tourLines"][1]["tourType"] == "VIP"


class TestBookingDraft:
    """Tests for lenient parsing of form state."""

    def test_blank_manual_price_is_absent(self):
        """Test an empty or zero manual price means none was typed."""
        assert BookingDraft(tripPrice="").manual_price is None
        assert BookingDraft(tripPrice="0").manual_price is None
        assert BookingDraft(tripPrice="1250.5").manual_price == 1250.5

    def test_counts_are_clamped(self):
        """Test blank and negative guest counts become 0."""
        draft = BookingDraft(numGuests="", includeChildren=True, children6to12=-2)

        composition = draft.guest_composition()

        assert composition.adults == 0
        assert composition.children_6_to_12 == 0
