"""Tests for logging configuration."""

from src.config.logging import add_subject_prefix


class TestSubjectPrefix:
    """Tests for the hotel/tour prefix processor."""

    def test_prefix_added_when_hotel_bound(self):
        """Test the event is prefixed with the hotel name."""
        event = add_subject_prefix(None, "warning", {"event": "No transfer price", "hotel": "Grand"})

        assert event["event"] == "[Grand] No transfer price"

    def test_prefix_added_when_tour_bound(self):
        """Test tour events are prefixed with the tour name."""
        event = add_subject_prefix(
            None, "error", {"event": "Failed to price tour", "tour": "Balloon"}
        )

        assert event["event"] == "[Balloon] Failed to price tour"

    def test_hotel_wins_over_tour(self):
        """Test only one prefix is added when both subjects are bound."""
        event = add_subject_prefix(
            None, "info", {"event": "Priced", "hotel": "Grand", "tour": "Cruise"}
        )

        assert event["event"] == "[Grand] Priced"

    def test_event_untouched_without_subject(self):
        """Test events without a hotel or tour are left as they are."""
        event = add_subject_prefix(None, "info", {"event": "Calculated quotation", "hotel": None})

        assert event["event"] == "Calculated quotation"
