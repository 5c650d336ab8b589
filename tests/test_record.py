"""Tests for Record and Page."""

import pytest

from catalog_browser.core.record import DISPLAY_FIELDS, Page, Record


class TestRecordFromDict:
    def test_full_entry(self, listing_payload):
        rec = Record.from_dict(listing_payload["data"][2])
        assert rec.id == 111628
        assert rec.title == "Nighthawks"
        assert rec.inscriptions == "Signed l.r.: Edward Hopper"
        assert rec.date_start == 1942
        assert rec.date_end == 1942

    def test_missing_fields_become_none(self):
        rec = Record.from_dict({"id": 5})
        assert rec == Record(id=5)
        assert rec.title is None
        assert rec.date_start is None

    def test_unknown_keys_ignored(self):
        rec = Record.from_dict({"id": 5, "thumbnail": {"lqip": "..."}})
        assert rec.id == 5

    def test_missing_id_raises(self):
        with pytest.raises(ValueError, match="id"):
            Record.from_dict({"title": "Untitled"})

    def test_zero_id_allowed(self):
        assert Record.from_dict({"id": 0}).id == 0

    def test_non_integer_dates_dropped(self):
        rec = Record.from_dict({"id": 1, "date_start": "c. 1900", "date_end": 1901.0})
        assert rec.date_start is None
        assert rec.date_end == 1901

    def test_boolean_date_is_not_an_int(self):
        assert Record.from_dict({"id": 1, "date_start": True}).date_start is None

    def test_to_dict_has_display_fields(self):
        row = Record(id=1, title="T").to_dict()
        assert list(row) == list(DISPLAY_FIELDS)
        assert row["title"] == "T"

    def test_frozen(self):
        rec = Record(id=1)
        with pytest.raises(AttributeError):
            rec.id = 2


class TestPage:
    def test_ids_in_order(self, page_factory):
        page = page_factory([3, 1, 2])
        assert page.ids == (3, 1, 2)
        assert len(page) == 3
        assert [r.id for r in page] == [3, 1, 2]

    @pytest.mark.parametrize(
        "total, size, expected",
        [(0, 10, 1), (10, 10, 1), (11, 10, 2), (125_000, 10, 12_500), (7, 3, 3)],
    )
    def test_page_count(self, total, size, expected):
        assert Page((), total, 0, size).page_count == expected

    def test_first_row(self, page_two):
        assert page_two.first_row == 10

    def test_empty(self):
        page = Page.empty(25)
        assert len(page) == 0
        assert page.page_size == 25
        assert page.total_count == 0

    def test_to_frame(self, page_factory):
        page = page_factory([7, 8])
        frame = page.to_frame()
        assert list(frame.index) == [7, 8]
        assert list(frame.columns) == list(DISPLAY_FIELDS)
        assert frame.loc[7, "title"] == "Artwork 7"

    def test_to_frame_keeps_none_dates(self):
        page = Page((Record(id=1, date_start=1900), Record(id=2)), 2)
        frame = page.to_frame()
        assert frame.loc[1, "date_start"] == 1900
        assert frame.loc[2, "date_start"] is None

    def test_to_frame_empty(self):
        frame = Page.empty().to_frame()
        assert frame.empty
        assert list(frame.columns) == list(DISPLAY_FIELDS)
