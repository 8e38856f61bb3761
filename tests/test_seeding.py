"""Tests for street_resolver.seeding module."""
import pytest

from street_resolver.matchers.similarity import score_match
from street_resolver.metaphone import encode
from street_resolver.seeding import (
    build_records,
    build_street_record,
    load_street_rows,
    partition_key,
    records_to_frame,
    street_sort_key,
    write_records,
)


class TestBuildStreetRecord:
    def test_codes_come_from_core_name(self):
        record = build_street_record("rest-001", "60008", "North Grouse Lane", created_at="2024-01-01T00:00:00+00:00")
        assert record.core_name == "GROUSE"
        assert (record.phonetic_primary, record.phonetic_alternate) == encode("GROUSE")
        assert record.created_at == "2024-01-01T00:00:00+00:00"

    @pytest.mark.parametrize("name", ["Golf Road", "Thompson Ave", "S Washington St", "Maplewood Drive"])
    def test_stored_codes_score_like_live_encoding(self, name):
        record = build_street_record("rest-001", "60008", name)
        stored = (record.phonetic_primary, record.phonetic_alternate)
        for heard in ("Gulf Rd", "Tomson", "Washington", "Maple Wood"):
            assert score_match(heard, name, stored) == score_match(heard, name)

    def test_created_at_defaults_to_now(self):
        assert build_street_record("rest-001", "60008", "Golf Road").created_at


class TestKeys:
    def test_partition_key(self):
        assert partition_key("rest-001", "60008") == "RESTAURANT#rest-001#ZIP#60008"

    @pytest.mark.parametrize(
        ("name", "slug"),
        [("Grouse Lane", "grouse-lane"), ("St. Mary's Court", "st-marys-court"), ("  Main   St ", "main-st")],
    )
    def test_street_sort_key(self, name, slug):
        assert street_sort_key(name) == slug


class TestLoadStreetRows:
    def test_mixed_formats(self, tmp_path):
        path = tmp_path / "streets.csv"
        path.write_text(
            "rest-001,60008,Grouse Lane\n"
            "60010,Golf Road\n"
            "rest-002,60008,\"St. Mary's Court\"\n"
            "\n"
            "garbage\n"
        )
        rows = load_street_rows(str(path), default_restaurant_id="rest-default")
        assert rows == [
            ("rest-001", "60008", "Grouse Lane"),
            ("rest-default", "60010", "Golf Road"),
            ("rest-002", "60008", "St. Mary's Court"),
        ]

    def test_old_format_needs_default(self, tmp_path):
        path = tmp_path / "streets.csv"
        path.write_text("rest-001,60008,Grouse Lane\n60010,Golf Road\n")
        assert load_street_rows(str(path)) == [("rest-001", "60008", "Grouse Lane")]

    def test_zip_codes_stay_strings(self, tmp_path):
        path = tmp_path / "streets.csv"
        path.write_text("rest-001,02134,Harvard Ave\n")
        assert load_street_rows(str(path)) == [("rest-001", "02134", "Harvard Ave")]


class TestRecordsFrame:
    def test_frame_columns(self):
        records = build_records([("rest-001", "60008", "Grouse Lane"), ("rest-001", "60008", "Golf Road")])
        frame = records_to_frame(records)
        assert list(frame["PK"]) == ["RESTAURANT#rest-001#ZIP#60008"] * 2
        assert list(frame["SK"]) == ["STREET#grouse-lane", "STREET#golf-road"]
        assert list(frame["core"]) == ["GROUSE", "GOLF"]
        assert frame["createdAt"].nunique() == 1

    def test_write_records(self, tmp_path):
        path = tmp_path / "records.csv"
        write_records(build_records([("rest-001", "60008", "Grouse Lane")]), str(path))
        header = path.read_text().splitlines()[0]
        assert header == "PK,SK,restaurantId,zipCode,streetName,metaphonePrimary,metaphoneAlt,core,createdAt"
