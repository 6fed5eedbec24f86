from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

from resource_api_client.resources.options import UNSET
from resource_api_client.resources.params import (
    build_query_params,
    format_instant,
    serialize_query_value,
)


def test_serialize_null_is_literal_null():
    assert serialize_query_value(None) == "null"


def test_serialize_aware_datetime_is_converted_to_utc():
    value = datetime(2024, 1, 2, 5, 4, 5, 123456, tzinfo=timezone(timedelta(hours=2)))
    assert serialize_query_value(value) == "2024-01-02T03:04:05.123Z"


def test_serialize_naive_datetime_is_taken_as_utc():
    assert serialize_query_value(datetime(2024, 1, 2, 3, 4, 5)) == "2024-01-02T03:04:05.000Z"


def test_serialize_date_is_midnight_utc():
    assert format_instant(date(2024, 3, 1)) == "2024-03-01T00:00:00.000Z"


def test_serialize_mapping_is_compact_json():
    value = {"age": {">": 21}, "name": "zoë", "seen": datetime(2024, 1, 1, tzinfo=timezone.utc)}
    assert (
        serialize_query_value(value)
        == '{"age":{">":21},"name":"zoë","seen":"2024-01-01T00:00:00.000Z"}'
    )


def test_serialize_scalars_use_natural_text():
    assert serialize_query_value("abc") == "abc"
    assert serialize_query_value(42) == "42"
    assert serialize_query_value(1.5) == "1.5"
    assert serialize_query_value(True) == "true"
    assert serialize_query_value(False) == "false"


def test_serialize_is_total_for_arbitrary_objects():
    class Opaque:
        def __str__(self) -> str:
            return "opaque"

    assert serialize_query_value(Opaque()) == "opaque"
    assert serialize_query_value({"obj": Opaque()}) == '{"obj":"opaque"}'


def test_build_query_params_expands_sequences_and_skips_unset():
    params = build_query_params(
        {
            "tags": ["a", "b", UNSET],
            "skipped": UNSET,
            "deleted": None,
            "limit": 10,
        }
    )
    assert params == [
        ("tags", "a"),
        ("tags", "b"),
        ("deleted", "null"),
        ("limit", "10"),
    ]


def test_build_query_params_serializes_each_sequence_element():
    when = datetime(2024, 1, 1, tzinfo=timezone.utc)
    params = build_query_params({"pk": ("1", 2), "after": [when]})
    assert params == [("pk", "1"), ("pk", "2"), ("after", "2024-01-01T00:00:00.000Z")]


def test_serialize_mapping_omits_unset_members_and_nulls_unset_items():
    value = {"a": 1, "b": UNSET, "nested": {"c": UNSET, "d": [1, UNSET]}}
    assert serialize_query_value(value) == '{"a":1,"nested":{"d":[1,null]}}'


def test_serialize_floats_use_json_number_text():
    assert serialize_query_value(1.0) == "1"
    assert serialize_query_value(-2.0) == "-2"
    assert serialize_query_value(0.25) == "0.25"
    assert serialize_query_value(float("inf")) == "Infinity"
    assert serialize_query_value(float("-inf")) == "-Infinity"
    assert serialize_query_value(float("nan")) == "NaN"
