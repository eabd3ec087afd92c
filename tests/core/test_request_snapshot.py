"""Tests for request snapshot helpers: flattening and header canonicalisation."""

from httpbin_app.core.request_snapshot import (
    canonical_header_name, first_header_values, flatten_values, parse_form,
)


def test_single_key_stays_scalar():
    assert flatten_values([("j", "w")]) == {"j": "w"}


def test_repeated_key_becomes_ordered_list():
    pairs = [("k", "v1"), ("j", "w"), ("k", "v2")]
    assert flatten_values(pairs) == {"k": ["v1", "v2"], "j": "w"}


def test_blank_values_are_kept():
    assert flatten_values([("k1", ""), ("k2", "")]) == {"k1": "", "k2": ""}


def test_empty_query_flattens_to_empty_dict():
    assert flatten_values([]) == {}


def test_canonical_header_name_title_cases_each_segment():
    assert canonical_header_name("user-agent") == "User-Agent"
    assert canonical_header_name("X-FORWARDED-FOR") == "X-Forwarded-For"
    assert canonical_header_name("host") == "Host"


def test_first_header_value_wins():
    raw = [(b"x-test", b"one"), (b"accept", b"*/*"), (b"x-test", b"two")]
    assert first_header_values(raw) == {"X-Test": "one", "Accept": "*/*"}


def test_parse_form_flattens_urlencoded_body():
    form = parse_form("application/x-www-form-urlencoded", b"a=1&b=2&a=3")
    assert form == {"a": ["1", "3"], "b": "2"}


def test_parse_form_ignores_other_content_types():
    assert parse_form("application/json", b'{"a": 1}') == {}
    assert parse_form("", b"a=1") == {}
