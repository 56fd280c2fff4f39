"""Property-based tests for query string construction."""

from __future__ import annotations

import string
from urllib.parse import parse_qsl, urlsplit

from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from justcms.urls import build_url

PROPERTY_SETTINGS = settings(
    max_examples=200,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)

_KEY = st.text(alphabet=string.ascii_letters + string.digits + "._-", min_size=1, max_size=20)
_VALUE = st.one_of(
    st.none(),
    st.integers(min_value=-1000, max_value=100_000),
    st.text(min_size=1, max_size=30),
)
_QUERY = st.dictionaries(_KEY, _VALUE, max_size=8)


@PROPERTY_SETTINGS
@given(query=_QUERY)
def test_round_trip_recovers_defined_pairs(query: dict[str, object]) -> None:
    url = build_url("https://api.justcms.co/public", "proj", "pages", query)
    parsed = urlsplit(url)

    expected = {key: str(value) for key, value in query.items() if value is not None}
    assert dict(parse_qsl(parsed.query, keep_blank_values=True)) == expected
    assert parsed.path == "/public/proj/pages"


@PROPERTY_SETTINGS
@given(query=_QUERY)
def test_question_mark_only_with_defined_values(query: dict[str, object]) -> None:
    url = build_url("https://api.justcms.co/public", "proj", "", query)
    has_defined = any(value is not None for value in query.values())
    assert ("?" in url) == has_defined
