"""Query Pipeline tests — filter modes, search, pagination envelope.

Tests cover:
    - EXACT compares the string form ("1" matches 1, missing field never matches)
    - CASE_INSENSITIVE, CONTAINS (list membership) and BOOLEAN modes
    - Multiple filters combine with AND; empty values are ignored
    - Search is a case-insensitive substring match, OR across fields
    - total counts the filtered set before slicing
    - Negative limit/offset clamp to 0; offset past the end yields []
    - Scope restricts records before filters run (typed: True is not 1)
    - Input records are not mutated
"""

import copy

from app.core.domain_types import FilterMode
from app.core.query_pipeline import (
    FilterField, ListQuery, apply_filters, apply_search, paginate, run_list_query,
)

RECORDS = [
    {"id": 1, "userId": 1, "title": "Getting Started with FastAPI",
     "tags": ["api", "beginners"], "category": "Technology", "completed": True},
    {"id": 2, "userId": 1, "title": "Weekend Hiking",
     "tags": ["travel"], "category": "Lifestyle", "completed": False},
    {"id": 3, "userId": 2, "title": "Designing REST APIs",
     "tags": ["api"], "category": "technology", "completed": True},
    {"id": 4, "userId": 12, "title": "Untitled", "completed": False},
]

FILTERS = (
    FilterField("userId", "userId"),
    FilterField("tag", "tags", FilterMode.CONTAINS),
    FilterField("category", "category", FilterMode.CASE_INSENSITIVE),
    FilterField("completed", "completed", FilterMode.BOOLEAN),
)


def _ids(records):
    return [r["id"] for r in records]


def test_exact_filter_matches_string_form():
    assert _ids(apply_filters(RECORDS, FILTERS, {"userId": "1"})) == [1, 2]


def test_exact_filter_does_not_match_prefix():
    assert _ids(apply_filters(RECORDS, FILTERS, {"userId": "12"})) == [4]


def test_case_insensitive_filter():
    assert _ids(apply_filters(RECORDS, FILTERS, {"category": "TECHNOLOGY"})) == [1, 3]


def test_case_insensitive_filter_skips_missing_field():
    assert apply_filters(RECORDS, FILTERS, {"category": "none"}) == []


def test_contains_filter_checks_list_membership():
    assert _ids(apply_filters(RECORDS, FILTERS, {"tag": "api"})) == [1, 3]
    assert apply_filters(RECORDS, FILTERS, {"tag": "ap"}) == []


def test_boolean_filter():
    assert _ids(apply_filters(RECORDS, FILTERS, {"completed": "true"})) == [1, 3]
    assert _ids(apply_filters(RECORDS, FILTERS, {"completed": "false"})) == [2, 4]
    assert _ids(apply_filters(RECORDS, FILTERS, {"completed": "TRUE"})) == [1, 3]


def test_filters_combine_with_and():
    result = apply_filters(RECORDS, FILTERS, {"userId": "1", "completed": "true"})
    assert _ids(result) == [1]


def test_empty_filter_value_is_ignored():
    assert len(apply_filters(RECORDS, FILTERS, {"userId": ""})) == len(RECORDS)


def test_unknown_params_are_ignored():
    assert len(apply_filters(RECORDS, FILTERS, {"color": "red"})) == len(RECORDS)


def test_search_is_case_insensitive_substring():
    assert _ids(apply_search(RECORDS, "API", ("title",))) == [1, 3]


def test_search_ors_across_fields_and_stringifies():
    assert _ids(apply_search(RECORDS, "2", ("id", "title"))) == [2]


def test_empty_search_returns_everything():
    assert len(apply_search(RECORDS, "", ("title",))) == len(RECORDS)
    assert len(apply_search(RECORDS, None, ("title",))) == len(RECORDS)


def test_paginate_envelope():
    page = paginate(RECORDS, limit=2, offset=1)
    assert page["total"] == 4
    assert page["limit"] == 2
    assert page["offset"] == 1
    assert _ids(page["results"]) == [2, 3]


def test_paginate_clamps_negative_values():
    page = paginate(RECORDS, limit=-5, offset=-3)
    assert page["limit"] == 0
    assert page["offset"] == 0
    assert page["results"] == []
    assert page["total"] == 4


def test_offset_past_end_is_empty_page():
    page = paginate(RECORDS, limit=10, offset=50)
    assert page["results"] == []
    assert page["total"] == 4


def test_total_counts_filtered_set_before_slicing():
    query = ListQuery(limit=1, filters={"tag": "api"})
    page = run_list_query(RECORDS, query, FILTERS, ("title",))
    assert page["total"] == 2
    assert _ids(page["results"]) == [1]


def test_scope_applies_before_filters():
    query = ListQuery(limit=10, scope={"userId": 1}, filters={"completed": "false"})
    page = run_list_query(RECORDS, query, FILTERS)
    assert _ids(page["results"]) == [2]


def test_filters_then_search():
    query = ListQuery(limit=10, q="rest", filters={"category": "technology"})
    page = run_list_query(RECORDS, query, FILTERS, ("title",))
    assert _ids(page["results"]) == [3]


def test_pipeline_does_not_mutate_input():
    snapshot = copy.deepcopy(RECORDS)
    run_list_query(RECORDS, ListQuery(limit=1, q="a"), FILTERS, ("title",))
    assert RECORDS == snapshot


def test_scope_does_not_match_boolean_against_id():
    records = [{"id": 1, "userId": True}, {"id": 2, "userId": 1}]
    page = run_list_query(records, ListQuery(limit=10, scope={"userId": 1}))
    assert _ids(page["results"]) == [2]
