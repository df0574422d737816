"""
Tests for structured logging helpers
"""

from library_catalog.logging import (
    RequestContextFilter,
    clear_request_context,
    generate_request_id,
    get_request_id,
    set_request_context,
)


def test_request_ids_are_compact_and_unique():
    ids = {generate_request_id() for _ in range(50)}

    assert len(ids) == 50
    assert all(len(request_id) == 14 for request_id in ids)


def test_set_and_clear_request_context():
    request_id = set_request_context()
    assert get_request_id() == request_id

    assert set_request_context("fixed-id") == "fixed-id"
    assert get_request_id() == "fixed-id"

    clear_request_context()
    assert get_request_id() is None


def test_filter_adds_request_id_when_set():
    add_context = RequestContextFilter()

    set_request_context("abc")
    try:
        assert add_context(None, "info", {"event": "x"}) == {"event": "x", "request_id": "abc"}
    finally:
        clear_request_context()

    assert add_context(None, "info", {"event": "x"}) == {"event": "x"}


def test_filter_adds_graphql_operation():
    add_context = RequestContextFilter()

    set_request_context("abc", "mutation:AddBook")
    try:
        event = add_context(None, "info", {"event": "x"})
    finally:
        clear_request_context()

    assert event == {"event": "x", "request_id": "abc", "graphql_operation": "mutation:AddBook"}
