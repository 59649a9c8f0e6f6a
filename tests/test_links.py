"""Tests for Link header parsing and cursor extraction."""

import httpx
import pytest

from forge_client.links import Cursors, LinkValue, get_cursors, parse_link_header

A = "https://api.github.com/repositories/1/releases?page=2"
B = "https://api.github.com/repositories/1/releases?page=9"


def test_next_and_last() -> None:
    cursors = get_cursors({"Link": f'<{A}>; rel="next", <{B}>; rel="last"'})
    assert cursors == Cursors(first=None, next=A, last=B)


def test_full_github_header() -> None:
    header = (
        '<https://api.github.com/repositories/1/releases?page=1>; rel="prev", '
        f'<{A}>; rel="next", '
        f'<{B}>; rel="last", '
        '<https://api.github.com/repositories/1/releases?page=1>; rel="first"'
    )
    cursors = get_cursors(httpx.Headers({"link": header}))
    assert cursors.first == "https://api.github.com/repositories/1/releases?page=1"
    assert cursors.next == A
    assert cursors.last == B


def test_duplicate_relation_last_wins() -> None:
    cursors = get_cursors({"Link": f'<{A}>; rel="next", <{B}>; rel="next"'})
    assert cursors.next == B


def test_duplicate_relation_across_header_lines() -> None:
    headers = httpx.Headers([("Link", f'<{A}>; rel="next"'), ("Link", f'<{B}>; rel="next"')])
    assert get_cursors(headers).next == B


def test_extraction_is_idempotent() -> None:
    headers = httpx.Headers({"Link": f'<{A}>; rel="next", <{B}>; rel="last first"'})
    assert get_cursors(headers) == get_cursors(headers)


def test_entry_with_several_relations() -> None:
    cursors = get_cursors({"Link": f'<{B}>; rel="last first"'})
    assert cursors == Cursors(first=B, next=None, last=B)


def test_missing_header() -> None:
    assert get_cursors({}) == Cursors()
    assert get_cursors({"Content-Type": "application/json"}) == Cursors()


def test_unrelated_relations_only() -> None:
    assert get_cursors({"Link": f'<{A}>; rel="prev"'}) == Cursors()


@pytest.mark.parametrize(
    "header",
    [
        f'{A}; rel="next"',
        f'<{A}; rel="next"',
        f'<{A}>; rel="next',
        f"<{A}> rel=next",
    ],
)
def test_malformed_header_means_no_links(header: str) -> None:
    assert parse_link_header(header) == []
    assert get_cursors({"Link": header}) == Cursors()


def test_commas_inside_targets_and_quotes() -> None:
    header = '<https://x.example/a?q=1,2>; rel="next"; title="a, b", <https://x.example/z>; rel=last'
    assert parse_link_header(header) == [
        LinkValue(target="https://x.example/a?q=1,2", rels=("next",)),
        LinkValue(target="https://x.example/z", rels=("last",)),
    ]


def test_relations_are_case_insensitive() -> None:
    assert get_cursors({"Link": f"<{A}>; REL=Next"}).next == A


def test_only_first_rel_parameter_counts() -> None:
    assert parse_link_header(f'<{A}>; rel="next"; rel="last"') == [LinkValue(target=A, rels=("next",))]


def test_target_is_not_modified() -> None:
    target = "https://api.github.com/search?q=a%20b&page=2&per_page=10"
    assert get_cursors({"Link": f'<{target}>; rel="next"'}).next == target
