"""Pagination cursors from RFC 8288 `Link` headers."""

import re
from collections.abc import Mapping
from typing import NamedTuple

import httpx

_PARAM_RE = re.compile(r';\s*([^\s=;]+)\s*(?:=\s*("(?:[^"\\]|\\.)*"|[^;]*))?')
_UNESCAPE_RE = re.compile(r"\\(.)")


class LinkValue(NamedTuple):
    """One entry of a `Link` header."""

    target: str
    rels: tuple[str, ...]


class Cursors(NamedTuple):
    """Cursors found in a response, keyed by relation type."""

    first: str | None = None
    next: str | None = None
    last: str | None = None


class _MalformedLinkError(ValueError):
    pass


def _split_entries(value: str) -> list[str]:
    """Split a header value on commas that are outside `<...>` and quoted strings."""
    entries: list[str] = []
    buf: list[str] = []
    in_target = in_quote = escaped = False
    for ch in value:
        if in_quote:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_quote = False
        elif in_target:
            if ch == ">":
                in_target = False
        elif ch == "<":
            in_target = True
        elif ch == '"':
            in_quote = True
        elif ch == ",":
            entries.append("".join(buf))
            buf = []
            continue
        buf.append(ch)
    if in_target or in_quote:
        msg = "unterminated target or quoted string"
        raise _MalformedLinkError(msg)
    entries.append("".join(buf))
    return [e.strip() for e in entries if e.strip()]


def _parse_entry(entry: str) -> LinkValue:
    if not entry.startswith("<"):
        msg = f"link entry must start with a target: {entry!r}"
        raise _MalformedLinkError(msg)
    end = entry.find(">")
    target = entry[1:end].strip()
    rest = entry[end + 1 :]

    rels: tuple[str, ...] = ()
    seen_rel = False
    pos = 0
    rest = rest.strip()
    while pos < len(rest):
        match = _PARAM_RE.match(rest, pos)
        if match is None:
            msg = f"invalid link parameters: {rest!r}"
            raise _MalformedLinkError(msg)
        name, raw = match.group(1).lower(), (match.group(2) or "").strip()
        # Only the first `rel` parameter counts (RFC 8288 section 3.3).
        if name == "rel" and not seen_rel:
            seen_rel = True
            if raw.startswith('"'):
                raw = _UNESCAPE_RE.sub(r"\1", raw[1:-1])
            rels = tuple(r.lower() for r in raw.split())
        pos = match.end()
        while pos < len(rest) and rest[pos].isspace():
            pos += 1
    return LinkValue(target=target, rels=rels)


def parse_link_header(value: str) -> list[LinkValue]:
    """Parse a `Link` header value into its entries, in header order.

    A value that cannot be parsed yields no entries at all.
    """
    try:
        return [_parse_entry(entry) for entry in _split_entries(value)]
    except _MalformedLinkError:
        return []


def get_cursors(headers: httpx.Headers | Mapping[str, str]) -> Cursors:
    """Extract the `first`, `next` and `last` cursors from response headers.

    When several entries carry the same relation, the one appearing last
    wins. Missing or unparsable headers give empty cursors.
    """
    values = httpx.Headers(headers).get_list("link")
    if not values:
        return Cursors()

    found: dict[str, str] = {}
    # TODO: report conflicting targets for a single relation instead of overwriting.
    for link in parse_link_header(", ".join(values)):
        for rel in link.rels:
            if rel in Cursors._fields:
                found[rel] = link.target
    return Cursors(**found)
