"""Parsing of the ``link`` response header used for pagination.

Procore list endpoints return at most one page of records per response
and advertise the neighbouring pages in a header of the form::

    link: <https://api.procore.com/vapid/companies/1/users?page=2>; rel="next",
          <https://api.procore.com/vapid/companies/1/users?page=9>; rel="last"

Parsing is deliberately lenient.  Entries that do not split into exactly
a URL part and a ``rel`` part are skipped rather than reported, so a
malformed header simply means "no next page".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

__all__ = ["PageLink", "parse_link_header", "get_next_url"]


@dataclass(frozen=True)
class PageLink:
    """A single ``<url>; rel="relation"`` entry of a link header."""

    url: str
    relation: str


def _split_entry(entry: str) -> Optional[List[str]]:
    if not entry.strip():
        return None
    parts = entry.split(";")
    if len(parts) != 2:
        return None
    return parts


def _clean_url(part: str) -> str:
    return part.replace(">", "").replace("<", "").strip()


def parse_link_header(value: Optional[str]) -> List[PageLink]:
    """Parse every well formed entry of a link header.

    Parameters
    ----------
    value : str, optional
        The raw header value.  ``None`` and the empty string both yield
        an empty list.

    Returns
    -------
    list of PageLink
        Entries in header order.  Entries whose second part is not of the
        form ``rel="..."`` are left out.
    """
    links: List[PageLink] = []
    if not value:
        return links
    for entry in value.split(","):
        parts = _split_entry(entry)
        if parts is None:
            continue
        rel = parts[1].strip()
        if len(rel) < len('rel=""') or not (rel.startswith('rel="') and rel.endswith('"')):
            continue
        links.append(PageLink(url=_clean_url(parts[0]), relation=rel[len('rel="'):-1]))
    return links


def get_next_url(value: Optional[str]) -> Optional[str]:
    """Return the URL of the next page advertised by a link header.

    The first entry whose relation part is exactly ``rel="next"`` wins.
    ``None`` is returned when the header is missing, empty, malformed or
    has no next entry; this function never raises.
    """
    for link in parse_link_header(value):
        if link.relation == "next":
            return link.url
    return None
