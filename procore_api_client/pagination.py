"""Retrieval of complete result sets from paginated list endpoints."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, TypeVar

from .exceptions import PaginationLimitExceeded, check_response
from .links import get_next_url
from .transport import ProcoreTransport

logger = logging.getLogger(__name__)

T = TypeVar("T")

LINK_HEADER = "link"


def get_all(
    transport: ProcoreTransport,
    path: str,
    item_parser: Callable[[Any], T],
    *,
    params: Optional[Dict[str, Any]] = None,
    max_pages: Optional[int] = None,
) -> List[T]:
    """Perform GET requests until the server stops advertising a next page.

    Each page body must be a JSON array.  Every element is converted with
    ``item_parser`` and appended to the result in the order received.  The
    next request goes to the ``rel="next"`` URL of the ``link`` header;
    a missing header or one without a next entry ends the loop.

    Parameters
    ----------
    transport : ProcoreTransport
        The authenticated transport to send requests through.
    path : str
        Path (or absolute URL) of the first page.
    item_parser : callable
        Turns one decoded JSON element into a record, e.g.
        ``CompanyUserDetail.model_validate``.
    params : dict, optional
        Query parameters for the first request.  Later pages use the
        server supplied URL as-is.
    max_pages : int, optional
        Stop with :class:`PaginationLimitExceeded` instead of fetching
        more than this many pages.  ``None`` (the default) never stops.

    Returns
    -------
    list
        All records from all pages.

    Raises
    ------
    RequestFailure
        As soon as any page comes back with a non-2xx status.  Records
        from pages fetched earlier are discarded.
    """
    items: List[T] = []
    target: Optional[str] = path
    page_params = params
    pages = 0

    while target is not None:
        if max_pages is not None and pages >= max_pages:
            raise PaginationLimitExceeded(max_pages, target)

        response = check_response(transport.get(target, params=page_params))
        page_params = None
        pages += 1

        page = response.json()
        items.extend(item_parser(element) for element in page)
        logger.debug("page %d of %s: %d records", pages, path, len(page))

        target = get_next_url(response.headers.get(LINK_HEADER))

    return items
