"""
Custom exception types for the Procore API client.

These exceptions allow callers to distinguish between a call that was
rejected locally because of a bad argument and one that reached the
server and came back with an error status.
"""

from __future__ import annotations

from typing import Any, Optional

import requests


class ProcoreError(Exception):
    """Base exception for all Procore client errors."""


class InvalidArgument(ProcoreError, ValueError):
    """Raised before any request is made when an argument is not valid.

    Parameters
    ----------
    message : str
        Human readable description of the problem.
    argument : str, optional
        Name of the offending parameter.
    """

    def __init__(self, message: str, argument: Optional[str] = None) -> None:
        super().__init__(message)
        self.argument = argument


class RequestFailure(ProcoreError):
    """Raised when a request to the Procore API does not succeed.

    The exception message is the reason phrase reported by the server
    (for example ``"Not Found"``).  The status code, URL and the
    :class:`requests.Response` itself are attached for callers that need
    more than the message.  All three are ``None`` when the request never
    produced a response (connection refused, DNS failure and so on).
    """

    def __init__(
        self,
        reason: str,
        *,
        status_code: Optional[int] = None,
        url: Optional[str] = None,
        response: Optional[requests.Response] = None,
    ) -> None:
        super().__init__(reason)
        self.reason = reason
        self.status_code = status_code
        self.url = url
        self.response = response


class PaginationLimitExceeded(ProcoreError):
    """Raised when a list endpoint keeps paginating past ``max_pages``."""

    def __init__(self, max_pages: int, next_url: str) -> None:
        super().__init__(
            f"Pagination did not finish within {max_pages} pages; next page was {next_url}"
        )
        self.max_pages = max_pages
        self.next_url = next_url


def check_response(response: requests.Response) -> requests.Response:
    """Return ``response`` unchanged, or raise :class:`RequestFailure`.

    Any status outside the 2xx range is treated as a failure.  The
    server's reason phrase becomes the exception message verbatim.
    """
    if 200 <= response.status_code < 300:
        return response
    raise RequestFailure(
        response.reason or "",
        status_code=response.status_code,
        url=response.url,
        response=response,
    )


def require_positive_id(value: Any, name: str) -> int:
    """Validate that ``value`` is a positive integer identifier."""
    # bool is an int subclass; True must not pass as id 1
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"The {name} ID is not valid.", name)
    if value <= 0:
        raise InvalidArgument(f"The {name} ID is not valid.", name)
    return value


def require_present(value: Any, name: str) -> Any:
    """Validate that a required object argument was supplied."""
    if value is None:
        raise InvalidArgument(f"{name} must be provided", name)
    return value
