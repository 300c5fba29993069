"""
Authenticated HTTP transport shared by every Procore resource client.

:class:`ProcoreTransport` owns a :class:`requests.Session` whose default
headers carry the bearer token, builds request URLs relative to the
configured base URL and hands the raw :class:`requests.Response` back to
the caller.  It does not interpret status codes; the resource clients
decide what a failure means via
:func:`procore_api_client.exceptions.check_response`.

Usage
-----

.. code-block:: python

    from procore_api_client.transport import ProcoreTransport

    transport = ProcoreTransport("my-access-token", environment="sandbox")
    response = transport.get("/vapid/companies")
    print(response.status_code, response.headers.get("link"))
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from .exceptions import InvalidArgument, RequestFailure

logger = logging.getLogger(__name__)


class ProcoreTransport:
    """Bearer-token authenticated access to the Procore REST API.

    Parameters
    ----------
    access_token : str
        OAuth 2.0 access token obtained from Procore.  It is sent in the
        ``Authorization`` header of every request and cannot be changed
        after construction.
    session : requests.Session, optional
        A pre-configured session to send requests through.  When omitted
        a new session is created and :meth:`close` will close it.  The
        authorization header is installed on the supplied session.
    environment : str, optional
        ``"production"`` (the default) or ``"sandbox"``.
    base_url : str, optional
        Override the API base URL derived from the environment.
    timeout : float, optional
        Timeout in seconds applied to every request.  ``None`` leaves the
        ``requests`` default in place.
    """

    _DEFAULT_BASE_URLS = {
        "production": "https://api.procore.com",
        "sandbox": "https://sandbox.procore.com",
    }

    def __init__(
        self,
        access_token: str,
        *,
        session: Optional[requests.Session] = None,
        environment: str = "production",
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        if not isinstance(access_token, str) or not access_token.strip():
            raise InvalidArgument("access_token must be provided", "access_token")

        environment = (environment or "").lower()
        if environment not in self._DEFAULT_BASE_URLS:
            raise InvalidArgument(
                "environment must be either 'production' or 'sandbox', got %r" % environment,
                "environment",
            )

        self._access_token = access_token
        self._base_url = (base_url or self._DEFAULT_BASE_URLS[environment]).rstrip("/")
        self.environment = environment
        self.timeout = timeout

        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()
        self._session.headers.update(
            {
                "Authorization": f"Bearer {access_token}",
                "Accept": "application/json",
            }
        )

    @property
    def access_token(self) -> str:
        return self._access_token

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def session(self) -> requests.Session:
        return self._session

    def close(self) -> None:
        """Close the underlying session if this transport created it."""
        if self._owns_session:
            self._session.close()

    # ------------------------------------------------------------------
    # HTTP request helpers
    # ------------------------------------------------------------------
    def prepare_url(self, path: str) -> str:
        """Build the full request URL from a relative or absolute path.

        Absolute URLs (as found in pagination headers) are returned
        as-is.  Anything else is joined to :attr:`base_url`.
        """
        if path.startswith("http://") or path.startswith("https://"):
            return path
        return f"{self._base_url}/{path.lstrip('/')}"

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None,
    ) -> requests.Response:
        """Send one request and return the response without checking it.

        Raises
        ------
        RequestFailure
            If no response was received at all (connection errors,
            timeouts and the like).
        """
        url = self.prepare_url(path)
        logger.debug("%s %s", method, url)
        try:
            response = self._session.request(
                method=method,
                url=url,
                params=params,
                json=json,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise RequestFailure(f"Failed to connect to {url}: {exc}", url=url) from exc
        logger.debug("%s %s -> %s %s", method, url, response.status_code, response.reason)
        return response

    def get(self, path: str, *, params: Optional[Dict[str, Any]] = None) -> requests.Response:
        """Perform a GET request.

        See :meth:`_request` for error behaviour.
        """
        return self._request("GET", path, params=params)

    def post(
        self,
        path: str,
        *,
        json: Optional[Any] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> requests.Response:
        """Perform a POST request with a JSON body.

        See :meth:`_request` for error behaviour.
        """
        return self._request("POST", path, params=params, json=json)
