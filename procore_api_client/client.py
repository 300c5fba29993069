"""
Entry point bundling every Procore resource client.

This module defines :class:`ProcoreClient`, which builds one
authenticated :class:`~procore_api_client.transport.ProcoreTransport`
and hands it to each resource client, so every request made through the
facade carries the same credentials.

Usage
-----

.. code-block:: python

    from procore_api_client import ProcoreClient

    with ProcoreClient("my-access-token", environment="sandbox") as procore:
        for company in procore.company_client.list():
            for user in procore.company_user_client.list(company.id):
                print(company.name, user.email_address)
"""

from __future__ import annotations

from typing import Any, Optional

import requests

from .companies import CompanyClient
from .company_users import CompanyUserClient
from .projects import ProjectClient
from .transport import ProcoreTransport
from .vendors import CompanyVendorClient


class ProcoreClient:
    """A facade over the Procore REST API resource clients.

    Parameters
    ----------
    access_token : str
        OAuth 2.0 access token obtained from Procore.  Must not be blank.
    session : requests.Session, optional
        Pre-configured session to send requests through.  When omitted a
        session pointed at the environment's base URL is created.
    environment : str, optional
        ``"production"`` (the default) or ``"sandbox"``.
    base_url : str, optional
        Override the API base URL derived from the environment.
    timeout : float, optional
        Timeout in seconds for every request.

    Attributes
    ----------
    company_client : CompanyClient
    company_user_client : CompanyUserClient
    company_vendor_client : CompanyVendorClient
    project_client : ProjectClient
    """

    def __init__(
        self,
        access_token: str,
        *,
        session: Optional[requests.Session] = None,
        environment: str = "production",
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.transport = ProcoreTransport(
            access_token,
            session=session,
            environment=environment,
            base_url=base_url,
            timeout=timeout,
        )

        self.company_client = CompanyClient(self.transport)
        self.company_user_client = CompanyUserClient(self.transport)
        self.company_vendor_client = CompanyVendorClient(self.transport)
        self.project_client = ProjectClient(self.transport)

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> "ProcoreClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
