"""
Client for the Procore company directory users endpoints.

Usage
-----

.. code-block:: python

    from procore_api_client import ProcoreClient, CompanyUser

    client = ProcoreClient("my-access-token")
    users = client.company_user_client.list(12345)
    new_user = client.company_user_client.create(
        12345, CompanyUser(email_address="jane@example.com", last_name="Doe")
    )
"""

from __future__ import annotations

from typing import List

from .exceptions import check_response, require_positive_id, require_present
from .models import CompanyUser, CompanyUserDetail
from .pagination import get_all
from .transport import ProcoreTransport


class CompanyUserClient:
    """Create, list and fetch the users of a company.

    Parameters
    ----------
    transport : ProcoreTransport
        Authenticated transport shared with the other resource clients.
    """

    def __init__(self, transport: ProcoreTransport) -> None:
        self._transport = require_present(transport, "transport")

    def create(self, company: int, company_user: CompanyUser) -> CompanyUserDetail:
        """Add a user to the company directory.

        Raises
        ------
        InvalidArgument
            If ``company`` is not a positive integer or ``company_user``
            is ``None``.
        RequestFailure
            If the API responds with a non-2xx status.
        """
        require_positive_id(company, "company")
        require_present(company_user, "company_user")

        response = self._transport.post(
            f"/vapid/companies/{company}/users", json=company_user.to_payload()
        )
        return CompanyUserDetail.model_validate(check_response(response).json())

    def list(self, company: int) -> List[CompanyUserDetail]:
        """Retrieve every user of the company, following pagination."""
        require_positive_id(company, "company")
        return get_all(
            self._transport,
            f"/vapid/companies/{company}/users",
            CompanyUserDetail.model_validate,
        )

    def get(self, company: int, id: int) -> CompanyUserDetail:
        """Retrieve a single user of the company."""
        require_positive_id(company, "company")
        require_positive_id(id, "user")

        response = self._transport.get(f"/vapid/companies/{company}/users/{id}")
        return CompanyUserDetail.model_validate(check_response(response).json())
