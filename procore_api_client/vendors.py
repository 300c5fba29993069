"""Client for the Procore company directory vendors endpoints."""

from __future__ import annotations

from typing import List

from .exceptions import check_response, require_positive_id, require_present
from .models import CompanyVendor, CompanyVendorDetail
from .pagination import get_all
from .transport import ProcoreTransport


class CompanyVendorClient:
    """Create, list and fetch the vendors of a company."""

    def __init__(self, transport: ProcoreTransport) -> None:
        self._transport = require_present(transport, "transport")

    def create(self, company: int, vendor: CompanyVendor) -> CompanyVendorDetail:
        require_positive_id(company, "company")
        require_present(vendor, "vendor")

        response = self._transport.post(
            f"/vapid/companies/{company}/vendors", json=vendor.to_payload()
        )
        return CompanyVendorDetail.model_validate(check_response(response).json())

    def list(self, company: int) -> List[CompanyVendorDetail]:
        """Retrieve every vendor of the company, following pagination."""
        require_positive_id(company, "company")
        return get_all(
            self._transport,
            f"/vapid/companies/{company}/vendors",
            CompanyVendorDetail.model_validate,
        )

    def get(self, company: int, id: int) -> CompanyVendorDetail:
        require_positive_id(company, "company")
        require_positive_id(id, "vendor")

        response = self._transport.get(f"/vapid/companies/{company}/vendors/{id}")
        return CompanyVendorDetail.model_validate(check_response(response).json())
