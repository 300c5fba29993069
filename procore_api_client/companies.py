"""Client for the Procore companies endpoint."""

from __future__ import annotations

from typing import List

from .exceptions import require_present
from .models import Company
from .pagination import get_all
from .transport import ProcoreTransport


class CompanyClient:
    """List the companies the access token has access to."""

    def __init__(self, transport: ProcoreTransport) -> None:
        self._transport = require_present(transport, "transport")

    def list(self) -> List[Company]:
        return get_all(self._transport, "/vapid/companies", Company.model_validate)
