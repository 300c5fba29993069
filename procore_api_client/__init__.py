"""
Python client for interacting with the Procore REST API.

This package provides a :class:`ProcoreClient` facade that authenticates
every request with a bearer token and exposes one client per resource
family (companies, company users, company vendors and projects).  List
operations follow the ``link`` response header until every page has
been retrieved and return typed records.

Examples
--------

```python
from procore_api_client import ProcoreClient, RequestFailure

client = ProcoreClient("YOUR_ACCESS_TOKEN")

try:
    users = client.company_user_client.list(12345)
except RequestFailure as exc:
    print("Procore said:", exc.reason, exc.status_code)
```

The library logs through the standard :mod:`logging` module under the
``procore_api_client`` logger and is silent unless the application
configures logging.
"""

import logging

from .client import ProcoreClient
from .companies import CompanyClient
from .company_users import CompanyUserClient
from .exceptions import InvalidArgument, PaginationLimitExceeded, ProcoreError, RequestFailure
from .links import PageLink, get_next_url, parse_link_header
from .models import (
    Company,
    CompanyUser,
    CompanyUserDetail,
    CompanyVendor,
    CompanyVendorDetail,
    Project,
    ProjectDetail,
    Reference,
)
from .pagination import get_all
from .projects import ProjectClient
from .transport import ProcoreTransport
from .vendors import CompanyVendorClient

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ProcoreClient",
    "ProcoreTransport",
    "CompanyClient",
    "CompanyUserClient",
    "CompanyVendorClient",
    "ProjectClient",
    "Company",
    "CompanyUser",
    "CompanyUserDetail",
    "CompanyVendor",
    "CompanyVendorDetail",
    "Project",
    "ProjectDetail",
    "Reference",
    "PageLink",
    "parse_link_header",
    "get_next_url",
    "get_all",
    "ProcoreError",
    "InvalidArgument",
    "RequestFailure",
    "PaginationLimitExceeded",
]
