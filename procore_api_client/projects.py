"""Client for the Procore projects endpoints.

Projects are not nested under the company in the URL; the company is
passed as the ``company_id`` query parameter (or in the body for
creation) instead.
"""

from __future__ import annotations

from typing import List

from .exceptions import check_response, require_positive_id, require_present
from .models import Project, ProjectDetail
from .pagination import get_all
from .transport import ProcoreTransport


class ProjectClient:
    """Create, list and fetch the projects of a company."""

    def __init__(self, transport: ProcoreTransport) -> None:
        self._transport = require_present(transport, "transport")

    def create(self, company: int, project: Project) -> ProjectDetail:
        """Create a project in the company.

        Raises
        ------
        InvalidArgument
            If ``company`` is not a positive integer or ``project`` is
            ``None``.
        RequestFailure
            If the API responds with a non-2xx status.
        """
        require_positive_id(company, "company")
        require_present(project, "project")

        body = {"company_id": company, "project": project.to_payload()}
        response = self._transport.post("/vapid/projects", json=body)
        return ProjectDetail.model_validate(check_response(response).json())

    def list(self, company: int) -> List[ProjectDetail]:
        require_positive_id(company, "company")
        return get_all(
            self._transport,
            "/vapid/projects",
            ProjectDetail.model_validate,
            params={"company_id": company},
        )

    def get(self, company: int, id: int) -> ProjectDetail:
        require_positive_id(company, "company")
        require_positive_id(id, "project")

        response = self._transport.get(f"/vapid/projects/{id}", params={"company_id": company})
        return ProjectDetail.model_validate(check_response(response).json())
