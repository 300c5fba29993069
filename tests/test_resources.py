"""Tests for the company, project and vendor clients."""

from __future__ import annotations

import json

import pytest
import responses
from responses import matchers

from procore_api_client.companies import CompanyClient
from procore_api_client.exceptions import InvalidArgument, RequestFailure
from procore_api_client.models import CompanyVendor, Project
from procore_api_client.projects import ProjectClient
from procore_api_client.vendors import CompanyVendorClient

BASE_URL = "https://api.procore.com"


@responses.activate
def test_company_list(transport) -> None:
    responses.add(
        responses.GET,
        f"{BASE_URL}/vapid/companies",
        json=[{"id": 1, "name": "Acme Builders", "is_active": True}],
    )

    companies = CompanyClient(transport).list()

    assert [(c.id, c.name, c.is_active) for c in companies] == [(1, "Acme Builders", True)]


@responses.activate
def test_company_list_failure(transport) -> None:
    responses.add(responses.GET, f"{BASE_URL}/vapid/companies", status=403)

    with pytest.raises(RequestFailure, match="Forbidden"):
        CompanyClient(transport).list()


@responses.activate
def test_project_create_wraps_payload(transport) -> None:
    responses.add(
        responses.POST,
        f"{BASE_URL}/vapid/projects",
        status=201,
        json={"id": 55, "name": "Tower", "company": {"id": 9, "name": "Acme"}},
    )

    project = ProjectClient(transport).create(9, Project(name="Tower", project_number="T-1"))

    assert project.id == 55
    assert project.company is not None and project.company.id == 9
    assert json.loads(responses.calls[0].request.body) == {
        "company_id": 9,
        "project": {"name": "Tower", "project_number": "T-1"},
    }


@responses.activate
def test_project_list_and_get_pass_company_id(transport) -> None:
    responses.add(
        responses.GET,
        f"{BASE_URL}/vapid/projects",
        json=[{"id": 1, "name": "A"}, {"id": 2, "name": "B"}],
        match=[matchers.query_param_matcher({"company_id": "9"})],
    )
    responses.add(
        responses.GET,
        f"{BASE_URL}/vapid/projects/2",
        json={"id": 2, "name": "B"},
        match=[matchers.query_param_matcher({"company_id": "9"})],
    )
    client = ProjectClient(transport)

    assert [p.name for p in client.list(9)] == ["A", "B"]
    assert client.get(9, 2).name == "B"


@responses.activate
def test_project_validation_happens_before_request(transport) -> None:
    client = ProjectClient(transport)

    with pytest.raises(InvalidArgument):
        client.get(9, 0)
    with pytest.raises(InvalidArgument):
        client.create(9, None)
    with pytest.raises(InvalidArgument):
        client.list(-3)

    assert len(responses.calls) == 0


@responses.activate
def test_vendor_crud(transport) -> None:
    vendors_url = f"{BASE_URL}/vapid/companies/9/vendors"
    responses.add(responses.POST, vendors_url, status=201, json={"id": 4, "name": "Sparks Electric"})
    responses.add(
        responses.GET,
        vendors_url,
        json=[{"id": 4, "name": "Sparks Electric"}],
        headers={"link": f'<{vendors_url}?page=1>; rel="first"'},
    )
    responses.add(responses.GET, f"{vendors_url}/4", json={"id": 4, "name": "Sparks Electric"})
    client = CompanyVendorClient(transport)

    created = client.create(9, CompanyVendor(name="Sparks Electric", trade_name="Electrical"))
    listed = client.list(9)
    fetched = client.get(9, 4)

    assert created.id == listed[0].id == fetched.id == 4
    assert json.loads(responses.calls[0].request.body) == {
        "name": "Sparks Electric",
        "trade_name": "Electrical",
    }


@responses.activate
def test_vendor_get_rejects_bad_id(transport) -> None:
    with pytest.raises(InvalidArgument) as excinfo:
        CompanyVendorClient(transport).get(9, -5)

    assert excinfo.value.argument == "vendor"
    assert len(responses.calls) == 0
