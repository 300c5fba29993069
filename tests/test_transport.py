"""Tests for the authenticated transport."""

from __future__ import annotations

import pytest
import requests
import responses

from procore_api_client.exceptions import InvalidArgument, RequestFailure
from procore_api_client.transport import ProcoreTransport


@pytest.mark.parametrize("token", ["", "   ", None])
def test_blank_token_is_rejected(token) -> None:
    with pytest.raises(InvalidArgument) as excinfo:
        ProcoreTransport(token)

    assert excinfo.value.argument == "access_token"


def test_unknown_environment_is_rejected() -> None:
    with pytest.raises(InvalidArgument):
        ProcoreTransport("token", environment="staging")


def test_environment_selects_base_url() -> None:
    assert ProcoreTransport("token").base_url == "https://api.procore.com"
    assert ProcoreTransport("token", environment="Sandbox").base_url == "https://sandbox.procore.com"
    assert ProcoreTransport("token", base_url="http://localhost:8080/").base_url == "http://localhost:8080"


def test_prepare_url() -> None:
    transport = ProcoreTransport("token")

    assert transport.prepare_url("/vapid/companies") == "https://api.procore.com/vapid/companies"
    assert transport.prepare_url("vapid/companies") == "https://api.procore.com/vapid/companies"
    assert transport.prepare_url("https://other.example.com/a?b=1") == "https://other.example.com/a?b=1"


@responses.activate
def test_bearer_token_is_sent_on_every_request() -> None:
    transport = ProcoreTransport("secret-token")
    responses.add(responses.GET, "https://api.procore.com/vapid/companies", json=[])
    responses.add(responses.POST, "https://api.procore.com/vapid/projects", json={"id": 1})

    transport.get("/vapid/companies")
    transport.post("/vapid/projects", json={"company_id": 1})

    assert [call.request.headers["Authorization"] for call in responses.calls] == [
        "Bearer secret-token",
        "Bearer secret-token",
    ]


def test_supplied_session_is_configured_but_not_closed() -> None:
    session = requests.Session()
    closed = []
    session.close = lambda: closed.append(True)

    transport = ProcoreTransport("token", session=session)
    transport.close()

    assert session.headers["Authorization"] == "Bearer token"
    assert transport.session is session
    assert closed == []


@responses.activate
def test_error_status_is_returned_not_raised() -> None:
    transport = ProcoreTransport("token")
    responses.add(responses.GET, "https://api.procore.com/vapid/companies", status=401)

    response = transport.get("/vapid/companies")

    assert response.status_code == 401


@responses.activate
def test_connection_error_becomes_request_failure() -> None:
    transport = ProcoreTransport("token")
    responses.add(
        responses.GET,
        "https://api.procore.com/vapid/companies",
        body=requests.ConnectionError("connection refused"),
    )

    with pytest.raises(RequestFailure) as excinfo:
        transport.get("/vapid/companies")

    assert excinfo.value.status_code is None
    assert excinfo.value.url == "https://api.procore.com/vapid/companies"
    assert isinstance(excinfo.value.__cause__, requests.ConnectionError)
