"""Shared fixtures for the Procore client tests."""

from __future__ import annotations

from typing import Iterator

import pytest

from procore_api_client.transport import ProcoreTransport


@pytest.fixture
def transport() -> Iterator[ProcoreTransport]:
    transport = ProcoreTransport("test-token")
    yield transport
    transport.close()
