"""
Test Configuration and Fixtures

This module provides:
- Test log directory, set before any application module reads it at import time
- Auth sessions for the three roles
- A FastAPI app without lifespan side effects for controller tests
"""

import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ.setdefault('PAYMENT_SIMULATION_DELAY_SECONDS', '0')


_early_setup_test_environment()

from collections.abc import AsyncIterator, Generator  # noqa: E402
from contextlib import asynccontextmanager  # noqa: E402

from fastapi import FastAPI  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from src.platform.app_factory import create_app  # noqa: E402
from src.service.shared_kernel.domain.enum.user_role import UserRole  # noqa: E402
from src.service.shared_kernel.domain.value_object.auth_session import AuthSession  # noqa: E402
from src.service.shared_kernel.driving_adapter.http_controller.auth_dependency import (  # noqa: E402
    get_auth_session,
)


@pytest.fixture
def customer_session() -> AuthSession:
    return AuthSession(token='customer-token', user_id='customer-1', role=UserRole.CUSTOMER)


@pytest.fixture
def staff_session() -> AuthSession:
    return AuthSession(token='staff-token', user_id='staff-1', role=UserRole.STAFF)


@pytest.fixture
def admin_session() -> AuthSession:
    return AuthSession(token='admin-token', user_id='admin-1', role=UserRole.ADMIN)


@asynccontextmanager
async def _noop_lifespan(app: FastAPI) -> AsyncIterator[None]:
    yield


@pytest.fixture
def app() -> Generator[FastAPI, None, None]:
    """App without wiring; tests override use case and auth dependencies."""
    test_app = create_app(lifespan=_noop_lifespan, title_suffix=' (Test)')
    yield test_app
    test_app.dependency_overrides.clear()


@pytest.fixture
def login_as(app: FastAPI):
    def _login(session: AuthSession) -> None:
        app.dependency_overrides[get_auth_session] = lambda: session

    return _login


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
