"""
Bearer token extraction, session resolution via /auth/me, and role guards
"""

import httpx
import pytest

from src.platform.exception.exceptions import AuthenticationError, ForbiddenError
from src.platform.http.upstream_api_client import UpstreamApiClient
from src.service.shared_kernel.domain.enum.user_role import UserRole
from src.service.shared_kernel.driven_adapter.auth_profile_api_gateway_impl import (
    AuthProfileApiGatewayImpl,
)
from src.service.shared_kernel.driving_adapter.http_controller.auth_dependency import (
    extract_bearer_token,
    require_admin,
    require_staff,
)


BASE_URL = 'http://upstream.test/api/v1'


@pytest.mark.unit
class TestExtractBearerToken:
    def test_extracts_token(self):
        assert extract_bearer_token('Bearer abc.def') == 'abc.def'

    def test_scheme_is_case_insensitive(self):
        assert extract_bearer_token('bearer abc') == 'abc'

    @pytest.mark.parametrize('header', [None, '', 'Basic abc', 'Bearer ', 'Bearer    '])
    def test_missing_or_malformed(self, header):
        with pytest.raises(AuthenticationError, match='Not authenticated'):
            extract_bearer_token(header)


class TestRoleGuards:
    @pytest.mark.asyncio
    async def test_staff_guard(self, staff_session, admin_session, customer_session):
        assert await require_staff(session=staff_session) is staff_session
        assert await require_staff(session=admin_session) is admin_session
        with pytest.raises(ForbiddenError):
            await require_staff(session=customer_session)

    @pytest.mark.asyncio
    async def test_admin_guard(self, staff_session, admin_session):
        assert await require_admin(session=admin_session) is admin_session
        with pytest.raises(ForbiddenError):
            await require_admin(session=staff_session)


class TestAuthProfileGateway:
    @pytest.mark.asyncio
    async def test_resolves_role_from_profile(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={'user': {'_id': 'staff-7', 'role': 'staff'}})

        client = UpstreamApiClient(
            base_url=BASE_URL, timeout=5, transport=httpx.MockTransport(handler)
        )

        session = await AuthProfileApiGatewayImpl(client=client).resolve_session(token='tok')

        assert session.user_id == 'staff-7'
        assert session.role == UserRole.STAFF
        assert session.token == 'tok'
        assert seen[0].url.path == '/api/v1/auth/me'
        assert seen[0].headers['Authorization'] == 'Bearer tok'

    @pytest.mark.asyncio
    async def test_rejected_token(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401, json={'message': 'Invalid token'})

        client = UpstreamApiClient(
            base_url=BASE_URL, timeout=5, transport=httpx.MockTransport(handler)
        )

        with pytest.raises(AuthenticationError, match='Invalid token'):
            await AuthProfileApiGatewayImpl(client=client).resolve_session(token='tok')

    @pytest.mark.asyncio
    async def test_malformed_profile(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={'profile': {}})

        client = UpstreamApiClient(
            base_url=BASE_URL, timeout=5, transport=httpx.MockTransport(handler)
        )

        with pytest.raises(AuthenticationError):
            await AuthProfileApiGatewayImpl(client=client).resolve_session(token='tok')
