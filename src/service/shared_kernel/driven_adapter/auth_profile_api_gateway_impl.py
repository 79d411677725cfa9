from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from src.platform.exception.exceptions import AuthenticationError
from src.platform.http.upstream_api_client import UpstreamApiClient
from src.platform.logging.loguru_io import Logger
from src.service.shared_kernel.app.interface.i_auth_profile_gateway import IAuthProfileGateway
from src.service.shared_kernel.domain.enum.user_role import UserRole
from src.service.shared_kernel.domain.value_object.auth_session import AuthSession


class UpstreamProfile(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra='ignore')

    id: Optional[str] = Field(default=None, alias='_id')
    role: UserRole = UserRole.CUSTOMER


class UpstreamProfileEnvelope(BaseModel):
    """``{"user": {"_id": ..., "role": ...}}``"""

    model_config = ConfigDict(extra='ignore')

    user: UpstreamProfile


class AuthProfileApiGatewayImpl(IAuthProfileGateway):
    def __init__(self, *, client: UpstreamApiClient) -> None:
        self.client = client

    @Logger.io
    async def resolve_session(self, *, token: str) -> AuthSession:
        anonymous = AuthSession(token=token)
        body = await self.client.get('/auth/me', session=anonymous)
        try:
            profile = UpstreamProfileEnvelope.model_validate(body).user
        except ValidationError as e:
            raise AuthenticationError('Could not resolve the signed-in user') from e
        return AuthSession(token=token, user_id=profile.id, role=profile.role)
