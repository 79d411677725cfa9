from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Depends, Header

from src.platform.config.di import Container
from src.platform.exception.exceptions import AuthenticationError, ForbiddenError
from src.service.shared_kernel.app.interface.i_auth_profile_gateway import IAuthProfileGateway
from src.service.shared_kernel.domain.value_object.auth_session import AuthSession


BEARER_PREFIX = 'bearer '


def extract_bearer_token(authorization: Optional[str]) -> str:
    if not authorization or not authorization.lower().startswith(BEARER_PREFIX):
        raise AuthenticationError('Not authenticated')
    token = authorization[len(BEARER_PREFIX) :].strip()
    if not token:
        raise AuthenticationError('Not authenticated')
    return token


@inject
async def get_auth_session(
    authorization: Optional[str] = Header(None),
    auth_profile_gateway: IAuthProfileGateway = Depends(Provide[Container.auth_profile_gateway]),
) -> AuthSession:
    token = extract_bearer_token(authorization)
    return await auth_profile_gateway.resolve_session(token=token)


async def require_staff(session: AuthSession = Depends(get_auth_session)) -> AuthSession:
    if not session.is_staff():
        raise ForbiddenError('Only staff can perform this action')
    return session


async def require_admin(session: AuthSession = Depends(get_auth_session)) -> AuthSession:
    if not session.is_admin():
        raise ForbiddenError('Only admins can perform this action')
    return session
