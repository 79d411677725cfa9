from abc import ABC, abstractmethod

from src.service.shared_kernel.domain.value_object.auth_session import AuthSession


class IAuthProfileGateway(ABC):
    @abstractmethod
    async def resolve_session(self, *, token: str) -> AuthSession:
        """
        Resolve a bearer token into the caller's session (GET /auth/me)

        Raises:
            AuthenticationError: Token missing, expired or rejected upstream
        """
        pass
