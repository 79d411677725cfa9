"""Auth session value object.

Carries the caller's credentials explicitly into every gateway call instead of
reading them from ambient request state.
"""

from typing import Optional

import attrs

from src.service.shared_kernel.domain.enum.user_role import UserRole


@attrs.define(frozen=True)
class AuthSession:
    token: str = attrs.field(repr=False)
    user_id: Optional[str] = None
    role: UserRole = UserRole.CUSTOMER

    def auth_headers(self) -> dict[str, str]:
        return {'Authorization': f'Bearer {self.token}'}

    def is_staff(self) -> bool:
        return self.role in (UserRole.STAFF, UserRole.ADMIN)

    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
