class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class QuotaExceededError(DomainError):
    """Requested quantity is above what the entry pass and seat snapshot allow."""

    def __init__(self, message: str, *, max_bookable: int) -> None:
        self.max_bookable = max_bookable
        super().__init__(message, 400)


class ConfirmationRequiredError(DomainError):
    """Destructive action attempted without an explicit confirm step."""

    def __init__(self, message: str) -> None:
        super().__init__(message, 428)


class ForbiddenError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 403)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class AuthenticationError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 401)


class UpstreamApiError(CustomBaseError):
    """Upstream REST API rejected the call or could not be reached."""

    def __init__(self, message: str, status_code: int = 502) -> None:
        super().__init__(message, status_code)
