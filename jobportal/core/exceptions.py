"""
Custom exceptions for the application.
All API exceptions should inherit from APIException for consistent error handling.
"""
from typing import Optional, Any

# Where a client should send the user after certain errors
AUTH_ENTRY_POINT = "/auth"
JOB_LISTING_PAGE = "/jobs"


class APIException(Exception):
    """
    Base exception for all API errors.
    Provides consistent error response format.
    """

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        details: Optional[Any] = None,
    ):
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = details
        super().__init__(self.message)


class UnauthorizedException(APIException):
    """401 Unauthorized"""

    def __init__(
        self,
        message: str = "Unauthorized",
        code: str = "UNAUTHORIZED",
        details: Optional[Any] = None,
    ):
        super().__init__(401, code, message, details)


class ForbiddenException(APIException):
    """403 Forbidden"""

    def __init__(self, message: str = "Forbidden", code: str = "FORBIDDEN"):
        super().__init__(403, code, message)


class NotFoundException(APIException):
    """404 Not Found"""

    def __init__(
        self,
        message: str = "Resource not found",
        code: str = "NOT_FOUND",
        details: Optional[Any] = None,
    ):
        super().__init__(404, code, message, details)


class ConflictException(APIException):
    """409 Conflict"""

    def __init__(self, message: str = "Resource conflict", code: str = "CONFLICT"):
        super().__init__(409, code, message)


class GatewayException(APIException):
    """503 - a write to the data gateway failed"""

    def __init__(self, message: str = "Data service unavailable", code: str = "GATEWAY_ERROR"):
        super().__init__(503, code, message)


# Authentication specific exceptions
class AuthenticationRequiredException(UnauthorizedException):
    """No session: the client should send the user to the sign-in page"""

    def __init__(self, message: str = "Please login to continue"):
        super().__init__(
            message=message,
            code="AUTH_REQUIRED",
            details={"redirect_to": AUTH_ENTRY_POINT},
        )


class InvalidCredentialsException(UnauthorizedException):
    """Invalid email or password"""

    def __init__(self):
        super().__init__(
            message="Invalid email or password",
            code="INVALID_CREDENTIALS",
        )


class InvalidTokenException(UnauthorizedException):
    """Token is invalid or expired"""

    def __init__(self):
        super().__init__(
            message="Invalid token",
            code="INVALID_TOKEN",
            details={"redirect_to": AUTH_ENTRY_POINT},
        )


class EmailAlreadyExistsException(ConflictException):
    """Email already registered"""

    def __init__(self):
        super().__init__(
            message="Email already registered",
            code="EMAIL_EXISTS",
        )


# Resource specific exceptions
class JobNotFoundException(NotFoundException):
    """Job not found - terminal for the detail view, back to the listing"""

    def __init__(self):
        super().__init__(
            message="Job not found",
            code="JOB_NOT_FOUND",
            details={"redirect_to": JOB_LISTING_PAGE},
        )


class NotificationNotFoundException(NotFoundException):
    """Notification not found"""

    def __init__(self):
        super().__init__(message="Notification not found", code="NOTIFICATION_NOT_FOUND")


class AlreadyAppliedException(ConflictException):
    """The user already has an application for this job"""

    def __init__(self):
        super().__init__(
            message="You have already applied for this job",
            code="ALREADY_APPLIED",
        )
