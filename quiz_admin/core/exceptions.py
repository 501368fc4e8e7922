from fastapi import status


class QuizAdminError(Exception):
    """Base class for every failure the services raise on purpose.

    ``status_code`` is what the HTTP layer answers with; ``message`` is the
    human-readable text surfaced to the caller as-is.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AuthProviderError(QuizAdminError):
    """Raised by an auth provider; the message is opaque to the services."""

    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationFailed(QuizAdminError):
    status_code = status.HTTP_401_UNAUTHORIZED


class ProfileNotFound(QuizAdminError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = "User profile not found"):
        super().__init__(message)


class UserCreationFailed(QuizAdminError):
    status_code = status.HTTP_400_BAD_REQUEST


class SignOutFailed(QuizAdminError):
    status_code = status.HTTP_400_BAD_REQUEST


class SelfDeletionForbidden(QuizAdminError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "You cannot delete your own account"):
        super().__init__(message)


class QuizNotFound(QuizAdminError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = "Quiz not found"):
        super().__init__(message)


class MigrationDocumentFailed(QuizAdminError):
    """One users document could not be re-keyed. Collected, never raised out of a batch."""

    def __init__(self, email: str, reason: str):
        super().__init__(f"Failed to migrate user {email}: {reason}")
        self.email = email
        self.reason = reason


class UnexpectedServiceError(QuizAdminError):
    """The document store or another collaborator failed in a way we do not model."""


class AccessDenied(QuizAdminError):
    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, message: str = "Admin access required"):
        super().__init__(message)
