"""Custom exception classes for the GovFlow API."""


class GovFlowError(Exception):
    """Base exception for request-level failures."""

    def __init__(self, code: str, message: str, details=None, status_code: int = 500):
        self.code = code
        self.message = message
        self.details = details
        self.status_code = status_code
        super().__init__(message)


class ValidationError(GovFlowError):
    """Request validation failure."""

    def __init__(self, message: str, details=None):
        super().__init__("VALIDATION_ERROR", message, details, status_code=400)


class NotFoundError(GovFlowError):
    """Resource not found."""

    def __init__(self, message: str):
        super().__init__("NOT_FOUND", message, status_code=404)


class AuthenticationError(GovFlowError):
    """No authenticated identity on the request."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__("AUTHENTICATION_ERROR", message, status_code=401)


class ConflictError(GovFlowError):
    """Resource state conflict."""

    def __init__(self, message: str):
        super().__init__("CONFLICT", message, status_code=409)


class MigrationStepError(Exception):
    """A recorded, non-fatal failure inside a workflow migration.

    These never reach the HTTP layer as errors. The migrator turns each one
    into an entry of the result's ``errors`` list and keeps going.
    """

    prefix = "Migration step failed"

    def __init__(self, message: str, subject: str | None = None):
        self.subject = subject
        super().__init__(message)

    def __str__(self) -> str:
        return f"{self.prefix}: {self.args[0]}"


class ConfigUpsertError(MigrationStepError):
    prefix = "Error updating board configuration"


class ProposalFetchError(MigrationStepError):
    prefix = "Error fetching proposals"


class ProposalUpdateError(MigrationStepError):
    """Single proposal write failed; ``subject`` is the proposal id."""

    def __str__(self) -> str:
        return f"Error migrating proposal {self.subject}: {self.args[0]}"
