"""Error taxonomy shared by services and the HTTP layer."""


class MediaRelayError(Exception):
    """Base class for errors surfaced to API callers."""

    default_message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(MediaRelayError):
    """Malformed or missing input."""

    default_message = "Invalid request"


class ConflictError(MediaRelayError):
    """A uniqueness constraint was violated."""

    default_message = "Resource already exists"


class InvalidCredentials(MediaRelayError):
    """Login failed; deliberately does not say why."""

    default_message = "Invalid email or password"


class NotFound(MediaRelayError):
    """No matching resource."""

    default_message = "Not found"


class UpstreamStorageError(MediaRelayError):
    """The object store call failed."""

    default_message = "Storage upload failed"


class UpstreamDatabaseError(MediaRelayError):
    """The database call failed."""

    default_message = "Database request failed"


class UpstreamTimeout(MediaRelayError):
    """An external call did not finish in time."""

    default_message = "Upstream request timed out"


class InternalError(MediaRelayError):
    """Unexpected failure."""
