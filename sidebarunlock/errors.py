"""Exception hierarchy for sidebar unlocking."""


class UnlockError(Exception):
    """Base class for all unlock errors."""


class MalformedDocument(UnlockError, ValueError):
    """A next response is missing a required structural path."""


class MissingIdentifier(MalformedDocument):
    """The next response carries no resolvable video id."""

    def __init__(self, message: str = "Missing videoId in next response"):
        super().__init__(message)


class StructuralMismatch(MalformedDocument):
    """A merge target could not be located in the original response."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Merge target not found in original response: {path}")


class AdapterFailure(UnlockError):
    """A single source adapter failed to produce a next response.

    Raised by adapters and absorbed by the resolver, which moves on to the
    next strategy.
    """

    def __init__(self, adapter: str, message: str):
        self.adapter = adapter
        super().__init__(f"{adapter}: {message}")


class UnlockFailed(UnlockError):
    """Every strategy was tried and the sidebar is still empty."""

    def __init__(self, content_id: str | None = None):
        self.content_id = content_id
        message = "Sidebar Unlock Failed"
        if content_id:
            message = f"{message} for video {content_id}"
        super().__init__(message)
