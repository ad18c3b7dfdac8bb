"""Error types raised by steep.

User test and hook failures are never raised through these; they are
reported to the reporter. Everything here is fatal for the run.
"""


class SteepError(Exception):
    """Base class for all steep errors."""


class ConfigurationError(SteepError):
    """Raised when the run configuration is invalid (setup-time, before any test runs)."""


class DefinitionError(SteepError):
    """Raised when a test tree cannot be defined (builder misuse, failing definition unit)."""


class InternalError(SteepError):
    """Raised when the engine reaches a state it declares impossible.

    This always indicates a bug in steep (or in a reporter), never a failure
    of user test code.
    """

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        self.cause = cause
        if cause is not None:
            message = f"{message}: {cause!r}"
        super().__init__(message)
