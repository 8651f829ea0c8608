"""Exception types for ocenv."""


class OcenvError(Exception):
    """Base class for errors that abort an ocenv command."""


class SetupError(OcenvError):
    """Raised when the workspace directory tree cannot be created or filled."""


class ContractViolation(OcenvError):
    """Raised when an operation is asked for without the data it requires."""


class ProcessLaunchError(OcenvError):
    """Raised when the interactive shell cannot be found or started."""


class CleanupWarning(UserWarning):
    """Category for teardown failures; logged, never raised."""
