"""Host-level errors. The core itself never raises for malformed input."""


class AgendaError(Exception):
    """Base class for orgenda errors."""


class WorkspaceNotFound(AgendaError):
    """The configured workspace directory does not exist."""


class UnknownAgendaUri(AgendaError, ValueError):
    """A document was requested from the agenda view under a foreign URI."""
