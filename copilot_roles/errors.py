class CopilotRolesError(Exception):
    pass

class ConfigError(CopilotRolesError):
    """The tokens file is missing, unreadable, or does not hold a usable token."""

class RequestError(CopilotRolesError):
    """The chat-completion call failed (network, auth, or service error)."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
