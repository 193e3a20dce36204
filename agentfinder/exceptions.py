"""Agent Finder SDK exception classes."""


class AgentFinderError(Exception):
    """Base exception for all Agent Finder SDK errors."""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int | None = None,
        details: str | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(f"[{code}] {message}")


class ConfigurationError(AgentFinderError):
    """Raised when SDK configuration is invalid or missing."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class ValidationError(AgentFinderError):
    """Raised on invalid caller input or an upstream 4xx response."""

    pass


class NotFoundError(AgentFinderError):
    """Raised when the upstream service reports a missing resource."""

    pass


class RateLimitedError(AgentFinderError):
    """Raised when rate limited."""

    def __init__(
        self,
        code: str,
        message: str,
        retry_after: int,
        status_code: int | None = 429,
        details: str | None = None,
    ) -> None:
        super().__init__(code, message, status_code, details)
        self.retry_after = retry_after


class ServerError(AgentFinderError):
    """Raised on upstream server errors (5xx) and unusable responses."""

    pass


class ServiceUnavailableError(ServerError):
    """Raised when the upstream service cannot be reached at all."""

    pass
