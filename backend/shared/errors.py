"""Error types raised by configuration loading and the provider clients."""


class ConfigurationError(ValueError):
    """Required environment configuration is missing or invalid."""

    def __init__(self, problems: list[str]):
        self.problems = problems
        super().__init__("Invalid configuration: " + "; ".join(problems))


class ProviderError(Exception):
    """An external service call failed.

    Carries the operation name (e.g. 'fetch_facilities') and the underlying
    transport or parse exception.
    """

    def __init__(self, operation: str, cause: Exception | str):
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation} failed: {cause}")


class TransportError(ProviderError):
    """Connection failure or request timeout."""


class DeserializationError(ProviderError):
    """Response body was not JSON or did not match the expected shape."""


class ProviderStatusError(ProviderError):
    """The service answered with a non-2xx status."""

    def __init__(self, operation: str, status_code: int, body: str = ""):
        self.status_code = status_code
        self.body = body
        detail = f"HTTP {status_code}"
        if body:
            detail += f": {body[:200]}"
        super().__init__(operation, detail)
