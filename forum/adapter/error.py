"""Errors raised by adapters to external systems."""


class ProviderError(Exception):
    """An external provider could not serve a request.

    Attributes:
        provider: Name of the external system
        status_code: HTTP status returned, None for transport failures
    """

    def __init__(self, provider: str, message: str, status_code: int | None = None):
        self.provider = provider
        self.status_code = status_code
        super().__init__(f"{provider}: {message}")
