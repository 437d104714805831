class CatalogError(Exception):
    def __init__(self, message: str, code: int = 500, details: str = ""):
        self.message = message
        self.code = code
        self.details = details
        super().__init__(self.message)

    def __str__(self):
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class NotInitializedError(CatalogError):
    def __init__(self) -> None:
        super().__init__("Exercise cache not initialized. Call initialize() first.", code=503)


class InitializationError(CatalogError):
    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(f"Failed to initialize exercise cache: {cause}", code=502)


class APIClientHTTPError(CatalogError):
    def __init__(
        self,
        status: int,
        text: str,
        *,
        method: str,
        url: str,
        retryable: bool = False,
    ) -> None:
        self.status = status
        self.text = text
        self.retryable = retryable
        super().__init__(
            f"HTTP {status} on {method.upper()} {url}: {text}" if text else f"HTTP {status} on {method.upper()} {url}",
            code=status or 500,
        )


class APIClientTransportError(CatalogError):
    def __init__(self, message: str) -> None:
        super().__init__(message, code=503)
