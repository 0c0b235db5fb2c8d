class VinylDNSError(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code:
            return f"HTTP {self.status_code}: {self.message}"
        return self.message


class MalformedUrlError(VinylDNSError):
    def __init__(self, url: str):
        super().__init__(f"URL has no parseable authority: {url!r}")
        self.url = url


class MissingCredentialError(VinylDNSError):
    def __init__(self, name: str):
        super().__init__(f"missing environment variable: {name}")
        self.name = name


class InvalidKeyLengthError(VinylDNSError):
    def __init__(self, message: str = "HMAC key must not be empty"):
        super().__init__(message)


class DecodeError(VinylDNSError):
    """The response body did not match the expected shape.

    The raw body is kept for diagnostics.
    """

    def __init__(self, message: str, raw_body: str):
        super().__init__(message)
        self.raw_body = raw_body

    def __str__(self) -> str:
        return f"failed deserializing response: {self.message}\n{self.raw_body}"


class TransportError(VinylDNSError):
    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str | None = None,
    ):
        super().__init__(message, status_code)
        self.body = body


class VinylDNSClientError(TransportError):
    pass


class VinylDNSServerError(TransportError):
    pass


class VinylDNSNotFoundError(VinylDNSClientError):
    def __init__(self, message: str = "The requested resource was not found"):
        super().__init__(message, status_code=404, body=message)
