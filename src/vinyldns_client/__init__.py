"""Asyncio client for the VinylDNS API with AWS SigV4 request signing."""

__version__ = "0.1.0"

from .auth import AWSSignatureV4, Credentials, Request, SigningContext, sign_request
from .canonical import DEFAULT_HEADER_POLICY, SIGN_ALL_HEADERS, HeaderPolicy
from .client import VinylDNSClient
from .exceptions import (
    DecodeError,
    InvalidKeyLengthError,
    MalformedUrlError,
    MissingCredentialError,
    TransportError,
    VinylDNSClientError,
    VinylDNSError,
    VinylDNSNotFoundError,
    VinylDNSServerError,
)

__all__ = [
    "VinylDNSClient",
    "AWSSignatureV4",
    "Credentials",
    "Request",
    "SigningContext",
    "sign_request",
    "HeaderPolicy",
    "DEFAULT_HEADER_POLICY",
    "SIGN_ALL_HEADERS",
    "VinylDNSError",
    "MalformedUrlError",
    "MissingCredentialError",
    "InvalidKeyLengthError",
    "DecodeError",
    "TransportError",
    "VinylDNSClientError",
    "VinylDNSServerError",
    "VinylDNSNotFoundError",
]
