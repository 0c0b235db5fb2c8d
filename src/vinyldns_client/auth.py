"""AWS Signature Version 4 authentication for VinylDNS requests."""

import dataclasses
import datetime as dt
import hashlib
import hmac
import logging
from typing import Self

from multidict import CIMultiDict
from yarl import URL

from .canonical import (
    DEFAULT_HEADER_POLICY,
    HeaderPolicy,
    canonical_request,
    ensure_url,
    sha256_hex,
    signed_headers,
)
from .exceptions import InvalidKeyLengthError

logger = logging.getLogger(__name__)

ALGORITHM = "AWS4-HMAC-SHA256"
SCOPE_TERMINATOR = "aws4_request"
DEFAULT_CONTENT_TYPE = "application/x-www-form-urlencoded; charset=utf-8"


@dataclasses.dataclass
class Request:
    """An outgoing HTTP request. Signing adds headers to it in place."""

    method: str
    url: URL
    headers: CIMultiDict[str] = dataclasses.field(default_factory=CIMultiDict)
    body: bytes = b""

    def __post_init__(self):
        self.url = ensure_url(self.url)
        if not isinstance(self.headers, CIMultiDict):
            self.headers = CIMultiDict(self.headers)


@dataclasses.dataclass(frozen=True)
class Credentials:
    access_key: str
    secret_key: str = dataclasses.field(repr=False)


@dataclasses.dataclass(frozen=True)
class SigningContext:
    """The single timestamp and scope every signing stage must share."""

    timestamp: dt.datetime
    region: str
    service: str

    def __post_init__(self):
        timestamp = self.timestamp
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=dt.UTC)
        timestamp = timestamp.astimezone(dt.UTC).replace(microsecond=0)
        object.__setattr__(self, "timestamp", timestamp)

    @classmethod
    def now(cls, region: str, service: str) -> Self:
        return cls(dt.datetime.now(dt.UTC), region, service)

    @property
    def amz_date(self) -> str:
        return format_amz_date(self.timestamp)

    @property
    def date_stamp(self) -> str:
        return format_date_stamp(self.timestamp)

    @property
    def scope(self) -> str:
        return credential_scope(self.timestamp, self.region, self.service)


def format_amz_date(timestamp: dt.datetime) -> str:
    return timestamp.strftime("%Y%m%dT%H%M%SZ")


def format_date_stamp(timestamp: dt.datetime) -> str:
    return timestamp.strftime("%Y%m%d")


def credential_scope(timestamp: dt.datetime, region: str, service: str) -> str:
    return f"{format_date_stamp(timestamp)}/{region}/{service}/{SCOPE_TERMINATOR}"


def string_to_sign(
    timestamp: dt.datetime,
    region: str,
    service: str,
    hashed_canonical_request: str,
) -> str:
    return "\n".join(
        [
            ALGORITHM,
            format_amz_date(timestamp),
            credential_scope(timestamp, region, service),
            hashed_canonical_request,
        ]
    )


def _hmac_sha256(key: bytes, data: str) -> bytes:
    if not key:
        raise InvalidKeyLengthError()
    return hmac.new(key, data.encode("utf-8"), hashlib.sha256).digest()


def derive_signing_key(secret_key: str, date: str, region: str, service: str) -> bytes:
    """Derive the scoped signing key.

    Each stage feeds its raw digest into the next as the key, so the secret
    itself never signs request data and a key derived for one
    date/region/service cannot sign for another.
    """
    k_date = _hmac_sha256(f"AWS4{secret_key}".encode(), date)
    k_region = _hmac_sha256(k_date, region)
    k_service = _hmac_sha256(k_region, service)
    return _hmac_sha256(k_service, SCOPE_TERMINATOR)


def signature(
    secret_key: str, date: str, region: str, service: str, string_to_sign: str
) -> str:
    signing_key = derive_signing_key(secret_key, date, region, service)
    return hmac.new(
        signing_key,
        string_to_sign.encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()


def authorization_header(
    access_key: str, scope: str, signed_headers: str, signature: str
) -> str:
    return (
        f"{ALGORITHM} "
        f"Credential={access_key}/{scope}, "
        f"SignedHeaders={signed_headers}, "
        f"Signature={signature}"
    )


def prepare_request(request: Request, context: SigningContext) -> None:
    """Add the headers that must be present before the request is signed."""
    headers = request.headers
    headers.popall("Authorization", None)
    if "Host" not in headers:
        headers["Host"] = request.url.host_subcomponent
    if "Content-Type" not in headers:
        headers["Content-Type"] = DEFAULT_CONTENT_TYPE
    headers["X-Amz-Date"] = context.amz_date
    headers["X-Amz-Content-Sha256"] = sha256_hex(request.body)


def compute_authorization(
    request: Request,
    credentials: Credentials,
    context: SigningContext,
    policy: HeaderPolicy = DEFAULT_HEADER_POLICY,
) -> str:
    """Return the Authorization value for the request as it stands now."""
    canonical = canonical_request(
        request.method, request.url, request.headers, request.body, policy
    )
    to_sign = string_to_sign(
        context.timestamp,
        context.region,
        context.service,
        sha256_hex(canonical.encode("utf-8")),
    )
    logger.debug("string to sign:\n%s", to_sign)
    sig = signature(
        credentials.secret_key,
        context.date_stamp,
        context.region,
        context.service,
        to_sign,
    )
    return authorization_header(
        credentials.access_key,
        context.scope,
        signed_headers(request.headers, policy),
        sig,
    )


def sign_request(
    request: Request,
    credentials: Credentials,
    context: SigningContext,
    policy: HeaderPolicy = DEFAULT_HEADER_POLICY,
) -> str:
    prepare_request(request, context)
    authorization = compute_authorization(request, credentials, context, policy)
    request.headers["Authorization"] = authorization
    return authorization


class AWSSignatureV4:
    def __init__(
        self,
        access_key: str,
        secret_key: str,
        region: str = "us-east-1",
        service: str = "s3",
        header_policy: HeaderPolicy = DEFAULT_HEADER_POLICY,
    ):
        self.credentials = Credentials(access_key, secret_key)
        self.region = region
        self.service = service
        self.header_policy = header_policy

    @property
    def access_key(self) -> str:
        return self.credentials.access_key

    def context(self, timestamp: dt.datetime | None = None) -> SigningContext:
        if timestamp is None:
            return SigningContext.now(self.region, self.service)
        return SigningContext(timestamp, self.region, self.service)

    def sign(self, request: Request, timestamp: dt.datetime | None = None) -> str:
        return sign_request(
            request, self.credentials, self.context(timestamp), self.header_policy
        )
