"""Canonical request construction for AWS Signature Version 4.

https://docs.aws.amazon.com/general/latest/gr/sigv4-create-canonical-request.html
"""

import dataclasses
import hashlib
import logging
import re
import urllib.parse
from collections.abc import Mapping

from yarl import URL

from .exceptions import MalformedUrlError

logger = logging.getLogger(__name__)

_SPACE_RUN = re.compile(" +")


@dataclasses.dataclass(frozen=True)
class HeaderPolicy:
    """Which headers take part in the canonical request.

    A header is excluded when its lowercased name starts with one of
    ``excluded_prefixes``, unless the name is listed in ``exceptions``.
    """

    excluded_prefixes: tuple[str, ...] = ()
    exceptions: frozenset[str] = frozenset()

    def includes(self, name: str) -> bool:
        name = name.lower()
        if name in self.exceptions:
            return True
        return not any(name.startswith(prefix) for prefix in self.excluded_prefixes)


# x-amz-* headers other than the date are added by transports and proxies
DEFAULT_HEADER_POLICY = HeaderPolicy(
    excluded_prefixes=("x-amz-",),
    exceptions=frozenset({"x-amz-date"}),
)
SIGN_ALL_HEADERS = HeaderPolicy()


def ensure_url(url: URL | str) -> URL:
    if isinstance(url, str):
        try:
            url = URL(url)
        except (TypeError, ValueError) as e:
            raise MalformedUrlError(url) from e
    if not url.host:
        raise MalformedUrlError(str(url))
    return url


def sha256_hex(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def percent_encode(value: str) -> str:
    """Encode everything outside ``A-Z a-z 0-9 - _ . ~`` as uppercase ``%XY``.

    Non-ASCII characters are encoded byte by byte from their UTF-8 form.
    """
    return urllib.parse.quote(value, safe="")


def canonical_uri(url: URL) -> str:
    # yarl already removed dot segments and re-encoded the path
    return url.raw_path or "/"


def canonical_query_string(url: URL) -> str:
    pairs = [(percent_encode(k), percent_encode(v)) for k, v in url.query.items()]
    return "&".join(f"{k}={v}" for k, v in sorted(pairs))


def _normalize_value(value: str) -> str:
    return _SPACE_RUN.sub(" ", value.strip())


def _group_headers(
    headers: Mapping[str, str], policy: HeaderPolicy
) -> dict[str, list[str]]:
    grouped: dict[str, list[str]] = {}
    for name, value in headers.items():
        name = name.strip().lower()
        if policy.includes(name):
            grouped.setdefault(name, []).append(_normalize_value(value))
    return grouped


def canonical_headers(
    headers: Mapping[str, str], policy: HeaderPolicy = DEFAULT_HEADER_POLICY
) -> str:
    """One ``name:value\\n`` line per included header, ordered by name.

    Repeated headers are folded into one line with their values sorted and
    joined by commas.
    """
    grouped = _group_headers(headers, policy)
    return "".join(
        f"{name}:{','.join(sorted(grouped[name]))}\n" for name in sorted(grouped)
    )


def signed_headers(
    headers: Mapping[str, str], policy: HeaderPolicy = DEFAULT_HEADER_POLICY
) -> str:
    return ";".join(sorted(_group_headers(headers, policy)))


def canonical_request(
    method: str,
    url: URL | str,
    headers: Mapping[str, str],
    payload: bytes = b"",
    policy: HeaderPolicy = DEFAULT_HEADER_POLICY,
) -> str:
    url = ensure_url(url)
    request = "\n".join(
        [
            method.upper(),
            canonical_uri(url),
            canonical_query_string(url),
            canonical_headers(headers, policy),
            signed_headers(headers, policy),
            sha256_hex(payload),
        ]
    )
    logger.debug("canonical request:\n%s", request)
    return request
