"""String matching, encoding and hashing helpers."""

import hashlib
import hmac
import html
import re
from enum import Enum
from urllib.parse import parse_qs, quote, quote_plus, unquote_plus

import pandas as pd

from dtext.logging import get_logger

_log = get_logger(__name__)

_TRUNCATE_SUFFIX = "..."

_EMAIL_RE = re.compile(r"^[\w.-]+@([\w-]+\.)+[\w-]{2,4}$")
_URL_RE = re.compile(r"http(s)?://([\w-]+\.)+[\w-]+(/[\w ./?%&=-]*)?")
_TAG_RE = re.compile(r"</?.+?>")
_HEX = "[0-9A-Fa-f]"
_GUID_BODY = rf"{_HEX}{{8}}-(?:{_HEX}{{4}}-){{3}}{_HEX}{{12}}"
_GUID_RE = re.compile(
    rf"^{_HEX}{{32}}$"
    rf"|^{_GUID_BODY}$"
    rf"|^\{{{_GUID_BODY}\}}$"
    rf"|^\({_GUID_BODY}\)$"
    rf"|^\{{0x{_HEX}{{1,8}}, ?0x{_HEX}{{1,4}}, ?0x{_HEX}{{1,4}}, ?"
    rf"\{{(?:0x{_HEX}{{1,2}}, ?){{7}}0x{_HEX}{{1,2}}\}}\}}$"
)


class HashType(Enum):
    """Supported hash algorithms."""

    MD5 = "md5"
    SHA1 = "sha1"
    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"
    RIPEMD160 = "ripemd160"
    HMACMD5 = "hmac-md5"
    HMACSHA1 = "hmac-sha1"
    HMACSHA256 = "hmac-sha256"
    HMACSHA384 = "hmac-sha384"
    HMACSHA512 = "hmac-sha512"

    @property
    def is_hmac(self) -> bool:
        return self.value.startswith("hmac-")

    @property
    def digest_name(self) -> str:
        return self.value.removeprefix("hmac-")


def _wildcard_to_regex(pattern: str) -> str:
    regex = re.escape(pattern)
    return (
        regex.replace(r"\[!", "[^")
        .replace(r"\[", "[")
        .replace(r"\]", "]")
        .replace(r"\-", "-")
        .replace(r"\?", ".")
        .replace(r"\*", ".*")
        .replace(r"\#", r"\d")
    )


def is_like(s: str | None, pattern: str | None) -> bool:
    """Match ``s`` against a VB ``Like`` wildcard pattern.

    ``?`` matches one character, ``*`` any run of characters, ``#`` one
    digit, ``[abc]`` / ``[a-z]`` a character set and ``[!abc]`` its
    complement. The whole string must match.

    Raises:
        ValueError: If the pattern is malformed (e.g. an unclosed ``[``).
    """
    if s is None or not pattern:
        return False
    try:
        return re.fullmatch(_wildcard_to_regex(pattern), s) is not None
    except re.error as exc:
        raise ValueError(f"Invalid pattern: {pattern}") from exc


def truncate(text: str | None, max_length: int) -> str | None:
    """Shorten ``text`` to ``max_length`` characters ending in "...".

    Text that already fits, or a ``max_length`` too small to hold the
    suffix, is returned unchanged.
    """
    if max_length <= 0:
        return text
    keep = max_length - len(_TRUNCATE_SUFFIX)
    if keep <= 0:
        return text
    if text is None or len(text) <= max_length:
        return text
    return text[:keep].rstrip() + _TRUNCATE_SUFFIX


def left(s: str, length: int) -> str:
    """First ``length`` characters of ``s``."""
    length = max(length, 0)
    return s[:length]


def right(s: str, length: int) -> str:
    """Last ``length`` characters of ``s``."""
    length = max(length, 0)
    if length == 0:
        return ""
    return s[-length:]


def is_valid_email(s: str) -> bool:
    return _EMAIL_RE.match(s) is not None


def is_valid_url(text: str) -> bool:
    return _URL_RE.search(text) is not None


def strip_html(text: str) -> str:
    """Replace every HTML tag with a single space."""
    return _TAG_RE.sub(" ", text)


def is_guid(s: str) -> bool:
    """True if ``s`` is a GUID in any of the common textual forms."""
    if s is None:
        raise TypeError("s must not be None")
    return _GUID_RE.match(s) is not None


def is_date(text: str | None) -> bool:
    """True if ``text`` parses as a date."""
    if not text:
        return False
    try:
        pd.to_datetime(text)
    except (ValueError, OverflowError):
        return False
    return True


def compute_hash(text: str, hash_type: HashType, key: str = "") -> str:
    """Hex digest of ``text`` with the given algorithm.

    HMAC variants are keyed with ``key``. Returns an empty string when the
    algorithm is not available in this Python build.
    """
    data = text.encode("ascii", errors="replace")
    try:
        if hash_type.is_hmac:
            digest = hmac.new(
                key.encode("ascii", errors="replace"), data, hash_type.digest_name
            )
        else:
            digest = hashlib.new(hash_type.digest_name, data)
    except ValueError:
        _log.warning("hash_algorithm_unavailable", hash_type=hash_type.name)
        return ""
    return digest.hexdigest()


def html_encode(data: str) -> str:
    return html.escape(data)


def html_decode(data: str) -> str:
    return html.unescape(data)


def url_encode(url: str) -> str:
    return quote_plus(url)


def url_decode(url: str) -> str:
    return unquote_plus(url)


def url_path_encode(url: str) -> str:
    """Percent-encode spaces and unsafe characters, keeping URL delimiters."""
    return quote(url, safe=":/?#[]@!$&'()*+,;=%")


def parse_query_string(query: str) -> dict[str, list[str]]:
    return parse_qs(query.lstrip("?"), keep_blank_values=True)
