# utils/validators.py
from __future__ import annotations

import re

from ..constants import NICKNAME_MAX_LEN, NICKNAME_MIN_LEN


def non_empty(text: str) -> bool:
    """
    True if `text` is not None/empty.

    Whitespace is NOT stripped: a field holding only spaces counts as filled
    and is left for the pattern checks to reject.
    """
    return bool(text)


# ---- Nickname ----

# Letters (any script), space, period, apostrophe, hyphen.
# `[^\W\d_]` is "word char minus digits and underscore", i.e. letters plus the
# few numeric-but-not-decimal symbols; those are filtered in is_nickname_valid().
NICKNAME_PATTERN = re.compile(
    r"^(?:[^\W\d_]|[ .'-]){%d,%d}$" % (NICKNAME_MIN_LEN, NICKNAME_MAX_LEN)
)


def is_nickname_valid(name: str) -> bool:
    """
    True iff the whole of `name` is 2-10 Unicode letters, spaces, periods,
    apostrophes or hyphens.
    """
    if not name or NICKNAME_PATTERN.fullmatch(name) is None:
        return False
    # '²', '½' and 'Ⅻ' are \w but not letters
    return all(ch.isalpha() or ch in " .'-" for ch in name)


# ---- Host (general web URL) ----

_UCS_CHAR = "\u00a0-\ud7ff\uf900-\ufdcf\ufdf0-\uffef\U00010000-\U000efffd"
_LABEL_CHAR = "a-zA-Z0-9" + _UCS_CHAR
_TLD_CHAR = "a-zA-Z" + _UCS_CHAR

_IRI_LABEL = rf"[{_LABEL_CHAR}](?:[{_LABEL_CHAR}_\-]{{0,61}}[{_LABEL_CHAR}])?"
_PUNYCODE_TLD = r"xn\-\-[a-zA-Z0-9_\-]{0,58}[a-zA-Z0-9_]"
_TLD = rf"(?:{_PUNYCODE_TLD}|[{_TLD_CHAR}]{{2,63}})"
_HOST_NAME = rf"(?:{_IRI_LABEL}\.)+{_TLD}"

_IP_ADDRESS = (
    r"(?:(?:25[0-5]|2[0-4][0-9]|[0-1][0-9]{2}|[1-9][0-9]|[1-9])\."
    r"(?:25[0-5]|2[0-4][0-9]|[0-1][0-9]{2}|[1-9][0-9]|[1-9]|0)\."
    r"(?:25[0-5]|2[0-4][0-9]|[0-1][0-9]{2}|[1-9][0-9]|[1-9]|0)\."
    r"(?:25[0-5]|2[0-4][0-9]|[0-1][0-9]{2}|[1-9][0-9]|[0-9]))"
)
_DOMAIN_NAME = rf"(?:{_HOST_NAME}|{_IP_ADDRESS})"

_PROTOCOL = r"(?i:http|https|rtsp)://"
_URL_CHAR = r"[a-zA-Z0-9$\-_.+!*'(),;?&=]|(?:%[a-fA-F0-9]{2})"
_USER_INFO = rf"(?:{_URL_CHAR}){{1,64}}(?::(?:{_URL_CHAR}){{1,25}})?@"
_PORT_NUMBER = r":[0-9]{1,5}"
_PATH_AND_QUERY = rf"[/?](?:[{_LABEL_CHAR};/?:@&=#~\-.+!*'(),_$]|(?:%[a-fA-F0-9]{{2}}))*"

WEB_URL_PATTERN = re.compile(
    rf"^(?:{_PROTOCOL}(?:{_USER_INFO})?)?"
    rf"{_DOMAIN_NAME}"
    rf"(?:{_PORT_NUMBER})?"
    rf"(?:{_PATH_AND_QUERY})?$"
)


def is_host_valid(host: str) -> bool:
    """
    True iff the whole of `host` looks like a web URL:
    [scheme://[user[:pass]@]]host.tld|ipv4[:port][/path?query]

    Bare single-label names such as "localhost" are rejected.
    """
    if not host:
        return False
    return WEB_URL_PATTERN.fullmatch(host) is not None
