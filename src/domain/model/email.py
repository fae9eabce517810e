"""Email address well-formedness check.

Only structure is checked. Nothing here resolves DNS or MX records.
"""

import re

import idna

MAX_LOCAL_LENGTH = 64
MAX_DOMAIN_LENGTH = 255
MAX_TLD_LENGTH = 24  # longest TLD currently delegated

AT_SEPARATOR = '@'
DOT_SEPARATOR = '.'
ACE_PREFIX = 'xn--'

LOCAL_PATTERN = re.compile(r"[a-zA-Z0-9!#$%&'*+/=?^_`{|}~.-]+")
HOST_PATTERN = re.compile(r"[^\s]+\.[^\s]+")
LOCAL_DOT_PATTERN = re.compile(r"(^\.)|(\.\Z)|(\.{2,})")


def _encode_label(label: str, strict: bool) -> str:
    if label.isascii():
        return label
    if strict:
        return idna.encode(label, uts46=True).decode('ascii')
    # Local parts are not DNS labels: map, then punycode without IDNA 2008 checks
    mapped = idna.uts46_remap(label, std3_rules=False)
    if mapped.isascii():
        return mapped
    return ACE_PREFIX + mapped.encode('punycode').decode('ascii')


def to_ascii(value: str, strict: bool = True) -> str:
    """Return the ASCII-compatible encoding of a dot-separated string.

    ASCII labels are kept as they are. Other labels are UTS 46 mapped
    (case folding, compatibility forms) and punycoded into ``xn--`` labels.
    With ``strict`` the mapped label must also be a valid IDNA 2008 label,
    which is what hosts need; local parts pass ``strict=False`` so symbols
    such as ``+`` survive.

    Raises:
        idna.IDNAError: a label cannot be mapped or is not valid IDNA
    """
    return DOT_SEPARATOR.join(
        _encode_label(label, strict) for label in value.split(DOT_SEPARATOR)
    )


def is_email(email: str) -> bool:
    """Return True if ``email`` is a structurally valid address."""
    if not email:
        return False

    parts = email.split(AT_SEPARATOR)
    if len(parts) != 2:
        return False
    local, host = parts

    if not local or len(local) > MAX_LOCAL_LENGTH:
        return False

    # Exactly one dot: sub-domains are not accepted.
    host_parts = host.split(DOT_SEPARATOR)
    if len(host_parts) != 2:
        return False
    domain, ext = host_parts

    if not domain or len(domain) > MAX_DOMAIN_LENGTH:
        return False
    if not ext or len(ext) > MAX_TLD_LENGTH:
        return False

    try:
        puny_local = to_ascii(local, strict=False)
        puny_host = to_ascii(host)
    except UnicodeError:
        return False

    if LOCAL_DOT_PATTERN.search(puny_local):
        return False
    if not LOCAL_PATTERN.fullmatch(puny_local):
        return False
    return HOST_PATTERN.fullmatch(puny_host) is not None
