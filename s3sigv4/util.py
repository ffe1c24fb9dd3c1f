# -*- coding: utf-8 -*-
"""
s3sigv4.util
~~~~~~~~~~~~

Small helpers shared by the signer and the request layer.
"""

import hashlib
import hmac


def stringify(value):
    """
    Coerce a value to ``bytes``.

    ``str`` is UTF-8 encoded, ``bytes`` is returned as is and anything
    else goes through ``str()`` first.
    """
    if isinstance(value, bytes):
        return value
    if not isinstance(value, str):
        value = str(value)
    return value.encode("utf-8")


def sha256_hex(data):
    """Return the lowercase hex SHA-256 digest of ``data``."""
    return hashlib.sha256(stringify(data)).hexdigest()


def hmac_sha256(key, msg):
    """Return the raw HMAC-SHA256 of ``msg`` keyed with ``key``."""
    return hmac.new(stringify(key), stringify(msg), hashlib.sha256).digest()


# SHA-256 of the empty byte string, the payload hash of a bodiless request.
EMPTY_SHA256 = sha256_hex(b"")
