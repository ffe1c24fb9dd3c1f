# -*- coding: utf-8 -*-
"""
s3sigv4.signatures
~~~~~~~~~~~~~~~~~~

AWS Signature Version 4 header signing for S3.
"""

from .base import BaseSignature
from .v4 import (
    ALGORITHM,
    CanonicalRequest,
    RequestContext,
    SignatureResult,
    SignatureV4,
    derive_signing_key,
)

__all__ = [
    "ALGORITHM",
    "BaseSignature",
    "CanonicalRequest",
    "RequestContext",
    "SignatureResult",
    "SignatureV4",
    "derive_signing_key",
]
