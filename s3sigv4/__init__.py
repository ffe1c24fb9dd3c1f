# -*- coding: utf-8 -*-
from .builder import SigV4RequestBuilder, SignedRequest, s3_request
from .connection import Connection, Pool
from .signatures import CanonicalRequest, SignatureV4, derive_signing_key
from .util import EMPTY_SHA256

__title__ = 's3sigv4'
__version__ = '1.0.0'
__license__ = 'MIT'
__all__ = [
    "CanonicalRequest",
    "Connection",
    "EMPTY_SHA256",
    "Pool",
    "SigV4RequestBuilder",
    "SignatureV4",
    "SignedRequest",
    "derive_signing_key",
    "s3_request",
]
