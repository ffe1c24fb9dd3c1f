# -*- coding: utf-8 -*-
"""
s3sigv4.signatures.v4
~~~~~~~~~~~~~~~~~~~~~

AWS Signature Version 4 implementation for S3 header-based auth.

The canonical request, the string to sign and the Authorization header
all have byte-exact formats; any deviation yields a request S3 rejects
with ``SignatureDoesNotMatch`` rather than a format error.
"""

import logging
from collections import namedtuple

from ..util import hmac_sha256, sha256_hex
from .base import BaseSignature

log = logging.getLogger(__name__)

ALGORITHM = "AWS4-HMAC-SHA256"
SERVICE = "s3"
TERMINATOR = "aws4_request"


def derive_signing_key(secret_key, date_stamp, region, service=SERVICE):
    """
    Derive the request-scoped signing key from the account secret.

    Each HMAC stage narrows the key to the date, then the region, then
    the service, then the request type.

    Args:
        secret_key (str): AWS secret key
        date_stamp (str): Date in ``YYYYMMDD`` form
        region (str): AWS region
        service (str): AWS service name

    Returns:
        bytes: 32 byte signing key
    """
    date_key = hmac_sha256("AWS4" + secret_key, date_stamp)
    date_region_key = hmac_sha256(date_key, region)
    date_region_service_key = hmac_sha256(date_region_key, service)
    return hmac_sha256(date_region_service_key, TERMINATOR)


class CanonicalRequest(
    namedtuple(
        "CanonicalRequest",
        ["method", "uri", "query_string", "headers", "payload_hash"],
    )
):
    """
    Structured form of a SigV4 canonical request.

    ``headers`` is a sequence of ``(name, value)`` pairs. Names are
    lowercased and the pairs sorted by name when serialized.
    """

    __slots__ = ()

    def _sorted_headers(self):
        return sorted(
            (name.lower(), str(value).strip()) for name, value in self.headers
        )

    @property
    def signed_headers(self):
        """Semicolon separated list of the signed header names."""
        return ";".join(name for name, _ in self._sorted_headers())

    def serialize(self):
        """
        Encode the canonical request.

        Layout is method, URI, query string, one ``name:value\\n`` line per
        header, signed header list and payload hash joined by newlines,
        which leaves exactly one blank line after the header block.

        Returns:
            bytes: UTF-8 encoded canonical request
        """
        canonical_headers = "".join(
            "{0}:{1}\n".format(name, value) for name, value in self._sorted_headers()
        )
        return "\n".join(
            [
                self.method,
                self.uri,
                self.query_string,
                canonical_headers,
                self.signed_headers,
                self.payload_hash,
            ]
        ).encode("utf-8")

    def hexdigest(self):
        """Hex SHA-256 of the serialized canonical request."""
        return sha256_hex(self.serialize())


# Everything about a single request that goes into its signature.
# ``mime_type`` is None for a request without a body.
RequestContext = namedtuple(
    "RequestContext",
    ["method", "host", "canonical_uri", "payload_hash", "amz_date", "mime_type"],
)

SignatureResult = namedtuple(
    "SignatureResult",
    [
        "canonical_request",
        "string_to_sign",
        "signed_headers",
        "signature",
        "authorization",
    ],
)


class SignatureV4(BaseSignature):
    """
    AWS Signature Version 4 implementation.

    Signs a fixed header set: ``host``, ``x-amz-content-sha256`` and
    ``x-amz-date``, plus ``content-type`` when the request carries a body.
    Signing any other header (``x-amz-acl``, user metadata, ``range``) is
    not supported.
    """

    def __init__(self, access_key, secret_key, region, service=SERVICE):
        """
        Initialize Signature Version 4.

        Args:
            access_key (str): AWS access key
            secret_key (str): AWS secret key
            region (str): AWS region
            service (str): AWS service name, ``s3`` unless testing
        """
        super(SignatureV4, self).__init__(access_key, secret_key, region)
        self.service = service

    def sign_request(self, context):
        """
        Sign request using AWS Signature Version 4.

        Args:
            context (RequestContext): The request to sign

        Returns:
            SignatureResult: Canonical request, string to sign, signature
            and the Authorization header value
        """
        date_stamp = context.amz_date[:8]

        canonical_request = self.canonical_request(context)
        string_to_sign = self.string_to_sign(canonical_request, context.amz_date)
        signature = self.signature(string_to_sign, date_stamp)
        signed_headers = canonical_request.signed_headers

        if log.isEnabledFor(logging.DEBUG):
            log.debug("canonical_request: %r", canonical_request.serialize())
            log.debug("string_to_sign: %r", string_to_sign)

        return SignatureResult(
            canonical_request=canonical_request,
            string_to_sign=string_to_sign,
            signed_headers=signed_headers,
            signature=signature,
            authorization=self.authorization_header(
                date_stamp, signed_headers, signature
            ),
        )

    def canonical_headers(self, context):
        """
        Get the signed header pairs in canonical order.

        ``content-type`` sorts ahead of the other three, so it simply
        leads the list when present.
        """
        headers = [
            ("host", context.host),
            ("x-amz-content-sha256", context.payload_hash),
            ("x-amz-date", context.amz_date),
        ]
        if context.mime_type is not None:
            headers.insert(0, ("content-type", context.mime_type))
        return headers

    def canonical_request(self, context):
        """Build the canonical request. The query string is always empty."""
        return CanonicalRequest(
            method=context.method,
            uri=context.canonical_uri,
            query_string="",
            headers=tuple(self.canonical_headers(context)),
            payload_hash=context.payload_hash,
        )

    def credential_scope(self, date_stamp):
        return "{0}/{1}/{2}/{3}".format(
            date_stamp, self.region, self.service, TERMINATOR
        )

    def string_to_sign(self, canonical_request, amz_date):
        """
        Create the string to sign for Signature Version 4.

        Args:
            canonical_request (CanonicalRequest): The canonical request
            amz_date (str): Request timestamp, ``YYYYMMDDTHHMMSSZ``

        Returns:
            str: String to sign
        """
        return "\n".join(
            [
                ALGORITHM,
                amz_date,
                self.credential_scope(amz_date[:8]),
                canonical_request.hexdigest(),
            ]
        )

    def signature(self, string_to_sign, date_stamp):
        """
        Calculate the hex signature using the derived signing key.

        Args:
            string_to_sign (str): The string to sign
            date_stamp (str): Date stamp (YYYYMMDD)

        Returns:
            str: Hex-encoded signature
        """
        signing_key = derive_signing_key(
            self.secret_key, date_stamp, self.region, self.service
        )
        return hmac_sha256(signing_key, string_to_sign).hex()

    def authorization_header(self, date_stamp, signed_headers, signature):
        return "{0} Credential={1}/{2}, SignedHeaders={3}, Signature={4}".format(
            ALGORITHM,
            self.access_key,
            self.credential_scope(date_stamp),
            signed_headers,
            signature,
        )
