# -*- coding: utf-8 -*-
"""
s3sigv4.builder
~~~~~~~~~~~~~~~

Build a SigV4 signed S3 object request and send it.
"""

import logging
from collections import OrderedDict, namedtuple

import requests

from .datetime_utils import amz_date, get_utc_datetime
from .signatures import RequestContext, SignatureV4
from .util import EMPTY_SHA256, sha256_hex

log = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "text/plain"

# Verbs dispatched through the adapter's shortcut methods; anything else
# goes through ``adapter.request``.
SHORTCUT_METHODS = frozenset(
    ["GET", "PUT", "POST", "DELETE", "HEAD", "OPTIONS", "PATCH"]
)

SignedRequest = namedtuple(
    "SignedRequest",
    [
        "method",
        "url",
        "headers",
        "body",
        "mime_type",
        "canonical_request",
        "string_to_sign",
        "signature",
    ],
)


def encode_body(body):
    """
    Normalize a request body to bytes.

    Returns None for a missing body; text is encoded as UTF-8.
    """
    if body is None or isinstance(body, bytes):
        return body
    if isinstance(body, bytearray):
        return bytes(body)
    if isinstance(body, str):
        return body.encode("utf-8")
    raise TypeError(
        "body must be bytes or str, not {0}".format(type(body).__name__)
    )


class SigV4RequestBuilder(object):
    """
    Assemble and dispatch header-signed S3 object requests.

    The builder keeps no state between calls. Every ``build`` reads the
    clock exactly once, so ``amz_date`` and the date in the credential
    scope always agree.

    Args:
        access_key (str): AWS access key
        secret_key (str): AWS secret key
        region (str): AWS region of the bucket
        clock (callable, optional): Returns the signing time as a datetime
        session (requests.Session, optional): Transport to send through
        tls (bool): Use https for the request URL
        verify (bool): Verify TLS certificates
        timeout (float, optional): Request timeout passed to requests
    """

    def __init__(
        self,
        access_key,
        secret_key,
        region,
        clock=None,
        session=None,
        tls=True,
        verify=True,
        timeout=None,
    ):
        self.signer = SignatureV4(access_key, secret_key, region)
        self.clock = clock or get_utc_datetime
        self.session = session
        self.tls = tls
        self.verify = verify
        self.timeout = timeout

    def __repr__(self):
        return "<SigV4RequestBuilder access_key={0!r} region={1!r}>".format(
            self.signer.access_key, self.signer.region
        )

    @property
    def region(self):
        return self.signer.region

    def host(self, bucket):
        """Virtual-hosted-style regional endpoint for ``bucket``."""
        return "{0}.s3.{1}.amazonaws.com".format(bucket, self.region)

    def url(self, bucket, object_key):
        """
        Generate the URL for an object.

        The key is used verbatim; escaping it is up to the caller.

        Examples:
            >>> builder.url('cleverelephant-west-1', 'META.json')
            'https://cleverelephant-west-1.s3.us-west-1.amazonaws.com/META.json'
        """
        protocol = "https" if self.tls else "http"
        return "{0}://{1}/{2}".format(protocol, self.host(bucket), object_key)

    def build(
        self, bucket, object_key, method="GET", body=None, mime_type=DEFAULT_MIME_TYPE
    ):
        """
        Build a signed request without sending it.

        Args:
            bucket (str): S3 bucket name
            object_key (str): Object key, already URL-path-safe
            method (str): HTTP method, any casing
            body (bytes or str, optional): Request payload
            mime_type (str): Payload MIME type, only signed with a body

        Returns:
            SignedRequest: The request ready for dispatch
        """
        method = method.upper()
        mime_type = mime_type.lower()
        body = encode_body(body)
        timestamp = amz_date(self.clock())
        host = self.host(bucket)

        if body is None:
            payload_hash = EMPTY_SHA256
        else:
            payload_hash = sha256_hex(body)
        log.debug("payload_hash: %s", payload_hash)

        result = self.signer.sign_request(
            RequestContext(
                method=method,
                host=host,
                canonical_uri="/" + object_key,
                payload_hash=payload_hash,
                amz_date=timestamp,
                mime_type=mime_type if body is not None else None,
            )
        )

        headers = OrderedDict(
            [
                ("Authorization", result.authorization),
                ("x-amz-content-sha256", payload_hash),
                ("x-amz-date", timestamp),
                ("host", host),
            ]
        )
        if body is not None:
            headers["Content-Type"] = mime_type

        return SignedRequest(
            method=method,
            url=self.url(bucket, object_key),
            headers=headers,
            body=body,
            mime_type=mime_type if body is not None else None,
            canonical_request=result.canonical_request,
            string_to_sign=result.string_to_sign,
            signature=result.signature,
        )

    def adapter(self):
        """
        Get the HTTP adapter for making requests.

        Returns the configured session, or the requests module itself.
        Tests override this with a mock adapter.
        """
        if self.session is not None:
            return self.session
        return requests

    def send(self, request, adapter=None):
        """
        Dispatch a signed request once.

        The response comes back untouched: error statuses are not raised
        and nothing is retried. Transport errors from requests propagate.

        Args:
            request (SignedRequest): Request built by :meth:`build`
            adapter (optional): Transport to use instead of :meth:`adapter`

        Returns:
            requests.Response: The raw HTTP response
        """
        kwargs = {
            "headers": request.headers,
            "data": request.body,
            "verify": self.verify,
            "timeout": self.timeout,
        }
        log.debug("s3 request: %s %s", request.method, request.url)

        if adapter is None:
            adapter = self.adapter()
        if request.method in SHORTCUT_METHODS:
            return getattr(adapter, request.method.lower())(request.url, **kwargs)
        return adapter.request(request.method, request.url, **kwargs)

    def build_and_send(
        self, bucket, object_key, method="GET", body=None, mime_type=DEFAULT_MIME_TYPE
    ):
        """Build a signed request and send it, returning the raw response."""
        return self.send(self.build(bucket, object_key, method, body, mime_type))


def s3_request(
    access_key,
    secret_key,
    region,
    bucket,
    object_key,
    method="GET",
    body=None,
    mime_type=DEFAULT_MIME_TYPE,
    clock=None,
    session=None,
):
    """
    Sign and send a single S3 object request.

    Examples:
        >>> s3_request(access, secret, 'us-west-1',
        ...            'cleverelephant-west-1', 'META.json')
        <Response [200]>
        >>> s3_request(access, secret, 'us-west-1', 'cleverelephant-west-1',
        ...            'testfile.txt', 'PUT', 'this is a test', 'text/plain')
        <Response [200]>

    Returns:
        requests.Response: The raw HTTP response
    """
    builder = SigV4RequestBuilder(
        access_key, secret_key, region, clock=clock, session=session
    )
    return builder.build_and_send(bucket, object_key, method, body, mime_type)
