# -*- coding: utf-8 -*-
"""
s3sigv4.connection
~~~~~~~~~~~~~~~~~~

Connection front ends: a synchronous ``Connection`` and a thread backed
``Pool`` that returns futures.
"""

import os
from concurrent.futures import ThreadPoolExecutor

from .builder import DEFAULT_MIME_TYPE, SigV4RequestBuilder
from .operations.object_requests import (
    DeleteRequest,
    GetRequest,
    HeadRequest,
    ObjectRequest,
    UploadRequest,
)


class Base(object):
    """
    Shared behaviour of the connection front ends.

    Args:
        access_key (str): AWS access key
        secret_key (str): AWS secret key
        region (str): AWS region of the buckets
        default_bucket (str, optional): Bucket used when none is given
        tls (bool): Use https
        verify (bool): Verify TLS certificates
        timeout (float, optional): Per request timeout
        clock (callable, optional): Signing clock, UTC now by default
        session (requests.Session, optional): Transport to send through
    """

    def __init__(
        self,
        access_key,
        secret_key,
        region="us-east-1",
        default_bucket=None,
        tls=True,
        verify=True,
        timeout=None,
        clock=None,
        session=None,
    ):
        self.builder = SigV4RequestBuilder(
            access_key,
            secret_key,
            region,
            clock=clock,
            session=session,
            tls=tls,
            verify=verify,
            timeout=timeout,
        )
        self.default_bucket = default_bucket

    @classmethod
    def from_environment(cls, region=None, **kwargs):
        """
        Create a connection from the standard AWS environment variables.

        Reads ``AWS_ACCESS_KEY_ID`` and ``AWS_SECRET_ACCESS_KEY``. The region
        comes from the argument, then ``AWS_REGION``, then
        ``AWS_DEFAULT_REGION``, then ``us-east-1``.

        Raises:
            ValueError: If either credential is missing
        """
        access_key = os.environ.get("AWS_ACCESS_KEY_ID")
        secret_key = os.environ.get("AWS_SECRET_ACCESS_KEY")
        if not access_key or not secret_key:
            raise ValueError("AWS credentials not found in environment")

        region = (
            region
            or os.environ.get("AWS_REGION")
            or os.environ.get("AWS_DEFAULT_REGION")
            or "us-east-1"
        )
        return cls(access_key, secret_key, region, **kwargs)

    def __repr__(self):
        return "<{0} access_key={1!r} region={2!r}>".format(
            self.__class__.__name__, self.builder.signer.access_key, self.region
        )

    @property
    def region(self):
        return self.builder.region

    def bucket(self, bucket):
        """
        Resolve the bucket for a request.

        Raises:
            ValueError: If no bucket is given and there is no default
        """
        if bucket is None:
            if self.default_bucket is None:
                raise ValueError("You must specify a bucket or a default bucket")
            return self.default_bucket
        return bucket

    def get(self, key, bucket=None):
        """Download an object."""
        return self._handle_request(GetRequest(self, key, self.bucket(bucket)))

    def upload(self, key, body, bucket=None, mime_type=DEFAULT_MIME_TYPE):
        """Upload ``body`` to ``key`` in a single PUT."""
        return self._handle_request(
            UploadRequest(self, key, body, self.bucket(bucket), mime_type=mime_type)
        )

    def delete(self, key, bucket=None):
        """Delete an object."""
        return self._handle_request(DeleteRequest(self, key, self.bucket(bucket)))

    def head(self, key, bucket=None):
        """Fetch an object's headers."""
        return self._handle_request(HeadRequest(self, key, self.bucket(bucket)))

    def request(
        self, key, method="GET", body=None, mime_type=DEFAULT_MIME_TYPE, bucket=None
    ):
        """Run any method against an object."""
        return self._handle_request(
            ObjectRequest(self, key, self.bucket(bucket), method, body, mime_type)
        )

    def run(self, request):
        return self._handle_request(request)

    def _handle_request(self, request):
        raise NotImplementedError()


class Connection(Base):
    """Runs every request synchronously and returns the response."""

    def _handle_request(self, request):
        return request.run()


class Pool(Base):
    """
    Runs requests on a thread pool and returns futures.

    Requests share nothing but the stateless builder, so they can run
    concurrently. Each request goes through the requests module directly;
    a shared ``requests.Session`` is not thread-safe and is refused.

    Args:
        size (int): Number of worker threads

    Raises:
        ValueError: If a ``session`` is given
    """

    def __init__(self, access_key, secret_key, region="us-east-1", size=5, **kwargs):
        if kwargs.get("session") is not None:
            raise ValueError("Pool cannot share a requests.Session between threads")
        super(Pool, self).__init__(access_key, secret_key, region, **kwargs)
        self.executor = ThreadPoolExecutor(max_workers=size)

    def _handle_request(self, request):
        return self.executor.submit(request.run)

    def close(self, wait=True):
        self.executor.shutdown(wait=wait)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
