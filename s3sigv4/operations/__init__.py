# -*- coding: utf-8 -*-
"""
s3sigv4.operations
~~~~~~~~~~~~~~~~~~

Base class for S3 object request implementations.
"""

from ..builder import DEFAULT_MIME_TYPE


class S3Request(object):
    """
    Base class for all S3 requests.

    Holds the connection's request builder; subclasses describe one
    object operation and run it through the builder.

    Args:
        conn: The S3 connection object
    """

    def __init__(self, conn):
        self.builder = conn.builder

    def adapter(self):
        """
        Get the HTTP adapter for making requests.

        Returns the builder's adapter by default, but can be overridden
        for testing with mock adapters.
        """
        return self.builder.adapter()

    def run(self):
        """
        Execute the S3 request.

        Raises:
            NotImplementedError: If not implemented by subclass
        """
        raise NotImplementedError("Subclasses must implement the run() method")

    def _make_request(
        self, method, bucket, key, body=None, mime_type=DEFAULT_MIME_TYPE
    ):
        """
        Sign and send a request.

        Error statuses are returned to the caller, not raised.

        Returns:
            Response: The HTTP response object
        """
        signed = self.builder.build(bucket, key, method, body, mime_type)
        return self.builder.send(signed, adapter=self.adapter())
