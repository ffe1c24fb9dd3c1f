# -*- coding: utf-8 -*-
"""
s3sigv4.operations.object_requests
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

S3 object-level operations (download, upload, delete, head).
"""

from ..builder import DEFAULT_MIME_TYPE
from . import S3Request


class ObjectRequest(S3Request):
    """
    Run an arbitrary method against one object.

    The method is uppercased but otherwise not restricted.

    Args:
        conn: S3 connection object
        key (str): S3 object key
        bucket (str): S3 bucket name
        method (str): HTTP method
        body (bytes or str, optional): Request payload
        mime_type (str): Payload MIME type
    """

    def __init__(
        self, conn, key, bucket, method="GET", body=None, mime_type=DEFAULT_MIME_TYPE
    ):
        super(ObjectRequest, self).__init__(conn)
        self.key = key
        self.bucket = bucket
        self.method = method
        self.body = body
        self.mime_type = mime_type

    def run(self):
        return self._make_request(
            self.method, self.bucket, self.key, self.body, self.mime_type
        )


class GetRequest(S3Request):
    """
    Download an object from S3.

    Args:
        conn: S3 connection object
        key (str): S3 object key to download
        bucket (str): S3 bucket name
    """

    def __init__(self, conn, key, bucket):
        super(GetRequest, self).__init__(conn)
        self.key = key
        self.bucket = bucket

    def run(self):
        """
        Execute the download request.

        Returns:
            Response: HTTP response containing the object data
        """
        return self._make_request("GET", self.bucket, self.key)


class UploadRequest(S3Request):
    """
    Upload an object to S3 in a single PUT.

    Args:
        conn: S3 connection object
        key (str): S3 object key for the upload
        body (bytes or str): Object content
        bucket (str): S3 bucket name
        mime_type (str): MIME type of the content
    """

    def __init__(self, conn, key, body, bucket, mime_type=DEFAULT_MIME_TYPE):
        super(UploadRequest, self).__init__(conn)
        self.key = key
        self.body = body
        self.bucket = bucket
        self.mime_type = mime_type

    def run(self):
        """
        Execute the upload request.

        Returns:
            Response: HTTP response from the upload operation
        """
        return self._make_request(
            "PUT", self.bucket, self.key, self.body, self.mime_type
        )


class DeleteRequest(S3Request):
    """
    Delete an object from S3.

    Args:
        conn: S3 connection object
        key (str): S3 object key to delete
        bucket (str): S3 bucket name
    """

    def __init__(self, conn, key, bucket):
        super(DeleteRequest, self).__init__(conn)
        self.key = key
        self.bucket = bucket

    def run(self):
        return self._make_request("DELETE", self.bucket, self.key)


class HeadRequest(S3Request):
    """
    Get metadata for an S3 object without downloading content.

    Args:
        conn: S3 connection object
        key (str): S3 object key
        bucket (str): S3 bucket name
    """

    def __init__(self, conn, key, bucket):
        super(HeadRequest, self).__init__(conn)
        self.key = key
        self.bucket = bucket

    def run(self):
        """
        Execute the HEAD request.

        Returns:
            Response: HTTP response containing only headers/metadata
        """
        return self._make_request("HEAD", self.bucket, self.key)
