# -*- coding: utf-8 -*-
"""
s3sigv4.signatures.base
~~~~~~~~~~~~~~~~~~~~~~~

Base class for AWS signature implementations.
"""


class BaseSignature(object):
    """Base class for AWS signature implementations."""

    def __init__(self, access_key, secret_key, region):
        """
        Initialize the signature implementation.

        Args:
            access_key (str): AWS access key
            secret_key (str): AWS secret key
            region (str): AWS region the requests are scoped to
        """
        self.access_key = access_key
        self.secret_key = secret_key
        self.region = region

    def __repr__(self):
        return "<{0} access_key={1!r} region={2!r}>".format(
            self.__class__.__name__, self.access_key, self.region
        )

    def sign_request(self, request):
        """
        Sign the given request.

        Args:
            request: The request description to sign

        Returns:
            The signing result
        """
        raise NotImplementedError("Subclasses must implement sign_request")
