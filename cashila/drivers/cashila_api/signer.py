# -*- coding: utf-8 -*-
# cashila/drivers/cashila_api/signer.py
"""
Request signer for the Cashila API.

    Base64Encode(
      HMAC-SHA512(
        "PUT/v1/billpays/create" + SHA256("1434363295" + '{"based_on":123}'),
        Base64Decode(secret)
      )
    )

- nonce: microseconds since epoch, decimal text, minted per call
- the SHA-256 digest goes into the canonical string as raw bytes, not hex
- the leading "/api" of the request path is not part of the signed path
"""
import base64
import hashlib
import hmac
import time
from collections import namedtuple

API_PREFIX = "/api"

HEADER_USER = "API-User"
HEADER_NONCE = "API-Nonce"
HEADER_SIGN = "API-Sign"


RequestDescriptor = namedtuple("RequestDescriptor", ["http_method", "path", "body"])


def make_descriptor(http_method, path, body=None):
    """Build a RequestDescriptor with the body normalized to bytes."""
    if body is None:
        body = b""
    elif isinstance(body, str):
        body = body.encode("utf-8")
    return RequestDescriptor(str(http_method).upper(), path, bytes(body))


class SignatureHeaders(namedtuple("SignatureHeaders", ["user_id", "nonce", "signature"])):
    __slots__ = ()

    def as_headers(self):
        return {
            HEADER_USER: self.user_id,
            HEADER_NONCE: self.nonce,
            HEADER_SIGN: self.signature,
        }

    def apply(self, headers=None):
        """Return a copy of ``headers`` with the three auth headers added."""
        merged = dict(headers or {})
        merged.update(self.as_headers())
        return merged


def make_nonce(clock=time.time_ns):
    """floor(epoch seconds * 1e6) as decimal text. ``clock`` returns nanoseconds."""
    return str(clock() // 1000)


def path_for_signing(path):
    if path.startswith(API_PREFIX):
        return path[len(API_PREFIX):]
    return path


def canonical_message(http_method, path, nonce, body=b""):
    """
    Canonical bytes that get MAC'd:
        upper(method) + path_for_signing(path) + SHA256(nonce + body)
    """
    if isinstance(body, str):
        body = body.encode("utf-8")
    digest = hashlib.sha256(nonce.encode("ascii") + (body or b"")).digest()
    prefix = str(http_method).upper() + path_for_signing(path)
    return prefix.encode("utf-8") + digest


def compute_signature(secret_bytes, canonical):
    mac = hmac.new(secret_bytes, canonical, digestmod=hashlib.sha512)
    return base64.b64encode(mac.digest()).decode("ascii")


def sign(descriptor, credential, clock=time.time_ns):
    """
    Compute the authentication headers for one outgoing request.

    Args:
        descriptor: RequestDescriptor (method, path, body bytes)
        credential: Credential holding the token and base64 secret
        clock: nanosecond wall clock used for the nonce

    Returns:
        SignatureHeaders

    Raises:
        MissingCredentials: token or secret is not set
    """
    token, key = credential.require()
    nonce = make_nonce(clock)
    canonical = canonical_message(descriptor.http_method, descriptor.path, nonce, descriptor.body)
    return SignatureHeaders(token, nonce, compute_signature(key, canonical))


class Signer:
    """Request signer bound to one credential."""

    def __init__(self, credential, clock=time.time_ns):
        self.credential = credential
        self._clock = clock

    def sign(self, descriptor):
        return sign(descriptor, self.credential, clock=self._clock)

    def sign_headers(self, descriptor, headers=None):
        """Return ``headers`` merged with freshly computed auth headers."""
        return self.sign(descriptor).apply(headers)
