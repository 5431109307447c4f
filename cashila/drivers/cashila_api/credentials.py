# -*- coding: utf-8 -*-
# cashila/drivers/cashila_api/credentials.py
# Client credential holder with an explicit two-state bootstrap.

import base64
import binascii
import threading
from enum import Enum

from .errors import CredentialStateError, MissingCredentials


class AuthState(Enum):
    """凭证状态"""
    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATED = "authenticated"


class Credential:
    """
    API凭证封装
    - client_id: 每个请求都会带上的客户端标识（API-Client）
    - token/secret: 签名所需，可以在构造时给出，也可以在 signup 后通过 authenticate() 设置一次
    - secret 以 base64 文本保存，仅在签名时解码为原始字节
    """

    def __init__(self, client_id, token=None, secret=None):
        self.client_id = client_id
        self._token = token or None
        self._secret = secret or None
        self._lock = threading.RLock()

    @property
    def token(self):
        return self._token

    @property
    def secret(self):
        return self._secret

    @property
    def state(self):
        with self._lock:
            if self._token and self._secret:
                return AuthState.AUTHENTICATED
            return AuthState.UNAUTHENTICATED

    @property
    def is_authenticated(self):
        return self.state is AuthState.AUTHENTICATED

    def authenticate(self, token, secret):
        """
        UNAUTHENTICATED -> AUTHENTICATED，只允许一次

        Args:
            token: API token
            secret: base64编码的API secret

        Raises:
            CredentialStateError: 已经处于AUTHENTICATED状态
            MissingCredentials: token或secret为空
        """
        if not token or not secret:
            raise MissingCredentials("signup response did not supply both token and secret")
        with self._lock:
            if self._token and self._secret:
                raise CredentialStateError("credential is already authenticated")
            self._token = token
            self._secret = secret

    def snapshot(self):
        """Return a consistent ``(token, secret)`` pair."""
        with self._lock:
            return self._token, self._secret

    def require(self):
        """
        获取签名所需的 (token, secret_bytes)

        Returns:
            tuple: (token, 解码后的secret原始字节)

        Raises:
            MissingCredentials: token/secret缺失，或secret无法解码
        """
        token, secret = self.snapshot()
        if not token or not secret:
            raise MissingCredentials()
        try:
            key = base64.b64decode(secret)
        except (binascii.Error, ValueError) as e:
            raise MissingCredentials("API secret is not valid base64: %s" % e) from e
        if not key:
            raise MissingCredentials("API secret decodes to an empty key")
        return token, key

    def __repr__(self):
        # 不输出token和secret
        return "Credential(client_id=%r, state=%s)" % (self.client_id, self.state.value)
