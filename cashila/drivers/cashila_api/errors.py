# -*- coding: utf-8 -*-
# cashila/drivers/cashila_api/errors.py
# Error types raised by the Cashila client.
# Plain exception classes, no dataclasses.


class CashilaError(Exception):
    """Base class for errors raised by this package."""


class MissingCredentials(CashilaError, ValueError):
    """Authenticated call attempted without both API token and secret.

    Raised locally before any request is built or sent.
    """

    def __init__(self, message="API token and secret are required for signed requests"):
        super(MissingCredentials, self).__init__(message)


class CredentialStateError(CashilaError, RuntimeError):
    """Credential bootstrap transition attempted more than once."""


class ApiError(CashilaError):
    """Business error reported by the server in the response envelope.

    Attributes:
        raw: the original ``error`` object from the envelope
        code: server error code (may be None)
        message: ``user_message`` when present and non-empty, else ``message``,
            else ``code``, else the error object as text
    """

    def __init__(self, error):
        self.raw = error
        if isinstance(error, dict):
            self.code = error.get('code')
            self.message = (error.get('user_message') or error.get('message')
                            or error.get('code') or str(error))
        else:
            # 非对象形式的error，直接当作消息
            self.code = None
            self.message = str(error)
        super(ApiError, self).__init__(self.message)

    def __repr__(self):
        return "ApiError(code=%r, message=%r)" % (self.code, self.message)
