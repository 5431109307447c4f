"""
Cashila API driver package.
signer.py + envelope.py form the auth core; client.py maps endpoints onto them.
"""

from .client import CashilaClient, init_CashilaClient, TEST_URL  # noqa: F401
from .credentials import AuthState, Credential  # noqa: F401
from .envelope import interpret  # noqa: F401
from .errors import ApiError, CashilaError, CredentialStateError, MissingCredentials  # noqa: F401
from .signer import RequestDescriptor, SignatureHeaders, Signer, make_descriptor, sign  # noqa: F401
