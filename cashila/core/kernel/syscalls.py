# -*- coding: utf-8 -*-
# cashila/core/kernel/syscalls.py
# A minimal syscall interface for the payment API.
# No Protocol/dataclasses; plain base class with NotImplementedError.

class PaymentSyscalls(object):
    # ---- Bootstrap ----
    def request_signup(self):
        """Request a new API token/secret pair.
           Return dict {'token': ..., 'secret': ...}; the client becomes authenticated.
        """
        raise NotImplementedError

    # ---- Verification ----
    def sync_account(self, email, details):
        """Create or update account details.
           :param email: Account email
           :param details: dict with first_name, last_name, address, postal_code, city, country_code
        """
        raise NotImplementedError

    def upload_docs(self, docs):
        """Upload verification documents, return {kind: [result, ...]}
           :param docs: dict keyed by 'gov-id-front', 'gov-id-back', 'residence', 'company'
                        each value a list of {'file_body': ..., 'file_name': optional}
        """
        raise NotImplementedError

    def verification_status(self):
        """Return dict of verification status and submitted details"""
        raise NotImplementedError

    # ---- Recipients ----
    def sync_recipient(self, details):
        """Create (no 'id') or update (with 'id') a recipient, return recipient id
           :param details: dict with id (optional), name, address, postal_code, city, country_code, iban, bic
        """
        raise NotImplementedError

    def get_recipient(self, recipient_id):
        """Return dict of recipient details
           :param recipient_id: Recipient ID
        """
        raise NotImplementedError

    # ---- Payments ----
    def create_billpay(self, recipient_id, amount, currency='EUR', reference=None, refund=None):
        """Create a bill payment, return dict of billpay details
           :param recipient_id: Recipient ID the payment is based on
           :param amount: Amount in currency
           :param currency: Currency code
           :param reference: Payment reference (optional)
           :param refund: Refund address (optional)
        """
        raise NotImplementedError
