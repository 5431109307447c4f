# -*- coding: utf-8 -*-
# cashila/drivers/cashila_api/client.py
# Cashila REST client: endpoint methods on top of the signer and envelope interpreter.

import json
from urllib.parse import quote, urlsplit

import requests

from cashila.core.kernel.syscalls import PaymentSyscalls
from cashila.utils.logger import setup_logger

from .credentials import Credential
from .envelope import interpret
from .errors import ApiError, CredentialStateError
from .signer import Signer, make_descriptor

TEST_URL = "https://cashila-staging.com"

# 上传顺序固定
DOC_KINDS = ('gov-id-front', 'gov-id-back', 'residence', 'company')

logger = setup_logger("cashila")


def _dump(data):
    # 紧凑格式，签名和发送的是同一份字节
    return json.dumps(data, separators=(",", ":"))


class CashilaClient(PaymentSyscalls):
    """Cashila REST API client."""

    def __init__(self, client_id, token=None, secret=None, url=TEST_URL,
                 ca_path=None, timeout=10, session=None):
        self.url = url.rstrip('/')
        self.ca_path = ca_path or None
        self.timeout = timeout
        self.credential = Credential(client_id, token=token, secret=secret)
        self.signer = Signer(self.credential)
        self._session = session or requests.Session()

    @property
    def client_id(self):
        return self.credential.client_id

    @property
    def token(self):
        return self.credential.token

    @property
    def secret(self):
        return self.credential.secret

    def authenticate(self, token, secret):
        self.credential.authenticate(token, secret)

    def base_headers(self):
        return {
            "Content-Type": "application/json",
            "API-Client": self.client_id,
        }

    def request(self, method, uri, body=None, headers=None, auth=False):
        """Initiate network request
       @param method: request method, GET / POST / PUT
       @param uri: request path, e.g. /api/v1/verification
       @param body: dict (sent as JSON), or raw str/bytes
       @param headers: extra http headers, layered over the base headers
       @param auth: boolean, sign the request
       @return: the unwrapped ``result`` payload
       """
        if isinstance(body, (dict, list)):
            body = _dump(body)
        url = self.url + uri
        # 签名的是实际发送的路径（包括base url自带的路径）
        descriptor = make_descriptor(method, urlsplit(url).path, body)

        request_headers = self.base_headers()
        if headers:
            request_headers.update(headers)
        if auth:
            # 缺少凭证时在这里抛出 MissingCredentials，不会发出请求
            request_headers = self.signer.sign_headers(descriptor, request_headers)

        logger.debug("%s %s auth=%s", descriptor.http_method, uri, auth)
        response = self._session.request(
            descriptor.http_method,
            url,
            data=descriptor.body or None,
            headers=request_headers,
            timeout=self.timeout,
            verify=self.ca_path or True,
        )
        try:
            return interpret(response.json())
        except ApiError as e:
            logger.warning("%s %s failed: status=%s code=%s message=%s",
                           descriptor.http_method, uri, response.status_code, e.code, e.message)
            raise

    # ---- Bootstrap ----
    def request_signup(self):
        # 本地检查，已认证时不再发出signup请求
        if self.credential.is_authenticated:
            raise CredentialStateError("credential is already authenticated")
        result = self.request("POST", "/api/v1/request-signup")
        if not isinstance(result, dict):
            result = {}
        self.authenticate(result.get('token'), result.get('secret'))
        logger.info("signup completed for client %s", self.client_id)
        return result

    # ---- Verification ----
    def sync_account(self, email, details):
        body = {
            "account": {
                "email": email,
            },
            "verification": details,
        }
        return self.request("PUT", "/api/v1/account", body=body, auth=True)

    def upload_docs(self, docs):
        """
        上传验证文件，每个文件一次独立请求；第N个失败时前面已上传的不会回滚

        Args:
            docs: {kind: [{'file_body': ..., 'file_name': 可选}, ...]}
                  kind 为 gov-id-front / gov-id-back / residence / company，
                  单个文件或直接给出文件内容也可以

        Returns:
            dict: {kind: [result, ...]}，只包含提供了的kind
        """
        results = {}
        for kind in DOC_KINDS:
            entries = docs.get(kind)
            if not entries:
                continue
            if not isinstance(entries, (list, tuple)):
                entries = [entries]
            results[kind] = [self._upload_doc(kind, doc) for doc in entries]
        return results

    def _upload_doc(self, kind, doc):
        if not isinstance(doc, dict):
            doc = {'file_body': doc}
        headers = {"Content-Type": "application/octet-stream"}
        if doc.get('file_name'):
            headers["X-File-Name"] = doc['file_name']
        return self.request("PUT", "/api/v1/verification/%s" % kind,
                            body=doc['file_body'], headers=headers, auth=True)

    def verification_status(self):
        return self.request("GET", "/api/v1/verification", auth=True)

    # ---- Recipients ----
    def sync_recipient(self, details):
        if not details:
            return None
        details = dict(details)
        recipient_id = details.pop('id', None)
        uri = "/api/v1/recipients"
        if recipient_id:
            uri += "/%s" % quote(str(recipient_id), safe='')
        payload = self.request("PUT", uri, body=details, auth=True)
        if isinstance(payload, dict):
            return payload.get('id')
        return None

    def get_recipient(self, recipient_id):
        uri = "/api/v1/recipients/%s" % quote(str(recipient_id), safe='')
        return self.request("GET", uri, auth=True)

    # ---- Payments ----
    def create_billpay(self, recipient_id, amount, currency='EUR', reference=None, refund=None):
        params = {
            "amount": amount,
            "currency": currency,
            "based_on": recipient_id,
        }
        if reference:
            params["reference"] = reference
        if refund:
            params["refund"] = refund
        return self.request("PUT", "/api/v1/billpays/create", body=params, auth=True)


def init_CashilaClient(account='main', config_dir=None, show=False, session=None):
    """
    根据配置文件初始化Cashila客户端

    Args:
        account: 账户名称（cashila.yaml中accounts下的键）
        config_dir: 配置目录，默认为项目的configs目录
        show: 是否显示调试信息
        session: 可选的requests.Session

    Returns:
        CashilaClient: 凭证为空时处于未认证状态
    """
    from configs.config_reader import ConfigReader, config_reader

    reader = ConfigReader(config_dir) if config_dir else config_reader
    api_config = reader.get_api_config()
    credentials = reader.get_account_credentials(account)

    client = CashilaClient(
        client_id=api_config['client_id'],
        token=credentials['token'] or None,
        secret=credentials['secret'] or None,
        url=api_config['url'],
        ca_path=api_config['ca_path'] or None,
        timeout=api_config['timeout'],
        session=session,
    )
    if show:
        logger.info("使用Cashila账户: %s, url=%s, state=%s",
                    account, client.url, client.credential.state.value)
    return client
