import logging

import requests

logger = logging.getLogger(__name__)


class ApiClient:
    """Issues signed requests through a requests session."""

    def __init__(self, auth, session: requests.Session = None, verify: bool = True, timeout: float = 30):
        self.auth = auth
        self.session = session or requests.Session()
        self.verify = verify
        self.timeout = timeout

    def request(self, method: str, path: str, params: dict = None, data=None) -> requests.Response:
        # the body is sent as-is, only the query string is signed
        url = self.auth.sign(path, method, params)
        logger.debug("%s %s", method.upper(), path)
        resp = self.session.request(method.upper(), url, data=data,
                                    verify=self.verify, timeout=self.timeout)
        logger.debug("%s %s -> %s", method.upper(), path, resp.status_code)
        resp.raise_for_status()
        return resp

    def get(self, path: str, params: dict = None) -> requests.Response:
        return self.request('GET', path, params)

    def delete(self, path: str, params: dict = None) -> requests.Response:
        return self.request('DELETE', path, params)

    def post(self, path: str, params: dict = None, data=None) -> requests.Response:
        return self.request('POST', path, params, data=data)

    def put(self, path: str, params: dict = None, data=None) -> requests.Response:
        return self.request('PUT', path, params, data=data)
