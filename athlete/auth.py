import datetime
import logging

from .errors import ConfigurationError
from .utils import HmacSha256Digester, build_string_to_sign, format_timestamp, serialize_params

logger = logging.getLogger(__name__)

PUBLIC_KEY_PARAM = 'public_key'
TIMESTAMP_PARAM = 'timestamp'
SIGNATURE_PARAM = 'signature'


def utc_now() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


class Authenticator:
    """
    Signs requests to the Athlete.com API.

        auth = Authenticator('mypublickey', 'myprivatekey', 'http://www.athlete.com')
        url = auth.sign('/api/v1/users/5/', 'get')

    The URL carries public_key, timestamp and an HMAC-SHA256 signature of
    METHOD, path and the sorted query string.

    Trailing slashes are stripped from endpoint, so 'http://www.athlete.com/'
    and 'http://www.athlete.com' produce the same URLs.
    """

    def __init__(self, public_key: str, private_key: str, endpoint: str = '', digester=None, clock=None):
        if not (public_key and private_key):
            raise ConfigurationError('public_key and private_key are required')
        self.public_key = public_key
        self._private_key = private_key
        self.endpoint = (endpoint or '').rstrip('/')
        self.digester = digester or HmacSha256Digester()
        self.digester.check()
        self.clock = clock or utc_now

    def __repr__(self):
        return f"Authenticator(public_key={self.public_key!r}, endpoint={self.endpoint!r})"

    def _base_params(self, params: dict = None, timestamp: datetime.datetime = None) -> dict:
        params = dict(params) if params else {}
        params.pop(SIGNATURE_PARAM, None)
        params[PUBLIC_KEY_PARAM] = self.public_key
        params[TIMESTAMP_PARAM] = format_timestamp(timestamp or self.clock())
        return params

    def string_to_sign(self, path: str, method: str, params: dict = None,
                       timestamp: datetime.datetime = None) -> str:
        return build_string_to_sign(method, path, self._base_params(params, timestamp))

    def signed_params(self, path: str, method: str, params: dict = None,
                      timestamp: datetime.datetime = None) -> dict:
        """
        Return a new dict with the caller params plus public_key, timestamp
        and signature. The caller's mapping is left untouched.
        """
        # 1) public_key + timestamp, overwriting caller values
        signed = self._base_params(params, timestamp)

        # 2) string to sign, without signature
        string_to_sign = build_string_to_sign(method, path, signed)
        logger.debug("Signing %s %s, string to sign: %r", method.upper(), path, string_to_sign)

        # 3) HMAC-SHA256 + Base64
        signed[SIGNATURE_PARAM] = self.digester.digest(self._private_key, string_to_sign)
        return signed

    def sign(self, path: str, method: str, params: dict = None,
             timestamp: datetime.datetime = None) -> str:
        signed = self.signed_params(path, method, params, timestamp)
        return self.endpoint + path + '?' + serialize_params(signed)
