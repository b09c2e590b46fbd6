import hashlib
import hmac
import base64
import datetime
from urllib.parse import quote

from .errors import SigningEnvironmentError


def format_timestamp(instant: datetime.datetime) -> str:
    """
    Format a datetime as 2009-09-28T19:03:12Z.
    Naive datetimes are taken as UTC, aware ones are converted to UTC.
    """
    if instant.tzinfo is not None:
        instant = instant.astimezone(datetime.timezone.utc)
    return (f"{instant.year:04d}-{instant.month:02d}-{instant.day:02d}"
            f"T{instant.hour:02d}:{instant.minute:02d}:{instant.second:02d}Z")


def url_encode(value: str) -> str:
    # only A-Z a-z 0-9 and -_.~ stay literal
    return quote(value, safe='', encoding='utf-8')


def serialize_params(params: dict) -> str:
    """
    Encode every key=value pair and sort the joined pairs, not the keys.
    """
    parts = [f"{url_encode(key)}={url_encode(value)}" for key, value in params.items()]
    return '&'.join(sorted(parts))


def build_string_to_sign(method: str, path: str, params: dict) -> str:
    return "\n".join([
        method.upper(),
        path,
        serialize_params(params)
    ])


class HmacSha256Digester:
    """
    Keyed-hash primitive used by the Authenticator.
    Any object exposing check() and digest(key, message) can replace it.
    """
    algorithm = 'sha256'

    def check(self) -> None:
        if self.algorithm not in hashlib.algorithms_available:
            raise SigningEnvironmentError(
                f"hashlib does not provide {self.algorithm}, cannot sign requests"
            )

    def digest(self, key: str, message: str) -> str:
        sig = hmac.new(key.encode('utf-8'),
                       message.encode('utf-8'),
                       hashlib.sha256).digest()
        return base64.b64encode(sig).decode('utf-8')
