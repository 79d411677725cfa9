from typing import Any, Union

import attrs
import orjson

from src.platform.exception.exceptions import DomainError


QrValue = Union[str, dict[str, Any]]

DATA_URL_PREFIX = 'data:'


def _normalize(raw: Any) -> QrValue:
    if isinstance(raw, dict):
        if not raw:
            raise DomainError('QR code data is required')
        return raw
    if not isinstance(raw, str) or not raw.strip():
        raise DomainError('QR code data is required')

    text = raw.strip()
    # Image data URLs and pipe-delimited ticket codes go to the server untouched
    if text.startswith(DATA_URL_PREFIX) or '|' in text:
        return text
    try:
        parsed = orjson.loads(text)
    except orjson.JSONDecodeError:
        return text
    return parsed if isinstance(parsed, dict) else text


@attrs.define(frozen=True)
class QrPayload:
    """
    Scanned or typed code, in whichever encoding the scanner produced.

    A JSON object string is decoded; anything else is sent as the raw string.
    What the code means is decided by the server.
    """

    value: QrValue = attrs.field(converter=_normalize)

    @property
    def is_structured(self) -> bool:
        return isinstance(self.value, dict)


def qr_code_display(qr_code: Any) -> tuple[str, str]:
    """
    How to show a booked ticket's qrCode.

    Returns ('image', data_url) when it already is an image data URL, otherwise
    ('render', text) with the value to encode into a QR code on screen.
    """
    if qr_code is None or qr_code == '':
        raise DomainError('Ticket has no QR code')
    if isinstance(qr_code, str) and qr_code.startswith('data:image/'):
        return 'image', qr_code
    if isinstance(qr_code, (dict, list)):
        return 'render', orjson.dumps(qr_code).decode()
    return 'render', str(qr_code)
