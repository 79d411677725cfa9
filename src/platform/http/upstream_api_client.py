"""
Upstream REST API client.

Every workflow in this service is a client of the platform's REST API. This
module owns the transport concerns so gateways only deal with typed payloads:

- Bearer token taken from the explicit AuthSession passed per call
- JSON encode/decode via orjson
- Error mapping: 4xx/5xx -> CustomBaseError subclasses carrying the server's
  ``message`` field (or a generic fallback), transport failures -> 502
"""

from typing import Any, Optional, Sequence

import httpx
import orjson

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import (
    AuthenticationError,
    ConflictError,
    CustomBaseError,
    ForbiddenError,
    NotFoundError,
    UpstreamApiError,
)
from src.platform.logging.loguru_io import Logger
from src.service.shared_kernel.domain.value_object.auth_session import AuthSession


FormFields = Sequence[tuple[str, str]]

_STATUS_ERRORS: dict[int, type[CustomBaseError]] = {
    401: AuthenticationError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
}


def extract_error_message(response: httpx.Response, fallback: Optional[str] = None) -> str:
    fallback = fallback or settings.GENERIC_ERROR_MESSAGE
    try:
        body = orjson.loads(response.content)
    except orjson.JSONDecodeError:
        return fallback
    if isinstance(body, dict) and isinstance(body.get('message'), str) and body['message']:
        return body['message']
    return fallback


def raise_for_upstream_status(
    response: httpx.Response, *, fallback_message: Optional[str] = None
) -> None:
    if response.is_success:
        return
    message = extract_error_message(response, fallback_message)
    error_cls = _STATUS_ERRORS.get(response.status_code)
    if error_cls is not None:
        raise error_cls(message)  # type: ignore[call-arg]
    raise UpstreamApiError(message, status_code=response.status_code)


class UpstreamApiClient:
    def __init__(
        self,
        *,
        base_url: str,
        timeout: float,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
            headers={'Accept': 'application/json'},
        )

    async def get(
        self, path: str, *, session: Optional[AuthSession], params: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        return await self._request('GET', path, session=session, params=params)

    async def post(
        self,
        path: str,
        *,
        session: Optional[AuthSession],
        json: Optional[dict[str, Any]] = None,
        fallback_message: Optional[str] = None,
    ) -> dict[str, Any]:
        return await self._request(
            'POST', path, session=session, json=json, fallback_message=fallback_message
        )

    async def post_multipart(
        self, path: str, *, session: Optional[AuthSession], fields: FormFields
    ) -> dict[str, Any]:
        return await self._request('POST', path, session=session, fields=fields)

    async def put_multipart(
        self, path: str, *, session: Optional[AuthSession], fields: FormFields
    ) -> dict[str, Any]:
        return await self._request('PUT', path, session=session, fields=fields)

    async def aclose(self) -> None:
        await self._client.aclose()

    @Logger.io(truncate_content=True)
    async def _request(
        self,
        method: str,
        path: str,
        *,
        session: Optional[AuthSession],
        params: Optional[dict[str, Any]] = None,
        json: Optional[dict[str, Any]] = None,
        fields: Optional[FormFields] = None,
        fallback_message: Optional[str] = None,
    ) -> dict[str, Any]:
        headers = session.auth_headers() if session else {}
        request_kwargs: dict[str, Any] = {'params': params}
        if json is not None:
            headers['Content-Type'] = 'application/json'
            request_kwargs['content'] = orjson.dumps(json)
        if fields is not None:
            # (None, value) parts are sent as plain form fields in a multipart body
            request_kwargs['files'] = [(name, (None, value)) for name, value in fields]

        try:
            response = await self._client.request(method, path, headers=headers, **request_kwargs)
        except httpx.HTTPError as e:
            Logger.base.warning(f'[UPSTREAM] {method} {path} failed: {type(e).__name__}')
            raise UpstreamApiError(fallback_message or settings.GENERIC_ERROR_MESSAGE) from e

        raise_for_upstream_status(response, fallback_message=fallback_message)

        if not response.content:
            return {}
        try:
            body = orjson.loads(response.content)
        except orjson.JSONDecodeError as e:
            raise UpstreamApiError('Upstream returned a non-JSON response') from e
        return body if isinstance(body, dict) else {'data': body}
