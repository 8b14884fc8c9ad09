"""
Real SPIKE HTTP Client.

Purpose:
- Sends charge and token operations to the SPIKE REST API
- Validates arguments before any request is built
- Classifies every outcome into an ApiResult (never raises for API,
  transport or argument errors)

Implementation notes:
- Uses httpx for async requests
- Authenticates with HTTP Basic: secret key as user, empty password
- Form-encodes POST bodies; line items are sent as a JSON string

Important:
- Keep this client as the ONLY place where SPIKE HTTP calls are made.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from spike_api.config import SpikeConfig, load_config
from spike_api.contracts.interfaces import SpikeGateway
from spike_api.contracts.requests import (
    DEFAULT_LIST_LIMIT,
    ID_SIGNATURE,
    LIST_SIGNATURE,
    CreateChargeRequest,
    CreateTokenRequest,
    check_request,
)
from spike_api.contracts.results import ApiResult
from spike_api.errors import ApiError, TransportError
from spike_api.validation import check_args

logger = logging.getLogger(__name__)


class SpikeClient(SpikeGateway):
    def __init__(
        self,
        config: Optional[SpikeConfig] = None,
        *,
        secret_key: Optional[str] = None,
        publishable_key: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        # Config management: load from env if not provided
        self.config = config if config is not None else load_config(secret_key=secret_key, publishable_key=publishable_key)
        self._http_client = http_client

    # ------------------------------------------------------------------
    # Charges
    # ------------------------------------------------------------------

    async def create_charge(self, request: CreateChargeRequest) -> ApiResult:
        error = check_request(request, CreateChargeRequest)
        if error is not None:
            return ApiResult(error=error)

        return await self._request("POST", "charges", data=request.form_data())

    async def get_charge(self, charge_id: str) -> ApiResult:
        error = check_args(ID_SIGNATURE, [charge_id])
        if error is not None:
            return ApiResult(error=error)

        return await self._request("GET", f"charges/{_quote(charge_id)}")

    async def capture_charge(self, charge_id: str) -> ApiResult:
        error = check_args(ID_SIGNATURE, [charge_id])
        if error is not None:
            return ApiResult(error=error)

        return await self._request("POST", f"charges/{_quote(charge_id)}/capture")

    async def refund_charge(self, charge_id: str) -> ApiResult:
        error = check_args(ID_SIGNATURE, [charge_id])
        if error is not None:
            return ApiResult(error=error)

        return await self._request("POST", f"charges/{_quote(charge_id)}/refund")

    async def list_charges(self, limit: int = DEFAULT_LIST_LIMIT) -> ApiResult:
        error = check_args(LIST_SIGNATURE, [limit], min_args=0)
        if error is not None:
            return ApiResult(error=error)

        if limit is None:
            limit = DEFAULT_LIST_LIMIT
        return await self._request("GET", "charges", params={"limit": str(limit)})

    # ------------------------------------------------------------------
    # Tokens
    # ------------------------------------------------------------------

    async def create_token(self, request: CreateTokenRequest) -> ApiResult:
        error = check_request(request, CreateTokenRequest)
        if error is not None:
            return ApiResult(error=error)

        return await self._request("POST", "tokens", data=request.form_data())

    async def get_token(self, token_id: str) -> ApiResult:
        error = check_args(ID_SIGNATURE, [token_id])
        if error is not None:
            return ApiResult(error=error)

        return await self._request("GET", f"tokens/{_quote(token_id)}")

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, str]] = None,
        data: Optional[Dict[str, str]] = None,
    ) -> ApiResult:
        url = f"{self.config.base_url}{path}"
        logger.info("SPIKE request %s %s", method, url)
        try:
            if self._http_client is not None:
                response = await self._send(self._http_client, method, url, params, data)
            else:
                async with httpx.AsyncClient(timeout=self.config.timeout_seconds) as client:
                    response = await self._send(client, method, url, params, data)
        except httpx.RequestError as e:
            logger.error(f"Request error connecting to SPIKE API: {e!r}")
            error = TransportError(str(e) or type(e).__name__)
            error.__cause__ = e
            return ApiResult(error=error)

        return self._classify(response)

    async def _send(
        self,
        client: httpx.AsyncClient,
        method: str,
        url: str,
        params: Optional[Dict[str, str]],
        data: Optional[Dict[str, str]],
    ) -> httpx.Response:
        return await client.request(
            method,
            url,
            params=params,
            data=data,
            headers=self.config.default_headers(),
            auth=self.config.auth,
            timeout=self.config.timeout_seconds,
        )

    def _classify(self, response: httpx.Response) -> ApiResult:
        body = _decode_body(response)
        if response.status_code >= 400:
            status_line = _status_line(response)
            logger.warning(f"HTTP error from SPIKE API: {status_line}")
            return ApiResult(
                error=ApiError(status_line, status_code=response.status_code, body=body),
                body=body,
                status_code=response.status_code,
            )
        return ApiResult(body=body, status_code=response.status_code)


def _quote(identifier: str) -> str:
    return quote(identifier, safe="")


def _status_line(response: httpx.Response) -> str:
    header = response.headers.get("status")
    if header:
        return header
    return f"{response.status_code} {response.reason_phrase}".strip()


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        logger.warning("SPIKE API returned a non-JSON body (status=%s)", response.status_code)
        return None
