"""
SPIKE — MOCK client.

⚠️  In-memory implementation for development and testing. Makes no network
    calls. Applies the same argument validation as the real client and
    answers with payloads shaped like the SPIKE API (status codes included),
    so code written against SpikeGateway can run end-to-end without
    credentials.
"""

from __future__ import annotations

import copy
import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import httpx

from spike_api.contracts.interfaces import SpikeGateway
from spike_api.contracts.product import Product
from spike_api.contracts.requests import (
    DEFAULT_LIST_LIMIT,
    ID_SIGNATURE,
    LIST_SIGNATURE,
    CreateChargeRequest,
    CreateTokenRequest,
    check_request,
)
from spike_api.contracts.results import ApiResult
from spike_api.errors import ApiError
from spike_api.validation import check_args

logger = logging.getLogger(__name__)


class MockSpikeClient(SpikeGateway):
    """
    Mock SPIKE client.

    Parameters
    ----------
    livemode : bool
        Value reported in the ``livemode`` field of every object. Default False.
    """

    def __init__(self, livemode: bool = False) -> None:
        self._livemode = livemode

        # In-memory stores (reset on restart); insertion order is creation order
        self._charges: Dict[str, Dict[str, Any]] = {}
        self._tokens: Dict[str, Dict[str, Any]] = {}

        logger.info("[SPIKE MOCK] Client initialised (livemode=%s)", livemode)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _now() -> int:
        return int(datetime.now(timezone.utc).timestamp())

    @staticmethod
    def _new_id(prefix: str) -> str:
        return f"{prefix}_{uuid.uuid4().hex[:24]}"

    @staticmethod
    def _ok(body: Dict[str, Any], status_code: int = 200) -> ApiResult:
        return ApiResult(body=copy.deepcopy(body), status_code=status_code)

    @staticmethod
    def _fail(status_code: int, message: str, param: Optional[str] = None) -> ApiResult:
        body: Dict[str, Any] = {"error": {"type": "invalid_request_error", "message": message}}
        if param:
            body["error"]["param"] = param
        status_line = f"{status_code} {httpx.codes.get_reason_phrase(status_code)}"
        return ApiResult(
            error=ApiError(status_line, status_code=status_code, body=body),
            body=body,
            status_code=status_code,
        )

    def _lookup_charge(self, charge_id: str) -> Optional[Dict[str, Any]]:
        return self._charges.get(charge_id)

    # ------------------------------------------------------------------
    # Charges
    # ------------------------------------------------------------------

    async def create_charge(self, request: CreateChargeRequest) -> ApiResult:
        error = check_request(request, CreateChargeRequest)
        if error is not None:
            return ApiResult(error=error)

        token = self._tokens.get(request.card)
        if token is None:
            return self._fail(400, f"No such token: {request.card}", param="card")

        charge = {
            "id": self._new_id("ch"),
            "object": "charge",
            "livemode": self._livemode,
            "created": self._now(),
            "paid": True,
            "captured": request.capture,
            "refunded": False,
            "amount": request.amount,
            "currency": request.currency,
            "amount_refunded": 0,
            "card": dict(token["source"]),
            "products": [item.to_dict() if isinstance(item, Product) else dict(item) for item in request.products],
            "refunds": [],
        }
        self._charges[charge["id"]] = charge
        logger.info("[SPIKE MOCK] Charge %s created amount=%s %s", charge["id"], request.amount, request.currency)
        return self._ok(charge, 201)

    async def get_charge(self, charge_id: str) -> ApiResult:
        error = check_args(ID_SIGNATURE, [charge_id])
        if error is not None:
            return ApiResult(error=error)

        charge = self._lookup_charge(charge_id)
        if charge is None:
            return self._fail(404, f"No such charge: {charge_id}", param="id")
        return self._ok(charge)

    async def capture_charge(self, charge_id: str) -> ApiResult:
        error = check_args(ID_SIGNATURE, [charge_id])
        if error is not None:
            return ApiResult(error=error)

        charge = self._lookup_charge(charge_id)
        if charge is None:
            return self._fail(404, f"No such charge: {charge_id}", param="id")
        if charge["captured"]:
            return self._fail(400, f"Charge {charge_id} has already been captured.")

        charge["captured"] = True
        logger.info("[SPIKE MOCK] Charge %s captured", charge_id)
        return self._ok(charge)

    async def refund_charge(self, charge_id: str) -> ApiResult:
        error = check_args(ID_SIGNATURE, [charge_id])
        if error is not None:
            return ApiResult(error=error)

        charge = self._lookup_charge(charge_id)
        if charge is None:
            return self._fail(404, f"No such charge: {charge_id}", param="id")
        if charge["refunded"]:
            return self._fail(400, f"Charge {charge_id} has already been refunded.")

        charge["refunded"] = True
        charge["amount_refunded"] = charge["amount"]
        charge["refunds"].append({"object": "refund", "created": self._now(), "amount": charge["amount"]})
        logger.info("[SPIKE MOCK] Charge %s refunded", charge_id)
        return self._ok(charge)

    async def list_charges(self, limit: int = DEFAULT_LIST_LIMIT) -> ApiResult:
        error = check_args(LIST_SIGNATURE, [limit], min_args=0)
        if error is not None:
            return ApiResult(error=error)

        if limit is None:
            limit = DEFAULT_LIST_LIMIT
        if limit < 1:
            return self._fail(400, "limit must be at least 1", param="limit")
        newest_first = list(reversed(list(self._charges.values())))
        return self._ok(
            {
                "object": "list",
                "url": "/v1/charges",
                "has_more": len(newest_first) > limit,
                "data": newest_first[:limit],
            }
        )

    # ------------------------------------------------------------------
    # Tokens
    # ------------------------------------------------------------------

    async def create_token(self, request: CreateTokenRequest) -> ApiResult:
        error = check_request(request, CreateTokenRequest)
        if error is not None:
            return ApiResult(error=error)

        token = {
            "id": self._new_id("tok"),
            "object": "token",
            "livemode": self._livemode,
            "created": self._now(),
            "currency": request.currency,
            "email": request.email or None,
            "source": {
                "object": "card",
                "last4": str(request.card_number)[-4:],
                "exp_month": request.exp_month,
                "exp_year": request.exp_year,
                "name": request.name,
            },
        }
        self._tokens[token["id"]] = token
        logger.info("[SPIKE MOCK] Token %s created", token["id"])
        return self._ok(token, 201)

    async def get_token(self, token_id: str) -> ApiResult:
        error = check_args(ID_SIGNATURE, [token_id])
        if error is not None:
            return ApiResult(error=error)

        token = self._tokens.get(token_id)
        if token is None:
            return self._fail(404, f"No such token: {token_id}", param="id")
        return self._ok(token)
