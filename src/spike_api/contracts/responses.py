"""
Typed views over decoded SPIKE response bodies.

ApiResult.body always carries the raw decoded payload. These models are an
opt-in way to read it with attribute access; unknown fields are kept as
extras so nothing in the payload is lost.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from spike_api.errors import ResponseParseError


class _SpikeObject(BaseModel):
    model_config = ConfigDict(extra="allow")


class Card(_SpikeObject):
    last4: Optional[str] = None
    brand: Optional[str] = Field(default=None, alias="type")
    exp_month: Optional[int] = None
    exp_year: Optional[int] = None
    name: Optional[str] = None


class Refund(_SpikeObject):
    object: str = "refund"
    created: Optional[int] = None
    amount: float


class Charge(_SpikeObject):
    id: str
    object: str = "charge"
    livemode: bool = False
    created: Optional[int] = None
    paid: bool = False
    captured: bool = False
    refunded: bool = False
    amount: float
    currency: str
    amount_refunded: Optional[float] = None
    card: Optional[Card] = None
    refunds: List[Refund] = Field(default_factory=list)


class ChargeList(_SpikeObject):
    object: str = "list"
    url: Optional[str] = None
    has_more: bool = False
    data: List[Charge] = Field(default_factory=list)


class Token(_SpikeObject):
    id: str
    object: str = "token"
    livemode: bool = False
    created: Optional[int] = None
    currency: Optional[str] = None
    email: Optional[str] = None
    source: Optional[Card] = None


class ErrorPayload(_SpikeObject):
    type: str
    message: Optional[str] = None
    param: Optional[str] = None


def parse_charge(raw: Dict[str, Any]) -> Charge:
    return _build_model(Charge, raw)


def parse_charge_list(raw: Dict[str, Any]) -> ChargeList:
    return _build_model(ChargeList, raw)


def parse_token(raw: Dict[str, Any]) -> Token:
    return _build_model(Token, raw)


def parse_error(raw: Dict[str, Any]) -> ErrorPayload:
    """Read the ``error`` object of a structured error payload."""
    error = raw.get("error") if isinstance(raw, dict) else None
    if not isinstance(error, dict):
        raise ResponseParseError("Response has no structured 'error' object.", payload=raw if isinstance(raw, dict) else None)
    return _build_model(ErrorPayload, error)


def _build_model(model_type, raw: Any):
    if not isinstance(raw, dict):
        raise ResponseParseError(f"Expected a JSON object, got {type(raw).__name__}.")
    try:
        return model_type.model_validate(raw)
    except ValidationError as exc:
        raise ResponseParseError(f"Response validation failed: {exc}", payload=raw) from exc
