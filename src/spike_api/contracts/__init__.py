"""
SPIKE contracts.

Defines the request/response structures shared by:
- clients/real_http/spike.py (real API calls)
- clients/mocks/spike.py (in-memory responses for development/testing)
"""

from .interfaces import SpikeGateway
from .product import Product
from .requests import DEFAULT_LIST_LIMIT, CreateChargeRequest, CreateTokenRequest
from .responses import (
    Card,
    Charge,
    ChargeList,
    ErrorPayload,
    Refund,
    Token,
    parse_charge,
    parse_charge_list,
    parse_error,
    parse_token,
)
from .results import ApiResult

__all__ = [
    "SpikeGateway", "Product", "ApiResult",
    "DEFAULT_LIST_LIMIT", "CreateChargeRequest", "CreateTokenRequest",
    "Card", "Charge", "ChargeList", "ErrorPayload", "Refund", "Token",
    "parse_charge", "parse_charge_list", "parse_error", "parse_token",
]
