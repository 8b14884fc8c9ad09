"""
Python client for the SPIKE payment REST API (charges, refunds, tokens).

    from spike_api import CreateChargeRequest, Product, SpikeClient

    client = SpikeClient(secret_key="sk_test_...")
    error, charge = await client.create_charge(
        CreateChargeRequest(currency="JPY", amount=1080, card="tok_...", products=[Product(id="item-1")])
    )
"""

from .clients import MockSpikeClient, SpikeClient
from .config import SpikeConfig, load_config
from .contracts import (
    DEFAULT_LIST_LIMIT,
    ApiResult,
    CreateChargeRequest,
    CreateTokenRequest,
    Product,
    SpikeGateway,
)
from .errors import ApiError, InvalidArgumentsError, ResponseParseError, SpikeError, TransportError
from .version import __version__

__all__ = [
    "__version__",
    # clients
    "SpikeClient", "MockSpikeClient", "SpikeGateway",
    # config
    "SpikeConfig", "load_config",
    # contracts
    "ApiResult", "CreateChargeRequest", "CreateTokenRequest", "DEFAULT_LIST_LIMIT", "Product",
    # errors
    "SpikeError", "InvalidArgumentsError", "TransportError", "ApiError", "ResponseParseError",
]
