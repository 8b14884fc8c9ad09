from abc import ABC, abstractmethod

from spike_api.contracts.requests import DEFAULT_LIST_LIMIT, CreateChargeRequest, CreateTokenRequest
from spike_api.contracts.results import ApiResult


class SpikeGateway(ABC):
    """Every SPIKE client (real HTTP or mock) must implement this interface."""

    # -- Charges --

    @abstractmethod
    async def create_charge(self, request: CreateChargeRequest) -> ApiResult:
        """Create a new charge from a card token."""

    @abstractmethod
    async def get_charge(self, charge_id: str) -> ApiResult:
        """Fetch a charge by ID."""

    @abstractmethod
    async def capture_charge(self, charge_id: str) -> ApiResult:
        """Capture a charge that was created with capture=False."""

    @abstractmethod
    async def refund_charge(self, charge_id: str) -> ApiResult:
        """Refund a charge in full."""

    @abstractmethod
    async def list_charges(self, limit: int = DEFAULT_LIST_LIMIT) -> ApiResult:
        """Return the most recent charges, newest first."""

    # -- Tokens --

    @abstractmethod
    async def create_token(self, request: CreateTokenRequest) -> ApiResult:
        """Exchange card details for a token."""

    @abstractmethod
    async def get_token(self, token_id: str) -> ApiResult:
        """Fetch a token by ID."""
