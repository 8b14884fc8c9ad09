"""
SPIKE clients.

- real_http: talks to the SPIKE REST API over HTTPS
- mocks: in-memory stand-in with the same interface, no network calls

Both implement contracts.interfaces.SpikeGateway, so callers can swap one for
the other in a single place.
"""

from .mocks.spike import MockSpikeClient
from .real_http.spike import SpikeClient

__all__ = ["MockSpikeClient", "SpikeClient"]
