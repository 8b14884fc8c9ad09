"""
Mock integration clients.

These clients return fake (but realistic) responses without calling any external API.

Important:
- Mock clients must follow the SAME interface as real HTTP clients.
- Mock clients should return data shaped according to spike_api.contracts
"""
