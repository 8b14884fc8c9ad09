"""
Real HTTP integration clients.

Important:
- Must implement the same interface as the mock clients
- Must return ApiResult objects shaped according to spike_api.contracts
"""
