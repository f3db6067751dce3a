"""Internal modules for the AbuseIPDB SDK.

WARNING: This package contains the low-level request machinery behind
AbuseIPDBClient. It is not intended for direct use in application code.

Modules:
    dispatch - Request dispatcher (encoding, auth, error normalization)
    http - Shared HTTP client configuration
"""
