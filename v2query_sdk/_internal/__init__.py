"""Internal modules for the v2query SDK.

WARNING: This package contains system-level modules used by the public Client.
These are not intended for direct use in application code.

Modules:
    http - Shared HTTP transport with serialized execution
    redaction - Credential redaction for debug output
    sourceops - Per-dialect source operations
"""
