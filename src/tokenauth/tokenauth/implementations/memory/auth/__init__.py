# ABOUTME: Memory-based authentication implementations for testing and development
# ABOUTME: Provides the StoreCredentialVerifier

from .credential_verifier import StoreCredentialVerifier

__all__ = ["StoreCredentialVerifier"]
