# ABOUTME: Core package initialization for the token authentication subsystem
# ABOUTME: Provides access/refresh token issuance, verification, rotation and reaping

"""
Token authentication package.

This package issues, verifies and rotates short-lived signed access tokens
backed by long-lived persisted refresh tokens, and reclaims expired refresh
tokens in the background. It follows clean architecture principles with clear
separation between interfaces, models, implementations and components.
"""

__version__ = "0.1.0"
