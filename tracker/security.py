"""
Task Tracker API - Security Validation

Startup checks for security-relevant configuration.
"""

import warnings

from tracker.config import settings

MIN_PRODUCTION_KEY_LENGTH = 32


def validate_security_config() -> None:
    """
    Validate security configuration on startup.

    A missing signing key is fatal. Weak-but-usable settings only warn, so
    tests and local development keep running.
    """
    if not settings.JWT_SECRET_KEY:
        raise RuntimeError(
            "JWT_SECRET_KEY is not configured. Set the JWT_SECRET_KEY environment "
            "variable or point JWT_SECRET_KEY_FILE at a secret file."
        )

    if not settings.JWT_ALGORITHM.upper().startswith("HS"):
        raise RuntimeError(
            f"JWT_ALGORITHM must be an HMAC algorithm (HS256/HS384/HS512), got {settings.JWT_ALGORITHM}"
        )

    if len(settings.JWT_SECRET_KEY) < MIN_PRODUCTION_KEY_LENGTH and settings.is_production:
        warnings.warn(
            "SECURITY WARNING: JWT_SECRET_KEY is too short for production. "
            "Use at least 32 characters.",
            UserWarning,
        )

    if "*" in settings.CORS_ORIGINS:
        warnings.warn(
            "SECURITY WARNING: CORS wildcard (*) detected. "
            "Set specific origins via CORS_ORIGINS.",
            UserWarning,
        )

    if settings.BCRYPT_ROUNDS < 10 and settings.is_production:
        warnings.warn(
            "SECURITY WARNING: BCRYPT_ROUNDS below 10 in production.",
            UserWarning,
        )
