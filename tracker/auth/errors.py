from enum import Enum


class AuthError(str, Enum):
    """Business-rule failures returned by registration, login and user writes."""
    INVALID_USERNAME = "invalid_username"
    DUPLICATE_USERNAME = "duplicate_username"
    INVALID_CREDENTIALS = "invalid_credentials"
    PERSISTENCE_FAILURE = "persistence_failure"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    AuthError.INVALID_USERNAME: "Username is required.",
    AuthError.DUPLICATE_USERNAME: "Username already exists.",
    # Same text for unknown user and wrong password
    AuthError.INVALID_CREDENTIALS: "Invalid username or password.",
    AuthError.PERSISTENCE_FAILURE: "Internal server error.",
}
