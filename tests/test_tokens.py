"""
Task Tracker API - Token Issuer Tests
"""

import time
from datetime import timedelta

import pytest
from jose import jwt

from tracker.auth.tokens import TokenIssuer
from tracker.config import settings


class TestTokenIssuer:

    def test_issued_token_carries_subject_and_future_expiry(self, token_issuer):
        token = token_issuer.issue("alice")
        payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=["HS256"])
        assert payload["sub"] == "alice"
        assert payload["exp"] > time.time()

    def test_default_expiry_is_seven_days(self):
        issuer = TokenIssuer("another-secret-key-for-expiry-checks-000000")
        payload = jwt.get_unverified_claims(issuer.issue("alice"))
        assert payload["exp"] - payload["iat"] == 7 * 24 * 60 * 60

    def test_decode_round_trip(self, token_issuer):
        assert token_issuer.decode(token_issuer.issue("bob")) == "bob"

    def test_decode_rejects_expired_token(self, token_issuer):
        token = token_issuer.issue("alice", expires_delta=timedelta(seconds=-1))
        assert token_issuer.decode(token) is None

    def test_decode_rejects_foreign_signature(self, token_issuer):
        forged = TokenIssuer("some-other-signing-key-aaaaaaaaaaaaaaaa").issue("alice")
        assert token_issuer.decode(forged) is None

    def test_decode_rejects_garbage(self, token_issuer):
        assert token_issuer.decode("invalid_token_here") is None

    def test_decode_rejects_token_without_subject(self, token_issuer):
        token = jwt.encode(
            {"exp": int(time.time()) + 60},
            settings.JWT_SECRET_KEY,
            algorithm="HS256",
        )
        assert token_issuer.decode(token) is None

    def test_missing_key_is_rejected(self):
        with pytest.raises(RuntimeError):
            TokenIssuer(None)
        with pytest.raises(RuntimeError):
            TokenIssuer("")
