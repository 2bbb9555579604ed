"""Tests for password hashing and session tokens."""

from datetime import timedelta

import pytest
from jose import jwt

from restapi_tutor.core import security
from restapi_tutor.core.errors import AuthError
from restapi_tutor.core.security import PasswordHasher, SessionIssuer


class TestPasswordHashing:
    """Tests for the bcrypt wrapper."""

    async def test_hash_is_not_plaintext(self, hasher):
        """The stored hash never contains the password."""
        hashed = await hasher.hash("secret123")
        assert hashed
        assert "secret123" not in hashed

    async def test_verify_round_trip(self, hasher):
        hashed = await hasher.hash("secret123")
        assert await hasher.verify("secret123", hashed) is True
        assert await hasher.verify("secret124", hashed) is False

    async def test_hashes_are_salted(self, hasher):
        """Hashing the same password twice gives different hashes."""
        assert await hasher.hash("secret123") != await hasher.hash("secret123")

    async def test_rounds_come_from_constructor(self):
        hashed = await PasswordHasher(rounds=5).hash("secret123")
        assert hashed.startswith("$2b$05$")

    async def test_bcrypt_runs_off_the_event_loop(self, hasher, monkeypatch):
        """hash, verify and the dummy check all go through the threadpool."""
        offloaded = []

        async def recording_threadpool(func, *args):
            offloaded.append(func.__name__)
            return func(*args)

        monkeypatch.setattr(security, "run_in_threadpool", recording_threadpool)
        hashed = await hasher.hash("secret123")
        await hasher.verify("secret123", hashed)
        await hasher.burn_check("secret123")

        # burn_check hashes the dummy password once, then verifies
        assert offloaded == ["hash", "verify", "hash", "verify"]


class TestSessionIssuer:
    """Tests for issuing and verifying bearer tokens."""

    def test_issue_and_verify(self, issuer):
        token = issuer.issue(7, "alice")
        claims = issuer.verify(token)
        assert claims.identity_id == 7
        assert claims.username == "alice"

    def test_token_carries_seven_day_expiry(self, issuer):
        token = issuer.issue(7, "alice")
        payload = jwt.get_unverified_claims(token)
        assert payload["exp"] - payload["iat"] == 7 * 24 * 3600

    @pytest.mark.parametrize("token", [None, "", "not-a-jwt", "a.b.c"])
    def test_missing_or_malformed_token_rejected(self, issuer, token):
        with pytest.raises(AuthError):
            issuer.verify(token)

    def test_expired_token_rejected(self):
        expired = SessionIssuer("test-secret", expires_in=timedelta(seconds=-60))
        token = expired.issue(1, "alice")
        with pytest.raises(AuthError):
            SessionIssuer("test-secret").verify(token)

    def test_token_from_other_secret_rejected(self, issuer):
        forged = SessionIssuer("someone-else").issue(1, "alice")
        with pytest.raises(AuthError):
            issuer.verify(forged)

    def test_tampered_payload_rejected(self, issuer):
        header, _, signature = issuer.issue(1, "alice").split(".")
        other_payload = issuer.issue(2, "bob").split(".")[1]
        with pytest.raises(AuthError):
            issuer.verify(f"{header}.{other_payload}.{signature}")

    def test_failures_share_one_message(self, issuer):
        """Expired, forged and missing tokens are indistinguishable to the caller."""
        expired = SessionIssuer("test-secret", expires_in=timedelta(seconds=-60)).issue(1, "alice")
        forged = SessionIssuer("someone-else").issue(1, "alice")
        messages = set()
        for token in (expired, forged, None):
            with pytest.raises(AuthError) as excinfo:
                issuer.verify(token)
            messages.add(excinfo.value.message)
        assert messages == {"Invalid or expired token"}

    def test_empty_secret_refused(self):
        with pytest.raises(ValueError):
            SessionIssuer("")
