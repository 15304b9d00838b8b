"""
Token codec and token issuer tests
"""
import time
from concurrent.futures import ThreadPoolExecutor

import pytest
from jose import jwt

from app.core.exceptions import ExpiredTokenError, InvalidSignatureError, MalformedTokenError
from app.core.security import TokenCodec, TokenIssuer, get_password_hash, verify_password

SECRET = "unit-test-secret-key-unit-test-secret-key"
HOUR_MS = 60 * 60 * 1000


@pytest.fixture
def codec():
    return TokenCodec(SECRET)


class FakeClock:
    """Returns queued timestamps and records requested sleeps."""

    def __init__(self, *times):
        self.times = list(times)
        self.sleeps = []

    def __call__(self):
        return self.times.pop(0)

    def sleep(self, seconds):
        self.sleeps.append(seconds)


def test_password_hash_roundtrip():
    hashed = get_password_hash("correct horse")
    assert hashed != "correct horse"
    assert verify_password("correct horse", hashed)
    assert not verify_password("wrong horse", hashed)


def test_encode_carries_subject_and_jti(codec):
    token = codec.encode("user@example.com", HOUR_MS, {"roles": ["USER"]})
    claims = codec.decode(token)

    assert claims["sub"] == "user@example.com"
    assert claims["roles"] == ["USER"]
    assert claims["exp"] - claims["iat"] == 3600
    assert claims["jti"]


def test_fresh_token_is_not_expired(codec):
    token = codec.encode("user@example.com", HOUR_MS)
    assert codec.is_expired(token) is False
    assert codec.is_valid_for(token, "user@example.com")


def test_expired_token(codec):
    token = codec.encode("user@example.com", -5000)

    assert codec.is_expired(token) is True
    assert codec.is_valid_for(token, "user@example.com") is False
    with pytest.raises(ExpiredTokenError):
        codec.decode(token)


def test_extract_expiration(codec):
    token = codec.encode("user@example.com", HOUR_MS, issued_at=1_700_000_000)
    # expired long ago, but the claim is still readable
    assert codec.extract_expiration(token).timestamp() == 1_700_003_600


def test_malformed_token(codec):
    with pytest.raises(MalformedTokenError):
        codec.decode("not-a-jwt")


def test_signature_mismatch(codec):
    foreign = TokenCodec("another-secret-another-secret-another").encode("user@example.com", HOUR_MS)

    with pytest.raises(InvalidSignatureError):
        codec.decode(foreign)
    assert codec.is_valid_for(foreign, "user@example.com") is False


def test_tampered_payload(codec):
    token = codec.encode("user@example.com", HOUR_MS)
    header, _, signature = token.split(".")
    _, forged_payload, _ = jwt.encode({"sub": "admin@example.com"}, "x", algorithm="HS256").split(".")

    with pytest.raises(InvalidSignatureError):
        codec.decode(f"{header}.{forged_payload}.{signature}")


def test_is_valid_for_other_subject(codec):
    token = codec.encode("user@example.com", HOUR_MS)
    assert codec.is_valid_for(token, "someone-else@example.com") is False


def test_issuer_rejects_access_not_shorter_than_refresh(codec):
    with pytest.raises(ValueError):
        TokenIssuer(codec, HOUR_MS, HOUR_MS)


def test_issuer_waits_for_next_second():
    clock = FakeClock(100.2, 100.5, 101.001)
    issuer = TokenIssuer(TokenCodec(SECRET), HOUR_MS, 2 * HOUR_MS, clock=clock, sleep=clock.sleep)

    first = issuer.issue_access_token("user@example.com")
    second = issuer.issue_refresh_token("user@example.com")

    assert len(clock.sleeps) == 1
    assert clock.sleeps[0] == pytest.approx(0.501)
    assert jwt.get_unverified_claims(first)["iat"] == 100
    assert jwt.get_unverified_claims(second)["iat"] == 101


def test_issuer_does_not_wait_across_seconds():
    clock = FakeClock(100.2, 101.3)
    issuer = TokenIssuer(TokenCodec(SECRET), HOUR_MS, 2 * HOUR_MS, clock=clock, sleep=clock.sleep)

    issuer.issue_access_token("user@example.com")
    issuer.issue_access_token("user@example.com")

    assert clock.sleeps == []


def test_successive_tokens_differ():
    issuer = TokenIssuer(TokenCodec(SECRET), HOUR_MS, 2 * HOUR_MS)

    started = time.monotonic()
    first = issuer.issue_access_token("user@example.com")
    second = issuer.issue_access_token("user@example.com")

    assert first != second
    assert jwt.get_unverified_claims(first)["iat"] < jwt.get_unverified_claims(second)["iat"]
    assert time.monotonic() - started < 2.5


class SteppingClock:
    """Starts inside one second; sleeping advances the time."""

    def __init__(self, start=100.0):
        self.now = start
        self.sleeps = []

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        # give the other threads a chance to interleave
        time.sleep(0.001)
        self.now += seconds


def test_concurrent_issuance_gets_distinct_issued_at():
    clock = SteppingClock()
    issuer = TokenIssuer(TokenCodec(SECRET), HOUR_MS, 2 * HOUR_MS, clock=clock, sleep=clock.sleep)

    with ThreadPoolExecutor(max_workers=8) as pool:
        tokens = list(pool.map(
            lambda i: issuer.issue_access_token(f"user{i}@example.com"), range(8)
        ))

    issued_at = [jwt.get_unverified_claims(token)["iat"] for token in tokens]
    assert len(set(issued_at)) == 8
    assert len(set(tokens)) == 8
    assert len(clock.sleeps) == 7
