"""Unit Tests for password hashing."""

from credit_system.core.security import hash_password, verify_password


def test_hash_is_salted():
    first = hash_password("1234", iterations=1000)
    second = hash_password("1234", iterations=1000)

    assert first != second
    assert "1234" not in first


def test_verify_accepts_correct_password():
    stored = hash_password("s3cret", iterations=1000)

    assert verify_password("s3cret", stored, iterations=1000)


def test_verify_rejects_wrong_password():
    stored = hash_password("s3cret", iterations=1000)

    assert not verify_password("S3cret", stored, iterations=1000)


def test_verify_rejects_mismatched_iterations():
    stored = hash_password("s3cret", iterations=1000)

    assert not verify_password("s3cret", stored, iterations=2000)


def test_verify_rejects_malformed_value():
    assert not verify_password("s3cret", "not-a-hash")
    assert not verify_password("s3cret", "zz$abcd")
