from softjobs.auth.passwords import dummy_password_hash, hash_password, verify_password


def test_hash_password_never_returns_plaintext() -> None:
    hashed = hash_password('secret', rounds=4)

    assert hashed != 'secret'
    assert hashed.startswith('$2b$04$')


def test_hash_password_salts_each_call() -> None:
    assert hash_password('secret', rounds=4) != hash_password('secret', rounds=4)


def test_verify_password_accepts_matching_password() -> None:
    hashed = hash_password('secret', rounds=4)

    assert verify_password('secret', hashed) is True


def test_verify_password_rejects_wrong_password() -> None:
    hashed = hash_password('secret', rounds=4)

    assert verify_password('Secret', hashed) is False


def test_verify_password_returns_false_for_malformed_hash() -> None:
    assert verify_password('secret', 'not-a-bcrypt-hash') is False


def test_long_password_hashes_and_verifies() -> None:
    password = 'x' * 80
    hashed = hash_password(password, rounds=4)

    assert verify_password(password, hashed) is True


def test_multibyte_password_past_72_bytes_hashes_and_verifies() -> None:
    password = 'contraseña-ñandú-' * 5
    assert len(password.encode()) > 72

    hashed = hash_password(password, rounds=4)

    assert verify_password(password, hashed) is True


def test_dummy_password_hash_is_reused_per_work_factor() -> None:
    assert dummy_password_hash(4) == dummy_password_hash(4)
    assert verify_password('anything', dummy_password_hash(4)) is False
