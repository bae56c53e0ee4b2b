from __future__ import annotations

import sys
from dataclasses import replace
from pathlib import Path

import pytest

# Garante que o pacote nullspire seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from nullspire.core.config import get_settings
from nullspire.core.security import (
    Argon2SecretVerifier,
    AuthError,
    StaticSecretVerifier,
    build_verifier,
    hash_secret,
    require_credential,
)


def test_static_secret_requires_exact_match():
    verifier = StaticSecretVerifier("ChatGPT123")

    assert verifier.verify("ChatGPT123") is True
    assert verifier.verify("chatgpt123") is False
    assert verifier.verify("ChatGPT123 ") is False
    assert verifier.verify(None) is False


def test_argon2_verifier_accepts_only_hashed_secret():
    verifier = Argon2SecretVerifier(hash_secret("s3cret"))

    assert verifier.verify("s3cret") is True
    assert verifier.verify("other") is False
    assert verifier.verify("") is False


def test_argon2_verifier_with_garbage_hash_denies():
    assert Argon2SecretVerifier("not-a-hash").verify("s3cret") is False


def test_build_verifier_prefers_hash():
    settings = get_settings()
    hashed = replace(settings, admin_password="plain", admin_password_hash=hash_secret("hashed"))
    plain = replace(settings, admin_password="plain", admin_password_hash="")

    assert isinstance(build_verifier(hashed), Argon2SecretVerifier)
    assert build_verifier(hashed).verify("plain") is False
    assert isinstance(build_verifier(plain), StaticSecretVerifier)


def test_require_credential_raises_auth_error():
    with pytest.raises(AuthError):
        require_credential(StaticSecretVerifier("x"), "y")
    require_credential(StaticSecretVerifier("x"), "x")
