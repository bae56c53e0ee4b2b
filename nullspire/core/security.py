"""Admin credential verification (static shared secret or Argon2 hash)."""

from __future__ import annotations

import logging
import secrets
from typing import Protocol

from argon2 import PasswordHasher, exceptions as argon_exc

from .config import Settings

logger = logging.getLogger(__name__)

_ph = PasswordHasher()
_PREFIX = "argon2$"


class AuthError(Exception):
    """Raised when the supplied admin credential does not match."""


class CredentialVerifier(Protocol):
    def verify(self, supplied: str | None) -> bool:
        ...


class StaticSecretVerifier:
    """Exact comparison against a single shared secret."""

    def __init__(self, secret: str) -> None:
        self._secret = secret

    def verify(self, supplied: str | None) -> bool:
        if supplied is None or not self._secret:
            return False
        return secrets.compare_digest(supplied.encode("utf-8"), self._secret.encode("utf-8"))


class Argon2SecretVerifier:
    """Checks the shared secret against a stored Argon2 hash."""

    def __init__(self, stored_hash: str) -> None:
        self._stored = stored_hash[len(_PREFIX):] if stored_hash.startswith(_PREFIX) else stored_hash

    def verify(self, supplied: str | None) -> bool:
        if not supplied:
            return False
        try:
            return _ph.verify(self._stored, supplied)
        except (argon_exc.VerifyMismatchError, argon_exc.VerificationError, argon_exc.InvalidHashError):
            return False


def hash_secret(secret: str) -> str:
    """Create an Argon2 hash with a prefix for detection."""
    return f"{_PREFIX}{_ph.hash(secret)}"


def build_verifier(settings: Settings) -> CredentialVerifier:
    if settings.admin_password_hash:
        return Argon2SecretVerifier(settings.admin_password_hash)
    return StaticSecretVerifier(settings.admin_password)


def require_credential(verifier: CredentialVerifier, supplied: str | None) -> None:
    if not verifier.verify(supplied):
        logger.warning("Rejected admin credential")
        raise AuthError("Unauthorized")
