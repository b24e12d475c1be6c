"""Symmetric encryption utilities for protecting stored tokens."""

from __future__ import annotations

import base64
import hashlib
from typing import Any, Dict, Iterable

from cryptography.fernet import Fernet, InvalidToken


class TokenCipherService:
    """Encrypt and decrypt token fields using a Fernet key derived from a secret."""

    def __init__(self, *, secret: str) -> None:
        if not secret:
            raise ValueError("Token encryption secret must be provided.")
        digest = hashlib.sha256(secret.encode("utf-8")).digest()
        self._fernet = Fernet(base64.urlsafe_b64encode(digest))

    def encrypt(self, plaintext: str) -> str:
        return self._fernet.encrypt(plaintext.encode("utf-8")).decode("utf-8")

    def decrypt(self, ciphertext: str) -> str:
        try:
            plaintext = self._fernet.decrypt(ciphertext.encode("utf-8"))
        except InvalidToken as exc:
            raise ValueError(
                "Failed to decrypt token; invalid ciphertext provided."
            ) from exc
        return plaintext.decode("utf-8")

    def encrypt_fields(
        self, record: Dict[str, Any], fields: Iterable[str]
    ) -> Dict[str, Any]:
        """Return a copy of ``record`` with the named string fields encrypted."""
        encrypted = dict(record)
        for field in fields:
            if encrypted.get(field):
                encrypted[field] = self.encrypt(encrypted[field])
        return encrypted

    def decrypt_fields(
        self, record: Dict[str, Any], fields: Iterable[str]
    ) -> Dict[str, Any]:
        """Inverse of :meth:`encrypt_fields`."""
        decrypted = dict(record)
        for field in fields:
            if decrypted.get(field):
                decrypted[field] = self.decrypt(decrypted[field])
        return decrypted


__all__ = ["TokenCipherService"]
