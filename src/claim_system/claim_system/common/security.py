"""Password hashing.

Two formats can live side by side in lecturers.json:

- plain SHA-256 digests (base64, unsalted), the historical format;
- werkzeug hashes (``method$salt$hash``), used when the salted scheme is on.

``verify_password`` accepts both so switching schemes never locks out
existing accounts.
"""

from __future__ import annotations

import base64
import hashlib
import hmac

from werkzeug.security import check_password_hash, generate_password_hash

from ..core.enums import PasswordScheme


def hash_password(plaintext: str) -> str:
    """Deterministic SHA-256 digest of the password, base64 encoded."""
    digest = hashlib.sha256(plaintext.encode("utf-8")).digest()
    return base64.b64encode(digest).decode("ascii")


def hash_password_salted(plaintext: str) -> str:
    return generate_password_hash(plaintext)


def hash_with_scheme(plaintext: str, scheme: PasswordScheme) -> str:
    if scheme == PasswordScheme.SALTED:
        return hash_password_salted(plaintext)
    return hash_password(plaintext)


def _is_werkzeug_hash(stored: str) -> bool:
    return stored.count("$") >= 2


def verify_password(stored: str, plaintext: str) -> bool:
    if not stored:
        return False

    if _is_werkzeug_hash(stored):
        try:
            return check_password_hash(stored, plaintext)
        except ValueError:
            # unknown method prefix or corrupted value
            return False

    return hmac.compare_digest(stored, hash_password(plaintext))
