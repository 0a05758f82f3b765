from __future__ import annotations

import base64
import hashlib
import hmac
import json
import time
from dataclasses import dataclass
from typing import FrozenSet, Iterable, Optional

READ_PETS = "read:pets"
WRITE_PETS = "write:pets"


@dataclass(frozen=True)
class AccessClaims:
    subject: str
    scopes: FrozenSet[str]
    expires_at: int

    def has_scope(self, scope: str) -> bool:
        return scope in self.scopes


def _b64url_encode(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).decode("utf-8").rstrip("=")


def _b64url_decode(raw: str) -> bytes:
    padding = "=" * (-len(raw) % 4)
    return base64.urlsafe_b64decode((raw + padding).encode("utf-8"))


def _sign(secret: str, msg: bytes) -> str:
    return _b64url_encode(hmac.new(secret.encode("utf-8"), msg, hashlib.sha256).digest())


def issue_token(*, subject: str, scopes: Iterable[str], secret: str, ttl_seconds: int = 60 * 60) -> str:
    """Issue a signed bearer token carrying OAuth2-style scope claims.

    Format: b64url(json claims).b64url(sig)

    Claims are ``sub``, ``exp`` (epoch seconds) and ``scope`` (space-delimited).
    """
    claims = {
        "sub": subject,
        "exp": int(time.time()) + int(ttl_seconds),
        "scope": " ".join(sorted(set(scopes))),
    }
    payload = json.dumps(claims, separators=(",", ":"), sort_keys=True).encode("utf-8")
    return "%s.%s" % (_b64url_encode(payload), _sign(secret, payload))


def verify_token(*, token: str, secret: str) -> Optional[AccessClaims]:
    """Return the token's claims, or None if it is malformed, forged or expired."""
    try:
        payload_b64, sig = token.split(".", 1)
        payload = _b64url_decode(payload_b64)
        expected = _sign(secret, payload)
        if not hmac.compare_digest(expected, sig):
            return None
        claims = json.loads(payload.decode("utf-8"))
        subject = str(claims.get("sub") or "")
        exp = int(claims["exp"])
        scope = claims.get("scope") or ""
    except (ValueError, KeyError, TypeError, AttributeError):
        return None
    if exp < int(time.time()):
        return None
    if not subject.strip():
        return None
    return AccessClaims(subject=subject, scopes=frozenset(str(scope).split()), expires_at=exp)


def bearer_token(authorization: Optional[str]) -> Optional[str]:
    if authorization and str(authorization).lower().startswith("bearer "):
        return str(authorization).split(" ", 1)[1].strip() or None
    return None
