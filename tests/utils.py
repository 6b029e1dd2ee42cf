import base64
import json
import time
from typing import Any

from authlib.jose import JsonWebToken

from src.bookstore.runtime.context import get_config

SEED_PASSWORD = "P@ssword1"
ADMIN_USERNAME = "admin@bookstore.com"
CUSTOMER_USERNAME = "customer@gmail.com"


def decode_segment(token: str, index: int) -> dict[str, Any]:
    """Decode one segment of a compact JWT without verifying it."""
    segment = token.split(".")[index]
    padded = segment + "=" * (-len(segment) % 4)
    return json.loads(base64.urlsafe_b64decode(padded))


def sign_claims(claims: dict[str, Any], key: str | None = None, alg: str = "HS256") -> str:
    """Sign arbitrary claims, for tokens the application would never issue."""
    jwt_cfg = get_config().jwt
    secret = key or jwt_cfg.signing_key.get_secret_value()
    now = int(time.time())
    payload = {
        "iss": jwt_cfg.issuer,
        "aud": jwt_cfg.issuer,
        "sub": "someone@example.com",
        "iat": now,
        "nbf": now,
        "exp": now + 300,
        **claims,
    }
    token = JsonWebToken([alg]).encode({"alg": alg, "typ": "JWT"}, payload, secret)
    return token.decode() if isinstance(token, bytes) else token


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
