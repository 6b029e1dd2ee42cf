import time
import uuid
from typing import Any

from authlib.jose import JoseError, JsonWebToken

from src.bookstore.entities.core.user import User
from src.bookstore.runtime.config.config_data import ConfigData
from src.bookstore.runtime.context import get_config

_REGISTERED_CLAIMS = {"iss", "sub", "aud", "exp", "iat", "nbf", "jti"}


class TokenIssueError(RuntimeError):
    """The token could not be signed. The message never contains key material."""


class JwtGeneratorService:
    """Service for generating signed bearer tokens for API authentication."""

    def generate_jwt(
        self,
        subject: str,
        claims: dict[str, Any] | None = None,
        expires_in_seconds: int | None = None,
        issuer: str | None = None,
        audience: str | None = None,
        algorithm: str | None = None,
        secret: str | None = None,
    ) -> str:
        """Generate a signed JWT using authlib.

        Args:
            subject: Subject (sub) claim
            claims: Additional claims to include in the token
            expires_in_seconds: Token lifetime (defaults to ``jwt.expires_minutes``)
            issuer: Issuer (iss) claim (defaults to ``jwt.issuer``)
            audience: Audience (aud) claim (defaults to the issuer)
            algorithm: Signing algorithm (defaults to ``jwt.algorithm``)
            secret: Signing key (defaults to ``jwt.signing_key``)

        Returns:
            Signed JWT in compact serialisation

        Raises:
            TokenIssueError: If the key is missing, the algorithm is not
                allowed, or signing fails
        """
        config: ConfigData = get_config()
        jwt_cfg = config.jwt

        issuer = issuer or jwt_cfg.issuer
        algorithm = algorithm or jwt_cfg.algorithm
        if expires_in_seconds is None:
            expires_in_seconds = jwt_cfg.expires_minutes * 60

        if not secret:
            if jwt_cfg.signing_key is None:
                raise TokenIssueError("JWT signing key not configured")
            secret = jwt_cfg.signing_key.get_secret_value()

        if algorithm not in jwt_cfg.allowed_algorithms:
            raise TokenIssueError(f"Algorithm {algorithm} not allowed")

        now = int(time.time())
        payload: dict[str, Any] = {
            "iss": issuer,
            "sub": subject,
            "aud": audience or issuer,
            "exp": now + expires_in_seconds,
            "iat": now,
            "nbf": now,
            "jti": str(uuid.uuid4()),
        }

        if claims:
            payload.update({k: v for k, v in claims.items() if k not in _REGISTERED_CLAIMS})

        header = {"alg": algorithm, "typ": "JWT"}
        try:
            token = JsonWebToken([algorithm]).encode(header, payload, secret)
        except JoseError as e:
            raise TokenIssueError(f"JWT encoding failed: {type(e).__name__}") from e

        return token.decode() if isinstance(token, bytes) else token

    def generate_user_token(self, user: User, roles: list[str]) -> str:
        """Issue the login token for ``user``.

        The subject is the user's email, the internal id travels in the
        name-identifier claim and every role gets its own entry in the roles
        claim.
        """
        claim_names = get_config().jwt.claims
        return self.generate_jwt(
            subject=user.email,
            claims={
                claim_names.user_id: str(user.id),
                claim_names.roles: list(roles),
            },
        )
