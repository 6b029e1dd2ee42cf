"""JWT verification service."""

from authlib.jose import JoseError, JsonWebToken
from loguru import logger

from src.bookstore.core.models.claims import TokenClaims
from src.bookstore.runtime.context import get_config


class TokenVerificationError(ValueError):
    """The bearer token is malformed, badly signed, expired or for another audience."""


def _as_list(v):
    return [v] if isinstance(v, str) else list(v or ())


class JwtVerificationService:
    """Stateless verification of tokens issued by ``JwtGeneratorService``."""

    def verify_jwt(self, token: str, *, key: str | None = None, now: int | None = None) -> TokenClaims:
        """Verify signature and registered claims of ``token``.

        Args:
            token: Compact JWT from the Authorization header
            key: Verification key (defaults to ``jwt.signing_key``)
            now: Evaluation time in epoch seconds (defaults to the current time)

        Returns:
            The verified claims

        Raises:
            TokenVerificationError: If any check fails
        """
        cfg = get_config().jwt

        if key is None:
            if cfg.signing_key is None:
                raise TokenVerificationError("JWT signing key not configured")
            key = cfg.signing_key.get_secret_value()

        claims_options = {
            "iss": {"essential": True, "value": cfg.issuer},
            "aud": {"essential": True, "values": [cfg.issuer]},
            "sub": {"essential": True},
            "exp": {"essential": True},
        }

        try:
            claims = JsonWebToken(cfg.allowed_algorithms).decode(
                token, key, claims_options=claims_options
            )
            claims.validate(now=now, leeway=cfg.clock_skew)
        except (JoseError, ValueError) as exc:
            logger.debug("Token rejected: {}", type(exc).__name__)
            raise TokenVerificationError(f"JWT error: {exc}") from exc

        return TokenClaims(
            subject=claims["sub"],
            user_id=claims.get(cfg.claims.user_id),
            roles=_as_list(claims.get(cfg.claims.roles)),
            jti=claims.get("jti"),
            issuer=claims.get("iss"),
            audience=claims.get("aud"),
            issued_at=claims.get("iat"),
            expires_at=claims.get("exp"),
            raw=dict(claims),
        )
