"""Token issuance and verification."""

import time

import pytest
from pydantic import SecretStr

from src.bookstore.core.services import (
    JwtGeneratorService,
    JwtVerificationService,
    TokenIssueError,
    TokenVerificationError,
)
from src.bookstore.entities.core.user import User
from src.bookstore.runtime.config.config_data import ConfigData
from src.bookstore.runtime.context import with_context
from tests.utils import decode_segment, sign_claims


@pytest.fixture
def user() -> User:
    return User(id=7, username="ada", email="ada@example.com")


class TestJwtGeneration:
    def test_user_token_claims(self, jwt_generate_service: JwtGeneratorService, user: User, test_config):
        """Subject is the email and every role gets its own entry."""
        token = jwt_generate_service.generate_user_token(user, ["Administrator", "Customer"])

        header = decode_segment(token, 0)
        payload = decode_segment(token, 1)
        assert header == {"alg": "HS256", "typ": "JWT"}
        assert payload["sub"] == "ada@example.com"
        assert payload["nameid"] == "7"
        assert payload["roles"] == ["Administrator", "Customer"]
        assert payload["iss"] == test_config.jwt.issuer
        assert payload["aud"] == test_config.jwt.issuer
        assert payload["iat"] == payload["nbf"]
        assert payload["exp"] - payload["iat"] == 5 * 60

    def test_every_token_has_a_fresh_jti(self, jwt_generate_service: JwtGeneratorService, user: User):
        first = decode_segment(jwt_generate_service.generate_user_token(user, []), 1)
        second = decode_segment(jwt_generate_service.generate_user_token(user, []), 1)

        assert first["jti"] != second["jti"]

    def test_registered_claims_cannot_be_overridden(self, jwt_generate_service: JwtGeneratorService):
        token = jwt_generate_service.generate_jwt(
            subject="ada@example.com", claims={"sub": "mallory", "exp": 1, "tier": "gold"}
        )

        payload = decode_segment(token, 1)
        assert payload["sub"] == "ada@example.com"
        assert payload["exp"] > time.time()
        assert payload["tier"] == "gold"

    def test_lifetime_follows_configuration(self, jwt_generate_service: JwtGeneratorService, user: User):
        override = ConfigData()
        override.jwt.expires_minutes = 1

        with with_context(override):
            payload = decode_segment(jwt_generate_service.generate_user_token(user, []), 1)

        assert payload["exp"] - payload["iat"] == 60

    def test_missing_signing_key(self, jwt_generate_service: JwtGeneratorService, user: User):
        override = ConfigData()
        override.jwt.signing_key = None

        with with_context(override), pytest.raises(TokenIssueError, match="not configured"):
            jwt_generate_service.generate_user_token(user, [])

    def test_disallowed_algorithm(self, jwt_generate_service: JwtGeneratorService):
        with pytest.raises(TokenIssueError, match="not allowed"):
            jwt_generate_service.generate_jwt(subject="ada", algorithm="none")

    def test_error_never_contains_the_key(self, jwt_generate_service: JwtGeneratorService, test_config):
        with pytest.raises(TokenIssueError) as exc_info:
            jwt_generate_service.generate_jwt(subject="ada", algorithm="HS512")

        assert test_config.jwt.signing_key.get_secret_value() not in str(exc_info.value)


class TestJwtVerification:
    def test_round_trip(
        self,
        jwt_generate_service: JwtGeneratorService,
        jwt_verify_service: JwtVerificationService,
        user: User,
    ):
        token = jwt_generate_service.generate_user_token(user, ["Customer"])

        claims = jwt_verify_service.verify_jwt(token)

        assert claims.subject == "ada@example.com"
        assert claims.user_id == "7"
        assert claims.roles == ["Customer"]
        assert claims.has_role("Customer")
        assert not claims.has_role("Administrator")
        assert claims.jti is not None

    def test_valid_until_five_minutes_plus_skew(
        self,
        jwt_generate_service: JwtGeneratorService,
        jwt_verify_service: JwtVerificationService,
        user: User,
        test_config,
    ):
        token = jwt_generate_service.generate_user_token(user, [])
        expires_at = decode_segment(token, 1)["exp"]
        skew = test_config.jwt.clock_skew

        assert jwt_verify_service.verify_jwt(token, now=expires_at - 1).subject == user.email
        assert jwt_verify_service.verify_jwt(token, now=expires_at + skew - 1).subject == user.email

    def test_expired_after_five_minutes_plus_skew(
        self,
        jwt_generate_service: JwtGeneratorService,
        jwt_verify_service: JwtVerificationService,
        user: User,
        test_config,
    ):
        token = jwt_generate_service.generate_user_token(user, [])
        expires_at = decode_segment(token, 1)["exp"]

        with pytest.raises(TokenVerificationError):
            jwt_verify_service.verify_jwt(token, now=expires_at + test_config.jwt.clock_skew + 1)

    def test_tampered_payload(
        self,
        jwt_generate_service: JwtGeneratorService,
        jwt_verify_service: JwtVerificationService,
        user: User,
    ):
        header, _, signature = jwt_generate_service.generate_user_token(user, []).split(".")
        forged_payload = sign_claims({"roles": ["Administrator"]}).split(".")[1]

        with pytest.raises(TokenVerificationError):
            jwt_verify_service.verify_jwt(f"{header}.{forged_payload}.{signature}")

    def test_wrong_key(self, jwt_verify_service: JwtVerificationService):
        token = sign_claims({}, key="another-signing-key-0123456789-abcdefghij")

        with pytest.raises(TokenVerificationError):
            jwt_verify_service.verify_jwt(token)

    def test_wrong_issuer(self, jwt_verify_service: JwtVerificationService):
        token = sign_claims({"iss": "https://elsewhere.test"})

        with pytest.raises(TokenVerificationError):
            jwt_verify_service.verify_jwt(token)

    def test_wrong_audience(self, jwt_verify_service: JwtVerificationService):
        token = sign_claims({"aud": "https://elsewhere.test"})

        with pytest.raises(TokenVerificationError):
            jwt_verify_service.verify_jwt(token)

    def test_algorithm_outside_allow_list(self, jwt_verify_service: JwtVerificationService):
        token = sign_claims({}, alg="HS512")

        with pytest.raises(TokenVerificationError):
            jwt_verify_service.verify_jwt(token)

    def test_garbage(self, jwt_verify_service: JwtVerificationService):
        with pytest.raises(TokenVerificationError):
            jwt_verify_service.verify_jwt("not.a.token")

    def test_missing_signing_key(self, jwt_verify_service: JwtVerificationService):
        token = sign_claims({})
        override = ConfigData()
        override.jwt.signing_key = None

        with with_context(override), pytest.raises(TokenVerificationError):
            jwt_verify_service.verify_jwt(token)

    def test_explicit_key(self, jwt_verify_service: JwtVerificationService):
        key = "explicit-signing-key-0123456789-abcdefgh"

        claims = jwt_verify_service.verify_jwt(sign_claims({}, key=key), key=key)

        assert claims.subject == "someone@example.com"


def test_signing_key_is_secret(test_config):
    assert isinstance(test_config.jwt.signing_key, SecretStr)
    assert test_config.jwt.signing_key.get_secret_value() not in repr(test_config)
