"""Testes do emissor de tokens HS256."""

from __future__ import annotations

import base64
from datetime import UTC, datetime, timedelta

import pytest

from app.domain.models import User
from app.infra.crypto import HmacTokenIssuer
from utils.errors import AuthenticationError

SECRET = "test-secret-with-at-least-32-characters!"
USER = User(id="user-1", name="maria")


class _Clock:
    def __init__(self) -> None:
        self.now = datetime(2026, 3, 1, 20, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now


class TestHmacTokenIssuer:
    """Testes de emissão e validação."""

    def test_issue_and_verify_claims(self) -> None:
        issuer = HmacTokenIssuer(SECRET, issuer="palpitheion", audience="web")

        claims = issuer.verify_token(issuer.issue_token(USER, ["Usuario"]))

        assert claims["sub"] == "maria"
        assert claims["name"] == "maria"
        assert claims["uid"] == "user-1"
        assert claims["roles"] == ["Usuario"]
        assert claims["iss"] == "palpitheion"
        assert claims["aud"] == "web"
        assert claims["jti"]

    def test_expiration_is_in_days(self) -> None:
        clock = _Clock()
        issuer = HmacTokenIssuer(SECRET, expiration=timedelta(days=1), clock=clock)
        token = issuer.issue_token(USER, [])

        clock.now += timedelta(hours=23)
        assert issuer.verify_token(token)["uid"] == "user-1"

        clock.now += timedelta(hours=2)
        with pytest.raises(AuthenticationError, match="expirado"):
            issuer.verify_token(token)

    def test_clock_skew_tolerance(self) -> None:
        clock = _Clock()
        issuer = HmacTokenIssuer(SECRET, expiration=timedelta(minutes=5), clock=clock)
        token = issuer.issue_token(USER, [])

        clock.now += timedelta(minutes=6)
        assert issuer.verify_token(token)["uid"] == "user-1"

    def test_tampered_signature_rejected(self) -> None:
        issuer = HmacTokenIssuer(SECRET)
        header, payload, signature = issuer.issue_token(USER, []).split(".")
        forged = f"{header}.{payload}.{signature[:-2]}xx"

        with pytest.raises(AuthenticationError):
            issuer.verify_token(forged)

    def test_other_secret_rejected(self) -> None:
        token = HmacTokenIssuer("outro-segredo-com-tamanho-suficiente!!").issue_token(USER, [])

        with pytest.raises(AuthenticationError, match="Assinatura"):
            HmacTokenIssuer(SECRET).verify_token(token)

    def test_wrong_audience_rejected(self) -> None:
        token = HmacTokenIssuer(SECRET, audience="mobile").issue_token(USER, [])

        with pytest.raises(AuthenticationError, match="Audiência"):
            HmacTokenIssuer(SECRET, audience="web").verify_token(token)

    @pytest.mark.parametrize(
        "token",
        ["", "abc", "a.b", "a.b.\u00e7", "\u00e7.b.c", "a.\u00e9.c", "a.b.c=", "a..c"],
    )
    def test_malformed_token(self, token: str) -> None:
        with pytest.raises(AuthenticationError):
            HmacTokenIssuer(SECRET).verify_token(token)

    def test_empty_secret_rejected(self) -> None:
        with pytest.raises(ValueError):
            HmacTokenIssuer("")

    def test_signed_token_with_non_object_header_rejected(self) -> None:
        issuer = HmacTokenIssuer(SECRET)
        header = base64.urlsafe_b64encode(b"[1]").rstrip(b"=").decode("ascii")
        payload = base64.urlsafe_b64encode(b'{"uid":"u"}').rstrip(b"=").decode("ascii")
        signature = issuer._sign(f"{header}.{payload}".encode("ascii"))

        with pytest.raises(AuthenticationError, match="malformado"):
            issuer.verify_token(f"{header}.{payload}.{signature}")

    def test_signed_token_without_expiration_rejected(self) -> None:
        issuer = HmacTokenIssuer(SECRET)
        header = base64.urlsafe_b64encode(b'{"alg":"HS256"}').rstrip(b"=").decode("ascii")
        payload = base64.urlsafe_b64encode(b'{"uid":"u"}').rstrip(b"=").decode("ascii")
        signature = issuer._sign(f"{header}.{payload}".encode("ascii"))

        with pytest.raises(AuthenticationError, match="expiração"):
            issuer.verify_token(f"{header}.{payload}.{signature}")
