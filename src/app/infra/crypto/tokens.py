"""Emissão e validação de tokens de acesso (JWT compacto, HS256).

Assinatura HMAC-SHA256 com comparação em tempo constante.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import json
import re
import uuid
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

from app.protocols.identity import TokenIssuerProtocol
from utils.errors import AuthenticationError

from .constants import TOKEN_ALGORITHM, TOKEN_CLOCK_SKEW

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.domain.models import User

_HEADER = {"alg": TOKEN_ALGORITHM, "typ": "JWT"}
_SEGMENT = re.compile(r"^[A-Za-z0-9_-]+\Z")


def _b64url_encode(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def _b64url_decode(value: str) -> bytes:
    padded = value + ("=" * (-len(value) % 4))
    return base64.urlsafe_b64decode(padded.encode("ascii"))


def _utcnow() -> datetime:
    return datetime.now(UTC)


class HmacTokenIssuer(TokenIssuerProtocol):
    """Emissor de tokens HS256.

    Args:
        secret: Chave simétrica de assinatura
        issuer: Claim `iss` (validada quando configurada)
        audience: Claim `aud` (validada quando configurada)
        expiration: Validade do token
        clock: Fonte de tempo (injetável em testes)
    """

    def __init__(
        self,
        secret: str,
        issuer: str | None = None,
        audience: str | None = None,
        expiration: timedelta = timedelta(days=1),
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if not secret:
            msg = "Segredo de assinatura de token não configurado"
            raise ValueError(msg)
        self._secret = secret.encode("utf-8")
        self._issuer = issuer or None
        self._audience = audience or None
        self._expiration = expiration
        self._clock = clock

    def _sign(self, signing_input: bytes) -> str:
        digest = hmac.new(self._secret, signing_input, hashlib.sha256).digest()
        return _b64url_encode(digest)

    def issue_token(self, user: User, roles: list[str]) -> str:
        now = self._clock()
        claims: dict[str, Any] = {
            "sub": user.name,
            "jti": str(uuid.uuid4()),
            "uid": user.id,
            "name": user.name,
            "roles": list(roles),
            "iat": int(now.timestamp()),
            "exp": int((now + self._expiration).timestamp()),
        }
        if self._issuer:
            claims["iss"] = self._issuer
        if self._audience:
            claims["aud"] = self._audience

        header = _b64url_encode(json.dumps(_HEADER, separators=(",", ":")).encode("utf-8"))
        payload = _b64url_encode(json.dumps(claims, separators=(",", ":")).encode("utf-8"))
        signing_input = f"{header}.{payload}".encode("ascii")
        return f"{header}.{payload}.{self._sign(signing_input)}"

    def verify_token(self, token: str) -> dict[str, Any]:
        parts = token.split(".")
        if len(parts) != 3 or not all(_SEGMENT.match(part) for part in parts):
            raise AuthenticationError("Token malformado")

        header_b64, payload_b64, signature = parts
        expected = self._sign(f"{header_b64}.{payload_b64}".encode("ascii"))
        if not hmac.compare_digest(expected.encode("ascii"), signature.encode("ascii")):
            raise AuthenticationError("Assinatura do token inválida")

        try:
            header = json.loads(_b64url_decode(header_b64))
            claims = json.loads(_b64url_decode(payload_b64))
        except (ValueError, binascii.Error, UnicodeDecodeError) as exc:
            raise AuthenticationError("Token malformado") from exc

        if (
            not isinstance(header, dict)
            or header.get("alg") != TOKEN_ALGORITHM
            or not isinstance(claims, dict)
        ):
            raise AuthenticationError("Token malformado")

        expires_at = claims.get("exp")
        if not isinstance(expires_at, (int, float)) or isinstance(expires_at, bool):
            raise AuthenticationError("Token sem expiração")
        if self._clock().timestamp() > expires_at + TOKEN_CLOCK_SKEW.total_seconds():
            raise AuthenticationError("Token expirado")
        if self._issuer and claims.get("iss") != self._issuer:
            raise AuthenticationError("Emissor do token inválido")
        if self._audience and claims.get("aud") != self._audience:
            raise AuthenticationError("Audiência do token inválida")
        if not claims.get("uid"):
            raise AuthenticationError("Token sem identificador de usuário")
        return claims
