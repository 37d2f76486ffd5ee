"""Hash de senhas com scrypt (cryptography).

Formato armazenado: ``scrypt$<n>$<r>$<p>$<salt_b64>$<hash_b64>``.
"""

from __future__ import annotations

import base64
import binascii
import os

from cryptography.exceptions import InvalidKey
from cryptography.hazmat.primitives.kdf.scrypt import Scrypt

from .constants import PASSWORD_HASH_SIZE, PASSWORD_SALT_SIZE, SCRYPT_N, SCRYPT_P, SCRYPT_R
from .errors import PasswordHashError

_SCHEME = "scrypt"


def _b64encode(raw: bytes) -> str:
    return base64.b64encode(raw).decode("ascii")


def hash_password(password: str) -> str:
    """Gera hash scrypt com salt aleatório.

    Args:
        password: Senha em texto puro (nunca logar)

    Returns:
        Hash codificado para armazenamento
    """
    salt = os.urandom(PASSWORD_SALT_SIZE)
    kdf = Scrypt(salt=salt, length=PASSWORD_HASH_SIZE, n=SCRYPT_N, r=SCRYPT_R, p=SCRYPT_P)
    derived = kdf.derive(password.encode("utf-8"))
    return "$".join(
        [_SCHEME, str(SCRYPT_N), str(SCRYPT_R), str(SCRYPT_P), _b64encode(salt), _b64encode(derived)]
    )


def verify_password(password: str, encoded: str) -> bool:
    """Confere a senha contra o hash armazenado (tempo constante).

    Raises:
        PasswordHashError: Se o hash armazenado estiver corrompido
    """
    parts = encoded.split("$")
    if len(parts) != 6 or parts[0] != _SCHEME:
        raise PasswordHashError("Formato de hash de senha desconhecido")

    try:
        n, r, p = (int(value) for value in parts[1:4])
        salt = base64.b64decode(parts[4], validate=True)
        expected = base64.b64decode(parts[5], validate=True)
    except (ValueError, binascii.Error) as exc:
        raise PasswordHashError(f"Hash de senha inválido: {exc}") from exc

    kdf = Scrypt(salt=salt, length=len(expected), n=n, r=r, p=p)
    try:
        kdf.verify(password.encode("utf-8"), expected)
    except InvalidKey:
        return False
    return True
