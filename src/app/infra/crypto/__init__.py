"""Criptografia de credenciais: hash de senhas e tokens de acesso.

Localizado em app/infra/ para manter boundaries corretas: serviços em
app/services dependem apenas dos protocolos em app/protocols.
"""

from .constants import PASSWORD_HASH_SIZE, PASSWORD_SALT_SIZE, TOKEN_ALGORITHM
from .errors import PasswordHashError
from .passwords import hash_password, verify_password
from .tokens import HmacTokenIssuer

__all__ = [
    "PASSWORD_HASH_SIZE",
    "PASSWORD_SALT_SIZE",
    "TOKEN_ALGORITHM",
    "HmacTokenIssuer",
    "PasswordHashError",
    "hash_password",
    "verify_password",
]
