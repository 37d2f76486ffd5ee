"""Constantes criptográficas de senhas e tokens."""

from datetime import timedelta

PASSWORD_SALT_SIZE = 16  # 128 bits
PASSWORD_HASH_SIZE = 32  # 256 bits
SCRYPT_N = 2**14
SCRYPT_R = 8
SCRYPT_P = 1

TOKEN_ALGORITHM = "HS256"
TOKEN_CLOCK_SKEW = timedelta(minutes=2)
