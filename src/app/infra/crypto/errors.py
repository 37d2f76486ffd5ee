"""Erros de criptografia de credenciais."""


class PasswordHashError(Exception):
    """Hash de senha armazenado em formato inválido."""
