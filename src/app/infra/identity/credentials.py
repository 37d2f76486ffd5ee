"""Regras de cadastro comuns aos provedores de identidade."""

from __future__ import annotations

MIN_PASSWORD_LENGTH = 6


def normalize_name(name: str) -> str:
    """Chave de unicidade do nome (sem espaços nas pontas, case-insensitive)."""
    return name.strip().casefold()


def credential_errors(name: str, password: str, min_password_length: int) -> list[str]:
    errors: list[str] = []
    if not name.strip():
        errors.append("Nome de usuário é obrigatório.")
    if len(password) < min_password_length:
        errors.append(f"Senha deve ter ao menos {min_password_length} caracteres.")
    return errors


def name_taken_error(name: str) -> str:
    return f"Nome de usuário '{name.strip()}' já está em uso."
