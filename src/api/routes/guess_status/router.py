"""Endpoints do gate de visibilidade dos palpites."""

from __future__ import annotations

from fastapi import APIRouter

from api.dependencies import AdminUser, Container
from api.schemas import GuessStatusResponse

router = APIRouter()


@router.get("", response_model=GuessStatusResponse)
def get_guess_status(container: Container) -> GuessStatusResponse:
    return GuessStatusResponse(locked=container.gate.get_status())


@router.post("/toggle", response_model=GuessStatusResponse)
def toggle_guess_status(container: Container, admin: AdminUser) -> GuessStatusResponse:
    """Inverte o gate e notifica os clientes conectados em /ws/guess-status."""
    return GuessStatusResponse(locked=container.gate.toggle_status(actor=admin.user.name))
