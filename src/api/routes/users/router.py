"""Endpoints de usuários e pontuação."""

from __future__ import annotations

from fastapi import APIRouter

from api.dependencies import Container, CurrentUser
from api.schemas import UserScoreResponse

router = APIRouter()


@router.get("", response_model=list[UserScoreResponse])
def ranking(container: Container, _principal: CurrentUser) -> list[UserScoreResponse]:
    """Ranking de todos os usuários; disponível apenas com palpites liberados."""
    return [UserScoreResponse.from_domain(score) for score in container.scoring.ranking()]


@router.get("/my-score", response_model=UserScoreResponse)
def my_score(container: Container, principal: CurrentUser) -> UserScoreResponse:
    return UserScoreResponse.from_domain(container.scoring.my_score(principal.user.id))
