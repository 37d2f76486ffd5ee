"""Schemas pydantic de request/response da API HTTP.

Conversões domínio -> resposta ficam aqui para manter os routers finos.
"""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

from app.domain.models import Category, CategoryGuess, Guess, Nominee, UserScore
from app.services import AuthSession, NomineeView

# ──────────────────────────────────────────────────────────────────────────────
# Requests
# ──────────────────────────────────────────────────────────────────────────────


class CredentialsRequest(BaseModel):
    """Credenciais de login/registro."""

    model_config = ConfigDict(str_strip_whitespace=True)

    user_name: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=1, max_length=256)


class CategoryRequest(BaseModel):
    name: str
    description: str | None = None


class NomineeRequest(BaseModel):
    name: str
    small_image_url: str | None = None
    large_image_url: str | None = None


class WinnerRequest(BaseModel):
    """Vencedor da categoria; `null` limpa."""

    nominee_id: int | None = None


class GuessRequest(BaseModel):
    nominee_id: int


# ──────────────────────────────────────────────────────────────────────────────
# Responses
# ──────────────────────────────────────────────────────────────────────────────


class ErrorResponse(BaseModel):
    error: str
    detail: str


class AuthResponse(BaseModel):
    token: str
    user_name: str
    roles: list[str]

    @classmethod
    def from_session(cls, session: AuthSession) -> AuthResponse:
        return cls(token=session.token, user_name=session.user_name, roles=list(session.roles))


class GuessStatusResponse(BaseModel):
    """Estado do gate: `locked=true` significa palpites congelados e públicos."""

    locked: bool


class NomineeResponse(BaseModel):
    id: int
    name: str
    small_image_url: str | None = None
    large_image_url: str | None = None

    @classmethod
    def from_domain(cls, nominee: Nominee) -> NomineeResponse:
        return cls(
            id=nominee.id,
            name=nominee.name,
            small_image_url=nominee.small_image_url,
            large_image_url=nominee.large_image_url,
        )


class NomineeDetailResponse(NomineeResponse):
    category_ids: list[int]

    @classmethod
    def from_view(cls, view: NomineeView) -> NomineeDetailResponse:
        nominee = view.nominee
        return cls(
            id=nominee.id,
            name=nominee.name,
            small_image_url=nominee.small_image_url,
            large_image_url=nominee.large_image_url,
            category_ids=list(view.category_ids),
        )


class CategoryResponse(BaseModel):
    id: int
    name: str
    description: str | None = None
    nominees: list[NomineeResponse]
    winner_id: int | None = None

    @classmethod
    def from_domain(
        cls, category: Category, nominees_by_id: Mapping[int, Nominee]
    ) -> CategoryResponse:
        nominees = [
            NomineeResponse.from_domain(nominees_by_id[nominee_id])
            for nominee_id in sorted(category.nominee_ids)
            if nominee_id in nominees_by_id
        ]
        return cls(
            id=category.id,
            name=category.name,
            description=category.description,
            nominees=nominees,
            winner_id=category.winner_id,
        )


class GuessResponse(BaseModel):
    id: int
    user_id: str
    category_id: int
    nominee_id: int

    @classmethod
    def from_domain(cls, guess: Guess) -> GuessResponse:
        return cls(
            id=guess.id,
            user_id=guess.user_id,
            category_id=guess.category_id,
            nominee_id=guess.nominee_id,
        )


class CategoryGuessResponse(BaseModel):
    """Categoria com o palpite do usuário (ou null)."""

    category: CategoryResponse
    guess: GuessResponse | None = None

    @classmethod
    def from_domain(
        cls, item: CategoryGuess, nominees_by_id: Mapping[int, Nominee]
    ) -> CategoryGuessResponse:
        return cls(
            category=CategoryResponse.from_domain(item.category, nominees_by_id),
            guess=GuessResponse.from_domain(item.guess) if item.guess is not None else None,
        )


class UserGuessesResponse(BaseModel):
    user_name: str
    categories: list[CategoryGuessResponse]


class UserScoreResponse(BaseModel):
    user_name: str
    score: int

    @classmethod
    def from_domain(cls, user_score: UserScore) -> UserScoreResponse:
        return cls(user_name=user_score.user.name, score=user_score.score)
