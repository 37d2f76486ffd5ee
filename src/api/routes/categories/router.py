"""Endpoints de categorias, associação de indicados, vencedor e palpites.

Rotas estáticas (/my-guesses, /guesses/..., /nominees/...) são declaradas
antes das rotas com {category_id}.
"""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from api.dependencies import AdminUser, Container, CurrentUser
from api.schemas import (
    CategoryGuessResponse,
    CategoryRequest,
    CategoryResponse,
    GuessRequest,
    GuessResponse,
    UserGuessesResponse,
    WinnerRequest,
)

router = APIRouter()


@router.get("", response_model=list[CategoryResponse])
def list_categories(container: Container) -> list[CategoryResponse]:
    nominees = container.catalog.nominees_by_id()
    return [
        CategoryResponse.from_domain(category, nominees)
        for category in container.catalog.list_categories()
    ]


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
def create_category(
    body: CategoryRequest, container: Container, _admin: AdminUser
) -> CategoryResponse:
    category = container.admin.create_category(body.name, body.description)
    return CategoryResponse.from_domain(category, {})


@router.get("/my-guesses", response_model=list[CategoryGuessResponse])
def my_guesses(container: Container, principal: CurrentUser) -> list[CategoryGuessResponse]:
    nominees = container.catalog.nominees_by_id()
    return [
        CategoryGuessResponse.from_domain(item, nominees)
        for item in container.guesses.my_guesses(principal.user.id)
    ]


@router.get("/guesses/user/{user_name}", response_model=UserGuessesResponse)
def guesses_for_user(
    user_name: str, container: Container, _principal: CurrentUser
) -> UserGuessesResponse:
    user, items = container.guesses.guesses_for_user(user_name)
    nominees = container.catalog.nominees_by_id()
    return UserGuessesResponse(
        user_name=user.name,
        categories=[CategoryGuessResponse.from_domain(item, nominees) for item in items],
    )


@router.delete("/nominees/{nominee_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_nominee_everywhere(nominee_id: int, container: Container, _admin: AdminUser) -> Response:
    container.admin.remove_nominee_everywhere(nominee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{category_id}", response_model=CategoryResponse)
def get_category(category_id: int, container: Container) -> CategoryResponse:
    category = container.catalog.get_category(category_id)
    return CategoryResponse.from_domain(category, container.catalog.nominees_by_id())


@router.put("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def edit_category(
    category_id: int, body: CategoryRequest, container: Container, _admin: AdminUser
) -> Response:
    container.admin.edit_category(category_id, body.name, body.description)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category(category_id: int, container: Container, _admin: AdminUser) -> Response:
    container.admin.delete_category(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{category_id}/nominees/{nominee_id}", status_code=status.HTTP_204_NO_CONTENT)
def add_nominee_to_category(
    category_id: int, nominee_id: int, container: Container, _admin: AdminUser
) -> Response:
    container.admin.add_nominee_to_category(category_id, nominee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/{category_id}/winner", status_code=status.HTTP_204_NO_CONTENT)
def set_category_winner(
    category_id: int, body: WinnerRequest, container: Container, _admin: AdminUser
) -> Response:
    container.admin.set_category_winner(category_id, body.nominee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{category_id}/my-guess", response_model=CategoryGuessResponse)
def my_guess_for_category(
    category_id: int, container: Container, principal: CurrentUser
) -> CategoryGuessResponse:
    item = container.guesses.my_guess_for_category(principal.user.id, category_id)
    return CategoryGuessResponse.from_domain(item, container.catalog.nominees_by_id())


@router.put("/{category_id}/my-guess", response_model=GuessResponse)
def submit_guess(
    category_id: int, body: GuessRequest, container: Container, principal: CurrentUser
) -> GuessResponse:
    guess = container.guesses.submit_guess(principal.user.id, category_id, body.nominee_id)
    return GuessResponse.from_domain(guess)


@router.get("/{category_id}/guesses", response_model=list[GuessResponse])
def guesses_for_category(
    category_id: int, container: Container, _principal: CurrentUser
) -> list[GuessResponse]:
    return [
        GuessResponse.from_domain(guess)
        for guess in container.guesses.guesses_for_category(category_id)
    ]
