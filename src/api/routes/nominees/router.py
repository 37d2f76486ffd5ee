"""Endpoints de indicados (leitura pública, escrita Admin)."""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from api.dependencies import AdminUser, Container
from api.schemas import NomineeDetailResponse, NomineeRequest, NomineeResponse

router = APIRouter()


@router.get("", response_model=list[NomineeDetailResponse])
def list_nominees(container: Container) -> list[NomineeDetailResponse]:
    return [NomineeDetailResponse.from_view(view) for view in container.catalog.list_nominees()]


@router.post("", response_model=NomineeResponse, status_code=status.HTTP_201_CREATED)
def create_nominee(
    body: NomineeRequest, container: Container, _admin: AdminUser
) -> NomineeResponse:
    nominee = container.admin.create_nominee(
        body.name, body.small_image_url, body.large_image_url
    )
    return NomineeResponse.from_domain(nominee)


@router.get("/{nominee_id}", response_model=NomineeDetailResponse)
def get_nominee(nominee_id: int, container: Container) -> NomineeDetailResponse:
    return NomineeDetailResponse.from_view(container.catalog.get_nominee(nominee_id))


@router.put("/{nominee_id}", status_code=status.HTTP_204_NO_CONTENT)
def edit_nominee(
    nominee_id: int, body: NomineeRequest, container: Container, _admin: AdminUser
) -> Response:
    container.admin.edit_nominee(
        nominee_id, body.name, body.small_image_url, body.large_image_url
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{nominee_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_nominee(nominee_id: int, container: Container, _admin: AdminUser) -> Response:
    container.admin.delete_nominee(nominee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
