"""Testes das rotas de categorias e indicados."""

from __future__ import annotations

from fastapi.testclient import TestClient


def _create_category(client: TestClient, headers: dict[str, str], name: str) -> int:
    response = client.post("/categories", json={"name": name}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["id"]


def _create_nominee(client: TestClient, headers: dict[str, str], name: str) -> int:
    response = client.post("/nominees", json={"name": name}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["id"]


class TestAdminOnly:
    """Escrita no catálogo exige role Admin."""

    def test_regular_user_is_forbidden(
        self, client: TestClient, user_headers: dict[str, str]
    ) -> None:
        response = client.post("/categories", json={"name": "X"}, headers=user_headers)

        assert response.status_code == 403
        assert response.json()["error"] == "forbidden"

    def test_blank_name_is_400(self, client: TestClient, admin_headers: dict[str, str]) -> None:
        response = client.post("/categories", json={"name": "  "}, headers=admin_headers)

        assert response.status_code == 400


class TestCategoryRoutes:
    """CRUD, associação e vencedor."""

    def test_full_flow(self, client: TestClient, admin_headers: dict[str, str]) -> None:
        category_id = _create_category(client, admin_headers, "Melhor Filme")
        a = _create_nominee(client, admin_headers, "A")
        b = _create_nominee(client, admin_headers, "B")
        for nominee_id in (a, b):
            response = client.post(
                f"/categories/{category_id}/nominees/{nominee_id}", headers=admin_headers
            )
            assert response.status_code == 204

        response = client.put(
            f"/categories/{category_id}/winner", json={"nominee_id": b}, headers=admin_headers
        )
        assert response.status_code == 204

        body = client.get(f"/categories/{category_id}").json()
        assert body["winner_id"] == b
        assert [n["name"] for n in body["nominees"]] == ["A", "B"]

        nominee = client.get(f"/nominees/{a}").json()
        assert nominee["category_ids"] == [category_id]

    def test_winner_outside_category_is_400(
        self, client: TestClient, admin_headers: dict[str, str]
    ) -> None:
        category_id = _create_category(client, admin_headers, "A")
        outsider = _create_nominee(client, admin_headers, "Fora")

        response = client.put(
            f"/categories/{category_id}/winner",
            json={"nominee_id": outsider},
            headers=admin_headers,
        )

        assert response.status_code == 400

    def test_clear_winner_with_null(
        self, client: TestClient, admin_headers: dict[str, str]
    ) -> None:
        category_id = _create_category(client, admin_headers, "A")

        response = client.put(
            f"/categories/{category_id}/winner", json={"nominee_id": None}, headers=admin_headers
        )

        assert response.status_code == 204
        assert client.get(f"/categories/{category_id}").json()["winner_id"] is None

    def test_edit_and_delete(self, client: TestClient, admin_headers: dict[str, str]) -> None:
        category_id = _create_category(client, admin_headers, "A")

        response = client.put(
            f"/categories/{category_id}",
            json={"name": "B", "description": "desc"},
            headers=admin_headers,
        )
        assert response.status_code == 204
        assert client.get(f"/categories/{category_id}").json()["description"] == "desc"

        assert client.delete(f"/categories/{category_id}", headers=admin_headers).status_code == 204
        assert client.get(f"/categories/{category_id}").status_code == 404

    def test_remove_nominee_everywhere(
        self, client: TestClient, admin_headers: dict[str, str]
    ) -> None:
        category_id = _create_category(client, admin_headers, "A")
        nominee_id = _create_nominee(client, admin_headers, "N")
        client.post(f"/categories/{category_id}/nominees/{nominee_id}", headers=admin_headers)

        response = client.delete(f"/categories/nominees/{nominee_id}", headers=admin_headers)

        assert response.status_code == 204
        assert client.get(f"/categories/{category_id}").json()["nominees"] == []
        assert client.get(f"/nominees/{nominee_id}").status_code == 200

    def test_unknown_category_is_404(self, client: TestClient) -> None:
        response = client.get("/categories/999")

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"


class TestNomineeRoutes:
    """CRUD de indicados."""

    def test_edit_list_delete(self, client: TestClient, admin_headers: dict[str, str]) -> None:
        nominee_id = _create_nominee(client, admin_headers, "Duna")

        response = client.put(
            f"/nominees/{nominee_id}",
            json={"name": "Duna 2", "small_image_url": "http://img/p.png"},
            headers=admin_headers,
        )
        assert response.status_code == 204

        listed = client.get("/nominees").json()
        assert listed == [
            {
                "id": nominee_id,
                "name": "Duna 2",
                "small_image_url": "http://img/p.png",
                "large_image_url": None,
                "category_ids": [],
            }
        ]

        assert client.delete(f"/nominees/{nominee_id}", headers=admin_headers).status_code == 204
        assert client.get(f"/nominees/{nominee_id}").status_code == 404
