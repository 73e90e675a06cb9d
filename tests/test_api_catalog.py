"""
Tests for the catalog API layer.

Runs the FastAPI app end to end against a seeded in-memory database.
Verifies status codes, response bodies, and error mapping.
"""

from decimal import Decimal

from sqlalchemy import event, select

from catalog.infrastructure.catalog.database import category_table

API = "/api/v1"


def _product_payload(**overrides) -> dict:
    payload = {
        "name": "Phone X200",
        "description": "Good phone",
        "price": "800.00",
        "img_url": "https://img.com/img.png",
        "date": "2020-10-20T03:00:00Z",
        "categories": [{"id": 2}],
    }
    payload.update(overrides)
    return payload


class TestCategoryEndpoints:
    """Tests for /categories."""

    def test_find_all_returns_categories_ordered_by_id(self, client) -> None:
        response = client.get(f"{API}/categories")

        assert response.status_code == 200
        assert [c["name"] for c in response.json()] == ["Books", "Electronics", "Computers"]

    def test_find_paged_returns_metadata(self, client) -> None:
        response = client.get(f"{API}/categories/paged", params={"size": 2})

        body = response.json()
        assert response.status_code == 200
        assert body["total_elements"] == 3
        assert body["total_pages"] == 2
        assert body["number_of_elements"] == 2
        assert body["first"] is True
        assert body["last"] is False

    def test_get_missing_category_returns_404_body(self, client) -> None:
        response = client.get(f"{API}/categories/1000")

        body = response.json()
        assert response.status_code == 404
        assert body["status"] == 404
        assert body["error"] == "Resource not found"
        assert body["path"] == f"{API}/categories/1000"
        assert "timestamp" in body

    def test_insert_returns_201_with_location(self, client) -> None:
        response = client.post(f"{API}/categories", json={"name": "Games"})

        body = response.json()
        assert response.status_code == 201
        assert body == {"id": 4, "name": "Games"}
        assert response.headers["location"].endswith(f"{API}/categories/4")

    def test_update_existing_category(self, client) -> None:
        response = client.put(f"{API}/categories/2", json={"name": "Gadgets"})

        assert response.status_code == 200
        assert response.json() == {"id": 2, "name": "Gadgets"}
        assert client.get(f"{API}/categories/2").json()["name"] == "Gadgets"

    def test_update_missing_category_returns_404(self, client) -> None:
        response = client.put(f"{API}/categories/1000", json={"name": "Gadgets"})

        assert response.status_code == 404
        assert len(client.get(f"{API}/categories").json()) == 3

    def test_delete_referenced_category_returns_409(self, client) -> None:
        response = client.delete(f"{API}/categories/1")

        assert response.status_code == 409
        assert response.json()["error"] == "Database exception"
        assert len(client.get(f"{API}/categories").json()) == 3

    def test_delete_unreferenced_category_returns_204(self, client) -> None:
        created = client.post(f"{API}/categories", json={"name": "Games"}).json()

        response = client.delete(f"{API}/categories/{created['id']}")

        assert response.status_code == 204
        assert client.get(f"{API}/categories/{created['id']}").status_code == 404

    def test_delete_missing_category_returns_404(self, client) -> None:
        assert client.delete(f"{API}/categories/1000").status_code == 404

    def test_blank_name_returns_422(self, client) -> None:
        assert client.post(f"{API}/categories", json={"name": ""}).status_code == 422


class TestProductEndpoints:
    """Tests for /products."""

    def test_find_paged_uses_default_page_size(self, client) -> None:
        response = client.get(f"{API}/products")

        body = response.json()
        assert response.status_code == 200
        assert body["size"] == 12
        assert body["total_elements"] == 25
        assert body["total_pages"] == 3
        assert len(body["content"]) == 12

    def test_find_paged_sorts_by_name_descending(self, client) -> None:
        response = client.get(
            f"{API}/products", params={"size": 2, "sort": "name", "direction": "desc"}
        )

        names = [p["name"] for p in response.json()["content"]]
        assert names == ["The Lord of the Rings", "Smart TV"]

    def test_invalid_sort_returns_400(self, client) -> None:
        response = client.get(f"{API}/products", params={"sort": "color"})

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid sort property"

    def test_page_size_above_maximum_returns_422(self, client) -> None:
        assert client.get(f"{API}/products", params={"size": 1000}).status_code == 422

    def test_page_beyond_offset_limit_returns_422(self, client) -> None:
        assert client.get(f"{API}/products", params={"page": 2**63}).status_code == 422

    def test_page_past_the_end_is_empty(self, client) -> None:
        body = client.get(f"{API}/products", params={"page": 1000}).json()

        assert body["content"] == []
        assert body["empty"] is True
        assert body["total_elements"] == 25

    def test_get_product_includes_categories(self, client) -> None:
        response = client.get(f"{API}/products/2")

        body = response.json()
        assert response.status_code == 200
        assert body["name"] == "Smart TV"
        assert Decimal(body["price"]) == Decimal("2190.00")
        assert [c["name"] for c in body["categories"]] == ["Electronics", "Computers"]

    def test_get_missing_product_returns_404(self, client) -> None:
        assert client.get(f"{API}/products/1000").status_code == 404

    def test_insert_product_returns_201(self, client) -> None:
        response = client.post(f"{API}/products", json=_product_payload())

        body = response.json()
        assert response.status_code == 201
        assert body["id"] == 26
        assert Decimal(body["price"]) == Decimal("800.00")
        assert [c["id"] for c in body["categories"]] == [2]
        assert response.headers["location"].endswith(f"{API}/products/26")

    def test_insert_with_unknown_category_returns_404(self, client) -> None:
        response = client.post(
            f"{API}/products", json=_product_payload(categories=[{"id": 1000}])
        )

        assert response.status_code == 404
        assert client.get(f"{API}/products").json()["total_elements"] == 25

    def test_insert_with_negative_price_returns_422(self, client) -> None:
        response = client.post(f"{API}/products", json=_product_payload(price="-1"))

        assert response.status_code == 422

    def test_insert_with_future_date_returns_422(self, client) -> None:
        response = client.post(
            f"{API}/products", json=_product_payload(date="2999-01-01T00:00:00Z")
        )

        assert response.status_code == 422

    def test_update_existing_product(self, client) -> None:
        response = client.put(
            f"{API}/products/1", json=_product_payload(categories=[{"id": 1}, {"id": 3}])
        )

        body = response.json()
        assert response.status_code == 200
        assert body["name"] == "Phone X200"
        assert [c["id"] for c in body["categories"]] == [1, 3]

    def test_update_missing_product_returns_404(self, client) -> None:
        assert client.put(f"{API}/products/1000", json=_product_payload()).status_code == 404

    def test_delete_product_returns_204_then_404(self, client) -> None:
        assert client.delete(f"{API}/products/1").status_code == 204
        assert client.get(f"{API}/products/1").status_code == 404
        assert client.delete(f"{API}/products/1").status_code == 404


class TestUserEndpoints:
    """Tests for /users and /roles."""

    def _payload(self, **overrides) -> dict:
        payload = {
            "first_name": "Bob",
            "last_name": "Brown",
            "email": "bob@gmail.com",
            "password": "secret123",
            "roles": [{"id": 1}],
        }
        payload.update(overrides)
        return payload

    def test_find_paged_never_returns_passwords(self, client) -> None:
        response = client.get(f"{API}/users")

        content = response.json()["content"]
        assert response.status_code == 200
        assert [u["email"] for u in content] == ["alex@gmail.com", "maria@gmail.com"]
        assert all("password" not in u for u in content)

    def test_sort_by_password_returns_400(self, client) -> None:
        assert client.get(f"{API}/users", params={"sort": "password"}).status_code == 400

    def test_insert_user_returns_201(self, client) -> None:
        response = client.post(f"{API}/users", json=self._payload())

        body = response.json()
        assert response.status_code == 201
        assert body["email"] == "bob@gmail.com"
        assert [r["authority"] for r in body["roles"]] == ["ROLE_OPERATOR"]
        assert "password" not in body

    def test_insert_duplicate_email_returns_409(self, client) -> None:
        response = client.post(f"{API}/users", json=self._payload(email="alex@gmail.com"))

        assert response.status_code == 409
        assert client.get(f"{API}/users").json()["total_elements"] == 2

    def test_insert_with_unknown_role_returns_404(self, client) -> None:
        response = client.post(f"{API}/users", json=self._payload(roles=[{"id": 1000}]))

        assert response.status_code == 404

    def test_insert_with_invalid_email_returns_422(self, client) -> None:
        response = client.post(f"{API}/users", json=self._payload(email="not-an-email"))

        assert response.status_code == 422

    def test_update_user_roles(self, client) -> None:
        response = client.put(
            f"{API}/users/1",
            json={
                "first_name": "Alex",
                "last_name": "Brown",
                "email": "alex@gmail.com",
                "roles": [{"id": 1}, {"id": 2}],
            },
        )

        assert response.status_code == 200
        assert [r["authority"] for r in response.json()["roles"]] == [
            "ROLE_OPERATOR",
            "ROLE_ADMIN",
        ]

    def test_delete_user_returns_204(self, client) -> None:
        assert client.delete(f"{API}/users/1").status_code == 204
        assert client.get(f"{API}/users/1").status_code == 404

    def test_list_roles(self, client) -> None:
        response = client.get(f"{API}/roles")

        assert response.status_code == 200
        assert [r["authority"] for r in response.json()] == ["ROLE_OPERATOR", "ROLE_ADMIN"]

    def test_get_missing_role_returns_404(self, client) -> None:
        assert client.get(f"{API}/roles/1000").status_code == 404


class TestTransactionBoundary:
    """Each request commits before it responds and rolls back on any failure."""

    @staticmethod
    def _stored_category_names(engine) -> list[str]:
        with engine.connect() as conn:
            query = select(category_table.c.name).order_by(category_table.c.id)
            return list(conn.execute(query).scalars())

    def test_failed_commit_is_reported_and_nothing_is_stored(
        self, lenient_client, seeded_engine
    ) -> None:
        def refuse_commit(conn) -> None:
            raise RuntimeError("commit refused")

        event.listen(seeded_engine, "commit", refuse_commit)
        try:
            response = lenient_client.post(f"{API}/categories", json={"name": "Games"})
        finally:
            event.remove(seeded_engine, "commit", refuse_commit)

        assert response.status_code == 500
        assert response.json()["error"] == "Internal server error"
        assert "location" not in response.headers
        assert self._stored_category_names(seeded_engine) == [
            "Books",
            "Electronics",
            "Computers",
        ]

    def test_failure_midway_rolls_back_earlier_statements(
        self, lenient_client, seeded_engine
    ) -> None:
        # Saving a product runs UPDATE tb_product, DELETE of its links, then
        # INSERT of the new links. The last one fails here.
        def refuse_link_insert(
            conn, cursor, statement, parameters, context, executemany
        ) -> None:
            if statement.startswith("INSERT INTO tb_product_category"):
                raise RuntimeError("link insert refused")

        event.listen(seeded_engine, "before_cursor_execute", refuse_link_insert)
        try:
            response = lenient_client.put(
                f"{API}/products/1",
                json=_product_payload(name="The Hobbit", categories=[{"id": 3}]),
            )
        finally:
            event.remove(seeded_engine, "before_cursor_execute", refuse_link_insert)

        assert response.status_code == 500
        product = lenient_client.get(f"{API}/products/1").json()
        assert product["name"] == "The Lord of the Rings"
        assert [c["name"] for c in product["categories"]] == ["Books"]

    def test_successful_write_is_committed_before_the_response(
        self, client, seeded_engine
    ) -> None:
        response = client.post(f"{API}/categories", json={"name": "Games"})

        assert response.status_code == 201
        assert self._stored_category_names(seeded_engine)[-1] == "Games"
