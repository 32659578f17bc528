"""Tests for product API endpoints."""

from uuid import uuid4

import pytest
from httpx import AsyncClient

SHIRT = {
    "title": "Men's Chill Shirt",
    "price": 45,
    "sizes": ["S", "M"],
    "gender": "men",
    "tags": ["shirt"],
    "images": ["a.jpg", "b.jpg"],
}


async def create_shirt(client: AsyncClient, **overrides) -> dict:
    """Create a product through the API."""
    response = await client.post("/products", json={**SHIRT, **overrides})
    assert response.status_code == 201
    return response.json()


class TestCreateProduct:
    """Tests for POST /products."""

    @pytest.mark.asyncio
    async def test_create(self, client: AsyncClient) -> None:
        """Should create a product with flattened images."""
        data = await create_shirt(client)

        assert data["title"] == "Men's Chill Shirt"
        assert data["slug"] == "mens_chill_shirt"
        assert data["images"] == ["a.jpg", "b.jpg"]

    @pytest.mark.asyncio
    async def test_create_duplicate_slug(self, client: AsyncClient) -> None:
        """Should return 400 for a duplicate slug."""
        await create_shirt(client, slug="shoe")

        response = await client.post(
            "/products", json={**SHIRT, "title": "Other", "slug": "shoe"}
        )

        assert response.status_code == 400
        assert response.json()["error_code"] == "DUPLICATE_KEY"

    @pytest.mark.asyncio
    async def test_create_invalid_body(self, client: AsyncClient) -> None:
        """Should reject bodies without a title."""
        response = await client.post("/products", json={"gender": "men"})
        assert response.status_code == 422


class TestListProducts:
    """Tests for GET /products."""

    @pytest.mark.asyncio
    async def test_pagination(self, client: AsyncClient) -> None:
        """Should honour limit and offset."""
        for i in range(3):
            await create_shirt(client, title=f"Shirt {i}")

        everything = await client.get("/products")
        first = await client.get("/products", params={"limit": 2, "offset": 0})
        second = await client.get("/products", params={"limit": 2, "offset": 2})

        assert first.status_code == 200
        assert len(first.json()) == 2
        assert len(second.json()) == 1
        assert first.json() + second.json() == everything.json()

    @pytest.mark.asyncio
    async def test_invalid_limit(self, client: AsyncClient) -> None:
        """Should reject a non-positive limit."""
        response = await client.get("/products", params={"limit": 0})
        assert response.status_code == 422


class TestGetProduct:
    """Tests for GET /products/{term}."""

    @pytest.mark.asyncio
    async def test_get_by_id_and_slug(self, client: AsyncClient) -> None:
        """Should find a product by id or slug."""
        created = await create_shirt(client)

        by_id = await client.get(f"/products/{created['id']}")
        by_slug = await client.get("/products/mens_chill_shirt")

        assert by_id.status_code == 200
        assert by_slug.json() == by_id.json()

    @pytest.mark.asyncio
    async def test_get_not_found(self, client: AsyncClient) -> None:
        """Should return 404 with the lookup term."""
        response = await client.get("/products/nothing-here")

        assert response.status_code == 404
        data = response.json()
        assert data["error_code"] == "PRODUCT_NOT_FOUND"
        assert data["details"] == {"term": "nothing-here"}
        assert data["request_id"] is not None


class TestUpdateProduct:
    """Tests for PATCH /products/{id}."""

    @pytest.mark.asyncio
    async def test_update_images(self, client: AsyncClient) -> None:
        """Should replace images and keep other fields."""
        created = await create_shirt(client)

        response = await client.patch(
            f"/products/{created['id']}", json={"images": ["c.jpg"], "stock": 4}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["images"] == ["c.jpg"]
        assert data["stock"] == 4
        assert data["title"] == created["title"]

    @pytest.mark.asyncio
    async def test_update_not_found(self, client: AsyncClient) -> None:
        """Should return 404 for unknown ids."""
        response = await client.patch(f"/products/{uuid4()}", json={"stock": 1})
        assert response.status_code == 404


class TestDeleteProduct:
    """Tests for DELETE /products/{id}."""

    @pytest.mark.asyncio
    async def test_delete(self, client: AsyncClient) -> None:
        """Should return the deleted product, then 404."""
        created = await create_shirt(client)

        response = await client.delete(f"/products/{created['id']}")
        assert response.status_code == 200
        assert response.json() == created

        response = await client.get(f"/products/{created['id']}")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_not_found(self, client: AsyncClient) -> None:
        """Should return 404 for unknown ids."""
        response = await client.delete(f"/products/{uuid4()}")
        assert response.status_code == 404
