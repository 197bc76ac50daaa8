"""Integration tests for /products."""

import pytest


def _new_product(**overrides):
    body = {
        "title": "Trail Running Shoe",
        "brand": "Stride",
        "category": "footwear",
        "sku": "STR-TRAIL-42",
        "price": 89.99,
        "description": "Lightweight shoe with a grippy outsole.",
        "main_image": "https://cdn.example.com/trail.jpg",
        "quantity": 25,
        "thumbnails": ["https://cdn.example.com/trail-side.jpg"],
    }
    body.update(overrides)
    return body


class TestAddProduct:
    def test_admin_adds_product(self, client, login):
        _, headers = login(role="admin")
        response = client.post("/products", json=_new_product(), headers=headers)
        assert response.status_code == 201
        product = response.json()["product"]
        assert product["sku"] == "STR-TRAIL-42"
        assert product["thumbnails"] == ["https://cdn.example.com/trail-side.jpg"]
        assert product["availability"] == "In Stock"

    def test_shopper_cannot_add(self, client, login):
        _, headers = login()
        response = client.post("/products", json=_new_product(), headers=headers)
        assert response.status_code == 401

    def test_duplicate_sku(self, client, login):
        _, headers = login(role="admin")
        client.post("/products", json=_new_product(), headers=headers)
        response = client.post("/products", json=_new_product(title="Other"), headers=headers)
        assert response.status_code == 400

    @pytest.mark.parametrize("field,value", [("quantity", 0), ("price", -1)])
    def test_invalid_numbers(self, client, login, field, value):
        _, headers = login(role="admin")
        response = client.post("/products", json=_new_product(**{field: value}), headers=headers)
        assert response.status_code == 400


class TestReadCatalog:
    def test_listing_with_pagination(self, client, make_product):
        for n in range(3):
            make_product(title=f"Item {n}")
        response = client.get("/products", params={"page": 2, "limit": 2})
        assert response.status_code == 200
        body = response.json()
        assert len(body["products"]) == 1
        assert body["pagination"] == {"page": 2, "limit": 2, "total": 3, "pages": 2}

    def test_listing_by_category(self, client, make_product):
        make_product(category="kitchen")
        make_product(category="books")
        body = client.get("/products", params={"category": "books"}).json()
        assert [p["category"] for p in body["products"]] == ["books"]

    def test_search(self, client, make_product):
        make_product(title="Espresso Machine")
        make_product(title="Sneaker")
        body = client.get("/products/search", params={"q": "ESPRESSO"}).json()
        assert [p["title"] for p in body["products"]] == ["Espresso Machine"]

    def test_get_one(self, client, make_product):
        product = make_product(title="Kettle")
        response = client.get(f"/products/{product.id}")
        assert response.status_code == 200
        assert response.json()["title"] == "Kettle"

    def test_get_missing(self, client):
        assert client.get("/products/does-not-exist").status_code == 404


class TestMaintainCatalog:
    def test_popularity(self, client, make_product):
        product = make_product()
        client.post(f"/products/{product.id}/popularity")
        response = client.post(f"/products/{product.id}/popularity", json={"increment_by": 2})
        assert response.json()["popularity_score"] == 3

    def test_admin_deletes_product(self, client, login, make_product):
        _, headers = login(role="admin")
        product = make_product()
        assert client.delete(f"/products/{product.id}", headers=headers).status_code == 200
        assert client.get(f"/products/{product.id}").status_code == 404

    def test_shopper_cannot_delete(self, client, login, make_product):
        _, headers = login()
        product = make_product()
        assert client.delete(f"/products/{product.id}", headers=headers).status_code == 401
