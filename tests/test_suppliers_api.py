"""Suppliers endpoints against an in-memory SQLite database."""

from fastapi import status


class TestCreateSupplier:
    def test_without_id_assigns_one(self, client):
        response = client.post(
            "/api/suppliers", json={"name": "Acme", "contact_info": "a@x.com"}
        )

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["message"] == "Supplier added"
        assert {
            "supplier_id": body["supplierId"], "name": "Acme", "contact_info": "a@x.com"
        } in client.get("/api/suppliers").json()

    def test_with_id_uses_it(self, client):
        response = client.post("/api/suppliers", json={"supplier_id": 5, "name": "Acme"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"message": "Supplier added", "supplierId": 5}
        assert client.get("/api/suppliers/5").json() == {
            "supplier_id": 5, "name": "Acme", "contact_info": None
        }

    def test_duplicate_id_is_rejected_and_keeps_existing_row(self, client):
        client.post("/api/suppliers", json={"supplier_id": 5, "name": "Acme"})

        response = client.post(
            "/api/suppliers", json={"supplier_id": 5, "name": "Other", "contact_info": "o@x.com"}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "Supplier ID already exists"}
        assert client.get("/api/suppliers").json() == [
            {"supplier_id": 5, "name": "Acme", "contact_info": None}
        ]

    def test_assigned_id_differs_from_explicit_ones(self, client):
        client.post("/api/suppliers", json={"supplier_id": 7, "name": "Explicit"})

        assigned = client.post("/api/suppliers", json={"name": "Auto"}).json()["supplierId"]

        assert assigned != 7
        ids = [row["supplier_id"] for row in client.get("/api/suppliers").json()]
        assert sorted(ids) == sorted({7, assigned})

    def test_missing_name_is_rejected(self, client):
        response = client.post("/api/suppliers", json={"contact_info": "a@x.com"})

        assert response.status_code == 422
        assert response.json() == {"error": "Missing or invalid fields: name"}


class TestUpdateSupplier:
    def test_replaces_fields_and_clears_omitted_contact(self, client):
        client.post("/api/suppliers", json={
            "supplier_id": 3, "name": "Acme", "contact_info": "a@x.com"
        })

        response = client.put("/api/suppliers/3", json={"name": "Acme Ltd"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"message": "Supplier updated"}
        assert client.get("/api/suppliers/3").json() == {
            "supplier_id": 3, "name": "Acme Ltd", "contact_info": None
        }

    def test_unknown_id_is_not_found(self, client):
        response = client.put("/api/suppliers/404", json={"name": "Ghost"})

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"error": "Supplier not found"}
        assert client.get("/api/suppliers").json() == []


class TestDeleteSupplier:
    def test_removes_the_row(self, client):
        client.post("/api/suppliers", json={"supplier_id": 5, "name": "Acme"})

        response = client.delete("/api/suppliers/5")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"message": "Supplier deleted"}
        assert all(row["supplier_id"] != 5 for row in client.get("/api/suppliers").json())

    def test_unknown_id_is_not_found(self, client):
        response = client.delete("/api/suppliers/5")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"error": "Supplier not found"}

    def test_referenced_supplier_is_refused_and_product_kept(self, client):
        client.post("/api/suppliers", json={"supplier_id": 1, "name": "Acme"})
        client.post("/api/products", json={
            "name": "Widget", "price": 1.5, "stock_quantity": 2, "supplier_id": 1
        })

        response = client.delete("/api/suppliers/1")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"error": "Failed to delete supplier"}
        assert client.get("/api/suppliers/1").status_code == status.HTTP_200_OK
        assert len(client.get("/api/products").json()) == 1

    def test_after_unlinking_product_supplier_can_go(self, client):
        client.post("/api/suppliers", json={"supplier_id": 1, "name": "Acme"})
        product_id = client.post("/api/products", json={
            "name": "Widget", "price": 1.5, "stock_quantity": 2, "supplier_id": 1
        }).json()["productId"]
        client.put(f"/api/products/{product_id}", json={
            "name": "Widget", "price": 1.5, "stock_quantity": 2
        })

        response = client.delete("/api/suppliers/1")

        assert response.status_code == status.HTTP_200_OK
        assert client.get(f"/api/products/{product_id}").json()["supplier_id"] is None
