"""Integration tests for the admin /users endpoints."""


class TestUserAdministration:
    def test_shopper_gets_401(self, client, login):
        _, headers = login()
        assert client.get("/users", headers=headers).status_code == 401

    def test_admin_lists_users(self, client, login, make_user):
        make_user(name="Grace")
        _, headers = login(role="admin")
        body = client.get("/users", headers=headers).json()
        assert body["pagination"]["total"] == 2
        assert "Grace" in {u["name"] for u in body["users"]}

    def test_admin_reads_user(self, client, login, make_user):
        user = make_user(name="Grace")
        _, headers = login(role="admin")
        response = client.get(f"/users/{user.id}", headers=headers)
        assert response.json()["email"] == user.email

    def test_missing_user(self, client, login):
        _, headers = login(role="admin")
        assert client.get("/users/missing", headers=headers).status_code == 404

    def test_promote(self, client, login, make_user):
        user = make_user()
        _, headers = login(role="admin")
        response = client.patch(f"/users/{user.id}/role", json={"role": "admin"}, headers=headers)
        assert response.status_code == 200
        assert response.json()["role"] == "admin"

    def test_invalid_role(self, client, login, make_user):
        user = make_user()
        _, headers = login(role="admin")
        response = client.patch(f"/users/{user.id}/role", json={"role": "owner"}, headers=headers)
        assert response.status_code == 400
