"""
API tests for /api/users
"""


def create_user(client, **fields):
    response = client.post("/api/users", json=fields)
    assert response.status_code == 201, response.text
    return response.json()


class TestUsersApi:

    def test_create_and_get_user(self, client, sample_user_data):
        user = create_user(client, **sample_user_data)

        assert user["id"] is not None
        assert {k: user[k] for k in ("name", "email", "age")} == sample_user_data
        assert client.get(f"/api/users/{user['id']}").json() == user

    def test_list_users(self, client, sample_user_data):
        ada = create_user(client, **sample_user_data)
        grace = create_user(client, name="Grace Hopper", email="grace@example.com", age=45)

        assert client.get("/api/users").json() == [ada, grace]

    def test_validation_errors(self, client):
        response = client.post("/api/users", json={"name": "A", "email": "nope", "age": 12})

        assert response.status_code == 400
        assert response.json() == {
            "name": "Name must be between 2 and 50 characters",
            "email": "Email should be valid",
            "age": "Age must be at least 18",
        }
        assert client.get("/api/users").json() == []

    def test_find_by_email(self, client, sample_user_data):
        ada = create_user(client, **sample_user_data)

        response = client.get("/api/users/by-email", params={"email": "ada@example.com"})
        assert response.status_code == 200
        assert response.json() == ada

        assert client.get("/api/users/by-email", params={"email": "x@example.com"}).status_code == 404

    def test_find_by_email_matches_normalised_domain(self, client, sample_user_data):
        """Test a mixed-case domain finds the user stored with the lowercased one"""
        ada = create_user(client, **{**sample_user_data, "email": "Ada@EXAMPLE.com"})
        assert ada["email"] == "Ada@example.com"

        response = client.get("/api/users/by-email", params={"email": "Ada@EXAMPLE.com"})
        assert response.status_code == 200
        assert response.json() == ada

        # Local part stays case-sensitive
        assert client.get("/api/users/by-email", params={"email": "ada@example.com"}).status_code == 404
        assert client.get("/api/users/by-email", params={"email": "not-an-email"}).status_code == 404

    def test_put_patch_delete(self, client, sample_user_data):
        ada = create_user(client, **sample_user_data)
        url = f"/api/users/{ada['id']}"

        replaced = client.put(url, json={"name": "Ada King", "email": "ada.king@example.com", "age": 36})
        assert replaced.status_code == 200
        assert replaced.json()["email"] == "ada.king@example.com"

        patched = client.patch(url, json={"age": 37})
        assert patched.status_code == 200
        assert patched.json() == {**replaced.json(), "age": 37}

        assert client.patch(url, json={"age": 17}).status_code == 400

        assert client.delete(url).status_code == 204
        assert client.get(url).status_code == 404
        assert client.delete(url).status_code == 404

    def test_missing_user_returns_404(self, client, sample_user_data):
        assert client.get("/api/users/404").status_code == 404
        assert client.put("/api/users/404", json=sample_user_data).status_code == 404

    def test_out_of_range_id_returns_400(self, client, sample_user_data):
        url = "/api/users/99999999999999999999"

        for response in (client.get(url), client.put(url, json=sample_user_data), client.delete(url)):
            assert response.status_code == 400
            assert "user_id" in response.json()
