"""Integration tests for /api/auth and /api/user."""

from shared.tokens import decode_token


class TestRegisterAPI:
    def test_register_returns_token_and_summary(self, client):
        response = client.post(
            "/api/auth/register",
            json={"name": "Asha Rao", "email": "Asha@Example.com", "password": "s3cret-pass", "phone": "98765"},
        )
        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "User registered successfully"
        assert body["user"]["email"] == "asha@example.com"
        assert body["user"]["role"] == "shopper"
        assert "password" not in body["user"] and "password_hash" not in body["user"]

        principal = decode_token(body["token"])
        assert principal.user_id == body["user"]["id"]
        assert principal.role == "shopper"

    def test_duplicate_email_is_conflict(self, client, register):
        register()
        response = client.post(
            "/api/auth/register", json={"name": "Other", "email": "asha@example.com", "password": "another-pass"}
        )
        assert response.status_code == 409
        assert response.json() == {"error": "Email already registered"}

    def test_short_password_fails_schema_validation(self, client):
        response = client.post("/api/auth/register", json={"name": "A", "email": "a@example.com", "password": "123"})
        assert response.status_code == 422

    def test_invalid_email_is_bad_request(self, client):
        response = client.post("/api/auth/register", json={"name": "A", "email": "nope", "password": "s3cret-pass"})
        assert response.status_code == 400

    def test_registration_cannot_grant_admin(self, client):
        response = client.post(
            "/api/auth/register",
            json={"name": "Sneaky", "email": "sneaky@example.com", "password": "s3cret-pass", "role": "admin"},
        )
        assert response.status_code == 201
        assert response.json()["user"]["role"] == "shopper"


class TestLoginAPI:
    def test_login_with_valid_credentials(self, client, register):
        registered, _ = register()
        response = client.post("/api/auth/login", json={"email": "asha@example.com", "password": "s3cret-pass"})
        assert response.status_code == 200
        body = response.json()
        assert body["user"] == registered["user"]
        assert decode_token(body["token"]).user_id == registered["user"]["id"]

    def test_wrong_password_is_unauthorized(self, client, register):
        register()
        response = client.post("/api/auth/login", json={"email": "asha@example.com", "password": "wrong-pass"})
        assert response.status_code == 401
        assert "error" in response.json()

    def test_unknown_email_is_not_found(self, client):
        response = client.post("/api/auth/login", json={"email": "ghost@example.com", "password": "whatever"})
        assert response.status_code == 404


class TestMeAPI:
    def test_me_returns_profile(self, client, shopper_headers):
        response = client.get("/api/auth/me", headers=shopper_headers)
        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "Asha Rao"
        assert body["addresses"] == []
        assert "password_hash" not in body

    def test_me_without_token(self, client):
        assert client.get("/api/auth/me").status_code == 401

    def test_me_with_garbage_token(self, client):
        response = client.get("/api/auth/me", headers={"Authorization": "Bearer garbage"})
        assert response.status_code == 401

    def test_me_with_wrong_scheme(self, client):
        response = client.get("/api/auth/me", headers={"Authorization": "Basic dXNlcjpwYXNz"})
        assert response.status_code == 401


class TestUserAPI:
    def test_update_profile(self, client, shopper_headers):
        response = client.put("/api/user/profile", json={"name": "Asha R.", "phone": "91234"}, headers=shopper_headers)
        assert response.status_code == 200
        assert response.json()["name"] == "Asha R."

        profile = client.get("/api/user/profile", headers=shopper_headers).json()
        assert profile["phone"] == "91234"

    def test_add_and_list_addresses(self, client, shopper_headers):
        first = {"street": "12 MG Road", "city": "Bengaluru", "postal_code": "560001"}
        second = {"street": "4 Park St", "city": "Kolkata", "postal_code": "700016", "is_default": True}

        response = client.post("/api/user/address", json=first, headers=shopper_headers)
        assert response.status_code == 201
        assert response.json()[0]["is_default"] is True

        client.post("/api/user/address", json=second, headers=shopper_headers)
        addresses = client.get("/api/user/address", headers=shopper_headers).json()
        assert len(addresses) == 2
        assert [a["city"] for a in addresses if a["is_default"]] == ["Kolkata"]

    def test_profile_requires_token(self, client):
        assert client.get("/api/user/profile").status_code == 401
        assert client.post("/api/user/address", json={}).status_code == 401
