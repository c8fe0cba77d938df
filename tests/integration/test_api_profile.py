"""
Integration tests for /user endpoints.
"""
import pytest

pytestmark = pytest.mark.integration


class TestProfile:
    def test_get_profile(self, client, register, login):
        user = register()
        response = client.get("/user/profile", headers=login())

        assert response.status_code == 200
        profile = response.json()["user"]
        assert profile["id"] == user["id"]
        assert profile["name"] == "Alice"
        assert "hashed_password" not in profile

    def test_bio_update_keeps_name_and_email(self, client, register, login):
        register()
        headers = login()

        response = client.put("/user/profile", headers=headers, json={"bio": "new bio"})

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Profile updated successfully"
        assert data["user"]["bio"] == "new bio"
        assert data["user"]["name"] == "Alice"
        assert data["user"]["email"] == "alice@lingua.io"

    def test_empty_bio_does_not_clear_it(self, client, register, login):
        register()
        headers = login()
        client.put("/user/profile", headers=headers, json={"bio": "new bio"})

        response = client.put("/user/profile", headers=headers, json={"bio": ""})

        assert response.status_code == 200
        assert response.json()["user"]["bio"] == "new bio"
        assert client.get("/user/profile", headers=headers).json()["user"]["bio"] == "new bio"

    def test_password_change_takes_effect(self, client, register, login):
        register()
        client.put("/user/profile", headers=login(), json={"password": "changed99"})

        old = client.post("/login", json={"email": "alice@lingua.io", "password": "secret123"})
        assert old.status_code == 401
        login(password="changed99")

    def test_over_long_password_rejected(self, client, register, login):
        register()
        headers = login()

        response = client.put("/user/profile", headers=headers, json={"password": "y" * 100})

        assert response.status_code == 400
        assert response.json() == {"error": "Password cannot exceed 72 bytes"}
        login()

    def test_malformed_email_rejected(self, client, register, login):
        register()
        response = client.put("/user/profile", headers=login(), json={"email": "not-an-email"})
        assert response.status_code == 400
        assert "error" in response.json()

    def test_empty_email_leaves_it_unchanged(self, client, register, login):
        register()
        response = client.put("/user/profile", headers=login(), json={"email": ""})
        assert response.status_code == 200
        assert response.json()["user"]["email"] == "alice@lingua.io"

    def test_email_is_normalized(self, client, register, login):
        register()
        headers = login()
        response = client.put("/user/profile", headers=headers, json={"email": " Bob2@Lingua.io "})
        assert response.status_code == 200
        assert response.json()["user"]["email"] == "bob2@lingua.io"

    def test_invalid_picture_rejected(self, client, register, login):
        register()
        response = client.put("/user/profile", headers=login(), json={"profile_picture": "avatar.png"})
        assert response.status_code == 400
        assert response.json() == {"error": "Profile picture must be a valid URL"}

    def test_email_taken(self, client, register, login):
        register()
        register(name="Bob", email="bob@lingua.io")
        response = client.put("/user/profile", headers=login(), json={"email": "bob@lingua.io"})
        assert response.status_code == 409

    def test_delete_profile(self, client, register, login):
        register()
        headers = login()

        response = client.delete("/user/profile", headers=headers)

        assert response.status_code == 200
        assert response.json() == {"message": "Profile deleted successfully"}
        relogin = client.post("/login", json={"email": "alice@lingua.io", "password": "secret123"})
        assert relogin.status_code == 401


class TestUserDirectory:
    def test_requires_token(self, client, register):
        register()
        response = client.get("/users")
        assert response.status_code == 401

    def test_lists_all_users_without_hashes(self, client, register, login):
        alice = register()
        bob = register(name="Bob", email="bob@lingua.io")

        response = client.get("/users", headers=login())

        assert response.status_code == 200
        users = response.json()
        assert [user["id"] for user in users] == [alice["id"], bob["id"]]
        assert [user["name"] for user in users] == ["Alice", "Bob"]
        for user in users:
            assert "hashed_password" not in user
            assert "password" not in user
