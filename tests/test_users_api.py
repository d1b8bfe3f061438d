"""Tests for listing and creating users."""

import pytest
from fastapi import status

from school_portal_api.app.core.security import verify_password
from tests.utils import stored_user, user_count


class TestCreateUser:
    def test_create_user_success(self, client, db, user_payload):
        response = client.post("/user", json=user_payload)

        assert response.status_code == status.HTTP_201_CREATED
        assert response.text == "Jan is toegevoegd aan de database"
        assert response.headers["content-type"].startswith("text/plain")

        row = stored_user(db, 1)
        assert row["voornaam"] == "Jan"
        assert row["tussenvoegsel"] == "van der"
        assert row["email"] == "jan@example.nl"
        assert row["mobiel_nummer"] == "06-12345678"

    def test_password_is_stored_hashed(self, client, db, user_payload):
        client.post("/user", json=user_payload)

        stored_hash = stored_user(db, 1)["wachtwoord"]
        assert stored_hash != "geheim123"
        assert "geheim123" not in stored_hash
        assert verify_password("geheim123", stored_hash)
        assert not verify_password("geheim124", stored_hash)

    @pytest.mark.parametrize("field", ["voornaam", "achternaam", "email", "wachtwoord"])
    def test_missing_required_field(self, client, db, user_payload, field):
        del user_payload[field]

        response = client.post("/user", json=user_payload)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "verplichte velden" in response.text
        assert user_count(db) == 0

    @pytest.mark.parametrize("field", ["voornaam", "achternaam", "email", "wachtwoord"])
    def test_empty_required_field(self, client, db, user_payload, field):
        user_payload[field] = ""

        response = client.post("/user", json=user_payload)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert user_count(db) == 0

    @pytest.mark.parametrize("field", ["voornaam", "achternaam", "email", "wachtwoord"])
    def test_zero_required_field(self, client, db, user_payload, field):
        user_payload[field] = 0

        response = client.post("/user", json=user_payload)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "verplichte velden" in response.text
        assert user_count(db) == 0

    def test_zero_optional_field_stored_as_empty(self, client, db, user_payload):
        user_payload["telefoonnummer"] = 0

        response = client.post("/user", json=user_payload)

        assert response.status_code == status.HTTP_201_CREATED
        assert stored_user(db, 1)["telefoonnummer"] is None

    def test_optional_fields_may_be_omitted(self, client, db):
        response = client.post(
            "/user",
            json={"voornaam": "Piet", "achternaam": "Jansen", "email": "piet@example.nl", "wachtwoord": "pw"},
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.text == "Piet is toegevoegd aan de database"
        rows = client.get("/user").json()
        assert len(rows) == 1
        assert rows[0]["adres"] is None
        assert rows[0]["tussenvoegsel"] is None

    def test_numeric_phone_numbers_stored_as_text(self, client, db, user_payload):
        user_payload["mobiel_nummer"] = 612345678

        response = client.post("/user", json=user_payload)

        assert response.status_code == status.HTTP_201_CREATED
        assert stored_user(db, 1)["mobiel_nummer"] == "612345678"

    def test_duplicate_id_is_server_error_without_driver_detail(self, client, db, user_payload):
        assert client.post("/user", json=user_payload).status_code == status.HTTP_201_CREATED

        response = client.post("/user", json={**user_payload, "email": "ander@example.nl"})

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.text == "Er is een fout opgetreden bij het verwerken van de gegevens"
        assert "UNIQUE" not in response.text
        assert user_count(db) == 1

    def test_malformed_body(self, client, db):
        response = client.post("/user", content=b"{not json", headers={"content-type": "application/json"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert user_count(db) == 0


class TestListUsers:
    def test_empty(self, client):
        response = client.get("/user")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_rows_in_stored_order(self, client, user_payload):
        client.post("/user", json={**user_payload, "id": 7, "voornaam": "Zoë"})
        client.post("/user", json={**user_payload, "id": 3, "voornaam": "Anna", "email": "anna@example.nl"})
        client.post("/user", json={**user_payload, "id": 5, "voornaam": "Mila", "email": "mila@example.nl"})

        users = client.get("/user").json()

        assert [u["id"] for u in users] == [3, 5, 7]
        assert [u["voornaam"] for u in users] == ["Anna", "Mila", "Zoë"]

    def test_password_hash_not_exposed(self, client, user_payload):
        client.post("/user", json=user_payload)

        (user,) = client.get("/user").json()

        assert "wachtwoord" not in user
        assert user == {
            "id": 1,
            "voornaam": "Jan",
            "tussenvoegsel": "van der",
            "achternaam": "Berg",
            "adres": "Stationsstraat 1, Utrecht",
            "email": "jan@example.nl",
            "telefoonnummer": "030-1234567",
            "mobiel_nummer": "06-12345678",
        }

    def test_database_failure_is_generic_server_error(self, client, db):
        db.connection.execute('DROP TABLE "user"')

        response = client.get("/user")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.text == "Er is een fout opgetreden bij het verwerken van de gegevens"
        assert "no such table" not in response.text
