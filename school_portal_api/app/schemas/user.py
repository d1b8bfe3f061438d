"""
Pydantic models for user data.

Request models mark every field optional on purpose: the required
fields of a new user (``voornaam``, ``achternaam``, ``email``,
``wachtwoord``) must be present *and* non‑empty, which the service
checks itself so that both cases produce the same 400 response.
Phone numbers sent as JSON numbers are accepted and stored as text;
a numeric zero counts as empty, like a missing value.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class UserFields(BaseModel):
    voornaam: Optional[str] = Field(None, example="Jan")
    tussenvoegsel: Optional[str] = Field(None, example="van der")
    achternaam: Optional[str] = Field(None, example="Berg")
    adres: Optional[str] = Field(None, example="Stationsstraat 1, Utrecht")
    email: Optional[str] = Field(None, example="jan@example.nl")
    telefoonnummer: Optional[str] = Field(None, example="030-1234567")
    mobiel_nummer: Optional[str] = Field(None, example="06-12345678")

    model_config = {
        "coerce_numbers_to_str": True,
    }

    @field_validator(
        "voornaam",
        "tussenvoegsel",
        "achternaam",
        "adres",
        "email",
        "telefoonnummer",
        "mobiel_nummer",
        "wachtwoord",
        mode="before",
        check_fields=False,
    )
    @classmethod
    def zero_is_empty(cls, v):
        # Runs before number-to-str coercion, which would turn 0 into a truthy "0".
        if isinstance(v, (int, float)) and v == 0:
            return None
        return v


class UserCreate(UserFields):
    """Schema for creating a user.

    ``id`` is supplied by the caller; when omitted the database assigns
    the next free identifier.
    """

    id: Optional[int] = Field(None, example=1)
    wachtwoord: Optional[str] = Field(None, example="geheim123")


class UserUpdate(UserFields):
    """Schema for a partial update.

    Absent, empty or zero values keep the stored value; an update can
    replace a field but never clear it.
    """

    wachtwoord: Optional[str] = None


class LoginRequest(BaseModel):
    email: Optional[str] = Field(None, example="jan@example.nl")
    wachtwoord: Optional[str] = Field(None, example="geheim123")


class UserRead(UserFields):
    """Schema for reading a user from the API.  The password hash is never included."""

    id: int
