# expense_tracker/auth/schemas.py

import re
from typing import Optional

from pydantic import EmailStr, Field, field_validator, model_validator
from pydantic.networks import validate_email

from expense_tracker.models import Profession
from expense_tracker.schemas import CamelModel, PHONE_PATTERN

_phone_re = re.compile(PHONE_PATTERN)

BCRYPT_MAX_BYTES = 72


def _within_bcrypt_limit(value: str) -> str:
    # bcrypt rejects input longer than 72 bytes, not characters
    if len(value.encode("utf-8")) > BCRYPT_MAX_BYTES:
        raise ValueError(f"Password must be at most {BCRYPT_MAX_BYTES} bytes")
    return value


class SignupSchema(CamelModel):
    name: str = Field(min_length=2, max_length=100)
    email: EmailStr
    phone: str = Field(pattern=PHONE_PATTERN)
    password: str = Field(min_length=6)
    confirm_password: str = Field(min_length=6)
    profession: Optional[Profession] = None

    @field_validator("password")
    @classmethod
    def password_strength(cls, value: str) -> str:
        if not (re.search(r"[a-z]", value) and re.search(r"[A-Z]", value) and re.search(r"\d", value)):
            raise ValueError(
                "Password must contain at least one uppercase letter, "
                "one lowercase letter, and one number"
            )
        return _within_bcrypt_limit(value)

    @model_validator(mode="after")
    def passwords_match(self):
        if self.password != self.confirm_password:
            raise ValueError("Passwords do not match")
        return self


class LoginSchema(CamelModel):
    key: str = Field(description="Email address or phone number")
    password: str = Field(min_length=6)

    @field_validator("password")
    @classmethod
    def password_size(cls, value: str) -> str:
        return _within_bcrypt_limit(value)

    @field_validator("key")
    @classmethod
    def email_or_phone(cls, value: str) -> str:
        value = value.strip()
        if _phone_re.match(value):
            return value
        try:
            _, email = validate_email(value)
        except ValueError:
            raise ValueError("Invalid email or phone number") from None
        return email
