"""Sign-in Schemas — credentials accepted by the credentials identity provider."""

from pydantic import BaseModel, Field, field_validator
from email_validator import EmailNotValidError, validate_email


class SignInCredentials(BaseModel):
    email: str
    password: str = Field(min_length=6)

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str) -> str:
        try:
            validate_email(v, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(str(e))
        return v
