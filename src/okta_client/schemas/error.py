"""Pydantic schemas for Okta API error bodies.

See: https://developer.okta.com/docs/reference/error-codes/
"""

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class ErrorCause(BaseModel):
    """One entry of an error's errorCauses list."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    summary: str = Field(default="", alias="errorSummary")

    def __str__(self) -> str:
        return self.summary


class ErrorPayload(BaseModel):
    """Structured error object returned with 4xx/5xx responses."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    code: str = Field(default="", alias="errorCode", description="Okta error code (e.g. E0000007)")
    summary: str = Field(default="", alias="errorSummary", description="Human readable summary")
    link: str = Field(default="", alias="errorLink", description="Link to error documentation")
    error_id: str = Field(default="", alias="errorId", description="Unique id of this error")
    causes: list[ErrorCause] = Field(
        default_factory=list, alias="errorCauses", description="Detailed causes"
    )

    @classmethod
    def from_body(cls, body: bytes) -> Self:
        """Parse an error body, falling back to an empty payload.

        Empty bodies, invalid JSON and unexpected shapes all yield an
        empty payload; the caller still classifies the response by status.
        """
        if not body or not body.strip():
            return cls()
        try:
            return cls.model_validate_json(body)
        except ValidationError:
            return cls()
