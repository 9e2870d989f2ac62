"""Base schema class for Okta API resources."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class OktaModel(BaseModel):
    """Base class for Okta resource schemas.

    Okta uses camelCase JSON keys. Fields are declared in snake_case and
    mapped through an alias generator; both spellings are accepted on input.
    Unknown keys are ignored so new API fields never break parsing.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )
