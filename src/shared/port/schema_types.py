"""Shared pydantic types for HTTP schemas."""

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel


# Stored and computed as Decimal; clients receive a JSON number
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used='json')]


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python; requests accept either spelling."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
