"""Base model configuration for xcresulttool payloads."""

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

# json.loads joins valid surrogate pairs, so any left over are unpaired.
LONE_SURROGATE = re.compile("[\ud800-\udfff]")


def clean_value(value: Any) -> Any:
    if isinstance(value, str):
        return LONE_SURROGATE.sub("\ufffd", value)
    return value


class Model(BaseModel):
    """Frozen model reading the camelCase keys xcresulttool emits.

    Explicit nulls are treated like absent keys so that every field falls
    back to its default. Unpaired surrogates in strings read as U+FFFD.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        protected_namespaces=(),
    )

    @model_validator(mode="before")
    @classmethod
    def normalize(cls, data: Any) -> Any:
        """Drop null values, read a null object as empty and clean strings."""
        if data is None:
            return {}
        if isinstance(data, dict):
            return {
                key: clean_value(value)
                for key, value in data.items()
                if value is not None
            }
        return data
