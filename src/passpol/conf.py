from collections.abc import Mapping
from typing import Annotated, Any

import annotated_types
import pydantic
from pydantic.alias_generators import to_camel
from typing_extensions import Self

from .exc import ConfigurationError
from .util.model import convert_errors

__all__ = ("DEFAULT_MIN_LENGTH", "DEFAULT_MAX_LENGTH", "PolicyConfig", "length_ok")

# SP-800-63B 5.1.1.2
DEFAULT_MIN_LENGTH = 8
DEFAULT_MAX_LENGTH = 64

LengthBound = Annotated[int, annotated_types.Ge(1)]


class PolicyConfig(pydantic.BaseModel):
    """
    Inclusive password length bounds, measured in Unicode code points.

    Invalid bounds raise :class:`~passpol.exc.ConfigurationError` instead of
    :class:`pydantic.ValidationError`.
    """

    model_config = pydantic.ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
        strict=True,
    )

    min_length: LengthBound = DEFAULT_MIN_LENGTH
    max_length: LengthBound = DEFAULT_MAX_LENGTH

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except pydantic.ValidationError as ex:
            raise ConfigurationError(
                "Invalid password length bounds",
                ctx=ConfigurationError.Context(errors=convert_errors(ex)),
            ) from ex

    @pydantic.model_validator(mode="after")
    def check_bounds_order(self) -> Self:
        if self.min_length > self.max_length:
            raise ValueError(
                "min_length (%d) must not be greater than max_length (%d)"
                % (self.min_length, self.max_length)
            )
        return self

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Self:
        """Builds a config from a mapping, e.g. ``{"minLength": 10}``."""
        return cls(**data)

    def length_ok(self, password: str) -> bool:
        return length_ok(password, self.min_length, self.max_length)


def length_ok(password: str, min_length: int, max_length: int) -> bool:
    # len() of a str counts code points
    return min_length <= len(password) <= max_length
