import pydantic
import pydantic_core

__all__ = ("convert_errors",)


CUSTOM_TYPES = {
    "extra_forbidden": "extra_field",
    "unexpected_keyword_argument": "extra_field",
    "int_parsing": "int_type",
}
CUSTOM_MESSAGES = {
    # https://docs.pydantic.dev/latest/errors/validation_errors/
    "extra_field": "Extra fields not allowed",
    "int_type": "Input must be a valid integer",
    "greater_than_equal": "Input must be greater than or equal to {ge}",
}
VALUE_ERROR_PREFIX = "Value error, "


def convert_errors(
    ex: pydantic.ValidationError,
    custom_messages: dict[str, str] = CUSTOM_MESSAGES,
    custom_types: dict[str, str] = CUSTOM_TYPES,
) -> list[pydantic_core.ErrorDetails]:
    new_errors: list[pydantic_core.ErrorDetails] = []

    for error in ex.errors(include_url=False):
        ctx = error.get("ctx")

        if custom_type := custom_types.get(error["type"]):
            error["type"] = custom_type

        if custom_message := custom_messages.get(error["type"]):
            error["msg"] = custom_message.format(**ctx) if ctx else custom_message
        elif error["type"] == "value_error":
            error["msg"] = error["msg"].removeprefix(VALUE_ERROR_PREFIX)

        if ctx:
            # the context may hold the rejected exception object
            del error["ctx"]

        new_errors.append(error)

    return new_errors
