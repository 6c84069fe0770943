from dataclasses import dataclass

import pydantic_core
from typing_extensions import TypedDict, override

__all__ = (
    "PasspolError",
    "LoadError",
    "ConfigurationError",
    "NormalizationError",
)


@dataclass(slots=True)
class PasspolError(Exception):
    """
    Base exception for all passpol errors.
    """

    class Context(TypedDict): ...

    message: str
    ctx: Context | None = None

    def format_message(self) -> str:
        return self.message.format(ctx=self.ctx or {})

    @override
    def __str__(self) -> str:
        return self.format_message()


@dataclass(slots=True, kw_only=True)
class LoadError(PasspolError):
    """
    Raised when the weak password list cannot be read.

    The policy is never constructed from a partially read list, the original
    :class:`OSError` or :class:`UnicodeDecodeError` is chained as ``__cause__``.
    """

    class Context(TypedDict):
        """
        Attributes:
            source: A human-readable description of the list location.
        """

        source: str

    ctx: Context

    @override
    def format_message(self) -> str:
        return "Failed to load weak password list %r.\n\n%s" % (
            self.ctx["source"],
            self.message,
        )


@dataclass(slots=True, kw_only=True)
class ConfigurationError(PasspolError):
    """
    Raised when the password length bounds are invalid, e.g. ``min_length`` is
    greater than ``max_length`` or either bound is not positive.

    Not a :class:`ValueError`, pydantic would wrap it into a
    :class:`pydantic.ValidationError` when raised during ``model_validate`` or
    nested model validation.
    """

    class Context(TypedDict):
        errors: list[pydantic_core.ErrorDetails]

    ctx: Context

    @override
    def format_message(self) -> str:
        return "%s\n\n%s" % (
            self.message,
            "\n".join(
                "%s: %s" % (".".join(map(str, err["loc"])) or "policy", err["msg"])
                for err in self.ctx["errors"]
            ),
        )


@dataclass(slots=True, kw_only=True)
class NormalizationError(PasspolError, ValueError):
    """
    Raised when a password cannot be encoded as UTF-8 after normalization.

    Python strings may carry unpaired surrogate code points, NFKC leaves them
    untouched and strict UTF-8 encoding rejects them.
    """

    class Context(TypedDict):
        """
        Attributes:
            position: Index of the first offending code point.
        """

        position: int

    ctx: Context
