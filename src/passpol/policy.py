import functools
import unicodedata
from dataclasses import dataclass, field

from .conf import DEFAULT_MAX_LENGTH, DEFAULT_MIN_LENGTH, PolicyConfig
from .exc import NormalizationError
from .store import DEFAULT_SOURCE, PolicyStore, WeakPasswordSource

__all__ = ("PasswordPolicy", "default_policy", "normalize")


def normalize(password: str) -> bytes:
    """
    Normalizes ``password`` as Unicode NFKC and returns it as UTF-8 encoded
    bytes, ready to be passed to a password hashing algorithm like bcrypt.

    This is the process recommended in NIST SP-800-63B 5.1.1.2.

    Raises:
        NormalizationError: If ``password`` contains an unpaired surrogate.
    """
    try:
        return unicodedata.normalize("NFKC", password).encode("utf-8")
    except UnicodeEncodeError as ex:
        # NFKC may change lengths, ex.start indexes the normalized text
        position = next(
            (i for i, c in enumerate(password) if "\ud800" <= c <= "\udfff"),
            ex.start,
        )
        raise NormalizationError(
            "Password contains an unpaired surrogate at position {ctx[position]}",
            ctx=NormalizationError.Context(position=position),
        ) from ex


@dataclass(slots=True, frozen=True, init=False)
class PasswordPolicy:
    """
    A password policy which validates candidate passwords according to NIST
    SP-800-63B: passwords must have a minimum and a maximum length and must not
    appear on a list of weak passwords (SP-800-63B 5.1.1.2).

    Instances are immutable and may be shared between threads. The policy is a
    predicate, so ``policy(password)`` is the same as ``policy.accepts(password)``.

    See Also:
        https://pages.nist.gov/800-63-3/sp800-63b.html
    """

    store: PolicyStore = field(repr=False)

    def __init__(
        self,
        min_length: int = DEFAULT_MIN_LENGTH,
        max_length: int = DEFAULT_MAX_LENGTH,
        source: WeakPasswordSource = DEFAULT_SOURCE,
    ) -> None:
        """
        Raises:
            ConfigurationError: If the length bounds are invalid.
            LoadError: If the weak password list cannot be loaded.
        """
        store = PolicyStore.load(
            PolicyConfig(min_length=min_length, max_length=max_length), source
        )
        object.__setattr__(self, "store", store)

    @classmethod
    def from_store(cls, store: PolicyStore) -> "PasswordPolicy":
        policy = cls.__new__(cls)
        object.__setattr__(policy, "store", store)
        return policy

    @property
    def min_length(self) -> int:
        return self.store.min_length

    @property
    def max_length(self) -> int:
        return self.store.max_length

    def accepts(self, password: str) -> bool:
        """Returns ``True`` if ``password`` is acceptable, ``False`` otherwise."""
        return self.store.length_ok(password) and password not in self.store

    __call__ = accepts

    def normalize(self, password: str) -> bytes:
        return normalize(password)

    def __repr__(self) -> str:
        return "%s(min_length=%d, max_length=%d)" % (
            type(self).__name__,
            self.min_length,
            self.max_length,
        )


@functools.cache
def default_policy() -> PasswordPolicy:
    """Returns a shared policy with the default bounds, loaded on first use."""
    return PasswordPolicy()
