import logging
import os
import pathlib
from collections.abc import Iterator
from dataclasses import dataclass, field
from importlib import resources
from importlib.resources.abc import Traversable

from .conf import PolicyConfig, length_ok
from .exc import LoadError

__all__ = ("DEFAULT_SOURCE", "PolicyStore", "WeakPasswordSource")


logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class WeakPasswordSource:
    """
    Location of a newline-delimited, UTF-8 encoded list of weak passwords.

    With ``package`` set, ``path`` is resolved inside that package's resources,
    otherwise it is a filesystem path.
    """

    path: str
    package: str | None = None

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> "WeakPasswordSource":
        return cls(path=os.fspath(path))

    def __str__(self) -> str:
        if self.package:
            return "%s:%s" % (self.package, self.path)
        return self.path

    def _locate(self) -> Traversable:
        if self.package:
            return resources.files(self.package).joinpath(self.path)
        return pathlib.Path(self.path)

    def iter_entries(self) -> Iterator[str]:
        """Yields the list entries in file order. Blank lines are skipped."""
        try:
            text = self._locate().read_text(encoding="utf-8")
        except (OSError, ImportError, UnicodeDecodeError) as ex:
            logger.debug("unable to read weak password list %r: %s", str(self), ex)
            raise LoadError(
                str(ex), ctx=LoadError.Context(source=str(self))
            ) from ex

        # entries may contain form feeds and U+2028, split on line feeds only
        for line in text.split("\n"):
            line = line.removesuffix("\r")
            if line:
                yield line


DEFAULT_SOURCE = WeakPasswordSource(package="passpol.data", path="weak-passwords.txt")


@dataclass(slots=True, frozen=True)
class PolicyStore:
    """
    Immutable length bounds plus the weak passwords that fall within them.

    Build one with :meth:`load` at startup and share it freely, nothing is
    mutated after construction.
    """

    min_length: int
    max_length: int
    weak_passwords: frozenset[str] = field(repr=False)

    @classmethod
    def load(
        cls,
        config: PolicyConfig | None = None,
        source: WeakPasswordSource = DEFAULT_SOURCE,
    ) -> "PolicyStore":
        """
        Reads ``source`` once and keeps the entries whose code point length lies
        within the configured bounds.

        Raises:
            LoadError: If the list is missing, unreadable or not valid UTF-8.
        """
        if config is None:
            config = PolicyConfig()

        total = 0
        kept: set[str] = set()
        for entry in source.iter_entries():
            total += 1
            if config.length_ok(entry):
                kept.add(entry)

        logger.debug(
            "loaded weak password list %r: kept %d of %d entries for length "
            "range [%d, %d]",
            str(source),
            len(kept),
            total,
            config.min_length,
            config.max_length,
        )
        return cls(
            min_length=config.min_length,
            max_length=config.max_length,
            weak_passwords=frozenset(kept),
        )

    def length_ok(self, password: str) -> bool:
        return length_ok(password, self.min_length, self.max_length)

    def __contains__(self, password: object) -> bool:
        return password in self.weak_passwords

    def __len__(self) -> int:
        return len(self.weak_passwords)
