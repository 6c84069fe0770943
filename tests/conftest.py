import pathlib
import random
import string

import pytest

from passpol import PasswordPolicy

SEED = 20170523
SAMPLES = 200

BASIC_LATIN_ALPHABET = string.ascii_letters
ASCII = "".join(map(chr, range(128)))


def random_strings(
    alphabet: str, min_size: int, max_size: int, count: int = SAMPLES
) -> list[str]:
    rnd = random.Random(SEED + min_size * 31 + max_size)
    return [
        "".join(rnd.choice(alphabet) for _ in range(rnd.randint(min_size, max_size)))
        for _ in range(count)
    ]


def random_unicode_strings(
    min_size: int, max_size: int, count: int = SAMPLES
) -> list[str]:
    """Strings over all code points except surrogates."""
    rnd = random.Random(SEED ^ (min_size << 8 | max_size))

    def code_point() -> str:
        while 0xD800 <= (cp := rnd.randint(0, 0x10FFFF)) <= 0xDFFF:
            pass
        return chr(cp)

    return [
        "".join(code_point() for _ in range(rnd.randint(min_size, max_size)))
        for _ in range(count)
    ]


@pytest.fixture(scope="session")
def policy() -> PasswordPolicy:
    return PasswordPolicy(8, 64)


@pytest.fixture
def weak_list(tmp_path: pathlib.Path) -> pathlib.Path:
    fn = tmp_path / "weak.txt"
    fn.write_text(
        "short\nhunter22\nhunter22\n\nCorrectHorse\n  spaced  \n\u00c4ffinit\u00e4t\n"
        + "x" * 30
        + "\n",
        encoding="utf-8",
    )
    return fn
