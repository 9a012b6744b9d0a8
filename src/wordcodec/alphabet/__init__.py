import logging
import string
from collections.abc import Iterator
from typing import final

logger = logging.getLogger(__name__)

# Delimiters of a word spelled out character by character
ALPHA_START = 999
ALPHA_END = 998


def _build_table() -> dict[str, int]:
    # A-Z: 1-26, a-z: 27-52, 0-9: 53-62
    bands = string.ascii_uppercase + string.ascii_lowercase + string.digits
    return {ch: i for i, ch in enumerate(bands, start=1)}


@final
class AlphanumericTable:
    """Fixed bidirectional mapping between ASCII letters/digits and 1-62."""

    def __init__(self) -> None:
        self.c_to_i: dict[str, int] = _build_table()
        self.i_to_c: dict[int, str] = {i: ch for ch, i in self.c_to_i.items()}

    def code(self, char: str) -> int | None:
        return self.c_to_i.get(char)

    def char(self, code: int) -> str | None:
        return self.i_to_c.get(code)

    def encode_word(self, word: str) -> list[int]:
        """Spell out `word` between the alpha sentinels.

        Characters without a code are dropped, so "don't" comes back as "dont".
        """
        tokens = [ALPHA_START]
        for c in word:
            code = self.code(c)
            if code is None:
                logger.warning(f"Character {c!r} not in alphanumeric table, skipping")
                continue
            tokens.append(code)
        tokens.append(ALPHA_END)
        return tokens

    def items(self) -> Iterator[tuple[str, int]]:
        return iter(self.c_to_i.items())

    def __len__(self) -> int:
        return len(self.c_to_i)
