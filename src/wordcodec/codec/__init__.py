import logging
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import final

from ..alphabet import ALPHA_END, ALPHA_START, AlphanumericTable

logger = logging.getLogger(__name__)

PAD = "<PAD>"
UNK = "<UNK>"
START = "<START>"
END = "<END>"

PAD_ID = 0
UNK_ID = 1
START_ID = 2
END_ID = 3

FIRST_WORD_ID = 4

# Never handed out to a word, decode treats them as sentinels
RESERVED_IDS = frozenset({ALPHA_END, ALPHA_START})

_TOKEN_SEPARATOR = re.compile(r"[\s,]+")
_INTEGER = re.compile(r"[+-]?\d+")


def split_words(text: str) -> list[str]:
    return text.lower().split()


class InvalidTokenError(ValueError):
    def __init__(self, token: str):
        super().__init__(f'"{token}" is not a valid number')
        self.token: str = token


def parse_token_ids(text: str) -> list[int]:
    """Parse token ids separated by whitespace and/or commas.

    Raises `InvalidTokenError` for the first fragment that is not an integer.
    """
    tokens = []
    for fragment in _TOKEN_SEPARATOR.split(text):
        if not fragment:
            continue
        if _INTEGER.fullmatch(fragment) is None:
            raise InvalidTokenError(fragment)
        tokens.append(int(fragment))
    return tokens


@dataclass(frozen=True)
class VocabularySnapshot:
    words: Mapping[str, int]
    next_id: int

    def __len__(self) -> int:
        return len(self.words)


@dataclass(frozen=True)
class WordEncoding:
    word: str
    # None if the word is spelled out in alphanumeric mode
    id: int | None
    tokens: list[int]

    @property
    def known(self) -> bool:
        return self.id is not None


@final
class VocabularyCodec:
    def __init__(self) -> None:
        self.w_to_i: dict[str, int] = {
            PAD: PAD_ID,
            UNK: UNK_ID,
            START: START_ID,
            END: END_ID,
        }
        self.i_to_w: dict[int, str] = {i: w for w, i in self.w_to_i.items()}
        self._next_id: int = FIRST_WORD_ID
        self.alphabet: AlphanumericTable = AlphanumericTable()

    @property
    def next_id(self) -> int:
        return self._next_id

    def _allocate_id(self) -> int:
        word_id = self._next_id
        self._next_id += 1
        while self._next_id in RESERVED_IDS:
            self._next_id += 1
        return word_id

    def learn(self, text: str) -> None:
        added = 0
        for word in split_words(text):
            if self.w_to_i.get(word) is not None:
                continue
            word_id = self._allocate_id()
            self.w_to_i[word] = word_id
            self.i_to_w[word_id] = word
            added += 1
        logger.debug(f"Learned {added} new words, vocabulary size {self.vocab_size()}")

    def _encode_word(self, word: str) -> WordEncoding:
        word_id = self.w_to_i.get(word)
        if word_id is None:
            return WordEncoding(word, None, self.alphabet.encode_word(word))
        return WordEncoding(word, word_id, [word_id])

    def breakdown(self, text: str) -> list[WordEncoding]:
        return [self._encode_word(word) for word in split_words(text)]

    def encode(self, text: str) -> list[int]:
        return [token for entry in self.breakdown(text) for token in entry.tokens]

    def decode(self, tokens: Sequence[int]) -> str:
        words = []
        i = 0
        while i < len(tokens):
            token = tokens[i]
            i += 1
            if token == ALPHA_START:
                chars = []
                while i < len(tokens):
                    code = tokens[i]
                    i += 1
                    if code == ALPHA_END:
                        break
                    char = self.alphabet.char(code)
                    if char is not None:
                        chars.append(char)
                words.append("".join(chars))
                continue

            word = self.i_to_w.get(token)
            words.append(UNK if word is None else word)
        return " ".join(words)

    def snapshot(self) -> VocabularySnapshot:
        return VocabularySnapshot(MappingProxyType(dict(self.w_to_i)), self._next_id)

    def vocab_size(self) -> int:
        return len(self.w_to_i)
