from __future__ import annotations
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from .exceptions import DictionaryLoadError, InvalidRequestError
from .logger import get_logger

logger = get_logger(__name__)


def read_word_list(path: Union[str, Path]) -> List[str]:
    """Read a newline-delimited word list, uppercased, blank lines dropped."""
    try:
        content = Path(path).read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as exc:
        raise DictionaryLoadError(f"Cannot read word list {path}: {exc}") from exc
    words = (line.strip().upper() for line in content.splitlines())
    return [w for w in words if w]


def load_dictionary(path: Union[str, Path]) -> Tuple[str, ...]:
    # A missing dictionary is not fatal; every lookup just comes back empty.
    try:
        words = read_word_list(path)
    except DictionaryLoadError:
        logger.exception("Error loading dictionary, continuing with no words")
        return ()
    logger.info("Loaded %d words from dictionary %s", len(words), path)
    return tuple(words)


def normalize_letters(letters: Iterable[str]) -> frozenset:
    return frozenset(l.strip().upper() for l in letters if l and l.strip())


def get_valid_words(dictionary: Sequence[str], letters: Iterable[str], min_length: int) -> List[str]:
    """Words at least ``min_length`` long built only from ``letters``.

    Letters may repeat inside a word; only membership is checked. Dictionary
    order is preserved.
    """
    letter_set = normalize_letters(letters)
    if not letter_set:
        raise InvalidRequestError('letters must not be empty')
    if min_length < 1:
        raise InvalidRequestError('minLength must be a positive number')
    return [w for w in dictionary if len(w) >= min_length and letter_set.issuperset(w)]


class DictionaryService:
    def __init__(self, words: Optional[Iterable[str]] = None):
        # Ordered, uppercase, read-only after construction
        self._words: Tuple[str, ...] = tuple(w.upper() for w in (words or ()))
        self._lookup = frozenset(self._words)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'DictionaryService':
        return cls(load_dictionary(path))

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    def __len__(self) -> int:
        return len(self._words)

    def is_valid(self, word: str) -> bool:
        if not word:
            return False
        return word.strip().upper() in self._lookup

    def valid_words(self, letters: Iterable[str], min_length: int) -> List[str]:
        return get_valid_words(self._words, letters, min_length)
