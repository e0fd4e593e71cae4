from __future__ import annotations
import threading
from pathlib import Path
from typing import Dict, List, Set, Union

from ..exceptions import CapacityExceededError, InvalidRequestError
from ..logger import get_logger

logger = get_logger(__name__)

DEFAULT_MAX_WORDS = 1000


def normalize_word(word: str) -> str:
    return word.strip().upper()


class ReportList:
    """One capped, deduplicated word list mirrored to a text file.

    The file holds one uppercase word per line. It is read once on
    construction; afterwards the in-memory copy is authoritative and every
    mutation is written through under ``_lock``.
    """

    def __init__(self, name: str, path: Union[str, Path], max_words: int = DEFAULT_MAX_WORDS):
        self.name = name
        self.path = Path(path)
        self.max_words = max_words
        self._lock = threading.Lock()
        self._words: List[str] = []
        self._seen: Set[str] = set()
        self._load()

    def _load(self):
        if not self.path.exists():
            return
        try:
            raw = self.path.read_text(encoding='utf-8').splitlines()
        except (OSError, UnicodeDecodeError):
            # Unreadable list is not fatal; it starts empty
            logger.exception("Error loading %s reports from %s, starting empty", self.name, self.path)
            return
        for line in raw:
            word = normalize_word(line)
            if word and word not in self._seen:
                self._seen.add(word)
                self._words.append(word)
        if len(self._words) > self.max_words:
            logger.warning("%s reports in %s exceed the limit of %d, keeping the first %d",
                           len(self._words), self.path, self.max_words, self.max_words)
            self._words = self._words[:self.max_words]
            self._seen = set(self._words)
        if self._words != raw:
            # Blank, duplicate, lowercase or excess lines on disk; rewrite normalized
            self._write_all(self._words)
        logger.debug("Loaded %d %s reports from %s", len(self._words), self.name, self.path)

    def _write_all(self, words: List[str]):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(''.join(w + '\n' for w in words), encoding='utf-8')

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: str) -> bool:
        return normalize_word(word) in self._seen

    def append(self, word: str) -> bool:
        """Add ``word``; returns False when it was already present."""
        word = normalize_word(word)
        if not word:
            raise InvalidRequestError('word must not be empty')
        with self._lock:
            if word in self._seen:
                return False
            if len(self._words) >= self.max_words:
                logger.warning("Rejected %s report %s: list full (%d)", self.name, word, self.max_words)
                raise CapacityExceededError(
                    f"Too many reported words in '{self.name}' list (max {self.max_words})")
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open('a', encoding='utf-8') as fh:
                fh.write(word + '\n')
            self._words.append(word)
            self._seen.add(word)
        logger.info("Reported word %s (%s)", word, self.name)
        return True

    def read(self) -> List[str]:
        with self._lock:
            return list(self._words)

    def clear(self):
        with self._lock:
            # Memory only changes once the file is truncated
            self._write_all([])
            self._words = []
            self._seen = set()


class ReportStore:
    def __init__(self, add_path: Union[str, Path], remove_path: Union[str, Path],
                 max_words: int = DEFAULT_MAX_WORDS):
        self.lists: Dict[str, ReportList] = {
            'add': ReportList('add', add_path, max_words),
            'remove': ReportList('remove', remove_path, max_words),
        }

    def _get(self, list_type: str) -> ReportList:
        report_list = self.lists.get(list_type)
        if report_list is None:
            raise InvalidRequestError(f"Unknown report type: {list_type!r}")
        return report_list

    def append(self, list_type: str, word: str) -> bool:
        return self._get(list_type).append(word)

    def read(self, list_type: str) -> List[str]:
        return self._get(list_type).read()

    def read_all(self) -> Dict[str, List[str]]:
        return {name: rl.read() for name, rl in self.lists.items()}

    def clear(self):
        for rl in self.lists.values():
            rl.clear()
        logger.info("Cleared all reported words")
