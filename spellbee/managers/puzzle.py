from __future__ import annotations
import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..dictionary import get_valid_words
from ..logger import get_logger

logger = get_logger(__name__)

# Most common first; only the pool that gets shuffled, not a weighting
LETTER_POOL = 'ETAOINSHRDLCUMWFGYPBVKJXQZ'
PUZZLE_SIZE = 7
DEFAULT_ATTEMPTS = 10


@dataclass
class PuzzleStats:
    used_letter_count: int
    total_possible_score: int
    heuristic_score: float


@dataclass
class PuzzleCandidate:
    letters: List[str]
    center_letter: str
    valid_words: List[str] = field(default_factory=list)
    stats: Optional[PuzzleStats] = None


def word_score(word: str, min_length: int) -> int:
    return 1 if len(word) == min_length else len(word)


def score_center(valid_words: Sequence[str], center: str, min_length: int) -> PuzzleStats:
    scoring = [w for w in valid_words if center in w]
    used = set(''.join(scoring))
    total = sum(word_score(w, min_length) for w in scoring)
    heuristic = 20 * len(used) + max(0, 100 - abs(100 - total) / 2)
    return PuzzleStats(used_letter_count=len(used), total_possible_score=total, heuristic_score=heuristic)


class PuzzleGenerator:
    """Picks the best of a handful of random letter sets.

    Each attempt shuffles ``pool`` and keeps the first seven letters, then
    tries every one of them as the center. The candidate with the highest
    heuristic score across all attempts wins; on ties the earliest is kept.
    """

    def __init__(self, dictionary: Sequence[str], rng: Optional[random.Random] = None,
                 attempts: int = DEFAULT_ATTEMPTS, pool: str = LETTER_POOL):
        self.dictionary = dictionary
        self.rng = rng or random.Random()
        self.attempts = attempts
        self.pool = pool

    def sample_letters(self) -> List[str]:
        letters = list(self.pool)
        self.rng.shuffle(letters)
        return letters[:PUZZLE_SIZE]

    def generate(self, min_length: int = 4) -> Optional[PuzzleCandidate]:
        best: Optional[PuzzleCandidate] = None
        for _ in range(self.attempts):
            letters = self.sample_letters()
            # Independent of the center, so filter once per attempt
            valid = get_valid_words(self.dictionary, letters, min_length)
            for center in letters:
                stats = score_center(valid, center, min_length)
                if best is None or stats.heuristic_score > best.stats.heuristic_score:
                    best = PuzzleCandidate(letters=list(letters), center_letter=center,
                                           valid_words=valid, stats=stats)
        if best is None:
            logger.warning("Puzzle generation scored no candidates")
            return None
        logger.info("Generated puzzle %s center=%s score=%.1f words=%d",
                    ''.join(best.letters), best.center_letter,
                    best.stats.heuristic_score, len(best.valid_words))
        return best
