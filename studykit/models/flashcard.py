from enum import Enum
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple


@dataclass(frozen=True, eq=False)
class Flashcard:
    '''
    A single card. Cards compare and hash by identity, so two cards with the
    same text are still different members of a bucket.
    '''
    front: str
    back: str
    hint: str = ''
    tags: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, 'tags', tuple(self.tags))


class AnswerDifficulty(Enum):
    WRONG = 0
    HARD = 1
    EASY = 2


@dataclass(frozen=True)
class HistoryEntry:
    card: Flashcard
    difficulty: AnswerDifficulty
    day: int


BucketMap = Dict[int, Set[Flashcard]]
BucketSets = List[Optional[Set[Flashcard]]]  # None marks a hole
