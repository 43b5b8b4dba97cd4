#!/usr/bin/env python
# coding: utf-8

from collections import Counter
from typing import List, Optional, Set

from studykit.models import Flashcard, AnswerDifficulty, HistoryEntry, BucketMap, BucketSets
from studykit.schemas import BucketRange, ProgressSchema
from studykit.config import settings
from studykit.util import get_logger


logger = get_logger('studykit.leitner')


def to_bucket_sets(buckets: BucketMap) -> List[Set[Flashcard]]:
    '''
    Convert a bucket map into a list where index i holds a copy of bucket i.
    Bucket numbers missing from the map become empty sets.
    '''
    if len(buckets) == 0:
        return []
    max_bucket = max(buckets.keys())
    return [set(buckets.get(i, set())) for i in range(max_bucket + 1)]


def get_bucket_range(buckets: BucketSets) -> Optional[BucketRange]:
    '''
    Smallest and largest bucket that hold at least one card,
    None if every bucket is empty.
    '''
    occupied = [i for i, bucket in enumerate(buckets) if bucket]
    if len(occupied) == 0:
        return None
    return BucketRange(min_bucket=occupied[0], max_bucket=occupied[-1])


def practice(buckets: BucketSets, day: int) -> Set[Flashcard]:
    '''
    Cards to practice on `day`: the union of buckets 0 through `day`.
    Holes and bucket numbers past the end of the list are skipped.
    '''
    cards = set()
    for bucket in buckets[:max(day + 1, 0)]:
        if bucket:
            cards.update(bucket)
    return cards


def update(
    buckets: BucketMap,
    card: Flashcard,
    difficulty: AnswerDifficulty,
) -> BucketMap:
    '''
    Move `card` after a review, mutating and returning `buckets`.

    WRONG sends the card back to bucket 0, HARD keeps it where it is and EASY
    promotes it by one, capped at the number of buckets in the map minus one.
    A card that is in no bucket leaves the map untouched.
    '''
    mark = next((i for i, bucket in buckets.items() if card in bucket), None)
    if mark is None:
        logger.warning('card {} not found in any bucket, skipping update'.format(card.front))
        return buckets

    if difficulty == AnswerDifficulty.WRONG:
        new_mark = 0
    elif difficulty == AnswerDifficulty.HARD:
        new_mark = mark
    else:
        # never demote on EASY, even when bucket numbers are sparse
        new_mark = max(mark, min(mark + 1, len(buckets) - 1))

    buckets[mark].discard(card)
    buckets.setdefault(new_mark, set()).add(card)
    logger.debug('{} {}: bucket {} -> {}'.format(card.front, difficulty.name, mark, new_mark))
    return buckets


def get_hint(card: Flashcard) -> str:
    return card.hint


def compute_progress(buckets: BucketMap, history: List[HistoryEntry]) -> ProgressSchema:
    '''
    Bucket occupancy and answer ratios.

    correct_ratio counts EASY answers, medium_ratio HARD ones and hard_ratio
    WRONG ones, all over the number of history entries (0 when empty).
    '''
    cards_per_bucket = {i: len(bucket) for i, bucket in buckets.items()}
    counts = Counter(entry.difficulty for entry in history)
    n_attempts = len(history)

    def ratio(difficulty: AnswerDifficulty) -> float:
        return counts[difficulty] / n_attempts if n_attempts > 0 else 0

    return ProgressSchema(
        total_cards=sum(cards_per_bucket.values()),
        cards_per_bucket=cards_per_bucket,
        correct_ratio=ratio(AnswerDifficulty.EASY),
        medium_ratio=ratio(AnswerDifficulty.HARD),
        hard_ratio=ratio(AnswerDifficulty.WRONG),
    )


class LeitnerScheduler:

    def __init__(self, buckets: Optional[BucketMap] = None, n_buckets: int = settings.NUM_BUCKETS):
        if buckets is None:
            buckets = {i: set() for i in range(n_buckets)}
        self.buckets = buckets
        self.history = []

    def add_card(self, card: Flashcard):
        # new cards start in bucket 0
        if self.bucket_of(card) is None:
            self.buckets.setdefault(0, set()).add(card)

    def bucket_of(self, card: Flashcard) -> Optional[int]:
        for i, bucket in self.buckets.items():
            if card in bucket:
                return i
        return None

    def cards_due(self, day: int) -> Set[Flashcard]:
        return practice(to_bucket_sets(self.buckets), day)

    def record(self, card: Flashcard, difficulty: AnswerDifficulty, day: int):
        update(self.buckets, card, difficulty)
        self.history.append(HistoryEntry(card=card, difficulty=difficulty, day=day))

    def progress(self) -> ProgressSchema:
        return compute_progress(self.buckets, self.history)
