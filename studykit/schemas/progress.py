from pydantic import BaseModel
from typing import Dict


class BucketRange(BaseModel):
    min_bucket: int
    max_bucket: int


class ProgressSchema(BaseModel):
    total_cards: int = 0                  # cards summed over all buckets
    cards_per_bucket: Dict[int, int] = {}  # bucket number -> card count
    correct_ratio: float = 0              # share of EASY answers
    medium_ratio: float = 0               # share of HARD answers
    hard_ratio: float = 0                 # share of WRONG answers
