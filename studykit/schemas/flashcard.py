from pydantic import BaseModel
from typing import List

from studykit.models import Flashcard


class FlashcardSchema(BaseModel):
    front: str
    back: str
    hint: str = ''
    tags: List[str] = []

    def to_flashcard(self) -> Flashcard:
        return Flashcard(
            front=self.front,
            back=self.back,
            hint=self.hint,
            tags=tuple(self.tags),
        )


class DeckSchema(BaseModel):
    name: str
    cards: List[FlashcardSchema]
