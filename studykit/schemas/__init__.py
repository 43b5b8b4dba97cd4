from .flashcard import FlashcardSchema, DeckSchema
from .progress import BucketRange, ProgressSchema
