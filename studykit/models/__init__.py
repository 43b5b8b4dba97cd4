from .flashcard import Flashcard, AnswerDifficulty, HistoryEntry, BucketMap, BucketSets
