"""Storage adapters for the question catalog and practice responses."""

from interview_prep.adapters.storage.base import (
    AbstractQuestionRepository,
    AbstractResponseRepository,
    QuestionFilters,
)
from interview_prep.adapters.storage.in_memory import (
    InMemoryQuestionRepository,
    InMemoryResponseRepository,
)

__all__ = [
    "AbstractQuestionRepository",
    "AbstractResponseRepository",
    "InMemoryQuestionRepository",
    "InMemoryResponseRepository",
    "QuestionFilters",
]
