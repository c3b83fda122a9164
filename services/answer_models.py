"""
Answer Comparison Models

Pydantic models for the results of comparing a learner's answer with the
accepted answers of a vocabulary item. Instances are created per comparison
and never persisted.
"""

from pydantic import BaseModel, Field
from typing import List, Optional


class WordDifference(BaseModel):
    """
    Correctness of one word of the user's answer.

    Example:
    {
        "word": "dan",
        "position": 1,
        "is_correct": false,
        "correct_word": "vece"
    }
    """
    word: str = Field(
        description="Word exactly as the user typed it"
    )
    position: int = Field(
        ge=0,
        description="Zero-based position of the word in the user's answer"
    )
    is_correct: bool = Field(
        description="Whether the word matches the expected word at this position"
    )
    correct_word: Optional[str] = Field(
        default=None,
        description="Expected word at this position (only set when is_correct is false)"
    )


class MatchResult(BaseModel):
    """
    Outcome of matching one answer against all accepted answers.

    Field presence rules:
    - matched_answer is set only when is_correct is true
    - best_match is always set; it equals matched_answer on success and the
      least-wrong candidate otherwise
    - word_differences is empty on success
    """
    is_correct: bool = Field(
        description="Whether the answer matched any accepted answer"
    )
    matched_answer: Optional[str] = Field(
        default=None,
        description="Accepted answer that matched (null if incorrect)"
    )
    best_match: str = Field(
        description="Accepted answer used for the word-by-word comparison"
    )
    word_differences: List[WordDifference] = Field(
        default_factory=list,
        description="Per-word correctness of the user's answer against best_match"
    )

    def incorrect_count(self) -> int:
        return sum(1 for diff in self.word_differences if not diff.is_correct)
