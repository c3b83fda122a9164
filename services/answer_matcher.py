"""
Answer Matcher - decides whether a typed answer is correct.

Given the user's answer and the ordered list of accepted answers for a
vocabulary item (primary answer first, then synonyms), this module:
1. Looks for an accepted answer equivalent to the user's answer
2. Otherwise picks the least-wrong accepted answer
3. Produces a word-by-word correctness breakdown against that answer

All functions are pure; callers persist outcomes themselves.
"""

import logging
from typing import List, Optional, Sequence

from services.answer_models import MatchResult, WordDifference
from services.text_normalizer import normalize, split_into_words

logger = logging.getLogger(__name__)


def equivalent(a: str, b: str) -> bool:
    """Return True if both strings normalize to the same canonical form."""
    return normalize(a) == normalize(b)


def compare_tokenwise(user_answer: str, candidate: str) -> List[WordDifference]:
    """
    Compare the user's answer with one accepted answer position by position.

    Word i of the answer is compared only with word i of the candidate; no
    alignment is attempted, so transposed words count as wrong. Words the user
    left out at the end are not reported. Extra words the user typed beyond
    the candidate's length are reported as incorrect with an empty
    correct_word.

    Args:
        user_answer: The user's submitted answer
        candidate: One accepted answer

    Returns:
        list: One WordDifference per word of the user's answer

    Examples:
        >>> [d.is_correct for d in compare_tokenwise("dobar dan", "dobar vece")]
        [True, False]
    """
    user_words = split_into_words(user_answer)
    candidate_words = split_into_words(candidate)

    differences = []
    for position in range(max(len(user_words), len(candidate_words))):
        user_word = user_words[position] if position < len(user_words) else ''
        expected_word = candidate_words[position] if position < len(candidate_words) else ''

        if not user_word:
            continue

        is_correct = equivalent(user_word, expected_word)
        differences.append(WordDifference(
            word=user_word,
            position=position,
            is_correct=is_correct,
            correct_word=None if is_correct else expected_word
        ))

    return differences


def match_against_candidates(user_answer: str, candidates: Sequence[str]) -> MatchResult:
    """
    Match the user's answer against every accepted answer.

    Workflow:
    1. Exact pass: the first candidate equivalent to the answer wins
    2. Best-effort pass: the candidate with the fewest incorrect words wins,
       ties keep the earliest candidate

    Args:
        user_answer: The user's submitted answer
        candidates: Accepted answers in priority order (primary answer first)

    Returns:
        MatchResult: is_correct, matched_answer (success only), best_match and
                     word_differences against best_match

    Raises:
        TypeError: If user_answer or any candidate is not a string

    Implementation Notes:
        - An empty candidate list is a caller error; it is logged and answered
          with an incorrect result, empty best_match and no differences
    """
    if not isinstance(user_answer, str):
        raise TypeError(f"user_answer must be a str, got {type(user_answer).__name__}")

    if not candidates:
        logger.warning("match_against_candidates called with no candidates")
        return MatchResult(is_correct=False, best_match='', word_differences=[])

    for candidate in candidates:
        if equivalent(user_answer, candidate):
            return MatchResult(
                is_correct=True,
                matched_answer=candidate,
                best_match=candidate,
                word_differences=[]
            )

    best: Optional[MatchResult] = None

    for candidate in candidates:
        attempt = MatchResult(
            is_correct=False,
            best_match=candidate,
            word_differences=compare_tokenwise(user_answer, candidate)
        )

        # Strictly fewer: equal counts keep the earlier candidate
        if best is None or attempt.incorrect_count() < best.incorrect_count():
            best = attempt

    return best


def should_reveal_original(user_answer: str, result: MatchResult) -> bool:
    """
    Whether the UI should show the matched answer's original spelling.

    True when the answer was correct, the matched answer carries characters
    that normalization changes (diacritics, capitals), and the user did not
    already type that exact spelling, e.g. "caj" for "čaj" but not "čaj".
    """
    if not result.is_correct or result.matched_answer is None:
        return False

    original = result.matched_answer
    return normalize(original) != original and user_answer.strip() != original
