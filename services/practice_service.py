"""
Practice Service - Runs practice rounds on top of the answer matcher.

This service selects words to practice, checks submitted answers with the
answer matcher, and records the outcome:
- correct answers increment correct_attempts and mark the word learned
- wrong answers increment wrong_attempts and are logged as IncorrectAttempt

The matcher itself is pure; every database write happens here.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import case, func

from models import db
from models.incorrect_attempt import IncorrectAttempt
from models.vocabulary_item import VocabularyItem
from services.answer_matcher import match_against_candidates, should_reveal_original
from services.vocabulary_service import (
    MODE_WORD_TRANSLATION,
    VALID_PRACTICE_MODES,
    VocabularyService,
)

# Configure logging
logger = logging.getLogger(__name__)


def validate_mode(mode: Optional[str]) -> str:
    """Return mode (defaulting to word-translation) or raise ValueError if unknown."""
    if mode is None:
        return MODE_WORD_TRANSLATION
    if mode not in VALID_PRACTICE_MODES:
        raise ValueError(
            f"Invalid practice mode '{mode}'. Must be one of: {', '.join(VALID_PRACTICE_MODES)}"
        )
    return mode


class PracticeService:
    """Service to select practice words, check answers and report progress"""

    @staticmethod
    def get_practice_word(user_id: int, mode: str = MODE_WORD_TRANSLATION,
                          language: Optional[str] = None) -> Optional[Dict[str, Any]]:
        """
        Pick a random word the user has neither learned nor mastered.

        Args:
            user_id: The ID of the user
            mode: Practice direction (word-translation or translation-word)
            language: Optional filter on the word's language

        Returns:
            dict: Practice prompt with id, word, translation, languages, mode and
                  synonyms, or None if nothing is left to practice

        Raises:
            ValueError: If mode is invalid
        """
        mode = validate_mode(mode)

        query = VocabularyItem.query.filter_by(user_id=user_id, learned=False, mastered=False)
        if language:
            query = query.filter(VocabularyItem.language == language)

        item = query.order_by(func.random()).first()
        if not item:
            return None

        return {
            'id': item.id,
            'word': item.word,
            'translation': item.translation,
            'language': item.language,
            'translation_language': item.translation_language,
            'mode': mode,
            'synonyms': item.synonym_texts,
        }

    @staticmethod
    def check_answer(user_id: int, vocabulary_id: int, user_answer: str,
                     mode: str = MODE_WORD_TRANSLATION) -> Dict[str, Any]:
        """
        Check a practice answer and record the outcome.

        Workflow:
        1. Validate inputs and load the user's vocabulary item
        2. Build accepted answers for the practice direction
        3. Match the answer against them
        4. Update attempt counters and learned flag, log wrong answers
        5. Build the practice result

        Args:
            user_id: The ID of the user
            vocabulary_id: The ID of the vocabulary item being practiced
            user_answer: The user's submitted answer
            mode: Practice direction

        Returns:
            dict: Practice result with keys:
                - correct (bool)
                - expected_answer (str): matched answer, or closest accepted answer
                - user_answer (str): the answer as submitted
                - mode (str)
                - word_differences (list): per-word correctness (empty if correct)
                - original_answer (str, optional): accented spelling to show when
                  the user typed a folded form
                - other_answers (list, optional): remaining accepted answers,
                  only when incorrect

        Raises:
            TypeError: If user_answer is not a string
            ValueError: If mode is invalid or the item has no accepted answers
            NotFoundError: If the item doesn't exist for this user
            RuntimeError: If the outcome cannot be persisted
        """
        if not isinstance(user_answer, str):
            raise TypeError(f"user_answer must be a str, got {type(user_answer).__name__}")
        mode = validate_mode(mode)

        item = VocabularyService.get_item(user_id, vocabulary_id)
        candidates = VocabularyService.get_candidates(item, mode)

        result = match_against_candidates(user_answer, candidates)

        PracticeService._record_outcome(
            item=item,
            user_id=user_id,
            user_answer=user_answer,
            expected_answer=result.best_match,
            mode=mode,
            was_correct=result.is_correct
        )

        logger.info(
            f"Practice check: user_id={user_id}, vocabulary_id={vocabulary_id}, mode={mode}, "
            f"user_answer='{user_answer}', correct={result.is_correct}"
        )

        response = {
            'correct': result.is_correct,
            'expected_answer': result.matched_answer if result.is_correct else result.best_match,
            'user_answer': user_answer,
            'mode': mode,
            'word_differences': [diff.model_dump() for diff in result.word_differences],
        }

        if should_reveal_original(user_answer, result):
            response['original_answer'] = result.matched_answer

        if not result.is_correct:
            response['other_answers'] = [c for c in candidates if c != result.best_match]

        return response

    @staticmethod
    def _record_outcome(item: VocabularyItem, user_id: int, user_answer: str,
                        expected_answer: str, mode: str, was_correct: bool) -> None:
        """
        Persist the result of one practice check.

        Counters are incremented in SQL (col = col + 1), not from the loaded row.
        """
        try:
            if was_correct:
                VocabularyItem.query.filter_by(id=item.id).update({
                    VocabularyItem.correct_attempts: VocabularyItem.correct_attempts + 1,
                    VocabularyItem.learned: True,
                }, synchronize_session=False)
            else:
                VocabularyItem.query.filter_by(id=item.id).update({
                    VocabularyItem.wrong_attempts: VocabularyItem.wrong_attempts + 1,
                }, synchronize_session=False)
                db.session.add(IncorrectAttempt(
                    vocabulary_id=item.id,
                    user_id=user_id,
                    incorrect_answer=user_answer.strip() or user_answer,
                    expected_answer=expected_answer,
                    practice_mode=mode
                ))

            db.session.commit()

        except Exception as e:
            logger.error(
                f"Failed to record practice outcome for vocabulary_id={item.id}: {str(e)}",
                exc_info=True
            )
            db.session.rollback()
            raise RuntimeError(f"Failed to record practice outcome: {str(e)}")

        db.session.refresh(item)

    @staticmethod
    def get_stats(user_id: int) -> Dict[str, int]:
        """
        Aggregate practice statistics for a user.

        Returns:
            dict: total, learned, unlearned, mastered, progress (rounded
                  percentage of learned words), total_correct_attempts,
                  total_wrong_attempts
        """
        row = db.session.query(
            func.count(VocabularyItem.id),
            func.coalesce(func.sum(case((VocabularyItem.learned.is_(True), 1), else_=0)), 0),
            func.coalesce(func.sum(case((VocabularyItem.mastered.is_(True), 1), else_=0)), 0),
            func.coalesce(func.sum(VocabularyItem.correct_attempts), 0),
            func.coalesce(func.sum(VocabularyItem.wrong_attempts), 0),
        ).filter(VocabularyItem.user_id == user_id).one()

        total, learned, mastered, correct_attempts, wrong_attempts = (int(value or 0) for value in row)

        return {
            'total': total,
            'learned': learned,
            'unlearned': total - learned,
            'mastered': mastered,
            'progress': round(learned / total * 100) if total > 0 else 0,
            'total_correct_attempts': correct_attempts,
            'total_wrong_attempts': wrong_attempts,
        }

    @staticmethod
    def reset_progress(user_id: int) -> int:
        """
        Mark all of the user's words as unlearned.

        Returns:
            int: Number of words reset
        """
        try:
            count = (VocabularyItem.query
                     .filter_by(user_id=user_id)
                     .update({VocabularyItem.learned: False}, synchronize_session=False))
            db.session.commit()
        except Exception as e:
            logger.error(f"Failed to reset practice progress for user_id={user_id}: {str(e)}", exc_info=True)
            db.session.rollback()
            raise RuntimeError(f"Failed to reset practice progress: {str(e)}")

        logger.info(f"Reset {count} words to unlearned for user_id={user_id}")
        return count

    @staticmethod
    def get_incorrect_attempts(user_id: int, vocabulary_id: int) -> List[IncorrectAttempt]:
        """Return the wrong answers logged for one of the user's items, newest first."""
        VocabularyService.get_item(user_id, vocabulary_id)
        return (IncorrectAttempt.query
                .filter_by(user_id=user_id, vocabulary_id=vocabulary_id)
                .order_by(IncorrectAttempt.attempted_at.desc(), IncorrectAttempt.id.desc())
                .all())

    @staticmethod
    def clear_incorrect_attempts(user_id: int, vocabulary_id: int) -> int:
        """Delete the wrong answers logged for one item. Returns the number deleted."""
        VocabularyService.get_item(user_id, vocabulary_id)
        count = IncorrectAttempt.query.filter_by(user_id=user_id, vocabulary_id=vocabulary_id).delete()
        db.session.commit()

        logger.info(f"Cleared {count} incorrect attempts for vocabulary_id={vocabulary_id}")
        return count
