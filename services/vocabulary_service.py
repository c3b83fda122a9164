"""
Vocabulary Service - Manages a user's vocabulary items and their synonyms.

Every query is scoped to the owning user; items belonging to someone else
behave exactly like missing items.
"""

import logging
from typing import Any, Dict, List, Optional

from flask import current_app
from sqlalchemy.exc import IntegrityError

from models import db
from models.synonym import Synonym
from models.vocabulary_item import VocabularyItem
from services.errors import ConflictError, NotFoundError

# Configure logging
logger = logging.getLogger(__name__)

# Practice directions
MODE_WORD_TRANSLATION = 'word-translation'
MODE_TRANSLATION_WORD = 'translation-word'

VALID_PRACTICE_MODES = [MODE_WORD_TRANSLATION, MODE_TRANSLATION_WORD]

UPDATABLE_FIELDS = ['word', 'translation', 'language', 'translation_language', 'learned', 'mastered']


def clean_synonyms(synonyms: Optional[List[Any]]) -> List[str]:
    """
    Trim synonyms, drop empty ones and remove duplicates keeping first occurrence.

    Examples:
        >>> clean_synonyms([" hi ", "", "hey", "hi"])
        ['hi', 'hey']
    """
    if not synonyms:
        return []

    cleaned = []
    for synonym in synonyms:
        if not isinstance(synonym, str):
            raise ValueError(f"Synonyms must be strings, got: {synonym!r}")
        text = synonym.strip()
        if text and text not in cleaned:
            cleaned.append(text)
    return cleaned


class VocabularyService:
    """Service for vocabulary CRUD scoped to one user"""

    @staticmethod
    def list_items(user_id: int) -> List[VocabularyItem]:
        """Return the user's items, newest first."""
        return (VocabularyItem.query
                .filter_by(user_id=user_id)
                .order_by(VocabularyItem.created_at.desc(), VocabularyItem.id.desc())
                .all())

    @staticmethod
    def get_item(user_id: int, vocabulary_id: int) -> VocabularyItem:
        """
        Fetch one of the user's items.

        Raises:
            NotFoundError: If the item doesn't exist or belongs to another user
        """
        item = VocabularyItem.query.filter_by(id=vocabulary_id, user_id=user_id).first()
        if not item:
            raise NotFoundError('Vocabulary item not found')
        return item

    @staticmethod
    def create_item(
        user_id: int,
        word: str,
        translation: str,
        language: Optional[str] = None,
        translation_language: Optional[str] = None,
        synonyms: Optional[List[str]] = None
    ) -> VocabularyItem:
        """
        Create a vocabulary item with optional synonyms.

        Args:
            user_id: Owner of the item
            word: Foreign word or phrase
            translation: Primary translation
            language: Language of the word (defaults to DEFAULT_LANGUAGE)
            translation_language: Language of the translation
                                  (defaults to DEFAULT_TRANSLATION_LANGUAGE)
            synonyms: Additional accepted translations

        Returns:
            VocabularyItem: The persisted item

        Raises:
            ValueError: If word or translation is missing
            ConflictError: If the user already has this word in this language
            RuntimeError: If the database write fails
        """
        if not isinstance(word, str) or not word.strip():
            raise ValueError('Word and translation are required')
        if not isinstance(translation, str) or not translation.strip():
            raise ValueError('Word and translation are required')

        language = language or current_app.config['DEFAULT_LANGUAGE']
        translation_language = translation_language or current_app.config['DEFAULT_TRANSLATION_LANGUAGE']
        cleaned_synonyms = clean_synonyms(synonyms)

        existing = VocabularyItem.query.filter_by(
            user_id=user_id,
            word=word.strip(),
            language=language
        ).first()
        if existing:
            raise ConflictError(
                f'"{word.strip()}" already exists in {language} with translation "{existing.translation}"',
                existing=existing
            )

        try:
            item = VocabularyItem(
                user_id=user_id,
                word=word,
                translation=translation,
                language=language,
                translation_language=translation_language
            )
            item.synonyms = [Synonym(synonym=text) for text in cleaned_synonyms]
            db.session.add(item)
            db.session.commit()
        except Exception as e:
            logger.error(f"Failed to create vocabulary item '{word}' for user_id={user_id}: {str(e)}", exc_info=True)
            db.session.rollback()
            raise RuntimeError(f"Failed to create vocabulary item: {str(e)}")

        logger.info(f"Created vocabulary item {item.id} '{item.word}' for user_id={user_id}")
        return item

    @staticmethod
    def update_item(user_id: int, vocabulary_id: int, updates: Dict[str, Any]) -> VocabularyItem:
        """
        Apply a partial update to one of the user's items.

        Only keys in UPDATABLE_FIELDS and 'synonyms' are considered. Passing
        'synonyms' replaces the whole synonym set (an empty list clears it).

        Raises:
            ValueError: If no updatable field is given or a value is invalid
            NotFoundError: If the item doesn't exist for this user
            ConflictError: If the new word/language collides with another item
        """
        fields = {key: updates[key] for key in UPDATABLE_FIELDS if key in updates}
        has_synonym_updates = 'synonyms' in updates

        if not fields and not has_synonym_updates:
            raise ValueError('No valid fields to update')

        item = VocabularyService.get_item(user_id, vocabulary_id)

        cleaned_synonyms = clean_synonyms(updates.get('synonyms')) if has_synonym_updates else None

        # Replacing synonyms loads the old ones; keep a word/language clash for commit
        with db.session.no_autoflush:
            for key, value in fields.items():
                if key in ('learned', 'mastered'):
                    if not isinstance(value, bool):
                        raise ValueError(f"{key} must be a boolean")
                    setattr(item, key, value)
                elif key in ('language', 'translation_language'):
                    if not isinstance(value, str) or not value.strip():
                        raise ValueError(f"{key} must be a non-empty string")
                    setattr(item, key, value.strip())
                else:
                    setattr(item, key, value)

            if cleaned_synonyms is not None:
                item.synonyms = [Synonym(synonym=text) for text in cleaned_synonyms]

        try:
            db.session.commit()
        except IntegrityError:
            db.session.rollback()
            raise ConflictError('Another vocabulary item already uses this word and language')
        except Exception as e:
            logger.error(f"Failed to update vocabulary item {vocabulary_id}: {str(e)}", exc_info=True)
            db.session.rollback()
            raise RuntimeError(f"Failed to update vocabulary item: {str(e)}")

        logger.info(
            f"Updated vocabulary item {vocabulary_id} for user_id={user_id}: "
            f"fields={sorted(fields)}, synonyms_replaced={has_synonym_updates}"
        )
        return item

    @staticmethod
    def delete_item(user_id: int, vocabulary_id: int) -> None:
        """Delete one of the user's items together with its synonyms and attempts."""
        item = VocabularyService.get_item(user_id, vocabulary_id)
        try:
            db.session.delete(item)
            db.session.commit()
        except Exception as e:
            logger.error(f"Failed to delete vocabulary item {vocabulary_id}: {str(e)}", exc_info=True)
            db.session.rollback()
            raise RuntimeError(f"Failed to delete vocabulary item: {str(e)}")

        logger.info(f"Deleted vocabulary item {vocabulary_id} for user_id={user_id}")

    @staticmethod
    def reset_attempts(user_id: int, vocabulary_id: int) -> VocabularyItem:
        """Set both attempt counters of one item back to zero."""
        item = VocabularyService.get_item(user_id, vocabulary_id)
        item.correct_attempts = 0
        item.wrong_attempts = 0
        db.session.commit()

        logger.info(f"Reset attempt counts for vocabulary item {vocabulary_id}")
        return item

    @staticmethod
    def get_candidates(item: VocabularyItem, mode: str) -> List[str]:
        """
        Build the ordered list of accepted answers for a practice direction.

        - word-translation: primary translation first, then synonyms
        - translation-word: the foreign word only (words have no synonyms)

        Candidates are trimmed and de-duplicated, so the primary answer is
        always at index 0.

        Raises:
            ValueError: If mode is unknown or the item yields no candidates
        """
        if mode == MODE_WORD_TRANSLATION:
            raw = [item.translation] + item.synonym_texts
        elif mode == MODE_TRANSLATION_WORD:
            raw = [item.word]
        else:
            raise ValueError(
                f"Invalid practice mode '{mode}'. Must be one of: {', '.join(VALID_PRACTICE_MODES)}"
            )

        candidates = clean_synonyms(raw)
        if not candidates:
            logger.error(f"Vocabulary item {item.id} has no accepted answers for mode {mode}")
            raise ValueError(f"Vocabulary item {item.id} has no accepted answers")
        return candidates
