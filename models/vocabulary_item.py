from models import db
from datetime import datetime
from sqlalchemy.orm import validates


class VocabularyItem(db.Model):
    """VocabularyItem model - a foreign word and its translation owned by one user"""
    __tablename__ = 'vocabulary'

    id = db.Column(db.Integer, primary_key=True)

    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)

    word = db.Column(db.String, nullable=False)
    translation = db.Column(db.String, nullable=False)

    # Language of the word and of its translation e.g. serbian -> english
    language = db.Column(db.String(30), nullable=False, default='serbian')
    translation_language = db.Column(db.String(30), nullable=False, default='english')

    learned = db.Column(db.Boolean, nullable=False, default=False)

    # Mastered words never appear in practice again
    mastered = db.Column(db.Boolean, nullable=False, default=False, index=True)

    correct_attempts = db.Column(db.Integer, nullable=False, default=0)
    wrong_attempts = db.Column(db.Integer, nullable=False, default=0)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    user = db.relationship('User', back_populates='vocabulary')
    synonyms = db.relationship(
        'Synonym',
        back_populates='vocabulary_item',
        order_by='Synonym.id',
        cascade='all, delete-orphan'
    )
    incorrect_attempts = db.relationship(
        'IncorrectAttempt',
        back_populates='vocabulary_item',
        cascade='all, delete-orphan'
    )

    __table_args__ = (
        db.UniqueConstraint('user_id', 'word', 'language', name='uq_user_word_language'),
    )

    @validates('word', 'translation')
    def validate_text(self, key, value):
        if not isinstance(value, str) or not value.strip():
            raise ValueError(f'{key.capitalize()} cannot be empty or whitespace')
        return value.strip()

    @property
    def synonym_texts(self):
        return [s.synonym for s in self.synonyms]

    def to_dict(self):
        return {
            'id': self.id,
            'word': self.word,
            'translation': self.translation,
            'language': self.language,
            'translation_language': self.translation_language,
            'learned': bool(self.learned),
            'mastered': bool(self.mastered),
            'correct_attempts': self.correct_attempts or 0,
            'wrong_attempts': self.wrong_attempts or 0,
            'user_id': self.user_id,
            'synonyms': self.synonym_texts,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f'<VocabularyItem {self.word} ({self.language})>'
