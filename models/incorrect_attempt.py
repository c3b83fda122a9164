from models import db
from datetime import datetime


class IncorrectAttempt(db.Model):
    """IncorrectAttempt model - a wrong practice answer kept for later review"""
    __tablename__ = 'incorrect_attempts'

    id = db.Column(db.Integer, primary_key=True)

    vocabulary_id = db.Column(
        db.Integer,
        db.ForeignKey('vocabulary.id', ondelete='CASCADE'),
        nullable=False,
        index=True
    )
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)

    incorrect_answer = db.Column(db.String, nullable=False)
    expected_answer = db.Column(db.String, nullable=False)

    # word-translation, translation-word
    practice_mode = db.Column(db.String(20), nullable=False, default='word-translation')

    attempted_at = db.Column(db.DateTime, default=datetime.utcnow)

    # Relationships
    user = db.relationship('User', back_populates='incorrect_attempts')
    vocabulary_item = db.relationship('VocabularyItem', back_populates='incorrect_attempts')

    __table_args__ = (
        db.Index('idx_incorrect_attempts_user_vocabulary', 'user_id', 'vocabulary_id'),
    )

    def to_dict(self):
        return {
            'id': self.id,
            'vocabulary_id': self.vocabulary_id,
            'user_id': self.user_id,
            'incorrect_answer': self.incorrect_answer,
            'expected_answer': self.expected_answer,
            'practice_mode': self.practice_mode,
            'attempted_at': self.attempted_at.isoformat() if self.attempted_at else None,
        }

    def __repr__(self):
        return f'<IncorrectAttempt vocabulary_id={self.vocabulary_id} answer={self.incorrect_answer}>'
