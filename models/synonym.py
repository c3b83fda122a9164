from models import db
from datetime import datetime


class Synonym(db.Model):
    """Synonym model - an additional accepted translation of a vocabulary item"""
    __tablename__ = 'synonyms'

    id = db.Column(db.Integer, primary_key=True)

    vocabulary_id = db.Column(
        db.Integer,
        db.ForeignKey('vocabulary.id', ondelete='CASCADE'),
        nullable=False,
        index=True
    )

    synonym = db.Column(db.String, nullable=False)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    # Relationships
    vocabulary_item = db.relationship('VocabularyItem', back_populates='synonyms')

    def __repr__(self):
        return f'<Synonym {self.synonym} vocabulary_id={self.vocabulary_id}>'
