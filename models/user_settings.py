from models import db
from datetime import datetime
from sqlalchemy.orm import validates

DEFAULT_SELECTED_LANGUAGES = ['english', 'serbian', 'russian', 'spanish']


class UserSettings(db.Model):
    """UserSettings model - per-user language selection and practice UI toggles"""
    __tablename__ = 'user_settings'

    id = db.Column(db.Integer, primary_key=True)

    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, unique=True)

    # Array of language names e.g. ["english", "serbian"]
    selected_languages = db.Column(db.JSON, nullable=False, default=lambda: list(DEFAULT_SELECTED_LANGUAGES))

    skip_button_enabled = db.Column(db.Boolean, nullable=False, default=False)
    help_button_enabled = db.Column(db.Boolean, nullable=False, default=False)
    auto_insert_enabled = db.Column(db.Boolean, nullable=False, default=False)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    user = db.relationship('User', back_populates='settings')

    @validates('selected_languages')
    def validate_selected_languages(self, key, languages):
        if not isinstance(languages, list) or not languages:
            raise ValueError('selected_languages must be a non-empty list')
        for lang in languages:
            if not isinstance(lang, str) or not lang.strip():
                raise ValueError(f'Invalid language: {lang}')
        return languages

    def to_dict(self):
        return {
            'id': self.id,
            'user_id': self.user_id,
            'selected_languages': self.selected_languages,
            'skip_button_enabled': bool(self.skip_button_enabled),
            'help_button_enabled': bool(self.help_button_enabled),
            'auto_insert_enabled': bool(self.auto_insert_enabled),
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f'<UserSettings user_id={self.user_id}>'
