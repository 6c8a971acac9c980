from datetime import datetime
from ..extensions import db


class Entry(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    text = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)
    # Email of the signed-in author
    owner = db.Column(db.String(255), nullable=False, index=True)


class EntryCompetency(db.Model):
    __tablename__ = "entry_competency"
    entry_id = db.Column(db.Integer, db.ForeignKey("entry.id"), primary_key=True)
    competency_id = db.Column(db.Integer, db.ForeignKey("competency.id"), primary_key=True)
