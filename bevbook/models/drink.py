from bevbook.extensions import db
from datetime import datetime

class Drink(db.Model):
    __tablename__ = "drinks"
    __table_args__ = (
        db.Index("ix_drinks_user_timestamp", "user_id", "timestamp"),
    )

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    name = db.Column(db.String(120), nullable=False)
    type = db.Column(db.String(32), nullable=False, default="Beer")
    amount = db.Column(db.Float, nullable=False, default=0)
    timestamp = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
