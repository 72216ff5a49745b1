from bevbook.extensions import db
from datetime import datetime

class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    drinks = db.relationship("Drink", backref="user", lazy="dynamic", cascade="all, delete-orphan")

    def to_profile(self):
        return {"id": self.id, "name": self.name, "email": self.email}
