from datetime import datetime, timedelta
from bevbook import create_app
from bevbook.extensions import db
from bevbook.models.user import User
from bevbook.models.drink import Drink
from bevbook.utils.auth import hash_password

app = create_app()

with app.app_context():
    # ensure tables exist (non-destructive: won't alter existing columns)
    db.create_all()

    user = User.query.filter_by(email="user@example.com").first()
    if not user:
        user = User(name="User Demo", email="user@example.com", password=hash_password("secret"))
        db.session.add(user)
        db.session.flush()
        print("Created demo user user@example.com / secret")
    else:
        print("Demo user already exists")

    if not Drink.query.filter_by(user_id=user.id).first():
        now = datetime.utcnow()
        samples = [
            ("Hazy IPA", "Beer", 16),
            ("Pinot Noir", "Wine", 5),
            ("Old Fashioned", "Whiskey", 2),
            ("Margarita", "Tequila", 4),
            ("Sparkling Water", "Non-Alc", 12),
        ]
        for hours_ago, (name, drink_type, amount) in enumerate(samples):
            db.session.add(Drink(
                user_id=user.id, name=name, type=drink_type, amount=amount,
                timestamp=now - timedelta(hours=hours_ago * 6),
            ))
        print(f"Seeded {len(samples)} drinks")

    db.session.commit()
