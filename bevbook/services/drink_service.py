"""
Drink Service

Owner-scoped operations on the drink log: create, recent list, delete and totals.
Every query filters on ``user_id`` so records never cross users.
"""

import logging
from datetime import datetime
from typing import Dict, Any, List, Optional
from sqlalchemy import desc

from bevbook.extensions import db
from bevbook.models.drink import Drink
from bevbook.utils.enums import DrinkType
from bevbook.utils.formatting import time_of_day, day_label, ounces

logger = logging.getLogger(__name__)

RECENT_LIMIT = 10


def serialize_drink(drink: Drink) -> Dict[str, Any]:
    return {
        "id": drink.id,
        "name": drink.name,
        "type": drink.type,
        "amount": float(drink.amount),
        "timestamp": drink.timestamp.isoformat(),
        "time_of_day": time_of_day(drink.timestamp),
        "day": day_label(drink.timestamp),
    }


def create_drink(user_id: int, name: str, drink_type: str, amount: float) -> Drink:
    """
    Log a drink for ``user_id``. The timestamp is always generated here.

    Raises:
        SQLAlchemyError: on write failure; the caller rolls back.
    """
    drink = Drink(
        user_id=user_id,
        name=name,
        type=drink_type,
        amount=float(amount),
        timestamp=datetime.utcnow(),
    )
    db.session.add(drink)
    db.session.commit()
    logger.info("user %s logged drink %s (%s, %.1f oz)", user_id, drink.id, drink_type, drink.amount)
    return drink


def list_recent_drinks(user_id: int, limit: int = RECENT_LIMIT, max_limit: int = RECENT_LIMIT) -> List[Drink]:
    """Newest first, capped at ``max_limit`` and never more than RECENT_LIMIT."""
    limit = max(1, min(limit, max_limit, RECENT_LIMIT))
    return (
        Drink.query
        .filter_by(user_id=user_id)
        .order_by(desc(Drink.timestamp), desc(Drink.id))
        .limit(limit)
        .all()
    )


def get_drink(user_id: int, drink_id: int) -> Optional[Drink]:
    return Drink.query.filter_by(id=drink_id, user_id=user_id).first()


def delete_drink(user_id: int, drink_id: int) -> bool:
    drink = get_drink(user_id, drink_id)
    if not drink:
        return False
    db.session.delete(drink)
    db.session.commit()
    logger.info("user %s deleted drink %s", user_id, drink_id)
    return True


def delete_drink_by_name(user_id: int, name: str) -> Optional[int]:
    """
    Delete a single drink matched by name for this owner.

    Names are not unique, so the most recent match is removed.
    Returns the deleted id, or None when nothing matched.
    """
    drink = (
        Drink.query
        .filter_by(user_id=user_id, name=name)
        .order_by(desc(Drink.timestamp), desc(Drink.id))
        .first()
    )
    if not drink:
        return None
    drink_id = drink.id
    db.session.delete(drink)
    db.session.commit()
    logger.info("user %s deleted drink %s by name %r", user_id, drink_id, name)
    return drink_id


def drink_totals(user_id: int) -> Dict[str, Any]:
    """Sum of ``amount`` over every drink the user owns, plus a per-type breakdown."""
    drinks = Drink.query.filter_by(user_id=user_id).all()

    total = 0.0
    by_type: Dict[str, float] = {}
    for drink in drinks:
        amount = float(drink.amount or 0.0)
        total += amount
        by_type[drink.type] = by_type.get(drink.type, 0.0) + amount

    return {
        "total_amount": total,
        "total_display": ounces(total),
        "count": len(drinks),
        "by_type": by_type,
    }


def drink_types() -> List[str]:
    return [e.value for e in DrinkType]
