import logging
from flask import request
from sqlalchemy.exc import SQLAlchemyError
from bevbook.extensions import db
from bevbook.services.drink_service import drink_totals
from bevbook.utils.http import ok, error

logger = logging.getLogger(__name__)

def get_stats_handler():
    try:
        totals = drink_totals(request.user_id)
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception("computing stats for user %s failed", request.user_id)
        return error("UNKNOWN_ERROR", str(e), 500)
    return ok(totals)
