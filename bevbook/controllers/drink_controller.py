"""
Drink Controller Module

Handles the drink log endpoints:
- Recent drinks list (newest first, capped)
- Adding a drink
- Deleting a drink by id, or by name for older clients
- Drink type enumeration for pickers
"""

import logging
from flask import request, current_app
from sqlalchemy.exc import SQLAlchemyError

from bevbook.extensions import db
from bevbook.schemas.drink_schema import CreateDrinkSchema
from bevbook.services import drink_service
from bevbook.utils.http import ok, error, json_body, validate_schema, arg_int, arg_str

logger = logging.getLogger(__name__)


def list_drinks_handler():
    """
    List the current user's most recent drinks.

    Query Parameters:
        - limit: Maximum number of drinks to return (default and maximum: RECENT_DRINKS_LIMIT)
    """
    # Config may lower the cap, never raise it
    max_limit = min(current_app.config.get("RECENT_DRINKS_LIMIT", drink_service.RECENT_LIMIT), drink_service.RECENT_LIMIT)
    limit = arg_int("limit", max_limit, min_value=1, max_value=max_limit)
    try:
        drinks = drink_service.list_recent_drinks(request.user_id, limit, max_limit)
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception("fetching drinks for user %s failed", request.user_id)
        return error("UNKNOWN_ERROR", str(e), 500)
    return ok({"items": [drink_service.serialize_drink(d) for d in drinks]})


def create_drink_handler():
    data, errors = validate_schema(CreateDrinkSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid drink data", 400, details=errors)
    try:
        drink = drink_service.create_drink(request.user_id, data["name"], data["type"], data["amount"])
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception("adding drink for user %s failed", request.user_id)
        return error("UNKNOWN_ERROR", str(e), 500)
    return ok(drink_service.serialize_drink(drink), 201)


def delete_drink_handler(drink_id: int):
    try:
        deleted = drink_service.delete_drink(request.user_id, drink_id)
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception("deleting drink %s for user %s failed", drink_id, request.user_id)
        return error("UNKNOWN_ERROR", str(e), 500)
    if not deleted:
        return error("DRINK_NOT_FOUND", "drink not found", 404)
    return ok({"deleted": drink_id})


def delete_drink_by_name_handler():
    name = (arg_str("name") or "").strip()
    if not name:
        return error("VALIDATION_ERROR", "name query parameter required", 400)
    try:
        drink_id = drink_service.delete_drink_by_name(request.user_id, name)
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception("deleting drink %r for user %s failed", name, request.user_id)
        return error("UNKNOWN_ERROR", str(e), 500)
    if drink_id is None:
        return error("DRINK_NOT_FOUND", "drink not found", 404)
    return ok({"deleted": drink_id})


def drink_types_handler():
    return ok({"items": drink_service.drink_types()})
