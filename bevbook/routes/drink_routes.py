from flask import Blueprint
from bevbook.utils.auth import require_auth
from bevbook.controllers.drink_controller import (
    list_drinks_handler,
    create_drink_handler,
    delete_drink_handler,
    delete_drink_by_name_handler,
    drink_types_handler,
)

drink_bp = Blueprint("drinks", __name__, url_prefix="/api/drinks")

@drink_bp.get("")
@require_auth
def list_drinks():
    return list_drinks_handler()


@drink_bp.post("")
@require_auth
def create_drink():
    return create_drink_handler()


@drink_bp.delete("/<int:drink_id>")
@require_auth
def delete_drink(drink_id):
    return delete_drink_handler(drink_id)


# Name-matched delete kept for clients without record ids
@drink_bp.delete("")
@require_auth
def delete_drink_by_name():
    return delete_drink_by_name_handler()


@drink_bp.get("/types")
def drink_types():
    return drink_types_handler()
