from flask import Blueprint
from bevbook.utils.auth import require_auth
from bevbook.controllers.stats_controller import get_stats_handler

stats_bp = Blueprint("stats", __name__, url_prefix="/api/stats")

@stats_bp.get("")
@require_auth
def get_stats():
    return get_stats_handler()
