from .home_routes import home_bp
from .auth_routes import auth_bp
from .drink_routes import drink_bp
from .stats_routes import stats_bp

def register_routes(app):
    app.register_blueprint(home_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(drink_bp)
    app.register_blueprint(stats_bp)
