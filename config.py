from dotenv import load_dotenv
import os

load_dotenv()

class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-change-me")
    SQLALCHEMY_DATABASE_URI = os.getenv("SQLALCHEMY_DATABASE_URI", "sqlite:///bevbook.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Hosted databases drop idle connections
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
        'pool_recycle': 300,
    }

    TOKEN_TTL_HOURS = int(os.getenv("TOKEN_TTL_HOURS", "12"))
    RECENT_DRINKS_LIMIT = int(os.getenv("RECENT_DRINKS_LIMIT", "10"))
    CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",") if o.strip()]
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
