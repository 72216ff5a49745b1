import datetime as dt
from functools import wraps
from typing import Optional
from flask import request, current_app
import jwt
from werkzeug.security import check_password_hash, generate_password_hash
from bevbook.utils.http import error

ALGORITHM = "HS256"


def hash_password(plain: str) -> str:
    return generate_password_hash(plain)


def create_token(user_id: int, now: Optional[dt.datetime] = None) -> str:
    """Signed session token for ``user_id``; lifetime is TOKEN_TTL_HOURS."""
    issued = now or dt.datetime.now(dt.timezone.utc)
    expires = issued + dt.timedelta(hours=current_app.config.get("TOKEN_TTL_HOURS", 12))
    claims = {"sub": str(user_id), "iat": int(issued.timestamp()), "exp": int(expires.timestamp())}
    return jwt.encode(claims, current_app.config["SECRET_KEY"], algorithm=ALGORITHM)


def decode_token(token: str):
    return jwt.decode(token, current_app.config["SECRET_KEY"], algorithms=[ALGORITHM])


def bearer_token() -> Optional[str]:
    scheme, _, token = request.headers.get("Authorization", "").partition(" ")
    if scheme != "Bearer" or not token:
        return None
    return token


def require_auth(f):
    """Reject the request with 401 unless it carries a valid token; sets ``request.user_id``."""
    @wraps(f)
    def wrapper(*args, **kwargs):
        token = bearer_token()
        if token is None:
            return error("UNAUTHORIZED", "Missing Bearer token", 401)
        try:
            request.user_id = int(decode_token(token)["sub"])  # type: ignore
        except jwt.ExpiredSignatureError:
            return error("UNAUTHORIZED", "Token expired", 401)
        except (jwt.PyJWTError, KeyError, ValueError):
            return error("UNAUTHORIZED", "Invalid token", 401)
        return f(*args, **kwargs)
    return wrapper

__all__ = ["hash_password", "create_token", "decode_token", "bearer_token", "require_auth", "check_password_hash"]
