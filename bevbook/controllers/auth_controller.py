import logging
from flask import request
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from bevbook.extensions import db
from bevbook.models.user import User
from bevbook.schemas.auth_schema import RegisterSchema, LoginSchema
from bevbook.utils.auth import create_token, check_password_hash, hash_password
from bevbook.utils.http import ok, error, json_body, validate_schema

logger = logging.getLogger(__name__)


def login_handler():
    data, errors = validate_schema(LoginSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "email and password required", 400, details=errors)

    email = data["email"].lower()
    user = User.query.filter_by(email=email).first()
    if not user or not check_password_hash(user.password, data["password"]):
        logger.warning("rejected sign-in for %s", email)
        return error("INVALID_CREDENTIALS", "Email or password incorrect", 401)

    return ok({
        "token": create_token(user.id),
        "user": user.to_profile(),
    })

def register_handler():
    data, errors = validate_schema(RegisterSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Please fill in all fields", 400, details=errors)

    email = data["email"].lower()
    if User.query.filter_by(email=email).first():
        return error("EMAIL_IN_USE", "email already registered", 409)
    try:
        user = User(name=data["name"], email=email, password=hash_password(data["password"]))
        db.session.add(user)
        db.session.commit()
    except IntegrityError:
        # lost a race with a concurrent sign-up for the same email
        db.session.rollback()
        return error("EMAIL_IN_USE", "email already registered", 409)
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception("creating account for %s failed", email)
        return error("UNKNOWN_ERROR", str(e), 500)

    logger.info("created account %s for %s", user.id, email)
    return ok({
        "token": create_token(user.id),
        "user": user.to_profile(),
    }, 201)

def logout_handler():
    """
    Handle logout request.
    Tokens are stateless, so the client signs out by discarding its token.
    This endpoint only confirms the action.
    """
    return ok({"message": "Logged out successfully"})

def me_handler():
    user = db.session.get(User, request.user_id)
    if not user:
        return error("USER_NOT_FOUND", "account no longer exists", 404)
    return ok({"user": user.to_profile()})
