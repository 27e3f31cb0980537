from __future__ import annotations

from functools import wraps

from flask_jwt_extended import get_jwt, get_jwt_identity, jwt_required

from ..core.enums import Role
from ..core.exceptions import AuthorizationError
from ..users.model import Principal


def current_principal() -> Principal:
    """Principal of the verified token for the current request."""
    return Principal(user_id=int(get_jwt_identity()), role=Role(get_jwt()["role"]))


def role_required(*allowed_roles: Role):
    """
    Require a valid access token and, when roles are given, one of them.
    Usage: @role_required(Role.ADMIN) or @role_required() for any signed-in user.
    """
    allowed = {Role(r).value for r in allowed_roles}

    def decorator(view):
        @wraps(view)
        @jwt_required()
        def wrapper(*args, **kwargs):
            role = get_jwt().get("role")
            if allowed and role not in allowed:
                raise AuthorizationError("Access forbidden: insufficient permissions")
            return view(*args, **kwargs)

        return wrapper

    return decorator
