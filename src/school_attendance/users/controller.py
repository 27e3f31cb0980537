from __future__ import annotations

from flask import Flask, jsonify, request
from flask_jwt_extended import create_access_token, get_jti

from ..common.decorators import current_principal, role_required
from ..core.enums import Role
from ..container import Container
from .model import User


def user_json(user: User) -> dict:
    return {
        "id": user.user_id,
        "name": user.name,
        "email": user.email,
        "role": user.role.value,
        "created_at": user.created_at.isoformat() if user.created_at else None,
        "updated_at": user.updated_at.isoformat() if user.updated_at else None,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        user = container.auth_service.authenticate(data.get("email"), data.get("password"))

        token = create_access_token(
            identity=str(user.user_id),
            additional_claims={"role": user.role.value},
        )
        container.auth_service.remember_token(jti=get_jti(token), user_id=user.user_id)
        return jsonify({"token": token, "user": user_json(user)})

    @app.route("/logout", methods=["POST"], endpoint="logout")
    @role_required()
    def logout():
        container.auth_service.logout(current_principal())
        return jsonify({"message": "Logged out"})

    @app.route("/register-teacher", methods=["POST"], endpoint="register_teacher")
    @role_required(Role.ADMIN)
    def register_teacher():
        teacher = container.user_service.register_teacher(request.get_json(silent=True) or {})
        return jsonify({"message": "Teacher registered successfully", "teacher": user_json(teacher)}), 201

    @app.route("/teachers", methods=["GET"], endpoint="list_teachers")
    @role_required(Role.ADMIN)
    def list_teachers():
        return jsonify([user_json(u) for u in container.user_service.list_teachers()])
