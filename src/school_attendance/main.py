from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from flask_cors import CORS
from flask_jwt_extended import JWTManager

from .config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.error_handlers import add_error_handlers
from .container import Container, build_container
from .database.bootstrap import apply_schema, ensure_demo_users, list_tables
from .students.controller import register as register_students
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[2] / "database" / "schema.sql"


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def _configure_jwt(app: Flask, container: Container) -> JWTManager:
    jwt = JWTManager(app)

    @jwt.token_in_blocklist_loader
    def check_if_token_revoked(jwt_header, jwt_payload):
        return container.auth_service.is_token_revoked(jwt_payload["jti"])

    @jwt.unauthorized_loader
    def missing_token(reason):
        return jsonify({"error": "Unauthenticated"}), 401

    @jwt.invalid_token_loader
    def invalid_token(reason):
        return jsonify({"error": "Invalid token"}), 401

    @jwt.expired_token_loader
    def expired_token(jwt_header, jwt_payload):
        return jsonify({"error": "Token has expired"}), 401

    @jwt.revoked_token_loader
    def revoked_token(jwt_header, jwt_payload):
        return jsonify({"error": "Token has been revoked"}), 401

    return jwt


def create_app(*, container: Optional[Container] = None, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    db_config = getattr(settings, "DB_CONFIG")

    _configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["JWT_SECRET_KEY"] = getattr(settings, "JWT_SECRET_KEY")
    app.config["JWT_ACCESS_TOKEN_EXPIRES"] = getattr(settings, "JWT_ACCESS_TOKEN_EXPIRES")
    app.config["JWT_TOKEN_LOCATION"] = ["headers"]

    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if container is None:
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=SCHEMA_PATH)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            ensure_demo_users(db_config)
        container = build_container(db_config=db_config)

    CORS(app, origins=getattr(settings, "CORS_ORIGINS", []), supports_credentials=True)
    _configure_jwt(app, container)
    add_error_handlers(app)

    register_users(app, container)
    register_students(app, container)
    register_attendance(app, container)

    @app.route("/health", endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    return app
