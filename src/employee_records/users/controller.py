from __future__ import annotations

from flask import Blueprint, Flask, jsonify, request

from ..common.http import json_body, json_errors
from ..container import Container
from .service import bearer_token


def register(app: Flask, container: Container) -> None:
    bp = Blueprint("auth", __name__, url_prefix=f"{app.config['API_PREFIX']}/auth")

    @bp.route("/login", methods=["POST"], endpoint="login")
    @json_errors
    def login():
        data = json_body()
        token = container.auth_service.login(str(data.get("username") or ""), str(data.get("password") or ""))
        return jsonify({"token": token, "message": "Login successful"})

    @bp.route("/logout", methods=["POST"], endpoint="logout")
    @json_errors
    def logout():
        container.auth_service.logout(bearer_token(request.headers.get("Authorization")))
        return jsonify({"message": "Logout successful"})

    app.register_blueprint(bp)
