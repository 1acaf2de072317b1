# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus
from pathlib import Path

from flask import Blueprint, Response, send_from_directory

from chirpy.application.services.visit_counter import VisitCounter
from chirpy.shared.middleware.visit_counter import count_visits


class FrontController:
    """Public front: the welcome page and the static assets, both counted."""

    def __init__(self, *, visits: VisitCounter, assets_dir: Path) -> None:
        self._visits = visits
        self._assets_dir = assets_dir.resolve()

    def welcome(self) -> Response:
        return Response("Welcome to Chirpy", status=HTTPStatus.OK, mimetype="text/plain")

    def asset(self, filename: str) -> Response:
        return send_from_directory(self._assets_dir, filename)

    def as_blueprint(self) -> Blueprint:
        counted = count_visits(self._visits)
        bp = Blueprint("front", __name__)
        bp.add_url_rule("/app", view_func=counted(self.welcome), methods=["GET"])
        bp.add_url_rule(
            "/app/assets/<path:filename>", view_func=counted(self.asset), methods=["GET"]
        )
        return bp
