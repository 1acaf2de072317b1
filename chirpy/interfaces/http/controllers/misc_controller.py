# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response


class MiscController:
    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/api/healthz", view_func=self.health, methods=["GET"])
        return bp

    def health(self) -> Response:
        return Response("OK", status=HTTPStatus.OK, mimetype="text/plain")
