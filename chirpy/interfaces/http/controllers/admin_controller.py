# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response

from chirpy.application.services.visit_counter import VisitCounter
from chirpy.application.use_cases.admin.reset import ResetUseCase

_METRICS_TEMPLATE = """<!DOCTYPE html>
<html>
  <body>
    <h1>Welcome, Chirpy Admin</h1>
    <p>Chirpy has been visited {hits} times!</p>
  </body>
</html>"""


class AdminController:
    def __init__(self, *, reset: ResetUseCase, visits: VisitCounter) -> None:
        self._reset = reset
        self._visits = visits

    def metrics(self) -> Response:
        body = _METRICS_TEMPLATE.format(hits=self._visits.value)
        return Response(body, status=HTTPStatus.OK, mimetype="text/html")

    def reset(self) -> Response:
        self._reset.execute()
        return Response("OK", status=HTTPStatus.OK, mimetype="text/plain")

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("admin", __name__, url_prefix="/admin")
        bp.add_url_rule("/metrics", view_func=self.metrics, methods=["GET"])
        bp.add_url_rule("/reset", view_func=self.reset, methods=["POST"])
        return bp
