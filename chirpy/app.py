# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask, Response
from flask_cors import CORS

from chirpy.infrastructure.container import Container
from chirpy.infrastructure.container import container as default_container
from chirpy.shared.config import load_config
from chirpy.shared.logging import logger, setup_logging
from chirpy.shared.middleware.error_handler import configure_error_handling
from chirpy.shared.middleware.request_logger import configure_request_logging


def create_app(container: Container | None = None) -> Flask:
    config = load_config()
    setup_logging("DEBUG" if config.debug_logging else None)

    container = container or default_container

    from chirpy.infrastructure.db import init_db

    init_db(container.engine)

    app = Flask(__name__)
    configure_error_handling(app)
    configure_request_logging(app)

    CORS(app, resources={r"/api/*": {"origins": config.security.allowed_origins}})

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.front_controller.as_blueprint())
    app.register_blueprint(container.users_controller.as_blueprint())
    app.register_blueprint(container.chirps_controller.as_blueprint())
    app.register_blueprint(container.admin_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp: Response) -> Response:
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains",
            )
        return resp

    logger.info(f"Flask app initialized env={config.app_env}")
    return app
