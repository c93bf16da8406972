"""Flask app factory for the web app."""

from __future__ import annotations

import logging
from functools import partial
from pathlib import Path
from typing import Optional

from flask import Flask
from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from ..analysis.pipeline import AnalysisPipeline, Generator
from ..config.settings import Settings, get_settings
from ..llm import generate_image_analysis
from ..session.store import SessionStore
from ..utils.logging import setup_logging
from .routes import register_routes

logger = logging.getLogger("skincare.api")


def create_app(
    settings: Optional[Settings] = None,
    *,
    generate: Optional[Generator] = None,
) -> Flask:
    settings = settings or get_settings()
    setup_logging(settings.log_file, level=settings.log_level, stdout=settings.log_stdout)

    app = Flask(
        __name__,
        template_folder=str(Path(__file__).parent / "templates"),
        static_folder=str(Path(__file__).parent / "static"),
    )
    app.secret_key = settings.secret_key
    # Leave headroom over the image limit for the multipart envelope.
    app.config["MAX_CONTENT_LENGTH"] = settings.max_image_bytes + 64 * 1024

    CORS(app, supports_credentials=True, origins=settings.cors_origin_list)
    Limiter(
        get_remote_address,
        app=app,
        default_limits=[settings.rate_limit],
        storage_uri="memory://",
    )

    if generate is None:
        generate = partial(generate_image_analysis, settings=settings)
    store = SessionStore(idle_timeout=settings.session_idle_seconds)
    pipeline = AnalysisPipeline(generate)

    register_routes(app, store=store, pipeline=pipeline, settings=settings)
    app.extensions["skincare.sessions"] = store
    logger.info("App created model=%s", settings.anthropic_model)
    return app
