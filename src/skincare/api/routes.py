"""HTTP routes for the web app."""

from __future__ import annotations

import logging
from typing import Any, Optional

from flask import (
    Flask,
    abort,
    flash,
    jsonify,
    make_response,
    redirect,
    render_template,
    request,
    url_for,
)
from werkzeug.exceptions import RequestEntityTooLarge

from ..analysis.pipeline import AnalysisPipeline
from ..config.settings import Settings
from ..core.exceptions import AnalysisInProgressError, InvalidInputError
from ..core.models import AnalysisFailure, AnalysisStatus, AnalysisSuccess
from ..session.state import SessionState
from ..session.store import SessionStore
from ..utils.uploads import select_image
from .common import current_session_id, forget_session_id, remember_session_id, utc_now

logger = logging.getLogger("skincare.api")


def register_routes(
    app: Flask,
    *,
    store: SessionStore,
    pipeline: AnalysisPipeline,
    settings: Settings,
) -> None:
    @app.before_request
    def log_request() -> None:
        logger.info(
            "HTTP %s %s from %s",
            request.method,
            request.path,
            request.remote_addr,
        )

    def current_state() -> SessionState:
        state = store.get_or_create(current_session_id())
        remember_session_id(state.session_id)
        return state

    def preview_url(state: SessionState) -> Optional[str]:
        if not state.preview_token:
            return None
        return url_for("preview", token=state.preview_token)

    def back_to_index() -> Any:
        return redirect(url_for("index"), code=303)

    @app.get("/")
    def index() -> Any:
        state = current_state()
        failure = state.outcome if isinstance(state.outcome, AnalysisFailure) else None
        has_results = isinstance(state.outcome, AnalysisSuccess) and bool(state.outcome.text)
        return render_template(
            "index.html",
            state=state,
            pending=state.status is AnalysisStatus.PENDING,
            preview_url=preview_url(state),
            lines=state.display_lines if has_results else [],
            failure=failure,
        )

    @app.post("/image")
    def upload_image() -> Any:
        state = current_state()
        try:
            image = select_image(request.files.get("image"), max_bytes=settings.max_image_bytes)
        except InvalidInputError as exc:
            logger.info("Upload rejected for %s: %s", state.session_id, exc)
            flash(exc.message, "error")
            return back_to_index()
        state.select_image(image, store.previews)
        return back_to_index()

    @app.post("/analyze")
    def analyze() -> Any:
        state = current_state()
        try:
            pipeline.analyze(state, request.form.get("extra", ""))
        except AnalysisInProgressError as exc:
            flash(exc.message, "error")
        return back_to_index()

    @app.post("/reset")
    def reset() -> Any:
        session_id = current_session_id()
        if session_id:
            store.end(session_id)
        forget_session_id()
        return back_to_index()

    @app.get("/preview/<token>")
    def preview(token: str) -> Any:
        image = store.previews.resolve(token)
        if image is None:
            abort(404)
        response = make_response(image.data)
        response.headers["Content-Type"] = image.media_type
        response.headers["Cache-Control"] = "no-store"
        return response

    @app.get("/api/state")
    def api_state() -> Any:
        state = current_state()
        return jsonify(state.to_dict(preview_url=preview_url(state)))

    @app.post("/api/analyze")
    def api_analyze() -> Any:
        state = current_state()
        payload = request.get_json(force=True, silent=True)
        if not isinstance(payload, dict):
            payload = {}
        extra = payload.get("extra", "")
        if not isinstance(extra, str):
            return jsonify({"error": "extra must be a string."}), 400
        try:
            pipeline.analyze(state, extra)
        except AnalysisInProgressError as exc:
            return jsonify({"error": exc.message}), 409
        return jsonify(state.to_dict(preview_url=preview_url(state)))

    @app.get("/health")
    def health() -> Any:
        return jsonify({"status": "ok", "time": utc_now()})

    @app.errorhandler(RequestEntityTooLarge)
    def upload_too_large(exc: RequestEntityTooLarge) -> Any:
        flash(f"Image exceeds the {settings.max_image_bytes} byte limit.", "error")
        return back_to_index()
