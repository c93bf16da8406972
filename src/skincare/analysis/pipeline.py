"""Analysis request pipeline: prompt, model call, normalization."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Optional

from ..core.exceptions import ConfigurationError, ResponseError, TransportError
from ..core.models import AnalysisFailure, AnalysisOutcome, AnalysisSuccess, SelectedImage
from ..llm import generate_image_analysis
from .normalizer import normalize
from .prompt import build_prompt

if TYPE_CHECKING:
    from ..session.state import SessionState

logger = logging.getLogger(__name__)

Generator = Callable[[str, SelectedImage], str]

ERROR_PREFIX = "Error identifying image: "
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred while identifying the image."


class AnalysisPipeline:
    """Runs one analysis for a session and records the outcome on it."""

    def __init__(self, generate: Optional[Generator] = None) -> None:
        self._generate = generate or generate_image_analysis

    def analyze(self, state: SessionState, extra: str = "") -> Optional[AnalysisOutcome]:
        """Analyse the session's selected image.

        Returns None without calling the model when no image is selected.
        Raises AnalysisInProgressError if the session already has an
        analysis pending.
        """
        image = state.begin_analysis()
        if image is None:
            logger.debug("Analyze ignored for %s: no image selected", state.session_id)
            return None

        prompt = build_prompt(extra)
        outcome: Optional[AnalysisOutcome] = None
        try:
            raw = self._generate(prompt, image)
            outcome = AnalysisSuccess(text=normalize(raw))
        except (ConfigurationError, TransportError, ResponseError) as exc:
            logger.warning("Analysis failed for %s: %s", state.session_id, exc)
            outcome = AnalysisFailure(reason=f"{ERROR_PREFIX}{exc.message}")
        except Exception:
            logger.exception("Unexpected error analysing image for %s", state.session_id)
            outcome = AnalysisFailure(reason=UNKNOWN_ERROR_MESSAGE)
        finally:
            # Interrupted calls must not leave the slot pending.
            if outcome is None:
                outcome = AnalysisFailure(reason=UNKNOWN_ERROR_MESSAGE)
            state.finish_analysis(outcome)
        logger.info(
            "Analysis finished for %s status=%s", state.session_id, state.status.value
        )
        return outcome
