# services/pattern_engine/session.py
# Bridges a completed survey session to the pattern engine: validation gate,
# analysis, insight generation and the fallback path.

import logging
from collections.abc import Mapping
from typing import Any, Optional, Sequence

from pydantic import BaseModel

from .engine import PatternRecognitionEngine
from .insights import Insights, generate_insights
from .models import AnalysisReport

logger = logging.getLogger(__name__)

FALLBACK_MESSAGE = "Analysis unavailable. Your responses are saved."

DEFAULT_KEY_RESPONSES = ("response1", "response4", "response6")


class SessionResult(BaseModel):
    session_id: Optional[str] = None
    analysis: AnalysisReport
    insights: Insights


def validate_session_data(
    session_data: Any,
    min_responses: int = 3,
    key_responses: Sequence[str] = DEFAULT_KEY_RESPONSES,
    min_key_chars: int = 10,
) -> bool:
    """
    Decides whether a session carries enough material to analyze: at least
    `min_responses` non-empty answers and one key answer longer than
    `min_key_chars` once trimmed.
    """
    if not isinstance(session_data, Mapping) or not session_data.get("responses"):
        logger.info("Missing session data or responses")
        return False

    responses = session_data["responses"]
    if not isinstance(responses, Mapping):
        logger.info(f"Responses must be a mapping, got {type(responses).__name__}")
        return False

    answered = [
        slot for slot, text in responses.items()
        if isinstance(text, str) and text.strip()
    ]
    if len(answered) < min_responses:
        logger.info(f"Insufficient responses for analysis: {len(answered)}")
        return False

    has_key_response = any(
        isinstance(responses.get(slot), str) and len(responses[slot].strip()) > min_key_chars
        for slot in key_responses
    )
    if not has_key_response:
        logger.info("Missing substantial responses for key questions")
        return False

    return True


class SessionProcessor:
    """
    Runs value delivery for a finished session. Never raises: any failure is
    logged and reported as None so the caller can show the fallback message.
    """
    def __init__(
        self,
        engine: Optional[PatternRecognitionEngine] = None,
        enabled: bool = True,
        debug: bool = False,
        min_responses: int = 3,
        key_responses: Sequence[str] = DEFAULT_KEY_RESPONSES,
        min_key_chars: int = 10,
    ):
        self.engine = engine or PatternRecognitionEngine()
        self.enabled = enabled
        self.debug = debug
        self.min_responses = min_responses
        self.key_responses = tuple(key_responses)
        self.min_key_chars = min_key_chars

    def _log(self, message: str) -> None:
        if self.debug:
            logger.info(message)
        else:
            logger.debug(message)

    def is_valid(self, session_data: Any) -> bool:
        return validate_session_data(
            session_data,
            min_responses=self.min_responses,
            key_responses=self.key_responses,
            min_key_chars=self.min_key_chars,
        )

    def process_session(self, session_data: Any) -> Optional[SessionResult]:
        if not self.enabled:
            self._log("Value delivery disabled, skipping analysis")
            return None

        session_id = session_data.get("session_id") if isinstance(session_data, Mapping) else None
        try:
            self._log(f"Starting value delivery processing for session {session_id}")
            if not self.is_valid(session_data):
                raise ValueError("Invalid session data provided")

            analysis = self.engine.analyze_responses(session_data["responses"])
            insights = generate_insights(analysis)
        except Exception as e:
            logger.error(f"Value delivery failed for session {session_id}: {e}", exc_info=True)
            return None

        self._log(
            f"Value delivery completed for session {session_id}: "
            f"user_type={analysis.user_type.value}, "
            f"authenticity={round(analysis.authenticity_score * 100)}%"
        )
        return SessionResult(session_id=session_id, analysis=analysis, insights=insights)
