from fastapi import APIRouter, HTTPException, Depends
import logging

from src.core.config import settings
from src.schemas.analysis import AnalysisRequest, AnalysisResponse
from services.pattern_engine.engine import PatternRecognitionEngine
from services.pattern_engine.session import FALLBACK_MESSAGE, SessionProcessor

router = APIRouter()
logger = logging.getLogger(__name__)

_engine = None

def get_pattern_engine() -> PatternRecognitionEngine:
    # The engine only holds a frozen taxonomy, so one instance is shared.
    global _engine
    if _engine is None:
        _engine = PatternRecognitionEngine(taxonomy_path=settings.taxonomy_path)
    return _engine

def get_session_processor(engine: PatternRecognitionEngine = Depends(get_pattern_engine)) -> SessionProcessor:
    return SessionProcessor(
        engine=engine,
        enabled=settings.enabled,
        debug=settings.debug,
        min_responses=settings.min_responses,
        key_responses=settings.key_response_slots,
        min_key_chars=settings.min_key_response_chars,
    )

@router.post("/analysis/analyze", response_model=AnalysisResponse)
def analyze_session(
    request: AnalysisRequest,
    processor: SessionProcessor = Depends(get_session_processor),
):
    """
    Runs pattern recognition over a completed session's responses and
    returns the analysis report together with its insights.
    """
    session_data = request.model_dump()

    if not processor.enabled:
        logger.info("Value delivery disabled; returning fallback.")
        raise HTTPException(status_code=503, detail=FALLBACK_MESSAGE)

    if not processor.is_valid(session_data):
        logger.warning(f"Session {request.session_id} rejected by validation gate")
        raise HTTPException(
            status_code=422,
            detail="Not enough response material to analyze this session.",
        )

    result = processor.process_session(session_data)
    if result is None:
        raise HTTPException(status_code=503, detail=FALLBACK_MESSAGE)

    logger.info(f"Session {request.session_id} analyzed as {result.analysis.user_type.value}")
    return AnalysisResponse(
        session_id=result.session_id,
        analysis=result.analysis,
        insights=result.insights,
    )

