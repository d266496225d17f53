from typing import Dict, Optional
from pydantic import BaseModel

from services.pattern_engine.insights import Insights
from services.pattern_engine.models import AnalysisReport

class AnalysisRequest(BaseModel):
    session_id: Optional[str] = None
    responses: Dict[str, Optional[str]]  # slot id (response1 ... response11) → free text

class AnalysisResponse(BaseModel):
    session_id: Optional[str] = None
    analysis: AnalysisReport
    insights: Insights
