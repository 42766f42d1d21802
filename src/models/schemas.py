from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class DetectRequest(BaseModel):
    text: str = Field(..., description="Raw AI response text")
    use_ner: Optional[bool] = Field(
        default=None, description="Override the NER fallback setting for this call"
    )
    max_results: Optional[int] = Field(
        default=None, ge=0, le=200, description="Maximum competitors to return"
    )


class BrandMatchResponse(BaseModel):
    name: str
    normalized_name: str
    mention_count: int
    first_position_ratio: float
    source: str

    model_config = {"from_attributes": True}


class DetectionMetadataResponse(BaseModel):
    gazetteer_matches: int
    ner_matches: int
    global_matches: int
    total_candidates: int
    processing_time_ms: int


class DetectionResultResponse(BaseModel):
    competitors: List[BrandMatchResponse]
    own_brand_mentions: List[BrandMatchResponse]
    rejected_terms: List[str]
    metadata: DetectionMetadataResponse


class ResponseSyncResult(BaseModel):
    response_id: str
    org_id: str
    competitors: List[str]
    brands: List[str]
    metadata: DetectionMetadataResponse


class GazetteerInvalidateResponse(BaseModel):
    org_id: str
    invalidated: bool


class CompetitorExclusionCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, description="Name never to report as a competitor")


class CompetitorExclusionResponse(BaseModel):
    id: str
    org_id: str
    name: str
    normalized_name: str
    created_at: datetime

    model_config = {"from_attributes": True}
