"""API router for competitor detection."""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from models import CompetitorExclusion, Organization, PromptProviderResponse, get_db
from models.schemas import (
    CompetitorExclusionCreate,
    CompetitorExclusionResponse,
    DetectionResultResponse,
    DetectRequest,
    GazetteerInvalidateResponse,
    ResponseSyncResult,
)
from services.competitor_detection import CompetitorDetector, SQLOrganizationContextSource
from services.competitor_detection.orchestrator import get_detector
from services.competitor_detection.text_utils import normalize_brand_name

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/{org_id}/detect", response_model=DetectionResultResponse)
async def detect(
    org_id: str,
    request: DetectRequest,
    db: Session = Depends(get_db),
    detector: CompetitorDetector = Depends(get_detector),
) -> dict:
    """
    Detect competitors and own-brand mentions in a piece of text.

    Args:
        org_id: Organization whose gazetteer is used
        request: Text and optional NER / result-size overrides
        db: Database session
        detector: Shared competitor detector

    Returns:
        Classification result with competitors, own-brand mentions and rejected terms
    """
    result = await detector.detect(
        request.text,
        org_id,
        SQLOrganizationContextSource.for_session(db),
        use_ner=request.use_ner,
        max_results=request.max_results,
    )
    return result.to_dict()


@router.post("/{org_id}/responses/{response_id}/sync", response_model=ResponseSyncResult)
async def sync_response(
    org_id: str,
    response_id: str,
    db: Session = Depends(get_db),
    detector: CompetitorDetector = Depends(get_detector),
) -> ResponseSyncResult:
    """
    Re-run detection over a stored AI response and persist the result.

    Args:
        org_id: Organization that owns the response
        response_id: Stored response to re-classify
        db: Database session
        detector: Shared competitor detector

    Returns:
        Competitor and own-brand names written to the response

    Raises:
        HTTPException: If the response does not exist for this organization
    """
    response = (
        db.query(PromptProviderResponse)
        .filter(PromptProviderResponse.id == response_id, PromptProviderResponse.org_id == org_id)
        .first()
    )
    if not response:
        raise HTTPException(status_code=404, detail=f"Response {response_id} not found")

    result = await detector.detect(
        response.raw_ai_response or "",
        org_id,
        SQLOrganizationContextSource.for_session(db),
    )
    response.competitors_json = result.competitor_names()
    response.brands_json = result.own_brand_names()
    db.commit()
    logger.info(
        f"Synced response {response_id}: {len(response.competitors_json)} competitors, "
        f"{len(response.brands_json)} own-brand mentions"
    )

    return ResponseSyncResult(
        response_id=response_id,
        org_id=org_id,
        competitors=response.competitors_json,
        brands=response.brands_json,
        metadata=result.to_dict()["metadata"],
    )


@router.delete("/{org_id}/gazetteer", response_model=GazetteerInvalidateResponse)
async def invalidate_gazetteer(
    org_id: str,
    detector: CompetitorDetector = Depends(get_detector),
) -> GazetteerInvalidateResponse:
    """
    Drop the cached gazetteer so the next detection reloads it.

    Args:
        org_id: Organization whose gazetteer should be rebuilt
        detector: Shared competitor detector

    Returns:
        Whether a cached gazetteer was dropped
    """
    invalidated = detector.cache.invalidate(org_id)
    return GazetteerInvalidateResponse(org_id=org_id, invalidated=invalidated)


@router.get("/{org_id}/exclusions", response_model=List[CompetitorExclusionResponse])
async def list_exclusions(org_id: str, db: Session = Depends(get_db)) -> List[CompetitorExclusion]:
    return (
        db.query(CompetitorExclusion)
        .filter(CompetitorExclusion.org_id == org_id)
        .order_by(CompetitorExclusion.created_at)
        .all()
    )


@router.post(
    "/{org_id}/exclusions",
    response_model=CompetitorExclusionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_exclusion(
    org_id: str,
    request: CompetitorExclusionCreate,
    db: Session = Depends(get_db),
    detector: CompetitorDetector = Depends(get_detector),
) -> CompetitorExclusion:
    """
    Record a name that must never be reported as a competitor for this organization.

    Adding a name that is already excluded returns the existing exclusion.

    Args:
        org_id: Organization recording the exclusion
        request: Name to exclude
        db: Database session
        detector: Shared competitor detector, whose cached gazetteer is dropped

    Returns:
        The stored exclusion

    Raises:
        HTTPException: If the organization does not exist or the name is empty once normalized
    """
    if not db.query(Organization).filter(Organization.id == org_id).first():
        raise HTTPException(status_code=404, detail=f"Organization {org_id} not found")

    normalized = normalize_brand_name(request.name)
    if not normalized:
        raise HTTPException(status_code=400, detail="Exclusion name must contain letters or digits")

    existing = (
        db.query(CompetitorExclusion)
        .filter(CompetitorExclusion.org_id == org_id, CompetitorExclusion.normalized_name == normalized)
        .first()
    )
    if existing:
        return existing

    exclusion = CompetitorExclusion(org_id=org_id, name=request.name.strip(), normalized_name=normalized)
    db.add(exclusion)
    db.commit()
    db.refresh(exclusion)
    detector.cache.invalidate(org_id)
    logger.info(f"Excluded {exclusion.name!r} as a competitor for org {org_id}")
    return exclusion


@router.delete("/{org_id}/exclusions/{exclusion_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_exclusion(
    org_id: str,
    exclusion_id: str,
    db: Session = Depends(get_db),
    detector: CompetitorDetector = Depends(get_detector),
) -> None:
    exclusion = (
        db.query(CompetitorExclusion)
        .filter(CompetitorExclusion.id == exclusion_id, CompetitorExclusion.org_id == org_id)
        .first()
    )
    if not exclusion:
        raise HTTPException(status_code=404, detail=f"Exclusion {exclusion_id} not found")

    db.delete(exclusion)
    db.commit()
    detector.cache.invalidate(org_id)
    logger.info(f"Removed competitor exclusion {exclusion_id} for org {org_id}")
