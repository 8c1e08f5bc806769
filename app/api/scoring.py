"""
Scoring API endpoints - record, correct and inspect deliveries
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.errors import NotFoundError
from app.models.match import MatchSummary
from app.engine.scoring_engine import ScoringEngine
from app.api.schemas import (
    DeliveryRequest, DeliveryEditRequest, DeliveryAddedResponse, MessageResponse,
    DeliveryResponse, DeliveryListResponse, MatchSummaryResponse,
)

router = APIRouter(tags=["Scoring"])


def get_engine(db: Session = Depends(get_db)) -> ScoringEngine:
    return ScoringEngine(db)


def _require_match(engine: ScoringEngine) -> MatchSummary:
    match = engine.current_match()
    if match is None:
        raise NotFoundError("Match data not found")
    return match


@router.post("/add", status_code=201, response_model=DeliveryAddedResponse)
def add_ball(request: DeliveryRequest, engine: ScoringEngine = Depends(get_engine)):
    """Record a delivery, starting the match on the first one"""
    delivery = engine.add_delivery(engine.current_match(), request.to_data())
    return DeliveryAddedResponse(message="Ball data added successfully!", ball_id=delivery.id)


@router.put("/edit", response_model=MessageResponse)
def edit_ball(request: DeliveryEditRequest, engine: ScoringEngine = Depends(get_engine)):
    """Replace every field of a recorded delivery"""
    ball_id = str(request.ball_id)
    if engine.find_delivery(ball_id) is None:
        raise NotFoundError("Ball not found")
    match = _require_match(engine)

    engine.edit_delivery(match, ball_id, request.to_data())
    return MessageResponse(message="Ball data edited successfully!")


@router.get("/details", response_model=MatchSummaryResponse)
def get_details(engine: ScoringEngine = Depends(get_engine)):
    """Current match summary"""
    return MatchSummaryResponse.from_match(_require_match(engine))


@router.get("/deliveries", response_model=DeliveryListResponse)
def list_balls(engine: ScoringEngine = Depends(get_engine)):
    match = _require_match(engine)
    return DeliveryListResponse(
        deliveries=[DeliveryResponse.from_delivery(d) for d in engine.list_deliveries(match)]
    )
