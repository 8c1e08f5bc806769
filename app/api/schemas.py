"""
Pydantic schemas for API request/response models.

Field names are snake_case in Python and camelCase on the wire.
"""
from uuid import UUID
from pydantic import BaseModel, Field, StrictBool, StrictInt
from pydantic.alias_generators import to_camel
from typing import Optional, List

from app.engine.accumulation import DeliveryData
from app.models.delivery import NAME_MAX_LENGTH


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True


# Requests
class DeliveryRequest(CamelModel):
    runs_scored: StrictInt = Field(ge=0)
    striker_name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    non_striker_name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    bowler_name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    is_no_ball: StrictBool

    def to_data(self) -> DeliveryData:
        return DeliveryData(
            runs_scored=self.runs_scored,
            striker_name=self.striker_name,
            non_striker_name=self.non_striker_name,
            bowler_name=self.bowler_name,
            is_no_ball=self.is_no_ball,
        )


class DeliveryEditRequest(DeliveryRequest):
    ball_id: UUID


# Error messages reported per request field
FIELD_MESSAGES = {
    "ballId": "Invalid Ball ID",
    "runsScored": "Runs scored must be a non-negative integer",
    "strikerName": "Striker name is required",
    "nonStrikerName": "Non-striker name is required",
    "bowlerName": "Bowler name is required",
    "isNoBall": "isNoBall must be a boolean value",
}

# Messages for names over NAME_MAX_LENGTH
LENGTH_MESSAGES = {
    "strikerName": f"Striker name must be at most {NAME_MAX_LENGTH} characters",
    "nonStrikerName": f"Non-striker name must be at most {NAME_MAX_LENGTH} characters",
    "bowlerName": f"Bowler name must be at most {NAME_MAX_LENGTH} characters",
}


# Responses
class MessageResponse(BaseModel):
    message: str


class DeliveryAddedResponse(CamelModel):
    message: str
    ball_id: str


class DeliveryResponse(CamelModel):
    ball_id: str
    sequence: int
    runs_scored: int
    striker_name: str
    non_striker_name: str
    bowler_name: str
    is_no_ball: bool

    @classmethod
    def from_delivery(cls, delivery) -> "DeliveryResponse":
        return cls(
            ball_id=delivery.id,
            sequence=delivery.sequence,
            runs_scored=delivery.runs_scored,
            striker_name=delivery.striker_name,
            non_striker_name=delivery.non_striker_name,
            bowler_name=delivery.bowler_name,
            is_no_ball=delivery.is_no_ball,
        )


class DeliveryListResponse(CamelModel):
    deliveries: List[DeliveryResponse]


class BatsmanStatResponse(CamelModel):
    name: str
    runs: int
    balls_faced: int
    strike_rate: Optional[float] = None


class BowlerStatResponse(CamelModel):
    name: str
    runs_conceded: int
    deliveries: int
    no_balls: int
    economy_rate: Optional[float] = None


class MatchSummaryResponse(CamelModel):
    id: int
    team_runs: int
    team_balls_played: int
    current_run_rate: Optional[float] = None
    current_over: str
    batsman_stats: List[BatsmanStatResponse]
    bowler_stats: List[BowlerStatResponse]

    @classmethod
    def from_match(cls, match) -> "MatchSummaryResponse":
        return cls(
            id=match.id,
            team_runs=match.team_runs,
            team_balls_played=match.team_balls_played,
            current_run_rate=match.current_run_rate,
            current_over=match.current_over,
            batsman_stats=[
                BatsmanStatResponse(
                    name=s.name, runs=s.runs, balls_faced=s.balls_faced, strike_rate=s.strike_rate,
                )
                for s in match.batsman_stats.values()
            ],
            bowler_stats=[
                BowlerStatResponse(
                    name=s.name, runs_conceded=s.runs_conceded, deliveries=s.deliveries,
                    no_balls=s.no_balls, economy_rate=s.economy_rate,
                )
                for s in match.bowler_stats.values()
            ],
        )
