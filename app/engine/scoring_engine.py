"""
Scoring Engine - records deliveries and keeps the match summary in step
"""
import logging
from typing import Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from app.errors import NotFoundError
from app.models import Delivery, MatchSummary
from app.engine.accumulation import (
    DeliveryData, apply_delivery, reverse_delivery, replay,
    new_match_summary, reset_match_summary,
)

logger = logging.getLogger(__name__)


class ScoringEngine:
    """
    Applies deliveries to an explicit match. Each public mutation is a
    single transaction: it either commits completely or is rolled back.
    """

    def __init__(self, session: Session):
        self.session = session

    def current_match(self) -> Optional[MatchSummary]:
        """The active match - only one is kept, so the first one found"""
        return self.session.query(MatchSummary).order_by(MatchSummary.id).first()

    def start_match(self) -> MatchSummary:
        match = new_match_summary()
        self.session.add(match)
        self.session.commit()
        logger.info("Started match %s", match.id)
        return match

    def find_delivery(self, ball_id: str) -> Optional[Delivery]:
        """A delivery from any match"""
        return self.session.get(Delivery, ball_id)

    def get_delivery(self, match: MatchSummary, ball_id: str) -> Optional[Delivery]:
        return (
            self.session.query(Delivery)
            .filter_by(id=ball_id, match_id=match.id)
            .first()
        )

    def list_deliveries(self, match: MatchSummary) -> list[Delivery]:
        return (
            self.session.query(Delivery)
            .filter_by(match_id=match.id)
            .order_by(Delivery.sequence)
            .all()
        )

    def _next_sequence(self, match: MatchSummary) -> int:
        count = (
            self.session.query(func.count(Delivery.id))
            .filter_by(match_id=match.id)
            .scalar()
        )
        return (count or 0) + 1

    def add_delivery(self, match: Optional[MatchSummary], data: DeliveryData) -> Delivery:
        """
        Record a new delivery and fold it into the match summary. With no
        match, one is started in the same transaction, so a failed first
        delivery leaves no match behind.
        """
        started = match is None
        try:
            if started:
                match = new_match_summary()
                self.session.add(match)
                self.session.flush()
            delivery = Delivery(
                match_id=match.id,
                sequence=self._next_sequence(match),
                runs_scored=data.runs_scored,
                striker_name=data.striker_name,
                non_striker_name=data.non_striker_name,
                bowler_name=data.bowler_name,
                is_no_ball=data.is_no_ball,
            )
            self.session.add(delivery)
            apply_delivery(match, data)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

        if started:
            logger.info("Started match %s", match.id)
        logger.info(
            "Recorded delivery %s: %s to %s, %d run(s)%s - match %s at %s",
            delivery.id, data.bowler_name, data.striker_name, data.runs_scored,
            " (no-ball)" if data.is_no_ball else "", match.id, match.current_over,
        )
        return delivery

    def edit_delivery(self, match: MatchSummary, ball_id: str, data: DeliveryData) -> Delivery:
        """
        Replace a recorded delivery. The old values are reversed out of the
        summary before the new ones are applied.
        """
        delivery = self.get_delivery(match, ball_id)
        if delivery is None:
            raise NotFoundError("Ball not found")

        try:
            reverse_delivery(match, DeliveryData.from_delivery(delivery))

            delivery.runs_scored = data.runs_scored
            delivery.striker_name = data.striker_name
            delivery.non_striker_name = data.non_striker_name
            delivery.bowler_name = data.bowler_name
            delivery.is_no_ball = data.is_no_ball

            apply_delivery(match, data)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

        logger.info("Edited delivery %s in match %s", delivery.id, match.id)
        return delivery

    def rebuild(self, match: MatchSummary) -> MatchSummary:
        """Recompute the match summary from its delivery log"""
        try:
            reset_match_summary(match)
            # Old stat rows must be deleted before same-named ones are inserted
            self.session.flush()
            replay(self.list_deliveries(match), match)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

        logger.info("Rebuilt match %s from its deliveries", match.id)
        return match
