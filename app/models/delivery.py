"""
Delivery log - one row per ball bowled
"""
import uuid
from datetime import datetime
from sqlalchemy import String, Integer, ForeignKey, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.database import Base

NAME_MAX_LENGTH = 100


def new_delivery_id() -> str:
    return str(uuid.uuid4())


class Delivery(Base):
    __tablename__ = "deliveries"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_delivery_id)
    match_id: Mapped[int] = mapped_column(ForeignKey("matches.id"), index=True)
    match: Mapped["MatchSummary"] = relationship("MatchSummary", back_populates="deliveries")

    sequence: Mapped[int] = mapped_column(Integer)  # 1-based position in the match

    runs_scored: Mapped[int] = mapped_column(Integer, default=0)
    striker_name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH))
    non_striker_name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH))  # accepted, not aggregated
    bowler_name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH))
    is_no_ball: Mapped[bool] = mapped_column(default=False)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    def __repr__(self):
        nb = " nb" if self.is_no_ball else ""
        return f"<Delivery {self.bowler_name} to {self.striker_name}: {self.runs_scored}{nb}>"
