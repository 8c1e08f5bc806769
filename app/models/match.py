from typing import Optional, List, Dict
from sqlalchemy import String, Integer, Float, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.orm.collections import attribute_keyed_dict
from app.database import Base
from app.models.delivery import NAME_MAX_LENGTH


class MatchSummary(Base):
    """
    Running aggregate for one match. Batsman and bowler stats are keyed
    by player name.
    """
    __tablename__ = "matches"

    id: Mapped[int] = mapped_column(primary_key=True)

    # Team totals
    team_runs: Mapped[int] = mapped_column(Integer, default=0)
    team_balls_played: Mapped[int] = mapped_column(Integer, default=0)  # legal balls only
    current_run_rate: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    current_over: Mapped[str] = mapped_column(String(20), default="0.0")

    # Relationships
    batsman_stats: Mapped[Dict[str, "BatsmanStat"]] = relationship(
        "BatsmanStat",
        collection_class=attribute_keyed_dict("name"),
        order_by="BatsmanStat.id",
        cascade="all, delete-orphan",
    )
    bowler_stats: Mapped[Dict[str, "BowlerStat"]] = relationship(
        "BowlerStat",
        collection_class=attribute_keyed_dict("name"),
        order_by="BowlerStat.id",
        cascade="all, delete-orphan",
    )
    deliveries: Mapped[List["Delivery"]] = relationship(
        "Delivery",
        back_populates="match",
        order_by="Delivery.sequence",
    )

    def __repr__(self):
        return f"<MatchSummary {self.team_runs} ({self.current_over})>"


class BatsmanStat(Base):
    __tablename__ = "batsman_stats"
    __table_args__ = (UniqueConstraint("match_id", "name"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    match_id: Mapped[int] = mapped_column(ForeignKey("matches.id"))

    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH))
    runs: Mapped[int] = mapped_column(Integer, default=0)
    balls_faced: Mapped[int] = mapped_column(Integer, default=0)
    strike_rate: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    def __repr__(self):
        return f"<BatsmanStat {self.name}: {self.runs} ({self.balls_faced})>"


class BowlerStat(Base):
    __tablename__ = "bowler_stats"
    __table_args__ = (UniqueConstraint("match_id", "name"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    match_id: Mapped[int] = mapped_column(ForeignKey("matches.id"))

    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH))
    runs_conceded: Mapped[int] = mapped_column(Integer, default=0)
    deliveries: Mapped[int] = mapped_column(Integer, default=0)  # legal deliveries only
    no_balls: Mapped[int] = mapped_column(Integer, default=0)
    economy_rate: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    def __repr__(self):
        return f"<BowlerStat {self.name}: {self.runs_conceded} off {self.deliveries}>"
