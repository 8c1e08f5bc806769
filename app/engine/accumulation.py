"""
Accumulation rules for match aggregates.

Every delivery is folded into the match summary by a single rule,
``_accumulate``. Reversing a delivery is the same rule with a negative
sign, so an edit (reverse old values, apply new ones) can never drift
from what a fresh submission would have produced.
"""
from dataclasses import dataclass
from typing import Iterable, Optional

from app.errors import InconsistentMatchError
from app.models import MatchSummary, BatsmanStat, BowlerStat

BALLS_PER_OVER = 6


@dataclass(frozen=True)
class DeliveryData:
    """Values describing one ball, as submitted by the scorer"""
    runs_scored: int
    striker_name: str
    non_striker_name: str
    bowler_name: str
    is_no_ball: bool = False

    @classmethod
    def from_delivery(cls, delivery) -> "DeliveryData":
        return cls(
            runs_scored=delivery.runs_scored,
            striker_name=delivery.striker_name,
            non_striker_name=delivery.non_striker_name,
            bowler_name=delivery.bowler_name,
            is_no_ball=delivery.is_no_ball,
        )


def legal_balls(is_no_ball: bool) -> int:
    """Balls a delivery adds to the count - no-balls add none"""
    return 0 if is_no_ball else 1


def strike_rate(runs: int, balls: int) -> Optional[float]:
    """Runs per 100 balls, None before the first legal ball"""
    if balls == 0:
        return None
    return (runs / balls) * 100


def economy_rate(runs: int, deliveries: int) -> Optional[float]:
    """Runs conceded per over, None before the first legal delivery"""
    if deliveries == 0:
        return None
    return runs / (deliveries / BALLS_PER_OVER)


def run_rate(runs: int, balls: int) -> Optional[float]:
    if balls == 0:
        return None
    return (runs / balls) * BALLS_PER_OVER


def overs_display(balls: int) -> str:
    return f"{balls // BALLS_PER_OVER}.{balls % BALLS_PER_OVER}"


def new_match_summary() -> MatchSummary:
    """A zero-valued summary, before any ball is bowled"""
    return MatchSummary(
        team_runs=0,
        team_balls_played=0,
        current_run_rate=None,
        current_over=overs_display(0),
    )


def upsert_batsman(match: MatchSummary, name: str) -> BatsmanStat:
    stat = match.batsman_stats.get(name)
    if stat is None:
        stat = BatsmanStat(name=name, runs=0, balls_faced=0, strike_rate=None)
        match.batsman_stats[name] = stat
    return stat


def upsert_bowler(match: MatchSummary, name: str) -> BowlerStat:
    stat = match.bowler_stats.get(name)
    if stat is None:
        stat = BowlerStat(name=name, runs_conceded=0, deliveries=0, no_balls=0, economy_rate=None)
        match.bowler_stats[name] = stat
    return stat


def _accumulate(match: MatchSummary, batsman: BatsmanStat, bowler: BowlerStat,
                delivery, sign: int):
    runs = sign * delivery.runs_scored
    legal = legal_balls(delivery.is_no_ball)
    balls = sign * legal
    no_balls = sign * (1 - legal)

    match.team_runs += runs
    match.team_balls_played += balls

    batsman.runs += runs
    batsman.balls_faced += balls
    batsman.strike_rate = strike_rate(batsman.runs, batsman.balls_faced)

    bowler.runs_conceded += runs
    bowler.deliveries += balls
    bowler.no_balls += no_balls
    bowler.economy_rate = economy_rate(bowler.runs_conceded, bowler.deliveries)

    match.current_run_rate = run_rate(match.team_runs, match.team_balls_played)
    match.current_over = overs_display(match.team_balls_played)


def apply_delivery(match: MatchSummary, delivery) -> MatchSummary:
    """
    Add a delivery to the summary. Striker and bowler entries are
    created on first appearance.
    """
    batsman = upsert_batsman(match, delivery.striker_name)
    bowler = upsert_bowler(match, delivery.bowler_name)
    _accumulate(match, batsman, bowler, delivery, 1)
    return match


def reverse_delivery(match: MatchSummary, delivery) -> MatchSummary:
    """
    Take a previously applied delivery back out of the summary.

    The striker and bowler entries must already exist since applying the
    delivery created them. Entries left at zero are kept.
    """
    batsman = match.batsman_stats.get(delivery.striker_name)
    if batsman is None:
        raise InconsistentMatchError("batsman", delivery.striker_name)
    bowler = match.bowler_stats.get(delivery.bowler_name)
    if bowler is None:
        raise InconsistentMatchError("bowler", delivery.bowler_name)
    _accumulate(match, batsman, bowler, delivery, -1)
    return match


def replay(deliveries: Iterable, match: Optional[MatchSummary] = None) -> MatchSummary:
    """Fold a delivery sequence into a summary (a fresh one unless given)"""
    if match is None:
        match = new_match_summary()
    for delivery in deliveries:
        apply_delivery(match, delivery)
    return match


def reset_match_summary(match: MatchSummary) -> MatchSummary:
    """Zero all aggregates in place and drop every player entry"""
    match.team_runs = 0
    match.team_balls_played = 0
    match.current_run_rate = None
    match.current_over = overs_display(0)
    match.batsman_stats.clear()
    match.bowler_stats.clear()
    return match
