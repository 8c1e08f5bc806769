from app.models.delivery import Delivery
from app.models.match import MatchSummary, BatsmanStat, BowlerStat

__all__ = [
    "Delivery",
    "MatchSummary",
    "BatsmanStat",
    "BowlerStat",
]
