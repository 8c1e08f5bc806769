from app.engine.scoring_engine import ScoringEngine

__all__ = ["ScoringEngine"]
