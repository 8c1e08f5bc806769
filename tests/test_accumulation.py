"""
Tests for the accumulation rules that keep match aggregates in step
with the delivery log.

Run with: pytest tests/test_accumulation.py -v
"""
import pytest

from app.errors import InconsistentMatchError
from app.engine.accumulation import (
    DeliveryData, apply_delivery, reverse_delivery, replay, new_match_summary,
    reset_match_summary, upsert_batsman, upsert_bowler, legal_balls,
    strike_rate, economy_rate, run_rate, overs_display,
)


def ball(runs=0, striker="A", non_striker="B", bowler="X", no_ball=False) -> DeliveryData:
    return DeliveryData(
        runs_scored=runs,
        striker_name=striker,
        non_striker_name=non_striker,
        bowler_name=bowler,
        is_no_ball=no_ball,
    )


def snapshot(match) -> dict:
    """Plain-value copy of a summary for comparisons"""
    return {
        "team_runs": match.team_runs,
        "team_balls_played": match.team_balls_played,
        "current_run_rate": match.current_run_rate,
        "current_over": match.current_over,
        "batsmen": {
            n: (s.runs, s.balls_faced, s.strike_rate) for n, s in match.batsman_stats.items()
        },
        "bowlers": {
            n: (s.runs_conceded, s.deliveries, s.no_balls, s.economy_rate)
            for n, s in match.bowler_stats.items()
        },
    }


class TestRates:
    def test_no_ball_is_not_a_legal_ball(self):
        assert legal_balls(False) == 1
        assert legal_balls(True) == 0

    def test_strike_rate(self):
        assert strike_rate(4, 1) == 400
        assert strike_rate(30, 20) == 150

    def test_economy_rate(self):
        assert economy_rate(4, 1) == pytest.approx(24)
        assert economy_rate(30, 18) == pytest.approx(10)

    def test_run_rate(self):
        assert run_rate(12, 6) == pytest.approx(12)

    def test_zero_denominators_give_none(self):
        assert strike_rate(5, 0) is None
        assert economy_rate(5, 0) is None
        assert run_rate(5, 0) is None

    @pytest.mark.parametrize("balls,expected", [
        (0, "0.0"), (1, "0.1"), (5, "0.5"), (6, "1.0"), (13, "2.1"), (120, "20.0"),
    ])
    def test_overs_display(self, balls, expected):
        assert overs_display(balls) == expected


class TestForwardAccumulation:
    def test_new_summary_is_zeroed(self):
        match = new_match_summary()
        assert match.team_runs == 0
        assert match.team_balls_played == 0
        assert match.current_run_rate is None
        assert match.current_over == "0.0"
        assert len(match.batsman_stats) == 0
        assert len(match.bowler_stats) == 0

    def test_four_off_first_ball(self):
        match = apply_delivery(new_match_summary(), ball(runs=4))

        assert match.team_runs == 4
        assert match.team_balls_played == 1
        assert match.current_over == "0.1"
        assert match.current_run_rate == pytest.approx(24)

        striker = match.batsman_stats["A"]
        assert (striker.runs, striker.balls_faced) == (4, 1)
        assert striker.strike_rate == pytest.approx(400)

        bowler = match.bowler_stats["X"]
        assert (bowler.runs_conceded, bowler.deliveries, bowler.no_balls) == (4, 1, 0)
        assert bowler.economy_rate == pytest.approx(24)

    def test_no_ball_counts_runs_but_not_ball(self):
        match = apply_delivery(new_match_summary(), ball(runs=4))
        apply_delivery(match, ball(runs=1, no_ball=True))

        assert match.team_runs == 5
        assert match.team_balls_played == 1
        assert match.current_over == "0.1"
        assert match.batsman_stats["A"].balls_faced == 1
        bowler = match.bowler_stats["X"]
        assert (bowler.runs_conceded, bowler.deliveries, bowler.no_balls) == (5, 1, 1)

    def test_no_ball_first_leaves_rates_undefined(self):
        match = apply_delivery(new_match_summary(), ball(runs=1, no_ball=True))

        assert match.team_runs == 1
        assert match.current_run_rate is None
        assert match.batsman_stats["A"].strike_rate is None
        assert match.bowler_stats["X"].economy_rate is None

    def test_non_striker_is_not_aggregated(self):
        match = apply_delivery(new_match_summary(), ball(runs=2, non_striker="B"))
        assert "B" not in match.batsman_stats

    def test_over_rolls_after_six_legal_balls(self):
        match = new_match_summary()
        for _ in range(6):
            apply_delivery(match, ball(runs=1))
        apply_delivery(match, ball(runs=0, no_ball=True))
        assert match.current_over == "1.0"
        apply_delivery(match, ball(runs=0, striker="B", bowler="Y"))
        assert match.current_over == "1.1"
        assert match.team_balls_played == 7

    def test_upsert_returns_existing_entry(self):
        match = new_match_summary()
        first = upsert_batsman(match, "A")
        assert upsert_batsman(match, "A") is first
        assert upsert_bowler(match, "X") is upsert_bowler(match, "X")
        assert list(match.batsman_stats) == ["A"]


class TestReversal:
    def test_reverse_then_apply_same_values_is_unchanged(self):
        match = replay([ball(runs=4), ball(runs=1, no_ball=True), ball(runs=2, striker="B", bowler="Y")])
        before = snapshot(match)

        reverse_delivery(match, ball(runs=1, no_ball=True))
        apply_delivery(match, ball(runs=1, no_ball=True))

        assert snapshot(match) == before

    def test_edit_runs_from_four_to_six(self):
        match = replay([ball(runs=4), ball(runs=1, no_ball=True)])

        reverse_delivery(match, ball(runs=4))
        apply_delivery(match, ball(runs=6))

        assert match.team_runs == 7
        assert match.team_balls_played == 1
        assert match.batsman_stats["A"].runs == 7
        assert match.batsman_stats["A"].strike_rate == pytest.approx(700)

    def test_edit_to_new_striker_keeps_zeroed_entry(self):
        match = replay([ball(runs=4)])

        reverse_delivery(match, ball(runs=4))
        apply_delivery(match, ball(runs=4, striker="C", bowler="Z"))

        old = match.batsman_stats["A"]
        assert (old.runs, old.balls_faced, old.strike_rate) == (0, 0, None)
        assert match.batsman_stats["C"].runs == 4
        assert match.bowler_stats["X"].deliveries == 0
        assert match.bowler_stats["Z"].deliveries == 1
        assert match.team_runs == 4

    def test_missing_batsman_raises(self):
        match = replay([ball(runs=4)])
        with pytest.raises(InconsistentMatchError) as exc_info:
            reverse_delivery(match, ball(runs=4, striker="Nobody"))
        assert exc_info.value.kind == "batsman"
        assert match.team_runs == 4

    def test_missing_bowler_raises_without_touching_totals(self):
        match = replay([ball(runs=4)])
        with pytest.raises(InconsistentMatchError):
            reverse_delivery(match, ball(runs=4, bowler="Nobody"))
        assert match.team_runs == 4
        assert match.batsman_stats["A"].runs == 4


class TestReplay:
    def test_balls_played_counts_legal_deliveries(self):
        deliveries = [
            ball(runs=1), ball(runs=0, no_ball=True), ball(runs=4),
            ball(runs=2, no_ball=True), ball(runs=6, striker="B"),
        ]
        match = replay(deliveries)
        assert match.team_balls_played == 3
        assert match.team_runs == 13

    def test_replay_matches_incremental_edits(self):
        incremental = replay([ball(runs=4), ball(runs=1, no_ball=True), ball(runs=2)])
        reverse_delivery(incremental, ball(runs=2))
        apply_delivery(incremental, ball(runs=3, striker="B", bowler="Y", no_ball=True))

        folded = replay([ball(runs=4), ball(runs=1, no_ball=True),
                         ball(runs=3, striker="B", bowler="Y", no_ball=True)])

        assert folded.team_runs == incremental.team_runs
        assert folded.team_balls_played == incremental.team_balls_played
        assert folded.current_over == incremental.current_over
        assert folded.batsman_stats["B"].runs == incremental.batsman_stats["B"].runs
        assert folded.bowler_stats["Y"].no_balls == incremental.bowler_stats["Y"].no_balls

    def test_reset_clears_everything(self):
        match = replay([ball(runs=4), ball(runs=1)])
        reset_match_summary(match)
        assert snapshot(match) == snapshot(new_match_summary())
