#!/usr/bin/env python3
"""
CLI for operating the cricket scorer
"""
import click
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from app.config import settings
from app.database import init_db, get_session
from app.engine import ScoringEngine
from app.engine.accumulation import DeliveryData

console = Console()


def _rate(value) -> str:
    return "-" if value is None else f"{value:.2f}"


@click.group()
def cli():
    """Cricket Scorer - ball-by-ball scoring"""
    pass


@cli.command()
def init():
    """Initialize the database"""
    console.print("[yellow]Initializing database...[/yellow]")
    init_db()
    console.print("[green]Database initialized successfully![/green]")


@cli.command("add-ball")
@click.argument("runs", type=click.IntRange(min=0))
@click.argument("striker")
@click.argument("non_striker")
@click.argument("bowler")
@click.option("--no-ball", is_flag=True, help="Delivery was a no-ball")
def add_ball(runs: int, striker: str, non_striker: str, bowler: str, no_ball: bool):
    """Record a delivery against the current match"""
    init_db()
    session = get_session()
    try:
        engine = ScoringEngine(session)
        delivery = engine.add_delivery(engine.current_match(), DeliveryData(
            runs_scored=runs,
            striker_name=striker,
            non_striker_name=non_striker,
            bowler_name=bowler,
            is_no_ball=no_ball,
        ))
        match = delivery.match
        console.print(f"[green]Recorded ball {delivery.id}[/green] - {match.team_runs} ({match.current_over})")
    finally:
        session.close()


@cli.command()
def scorecard():
    """Show the current match summary"""
    init_db()
    session = get_session()
    try:
        match = ScoringEngine(session).current_match()
        if match is None:
            console.print("[red]No match in progress[/red]")
            return
        _print_scorecard(match)
    finally:
        session.close()


@cli.command()
def rebuild():
    """Recompute the current match summary from its deliveries"""
    init_db()
    session = get_session()
    try:
        engine = ScoringEngine(session)
        match = engine.current_match()
        if match is None:
            console.print("[red]No match in progress[/red]")
            return
        engine.rebuild(match)
        console.print("[green]Match summary rebuilt[/green]")
        _print_scorecard(match)
    finally:
        session.close()


@cli.command()
@click.option("--host", default=settings.HOST, help="Listen host")
@click.option("--port", default=settings.PORT, help="Listen port")
def serve(host: str, port: int):
    """Run the scoring API"""
    import uvicorn
    from main import app
    uvicorn.run(app, host=host, port=port)


def _print_scorecard(match):
    """Print batting and bowling tables for a match"""
    console.print(Panel(
        f"[bold]{match.team_runs}[/bold] in {match.current_over} overs  "
        f"RR {_rate(match.current_run_rate)}",
        title="Current Match",
    ))

    bat_table = Table(title="Batting")
    bat_table.add_column("Batter", style="cyan")
    bat_table.add_column("R", justify="right", style="green")
    bat_table.add_column("B", justify="right")
    bat_table.add_column("SR", justify="right")
    for stat in match.batsman_stats.values():
        bat_table.add_row(stat.name, str(stat.runs), str(stat.balls_faced), _rate(stat.strike_rate))
    console.print(bat_table)

    bowl_table = Table(title="Bowling")
    bowl_table.add_column("Bowler", style="cyan")
    bowl_table.add_column("Balls", justify="right")
    bowl_table.add_column("R", justify="right")
    bowl_table.add_column("NB", justify="right")
    bowl_table.add_column("Econ", justify="right", style="magenta")
    for stat in match.bowler_stats.values():
        bowl_table.add_row(
            stat.name, str(stat.deliveries), str(stat.runs_conceded),
            str(stat.no_balls), _rate(stat.economy_rate),
        )
    console.print(bowl_table)


if __name__ == "__main__":
    cli()
