"""Display utilities for stk CLI with Rich formatting."""

from datetime import date

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from shared.formatting import (
    format_activity_date,
    format_distance_meters,
    format_moving_time,
    format_since,
    format_streak_duration,
    format_time,
    pluralize,
)
from shared.models import (
    Activity,
    PaceDistance,
    SportTotals,
    SportType,
    StreakCard,
    format_distance,
)

console = Console()
error_console = Console(stderr=True)


def get_flame_art(streak: int) -> str:
    """Get ASCII art flame based on streak length."""
    if streak >= 365:
        return f"""
    [bold red]    (  )  (
    [bold yellow]   (   ) )  )
    [bold orange1]  .-'''''''-.
    [bold red] /  [bold white]LEGEND[bold red]   \\
    [bold yellow]:  [bold white]{streak:^8}[bold yellow] :
    [bold orange1] `._______.'
        """
    if streak >= 30:
        return f"""
    [bold yellow]   ( )
    [bold orange1]  (   )
    [bold red] .-'`'-.
    [bold yellow]: [bold white]{streak:^5}[bold yellow] :
    [bold orange1] `.___.`
        """
    if streak >= 1:
        return f"""
    [bold yellow] ( )
    [bold orange1](   )
    [bold red] \\{streak}/
        """
    return """
    [dim]  _
    [dim] / \\
    [dim]|   |
    [dim] \\_/
        """


def display_streak(card: StreakCard, today: date) -> None:
    """Display the streak card with ASCII art and the top streaks."""
    current = card.streak_count
    longest = card.longest_streak
    flame = get_flame_art(current)

    if current > 0:
        if current == longest and current >= 7:
            status = "[bold green]NEW RECORD![/bold green]"
        elif current >= longest * 0.8:
            status = f"[yellow]{longest - current} days to record[/yellow]"
        else:
            status = f"Record: {longest} days"

        today_line = (
            "[green]Ran today[/green]" if card.ran_today else "[yellow]Not run yet today[/yellow]"
        )
        streak_text = f"""
{flame}
[bold]Current Streak:[/bold] [bold green]{current}[/bold green] {pluralize(current, "day")}
since {format_since(card.streak_start)} ({format_streak_duration(card.streak_start, today)})
{today_line}
{status}
[dim]Full year progress: {min(card.year_progress_percent, 100):.0f}%[/dim]
        """
    else:
        streak_text = f"""
{flame}
[bold]Streak:[/bold] [red]0 days[/red]
[dim]Get out there and run![/dim]
        """

    console.print(Panel(streak_text, title="[bold cyan]stk[/bold cyan]", border_style="cyan"))

    if card.last_run is not None:
        display_info(
            f"Last run: {format_activity_date(card.last_run.start_date_time_local)}, "
            f"{format_distance(card.last_run.distance)}"
        )

    if len(card.top_streaks) > 1:
        table = Table(title="Top Streaks", show_header=True, border_style="dim")
        table.add_column("Start", style="cyan")
        table.add_column("End", style="cyan")
        table.add_column("Days", justify="right", style="green")
        table.add_column("", justify="center")

        for run in card.top_streaks:
            is_current = "[bold yellow]*[/bold yellow]" if run.is_current else ""
            table.add_row(
                run.start_date.isoformat(),
                run.end_date.isoformat(),
                str(run.length_days),
                is_current,
            )

        console.print(table)


def display_sport_totals(
    totals: dict[SportType, SportTotals],
    runs: SportTotals,
    skis: SportTotals,
    overall: SportTotals,
) -> None:
    """Display totals per sport type."""
    table = Table(title="Activity Statistics", show_header=True, border_style="cyan")
    table.add_column("Sport", style="cyan")
    table.add_column("Count", justify="right", style="green")
    table.add_column("Distance", justify="right")
    table.add_column("Moving Time", justify="right")
    table.add_column("Elevation", justify="right", style="yellow")

    def add_row(name: str, row: SportTotals, style: str | None = None) -> None:
        table.add_row(
            name,
            f"{row.count:,}",
            format_distance(row.distance),
            format_moving_time(row.duration),
            f"{row.total_elevation_gain:,.0f} m",
            style=style,
        )

    for sport, row in sorted(totals.items(), key=lambda item: item[1].count, reverse=True):
        add_row(sport.value, row)

    table.add_section()
    add_row("All runs", runs, style="bold")
    add_row("All skis", skis, style="bold")
    add_row("Total", overall, style="bold")

    console.print(table)


def display_activities(activities: list[Activity]) -> None:
    """Display activities as a table."""
    if not activities:
        display_info("No activities found")
        return

    table = Table(title="Activities", show_header=True, border_style="cyan")
    table.add_column("Name", style="cyan")
    table.add_column("Date")
    table.add_column("Sport")
    table.add_column("Moving Time", justify="right", style="green")
    table.add_column("Distance", justify="right", style="green")
    table.add_column("Elevation", justify="right", style="yellow")

    for activity in activities:
        elevation = activity.total_elevation_gain
        table.add_row(
            activity.name or "",
            activity.start_date.isoformat(),
            activity.sport_type.value,
            format_time(activity.duration),
            format_distance_meters(activity.distance_meters),
            f"{elevation:g}m" if elevation is not None else "",
        )

    console.print(table)


def display_pace_table(rows: list[tuple[PaceDistance, str]], speed_kmh: float) -> None:
    """Display one pace as the time for each configured distance."""
    table = Table(title="Pace Calculator", show_header=True, border_style="cyan")
    table.add_column("Distance", style="cyan")
    table.add_column("Time", justify="right", style="green")

    for distance, formatted in rows:
        table.add_row(distance.label, formatted)

    console.print(table)
    display_info(f"Speed: {speed_kmh:.2f} km/h")


def display_error(message: str) -> None:
    """Display error message."""
    error_console.print(f"[red]✗[/red] {message}")


def display_info(message: str) -> None:
    """Display info message."""
    console.print(f"[dim]ℹ[/dim] {message}")
