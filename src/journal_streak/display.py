"""Rich terminal display for journal-streak."""

from __future__ import annotations

from calendar import monthrange
from datetime import date

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

console = Console()

_WEEKDAYS = ("Mo", "Tu", "We", "Th", "Fr", "Sa", "Su")


def format_percentage(value: float) -> str:
    """Format a percentage with one decimal: 66.7 -> '66.7%', 100 -> '100.0%'."""
    return f"{value:.1f}%"


def progress_bar(current: float, total: float, width: int = 20) -> str:
    """Render a progress bar as text: [████████░░░░░░░░░░░░]."""
    if total <= 0:
        return "[" + "░" * width + "]"
    ratio = max(min(current / total, 1.0), 0.0)
    filled = int(ratio * width)
    empty = width - filled
    return "[" + "█" * filled + "░" * empty + "]"


def _streak_color(data: dict) -> str:
    if not data.get("total_days_with_entries"):
        return "grey50"
    return "green" if data.get("is_streak_active") else "red"


def print_streak_dashboard(data: dict) -> None:
    """Print the main streak panel from a StreakResult dict."""
    color = _streak_color(data)
    current = data.get("current_streak", 0)
    longest = data.get("longest_streak", 0)

    lines: list[str] = []
    lines.append("")
    lines.append(f"  [bold {color}]{data.get('status_message', '')}[/]")
    lines.append("")

    current_since = data.get("current_streak_start_date")
    since_suffix = f" (since {current_since})" if current_since else ""
    lines.append(f"  \U0001f525 Current Streak: [bold]{current}[/] days{since_suffix}")

    longest_start = data.get("longest_streak_start_date")
    longest_end = data.get("longest_streak_end_date")
    range_suffix = f" ({longest_start} to {longest_end})" if longest_start else ""
    lines.append(f"  \U0001f3c6 Longest Streak: [bold]{longest}[/] days{range_suffix}")

    if longest > 0:
        lines.append(f"  {progress_bar(current, longest)} {current}/{longest}")

    state = "[green]active[/]" if data.get("is_streak_active") else "[red]inactive[/]"
    lines.append(
        f"  Status: {state}  |  Days until lost: {data.get('days_until_streak_lost', 0)}"
    )

    lines.append("")
    lines.append(
        f"  \U0001f4d3 Entries: {data.get('total_days_with_entries', 0)}"
        f"/{data.get('total_days_span', 0)} days  |  "
        f"Missed: {data.get('missed_days', 0)}"
    )
    lines.append(
        f"  \U0001f4ca Completion: {format_percentage(data.get('completion_percentage', 0.0))}  |  "
        f"Streaks: {data.get('total_streaks', 0)} (avg {data.get('average_streak_length', 0.0):.1f})"
    )

    oldest = data.get("oldest_entry_date")
    if oldest:
        lines.append("")
        lines.append(f"  Journaling since: {oldest}")
        lines.append(f"  Last entry:       {data.get('most_recent_entry_date')}")
    lines.append("")

    panel = Panel(
        "\n".join(lines),
        title="[bold]JOURNAL STREAK[/]",
        box=box.ROUNDED,
        border_style=color,
        width=60,
    )
    console.print(panel)


def print_missed_days(data: dict) -> None:
    """Print the missed days as a table.

    data has: missed_days_list (ISO strings), oldest_entry_date, most_recent_entry_date.
    """
    missed = data.get("missed_days_list", [])
    if not missed:
        console.print("[green]No missed days. Every day in your journal history has an entry.[/]")
        return

    table = Table(
        title=f"Missed Days ({data.get('oldest_entry_date')} to {data.get('most_recent_entry_date')})",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold",
    )
    table.add_column("#", justify="right", style="grey50")
    table.add_column("Date")
    table.add_column("Weekday")

    for i, iso in enumerate(missed, start=1):
        day = date.fromisoformat(iso)
        table.add_row(str(i), iso, day.strftime("%A"))

    console.print(table)


def print_month_calendar(data: dict) -> None:
    """Print a Monday-first month grid.

    data has: year, month, today (ISO), entry_dates and missed_days (ISO lists).
    Entry days are green, missed days red, today underlined, future days dim.
    """
    year = data["year"]
    month = data["month"]
    today = date.fromisoformat(data["today"])
    entries = set(data.get("entry_dates", []))
    missed = set(data.get("missed_days", []))

    table = Table(
        title=date(year, month, 1).strftime("%B %Y"),
        box=box.SIMPLE,
        show_header=True,
        header_style="bold",
    )
    for name in _WEEKDAYS:
        table.add_column(name, justify="right")

    first_weekday, days_in_month = monthrange(year, month)
    cells: list[str] = [""] * first_weekday
    for day_num in range(1, days_in_month + 1):
        day = date(year, month, day_num)
        iso = day.isoformat()
        if iso in entries:
            style = "bold green"
        elif iso in missed:
            style = "red"
        elif day > today:
            style = "grey50"
        else:
            style = ""
        if day == today:
            style = f"{style} underline".strip()
        cells.append(f"[{style}]{day_num}[/]" if style else str(day_num))

    while len(cells) % 7:
        cells.append("")
    for i in range(0, len(cells), 7):
        table.add_row(*cells[i:i + 7])

    console.print(table)
    console.print(
        f"  [bold green]●[/] entry ({len(entries)})  "
        f"[red]●[/] missed ({len(missed)})"
    )


def print_completion(data: dict) -> None:
    """Print completion percentage for a date range."""
    lines: list[str] = []
    lines.append("")
    lines.append(f"  Range:      {data.get('start')} to {data.get('end')}")
    lines.append(f"  Entries:    {data.get('entries', 0)}/{data.get('total_days', 0)} days")
    pct = data.get("completion_percentage", 0.0)
    lines.append(f"  {progress_bar(pct, 100)} {format_percentage(pct)}")
    lines.append("")

    panel = Panel(
        "\n".join(lines),
        title=f"[bold]Completion ({data.get('period', 'custom')})[/]",
        box=box.ROUNDED,
        border_style="cyan",
        width=50,
    )
    console.print(panel)


def print_entry_saved(data: dict) -> None:
    """Print confirmation after writing an entry."""
    lines: list[str] = []
    lines.append("")
    lines.append(f"  Entry saved for [bold]{data.get('entry_date')}[/]")
    if data.get("title"):
        lines.append(f"  Title: {data['title']}")
    lines.append(f"  Current streak: {data.get('current_streak', 0)} days")
    lines.append("")

    panel = Panel(
        "\n".join(lines),
        title="[bold]Entry Saved[/]",
        box=box.ROUNDED,
        border_style="green",
        width=50,
    )
    console.print(panel)


def _preview(text: str | None, width: int = 40) -> str:
    """First line of text, cut to width with an ellipsis."""
    if not text:
        return ""
    line = text.strip().splitlines()[0] if text.strip() else ""
    return line if len(line) <= width else line[: width - 1] + "…"


def print_entry(entry: dict) -> None:
    """Print one journal entry in full."""
    lines: list[str] = []
    lines.append("")
    if entry.get("title"):
        lines.append(f"  [bold]{entry['title']}[/]")
        lines.append("")
    content = entry.get("content") or "[grey50](no content)[/]"
    for line in content.splitlines() or [""]:
        lines.append(f"  {line}")
    lines.append("")
    lines.append(f"  [grey50]Updated {entry.get('updated_at', '')}[/]")
    lines.append("")

    panel = Panel(
        "\n".join(lines),
        title=f"[bold]{entry.get('entry_date')}[/]",
        box=box.ROUNDED,
        border_style="cyan",
        width=60,
    )
    console.print(panel)


def print_entry_list(entries: list[dict], title: str = "Journal Entries") -> None:
    """Print entries as a table: date, weekday, title, content preview."""
    if not entries:
        console.print("[grey50]No matching entries.[/]")
        return

    table = Table(
        title=title,
        box=box.ROUNDED,
        show_header=True,
        header_style="bold",
    )
    table.add_column("Date")
    table.add_column("Day", style="grey50")
    table.add_column("Title", style="bold")
    table.add_column("Preview")

    for entry in entries:
        day = date.fromisoformat(entry["entry_date"])
        table.add_row(
            entry["entry_date"],
            day.strftime("%a"),
            entry.get("title") or "",
            _preview(entry.get("content")),
        )

    console.print(table)


def print_no_entries_message() -> None:
    """Print message when the journal is empty."""
    panel = Panel(
        "\n  No entries yet. Run [bold]journal-streak write[/] to record today's entry.\n",
        title="[bold]JOURNAL STREAK[/]",
        box=box.ROUNDED,
        border_style="grey50",
        width=50,
    )
    console.print(panel)


def print_error(message: str) -> None:
    console.print(f"[red]{message}[/]")
