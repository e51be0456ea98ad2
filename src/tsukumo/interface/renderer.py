"""
Display and rendering helpers for the tsukumo CLI.

Handles theming, the banner, and the panels the views draw into.
"""

import random
import time

from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.box import ROUNDED
from prompt_toolkit.styles import Style as PTStyle


# Shared console instance
console = Console()

THEME = {
    "primary": "gold3",          # lacquer gold
    "secondary": "grey70",
    "warning": "dark_goldenrod",
    "danger": "dark_red",
    "accent": "cyan",
    "dim": "dim",
    "text": "grey85",
}

# Prompt toolkit style to match theme
pt_style = PTStyle.from_dict({
    "completion-menu.completion": "bg:#3a2f12 #c0c0c0",
    "completion-menu.completion.current": "bg:#8a6d1f #ffffff bold",
    "completion-menu.meta.completion": "bg:#3a2f12 #808080",
    "completion-menu.meta.completion.current": "bg:#8a6d1f #c0c0c0",
})

# Commands and their help text, in display order
COMMAND_HELP = {
    "level": "level N - set current tsukumo level",
    "exp": "exp N - set exp earned inside the current level",
    "bonus": "bonus N - set number of activated tsukumo",
    "to": "to N - set target level",
    "gain": "gain X - set exp gain (e.g. 1.5 in campaigns)",
    "memo": "memo - append the current result to the log",
    "clear": "clear - clear the log",
    "undo": "undo - undo the last log change",
    "help": "help - show this help",
    "quit": "quit - exit",
}


def show_banner(animate: bool = True):
    """Display the calculator banner with optional reveal animation."""
    title = "九 十 九   計 算 機"
    subtitle = "T S U K U M O   S O U R C E   C A L C U L A T O R"
    noise = "░▒▓·"

    def render_frame(reveal: float) -> Text:
        text = Text()
        for line, style in ((title, "primary"), (subtitle, "accent")):
            shown = "".join(
                c if c == " " or random.random() < reveal else random.choice(noise)
                for c in line
            )
            text.append(shown, style=f"bold {THEME[style]}")
            text.append("\n")
        return text

    if not animate:
        console.print(render_frame(1.0))
        return

    frames = 12
    duration = 0.8  # seconds
    with Live(render_frame(0.0), console=console, refresh_per_second=frames / duration) as live:
        for i in range(1, frames + 1):
            time.sleep(duration / frames)
            live.update(render_frame(i / frames))


def show_help():
    """Print the command list."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style=THEME["accent"])
    table.add_column(style=THEME["text"])
    for text in COMMAND_HELP.values():
        usage, _, description = text.partition(" - ")
        table.add_row(usage, description)
    console.print(Panel(table, title="Commands", border_style=THEME["primary"], box=ROUNDED))


def render_in_out_panel(
    current_exp: int,
    to_level: int,
    necessary_exp: int,
    necessary_source: int,
) -> Panel:
    """Panel with the in/out fields of the calculator."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style=THEME["secondary"])
    table.add_column(justify="right", style=f"bold {THEME['text']}")
    table.add_row("経験値", f"{current_exp:,}")
    table.add_row("目標レベル", str(to_level))
    table.add_row("必要な経験値", f"{necessary_exp:,}")
    table.add_row("必要な九十九の源", Text(f"{necessary_source:,}", style=f"bold {THEME['accent']}"))
    return Panel(table, title="九十九", border_style=THEME["primary"], box=ROUNDED)


def render_log_panel(log_text: str) -> Panel:
    """Panel with the whole log text."""
    body = Text(log_text.rstrip("\n")) if log_text else Text("(empty)", style=THEME["dim"])
    return Panel(body, title="Memo", border_style=THEME["secondary"], box=ROUNDED)


def show_error(message: str):
    console.print(f"[{THEME['danger']}]{message}[/{THEME['danger']}]")
