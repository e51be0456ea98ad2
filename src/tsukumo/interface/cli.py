"""
Command-line interface for the tsukumo calculator.

Main entry point and input loop. Wires the model to its views and
controller, then feeds user commands to the controller.
"""

import argparse
import logging

from prompt_toolkit import prompt as pt_prompt
from prompt_toolkit.completion import WordCompleter

from ..state import TsukumoModel
from .config import load_config
from .controller import InputError, TsukumoController
from .renderer import THEME, console, pt_style, show_banner, show_error, show_help
from .views import InOutView, LogView

logger = logging.getLogger(__name__)

QUIT_COMMANDS = ("quit", "exit")


class TsukumoApp:
    """Model, views and controller wired together."""

    def __init__(self, config=None):
        self.model = TsukumoModel()
        self.in_out_view = InOutView()
        self.log_view = LogView()
        self.controller = TsukumoController(self.model, config)
        self.in_out_view.initialize(self.model)
        self.log_view.initialize(self.model)
        self.model.initialize()

    def render(self) -> None:
        console.print(self.in_out_view.render())
        if self.log_view.log_text:
            console.print(self.log_view.render())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Tsukumo source calculator")
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="Path to JSON config (default: ./.tsukumo_config.json)"
    )
    parser.add_argument(
        "--no-animate", "-q",
        action="store_true",
        help="Skip banner animation"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log model updates"
    )
    return parser


# -----------------------------------------------------------------------------
# Main Loop
# -----------------------------------------------------------------------------

def main(argv: list[str] | None = None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    config = load_config(args.config)
    logger.debug(f"Config: {config}")
    animate_banner = config.get("animate_banner", True) and not args.no_animate
    show_banner(animate=animate_banner)

    app = TsukumoApp(config)
    completer = WordCompleter(
        app.controller.command_names + ["help", *QUIT_COMMANDS],
        ignore_case=True,
    )
    console.print(f"[{THEME['dim']}]Type help for commands.[/{THEME['dim']}]\n")
    app.render()

    while True:
        try:
            user_input = pt_prompt("> ", completer=completer, style=pt_style).strip()
        except (KeyboardInterrupt, EOFError):
            break

        if not user_input:
            continue
        command = user_input.split()[0].lower()
        if command in QUIT_COMMANDS:
            break
        if command == "help":
            show_help()
            continue

        try:
            app.controller.handle(user_input)
        except InputError as e:
            show_error(str(e))
            continue
        app.render()

    console.print(f"[{THEME['dim']}]Bye.[/{THEME['dim']}]")


if __name__ == "__main__":
    main()
