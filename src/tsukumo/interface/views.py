"""
Views of the tsukumo calculator.

Each view mirrors one area of the page as plain fields and renders
them with rich. Views only listen; they never call model setters.
"""

from rich.panel import Panel

from ..state import ModelObserver, TsukumoModel
from .renderer import render_in_out_panel, render_log_panel


class InOutView(ModelObserver):
    """View of the in/out area: current exp, target level, results."""

    def __init__(self):
        self.current_exp = 0
        self.to_level = 0
        self.necessary_exp = 0
        self.necessary_source = 0

    def initialize(self, model: TsukumoModel) -> None:
        model.register_observer(self)

    def on_update_current_exp(self, exp: int) -> None:
        self.current_exp = exp

    def on_update_to_level(self, to_level: int) -> None:
        self.to_level = to_level

    def on_update_necessary_tsukumo(self, exp: int, source: int) -> None:
        self.necessary_exp = exp
        self.necessary_source = source

    def render(self) -> Panel:
        return render_in_out_panel(
            self.current_exp,
            self.to_level,
            self.necessary_exp,
            self.necessary_source,
        )


class LogView(ModelObserver):
    """View of the log area."""

    def __init__(self):
        self.log_text = ""

    def initialize(self, model: TsukumoModel) -> None:
        model.register_observer(self)

    def on_log_text_changed(self, log_text: str) -> None:
        self.log_text = log_text

    def render(self) -> Panel:
        return render_log_panel(self.log_text)
