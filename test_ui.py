"""
Tests for the Tkinter window's game flow, run without a display.

Usage:
    pytest test_ui.py
    python test_ui.py
"""

import sys

import pytest

pytest.importorskip("tkinter")

from logic.board import Party
from logic.config import FirstMove, MatchSettings
from logic.move_strategy import Difficulty
from ui import TicTacToeUI


class FakeWidget:
    """Remembers the last options it was configured with."""

    def __init__(self):
        self.options = {}

    def configure(self, **options):
        self.options.update(options)


class FakeRoot:
    """Stands in for tk.Tk: keeps after() timers until told to fire them."""

    def __init__(self):
        self.timers = {}
        self.next_id = 0

    def after(self, delay_ms, callback):
        self.next_id += 1
        after_id = f"after#{self.next_id}"
        self.timers[after_id] = callback
        return after_id

    def after_cancel(self, after_id):
        self.timers.pop(after_id, None)

    def fire_next(self):
        after_id = next(iter(self.timers))
        self.timers.pop(after_id)()

    def fire_all(self):
        while self.timers:
            self.fire_next()

    def quit(self):
        pass

    def destroy(self):
        pass


class HeadlessUI(TicTacToeUI):
    """The real window logic with fake widgets."""

    def _create_ui(self):
        self.root = FakeRoot()
        self.board_cells = [FakeWidget() for _ in range(9)]
        self.legend_label = FakeWidget()
        self.status_label = FakeWidget()
        self.score_label = FakeWidget()
        self.start_btn = FakeWidget()
        self.diff_colors = {d: "#000000" for d in Difficulty}
        self.diff_buttons = {d: FakeWidget() for d in Difficulty}


def make_ui():
    settings = MatchSettings(
        human_name="Ann",
        difficulty=Difficulty.ADVANCED,
        first_move=FirstMove.HUMAN,
        alternate_first_move=False,
        seed=0,
    )
    return HeadlessUI(settings)


def test_clicks_and_computer_replies():
    ui = make_ui()
    ui._start_match()
    ui._on_cell_click(1)
    assert ui.round.active_party == Party.COMPUTER
    ui.root.fire_all()
    # Advanced answers a corner with the center
    assert ui.round.board.marker_at(5) == "O"
    assert ui.round.active_party == Party.HUMAN


def test_new_match_cancels_pending_computer_move():
    ui = make_ui()
    ui._start_match()
    ui._on_cell_click(1)
    assert ui.root.timers   # computer move queued

    ui._start_match()
    assert ui.root.timers == {}

    # Nothing stale may run against the new human-first round
    ui.root.fire_all()
    assert ui.round.active_party == Party.HUMAN
    assert ui.round.board.occupied_count() == 0


def test_new_match_cancels_pending_next_round():
    ui = make_ui()
    ui._start_match()
    # Play the round out: click the first free square, let the computer answer
    while ui.round is not None:
        if ui.round.active_party == Party.HUMAN:
            ui._on_cell_click(ui.round.board.unoccupied_positions()[0])
        else:
            ui.root.fire_next()
    assert ui.match.rounds_played == 1
    assert ui.root.timers   # next round queued

    ui._start_match()
    fresh_round = ui.round
    ui.root.fire_all()
    assert ui.round is fresh_round
    assert ui.match.rounds_played == 0


def test_difficulty_click_waits_for_next_match():
    ui = make_ui()
    ui._start_match()
    ui._set_difficulty(Difficulty.EASY)

    assert ui.match.settings.difficulty == Difficulty.ADVANCED
    assert ui.match.strategy.difficulty == Difficulty.ADVANCED
    assert "Optimus Prime" in ui.score_label.options["text"]

    ui._start_match()
    assert ui.match.settings.difficulty == Difficulty.EASY
    assert "WALL-E" in ui.score_label.options["text"]


def test_quit_cancels_timers():
    ui = make_ui()
    ui._start_match()
    ui._on_cell_click(1)
    ui._quit()
    assert ui.root.timers == {}


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
