"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- The 3x3 board (click a square to move)
- Score and round status
- Difficulty level selection
"""

import dataclasses
import random
import tkinter as tk
from tkinter import ttk
from typing import List, Optional

# Logic imports
from logic.board import Board, Outcome, Party
from logic.config import GameConfig, MatchSettings
from logic.errors import InvalidMoveError
from logic.match_controller import MatchController, Score
from logic.move_strategy import Difficulty
from logic.round_controller import RoundController


class ClickInput:
    """
    Hands the round the square the human clicked.

    The UI only stores a click after checking the square is free.
    """

    def __init__(self):
        self.pending: Optional[int] = None

    def request_human_move(self, valid_positions: List[int]) -> int:
        position, self.pending = self.pending, None
        if position not in valid_positions:
            raise InvalidMoveError(f"Square {position} is not available")
        return position


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    """

    # Delay before the computer moves, in milliseconds
    COMPUTER_DELAY_MS = 400
    # Delay before the next round starts
    NEXT_ROUND_DELAY_MS = 1500

    def __init__(self, settings: Optional[MatchSettings] = None):
        """Initialize the UI."""
        self.settings = settings or MatchSettings()
        self.click_input = ClickInput()
        self.match: Optional[MatchController] = None
        self.round: Optional[RoundController] = None

        # Settings of the match being shown, fixed until the next match
        self.match_settings = self.settings
        # Ids of root.after timers not yet fired
        self._pending_after = set()

        # Create UI
        self._create_ui()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("TicTacToe")
        self.root.configure(bg='#1a1a2e')
        self.root.minsize(420, 620)

        # Main container
        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background='#1a1a2e')
        style.configure('TLabel', background='#1a1a2e', foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground='#ffd700')
        style.configure('Score.TLabel', font=('Segoe UI', 11), foreground='#00ff88')

        # Board section
        ttk.Label(main_frame, text="🎮 Game Board", style='Title.TLabel').pack(pady=(0, 10))

        self.board_frame = ttk.Frame(main_frame)
        self.board_frame.pack(pady=10)

        self.board_cells: List[tk.Button] = []
        for position in range(1, 10):
            cell = tk.Button(
                self.board_frame,
                text="",
                font=('Segoe UI', 24, 'bold'),
                width=4,
                height=2,
                bg='#16213e',
                fg='white',
                relief='ridge',
                borderwidth=2,
                command=lambda p=position: self._on_cell_click(p)
            )
            row, col = divmod(position - 1, 3)
            cell.grid(row=row, column=col, padx=2, pady=2)
            self.board_cells.append(cell)

        # Legend
        self.legend_label = ttk.Label(main_frame, text="")
        self.legend_label.pack(pady=5)

        # Game status section
        ttk.Separator(main_frame, orient='horizontal').pack(fill=tk.X, pady=15)
        ttk.Label(main_frame, text="📊 Game Status", style='Title.TLabel').pack()

        self.status_label = ttk.Label(main_frame, text="Press New Match to start", style='Status.TLabel')
        self.status_label.pack(pady=5)

        self.score_label = ttk.Label(main_frame, text="", style='Score.TLabel')
        self.score_label.pack()

        # Difficulty section
        ttk.Separator(main_frame, orient='horizontal').pack(fill=tk.X, pady=15)
        ttk.Label(main_frame, text="⚙️ Difficulty", style='Title.TLabel').pack()

        diff_frame = ttk.Frame(main_frame)
        diff_frame.pack(pady=10)

        self.diff_colors = {
            Difficulty.EASY: "#4ade80",
            Difficulty.INTERMEDIATE: "#fbbf24",
            Difficulty.ADVANCED: "#f87171",
        }
        self.diff_buttons = {}
        for difficulty, color in self.diff_colors.items():
            btn = tk.Button(
                diff_frame,
                text=difficulty.name.capitalize(),
                font=('Segoe UI', 10, 'bold'),
                width=10,
                activebackground=color,
                command=lambda d=difficulty: self._set_difficulty(d)
            )
            btn.pack(side=tk.LEFT, padx=5)
            self.diff_buttons[difficulty] = btn
        self._paint_difficulty_buttons()

        # Control buttons
        ttk.Separator(main_frame, orient='horizontal').pack(fill=tk.X, pady=15)

        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=10)

        self.start_btn = tk.Button(
            control_frame,
            text="▶ New Match",
            font=('Segoe UI', 11, 'bold'),
            bg='#10b981',
            fg='white',
            width=12,
            command=self._start_match
        )
        self.start_btn.pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="✕ Quit",
            font=('Segoe UI', 11, 'bold'),
            bg='#ef4444',
            fg='white',
            width=12,
            command=self._quit
        ).pack(side=tk.LEFT, padx=5)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _paint_difficulty_buttons(self):
        for difficulty, btn in self.diff_buttons.items():
            if difficulty == self.settings.difficulty:
                btn.configure(bg=self.diff_colors[difficulty], fg='black')
            else:
                btn.configure(bg='#2d3748', fg='white')

    def _set_difficulty(self, difficulty: Difficulty):
        """Set the computer's difficulty (applies from the next match)."""
        self.settings.difficulty = difficulty
        self._paint_difficulty_buttons()
        print(f"Difficulty set to: {difficulty.name}")

    def _schedule(self, delay_ms: int, callback):
        """Run callback later; cancelled if a new match starts first."""
        after_id = None

        def fire():
            self._pending_after.discard(after_id)
            callback()

        after_id = self.root.after(delay_ms, fire)
        self._pending_after.add(after_id)

    def _cancel_pending(self):
        for after_id in self._pending_after:
            self.root.after_cancel(after_id)
        self._pending_after.clear()

    def _start_match(self):
        """Start a new match with the current settings."""
        self._cancel_pending()

        # The match gets its own copy so difficulty clicks wait for the next match
        settings = dataclasses.replace(self.settings)
        if self.match is None:
            self.match = MatchController(
                settings,
                human_input=self.click_input,
                display=self,
                rng=random.Random(settings.seed),
            )
        else:
            self.match.new_match(settings)
        self._start_round()

    def _start_round(self):
        if self.match is None or self.match.is_over:
            return

        self.round = self.match.start_round()
        self.show_board(self.round.board)
        self._after_move()

    def _on_cell_click(self, position: int):
        """Handle a click on a square."""
        if self.round is None or self.round.is_over:
            return
        if self.round.active_party != Party.HUMAN:
            return
        if not self.round.board.is_empty(position):
            self.status_label.configure(text=f"Square {position} is taken!")
            return

        self.click_input.pending = position
        self.round.play_turn()
        self._after_move()

    def _computer_move(self):
        if self.round is None or self.round.is_over:
            return
        if self.round.active_party != Party.COMPUTER:
            return
        self.round.play_turn()
        self._after_move()

    def _after_move(self):
        """Move the round along after a square was taken."""
        if self.round.is_over:
            self.match.finish_round(self.round)
            self.round = None
            if not self.match.is_over:
                self._schedule(self.NEXT_ROUND_DELAY_MS, self._start_round)
            return

        if self.round.active_party == Party.COMPUTER:
            self.status_label.configure(text=f"{self.match_settings.opponent_name} is thinking...")
            self._schedule(self.COMPUTER_DELAY_MS, self._computer_move)
        else:
            self.status_label.configure(text=f"Your turn, {self.match_settings.human_name}")

    # ==================== DISPLAY CALLBACKS ====================

    def show_match_start(self, settings: MatchSettings):
        self.match_settings = settings
        self.legend_label.configure(
            text=f"{settings.human_marker} = {settings.human_name}   "
                 f"{settings.computer_marker} = {settings.opponent_name}"
        )
        self._update_score(Score())

    def show_board(self, board: Board):
        """Update the board grid display."""
        for position, cell in enumerate(self.board_cells, start=1):
            marker = board.marker_at(position)
            if board.is_empty(position):
                cell.configure(text="", bg='#16213e')
            elif marker == self.match_settings.human_marker:
                cell.configure(text=marker, bg='#065f46', fg='#10b981')
            else:
                cell.configure(text=marker, bg='#7f1d1d', fg='#f87171')

    def show_round_result(self, outcome: Outcome, score: Score):
        if outcome == Outcome.HUMAN_WIN:
            text = f"🏆 {self.match_settings.human_name} wins the round!"
        elif outcome == Outcome.COMPUTER_WIN:
            text = f"🤖 {self.match_settings.opponent_name} wins the round!"
        else:
            text = "🤝 It's a tie!"
        self.status_label.configure(text=text)
        self._update_score(score)

    def show_champion(self, champion: Party, score: Score):
        settings = self.match_settings
        name = settings.human_name if champion == Party.HUMAN else settings.opponent_name
        self.status_label.configure(text=f"🏆 {name} is the champion!")
        self._update_score(score)

    def _update_score(self, score: Score):
        settings = self.match_settings
        self.score_label.configure(
            text=f"{settings.human_name}: {score.human}   "
                 f"{settings.opponent_name}: {score.computer}   "
                 f"(first to {settings.win_threshold})"
        )

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self._cancel_pending()
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe UI")
    parser.add_argument(
        "--difficulty",
        type=int,
        choices=[d.value for d in Difficulty],
        default=GameConfig.DEFAULT_DIFFICULTY.value,
        help="1 = Easy, 2 = Intermediate, 3 = Advanced"
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")

    args = parser.parse_args()

    settings = MatchSettings(difficulty=Difficulty(args.difficulty), seed=args.seed)

    print("\n" + "="*60)
    print("   TicTacToe UI")
    print("="*60 + "\n")

    ui = TicTacToeUI(settings)
    ui.run()


if __name__ == "__main__":
    main()
