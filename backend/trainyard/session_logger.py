"""
Session-based turn logger.

Creates a human-readable log file per character session with every
training yard turn and every resolved master fight clearly separated.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from trainyard.config import get_logs_dir

if TYPE_CHECKING:
    from trainyard.models.encounter import CombatHandle, CombatResult, GateStatus
    from trainyard.models.intent import PlayerTurn
    from trainyard.models.view import Viewpoint


class SessionLogger:
    """Logs training yard turns for a session to a dedicated file."""

    def __init__(self, session_id: str, world_id: str, logs_dir: Path | None = None):
        self.session_id = session_id
        self.world_id = world_id
        self.logs_dir = Path(logs_dir) if logs_dir is not None else get_logs_dir()
        self.turn_count = 0
        self.log_file: Path | None = None

    def _ensure_log_file(self) -> Path:
        """Create the log file on first turn."""
        if self.log_file is None:
            world_dir = self.logs_dir / self.world_id
            world_dir.mkdir(parents=True, exist_ok=True)

            timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
            self.log_file = world_dir / f"{timestamp}_{self.session_id}.log"

            with open(self.log_file, "w") as f:
                f.write("Training Yard Session Log\n")
                f.write("=========================\n")
                f.write(f"Session ID: {self.session_id}\n")
                f.write(f"World: {self.world_id}\n")
                f.write(f"Started: {datetime.now().isoformat()}\n")
                f.write("\n")

        return self.log_file

    def log_turn(
        self,
        turn: "PlayerTurn",
        status: "GateStatus | None",
        viewpoint: "Viewpoint",
    ) -> None:
        """Log a player turn and the view it produced.

        Args:
            turn: The inbound player turn
            status: Gate status evaluated this turn (None away from the yard)
            viewpoint: The view handed to the presentation layer
        """
        log_file = self._ensure_log_file()
        self.turn_count += 1
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")

        with open(log_file, "a") as f:
            f.write("═" * 70 + "\n")
            f.write(f"TURN #{self.turn_count} | {timestamp}\n")
            f.write("═" * 70 + "\n\n")

            f.write("─── PLAYER TURN ───\n")
            f.write(f"Character: {turn.character_id}\n")
            f.write(f"Target: {turn.target_location_id}\n")
            f.write(f"Intent: {turn.intent.type}\n\n")

            if status is not None:
                f.write("─── GATE ───\n")
                f.write(f"Status: {status.value}\n\n")

            self._write_view(f, viewpoint)

    def log_combat_concluded(
        self,
        handle: "CombatHandle",
        result: "CombatResult",
        viewpoint: "Viewpoint | None",
    ) -> None:
        """Log a combat result, including ones passed through untouched."""
        log_file = self._ensure_log_file()
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")

        with open(log_file, "a") as f:
            f.write("═" * 70 + "\n")
            f.write(f"COMBAT CONCLUDED | {timestamp}\n")
            f.write("═" * 70 + "\n\n")

            f.write("─── RESULT ───\n")
            f.write(f"Battle: {handle.battle_id}\n")
            f.write(f"Context: {result.context_tag}\n")
            f.write(f"Winner: {result.winner_id}\n")
            f.write(f"Loser: {result.loser_id}\n")
            f.write(f"Referrer: {result.referrer_location_id}\n\n")

            if viewpoint is None:
                f.write("(unrelated result, ignored)\n\n")
            else:
                self._write_view(f, viewpoint)

    def _write_view(self, f, viewpoint: "Viewpoint") -> None:
        """Write a viewpoint in a readable format."""
        f.write("─── VIEW ───\n")
        f.write(f"Title: {viewpoint.title}\n")
        for paragraph in viewpoint.description:
            f.write(f"  {paragraph}\n")
        f.write("\n")

        for group in viewpoint.action_groups.values():
            if not group.actions:
                continue
            f.write(f"[{group.title or group.id}]\n")
            for action in group.actions:
                label = action.title or action.target_location_id
                f.write(f"  - {label} -> {action.target_location_id}")
                if action.intent is not None:
                    f.write(f" ({action.intent.type})")
                f.write("\n")
        f.write("\n")


# Store active loggers per session
_session_loggers: dict[str, SessionLogger] = {}


def get_session_logger(session_id: str, world_id: str) -> SessionLogger:
    """Get or create a session logger for the given session."""
    if session_id not in _session_loggers:
        _session_loggers[session_id] = SessionLogger(session_id, world_id)
    return _session_loggers[session_id]
