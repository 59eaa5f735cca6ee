"""Standings input and output records."""

# Tabletop Swiss
# Copyright (C) 2025  Tabletop Swiss developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from tabletopswiss.constants import RESULT_BYE


@dataclass(frozen=True)
class ConfirmedResult:
    """A confirmed game (or bye) as seen by the standings calculator.

    Attributes:
        player1_id: First player of the pairing
        player2_id: Second player, None for a bye
        player1_vp: Victory points scored by player 1
        player2_vp: Victory points scored by player 2
        outcome: One of P1_WIN, P2_WIN, DRAW, BYE
    """

    player1_id: str
    player2_id: Optional[str]
    player1_vp: int
    player2_vp: int
    outcome: str

    @property
    def is_bye(self) -> bool:
        return self.outcome == RESULT_BYE


@dataclass
class Standing:
    """One row of the standings table. Derived, never stored as authoritative."""

    player_id: str
    display_name: str
    faction: str
    registered_at: int
    wins: int = 0
    losses: int = 0
    draws: int = 0
    total_vp: int = 0
    vp_against: int = 0
    strength_of_schedule: float = 0.0
    rank: int = 0

    @property
    def margin(self) -> int:
        """Victory points scored minus victory points conceded."""
        return self.total_vp - self.vp_against

    @property
    def games_played(self) -> int:
        return self.wins + self.losses + self.draws

    @property
    def record(self) -> str:
        """Win-loss-draw record, e.g. ``3-1-0``."""
        return f"{self.wins}-{self.losses}-{self.draws}"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize standing to dictionary, margin included."""
        data = asdict(self)
        data["margin"] = self.margin
        return data
