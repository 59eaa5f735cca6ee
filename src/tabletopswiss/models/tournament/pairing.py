"""Pairing and result records."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from tabletopswiss.constants import BYE_MISSION, BYE_TABLE_NUMBER, RESULT_BYE
from tabletopswiss.models.standing import ConfirmedResult
from tabletopswiss.models.tournament.pairing_history import PriorPairing
from tabletopswiss.utils import generate_id


@dataclass
class Result:
    """The reported score of one pairing.

    Attributes
    ----------
    player1_vp : int
        Victory points scored by player 1.
    player2_vp : int
        Victory points scored by player 2.
    outcome : str
        P1_WIN, P2_WIN, DRAW or BYE, always derived from the VP totals.
    confirmed : bool
        True once the opponent confirmed, the organizer overrode, or the
        result is a bye.
    reported_by : str or None
        Player ID of whoever reported the score.
    overridden : bool
        Set when the organizer forced the score.
    """

    player1_vp: int
    player2_vp: int
    outcome: str
    confirmed: bool = False
    reported_by: Optional[str] = None
    overridden: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Serialize result to dictionary."""
        return {
            "player1_vp": self.player1_vp,
            "player2_vp": self.player2_vp,
            "outcome": self.outcome,
            "confirmed": self.confirmed,
            "reported_by": self.reported_by,
            "overridden": self.overridden,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Result":
        """Deserialize result from dictionary."""
        return cls(
            player1_vp=data["player1_vp"],
            player2_vp=data["player2_vp"],
            outcome=data["outcome"],
            confirmed=data.get("confirmed", False),
            reported_by=data.get("reported_by"),
            overridden=data.get("overridden", False),
        )


@dataclass
class Pairing:
    """One table in a round, or the round's bye.

    Attributes
    ----------
    round_id : str
        Round this pairing belongs to.
    table_number : int
        Table number, starting at 1. Byes use table 0.
    player1_id : str
        First player.
    player2_id : str or None
        Second player, None for a bye.
    mission : str
        Mission played at this table, opaque to the engine.
    result : Result or None
        None until a score is reported (and again after a dispute).
    is_rematch : bool
        Set when the two players had already met when the round was paired.
    """

    round_id: str
    table_number: int
    player1_id: str
    player2_id: Optional[str]
    mission: str
    result: Optional[Result] = None
    is_rematch: bool = False
    id: str = field(default_factory=lambda: generate_id("pairing"))

    @classmethod
    def bye(cls, round_id: str, player_id: str) -> "Pairing":
        """Create a bye pairing, pre-confirmed at creation time."""
        return cls(
            round_id=round_id,
            table_number=BYE_TABLE_NUMBER,
            player1_id=player_id,
            player2_id=None,
            mission=BYE_MISSION,
            result=Result(
                player1_vp=0, player2_vp=0, outcome=RESULT_BYE, confirmed=True
            ),
        )

    @property
    def is_bye(self) -> bool:
        return self.player2_id is None

    @property
    def is_confirmed(self) -> bool:
        return self.result is not None and self.result.confirmed

    @property
    def participants(self) -> Tuple[str, ...]:
        if self.player2_id is None:
            return (self.player1_id,)
        return (self.player1_id, self.player2_id)

    def has_participant(self, player_id: Optional[str]) -> bool:
        return player_id is not None and player_id in self.participants

    def opponent_of(self, player_id: str) -> Optional[str]:
        """Return the other participant, None for a bye."""
        if player_id == self.player1_id:
            return self.player2_id
        if player_id == self.player2_id:
            return self.player1_id
        raise ValueError(f"{player_id} does not play in pairing {self.id}")

    def to_prior_pairing(self) -> PriorPairing:
        return PriorPairing(self.player1_id, self.player2_id)

    def to_confirmed_result(self) -> Optional[ConfirmedResult]:
        """Return the result as standings input, or None if not confirmed."""
        if not self.is_confirmed:
            return None
        return ConfirmedResult(
            player1_id=self.player1_id,
            player2_id=self.player2_id,
            player1_vp=self.result.player1_vp,
            player2_vp=self.result.player2_vp,
            outcome=self.result.outcome,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize pairing to dictionary."""
        return {
            "id": self.id,
            "round_id": self.round_id,
            "table_number": self.table_number,
            "player1_id": self.player1_id,
            "player2_id": self.player2_id,
            "mission": self.mission,
            "result": self.result.to_dict() if self.result else None,
            "is_rematch": self.is_rematch,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Pairing":
        """Deserialize pairing from dictionary."""
        result = data.get("result")
        return cls(
            id=data["id"],
            round_id=data["round_id"],
            table_number=data["table_number"],
            player1_id=data["player1_id"],
            player2_id=data.get("player2_id"),
            mission=data.get("mission", ""),
            result=Result.from_dict(result) if result else None,
            is_rematch=data.get("is_rematch", False),
        )
