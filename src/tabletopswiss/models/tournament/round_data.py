"""Data model for tournament round."""

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
from typing import Any, Dict, List, Optional

from tabletopswiss.constants import ROUND_PENDING
from tabletopswiss.models.tournament.pairing import Pairing
from tabletopswiss.type_hints import RoundStatus
from tabletopswiss.utils import generate_id


@dataclass
class Round:
    """Container for all data related to a single tournament round.

    Attributes
    ----------
    tournament_id : str
        Tournament the round belongs to.
    round_number : int
        Round number (1-indexed).
    status : str
        PENDING until pairings are generated, ACTIVE while games are played,
        COMPLETE once closed.
    pairings : list of Pairing
        Table pairings plus the bye pairing, if any. Attached once, when the
        round's pairings are generated.
    """

    tournament_id: str
    round_number: int
    status: RoundStatus = ROUND_PENDING
    pairings: List[Pairing] = field(default_factory=list)
    id: str = field(default_factory=lambda: generate_id("round"))

    @property
    def has_pairings(self) -> bool:
        return bool(self.pairings)

    @property
    def bye_pairing(self) -> Optional[Pairing]:
        return next((p for p in self.pairings if p.is_bye), None)

    @property
    def game_pairings(self) -> List[Pairing]:
        """Non-bye pairings ordered by table number."""
        return sorted(
            (p for p in self.pairings if not p.is_bye), key=lambda p: p.table_number
        )

    def unconfirmed_pairings(self) -> List[Pairing]:
        """Non-bye pairings still waiting for a confirmed result."""
        return [p for p in self.game_pairings if not p.is_confirmed]

    def get_pairing(self, pairing_id: str) -> Optional[Pairing]:
        return next((p for p in self.pairings if p.id == pairing_id), None)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize round data to dictionary."""
        return {
            "id": self.id,
            "tournament_id": self.tournament_id,
            "round_number": self.round_number,
            "status": self.status,
            "pairings": [p.to_dict() for p in self.pairings],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Round":
        """Deserialize round data from dictionary."""
        return cls(
            id=data["id"],
            tournament_id=data["tournament_id"],
            round_number=data["round_number"],
            status=data.get("status", ROUND_PENDING),
            pairings=[Pairing.from_dict(p) for p in data.get("pairings", [])],
        )
