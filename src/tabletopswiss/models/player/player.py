"""A registered tournament player."""

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
from typing import Any, Dict

from tabletopswiss.utils import generate_id


@dataclass
class Player:
    """A roster entry in one tournament.

    Attributes
    ----------
    display_name : str
        Name shown on pairings and standings.
    faction : str
        Army or faction label, opaque to the engine.
    registered_at : int
        Monotonic registration stamp. Only used as the final tie-break, so the
        roster must never contain two players with the same value.
    id : str
        Unique identifier.
    dropped : bool
        Dropped players are left out of future pairings but keep their
        history in the standings.
    checked_in : bool
        Whether the player checked in on the day.
    """

    display_name: str
    faction: str
    registered_at: int
    id: str = field(default_factory=lambda: generate_id("player"))
    dropped: bool = False
    checked_in: bool = False

    @property
    def is_active(self) -> bool:
        """Players are active until they drop."""
        return not self.dropped

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player to dictionary."""
        return {
            "id": self.id,
            "display_name": self.display_name,
            "faction": self.faction,
            "registered_at": self.registered_at,
            "dropped": self.dropped,
            "checked_in": self.checked_in,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Player":
        """Deserialize player from dictionary."""
        return cls(
            id=data["id"],
            display_name=data["display_name"],
            faction=data.get("faction", ""),
            registered_at=data["registered_at"],
            dropped=data.get("dropped", False),
            checked_in=data.get("checked_in", False),
        )
