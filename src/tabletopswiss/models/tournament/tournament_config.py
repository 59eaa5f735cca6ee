"""TournamentConfig data class."""

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

from tabletopswiss.constants import DEFAULT_MISSION_POOL
from tabletopswiss.exceptions import InvalidConfigurationException


@dataclass
class TournamentConfig:
    """Tournament configuration settings.

    Attributes
    ----------
    name : str
        Tournament name.
    total_rounds : int
        Fixed number of rounds the tournament will run.
    mission_pool : list of str
        Missions a round can be assigned. One is drawn per round.
    mission_seed : int or None
        Seed for the mission draw, for reproducible events and tests.
    """

    name: str
    total_rounds: int
    mission_pool: List[str] = field(default_factory=lambda: list(DEFAULT_MISSION_POOL))
    mission_seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.total_rounds < 1:
            raise InvalidConfigurationException(
                f"A tournament needs at least one round (got {self.total_rounds})"
            )
        if not self.mission_pool:
            raise InvalidConfigurationException("Mission pool must not be empty")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "name": self.name,
            "total_rounds": self.total_rounds,
            "mission_pool": list(self.mission_pool),
            "mission_seed": self.mission_seed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentConfig":
        """Deserialize configuration from dictionary."""
        return cls(
            name=data.get("name", "Untitled Tournament"),
            total_rounds=data["total_rounds"],
            mission_pool=data.get("mission_pool", list(DEFAULT_MISSION_POOL)),
            mission_seed=data.get("mission_seed"),
        )
