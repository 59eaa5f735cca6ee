"""Authorization facts about whoever is calling a lifecycle operation."""

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

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Caller:
    """Identity facts established by the host's authentication layer.

    The engine never authenticates anyone; it only compares these facts
    against the records it is asked to change.

    Attributes
    ----------
    player_id : str or None
        The tournament player the caller is registered as, if any.
    is_organizer : bool
        Whether the caller organizes this tournament.
    """

    player_id: Optional[str] = None
    is_organizer: bool = False

    @classmethod
    def organizer(cls, player_id: Optional[str] = None) -> "Caller":
        return cls(player_id=player_id, is_organizer=True)

    @classmethod
    def player(cls, player_id: str) -> "Caller":
        return cls(player_id=player_id)

    def is_player(self, player_id: Optional[str]) -> bool:
        return player_id is not None and self.player_id == player_id
