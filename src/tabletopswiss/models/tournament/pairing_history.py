"""Pairing history used to avoid rematches."""

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
from typing import Any, Dict, Iterable, Optional, Set


@dataclass(frozen=True)
class PriorPairing:
    """Two players that met in an earlier round.

    ``player2_id`` is None when ``player1_id`` received a bye. Carries no
    result.
    """

    player1_id: str
    player2_id: Optional[str] = None

    @property
    def is_bye(self) -> bool:
        return self.player2_id is None


@dataclass
class PairingHistory:
    """
    Tracks historical pairings to prevent repeat matches.

    Byes are stored like any other pairing, as ``{player_id, None}``, so
    :meth:`have_played` also answers "has this player had a bye".

    Attributes
    ----------
    previous_matches : set of frozenset
        Frozensets of the player ID pairs that have already met.
    """

    previous_matches: Set[frozenset] = field(default_factory=set)

    @classmethod
    def from_prior_pairings(cls, prior: Iterable[PriorPairing]) -> "PairingHistory":
        history = cls()
        for pairing in prior:
            history.add_pairing(pairing.player1_id, pairing.player2_id)
        return history

    def add_pairing(self, player1_id: str, player2_id: Optional[str]) -> None:
        """Record that two players have been paired (or that one had a bye)."""
        self.previous_matches.add(frozenset({player1_id, player2_id}))

    def have_played(self, player1_id: str, player2_id: Optional[str]) -> bool:
        """Check if two players have previously played each other."""
        return frozenset({player1_id, player2_id}) in self.previous_matches

    def has_had_bye(self, player_id: str) -> bool:
        return self.have_played(player_id, None)

    def __len__(self) -> int:
        return len(self.previous_matches)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize pairing history to dictionary."""
        return {
            "previous_matches": [
                sorted(pair, key=lambda pid: (pid is None, pid or ""))
                for pair in self.previous_matches
            ],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PairingHistory":
        """Deserialize pairing history from dictionary."""
        return cls(
            previous_matches=set(
                frozenset(pair) for pair in data.get("previous_matches", [])
            ),
        )
