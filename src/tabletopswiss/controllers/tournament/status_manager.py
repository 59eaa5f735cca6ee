"""Tournament status transitions and registration rules."""

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

from typing import Dict, Optional

from tabletopswiss.constants import (
    TOURNAMENT_DRAFT,
    TOURNAMENT_IN_PROGRESS,
    TOURNAMENT_LIFECYCLE,
    TOURNAMENT_REGISTRATION,
    TOURNAMENT_STATUSES,
)
from tabletopswiss.exceptions import (
    DuplicatePlayerException,
    InvalidConfigurationException,
    TournamentStateException,
)
from tabletopswiss.models.player import Player
from tabletopswiss.type_hints import TournamentStatus
from tabletopswiss.utils import setup_logger
from tabletopswiss.utils.validation import require_label

logger = setup_logger(__name__)


class StatusManager:
    """Owns the tournament status and the rules that depend on it.

    Status only ever moves forward one step at a time:
    DRAFT -> REGISTRATION -> CHECK_IN -> IN_PROGRESS -> COMPLETE.
    """

    def __init__(self, status: TournamentStatus = TOURNAMENT_DRAFT) -> None:
        if status not in TOURNAMENT_STATUSES:
            raise InvalidConfigurationException(f"Unknown tournament status: {status}")
        self.status: TournamentStatus = status

    @property
    def next_status(self) -> Optional[TournamentStatus]:
        """The status ``advance`` would move to, None once complete."""
        return TOURNAMENT_LIFECYCLE.get(self.status)

    def advance(self) -> TournamentStatus:
        """Move to the next status.

        Raises:
            TournamentStateException: If the tournament is already complete
        """
        next_status = self.next_status
        if next_status is None:
            raise TournamentStateException("Tournament is already complete")

        logger.info(f"Tournament status {self.status} -> {next_status}")
        self.status = next_status
        return next_status

    def require(self, expected: str, action: str) -> None:
        """Raise unless the tournament is in ``expected`` status."""
        if self.status != expected:
            raise TournamentStateException(
                f"Cannot {action} while tournament is {self.status} "
                f"(requires {expected})"
            )

    def require_in_progress(self, action: str) -> None:
        self.require(TOURNAMENT_IN_PROGRESS, action)

    def require_deletable(self) -> None:
        """Only draft tournaments may be deleted."""
        self.require(TOURNAMENT_DRAFT, "delete tournament")

    def build_registration(
        self,
        players: Dict[str, Player],
        display_name: str,
        faction: str,
        registered_at: Optional[int] = None,
        player_id: Optional[str] = None,
    ) -> Player:
        """Validate and build a new roster entry, without adding it.

        Args:
            players: Current roster (id -> Player)
            display_name: Name shown on pairings
            faction: Faction label
            registered_at: Registration stamp; defaults to one past the
                latest so the roster never ties
            player_id: Explicit id, generated when omitted

        Raises:
            TournamentStateException: If registration is not open
            InvalidPlayerDataException: If name or faction is blank
            DuplicatePlayerException: If the id or stamp is already taken
        """
        self.require(TOURNAMENT_REGISTRATION, "register players")

        display_name = require_label(display_name, "Display name")
        faction = require_label(faction, "Faction")

        if registered_at is None:
            registered_at = (
                max((p.registered_at for p in players.values()), default=0) + 1
            )
        elif any(p.registered_at == registered_at for p in players.values()):
            raise DuplicatePlayerException(
                f"Registration stamp {registered_at} is already in use"
            )

        kwargs = {"id": player_id} if player_id is not None else {}
        player = Player(
            display_name=display_name,
            faction=faction,
            registered_at=registered_at,
            **kwargs,
        )
        if player.id in players:
            raise DuplicatePlayerException(f"Player {player.id} is already registered")
        return player
