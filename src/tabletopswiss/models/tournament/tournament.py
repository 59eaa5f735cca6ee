"""Main Tournament class - orchestrates all tournament operations.

This is the primary interface for tournament management, coordinating the
status, round and result managers behind one lock so every operation is
all-or-nothing.
"""

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

import threading
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

from tabletopswiss.constants import TOURNAMENT_COMPLETE, TOURNAMENT_DRAFT
from tabletopswiss.controllers.tournament import (
    ResultRecorder,
    RoundManager,
    StatusManager,
)
from tabletopswiss.exceptions import (
    NotOrganizerException,
    PlayerNotFoundException,
    TabletopSwissException,
    TournamentNotFoundException,
    TournamentStateException,
)
from tabletopswiss.models.caller import Caller
from tabletopswiss.models.player import Player
from tabletopswiss.models.standing import Standing
from tabletopswiss.models.tournament.pairing import Pairing
from tabletopswiss.models.tournament.pairing_history import PriorPairing
from tabletopswiss.models.tournament.round_data import Round
from tabletopswiss.models.tournament.tournament_config import TournamentConfig
from tabletopswiss.type_hints import TournamentStatus
from tabletopswiss.utils import generate_id, setup_logger

logger = setup_logger(__name__)


class Tournament:
    """Main tournament management class.

    This class coordinates all tournament operations through specialized managers:
    - StatusManager: owns the status lifecycle and registration rules
    - RoundManager: handles round creation, pairing and closure
    - ResultRecorder: manages the report / confirm / dispute / override protocol

    Every public mutation runs under the tournament's lock. Permission and
    state checks all happen before anything is written, so a rejected call
    leaves the tournament exactly as it was.
    """

    def __init__(
        self,
        config: TournamentConfig,
        tournament_id: Optional[str] = None,
        status: TournamentStatus = TOURNAMENT_DRAFT,
        players: Optional[List[Player]] = None,
        rounds: Optional[List[Round]] = None,
    ) -> None:
        """Initialize a tournament.

        Args
        ----
        config: Tournament configuration
        tournament_id: Explicit id, generated when omitted
        status: Starting status, DRAFT for a new tournament
        players: Existing roster, when restoring a tournament
        rounds: Existing rounds, when restoring a tournament

        Raises
        ------
        TournamentNotFoundException
            If a restored round belongs to a different tournament
        """
        self.config = config
        self.id = tournament_id or generate_id("tournament")

        for round_data in rounds or []:
            if round_data.tournament_id != self.id:
                raise TournamentNotFoundException(
                    f"Round {round_data.round_number} references tournament "
                    f"{round_data.tournament_id}, not {self.id}"
                )

        self.players: Dict[str, Player] = {p.id: p for p in players or []}

        # Specialized managers
        self.status_manager = StatusManager(status)
        self.round_manager = RoundManager(
            tournament_id=self.id,
            total_rounds=config.total_rounds,
            mission_pool=config.mission_pool,
            mission_seed=config.mission_seed,
            rounds=rounds,
        )
        self.result_recorder = ResultRecorder()

        self._lock = threading.RLock()

    # ========== Properties ==========

    @property
    def name(self) -> str:
        """Get tournament name."""
        return self.config.name

    @property
    def total_rounds(self) -> int:
        return self.config.total_rounds

    @property
    def status(self) -> TournamentStatus:
        """Current lifecycle status."""
        return self.status_manager.status

    @property
    def rounds(self) -> List[Round]:
        return self.round_manager.rounds

    @property
    def tournament_over(self) -> bool:
        """Is the tournament over?"""
        return self.status == TOURNAMENT_COMPLETE

    @contextmanager
    def _operation(self, action: str) -> Iterator[None]:
        """Hold the lock for one operation and log it if it is rejected."""
        with self._lock:
            try:
                yield
            except TabletopSwissException as exc:
                logger.warning(f"Rejected {action} on {self.name}: {exc}")
                raise

    def _require_organizer(self, caller: Caller, action: str) -> None:
        if not caller.is_organizer:
            raise NotOrganizerException(f"Only the organizer can {action}")

    # ========== Status Lifecycle ==========

    def advance_status(self, caller: Caller) -> TournamentStatus:
        """Move the tournament one step along its lifecycle.

        Returns:
            The new status

        Raises:
            NotOrganizerException: If the caller is not the organizer
            TournamentStateException: If the tournament is already complete
        """
        with self._operation("advance status"):
            self._require_organizer(caller, "advance the tournament status")
            return self.status_manager.advance()

    def ensure_deletable(self, caller: Caller) -> None:
        """Check the tournament may be deleted by ``caller``.

        Deletion itself is left to the host's storage.

        Raises:
            NotOrganizerException: If the caller is not the organizer
            TournamentStateException: If the tournament has left DRAFT
        """
        with self._operation("delete"):
            self._require_organizer(caller, "delete the tournament")
            self.status_manager.require_deletable()

    # ========== Player Management ==========

    def get_player(self, player_id: str) -> Player:
        """Get a player by id.

        Raises:
            PlayerNotFoundException: If the player is not on the roster
        """
        player = self.players.get(player_id)
        if player is None:
            raise PlayerNotFoundException(f"Player {player_id} not found")
        return player

    def get_player_list(self, active_only: bool = False) -> List[Player]:
        """Get list of tournament players in registration order.

        Args:
            active_only: If True, leave dropped players out
        """
        players = sorted(self.players.values(), key=lambda p: p.registered_at)
        if active_only:
            return [p for p in players if p.is_active]
        return players

    def register_player(
        self,
        display_name: str,
        faction: str,
        registered_at: Optional[int] = None,
        player_id: Optional[str] = None,
    ) -> Player:
        """Add a player to the roster while registration is open.

        Raises:
            TournamentStateException: If the tournament is not in REGISTRATION
            InvalidPlayerDataException: If the name or faction is blank
            DuplicatePlayerException: If the id or registration stamp is taken
        """
        with self._operation("registration"):
            player = self.status_manager.build_registration(
                self.players, display_name, faction, registered_at, player_id
            )
            self.players[player.id] = player
            logger.info(f"Registered player: {player.display_name} ({player.id})")
            return player

    def check_in_player(self, player_id: str, caller: Caller) -> Player:
        """Mark a player as checked in, by the player or the organizer."""
        with self._operation("check-in"):
            player = self._player_action(player_id, caller, "check in")
            player.checked_in = True
            logger.info(f"Checked in: {player.display_name}")
            return player

    def drop_player(self, player_id: str, caller: Caller) -> Player:
        """Drop a player from future pairings, by the player or the organizer.

        Dropped players keep their results and stay in the standings.
        """
        with self._operation("drop"):
            player = self._player_action(player_id, caller, "drop")
            player.dropped = True
            logger.info(f"Dropped: {player.display_name}")
            return player

    def reinstate_player(self, player_id: str, caller: Caller) -> Player:
        """Bring a dropped player back into future pairings (organizer only)."""
        with self._operation("reinstate"):
            player = self.get_player(player_id)
            self._require_organizer(caller, "reinstate a player")
            self._require_not_complete("reinstate a player")
            player.dropped = False
            logger.info(f"Reinstated: {player.display_name}")
            return player

    def _player_action(self, player_id: str, caller: Caller, action: str) -> Player:
        player = self.get_player(player_id)
        if not (caller.is_player(player_id) or caller.is_organizer):
            raise NotOrganizerException(
                f"Only the player or the organizer can {action} {player_id}"
            )
        self._require_not_complete(f"{action} a player")
        return player

    def _require_not_complete(self, action: str) -> None:
        if self.tournament_over:
            raise TournamentStateException(
                f"Cannot {action} once the tournament is complete"
            )

    # ========== Round Management ==========

    def get_round(self, round_id: str) -> Round:
        """Get a round by id.

        Raises:
            RoundNotFoundException: If no round has that id
        """
        return self.round_manager.get_round(round_id)

    def get_pairing(self, pairing_id: str) -> Pairing:
        """Get a pairing by id.

        Raises:
            PairingNotFoundException: If no round holds that pairing
        """
        return self.round_manager.find_pairing(pairing_id)[1]

    def create_round(self, caller: Caller) -> Round:
        """Create the next round in PENDING status.

        Raises:
            NotOrganizerException: If the caller is not the organizer
            TournamentStateException: If the tournament is not IN_PROGRESS or
                every round already exists
        """
        with self._operation("round creation"):
            self._require_organizer(caller, "create rounds")
            self.status_manager.require_in_progress("create a round")
            return self.round_manager.create_round()

    def generate_round_pairings(self, round_id: str, caller: Caller) -> Round:
        """Pair a PENDING round and make it ACTIVE.

        Raises:
            RoundNotFoundException: If the round does not exist
            NotOrganizerException: If the caller is not the organizer
            TournamentStateException: If the tournament is not IN_PROGRESS
            RoundStateException: If the round was already paired
        """
        with self._operation("pairing generation"):
            self.round_manager.get_round(round_id)
            self._require_organizer(caller, "generate pairings")
            self.status_manager.require_in_progress("generate pairings")
            return self.round_manager.generate_pairings(round_id, self.players)

    def close_round(self, round_id: str, caller: Caller) -> Round:
        """Mark an ACTIVE round COMPLETE once every result is confirmed.

        Raises:
            RoundNotFoundException: If the round does not exist
            NotOrganizerException: If the caller is not the organizer
            RoundStateException: If the round is not ACTIVE or results are
                still pending confirmation
        """
        with self._operation("round close"):
            self.round_manager.get_round(round_id)
            self._require_organizer(caller, "close rounds")
            return self.round_manager.close_round(round_id)

    # ========== Result Management ==========

    def report_result(
        self, pairing_id: str, caller: Caller, player1_vp: int, player2_vp: int
    ) -> Pairing:
        """Report a pairing's score as one of its players. See ResultRecorder.report."""
        with self._operation("result report"):
            _, pairing = self.round_manager.find_pairing(pairing_id)
            return self.result_recorder.report(pairing, caller, player1_vp, player2_vp)

    def confirm_result(self, pairing_id: str, caller: Caller) -> Pairing:
        """Confirm a reported score. See ResultRecorder.confirm."""
        with self._operation("result confirmation"):
            _, pairing = self.round_manager.find_pairing(pairing_id)
            return self.result_recorder.confirm(pairing, caller)

    def dispute_result(self, pairing_id: str, caller: Caller) -> Pairing:
        """Clear a reported score. See ResultRecorder.dispute."""
        with self._operation("result dispute"):
            _, pairing = self.round_manager.find_pairing(pairing_id)
            return self.result_recorder.dispute(pairing, caller)

    def override_result(
        self, pairing_id: str, caller: Caller, player1_vp: int, player2_vp: int
    ) -> Pairing:
        """Force a confirmed score as the organizer. See ResultRecorder.override."""
        with self._operation("result override"):
            _, pairing = self.round_manager.find_pairing(pairing_id)
            return self.result_recorder.override(
                pairing, caller, player1_vp, player2_vp
            )

    # ========== Standings ==========

    def standings(self) -> List[Standing]:
        """Ranked standings over every confirmed result, dropped players included."""
        with self._lock:
            return self.round_manager.compute_standings(self.get_player_list())

    def prior_pairings(self, exclude_round_id: Optional[str] = None) -> List[PriorPairing]:
        """Every pairing of the tournament (byes included), optionally minus one round."""
        with self._lock:
            return self.round_manager.prior_pairings(exclude_round_id)

    # ========== Serialization ==========

    def to_dict(self) -> Dict[str, Any]:
        """Serialize tournament to dictionary.

        Returns:
            Dictionary containing all tournament data
        """
        with self._lock:
            return {
                "id": self.id,
                "status": self.status,
                "config": self.config.to_dict(),
                "players": [p.to_dict() for p in self.get_player_list()],
                "rounds": [r.to_dict() for r in self.rounds],
            }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Tournament":
        """Deserialize tournament from dictionary.

        The mission draw restarts from the configured seed.
        """
        tournament = cls(
            config=TournamentConfig.from_dict(data["config"]),
            tournament_id=data.get("id"),
            status=data.get("status", TOURNAMENT_DRAFT),
            players=[Player.from_dict(p) for p in data.get("players", [])],
            rounds=[Round.from_dict(r) for r in data.get("rounds", [])],
        )
        logger.info(f"Loaded tournament: {tournament.name}")
        return tournament
