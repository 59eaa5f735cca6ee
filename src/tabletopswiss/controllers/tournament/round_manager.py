"""Round management for tournaments.

This module handles all round-related operations including round creation,
pairing generation and round closure.
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

import random
from typing import Dict, List, Optional, Sequence, Tuple

from tabletopswiss.constants import ROUND_ACTIVE, ROUND_COMPLETE, ROUND_PENDING
from tabletopswiss.controllers.standings import StandingsCalculator
from tabletopswiss.exceptions import (
    PairingNotFoundException,
    RoundNotFoundException,
    RoundStateException,
    TournamentStateException,
)
from tabletopswiss.models.player import Player
from tabletopswiss.models.standing import ConfirmedResult, Standing
from tabletopswiss.models.tournament.pairing import Pairing
from tabletopswiss.models.tournament.pairing_history import PriorPairing
from tabletopswiss.models.tournament.round_data import Round
from tabletopswiss.pairing.fold_swiss import SwissPlayer, generate_pairings
from tabletopswiss.utils import setup_logger

logger = setup_logger(__name__)


class RoundManager:
    """Manages round progression and pairing generation for tournaments.

    This class is responsible for:
    - Creating rounds in order, up to the tournament's round count
    - Generating a round's pairings exactly once
    - Closing rounds once every game result is confirmed
    - Looking up rounds and pairings
    """

    def __init__(
        self,
        tournament_id: str,
        total_rounds: int,
        mission_pool: Sequence[str],
        mission_seed: Optional[int] = None,
        rounds: Optional[List[Round]] = None,
    ):
        """Initialize the round manager.

        Args:
            tournament_id: Tournament the rounds belong to
            total_rounds: Total number of rounds in the tournament
            mission_pool: Missions a round may be assigned
            mission_seed: Seed for the mission draw
            rounds: Existing rounds, when restoring a tournament
        """
        self.tournament_id = tournament_id
        self.total_rounds = total_rounds
        self.mission_pool = list(mission_pool)
        self.rounds: List[Round] = list(rounds or [])
        self.standings_calculator = StandingsCalculator()
        self._mission_random = random.Random(mission_seed)

    def get_round(self, round_id: str) -> Round:
        """Get a round by id.

        Raises:
            RoundNotFoundException: If no round has that id
        """
        for round_data in self.rounds:
            if round_data.id == round_id:
                return round_data
        raise RoundNotFoundException(f"Round {round_id} not found")

    def find_pairing(self, pairing_id: str) -> Tuple[Round, Pairing]:
        """Find a pairing and the round that owns it.

        Raises:
            PairingNotFoundException: If no round holds that pairing
        """
        for round_data in self.rounds:
            pairing = round_data.get_pairing(pairing_id)
            if pairing is not None:
                return round_data, pairing
        raise PairingNotFoundException(f"Pairing {pairing_id} not found")

    def prior_pairings(self, exclude_round_id: Optional[str] = None) -> List[PriorPairing]:
        """Every pairing (byes included) outside ``exclude_round_id``."""
        return [
            pairing.to_prior_pairing()
            for round_data in self.rounds
            if round_data.id != exclude_round_id
            for pairing in round_data.pairings
        ]

    def confirmed_results(
        self, exclude_round_id: Optional[str] = None
    ) -> List[ConfirmedResult]:
        """Every confirmed result outside ``exclude_round_id``."""
        results = []
        for round_data in self.rounds:
            if round_data.id == exclude_round_id:
                continue
            for pairing in round_data.pairings:
                confirmed = pairing.to_confirmed_result()
                if confirmed is not None:
                    results.append(confirmed)
        return results

    def compute_standings(
        self, players: Sequence[Player], exclude_round_id: Optional[str] = None
    ) -> List[Standing]:
        return self.standings_calculator.compute(
            players, self.confirmed_results(exclude_round_id)
        )

    def create_round(self) -> Round:
        """Append the next round in PENDING status.

        Raises:
            TournamentStateException: If every round has already been created
        """
        if len(self.rounds) >= self.total_rounds:
            raise TournamentStateException(
                f"Cannot create more rounds: already at {self.total_rounds} rounds"
            )

        round_data = Round(
            tournament_id=self.tournament_id, round_number=len(self.rounds) + 1
        )
        self.rounds.append(round_data)
        logger.info(f"Created round {round_data.round_number} ({round_data.id})")
        return round_data

    def generate_pairings(self, round_id: str, players: Dict[str, Player]) -> Round:
        """Pair a PENDING round and make it ACTIVE.

        Standings come from the confirmed results of every other round; only
        active players are paired; every other round's pairings count as
        history.

        Args:
            round_id: Round to pair
            players: Full roster (id -> Player), dropped players included

        Raises:
            RoundNotFoundException: If the round does not exist
            RoundStateException: If the round is not PENDING
        """
        round_data = self.get_round(round_id)
        if round_data.status != ROUND_PENDING or round_data.has_pairings:
            raise RoundStateException(
                f"Pairings already generated for round {round_data.round_number}"
            )

        roster = list(players.values())
        standings = self.compute_standings(roster, exclude_round_id=round_id)
        swiss_players = [
            SwissPlayer.from_standing(standing)
            for standing in standings
            if players[standing.player_id].is_active
        ]

        generated = generate_pairings(
            swiss_players, self.prior_pairings(exclude_round_id=round_id)
        )

        mission = self._mission_random.choice(self.mission_pool)
        new_pairings = [
            Pairing(
                round_id=round_id,
                table_number=p.table_number,
                player1_id=p.player1_id,
                player2_id=p.player2_id,
                mission=mission,
                is_rematch=p.is_rematch,
            )
            for p in generated.pairings
        ]
        if generated.bye is not None:
            new_pairings.append(Pairing.bye(round_id, generated.bye))

        round_data.pairings = new_pairings
        round_data.status = ROUND_ACTIVE

        logger.info(
            f"Round {round_data.round_number}: {len(generated.pairings)} table(s) "
            f"playing {mission}, bye: {generated.bye or 'None'}"
        )
        if generated.rematches:
            logger.warning(
                f"Round {round_data.round_number} contains "
                f"{len(generated.rematches)} unavoidable rematch(es)"
            )
        return round_data

    def close_round(self, round_id: str) -> Round:
        """Mark an ACTIVE round COMPLETE.

        Raises:
            RoundNotFoundException: If the round does not exist
            RoundStateException: If the round is not ACTIVE or any game
                result is still unconfirmed
        """
        round_data = self.get_round(round_id)
        if round_data.status != ROUND_ACTIVE:
            raise RoundStateException(
                f"Cannot close round {round_data.round_number} "
                f"while it is {round_data.status}"
            )

        unconfirmed = round_data.unconfirmed_pairings()
        if unconfirmed:
            raise RoundStateException(
                f"{len(unconfirmed)} result(s) still pending confirmation"
            )

        round_data.status = ROUND_COMPLETE
        logger.info(f"Round {round_data.round_number} marked as completed")
        return round_data
