"""Result recording and validation for tournaments.

This module implements the per-pairing result protocol: a participant
reports, the opponent confirms, either side (or the organizer) may dispute,
and the organizer may override.
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

from tabletopswiss.controllers.result import derive_result
from tabletopswiss.exceptions import (
    NotOrganizerException,
    NotParticipantException,
    ResultStateException,
)
from tabletopswiss.models.caller import Caller
from tabletopswiss.models.tournament.pairing import Pairing, Result
from tabletopswiss.utils import setup_logger
from tabletopswiss.utils.validation import require_vp

logger = setup_logger(__name__)


class ResultRecorder:
    """Handles reporting, confirming, disputing and overriding results.

    Every method checks permissions and state before touching the pairing,
    so a rejected call leaves it unchanged. Results stay correctable after
    their round is closed; an unconfirmed correction drops out of standings
    until it is confirmed again.
    """

    def report(
        self, pairing: Pairing, caller: Caller, player1_vp: int, player2_vp: int
    ) -> Pairing:
        """Record a participant's score, unconfirmed.

        A new report always resets confirmation, even over a confirmed result.

        Raises:
            NotParticipantException: If the caller does not play in the pairing
            ResultStateException: If the pairing is a bye
            InvalidScoreException: If a VP total is negative or not an integer
        """
        self._require_participant(pairing, caller, "report a result")
        if pairing.is_bye:
            raise ResultStateException("Cannot report a result for a bye")

        player1_vp = require_vp(player1_vp, "Player 1 VP")
        player2_vp = require_vp(player2_vp, "Player 2 VP")

        pairing.result = Result(
            player1_vp=player1_vp,
            player2_vp=player2_vp,
            outcome=derive_result(player1_vp, player2_vp),
            confirmed=False,
            reported_by=caller.player_id,
        )
        logger.debug(
            f"Table {pairing.table_number}: {caller.player_id} reported "
            f"{player1_vp}-{player2_vp} ({pairing.result.outcome})"
        )
        return pairing

    def confirm(self, pairing: Pairing, caller: Caller) -> Pairing:
        """Confirm a reported result.

        The opponent of the reporter is expected to confirm. Either
        participant is accepted, since the reporter may have been recorded
        under a different identity.

        Raises:
            NotParticipantException: If the caller does not play in the pairing
            ResultStateException: If there is no result to confirm
        """
        self._require_participant(pairing, caller, "confirm a result")
        if pairing.result is None:
            raise ResultStateException("No result to confirm")

        by_reporter = caller.player_id == pairing.result.reported_by
        pairing.result.confirmed = True
        logger.debug(
            f"Table {pairing.table_number}: result confirmed by {caller.player_id}"
            + (" (the reporter)" if by_reporter else "")
        )
        return pairing

    def dispute(self, pairing: Pairing, caller: Caller) -> Pairing:
        """Clear a result so it can be reported again.

        Raises:
            NotParticipantException: If the caller is neither a participant
                nor the organizer
            ResultStateException: If the pairing is a bye
        """
        if not (pairing.has_participant(caller.player_id) or caller.is_organizer):
            raise NotParticipantException(
                "Only participants or the organizer can dispute a result"
            )
        if pairing.is_bye:
            raise ResultStateException("Cannot dispute a bye")

        pairing.result = None
        logger.info(f"Table {pairing.table_number}: result disputed and cleared")
        return pairing

    def override(
        self, pairing: Pairing, caller: Caller, player1_vp: int, player2_vp: int
    ) -> Pairing:
        """Force a confirmed score as the organizer.

        Raises:
            NotOrganizerException: If the caller is not the organizer
            ResultStateException: If the pairing is a bye
            InvalidScoreException: If a VP total is negative or not an integer
        """
        if not caller.is_organizer:
            raise NotOrganizerException("Only the organizer can override a result")
        if pairing.is_bye:
            raise ResultStateException("Cannot override a bye")

        player1_vp = require_vp(player1_vp, "Player 1 VP")
        player2_vp = require_vp(player2_vp, "Player 2 VP")

        reported_by = pairing.result.reported_by if pairing.result else None
        pairing.result = Result(
            player1_vp=player1_vp,
            player2_vp=player2_vp,
            outcome=derive_result(player1_vp, player2_vp),
            confirmed=True,
            reported_by=reported_by,
            overridden=True,
        )
        logger.info(
            f"Table {pairing.table_number}: organizer override "
            f"{player1_vp}-{player2_vp} ({pairing.result.outcome})"
        )
        return pairing

    def _require_participant(self, pairing: Pairing, caller: Caller, action: str) -> None:
        if not pairing.has_participant(caller.player_id):
            raise NotParticipantException(
                f"Only players in this pairing can {action}"
            )
