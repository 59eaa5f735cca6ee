"""Standings calculation for tournaments.

This module turns a roster and its confirmed results into a ranked standings
table. Ranking uses, in order: wins, VP margin, strength of schedule, total VP
and finally registration order.
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

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence, Tuple

from tabletopswiss.constants import RESULT_DRAW, RESULT_P1_WIN, RESULT_P2_WIN
from tabletopswiss.models.player import Player
from tabletopswiss.models.standing import ConfirmedResult, Standing
from tabletopswiss.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class _PlayerRecord:
    """Running totals for one player while results are folded in."""

    wins: int = 0
    losses: int = 0
    draws: int = 0
    total_vp: int = 0
    vp_against: int = 0
    # One entry per non-bye game, in the order the results were supplied
    opponents: List[str] = field(default_factory=list)

    @property
    def games_played(self) -> int:
        return self.wins + self.losses + self.draws

    @property
    def win_rate(self) -> float:
        if self.games_played == 0:
            return 0.0
        return self.wins / self.games_played

    @property
    def margin(self) -> int:
        return self.total_vp - self.vp_against


def standings_sort_key(standing: Standing) -> Tuple[int, int, float, int, int]:
    """Sort key for the standings total order (best first)."""
    return (
        -standing.wins,
        -standing.margin,
        -standing.strength_of_schedule,
        -standing.total_vp,
        standing.registered_at,
    )


class StandingsCalculator:
    """Calculates ranked standings from confirmed results.

    The calculation is a plain recomputation over the full result set on every
    call, so a disputed or re-reported result can never leave stale totals
    behind.
    """

    def compute(
        self, players: Sequence[Player], results: Iterable[ConfirmedResult]
    ) -> List[Standing]:
        """Compute the standings table.

        Args:
            players: Every player to rank, dropped players included
            results: Confirmed results (byes included)

        Returns:
            One Standing per player, best first, ranked 1..N
        """
        records: Dict[str, _PlayerRecord] = {p.id: _PlayerRecord() for p in players}

        for result in results:
            self._apply_result(result, records)

        standings = [
            Standing(
                player_id=player.id,
                display_name=player.display_name,
                faction=player.faction,
                registered_at=player.registered_at,
                wins=records[player.id].wins,
                losses=records[player.id].losses,
                draws=records[player.id].draws,
                total_vp=records[player.id].total_vp,
                vp_against=records[player.id].vp_against,
                strength_of_schedule=self._strength_of_schedule(
                    records[player.id], records
                ),
            )
            for player in players
        ]

        standings.sort(key=standings_sort_key)
        for rank, standing in enumerate(standings, start=1):
            standing.rank = rank

        logger.debug(f"Computed standings for {len(standings)} players")
        return standings

    def _apply_result(
        self, result: ConfirmedResult, records: Dict[str, _PlayerRecord]
    ) -> None:
        """Fold a single confirmed result into the running records."""
        first = records.get(result.player1_id)
        if first is None:
            logger.warning(
                f"Ignoring result for unknown player {result.player1_id}"
            )
            return

        if result.is_bye:
            # A bye is a win worth no VP and no margin
            first.wins += 1
            return

        second = records.get(result.player2_id) if result.player2_id else None

        first.total_vp += result.player1_vp
        first.vp_against += result.player2_vp
        if second is not None:
            second.total_vp += result.player2_vp
            second.vp_against += result.player1_vp
            first.opponents.append(result.player2_id)
            second.opponents.append(result.player1_id)

        if result.outcome == RESULT_P1_WIN:
            first.wins += 1
            if second is not None:
                second.losses += 1
        elif result.outcome == RESULT_P2_WIN:
            first.losses += 1
            if second is not None:
                second.wins += 1
        elif result.outcome == RESULT_DRAW:
            first.draws += 1
            if second is not None:
                second.draws += 1

    def _strength_of_schedule(
        self, record: _PlayerRecord, records: Dict[str, _PlayerRecord]
    ) -> float:
        """Average win rate of every opponent faced, repeats counted."""
        if not record.opponents:
            return 0.0
        total = sum(records[opp_id].win_rate for opp_id in record.opponents)
        return total / len(record.opponents)


def compute_standings(
    players: Sequence[Player], confirmed_results: Iterable[ConfirmedResult]
) -> List[Standing]:
    """Compute ranked standings for ``players`` from ``confirmed_results``."""
    return StandingsCalculator().compute(players, confirmed_results)
