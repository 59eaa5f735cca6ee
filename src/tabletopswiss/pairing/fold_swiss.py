"""Fold Swiss Pairing System Implementation.

Players are ranked, split into groups sharing the same win-loss-draw record,
and each group is folded: the top half plays the bottom half positionally.
Rematches are avoided by searching the rest of the bottom half, and accepted
only when no unplayed opponent is left.
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
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple, Union

from tabletopswiss.constants import FIRST_TABLE_NUMBER
from tabletopswiss.models.standing import Standing
from tabletopswiss.models.tournament.pairing_history import (
    PairingHistory,
    PriorPairing,
)
from tabletopswiss.type_hints import Record
from tabletopswiss.utils import setup_logger

logger = setup_logger(__name__)


@dataclass(frozen=True)
class SwissPlayer:
    """An active player annotated with the standing fields pairing needs."""

    id: str
    wins: int = 0
    losses: int = 0
    draws: int = 0
    margin: int = 0
    strength_of_schedule: float = 0.0
    registered_at: int = 0

    @classmethod
    def from_standing(cls, standing: Standing) -> "SwissPlayer":
        return cls(
            id=standing.player_id,
            wins=standing.wins,
            losses=standing.losses,
            draws=standing.draws,
            margin=standing.margin,
            strength_of_schedule=standing.strength_of_schedule,
            registered_at=standing.registered_at,
        )

    @property
    def record(self) -> Record:
        return (self.wins, self.losses, self.draws)


@dataclass(frozen=True)
class GeneratedPairing:
    """A table assignment produced by the generator."""

    player1_id: str
    player2_id: str
    table_number: int
    # Set when the players had met before and no unplayed opponent was left
    is_rematch: bool = False


@dataclass
class PairingResult:
    """Pairings for one round plus the bye, if the field was odd."""

    pairings: List[GeneratedPairing] = field(default_factory=list)
    bye: Optional[str] = None

    @property
    def rematches(self) -> List[GeneratedPairing]:
        return [p for p in self.pairings if p.is_rematch]


PriorPairings = Union[PairingHistory, Iterable[PriorPairing]]


def sort_for_pairing(players: Iterable[SwissPlayer]) -> List[SwissPlayer]:
    """Sort by wins desc, margin desc, SOS desc, then registration order."""
    return sorted(
        players,
        key=lambda p: (-p.wins, -p.margin, -p.strength_of_schedule, p.registered_at),
    )


def _as_history(prior_pairings: PriorPairings) -> PairingHistory:
    if isinstance(prior_pairings, PairingHistory):
        return prior_pairings
    return PairingHistory.from_prior_pairings(prior_pairings)


def _group_by_record(players: List[SwissPlayer]) -> List[List[SwissPlayer]]:
    """Split ranked players into same-record groups, most wins first.

    Groups with equal wins keep the order in which they first appear in the
    ranking; players keep their ranked order inside each group.
    """
    groups: Dict[Record, List[SwissPlayer]] = {}
    for player in players:
        groups.setdefault(player.record, []).append(player)
    return sorted(groups.values(), key=lambda group: -group[0].wins)


def _first_unplayed(
    player: SwissPlayer,
    candidates: Sequence[SwissPlayer],
    used: Set[str],
    history: PairingHistory,
) -> Optional[SwissPlayer]:
    for candidate in candidates:
        if candidate.id in used:
            continue
        if not history.have_played(player.id, candidate.id):
            return candidate
    return None


def _first_available(
    candidates: Sequence[SwissPlayer], used: Set[str]
) -> Optional[SwissPlayer]:
    return next((c for c in candidates if c.id not in used), None)


def _pair_group(
    pool: List[SwissPlayer], history: PairingHistory, table_start: int
) -> Tuple[List[GeneratedPairing], List[SwissPlayer]]:
    """Fold-pair one group (plus overflow) and return what is left unpaired.

    Player ``i`` of the top half meets player ``half + i`` of the bottom half.
    When they already met, the first unplayed bottom-half player is taken
    instead, and failing that the first free bottom-half player, as an
    unavoidable rematch.
    """
    half = len(pool) // 2
    bottom = pool[half:]
    used: Set[str] = set()
    paired: List[GeneratedPairing] = []

    for i in range(half):
        top = pool[i]
        natural = pool[half + i]
        is_rematch = False

        if natural.id not in used and not history.have_played(top.id, natural.id):
            opponent = natural
        else:
            opponent = _first_unplayed(top, bottom, used, history)

        if opponent is None:
            opponent = _first_available(bottom, used)
            is_rematch = True
            logger.warning(
                f"Unavoidable rematch: {top.id} vs {opponent.id}, "
                "no unplayed opponent left in the group"
            )

        used.update((top.id, opponent.id))
        paired.append(
            GeneratedPairing(
                player1_id=top.id,
                player2_id=opponent.id,
                table_number=table_start + len(paired),
                is_rematch=is_rematch,
            )
        )

    unpaired = [p for p in pool if p.id not in used]
    return paired, unpaired


def _force_pair(
    players: List[SwissPlayer], history: PairingHistory, table_start: int
) -> List[GeneratedPairing]:
    """Pair leftover players consecutively. Never reached with sound grouping."""
    forced = []
    for i in range(0, len(players) - 1, 2):
        first, second = players[i], players[i + 1]
        forced.append(
            GeneratedPairing(
                player1_id=first.id,
                player2_id=second.id,
                table_number=table_start + len(forced),
                is_rematch=history.have_played(first.id, second.id),
            )
        )
    if forced:
        logger.warning(f"Force-paired {len(forced)} leftover pairing(s)")
    return forced


def generate_pairings(
    players: Sequence[SwissPlayer], prior_pairings: PriorPairings = ()
) -> PairingResult:
    """Generate the next round's pairings.

    Args:
        players: Active (non-dropped) players with their current standing
        prior_pairings: Every earlier pairing of the tournament, byes included

    Returns:
        PairingResult with tables numbered from 1 and at most one bye. With an
        odd field the lowest-ranked player gets the bye.
    """
    if not players:
        return PairingResult()
    if len(players) == 1:
        return PairingResult(bye=players[0].id)

    history = _as_history(prior_pairings)
    ranked = sort_for_pairing(players)

    bye: Optional[SwissPlayer] = None
    if len(ranked) % 2:
        bye = ranked.pop()

    pairings: List[GeneratedPairing] = []
    table_number = FIRST_TABLE_NUMBER
    overflow: List[SwissPlayer] = []

    for group in _group_by_record(ranked):
        paired, overflow = _pair_group(overflow + group, history, table_number)
        pairings.extend(paired)
        table_number += len(paired)

    pairings.extend(_force_pair(overflow, history, table_number))

    logger.info(
        f"Generated {len(pairings)} pairing(s) for {len(players)} players, "
        f"bye: {bye.id if bye else 'None'}"
    )
    return PairingResult(pairings=pairings, bye=bye.id if bye else None)
