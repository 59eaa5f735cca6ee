"""Pairing Checker - internal validation system for fold Swiss pairings.

This module checks generated rounds against the rules every round must obey
(each active player placed exactly once, a bye only for odd fields and only
for the lowest-ranked player, sequential tables) and flags rematches.
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

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

from tabletopswiss.constants import FIRST_TABLE_NUMBER
from tabletopswiss.controllers.standings import compute_standings
from tabletopswiss.models.player import Player
from tabletopswiss.models.tournament.pairing_history import PairingHistory
from tabletopswiss.models.tournament.round_data import Round
from tabletopswiss.pairing.fold_swiss import (
    GeneratedPairing,
    PairingResult,
    PriorPairings,
    SwissPlayer,
    sort_for_pairing,
)
from tabletopswiss.utils import setup_logger

logger = setup_logger(__name__)


class CriterionStatus(Enum):
    """Status of criterion validation."""

    COMPLIANT = "COMPLIANT"
    VIOLATION = "VIOLATION"
    NOT_APPLICABLE = "NOT_APPLICABLE"


class ViolationType(Enum):
    """Types of criterion violations."""

    ABSOLUTE = "ABSOLUTE"  # P1-P6: must not violate
    QUALITY = "QUALITY"  # P7: should minimize


@dataclass
class CriterionResult:
    """Result of validating a single criterion."""

    criterion: str
    status: CriterionStatus
    violation_type: Optional[ViolationType] = None
    description: str = ""
    details: Dict[str, object] = field(default_factory=dict)

    @property
    def is_violation(self) -> bool:
        return self.status == CriterionStatus.VIOLATION


@dataclass
class ValidationReport:
    """Complete validation report for one round or a whole tournament."""

    total_criteria: int
    compliant_count: int
    violations: List[CriterionResult]
    overall_status: CriterionStatus
    summary: str
    quality_warnings: List[CriterionResult] = field(default_factory=list)
    criteria_results: List[CriterionResult] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return self.overall_status != CriterionStatus.VIOLATION

    @property
    def compliance_percentage(self) -> float:
        """Calculate compliance percentage."""
        if self.total_criteria == 0:
            return 100.0
        return (self.compliant_count / self.total_criteria) * 100.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "overall_status": self.overall_status.value,
            "summary": self.summary,
            "total_criteria": self.total_criteria,
            "compliant_count": self.compliant_count,
            "violations": [_criterion_to_dict(r) for r in self.violations],
            "quality_warnings": [_criterion_to_dict(r) for r in self.quality_warnings],
        }


def _criterion_to_dict(result: CriterionResult) -> Dict[str, Any]:
    return {
        "criterion": result.criterion,
        "status": result.status.value,
        "description": result.description,
        "details": result.details,
    }


def _compliant(criterion: str, description: str) -> CriterionResult:
    return CriterionResult(
        criterion=criterion,
        status=CriterionStatus.COMPLIANT,
        description=description,
    )


def _violation(
    criterion: str,
    description: str,
    violation_type: ViolationType = ViolationType.ABSOLUTE,
    **details: object,
) -> CriterionResult:
    return CriterionResult(
        criterion=criterion,
        status=CriterionStatus.VIOLATION,
        violation_type=violation_type,
        description=description,
        details=details,
    )


class PairingChecker:
    """Validates generated rounds.

    Criteria
    --------
    P1  every active player is placed exactly once, and nobody else is
    P2  no player is paired against themself
    P3  a bye is given if and only if the field is odd
    P4  the bye goes to the lowest-ranked player
    P5  tables are numbered 1..N without gaps
    P6  every rematch is flagged as one
    P7  no rematches (quality)
    """

    def check_p1_completeness(
        self, result: PairingResult, players: Sequence[SwissPlayer]
    ) -> CriterionResult:
        """P1: every active player appears exactly once."""
        placed = Counter()
        for pairing in result.pairings:
            placed[pairing.player1_id] += 1
            placed[pairing.player2_id] += 1
        if result.bye is not None:
            placed[result.bye] += 1

        expected = {p.id for p in players}
        duplicated = sorted(pid for pid, count in placed.items() if count > 1)
        missing = sorted(expected - set(placed))
        unknown = sorted(set(placed) - expected)

        if duplicated or missing or unknown:
            return _violation(
                "P1",
                f"{len(missing)} missing, {len(duplicated)} duplicated, "
                f"{len(unknown)} unknown player(s)",
                missing=missing,
                duplicated=duplicated,
                unknown=unknown,
            )
        return _compliant("P1", f"All {len(expected)} players placed exactly once")

    def check_p2_no_self_pairing(self, result: PairingResult) -> CriterionResult:
        """P2: player1 and player2 always differ."""
        for pairing in result.pairings:
            if pairing.player1_id == pairing.player2_id:
                return _violation(
                    "P2",
                    f"Table {pairing.table_number}: {pairing.player1_id} paired "
                    "against themself",
                    table_number=pairing.table_number,
                )
        return _compliant("P2", "No self pairings")

    def check_p3_bye_parity(
        self, result: PairingResult, players: Sequence[SwissPlayer]
    ) -> CriterionResult:
        """P3: bye present iff the active field is odd."""
        odd = len(players) % 2 == 1
        if odd != (result.bye is not None):
            return _violation(
                "P3",
                f"{len(players)} active players but bye is {result.bye}",
                player_count=len(players),
                bye=result.bye,
            )
        return _compliant("P3", "Bye matches field parity")

    def check_p4_bye_lowest_ranked(
        self, result: PairingResult, players: Sequence[SwissPlayer]
    ) -> CriterionResult:
        """P4: the bye is the last player in pairing order."""
        if result.bye is None:
            return CriterionResult(
                criterion="P4",
                status=CriterionStatus.NOT_APPLICABLE,
                description="No bye assigned in this round",
            )

        lowest = sort_for_pairing(players)[-1].id if players else None
        if result.bye != lowest:
            return _violation(
                "P4",
                f"Bye given to {result.bye}, lowest-ranked player is {lowest}",
                bye=result.bye,
                expected=lowest,
            )
        return _compliant("P4", f"Bye given to lowest-ranked player {lowest}")

    def check_p5_table_numbering(self, result: PairingResult) -> CriterionResult:
        """P5: tables run 1..N in pairing order."""
        tables = [p.table_number for p in result.pairings]
        expected = list(range(FIRST_TABLE_NUMBER, FIRST_TABLE_NUMBER + len(tables)))
        if tables != expected:
            return _violation(
                "P5",
                "Table numbers are not sequential from 1",
                tables=tables,
            )
        return _compliant("P5", f"Tables numbered 1..{len(tables)}")

    def check_rematches(
        self, result: PairingResult, history: PairingHistory
    ) -> List[CriterionResult]:
        """P6 and P7: rematches, and whether each one is flagged."""
        rematches = [
            p
            for p in result.pairings
            if history.have_played(p.player1_id, p.player2_id)
        ]
        unflagged = [p for p in rematches if not p.is_rematch]

        if unflagged:
            p6 = _violation(
                "P6",
                f"{len(unflagged)} rematch(es) not flagged",
                tables=[p.table_number for p in unflagged],
            )
        else:
            p6 = _compliant("P6", "All rematches flagged")

        if rematches:
            p7 = _violation(
                "P7",
                f"{len(rematches)} rematch(es) in round",
                ViolationType.QUALITY,
                pairs=[[p.player1_id, p.player2_id] for p in rematches],
            )
        else:
            p7 = _compliant("P7", "No rematches")
        return [p6, p7]

    def validate_round_pairings(
        self,
        result: PairingResult,
        players: Sequence[SwissPlayer],
        prior_pairings: PriorPairings = (),
    ) -> ValidationReport:
        """Validate one generated round.

        Args:
            result: The generated pairings and bye
            players: The active players the round was generated for
            prior_pairings: Pairings of every earlier round
        """
        history = (
            prior_pairings
            if isinstance(prior_pairings, PairingHistory)
            else PairingHistory.from_prior_pairings(prior_pairings)
        )

        all_results = [
            self.check_p1_completeness(result, players),
            self.check_p2_no_self_pairing(result),
            self.check_p3_bye_parity(result, players),
            self.check_p4_bye_lowest_ranked(result, players),
            self.check_p5_table_numbering(result),
        ]
        all_results.extend(self.check_rematches(result, history))

        return self._build_report(all_results)

    def validate_tournament(self, tournament_data: Dict[str, Any]) -> ValidationReport:
        """Validate every paired round of a serialized tournament.

        Each round is checked against the standings and history built from
        the rounds before it, which is what the round was generated from when
        rounds are played in order. A round's expected field is every player
        not currently dropped, plus dropped players the round placed, since
        they may have dropped after it was paired. The stored rematch flags
        are checked against the rebuilt history.
        """
        logger.info("Starting tournament-wide pairing validation")

        players = [Player.from_dict(p) for p in tournament_data.get("players", [])]
        rounds = sorted(
            (Round.from_dict(r) for r in tournament_data.get("rounds", [])),
            key=lambda r: r.round_number,
        )
        if not players or not any(r.has_pairings for r in rounds):
            return ValidationReport(
                total_criteria=0,
                compliant_count=0,
                violations=[],
                overall_status=CriterionStatus.NOT_APPLICABLE,
                summary="No paired rounds to validate",
            )

        dropped = {p.id: p.dropped for p in players}
        all_results: List[CriterionResult] = []
        history = PairingHistory()
        confirmed = []

        for round_data in rounds:
            if not round_data.has_pairings:
                continue

            standings = compute_standings(players, confirmed)
            placed = {pid for p in round_data.pairings for pid in p.participants}
            field_players = [
                SwissPlayer.from_standing(s)
                for s in standings
                if not dropped[s.player_id] or s.player_id in placed
            ]
            result = _to_pairing_result(round_data)

            round_report = self.validate_round_pairings(result, field_players, history)
            for criterion in round_report.criteria_results:
                criterion.details.setdefault("round", round_data.round_number)
            all_results.extend(round_report.criteria_results)

            for pairing in round_data.pairings:
                history.add_pairing(pairing.player1_id, pairing.player2_id)
                result_row = pairing.to_confirmed_result()
                if result_row is not None:
                    confirmed.append(result_row)

        return self._build_report(all_results)

    def _build_report(self, all_results: List[CriterionResult]) -> ValidationReport:
        compliant_count = sum(
            1 for r in all_results if r.status == CriterionStatus.COMPLIANT
        )
        absolute_violations = [
            r
            for r in all_results
            if r.is_violation and r.violation_type == ViolationType.ABSOLUTE
        ]
        quality_warnings = [
            r
            for r in all_results
            if r.is_violation and r.violation_type == ViolationType.QUALITY
        ]

        overall_status = (
            CriterionStatus.VIOLATION
            if absolute_violations
            else CriterionStatus.COMPLIANT
        )

        if overall_status == CriterionStatus.COMPLIANT:
            summary = (
                f"All absolute criteria satisfied; {len(quality_warnings)} "
                "quality criteria flagged"
            )
        else:
            summary = (
                f"Absolute violations detected - {len(absolute_violations)} "
                f"criteria failed; {len(quality_warnings)} quality warnings"
            )

        logger.info("Pairing validation complete: %s", summary)

        return ValidationReport(
            total_criteria=len(all_results),
            compliant_count=compliant_count,
            violations=absolute_violations,
            quality_warnings=quality_warnings,
            overall_status=overall_status,
            summary=summary,
            criteria_results=all_results,
        )


def _to_pairing_result(round_data: Round) -> PairingResult:
    """Rebuild the generator output a stored round was created from."""
    games = [
        GeneratedPairing(
            player1_id=p.player1_id,
            player2_id=p.player2_id,
            table_number=p.table_number,
            is_rematch=p.is_rematch,
        )
        for p in round_data.game_pairings
    ]
    bye = round_data.bye_pairing
    return PairingResult(pairings=games, bye=bye.player1_id if bye else None)


def validate_round(
    result: PairingResult,
    players: Sequence[SwissPlayer],
    prior_pairings: PriorPairings = (),
) -> ValidationReport:
    """Quick validation function for one generated round."""
    return PairingChecker().validate_round_pairings(result, players, prior_pairings)
