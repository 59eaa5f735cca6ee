"""Tabletop Swiss: a Swiss-system tournament engine for tabletop games.

Pairs players by record, ranks them by wins, VP margin and strength of
schedule, and runs the tournament, round and result lifecycle on behalf of a
host application.
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
from tabletopswiss.controllers.standings import StandingsCalculator, compute_standings
from tabletopswiss.exceptions import (
    ConfigurationException,
    DuplicatePlayerException,
    ForbiddenException,
    InvalidConfigurationException,
    InvalidPlayerDataException,
    InvalidScoreException,
    InvalidTransitionException,
    NotFoundException,
    NotOrganizerException,
    NotParticipantException,
    PairingNotFoundException,
    PlayerNotFoundException,
    ResultStateException,
    RoundNotFoundException,
    RoundStateException,
    TabletopSwissException,
    TournamentNotFoundException,
    TournamentStateException,
    ValidationException,
)
from tabletopswiss.models.caller import Caller
from tabletopswiss.models.player import Player
from tabletopswiss.models.standing import ConfirmedResult, Standing
from tabletopswiss.models.tournament.pairing import Pairing, Result
from tabletopswiss.models.tournament.pairing_history import (
    PairingHistory,
    PriorPairing,
)
from tabletopswiss.models.tournament.round_data import Round
from tabletopswiss.models.tournament.tournament import Tournament
from tabletopswiss.models.tournament.tournament_config import TournamentConfig
from tabletopswiss.pairing.fold_swiss import (
    GeneratedPairing,
    PairingResult,
    SwissPlayer,
    generate_pairings,
)

__version__ = "0.1.0"

__all__ = [
    "Caller",
    "ConfigurationException",
    "ConfirmedResult",
    "DuplicatePlayerException",
    "ForbiddenException",
    "GeneratedPairing",
    "InvalidConfigurationException",
    "InvalidPlayerDataException",
    "InvalidScoreException",
    "InvalidTransitionException",
    "NotFoundException",
    "NotOrganizerException",
    "NotParticipantException",
    "Pairing",
    "PairingHistory",
    "PairingNotFoundException",
    "PairingResult",
    "Player",
    "PlayerNotFoundException",
    "PriorPairing",
    "Result",
    "ResultStateException",
    "Round",
    "RoundNotFoundException",
    "RoundStateException",
    "Standing",
    "StandingsCalculator",
    "SwissPlayer",
    "TabletopSwissException",
    "Tournament",
    "TournamentConfig",
    "TournamentNotFoundException",
    "TournamentStateException",
    "ValidationException",
    "compute_standings",
    "derive_result",
    "generate_pairings",
]
