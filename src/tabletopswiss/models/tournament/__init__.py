"""Tournament records: configuration, rounds, pairings and pairing history.

The Tournament aggregate itself lives in
:mod:`tabletopswiss.models.tournament.tournament`.
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

from tabletopswiss.models.tournament.pairing import Pairing, Result
from tabletopswiss.models.tournament.pairing_history import (
    PairingHistory,
    PriorPairing,
)
from tabletopswiss.models.tournament.round_data import Round
from tabletopswiss.models.tournament.tournament_config import TournamentConfig

__all__ = [
    "Pairing",
    "PairingHistory",
    "PriorPairing",
    "Result",
    "Round",
    "TournamentConfig",
]
