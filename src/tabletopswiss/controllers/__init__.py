"""Pure tournament computations: result derivation and standings."""

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
from tabletopswiss.controllers.standings import (
    StandingsCalculator,
    compute_standings,
    standings_sort_key,
)

__all__ = [
    "StandingsCalculator",
    "compute_standings",
    "derive_result",
    "standings_sort_key",
]
