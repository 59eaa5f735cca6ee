"""Outcome derivation from victory point totals."""

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

from tabletopswiss.constants import RESULT_DRAW, RESULT_P1_WIN, RESULT_P2_WIN
from tabletopswiss.type_hints import Outcome


def derive_result(score_a: int, score_b: int) -> Outcome:
    """Map two VP totals to the game outcome.

    Higher total wins; equal totals (0-0 included) are a draw.

    >>> derive_result(72, 45)
    'P1_WIN'
    >>> derive_result(60, 60)
    'DRAW'
    """
    if score_a > score_b:
        return RESULT_P1_WIN
    if score_a < score_b:
        return RESULT_P2_WIN
    return RESULT_DRAW
