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

# --- Result outcome tags ---
RESULT_P1_WIN = "P1_WIN"
RESULT_P2_WIN = "P2_WIN"
RESULT_DRAW = "DRAW"
RESULT_BYE = "BYE"

# Byes sit at table 0 and carry their own mission label
BYE_TABLE_NUMBER = 0
BYE_MISSION = "BYE"
FIRST_TABLE_NUMBER = 1

# --- Tournament status ---
TOURNAMENT_DRAFT = "DRAFT"
TOURNAMENT_REGISTRATION = "REGISTRATION"
TOURNAMENT_CHECK_IN = "CHECK_IN"
TOURNAMENT_IN_PROGRESS = "IN_PROGRESS"
TOURNAMENT_COMPLETE = "COMPLETE"

# Linear lifecycle: each status maps to the only status it may advance to
TOURNAMENT_LIFECYCLE = {
    TOURNAMENT_DRAFT: TOURNAMENT_REGISTRATION,
    TOURNAMENT_REGISTRATION: TOURNAMENT_CHECK_IN,
    TOURNAMENT_CHECK_IN: TOURNAMENT_IN_PROGRESS,
    TOURNAMENT_IN_PROGRESS: TOURNAMENT_COMPLETE,
}

TOURNAMENT_STATUSES = (
    TOURNAMENT_DRAFT,
    TOURNAMENT_REGISTRATION,
    TOURNAMENT_CHECK_IN,
    TOURNAMENT_IN_PROGRESS,
    TOURNAMENT_COMPLETE,
)

# --- Round status ---
ROUND_PENDING = "PENDING"
ROUND_ACTIVE = "ACTIVE"
ROUND_COMPLETE = "COMPLETE"

# --- Missions ---
DEFAULT_MISSION_POOL = [
    "Sweeping Engagement",
    "Priority Targets",
    "Scorched Earth",
    "Search and Destroy",
    "Take and Hold",
    "Vital Ground",
]

# --- Logging ---
LOG_LEVEL_ENV_VAR = "TABLETOPSWISS_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
