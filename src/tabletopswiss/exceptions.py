"""Exceptions for use in Tabletop Swiss"""

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


# ========== Base Application Exception ==========


class TabletopSwissException(Exception):
    """Base exception for all Tabletop Swiss errors.

    All custom exceptions in the engine inherit from this class. The ``kind``
    attribute names the error family so a host can map it onto its own
    transport (HTTP status, RPC error code, ...).
    """

    kind = "ERROR"


# ========== Not Found ==========


class NotFoundException(TabletopSwissException):
    """Base exception for references to records that do not exist."""

    kind = "NOT_FOUND"


class TournamentNotFoundException(NotFoundException):
    """Raised when a requested tournament does not exist."""

    pass


class RoundNotFoundException(NotFoundException):
    """Raised when a requested round does not exist."""

    pass


class PairingNotFoundException(NotFoundException):
    """Raised when a requested pairing does not exist."""

    pass


class PlayerNotFoundException(NotFoundException):
    """Raised when a requested player cannot be found."""

    pass


# ========== Forbidden ==========


class ForbiddenException(TabletopSwissException):
    """Base exception for callers not allowed to perform an operation."""

    kind = "FORBIDDEN"


class NotOrganizerException(ForbiddenException):
    """Raised when an organizer-only operation is attempted by someone else."""

    pass


class NotParticipantException(ForbiddenException):
    """Raised when a caller acts on a pairing they are not playing in."""

    pass


# ========== Invalid Transition ==========


class InvalidTransitionException(TabletopSwissException):
    """Base exception for operations not allowed in the current state."""

    kind = "INVALID_TRANSITION"


class TournamentStateException(InvalidTransitionException):
    """Raised when tournament is in an invalid state for the requested operation."""

    pass


class RoundStateException(InvalidTransitionException):
    """Raised when a round is in an invalid state for the requested operation."""

    pass


class ResultStateException(InvalidTransitionException):
    """Raised when a pairing's result cannot be changed the requested way."""

    pass


# ========== Validation Exceptions ==========


class ValidationException(TabletopSwissException):
    """Base exception for validation errors."""

    kind = "INVALID_INPUT"


class InvalidScoreException(ValidationException):
    """Raised when a victory point total is negative or not an integer."""

    pass


class InvalidPlayerDataException(ValidationException):
    """Raised when player data is invalid or incomplete."""

    pass


class DuplicatePlayerException(ValidationException):
    """Raised when attempting to add a player that already exists."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(TabletopSwissException):
    """Base exception for configuration errors."""

    kind = "INVALID_CONFIGURATION"


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
