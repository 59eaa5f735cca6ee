"""Shared helpers: logger setup and identifier generation."""

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

import logging
import os
import uuid
from typing import Optional

from tabletopswiss.constants import DEFAULT_LOG_LEVEL, LOG_FORMAT, LOG_LEVEL_ENV_VAR

PACKAGE_LOGGER_NAME = "tabletopswiss"

# The engine is embedded in a host application, so it never emits output
# unless the host (or the CLI) configures handlers.
logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())


def _level_from_env() -> int:
    name = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    return logging.getLevelName(DEFAULT_LOG_LEVEL)


def setup_logger(name: str) -> logging.Logger:
    """Return the module logger for ``name``.

    The package root logger takes its level from the
    ``TABLETOPSWISS_LOG_LEVEL`` environment variable; module loggers inherit it.
    """
    root = logging.getLogger(PACKAGE_LOGGER_NAME)
    if root.level == logging.NOTSET:
        root.setLevel(_level_from_env())
    return logging.getLogger(name)


def configure_logging(verbose: bool = False, level: Optional[int] = None) -> None:
    """Attach a stream handler for command-line use.

    Args:
        verbose: Log at DEBUG instead of the configured level
        level: Explicit level, overrides both ``verbose`` and the environment
    """
    if level is None:
        level = logging.DEBUG if verbose else _level_from_env()

    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger(PACKAGE_LOGGER_NAME).setLevel(level)


def generate_id(prefix: str) -> str:
    """Generate a unique identifier such as ``pairing-1f3a9c0d2b4e``."""
    return f"{prefix.lower()}-{uuid.uuid4().hex[:12]}"
