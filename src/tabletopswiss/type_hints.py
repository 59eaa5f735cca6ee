"""Type hints used in Tabletop Swiss."""

from typing import Literal, Tuple

# Outcome type literals
Outcome = Literal["P1_WIN", "P2_WIN", "DRAW", "BYE"]

TournamentStatus = Literal[
    "DRAFT", "REGISTRATION", "CHECK_IN", "IN_PROGRESS", "COMPLETE"
]
RoundStatus = Literal["PENDING", "ACTIVE", "COMPLETE"]

# A player's (wins, losses, draws)
Record = Tuple[int, int, int]
