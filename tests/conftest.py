import pytest

from tabletopswiss.models.caller import Caller
from tabletopswiss.models.tournament.tournament import Tournament
from tabletopswiss.models.tournament.tournament_config import TournamentConfig
from tabletopswiss.pairing.fold_swiss import SwissPlayer


def swiss_player(number, wins=0, losses=0, draws=0, margin=0, sos=0.0):
    """A SwissPlayer with id ``p<number>`` registered at ``number``."""
    return SwissPlayer(
        id=f"p{number}",
        wins=wins,
        losses=losses,
        draws=draws,
        margin=margin,
        strength_of_schedule=sos,
        registered_at=number,
    )


@pytest.fixture
def organizer():
    return Caller.organizer()


@pytest.fixture
def make_tournament(organizer):
    """Build a tournament with ``num_players`` registered as p1..pN.

    The tournament is advanced to ``status`` (IN_PROGRESS by default).
    """

    def _make(num_players=4, total_rounds=3, status="IN_PROGRESS", mission_seed=7):
        tournament = Tournament(
            TournamentConfig(
                name="Test Event", total_rounds=total_rounds, mission_seed=mission_seed
            )
        )
        tournament.advance_status(organizer)
        for number in range(1, num_players + 1):
            tournament.register_player(
                f"Player {number}", "Iron Legion", player_id=f"p{number}"
            )
        while tournament.status != status:
            tournament.advance_status(organizer)
        return tournament

    return _make


@pytest.fixture
def active_round(make_tournament, organizer):
    """A 4 player tournament with round 1 paired: p1 v p3, p2 v p4."""
    tournament = make_tournament(num_players=4)
    round_data = tournament.create_round(organizer)
    tournament.generate_round_pairings(round_data.id, organizer)
    return tournament, round_data
