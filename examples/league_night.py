"""Example script running a small league night through the public API.

Shows the full organizer and player flow: registration, check-in, pairing,
reporting with a dispute and an override, round closure and standings.
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

from tabletopswiss import (
    Caller,
    InvalidTransitionException,
    Tournament,
    TournamentConfig,
)
from tabletopswiss.utils import configure_logging

ENTRANTS = [
    ("Ada", "Iron Legion"),
    ("Bram", "Verdant Host"),
    ("Cleo", "Ashen Court"),
    ("Dov", "Tidebound"),
    ("Esme", "Rustborn"),
]


def example_league_night():
    """Play two rounds with five players."""
    print("\n" + "=" * 60)
    print("Example: League night")
    print("=" * 60)

    organizer = Caller.organizer()
    tournament = Tournament(
        TournamentConfig(name="League Night", total_rounds=2, mission_seed=1)
    )

    tournament.advance_status(organizer)
    players = [tournament.register_player(name, faction) for name, faction in ENTRANTS]
    tournament.advance_status(organizer)
    for player in players:
        tournament.check_in_player(player.id, Caller.player(player.id))
    tournament.advance_status(organizer)

    for round_index in range(2):
        round_data = tournament.create_round(organizer)
        tournament.generate_round_pairings(round_data.id, organizer)
        print(f"\nRound {round_data.round_number}: {round_data.game_pairings[0].mission}")

        for pairing in round_data.game_pairings:
            p1, p2 = Caller.player(pairing.player1_id), Caller.player(pairing.player2_id)
            tournament.report_result(pairing.id, p1, 65, 48)

            if pairing.table_number == 1 and round_index == 0:
                # The opponent disagrees; the organizer settles it
                tournament.dispute_result(pairing.id, p2)
                try:
                    tournament.close_round(round_data.id, organizer)
                except InvalidTransitionException as e:
                    print(f"  Cannot close yet: {e}")
                tournament.override_result(pairing.id, organizer, 55, 55)
            else:
                tournament.confirm_result(pairing.id, p2)

            result = pairing.result
            print(
                f"  Table {pairing.table_number}: "
                f"{tournament.get_player(pairing.player1_id).display_name} "
                f"{result.player1_vp}-{result.player2_vp} "
                f"{tournament.get_player(pairing.player2_id).display_name}"
                f"{' (override)' if result.overridden else ''}"
            )

        if round_data.bye_pairing:
            bye_player = tournament.get_player(round_data.bye_pairing.player1_id)
            print(f"  Bye: {bye_player.display_name}")

        tournament.close_round(round_data.id, organizer)

    tournament.advance_status(organizer)

    print("\nFinal standings:")
    for standing in tournament.standings():
        print(
            f"  {standing.rank}. {standing.display_name:6} {standing.record:>7} "
            f"margin {standing.margin:+d}"
        )


if __name__ == "__main__":
    configure_logging()
    example_league_night()
