import threading

import pytest

from tabletopswiss.constants import DEFAULT_MISSION_POOL
from tabletopswiss.exceptions import (
    DuplicatePlayerException,
    InvalidConfigurationException,
    InvalidPlayerDataException,
    InvalidTransitionException,
    NotFoundException,
    NotOrganizerException,
    PlayerNotFoundException,
    RoundNotFoundException,
    RoundStateException,
    TournamentNotFoundException,
    TournamentStateException,
)
from tabletopswiss.models.caller import Caller
from tabletopswiss.models.tournament.tournament import Tournament
from tabletopswiss.models.tournament.tournament_config import TournamentConfig


def _game_pairings(round_data):
    return [(p.player1_id, p.player2_id) for p in round_data.game_pairings]


def _confirm(tournament, pairing, vp1=60, vp2=40):
    tournament.report_result(pairing.id, Caller.player(pairing.player1_id), vp1, vp2)
    tournament.confirm_result(pairing.id, Caller.player(pairing.player2_id))


# ========== Status lifecycle ==========


def test_status_advances_in_order(organizer):
    tournament = Tournament(TournamentConfig(name="League", total_rounds=3))
    seen = [tournament.status]
    for _ in range(4):
        seen.append(tournament.advance_status(organizer))
    assert seen == ["DRAFT", "REGISTRATION", "CHECK_IN", "IN_PROGRESS", "COMPLETE"]
    assert tournament.tournament_over


def test_no_transition_out_of_complete(make_tournament, organizer):
    tournament = make_tournament(status="COMPLETE")
    with pytest.raises(TournamentStateException):
        tournament.advance_status(organizer)
    assert tournament.status == "COMPLETE"


def test_only_organizer_advances(make_tournament):
    tournament = make_tournament(status="REGISTRATION")
    with pytest.raises(NotOrganizerException):
        tournament.advance_status(Caller.player("p1"))
    assert tournament.status == "REGISTRATION"


def test_delete_only_in_draft(organizer):
    tournament = Tournament(TournamentConfig(name="League", total_rounds=3))
    tournament.ensure_deletable(organizer)
    with pytest.raises(NotOrganizerException):
        tournament.ensure_deletable(Caller.player("p1"))
    tournament.advance_status(organizer)
    with pytest.raises(TournamentStateException):
        tournament.ensure_deletable(organizer)


@pytest.mark.parametrize(
    "kwargs",
    [{"total_rounds": 0}, {"total_rounds": 3, "mission_pool": []}],
)
def test_invalid_configuration(kwargs):
    with pytest.raises(InvalidConfigurationException):
        TournamentConfig(name="Broken", **kwargs)


# ========== Registration and roster ==========


def test_registration_only_while_open(make_tournament):
    tournament = make_tournament(num_players=0, status="CHECK_IN")
    with pytest.raises(TournamentStateException):
        tournament.register_player("Late", "Rustborn")
    assert tournament.players == {}


def test_registration_stamps_increase(make_tournament):
    tournament = make_tournament(num_players=3, status="REGISTRATION")
    player = tournament.register_player("Fourth", "Rustborn")
    assert player.registered_at == 4
    assert [p.id for p in tournament.get_player_list()][-1] == player.id


@pytest.mark.parametrize("name, faction", [("", "Rustborn"), ("Ann", "  ")])
def test_registration_requires_name_and_faction(make_tournament, name, faction):
    tournament = make_tournament(num_players=0, status="REGISTRATION")
    with pytest.raises(InvalidPlayerDataException):
        tournament.register_player(name, faction)
    assert tournament.players == {}


def test_duplicate_registration_rejected(make_tournament):
    tournament = make_tournament(num_players=2, status="REGISTRATION")
    with pytest.raises(DuplicatePlayerException):
        tournament.register_player("Again", "Rustborn", player_id="p1")
    with pytest.raises(DuplicatePlayerException):
        tournament.register_player("Clash", "Rustborn", registered_at=2)
    assert len(tournament.players) == 2


def test_check_in_by_player_or_organizer(make_tournament, organizer):
    tournament = make_tournament(num_players=3, status="CHECK_IN")
    tournament.check_in_player("p1", Caller.player("p1"))
    tournament.check_in_player("p2", organizer)
    with pytest.raises(NotOrganizerException):
        tournament.check_in_player("p3", Caller.player("p1"))
    assert [p.checked_in for p in tournament.get_player_list()] == [True, True, False]


def test_unknown_player_is_not_found_before_permission(make_tournament):
    tournament = make_tournament(num_players=2)
    with pytest.raises(PlayerNotFoundException):
        tournament.drop_player("nobody", Caller.player("p1"))


def test_drop_and_reinstate(make_tournament, organizer):
    tournament = make_tournament(num_players=4)
    tournament.drop_player("p4", Caller.player("p4"))
    assert [p.id for p in tournament.get_player_list(active_only=True)] == [
        "p1",
        "p2",
        "p3",
    ]

    with pytest.raises(NotOrganizerException):
        tournament.reinstate_player("p4", Caller.player("p4"))
    tournament.reinstate_player("p4", organizer)
    assert tournament.get_player("p4").is_active


# ========== Rounds ==========


def test_rounds_only_while_in_progress(make_tournament, organizer):
    tournament = make_tournament(status="CHECK_IN")
    with pytest.raises(TournamentStateException):
        tournament.create_round(organizer)
    assert tournament.rounds == []


def test_round_numbers_and_cap(make_tournament, organizer):
    tournament = make_tournament(total_rounds=2)
    first = tournament.create_round(organizer)
    second = tournament.create_round(organizer)
    assert (first.round_number, second.round_number) == (1, 2)
    assert first.status == "PENDING"
    with pytest.raises(TournamentStateException):
        tournament.create_round(organizer)


def test_only_organizer_creates_rounds(make_tournament):
    tournament = make_tournament()
    with pytest.raises(NotOrganizerException):
        tournament.create_round(Caller.player("p1"))


def test_generate_pairings_round_one(active_round):
    tournament, round_data = active_round
    assert round_data.status == "ACTIVE"
    assert _game_pairings(round_data) == [("p1", "p3"), ("p2", "p4")]
    missions = {p.mission for p in round_data.pairings}
    assert len(missions) == 1
    assert missions <= set(DEFAULT_MISSION_POOL)
    assert round_data.bye_pairing is None


def test_bye_pairing_is_pre_confirmed(make_tournament, organizer):
    tournament = make_tournament(num_players=3)
    round_data = tournament.create_round(organizer)
    tournament.generate_round_pairings(round_data.id, organizer)

    bye = round_data.bye_pairing
    assert bye.player1_id == "p3"
    assert bye.player2_id is None
    assert bye.table_number == 0
    assert bye.mission == "BYE"
    assert bye.result.outcome == "BYE"
    assert (bye.result.player1_vp, bye.result.player2_vp) == (0, 0)
    assert bye.result.confirmed


def test_pairings_generated_once(active_round, organizer):
    tournament, round_data = active_round
    before = [p.id for p in round_data.pairings]
    with pytest.raises(RoundStateException):
        tournament.generate_round_pairings(round_data.id, organizer)
    assert [p.id for p in round_data.pairings] == before


def test_generate_pairings_checks_round_before_permission(make_tournament):
    tournament = make_tournament()
    with pytest.raises(RoundNotFoundException):
        tournament.generate_round_pairings("round-missing", Caller.player("p1"))


def test_concurrent_generation_pairs_round_once(make_tournament, organizer):
    tournament = make_tournament(num_players=8)
    round_data = tournament.create_round(organizer)
    outcomes = []

    def worker():
        try:
            tournament.generate_round_pairings(round_data.id, organizer)
            outcomes.append("ok")
        except RoundStateException:
            outcomes.append("rejected")

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert sorted(outcomes) == ["ok"] + ["rejected"] * 7
    assert len(round_data.game_pairings) == 4


def test_close_round_waits_for_confirmation(active_round, organizer):
    tournament, round_data = active_round
    first, second = round_data.game_pairings

    _confirm(tournament, first)
    tournament.report_result(second.id, Caller.player("p2"), 50, 50)

    with pytest.raises(InvalidTransitionException, match="1 result"):
        tournament.close_round(round_data.id, organizer)
    assert round_data.status == "ACTIVE"

    tournament.confirm_result(second.id, Caller.player("p4"))
    tournament.close_round(round_data.id, organizer)
    assert round_data.status == "COMPLETE"


def test_close_round_requires_active(make_tournament, organizer):
    tournament = make_tournament()
    round_data = tournament.create_round(organizer)
    with pytest.raises(RoundStateException):
        tournament.close_round(round_data.id, organizer)
    assert round_data.status == "PENDING"


def test_only_organizer_closes_rounds(active_round):
    tournament, round_data = active_round
    for pairing in round_data.game_pairings:
        _confirm(tournament, pairing)
    with pytest.raises(NotOrganizerException):
        tournament.close_round(round_data.id, Caller.player("p1"))
    assert round_data.status == "ACTIVE"


def test_second_round_uses_standings_and_history(active_round, organizer):
    tournament, round_data = active_round
    for pairing in round_data.game_pairings:
        _confirm(tournament, pairing)
    tournament.close_round(round_data.id, organizer)

    second = tournament.create_round(organizer)
    tournament.generate_round_pairings(second.id, organizer)
    # p1 and p2 won round one, p3 and p4 lost
    assert _game_pairings(second) == [("p1", "p2"), ("p3", "p4")]
    assert len(tournament.prior_pairings()) == 4
    assert len(tournament.prior_pairings(exclude_round_id=second.id)) == 2


def test_unconfirmed_results_do_not_count(active_round, organizer):
    tournament, round_data = active_round
    first = round_data.game_pairings[0]
    tournament.report_result(first.id, Caller.player("p1"), 80, 10)
    assert all(s.wins == 0 for s in tournament.standings())

    tournament.confirm_result(first.id, Caller.player("p3"))
    standings = tournament.standings()
    assert standings[0].player_id == "p1"
    assert standings[0].wins == 1


def test_dropped_players_skip_pairing_but_keep_standing(active_round, organizer):
    tournament, round_data = active_round
    for pairing in round_data.game_pairings:
        _confirm(tournament, pairing)
    tournament.close_round(round_data.id, organizer)
    tournament.drop_player("p2", Caller.player("p2"))

    second = tournament.create_round(organizer)
    tournament.generate_round_pairings(second.id, organizer)
    placed = {pid for p in second.pairings for pid in p.participants}
    assert placed == {"p1", "p3", "p4"}
    assert second.bye_pairing is not None
    assert "p2" in {s.player_id for s in tournament.standings()}


def test_lookup_errors_are_not_found(make_tournament):
    tournament = make_tournament()
    with pytest.raises(NotFoundException):
        tournament.get_round("round-missing")
    with pytest.raises(NotFoundException):
        tournament.get_pairing("pairing-missing")
    with pytest.raises(NotFoundException):
        tournament.report_result("pairing-missing", Caller.player("p1"), 1, 0)


def test_serialization_restores_state(active_round, organizer):
    tournament, round_data = active_round
    _confirm(tournament, round_data.game_pairings[0])

    restored = Tournament.from_dict(tournament.to_dict())
    assert restored.id == tournament.id
    assert restored.status == "IN_PROGRESS"
    assert [p.id for p in restored.get_player_list()] == ["p1", "p2", "p3", "p4"]
    assert restored.get_round(round_data.id).status == "ACTIVE"
    assert [s.player_id for s in restored.standings()] == [
        s.player_id for s in tournament.standings()
    ]


def test_restored_rounds_must_belong_to_the_tournament(active_round):
    tournament, _ = active_round
    data = tournament.to_dict()
    data["rounds"][0]["tournament_id"] = "tournament-elsewhere"
    with pytest.raises(TournamentNotFoundException) as excinfo:
        Tournament.from_dict(data)
    assert excinfo.value.kind == "NOT_FOUND"
