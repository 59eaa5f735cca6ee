import logging

from conftest import swiss_player

from tabletopswiss.models.tournament.pairing_history import PairingHistory, PriorPairing
from tabletopswiss.pairing.fold_swiss import generate_pairings, sort_for_pairing


def _pairs(result):
    return [(p.player1_id, p.player2_id) for p in result.pairings]


def _all_placed(result):
    placed = [pid for p in result.pairings for pid in (p.player1_id, p.player2_id)]
    if result.bye:
        placed.append(result.bye)
    return placed


def test_empty_field():
    result = generate_pairings([])
    assert result.pairings == []
    assert result.bye is None


def test_single_player_gets_the_bye():
    result = generate_pairings([swiss_player(1)])
    assert result.pairings == []
    assert result.bye == "p1"


def test_four_players_round_one_folds():
    players = [swiss_player(n) for n in (1, 2, 3, 4)]
    result = generate_pairings(players)
    assert _pairs(result) == [("p1", "p3"), ("p2", "p4")]
    assert [p.table_number for p in result.pairings] == [1, 2]
    assert result.bye is None


def test_three_players_bye_to_last_registered():
    players = [swiss_player(n) for n in (1, 2, 3)]
    result = generate_pairings(players)
    assert _pairs(result) == [("p1", "p2")]
    assert result.bye == "p3"


def test_input_order_does_not_matter():
    players = [swiss_player(n) for n in (4, 2, 3, 1)]
    assert _pairs(generate_pairings(players)) == [("p1", "p3"), ("p2", "p4")]


def test_bye_goes_to_lowest_ranked_not_last_registered():
    players = [
        swiss_player(1, losses=1, margin=-30),
        swiss_player(2, wins=1, margin=30),
        swiss_player(3, wins=1, margin=10),
    ]
    result = generate_pairings(players)
    assert result.bye == "p1"
    assert _pairs(result) == [("p2", "p3")]


def test_avoids_rematch_within_group():
    players = [swiss_player(n, wins=1, losses=1) for n in (1, 2, 3, 4)]
    prior = [PriorPairing("p1", "p3"), PriorPairing("p2", "p4")]
    result = generate_pairings(players, prior)
    assert _pairs(result) == [("p1", "p4"), ("p2", "p3")]
    assert result.rematches == []


def test_accepts_pairing_history_directly():
    history = PairingHistory()
    history.add_pairing("p1", "p3")
    history.add_pairing("p2", "p4")
    players = [swiss_player(n) for n in (1, 2, 3, 4)]
    assert _pairs(generate_pairings(players, history)) == [("p1", "p4"), ("p2", "p3")]


def test_forced_rematch_in_two_player_field(caplog):
    players = [swiss_player(1, wins=1), swiss_player(2, losses=1)]
    with caplog.at_level(logging.WARNING, logger="tabletopswiss"):
        result = generate_pairings(players, [PriorPairing("p1", "p2")])
    assert _pairs(result) == [("p1", "p2")]
    assert result.pairings[0].is_rematch
    assert len(result.rematches) == 1
    assert "Unavoidable rematch" in caplog.text


def test_group_rematch_wins_over_unplayed_cross_group_pairing():
    # Round two of a five player night after one draw, one win and a bye
    players = [
        swiss_player(2, wins=1, margin=17),
        swiss_player(5, wins=1),
        swiss_player(1, draws=1),
        swiss_player(3, draws=1),
        swiss_player(4, losses=1, margin=-17),
    ]
    prior = [PriorPairing("p1", "p3"), PriorPairing("p2", "p4"), PriorPairing("p5", None)]
    result = generate_pairings(players, prior)
    assert result.bye == "p4"
    # p2 v p1 and p5 v p3 were unplayed, but groups are never split to avoid it
    assert _pairs(result) == [("p2", "p5"), ("p1", "p3")]
    assert [(p.player1_id, p.player2_id) for p in result.rematches] == [("p1", "p3")]


def test_groups_by_record():
    players = [
        swiss_player(1, wins=1, margin=20),
        swiss_player(2, losses=1, margin=-20),
        swiss_player(3, wins=1, margin=10),
        swiss_player(4, losses=1, margin=-10),
    ]
    prior = [PriorPairing("p1", "p2"), PriorPairing("p3", "p4")]
    result = generate_pairings(players, prior)
    assert _pairs(result) == [("p1", "p3"), ("p4", "p2")]
    assert [p.table_number for p in result.pairings] == [1, 2]


def test_odd_group_overflows_into_next_group():
    players = [swiss_player(n, wins=1) for n in (1, 2, 3)] + [
        swiss_player(n, losses=1) for n in (4, 5, 6)
    ]
    prior = [PriorPairing("p1", "p4"), PriorPairing("p2", "p5"), PriorPairing("p3", "p6")]
    result = generate_pairings(players, prior)
    assert _pairs(result) == [("p1", "p2"), ("p3", "p5"), ("p4", "p6")]
    assert [p.table_number for p in result.pairings] == [1, 2, 3]


def test_draw_records_form_their_own_group():
    players = [
        swiss_player(1, wins=1),
        swiss_player(2, wins=1),
        swiss_player(3, draws=1),
        swiss_player(4, draws=1),
    ]
    result = generate_pairings(players)
    assert _pairs(result) == [("p1", "p2"), ("p3", "p4")]


def test_tables_continue_across_groups():
    players = [swiss_player(n, wins=2) for n in (1, 2)]
    players += [swiss_player(n, wins=1, losses=1) for n in (3, 4)]
    players += [swiss_player(n, losses=2) for n in (5, 6)]
    result = generate_pairings(players)
    assert [p.table_number for p in result.pairings] == [1, 2, 3]


def test_every_player_placed_exactly_once():
    players = [
        swiss_player(n, wins=n % 3, losses=2 - n % 3, margin=n) for n in range(1, 12)
    ]
    prior = [PriorPairing(f"p{n}", f"p{n + 1}") for n in range(1, 11, 2)]
    prior.append(PriorPairing("p11"))
    result = generate_pairings(players, prior)
    placed = _all_placed(result)
    assert sorted(placed) == sorted(p.id for p in players)
    assert result.bye == sort_for_pairing(players)[-1].id
    assert all(p.player1_id != p.player2_id for p in result.pairings)


def test_sort_for_pairing_order():
    players = [
        swiss_player(1, wins=1, margin=5, sos=0.5),
        swiss_player(2, wins=1, margin=5, sos=0.75),
        swiss_player(3, wins=2),
        swiss_player(4, wins=1, margin=9),
    ]
    assert [p.id for p in sort_for_pairing(players)] == ["p3", "p4", "p2", "p1"]


def test_pairing_history_tracks_byes():
    history = PairingHistory.from_prior_pairings(
        [PriorPairing("p1", "p2"), PriorPairing("p3")]
    )
    assert history.have_played("p2", "p1")
    assert history.has_had_bye("p3")
    assert not history.has_had_bye("p1")
    assert len(history) == 2

    restored = PairingHistory.from_dict(history.to_dict())
    assert restored.previous_matches == history.previous_matches
