import io
import random
from unittest import mock

import pytest

from labworks.cards import Card
from labworks.war import Player, WarGame, main


def make_game(first_cards=(), second_cards=(), seed=0):
    first = Player("Gerald")
    second = Player("Julie")
    for card in first_cards:
        first.cards.append(card)
    for card in second_cards:
        second.cards.append(card)
    out = io.StringIO()
    pauses = []
    game = WarGame(first, second, rng=random.Random(seed), out=out, pause=pauses.append)
    return game, out, pauses


def test_push_front_and_pop_back():
    player = Player("Ana")
    player.push_front(Card(7, "Coeur"))
    player.push_front(Card(8, "Pique"))
    assert player.pop_back() == Card(7, "Coeur")
    assert player.pop_back() == Card(8, "Pique")
    with pytest.raises(IndexError):
        player.pop_back()


def test_deal_gives_sixteen_distinct_cards_each():
    game, _, _ = make_game()
    game.deal_all_cards()
    assert len(game.first.cards) == 16
    assert len(game.second.cards) == 16
    everything = set(game.first.cards) | set(game.second.cards)
    assert len(everything) == 32
    assert {card.value for card in everything} == set(range(7, 15))
    assert {card.color for card in everything} == {"Coeur", "Pique", "Trèfle", "Carreau"}


def test_higher_first_card_goes_to_second_player():
    game, out, _ = make_game([Card(10, "Coeur")], [Card(8, "Pique")])
    assert game.play() is True
    assert len(game.first.cards) == 0
    assert set(game.second.cards) == {Card(10, "Coeur"), Card(8, "Pique")}
    text = out.getvalue()
    assert "Tour n°1" in text
    assert "Gerald joue 10 de Coeur" in text
    assert "Julie remporte le pli (2 cartes)" in text
    assert game.turn_number == 1


def test_tie_continues_with_next_cards():
    game, out, pauses = make_game(
        [Card(9, "Pique"), Card(10, "Coeur")],
        [Card(12, "Coeur"), Card(10, "Pique")],
    )
    assert game.play() is True
    assert pauses == [0.2]
    assert len(game.first.cards) == 4
    assert len(game.second.cards) == 0
    assert "\tEgalité !!" in out.getvalue()
    assert game.turn_number == 1


def test_tie_without_cards_left_ends_game():
    game, out, _ = make_game([Card(10, "Coeur")], [Card(10, "Pique")])
    assert game.play() is False
    assert "Egalité, mais pas assez de cartes pour terminer !!" in out.getvalue()


def test_empty_hand_stops_without_output():
    game, out, _ = make_game([], [Card(10, "Pique")])
    assert game.play() is False
    assert out.getvalue() == ""
    assert game.turn_number == 0


def test_card_count_is_conserved():
    game, _, _ = make_game(seed=3)
    game.deal_all_cards()
    for _ in range(50):
        if not game.play():
            break
        assert len(game.first.cards) + len(game.second.cards) == 32


def test_winner():
    game, _, _ = make_game([Card(7, "Coeur"), Card(8, "Coeur")], [Card(9, "Coeur")])
    assert game.winner() is game.first
    game.second.push_front(Card(10, "Coeur"))
    assert game.winner() is None
    game.second.push_front(Card(11, "Coeur"))
    assert game.winner() is game.second


def test_main_single_turn(capsys):
    assert main(["1"]) == 0
    text = capsys.readouterr().out
    assert text.startswith("Début de la partie\n")
    assert "Tour n°1" in text
    assert "Tour n°2" not in text
    assert "Nombre de tours" not in text
    assert "Fin de partie: " in text


@mock.patch("time.sleep")
def test_main_turn_limit(sleep, capsys):
    assert main(["3"]) == 0
    text = capsys.readouterr().out
    assert "Nombre de tours: 3" in text
    assert "Tour n°3" in text
    assert "Tour n°4" not in text
    assert mock.call(1) in sleep.call_args_list