import pytest

from labworks.cards import Card


@pytest.mark.parametrize(
    "value, color, text",
    [
        (11, "Coeur", "Valet de Coeur"),
        (12, "Pique", "Dame de Pique"),
        (13, "Trèfle", "Roi de Trèfle"),
        (14, "Carreau", "As de Carreau"),
        (7, "Coeur", "7 de Coeur"),
    ],
)
def test_str(value, color, text):
    assert str(Card(value, color)) == text


def test_equality_needs_value_and_color():
    assert Card(9, "Coeur") == Card(9, "Coeur")
    assert not Card(9, "Coeur") == Card(9, "Pique")
    assert not Card(9, "Coeur") == Card(10, "Coeur")


def test_order_ignores_color():
    assert Card(8, "Coeur") < Card(9, "Pique")
    assert not Card(9, "Coeur") < Card(9, "Pique")
    assert not Card(9, "Pique") < Card(9, "Coeur")


def test_sorting_by_value():
    hand = [Card(14, "Coeur"), Card(7, "Pique"), Card(11, "Trèfle")]
    assert [card.value for card in sorted(hand)] == [7, 11, 14]


def test_hash_consistent_with_equality():
    assert len({Card(10, "Coeur"), Card(10, "Coeur"), Card(10, "Pique")}) == 2


def test_comparison_with_other_type():
    assert Card(10, "Coeur") != "10 de Coeur"
    with pytest.raises(TypeError):
        Card(10, "Coeur") < 10