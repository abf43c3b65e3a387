"""The card game of war between two players."""

from __future__ import annotations

import random
import re
import sys
import time
from collections import deque

from labworks.cards import Card

_VALUES = range(7, 15)
_COLORS = ("Coeur", "Pique", "Trèfle", "Carreau")


class Player:
    """A player holding a pile of cards; cards are drawn from the back."""

    def __init__(self, name):
        self.name = name
        self.cards = deque()

    def push_front(self, card):
        """Slide a card under the pile."""
        self.cards.appendleft(card)

    def pop_back(self):
        """Draw the top card of the pile; raises IndexError if it is empty."""
        return self.cards.pop()

    def __repr__(self):
        return f"Player({self.name!r}, {len(self.cards)} cards)"


class WarGame:
    """A game between two players, with its own turn counter."""

    def __init__(self, first, second, rng=None, out=None, pause=None):
        self.first = first
        self.second = second
        self.rng = rng if rng is not None else random.Random()
        self.out = out if out is not None else sys.stdout
        self.pause = pause if pause is not None else time.sleep
        self.turn_number = 0

    def _say(self, text):
        print(text, file=self.out)

    def deal_all_cards(self):
        """Shuffle a full 32-card deck and deal it alternately to both players."""
        deck = [Card(value, color) for value in _VALUES for color in _COLORS]
        self.rng.shuffle(deck)
        for first_card, second_card in zip(deck[::2], deck[1::2]):
            self.first.push_front(first_card)
            self.second.push_front(second_card)

    def play(self, stake=None):
        """Play one turn, including any run of ties.

        Returns False when a player has no card left to play, True otherwise.
        The player whose card is lower collects the whole stake.
        """
        stake = list(stake) if stake else []
        first, second = self.first, self.second
        while True:
            if not first.cards or not second.cards:
                if stake:
                    self._say("Egalité, mais pas assez de cartes pour terminer !!")
                return False

            if stake:
                self._say("\tEgalité !!")
            else:
                self.turn_number += 1
                self._say(f"Tour n°{self.turn_number}")

            first_card = first.pop_back()
            second_card = second.pop_back()
            self._say(
                f"\t{first.name} joue {first_card} \t{second.name} joue {second_card}"
            )

            second_higher = first_card < second_card
            first_higher = second_card < first_card
            stake.extend((first_card, second_card))

            if first_higher or second_higher:
                collector = second if first_higher else first
                self.rng.shuffle(stake)
                for card in stake:
                    collector.push_front(card)
                self._say(f"\t{collector.name} remporte le pli ({len(stake)} cartes)")
                return True

            self.pause(0.2)

    def winner(self):
        """The player holding more cards, or None when both hold as many."""
        first_count = len(self.first.cards)
        second_count = len(self.second.cards)
        if first_count > second_count:
            return self.first
        if first_count < second_count:
            return self.second
        return None


def _leading_int(text):
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def main(argv=None):
    """Play a game between two players, optionally stopping after N turns."""
    if argv is None:
        argv = sys.argv[1:]
    first = Player("Gerald")
    second = Player("Julie")
    game = WarGame(first, second, pause=time.sleep)
    game.deal_all_cards()

    max_turn = _leading_int(argv[0]) if argv else -1
    print("Début de la partie")
    if max_turn > 1:
        print(f"Nombre de tours: {max_turn}")
    print("------------------")

    while game.play() and game.turn_number != max_turn:
        time.sleep(1)

    winner = game.winner()
    if winner is None:
        print("Fin de partie: égalité parfaite !!")
    else:
        print(f"Fin de partie: {winner.name} gagne !")
    return 0


if __name__ == "__main__":
    sys.exit(main())