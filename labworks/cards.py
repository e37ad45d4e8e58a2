"""Cards, a fixed-size deck, hands and the trick rules of a small euchre game."""

from __future__ import annotations

import random
from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum

CARDS_IN_DECK = 24
CARDS_IN_HAND = 5


class Suit(IntEnum):
    """The four card suits."""

    HEARTS = 0
    CLUBS = 1
    SPADES = 2
    DIAMONDS = 3

    @property
    def label(self) -> str:
        """The suit's display name, such as "Hearts"."""
        return self.name.capitalize()


class Rank(IntEnum):
    """Card ranks used in the game, valued nine to fourteen."""

    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def label(self) -> str:
        """The rank's display name, such as "Nine"."""
        return self.name.capitalize()


@dataclass(frozen=True, eq=False)
class Card:
    """A playing card. Cards compare by identity, as each is a distinct object."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank.label}_{self.suit.label}"


class Deck:
    """A stack of at most ``CARDS_IN_DECK`` cards; the last pushed is on top."""

    def __init__(self, capacity: int = CARDS_IN_DECK) -> None:
        self.capacity = capacity
        self._cards: list[Card] = []

    def push(self, card: Card) -> bool:
        """Put ``card`` on top; a full deck ignores it. Return whether it was added."""
        if len(self._cards) >= self.capacity:
            return False
        self._cards.append(card)
        return True

    def peek(self) -> Card | None:
        """Return the top card without removing it, or None if the deck is empty."""
        return self._cards[-1] if self._cards else None

    def pop(self) -> Card:
        """Remove and return the top card; raise IndexError if the deck is empty."""
        if not self._cards:
            raise IndexError("pop from empty deck")
        return self._cards.pop()

    def is_empty(self) -> bool:
        """Return True if the deck holds no cards."""
        return not self._cards

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        """Iterate from the bottom card to the top card."""
        return iter(list(self._cards))


class Hand:
    """A player's hand; newly added cards go to the front."""

    def __init__(self) -> None:
        self._cards: list[Card] = []

    def add(self, card: Card) -> None:
        """Add ``card`` to the front of the hand."""
        self._cards.insert(0, card)

    def remove(self, card: Card) -> Card:
        """Remove this very card from the hand and return it.

        Raise ValueError if the card is not in the hand.
        """
        for position, held in enumerate(self._cards):
            if held is card:
                del self._cards[position]
                return card
        raise ValueError(f"{card} is not in the hand")

    def is_empty(self) -> bool:
        """Return True if the hand holds no cards."""
        return not self._cards

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        """Iterate from the front card to the back card."""
        return iter(list(self._cards))


def populate_deck() -> Deck:
    """Return a full, unshuffled deck: each suit from nine to ace, ace of diamonds on top."""
    deck = Deck()
    for suit in Suit:
        for rank in Rank:
            deck.push(Card(rank, suit))
    return deck


def shuffle(deck: Deck, rng: random.Random | None = None) -> None:
    """Shuffle ``deck`` in place, swapping from the top down with random positions."""
    rng = rng if rng is not None else random.Random()
    cards = deck._cards
    for i in range(len(cards) - 1, 0, -1):
        j = rng.randrange(len(cards))
        cards[i], cards[j] = cards[j], cards[i]


def deal(deck: Deck, hand1: Hand, hand2: Hand) -> None:
    """Deal cards from the top of ``deck`` alternately until each hand has five."""
    for _ in range(CARDS_IN_HAND):
        hand1.add(deck.pop())
        hand2.add(deck.pop())


def is_legal_move(hand: Hand, lead_card: Card, played_card: Card) -> bool:
    """Return whether ``played_card`` may follow ``lead_card`` given the rest of ``hand``.

    A card of the led suit is always legal; any other card is legal only if
    the hand holds no card of the led suit.
    """
    if played_card.suit == lead_card.suit:
        return True
    return all(card.suit != lead_card.suit for card in hand)


def who_won(lead_card: Card, followed_card: Card, trump: Suit) -> bool:
    """Return True if the leader takes the trick, False if the follower does.

    Within one suit the higher rank wins; across suits the leader wins
    unless the follower played trump.
    """
    if lead_card.suit == followed_card.suit:
        return lead_card.rank >= followed_card.rank
    return followed_card.suit != trump


def return_hand_to_deck(hand: Hand, deck: Deck) -> None:
    """Move every card from ``hand`` back onto ``deck``, front card first."""
    for card in list(hand):
        deck.push(hand.remove(card))


def format_hand(hand: Hand) -> str:
    """Return the hand as numbered lines, front card first."""
    return "\n".join(f"{i}: {card}" for i, card in enumerate(hand))


def format_deck(deck: Deck) -> str:
    """Return the deck as numbered lines, bottom card first."""
    return "\n".join(f"{i}: {card}" for i, card in enumerate(deck))