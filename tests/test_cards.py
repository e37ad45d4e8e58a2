import random

import pytest

from labworks.cards import (
    CARDS_IN_DECK,
    CARDS_IN_HAND,
    Card,
    Deck,
    Hand,
    Rank,
    Suit,
    deal,
    format_deck,
    format_hand,
    is_legal_move,
    populate_deck,
    return_hand_to_deck,
    shuffle,
    who_won,
)


def test_create_deck_is_empty():
    deck = Deck()
    assert deck.is_empty()
    assert len(deck) == 0


def test_push_card_to_deck():
    deck = Deck()
    card1 = Card(Rank.NINE, Suit.HEARTS)
    assert deck.push(card1) is True
    assert list(deck) == [card1]
    assert len(deck) == 1

    card2 = Card(Rank.JACK, Suit.CLUBS)
    deck.push(card2)
    cards = list(deck)
    assert cards[0] is card1
    assert cards[1] is card2
    assert len(deck) == 2

    card3 = Card(Rank.ACE, Suit.SPADES)
    for expected in range(3, CARDS_IN_DECK + 1):
        deck.push(card3)
        assert len(deck) == expected
    assert all(card is card3 for card in list(deck)[2:])

    card4 = Card(Rank.QUEEN, Suit.DIAMONDS)
    assert deck.push(card4) is False
    cards = list(deck)
    assert len(cards) == CARDS_IN_DECK
    assert cards[0] is card1
    assert cards[1] is card2
    assert cards[-1] is card3


def test_populate_deck_has_each_card_once():
    deck = populate_deck()
    cards = list(deck)
    assert len(cards) == CARDS_IN_DECK
    for suit in Suit:
        for rank in Rank:
            found = [c for c in cards if c.suit == suit and c.rank == rank]
            assert len(found) == 1


def test_peek_at_top_card():
    assert Deck().peek() is None

    deck = populate_deck()
    top = deck.peek()
    assert top.rank == Rank.ACE
    assert top.suit == Suit.DIAMONDS
    assert len(deck) == CARDS_IN_DECK

    deck = Deck()
    last_card = Card(Rank.ACE, Suit.DIAMONDS)
    deck.push(last_card)
    assert deck.peek() is last_card

    another = Card(Rank.TEN, Suit.CLUBS)
    deck.push(another)
    assert deck.peek() is another

    one_more = Card(Rank.KING, Suit.HEARTS)
    for _ in range(2, CARDS_IN_DECK):
        deck.push(one_more)
        assert deck.peek() is one_more

    deck.push(last_card)
    assert deck.peek() is one_more


def test_pop_card_from_deck():
    deck = Deck()
    with pytest.raises(IndexError):
        deck.pop()

    card1 = Card(Rank.QUEEN, Suit.DIAMONDS)
    deck.push(card1)
    assert deck.pop() is card1

    card2 = Card(Rank.TEN, Suit.CLUBS)
    deck.push(card1)
    deck.push(card2)
    assert deck.pop() is card2
    assert deck.pop() is card1
    assert deck.is_empty()


def test_is_deck_empty():
    deck = Deck()
    assert deck.is_empty()
    card = Card(Rank.QUEEN, Suit.SPADES)
    deck.push(card)
    assert not deck.is_empty()
    deck.push(card)
    assert not deck.is_empty()
    deck.pop()
    assert not deck.is_empty()
    deck.pop()
    assert deck.is_empty()


def test_shuffle_keeps_every_card_and_changes_order():
    deck = populate_deck()
    original = list(deck)
    shuffle(deck, random.Random(21774))
    shuffled = list(deck)
    assert len(shuffled) == CARDS_IN_DECK
    assert {id(c) for c in shuffled} == {id(c) for c in original}
    assert [id(c) for c in shuffled] != [id(c) for c in original]


def test_shuffle_is_reproducible_with_seed():
    deck_a = populate_deck()
    deck_b = populate_deck()
    shuffle(deck_a, random.Random(7))
    shuffle(deck_b, random.Random(7))
    assert [str(c) for c in deck_a] == [str(c) for c in deck_b]


def test_create_hand():
    hand = Hand()
    assert hand.is_empty()
    assert len(hand) == 0
    assert list(hand) == []


def test_add_card_to_hand():
    hand = Hand()
    card1 = Card(Rank.NINE, Suit.HEARTS)
    hand.add(card1)
    assert len(hand) == 1
    assert list(hand) == [card1]

    card2 = Card(Rank.TEN, Suit.CLUBS)
    hand.add(card2)
    assert len(hand) == 2
    cards = list(hand)
    assert cards[0] is card2
    assert cards[1] is card1


def test_remove_card_from_hand():
    hand = Hand()
    card1 = Card(Rank.NINE, Suit.HEARTS)
    card2 = Card(Rank.TEN, Suit.CLUBS)
    card3 = Card(Rank.JACK, Suit.SPADES)

    hand.add(card1)
    assert hand.remove(card1) is card1
    assert len(hand) == 0
    assert hand.is_empty()

    hand.add(card1)
    hand.add(card2)
    hand.remove(card1)
    assert len(hand) == 1
    assert list(hand) == [card2]

    hand.add(card1)
    hand.remove(card1)
    assert len(hand) == 1
    assert list(hand) == [card2]

    hand.remove(card2)
    assert len(hand) == 0

    hand.add(card1)
    hand.add(card2)
    hand.add(card3)
    hand.remove(card2)
    cards = list(hand)
    assert cards[0] is card3
    assert cards[1] is card1
    assert len(cards) == 2

    hand.remove(card3)
    hand.remove(card1)
    assert hand.is_empty()


def test_remove_missing_card_raises():
    hand = Hand()
    hand.add(Card(Rank.NINE, Suit.HEARTS))
    with pytest.raises(ValueError):
        hand.remove(Card(Rank.NINE, Suit.HEARTS))


def test_deal():
    deck = populate_deck()
    shuffle(deck, random.Random(21774))
    cards = list(deck)
    expected_hand1 = [cards[CARDS_IN_DECK - k] for k in (1, 3, 5, 7, 9)]
    expected_hand2 = [cards[CARDS_IN_DECK - k] for k in (2, 4, 6, 8, 10)]

    hand1 = Hand()
    hand2 = Hand()
    deal(deck, hand1, hand2)

    assert len(hand1) == CARDS_IN_HAND
    assert {id(c) for c in hand1} == {id(c) for c in expected_hand1}
    assert [id(c) for c in hand2] == [id(c) for c in reversed(expected_hand2)]
    assert len(deck) == CARDS_IN_DECK - 2 * CARDS_IN_HAND


def test_is_legal_move():
    hand = Hand()
    queen_hearts = Card(Rank.QUEEN, Suit.HEARTS)
    king_spades = Card(Rank.KING, Suit.SPADES)
    nine_clubs = Card(Rank.NINE, Suit.CLUBS)
    nine_hearts = Card(Rank.NINE, Suit.HEARTS)
    for card in (queen_hearts, king_spades, nine_clubs, nine_hearts):
        hand.add(card)

    ten_hearts = Card(Rank.TEN, Suit.HEARTS)
    assert is_legal_move(hand, ten_hearts, queen_hearts) is True
    assert is_legal_move(hand, ten_hearts, king_spades) is False
    assert is_legal_move(hand, ten_hearts, nine_clubs) is False
    assert is_legal_move(hand, ten_hearts, nine_hearts) is True

    jack_diamonds = Card(Rank.JACK, Suit.DIAMONDS)
    assert is_legal_move(hand, jack_diamonds, queen_hearts) is True
    assert is_legal_move(hand, jack_diamonds, king_spades) is True
    assert is_legal_move(hand, jack_diamonds, nine_clubs) is True
    assert is_legal_move(hand, jack_diamonds, nine_hearts) is True
    assert len(hand) == 4


def test_who_won():
    queen_hearts = Card(Rank.QUEEN, Suit.HEARTS)
    king_spades = Card(Rank.KING, Suit.SPADES)
    nine_clubs = Card(Rank.NINE, Suit.CLUBS)
    nine_hearts = Card(Rank.NINE, Suit.HEARTS)

    assert who_won(queen_hearts, king_spades, Suit.SPADES) is False
    assert who_won(nine_hearts, queen_hearts, Suit.CLUBS) is False
    assert who_won(queen_hearts, nine_hearts, Suit.HEARTS) is True
    assert who_won(nine_hearts, king_spades, Suit.HEARTS) is True
    assert who_won(queen_hearts, nine_clubs, Suit.CLUBS) is False


def test_return_hand_to_deck():
    deck = populate_deck()
    hand1 = Hand()
    hand2 = Hand()
    deal(deck, hand1, hand2)
    return_hand_to_deck(hand1, deck)
    return_hand_to_deck(hand2, deck)
    assert hand1.is_empty()
    assert hand2.is_empty()
    assert len(deck) == CARDS_IN_DECK
    for suit in Suit:
        for rank in Rank:
            assert sum(1 for c in deck if c.suit == suit and c.rank == rank) == 1


def test_card_str():
    assert str(Card(Rank.NINE, Suit.HEARTS)) == "Nine_Hearts"
    assert str(Card(Rank.ACE, Suit.DIAMONDS)) == "Ace_Diamonds"


def test_format_hand():
    hand = Hand()
    hand.add(Card(Rank.NINE, Suit.HEARTS))
    hand.add(Card(Rank.KING, Suit.SPADES))
    assert format_hand(hand) == "0: King_Spades\n1: Nine_Hearts"


def test_format_deck():
    deck = Deck()
    deck.push(Card(Rank.TEN, Suit.CLUBS))
    deck.push(Card(Rank.QUEEN, Suit.DIAMONDS))
    assert format_deck(deck) == "0: Ten_Clubs\n1: Queen_Diamonds"