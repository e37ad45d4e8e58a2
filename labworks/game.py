"""An interactive two-player round of euchre: the computer against a person."""

from __future__ import annotations

import argparse
import random
from collections.abc import Callable

from labworks.cards import (
    CARDS_IN_HAND,
    Card,
    Deck,
    Hand,
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

DEFAULT_ROUNDS = 5

InputFn = Callable[[str], str]
OutputFn = Callable[[str], object]


def _score_line(score1: int, score2: int) -> str:
    return f"Player 1: {score1}\tPlayer 2: {score2}"


def _trump_banner(trump: Suit) -> str:
    return (
        "\n\n*************************\n"
        f"**** Trump is {trump.label} *****\n"
        "*************************\n"
    )


class EuchreGame:
    """A game in which player 1 always leads its front card and player 2 is asked."""

    def __init__(
        self,
        deck: Deck | None = None,
        rng: random.Random | None = None,
        input_fn: InputFn = input,
        output: OutputFn = print,
        show_deck: bool = False,
        show_player1_hand: bool = False,
    ) -> None:
        self.deck = deck if deck is not None else populate_deck()
        self.rng = rng if rng is not None else random.Random()
        self._input = input_fn
        self._output = output
        self.show_deck = show_deck
        self.show_player1_hand = show_player1_hand

    def _say(self, text: str) -> None:
        self._output(text)

    def _read_choice(self, count: int) -> int:
        while True:
            raw = self._input("")
            try:
                choice = int(raw.strip())
            except ValueError:
                choice = -1
            if 0 <= choice < count:
                return choice
            self._say(f"Please choose a number between 0 and {count - 1}. ")

    def take_player1_turn(self, hand: Hand) -> Card:
        """Play and return the front card of player 1's hand."""
        card = next(iter(hand), None)
        if card is None:
            raise ValueError("player 1 has no cards to play")
        hand.remove(card)
        self._say(f"Player 1 played the card: {card}\n\n")
        return card

    def take_player2_turn(self, hand: Hand) -> Card:
        """Ask player 2 which card to play, remove it from the hand and return it."""
        cards = list(hand)
        if not cards:
            raise ValueError("player 2 has no cards to play")
        self._say("Player 2's turn: Which card do you want to play?")
        self._say(format_hand(hand))
        self._say("")
        card = cards[self._read_choice(len(cards))]
        self._say(f"Player 2 played the card: {card}")
        hand.remove(card)
        return card

    def choose_trump(self) -> Suit:
        """Pick the trump suit at random."""
        self._say("Time to choose trump!")
        return self.rng.choice(list(Suit))

    def play_round(self) -> int:
        """Play one round of five tricks and return the winning player, 1 or 2."""
        shuffle(self.deck, self.rng)
        if self.show_deck:
            self._say(format_deck(self.deck))

        p1hand, p2hand = Hand(), Hand()
        deal(self.deck, p1hand, p2hand)
        self._say("\n")
        if self.show_player1_hand:
            self._say("Player 1: ")
            self._say(format_hand(p1hand))

        trump = self.choose_trump()
        self._say(_trump_banner(trump))

        p1score = p2score = 0
        self._say("\n\nStarting the round...")
        for _ in range(CARDS_IN_HAND):
            self._say("\n---------------------")
            led_card = self.take_player1_turn(p1hand)
            followed_card = self.take_player2_turn(p2hand)
            legal = is_legal_move(p2hand, led_card, followed_card)
            if legal:
                if who_won(led_card, followed_card, trump):
                    self._say("Player 1 took the trick. ")
                    p1score += 1
                else:
                    self._say("Player 2 took the trick. ")
                    p2score += 1
                self._say("")
                self._say(_score_line(p1score, p2score))
            else:
                self._say("\n\nPlayer 2 did not make a legal move!! ")
                self._say("The round is over. ")
                self._say("Player 1 wins by default. ")
                p2score = -1
            self.deck.push(led_card)
            self.deck.push(followed_card)
            if not legal:
                break

        if p2score > 0:
            winner, tricks = (1, p1score) if p1score > p2score else (2, p2score)
            self._say(f"\n\nPlayer {winner} won this round with {tricks} tricks!")

        return_hand_to_deck(p1hand, self.deck)
        return_hand_to_deck(p2hand, self.deck)
        return 1 if p1score > p2score else 2

    def play_game(self, num_rounds: int = DEFAULT_ROUNDS) -> int:
        """Play ``num_rounds`` rounds and return the player who won more of them."""
        player1score = player2score = 0
        for number in range(1, num_rounds + 1):
            self._say("\n\n===========================")
            self._say(f"Round # {number}")
            self._say("===========================\n")

            if self.play_round() == 1:
                player1score += 1
            else:
                player2score += 1

            self._say("\n\n")
            self._say("Game Score so far: ")
            self._say(_score_line(player1score, player2score))
            self._say("===========================\n")
            self._say("When you're ready, press <enter> to go to the next round. ")
            self._input("")

        winner = 1 if player1score > player2score else 2
        self._say(f"\n\nPlayer {winner} won the game!")
        self._say(_score_line(player1score, player2score))
        self._say("\n")
        return winner


def main(argv: list[str] | None = None) -> int:
    """Welcome the player and play either one round or a whole game."""
    parser = argparse.ArgumentParser(description="Play a round or a game of euchre.")
    parser.add_argument("--seed", type=int, default=None, help="seed for shuffling")
    args = parser.parse_args(argv)

    game = EuchreGame(rng=random.Random(args.seed))
    try:
        print("Welcome to NEUchre!")
        print("When you're ready to play, press <enter>")
        input("")
        print("Okay. ")
        print("Would you like to play a [R]ound or a [G]ame?")
        choice = input("").strip().lower()[:1]
        if choice == "r":
            game.play_round()
        elif choice == "g":
            game.play_game()
        else:
            print("Quitting the game. ")
    except EOFError:
        print("Quitting the game. ")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())