# labworks

A collection of small, self-contained programs and data structures. It needs
only the Python standard library.

## Modules

- `labworks.magic`: `magic_word(a, b)` returns the sum of two numbers as an
  upper-case 32-bit hexadecimal word; `say_hello(a, b)` prints
  `The magic word is: ...` and returns that line.
- `labworks.tip`: `victory(n)` returns `n` lines of `VICTORY!`; `tip(amount)`
  returns a 20% tip formatted as dollars, e.g. `tip(272) == "$54.40"`.
- `labworks.gapsort`: `gap_sort(values)` rearranges a mutable sequence in place
  with a gap-based compare-and-swap schedule and returns the number of
  comparisons it made. The count depends only on the length.
- `labworks.names`: a frozen `Name` dataclass (`first`, `last`, optional
  `middle`, `age`) and the styles `big` ("First Middle Last"), `last`
  ("Last, First"), `reg` ("First Last"), `mid` ("First M. Last") and `small`
  ("First"). Each name part is capitalised. `fill_name(name, style)` returns the
  text for a `NameStyle` member or its letter (`b`, `l`, `r`, `m`, `s`, in
  either case) and raises `ValueError` for any other letter; `format_name`
  prints it.
- `labworks.bits`: `display_bits` shows the low 16 bits as two bytes,
  `pack_characters` / `unpack_characters` put two one-byte characters into one
  16-bit word and back, `power2(num, power)` shifts left, and `toggle_bit` /
  `get_bit` flip or read a single bit of a 16-bit value.
- `labworks.cards`: `Suit`, `Rank` and `Card`; a `Deck` stack holding at most 24
  cards (`push` returns `False` when full, `pop` raises `IndexError` when empty,
  `peek` returns `None` when empty); a `Hand` that adds new cards to the front.
  Game rules: `populate_deck`, `shuffle`, `deal`, `is_legal_move`, `who_won`,
  `return_hand_to_deck`, plus `format_hand` and `format_deck` for display.
- `labworks.game`: `EuchreGame`, an interactive game in which player 1 always
  leads its front card and player 2 chooses a card at the prompt. Input and
  output functions and the random generator can be passed in, so a game can be
  driven from code as well as from the terminal.
- `labworks.linkedlist`: a doubly linked `LinkedList` (`insert` at the head,
  `append` at the tail, `pop`, `pop_tail`, `head`, `tail`, `sort`) and a
  `LinkedListIterator` cursor from `LinkedList.iterator()` that moves both ways
  (`advance`, `retreat`, `has_next`, `has_prev`), reads `payload()`, and can
  `delete()` the current element or `insert_before(payload)`.
- `labworks.dictionary`: `DictArray`, a sorted list searched by bisection, and
  `DictTrie`, a letter trie; both support `add` and `in`. `DictTrie.words()`
  yields the stored words in alphabetical order. `load_dictionary_array` and
  `load_dictionary_trie` read whitespace-separated words from a file, and
  `benchmark(path)` times both loads.
- `labworks.lldemo`: `run_demo()` fills a linked list with `Thing` items, sorts
  it with `compare_things`, pops the smallest and returns the lines it shows.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from labworks.linkedlist import LinkedList

items = LinkedList()
for n in (5, 10, 7):
    items.insert(n)          # added at the head
items.append(1)              # added at the tail
print(len(items), list(items))   # 4 [7, 10, 5, 1]

it = items.iterator()
it.advance()
it.insert_before(42)
print(list(items))               # [7, 42, 10, 5, 1]
```

```python
from labworks.dictionary import DictTrie

trie = DictTrie()
trie.add("app")
trie.add("application")
print("app" in trie, "apple" in trie)   # True False
```

```python
import random
from labworks.cards import Hand, deal, populate_deck, shuffle

deck = populate_deck()
shuffle(deck, random.Random(7))
player1, player2 = Hand(), Hand()
deal(deck, player1, player2)
print(len(player1), len(player2), len(deck))   # 5 5 14
```

```python
from labworks.names import Name, fill_name

name = Name(first="BeN", middle="ivan", last="bitDiDdle")
print(fill_name(name, "m"))   # Ben I. Bitdiddle
```

## Commands

| Command | What it does |
| --- | --- |
| `labworks-magic` | Prints the magic word for a built-in pair of numbers. |
| `labworks-tip` | Prints three cheers and the tip on a fixed bill of 272. |
| `labworks-gapsort` | Sorts random lists of 4, 128 and 1024 numbers and reports comparison counts. |
| `labworks-bits` | Shows bit toggling, packing and unpacking in binary. |
| `labworks-dictionary [WORDLIST]` | Loads a word list (default `wordlist.txt`) into both dictionaries and reports the load times. |
| `labworks-euchre [--seed N]` | Plays the card game at the terminal, as a single round or a five-round game. |
| `labworks-lldemo` | Runs the linked-list demonstration. |

## Limits

- `DictTrie` accepts only non-empty words made of the letters `a` to `z`;
  other words raise `ValueError`. `DictArray` holds at most 450,000 words.
- `gap_sort` is made for lengths that are powers of two; other lengths may
  raise `IndexError`.
- The card game has two players only, and player 1 plays no strategy: it always
  leads the front card of its hand.