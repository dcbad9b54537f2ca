"""Static byteword table.

The table maps each byte value 0-255 to a four-letter lowercase word. The
first and last letters of every word form a unique pair, which is what lets
the minimal (2-character) form decode losslessly.
"""

from __future__ import annotations

from dataclasses import dataclass

WORD_LENGTH = 4
TABLE_SIZE = 256
_LETTERS = 26

# fmt: off
BYTEWORDS_ALPHABET = (
    "ableacidalsoapexaquaarchatomauntawayaxisbackbaldbarnbeltbetabias"
    "bluebodybragbrewbulbbuzzcalmcashcatschefcityclawcodecolacookcost"
    "cruxcurlcuspcyandarkdatadaysdelidicedietdoordowndrawdropdrumdull"
    "dutyeacheasyechoedgeepicevenexamexiteyesfactfairfernfigsfilmfish"
    "fizzflapflewfluxfoxyfreefrogfuelfundgalagamegeargemsgiftgirlglow"
    "goodgraygrimgurugushgyrohalfhanghardhawkheathelphighhillholyhope"
    "hornhutsicedideaidleinchinkyintoirisironitemjadejazzjoinjoltjowl"
    "judojugsjumpjunkjurykeepkenokeptkeyskickkilnkingkitekiwiknoblamb"
    "lavalazyleaflegsliarlimplionlistlogoloudloveluaulucklungmainmany"
    "mathmazememomenumeowmildmintmissmonknailnavyneednewsnextnoonnote"
    "numbobeyoboeomitonyxopenovalowlspaidpartpeckplaypluspoempoolpose"
    "puffpumapurrquadquizraceramprealredorichroadrockroofrubyruinruns"
    "rustsafesagascarsetssilkskewslotsoapsolosongstubsurfswantacotask"
    "taxitenttiedtimetinytoiltombtoystriptunatwinuglyundouniturgeuser"
    "vastveryvetovialvibeviewvisavoidvowswallwandwarmwaspwavewaxywebs"
    "whatwhenwhizwolfworkyankyawnyellyogayurtzapszerozestzinczonezoom"
)
# fmt: on


def _letter_index(char: str) -> int | None:
    """Return 0-25 for ``a``-``z``, otherwise None."""
    if len(char) != 1 or not ("a" <= char <= "z"):
        return None
    return ord(char) - ord("a")


def _pair_offset(first: int, last: int) -> int:
    return last * _LETTERS + first


@dataclass(frozen=True)
class WordTable:
    """Bijection between byte values and bytewords.

    Attributes:
        words: The 256 words in byte-value order
        lookup: Flat 26x26 reverse index keyed by ``(last, first)`` letter
            offsets; unused slots hold None
    """

    words: tuple[str, ...]
    lookup: tuple[int | None, ...]

    @classmethod
    def from_alphabet(cls, alphabet: str) -> WordTable:
        """Build a table from 256 concatenated four-letter words.

        Raises:
            ValueError: If the alphabet has the wrong size, contains characters
                outside ``a``-``z``, or two words share a first/last letter pair
        """
        expected = TABLE_SIZE * WORD_LENGTH
        if len(alphabet) != expected:
            raise ValueError(f"Alphabet must be {expected} characters, got {len(alphabet)}")

        words = tuple(
            alphabet[i * WORD_LENGTH : (i + 1) * WORD_LENGTH] for i in range(TABLE_SIZE)
        )

        lookup: list[int | None] = [None] * (_LETTERS * _LETTERS)
        for value, word in enumerate(words):
            if any(_letter_index(char) is None for char in word):
                raise ValueError(f"Word {word!r} for byte {value} is not lowercase a-z")

            offset = _pair_offset(ord(word[0]) - ord("a"), ord(word[-1]) - ord("a"))
            if lookup[offset] is not None:
                raise ValueError(
                    f"Words {words[lookup[offset]]!r} and {word!r} share the letter pair "
                    f"{word[0]}{word[-1]}"
                )
            lookup[offset] = value

        return cls(words=words, lookup=tuple(lookup))

    def word_for_byte(self, value: int) -> str:
        """Return the four-letter word for a byte value."""
        if not 0 <= value < TABLE_SIZE:
            raise ValueError(f"Byte value must be 0-255, got {value}")
        return self.words[value]

    def minimal_for_byte(self, value: int) -> str:
        """Return the two-letter (first + last) form for a byte value."""
        word = self.word_for_byte(value)
        return word[0] + word[-1]

    def byte_for_chars(self, first: str, last: str) -> int | None:
        """Reverse lookup by first and last letter.

        Returns:
            The byte value, or None when the pair is not in the table or either
            character is not a lowercase letter
        """
        x = _letter_index(first)
        y = _letter_index(last)
        if x is None or y is None:
            return None
        return self.lookup[_pair_offset(x, y)]


WORD_TABLE = WordTable.from_alphabet(BYTEWORDS_ALPHABET)
