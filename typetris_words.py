"""Word dealer: picks the words that become falling blocks"""
import pygame
from typing import Optional, Sequence

DEFAULT_WORDS = (
    "a", "an", "as", "at", "be", "by", "do", "go", "he", "if", "in", "is", "it",
    "me", "my", "no", "of", "on", "or", "so", "to", "up", "us", "we",
    "and", "any", "are", "ask", "big", "box", "can", "day", "dog", "end", "far",
    "few", "fun", "get", "hat", "her", "him", "his", "how", "key", "let", "map",
    "new", "now", "old", "one", "out", "own", "put", "red", "run", "say", "see",
    "sky", "sun", "ten", "the", "top", "try", "two", "use", "way", "who", "why",
    "yes", "you", "also", "back", "ball", "blue", "book", "call", "came", "city",
    "cold", "come", "drop", "each", "fall", "fast", "fill", "fish", "five", "four",
    "game", "give", "good", "hand", "have", "help", "here", "home", "into", "just",
    "keep", "kind", "last", "left", "line", "long", "look", "make", "many", "more",
    "move", "much", "must", "name", "near", "next", "only", "open", "over", "play",
    "rain", "read", "rest", "road", "rock", "room", "same", "seed", "ship", "show",
    "side", "slow", "snow", "some", "star", "stop", "such", "take", "tell", "than",
    "that", "them", "then", "they", "this", "time", "tree", "turn", "type", "very",
    "wait", "walk", "want", "well", "what", "when", "wind", "with", "word", "work",
    "year", "about", "after", "again", "block", "board", "bring", "clear", "could",
    "earth", "every", "first", "found", "going", "great", "green", "house", "learn",
    "light", "never", "night", "other", "place", "plant", "point", "right", "river",
    "score", "small", "sound", "spell", "stack", "stone", "still", "study", "their",
    "there", "these", "thing", "think", "three", "tower", "under", "water", "where",
    "which", "while", "world", "would", "write", "before", "castle", "follow",
    "letter", "little", "mother", "number", "people", "puzzle", "should", "silver",
    "simple", "spring", "travel", "window", "balance", "falling", "keyboard",
    "mountain", "question", "sentence",
)


class WordDealer:
    """
    Reproducible source of block words and spawn columns.

    Uses a 32-bit LCG (multiplier 0x41C64E6D, increment 0x3039) so a seed fully
    determines the word stream. Like the classic piece randomizer, an immediate
    repeat of the previous word is re-rolled once with a 50% chance.
    """

    def __init__(self, words: Sequence[str] = DEFAULT_WORDS, seed: Optional[int] = None):
        if seed is None:
            seed = pygame.time.get_ticks() & 0xFFFFFFFF
        self.state = seed & 0xFFFFFFFF
        self.words = [w for w in words if w and w.isascii()]
        self.prev_word: Optional[str] = None

    def _lcg_next(self) -> int:
        self.state = (self.state * 0x41C64E6D + 0x3039) & 0xFFFFFFFF
        return self.state

    def _rand(self) -> int:
        """15 high-quality bits from the LCG state."""
        return (self._lcg_next() >> 16) & 0x7FFF

    def randrange(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"randrange needs a positive bound, got {n}")
        return self._rand() % n

    def random_word(self, max_length: int) -> str:
        candidates = [w for w in self.words if len(w) <= max_length]
        if not candidates:
            raise ValueError(f"no word of length <= {max_length}")
        word = candidates[self.randrange(len(candidates))]
        if word == self.prev_word and (self._rand() & 1) == 1:
            word = candidates[self.randrange(len(candidates))]
        self.prev_word = word
        return word
