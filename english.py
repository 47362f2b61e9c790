import string

from collections import Counter, namedtuple
from heapq import nsmallest
from types import MappingProxyType

from util import xor_with_byte

# Relative letter frequencies in English prose, from Robert Lewand's
# "Cryptological Mathematics" as quoted at
# https://en.wikipedia.org/wiki/Letter_frequency. Only lowercase letters are
# represented, so text should be converted to lowercase before one compares
# it against this dictionary.
english_letter_frequencies = MappingProxyType({
    "a": 0.08167, "b": 0.01492, "c": 0.02782, "d": 0.04253, "e": 0.12702,
    "f": 0.02228, "g": 0.02015, "h": 0.06094, "i": 0.06966, "j": 0.00153,
    "k": 0.00772, "l": 0.04025, "m": 0.02406, "n": 0.06749, "o": 0.07507,
    "p": 0.01929, "q": 0.00095, "r": 0.05987, "s": 0.06327, "t": 0.09056,
    "u": 0.02758, "v": 0.00978, "w": 0.02360, "x": 0.00150, "y": 0.01974,
    "z": 0.00074,
})

# Characters that can appear in plain English text: printable ASCII other than
# _`^|~{}\, plus tab, newline and carriage return. A decryption containing
# anything else is not scored.
PROSE_CHARACTERS = frozenset(
    set(string.ascii_letters + string.digits + string.punctuation + " \t\n\r") - set("_`^|~{}\\"))


class InvalidText(ValueError):
    pass


class NoValidCandidate(ValueError):
    pass


class Candidate(namedtuple("Candidate", ["key", "message", "score"])):
    __slots__ = ()

    @property
    def key_char(self):
        return chr(self.key) if 0x20 <= self.key < 0x7f else "\\x{:02x}".format(self.key)


def letter_frequencies(text):
    """Return the proportion of each letter among the letters in text.

    Letters are counted case-insensitively. Any other character, including
    non-ASCII letters, is ignored entirely, so it does not dilute the result.
    Bytes are read as one character per byte.
    """
    if isinstance(text, (bytes, bytearray)):
        text = text.decode("latin-1")
    letter_counts = Counter(char.lower() for char in text if char in string.ascii_letters)
    total_letter_count = sum(letter_counts.values())
    if not total_letter_count:
        return {}
    return {letter: count / total_letter_count for letter, count in letter_counts.items()}


def frequency_distance(observed, reference=english_letter_frequencies):
    # Only symbols seen in the observed text count. Reference letters the text
    # lacks add nothing, which changes the ranking compared to a full L1 sum.
    return sum(abs(freq - reference.get(symbol, 0)) for symbol, freq in observed.items())


def decode_text(message):
    try:
        text = message.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidText("not UTF-8: {}".format(e)) from e
    stray_chars = set(text) - PROSE_CHARACTERS
    if stray_chars:
        raise InvalidText("unexpected characters: {!r}".format("".join(sorted(stray_chars))))
    if not any(char in string.ascii_letters for char in text):
        raise InvalidText("no letters to score")
    return text


def xor_score_data(ciphertext, key, reference=english_letter_frequencies):
    message = xor_with_byte(ciphertext, key)
    text = decode_text(message)
    score = frequency_distance(letter_frequencies(text), reference)
    return Candidate(key, message, score)


def byte_xor_candidates(ciphertext, reference=english_letter_frequencies):
    for key in range(256):
        try:
            yield xor_score_data(ciphertext, key, reference)
        except InvalidText:
            continue


def rank_byte_xor_candidates(ciphertext, count=5, reference=english_letter_frequencies):
    # nsmallest is stable, so equal scores keep the lower key first.
    return nsmallest(count, byte_xor_candidates(ciphertext, reference), key=lambda c: c.score)


def best_byte_xor_score_data(ciphertext, reference=english_letter_frequencies):
    """Find the single-byte key that makes ciphertext look most like English.

    Every key from 0 to 255 is tried. Decryptions that are not English text are
    skipped and the rest are ranked by letter frequency distance from the
    reference, lowest first. If two keys tie, the lower one wins.
    """
    candidates = rank_byte_xor_candidates(ciphertext, 1, reference)
    if not candidates:
        raise NoValidCandidate("no key produced English text")
    return candidates[0]
