"""Letter level morse encoder/decoder walking an implicit binary tree.

The codebook is a breadth-first layout of the morse tree: the node at index
`n` has its parent at `n >> 1` and its children at `2n` (dot) and `2n + 1`
(dash). Index 1 is the root, so the path to a letter is the binary form of
its index without the leading 1.
"""


import numbers
import string

import numpy as np

from morsetree import exceptions, settings
from morsetree.utils import Logger


class Codec(Logger):

    """Translate single letters into morse code and back."""

    def __init__(self, codebook=settings.CODEBOOK, dot=settings.DOT,
                 dash=settings.DASH, *args, **kwargs):
        super(Codec, self).__init__(*args, **kwargs)

        self.codebook = codebook
        self.dot = dot
        self.dash = dash
        self.terminator = settings.TERMINATOR
        self._check()

    def _check(self):
        if not isinstance(self.codebook, str):
            raise exceptions.CodecMorseError(
                "invalid codebook {!r}".format(self.codebook))
        symbols = [self.dot, self.dash, self.terminator]
        for symbol in symbols:
            if not isinstance(symbol, str) or len(symbol) != 1:
                raise exceptions.CodecMorseError(
                    "invalid symbol {!r}".format(symbol))
            if ord(symbol) > 0xFF:
                raise exceptions.CodecMorseError(
                    "symbol {!r} doesn't fit in a byte".format(symbol))
        if len(set(symbols)) != len(symbols):
            raise exceptions.CodecMorseError(
                "dot, dash and terminator must be distinct")

        # Deepest index must still fit in the buffer, terminator included.
        max_length = 2 ** settings.BUFFER_SIZE
        if not 2 <= len(self.codebook) <= max_length:
            raise exceptions.CodecMorseError(
                "codebook length must be between 2 and {}".format(max_length))

    @staticmethod
    def _get_letter(letter):
        if isinstance(letter, bytes):
            letter = letter.decode("latin-1")
        elif isinstance(letter, numbers.Integral) and 0 <= letter <= 0xFF:
            letter = chr(int(letter))
        if not isinstance(letter, str) or len(letter) != 1:
            raise exceptions.InvalidSymbolError(
                "invalid letter {!r}".format(letter))
        return letter

    @staticmethod
    def _get_symbol(symbol):
        if isinstance(symbol, numbers.Integral) and 0 <= symbol <= 0xFF:
            return chr(int(symbol))
        if isinstance(symbol, str) and len(symbol) == 1:
            return symbol
        raise exceptions.InvalidCharacterError(
            "invalid morse symbol {!r}".format(symbol))

    @staticmethod
    def _reverse(buffer, length):
        last = length - 1
        for idx in range(length // 2):
            buffer[idx], buffer[last - idx] = buffer[last - idx], buffer[idx]

    def _lookup(self, index):
        letter = self.codebook[index]
        if letter == settings.ROOT_MARKER:
            return settings.GAP_MARKER
        return letter

    def encode(self, letter, out=None):
        """Encode a single letter into a zero terminated morse buffer.

        :param letter: one character string, one byte or a byte value
        :param out: optional buffer of at least `BUFFER_SIZE` elements
        :returns: the filled buffer (a new `uint8` array if `out` is None)
        :raises InvalidSymbolError: when the letter has no morse code
        """
        if out is None:
            out = np.zeros(settings.BUFFER_SIZE, dtype=np.uint8)
        elif len(out) < settings.BUFFER_SIZE:
            raise exceptions.BufferMorseError(
                "buffer needs at least {} slots".format(settings.BUFFER_SIZE))
        for idx in range(settings.BUFFER_SIZE):
            out[idx] = ord(self.terminator)

        letter = self._get_letter(letter)
        pos = self.codebook.find(letter)
        if pos == -1 or letter in (settings.ROOT_MARKER, settings.GAP_MARKER):
            raise exceptions.InvalidSymbolError(
                "no morse code for {!r}".format(letter))

        # Walk from the leaf up to the root, then flip the path.
        length = 0
        while pos >> 1:
            symbol = self.dash if pos & 1 else self.dot
            out[length] = ord(symbol)
            pos >>= 1
            length += 1
        self._reverse(out, length)

        self.log.debug("Encoded %r as %s.", letter, out)
        return out

    def decode(self, code):
        """Decode a single morse letter.

        The code ends at the first terminator or at the end of the input.
        Paths without a letter and codes deeper than the tree give the gap
        marker instead of an error.

        :raises InvalidCharacterError: on anything else than a dot, dash
            or terminator
        """
        try:
            symbols = iter(code)
        except TypeError:
            raise exceptions.InvalidCharacterError(
                "invalid morse code {!r}".format(code))

        index = 1
        while index < len(self.codebook):
            symbol = self._get_symbol(next(symbols, self.terminator))
            if symbol == self.dot:
                index = index << 1
            elif symbol == self.dash:
                index = (index << 1) | 1
            elif symbol == self.terminator:
                return self._lookup(index)
            else:
                raise exceptions.InvalidCharacterError(
                    "invalid morse symbol {!r}".format(symbol))

        self.log.debug("Code %r is too long.", code)
        return settings.GAP_MARKER

    def to_text(self, code):
        """Render a morse buffer up to its terminator as a string."""
        chars = []
        for symbol in code:
            symbol = self._get_symbol(symbol)
            if symbol == self.terminator:
                break
            chars.append(symbol)
        return "".join(chars)

    def self_test(self):
        """Check that every uppercase letter survives a round trip."""
        for letter in string.ascii_uppercase:
            try:
                result = self.decode(self.encode(letter))
            except exceptions.CodecMorseError as exc:
                self.log.error("Self-test failed for %r: %s", letter, exc)
                return False
            if result != letter:
                self.log.error("Self-test decoded %r as %r.", letter, result)
                return False
        return True


_codec = None


def get_codec():
    """Return the shared codec using the default settings."""
    global _codec
    if _codec is None:
        _codec = Codec()
    return _codec


def encode(letter, out=None):
    return get_codec().encode(letter, out=out)


def decode(code):
    return get_codec().decode(code)


def code_to_text(code):
    return get_codec().to_text(code)


def self_test():
    return get_codec().self_test()
