"""Text level translation built on top of the letter codec.

A morse letter is a single code, letters are separated by spaces and words
by a slash, e.g. ``"-- --- .-. ... . / -.-. --- -.. ."``.
"""


import abc

from morsetree import codec, exceptions, settings
from morsetree.utils import Logger


class BaseTranslator(Logger, metaclass=abc.ABCMeta):

    """Base class for any kind of translator"""

    def __init__(self, codec_obj=None, *args, **kwargs):
        super(BaseTranslator, self).__init__(*args, **kwargs)
        self.codec = codec_obj or codec.get_codec()

    @abc.abstractmethod
    def _split(self, text):
        """Returns a list of words, each being a list of letters."""

    @abc.abstractmethod
    def _process(self, item):
        """Returns the translation of a single letter."""

    @abc.abstractmethod
    def _join(self, words):
        """Returns the final text given the translated words."""

    def translate(self, text):
        """Translate a whole text, word by word and letter by letter."""
        if not isinstance(text, str):
            raise exceptions.TranslatorMorseError(
                "can't translate {!r}".format(text))
        words = []
        for word in self._split(text):
            words.append([self._process(item) for item in word])
        result = self._join(words)
        self.log.debug("Translated %r into %r.", text, result)
        return result


class AlphabetTranslator(BaseTranslator):

    """Alphabet to morse translator."""

    def _split(self, text):
        return [list(word.upper()) for word in text.split()]

    def _process(self, item):
        return self.codec.to_text(self.codec.encode(item))

    def _join(self, words):
        word_separator = " {} ".format(settings.WORD_SEPARATOR)
        return word_separator.join(
            settings.LETTER_SEPARATOR.join(word) for word in words
        )


class MorseTranslator(BaseTranslator):

    """Morse to alphabet translator."""

    def _split(self, text):
        words = []
        for word in text.split(settings.WORD_SEPARATOR):
            letters = word.split()
            if letters:
                words.append(letters)
        return words

    def _process(self, item):
        return self.codec.decode(item)

    def _join(self, words):
        return " ".join("".join(word) for word in words)


def translate_alphabet(text, **kwargs):
    """Translate plain text into morse code."""
    return AlphabetTranslator(**kwargs).translate(text)


def translate_morse(text, **kwargs):
    """Translate morse code into plain text."""
    return MorseTranslator(**kwargs).translate(text)
