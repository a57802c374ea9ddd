"""Custom exceptions module for error code return ability."""


class MorseError(Exception):
    """Base exception class for all particular and derived errors."""

    CODE = 1    # generic code used for unhandled thrown exceptions


class ProcessMorseError(MorseError):
    """Generic exception for any aspect of a processing class/function."""

    CODE = 11


class TranslatorMorseError(MorseError):
    """Raised when a text can't be translated as a whole."""

    CODE = 12


class CodecMorseError(MorseError):
    """Base class for letter level encoding and decoding errors."""

    CODE = 13


class InvalidSymbolError(CodecMorseError):
    """The letter has no morse code assigned."""

    CODE = 14


class InvalidCharacterError(CodecMorseError):
    """The morse code contains something else than dots and dashes."""

    CODE = 15


class BufferMorseError(CodecMorseError):

    CODE = 16


class SelfTestMorseError(CodecMorseError):

    CODE = 17
