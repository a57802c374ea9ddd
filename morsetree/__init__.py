"""Main package classes, functions and utilities."""


from .codec import (
    Codec,
    code_to_text,
    decode,
    encode,
    get_codec,
    self_test,
)
from .exceptions import (
    BufferMorseError,
    CodecMorseError,
    InvalidCharacterError,
    InvalidSymbolError,
    MorseError,
    ProcessMorseError,
    SelfTestMorseError,
    TranslatorMorseError,
)
from .settings import CODEBOOK, PROJECT, VERSION
from .translator import (
    AlphabetTranslator,
    MorseTranslator,
    translate_alphabet,
    translate_morse,
)
from .utils import (
    get_logger,
    get_mor_code,
    get_return_code,
)


__version__ = VERSION
