"""Various settings and configuration used by the entire project."""


import os


# Project directory (package parent).
PROJECT = os.path.normpath(
    os.path.join(
        os.path.dirname(__file__),
        os.path.pardir
    )
)
RESOURCE = os.path.join(PROJECT, "res", "morsetree")

# Project information.
NAME = "morsetree"
VERSION = "1.0.0"
DESCRIPTION = "A Morse code encoder/decoder."
LICENSE = "Unlicense"

# Log information.
LOGGING = True
# Show debugging/verbose info.
DEBUG = False
# Logging file.
LOGFILE = "morsetree.log"

# Misc.
ENCODING = "utf-8"

# Codec settings.
DOT = "."
DASH = "-"
TERMINATOR = "\0"
# Tree root (indexes 0 and 1) and unassigned paths.
ROOT_MARKER = "*"
GAP_MARKER = "?"
# Breadth-first layout of the morse tree, the index of a letter is its code
# in binary after the leading 1 (0 is a dot, 1 is a dash).
CODEBOOK = "**ETIANMSURWDKGOHVF?L?PJBXCYZQ??"
# Five symbols at most plus the terminator.
BUFFER_SIZE = 6

# Translator settings.
LETTER_SEPARATOR = " "
WORD_SEPARATOR = "/"
