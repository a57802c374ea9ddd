"""Command line front end encoding and decoding single letters."""


import argparse
import string
import sys

from morsetree import codec, exceptions, settings
from morsetree.utils import get_logger, get_return_code


ENCODE = "encode"
DECODE = "decode"

# Exit codes for bad invocations.
NO_COMMAND = 2
BAD_COMMAND = 3

TREE_DEPTH = 4


def get_tree(codec_obj, depth=TREE_DEPTH):
    """Draw the first `depth` levels of the codebook tree."""
    width = 2 ** (depth + 1)
    lines = [
        "DIT or {!r} <-- {} --> DAH or {!r}".format(
            codec_obj.dot, settings.ROOT_MARKER, codec_obj.dash
        ).center(width).rstrip(),
    ]
    for level in range(1, depth + 1):
        first = 2 ** level
        cell = width // first
        row = "".join(
            codec_obj.codebook[index].center(cell)
            for index in range(first, min(2 * first, len(codec_obj.codebook)))
        )
        lines.append(row.rstrip())
    return "\n".join(lines)


def get_usage(prog, codec_obj):
    half = len(string.ascii_uppercase) // 2
    lines = [
        "Usage:   {} {}|{} strings...".format(prog, ENCODE, DECODE),
        "",
        "Project: {} - {}".format(settings.NAME, settings.DESCRIPTION),
        "License: {}".format(settings.LICENSE),
        "Version: {}".format(settings.VERSION),
        "",
        "This utility returns zero on success and non-zero on failure.",
        "Errors are printed to stderr and output to stdout. This codebook",
        "only includes the upper case alphabet.",
        "",
        "Characters:",
        "",
    ]
    for first, second in zip(string.ascii_uppercase[:half],
                             string.ascii_uppercase[half:]):
        codes = [codec_obj.to_text(codec_obj.encode(letter))
                 for letter in (first, second)]
        lines.append("\t\t{} {:>5} {} {:>5}".format(
            first, codes[0], second, codes[1]))
    lines.extend(["", "", "Tree:", "", get_tree(codec_obj), ""])
    return "\n".join(lines)


def get_parser():
    parser = argparse.ArgumentParser(
        prog=settings.NAME,
        usage="%(prog)s [-h] [-d] {}|{} strings...".format(ENCODE, DECODE),
        description=settings.DESCRIPTION,
    )
    parser.add_argument(
        "-d", "--debug", action="store_true",
        help="show debugging messages (before the command)"
    )
    return parser


def split_args(argv):
    """Split the options from the command and its strings.

    Only what comes before the command is parsed as options, morse codes
    like ``--`` or ``-.-`` are passed through untouched.
    """
    for idx, arg in enumerate(argv):
        if not arg.startswith("-"):
            return argv[:idx], argv[idx], argv[idx + 1:]
    return argv, None, []


def encode_strings(codec_obj, strings, stream):
    for word in strings:
        for letter in word:
            code = codec_obj.encode(letter.upper())
            stream.write(codec_obj.to_text(code) + " ")
        stream.write("\n")


def decode_strings(codec_obj, strings, stream):
    for code in strings:
        stream.write(codec_obj.decode(code))
    stream.write("\n")


def main(argv=None):
    """Run the command line utility and return its exit code."""
    if argv is None:
        argv = sys.argv[1:]
    options, command, strings = split_args(list(argv))
    args = get_parser().parse_args(options)
    log = get_logger(__name__, debug=args.debug)
    codec_obj = codec.Codec(debug=args.debug)

    handlers = {
        ENCODE: encode_strings,
        DECODE: decode_strings,
    }
    try:
        if not codec_obj.self_test():
            raise exceptions.SelfTestMorseError("codec self-test failed")
        if not command:
            sys.stderr.write(get_usage(settings.NAME, codec_obj))
            return NO_COMMAND
        handler = handlers.get(command)
        if not handler:
            sys.stderr.write(get_usage(settings.NAME, codec_obj))
            return BAD_COMMAND
        handler(codec_obj, strings, sys.stdout)
    except exceptions.MorseError as exc:
        log.error("Command failed: %s", exc)
        sys.stderr.write("error: {}\n".format(exc))
        return get_return_code(exc)
    return 0
