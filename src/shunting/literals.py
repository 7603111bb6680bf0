"""

Recognizers for literals in the parsed text: booleans, strings, and numbers.

Each recognizer is called as `parse_xxx(text, stream)`, where `stream` is a
`TextStream` positioned at the place to look.  On a match the stream is moved
past the literal and the value is returned.  Otherwise `None` is returned and
the stream is left where it was.  Not matching is never an error, but text
which starts like a literal and then turns out to be malformed (an unclosed
string, a bad escape, a number too big for its forced width) is a syntax
error.

The `stream` argument is optional.  When it is left off the text is scanned
from the start, which is convenient for converting whole strings::

    parse_hex("0x1F")    # returns numpy.int32(31)

Numbers
=======

Numeric values use the narrowest representation which holds them exactly:

* integral values try `numpy.int32`, then `numpy.int64`, then `int`;
* an `L` suffix forces `numpy.int64`;
* fractional values (with a decimal point or exponent) become
  `numpy.float64`, or a `decimal.Decimal` if a 64-bit float would overflow;
* an `F` suffix forces `numpy.float32` and a `D` suffix `numpy.float64`.

Forms are tried in the order hex (`0x...`), binary (`0b...`), octal (leading
`0`), decimal.  A leading sign is part of the literal.

Literal chains
==============

The `LiteralChain` class holds an ordered list of recognizers which are tried
in turn.  The parser uses the `standard_chain`, which tries booleans, then
strings, then numbers.  Custom literal syntaxes can be supported by building a
different chain and passing it to the `ExpressionParser`.

"""

if __name__ == "__main__":
    import pytest_helper
    pytest_helper.script_run("../../test/test_literals.py", pytest_args="-v")

import re
import math
import decimal

import numpy as np

from .text_stream import TextStream
from .helpers import first_match_fun

__all__ = ["parse_boolean", "parse_string", "parse_hex", "parse_binary",
           "parse_octal", "parse_decimal", "parse_number", "parse_literal",
           "LiteralChain", "standard_chain"]

HEX = re.compile(r"(([-+]?)0[Xx]([0-9a-fA-F]+)([Ll]?))")
BINARY = re.compile(r"(([-+]?)0[Bb]([01]+)([Ll]?))")
OCTAL = re.compile(r"(([-+]?)0([0-7]+)([Ll]?))")
DECIMAL = re.compile(r"(([-+]?[0-9]+(\.[0-9]*)?([Ee][-+]?[0-9]+)?)([DdFfLl])?)")

INT32_INFO = np.iinfo(np.int32)
INT64_INFO = np.iinfo(np.int64)
FLOAT32_MAX = float(np.finfo(np.float32).max)

SIMPLE_ESCAPES = {
        "b": "\b", # backspace
        "t": "\t", # tab
        "n": "\n", # linefeed
        "f": "\f", # form feed
        "r": "\r", # carriage return
        '"': '"',
        "\\": "\\",
        }

OCTAL_DIGITS = "01234567"
HEX_DIGITS = "0123456789abcdefABCDEF"

#
# Booleans and strings.
#

def parse_boolean(text, stream=None):
    """Recognize the words `true` and `false`, returning the `bool` value."""
    if stream is None:
        stream = TextStream(text)
    if _is_word(stream, "true"):
        stream.inc(4)
        return True
    if _is_word(stream, "false"):
        stream.inc(5)
        return False
    return None

def parse_string(text, stream=None):
    """Recognize a quoted string.  Single-quoted strings are taken verbatim.
    Double-quoted strings process backslash escapes, including octal escapes
    `\\0` through `\\377` and four-digit unicode escapes `\\uXXXX`."""
    if stream is None:
        stream = TextStream(text)
    quote = stream.ch()
    if quote != '"' and quote != "'":
        return None
    offset = 1

    escaped = False
    chars = []
    while True:
        if stream.get() + offset >= len(stream.text):
            stream.die("Unclosed string literal")
        c = stream.ch(offset)

        if escaped:
            escaped = False
            if c in OCTAL_DIGITS: # octal sequence
                octal = c
                if stream.ch(offset + 1) in OCTAL_DIGITS:
                    octal += stream.ch(offset + 1)
                    # Three digits only if the value stays below \400.
                    if c in "0123" and stream.ch(offset + 2) in OCTAL_DIGITS:
                        octal += stream.ch(offset + 2)
                chars.append(chr(int(octal, 8)))
                offset += len(octal)
                continue
            if c in SIMPLE_ESCAPES:
                chars.append(SIMPLE_ESCAPES[c])
            elif c == "u": # unicode sequence
                digits = "".join(_hex_digit(stream, offset + i) for i in range(1, 5))
                chars.append(chr(int(digits, 16)))
                offset += 4
            else:
                stream.die("Invalid escape sequence")
        elif c == "\\" and quote == '"':
            escaped = True
        elif c == quote:
            break
        else:
            chars.append(c)
        offset += 1

    stream.inc(offset + 1)
    return "".join(chars)

#
# Numbers.
#

def parse_hex(text, stream=None):
    """Recognize a hexadecimal integer such as `0x1F` or `-0xffL`."""
    return _parse_integer(HEX, text, stream, 16)

def parse_binary(text, stream=None):
    """Recognize a binary integer such as `0b101`."""
    return _parse_integer(BINARY, text, stream, 2)

def parse_octal(text, stream=None):
    """Recognize an octal integer, which is written with a leading zero."""
    return _parse_integer(OCTAL, text, stream, 8)

def parse_decimal(text, stream=None):
    """Recognize a decimal number, with optional sign, fraction, exponent, and
    one of the suffixes `L` (64-bit integer), `F` (32-bit float) or `D`
    (64-bit float)."""
    if stream is None:
        stream = TextStream(text)
    if not _is_number_syntax(stream):
        return None

    m = DECIMAL.match(stream.text, stream.get())
    if not m:
        return None
    number = m.group(2)
    force = (m.group(5) or "").lower()
    force_long = force == "l"
    force_float = force == "f"
    force_double = force == "d"

    result = None
    if not force_float and not force_double:
        result = _integer_value(number, force_long, 10)
    if result is None and not force_long:
        result = _decimal_value(number, force_float, force_double)
    return _verify_result(result, m, stream)

def parse_number(text, stream=None):
    """Recognize a number in any of the supported bases."""
    if stream is None:
        stream = TextStream(text)
    for parse_fun in (parse_hex, parse_binary, parse_octal, parse_decimal):
        number = parse_fun(text, stream)
        if number is not None:
            return number
    return None

def parse_literal(text, stream=None):
    """Recognize any of the standard literals."""
    if stream is None:
        stream = TextStream(text)
    return standard_chain().parse(text, stream)

#
# Chains of literal recognizers.
#

class LiteralChain:
    """An ordered list of literal recognizers.  Each recognizer is a function
    taking the arguments `(text, stream)` as described in the module docs.
    The first one to return a value other than `None` wins."""

    def __init__(self, matchers=None):
        self.matchers = list(matchers) if matchers else []

    def then(self, matcher):
        """Append `matcher` to the end of the chain.  Returns the chain, so
        calls can be strung together."""
        self.matchers.append(matcher)
        return self

    def parse(self, text, stream):
        """Try each recognizer in turn and return the first literal found, or
        `None` if none of them match."""
        combined_fun = first_match_fun(*self.matchers)
        if combined_fun is None:
            return None
        return combined_fun(text, stream)

    def __iter__(self):
        return iter(self.matchers)

    def __len__(self):
        return len(self.matchers)

def standard_chain():
    """Return a new chain of booleans, then strings, then numbers."""
    return LiteralChain().then(parse_boolean).then(parse_string).then(parse_number)

#
# Helper functions.
#

def _is_word(stream, word):
    """Test whether `word` is next in the stream and is not just the start of
    a longer identifier."""
    if not stream.startswith(word):
        return False
    return not _is_identifier_part(stream.ch(len(word)))

def _is_identifier_part(char):
    return ("_" + char).isidentifier()

def _hex_digit(stream, offset):
    c = stream.ch(offset)
    if c not in HEX_DIGITS:
        stream.die("Invalid unicode sequence")
    return c

def _is_number_syntax(stream):
    """A number starts with a digit, possibly after a sign."""
    offset = 1 if stream.ch() in "-+" else 0
    return stream.ch(offset) in "0123456789"

def _parse_integer(pattern, text, stream, base):
    if stream is None:
        stream = TextStream(text)
    if not _is_number_syntax(stream):
        return None

    m = pattern.match(stream.text, stream.get())
    if not m:
        return None
    number = m.group(2) + m.group(3)
    force_long = bool(m.group(4))
    result = _integer_value(number, force_long, base)
    return _verify_result(result, m, stream)

def _integer_value(number, force_long, base):
    """Convert the string `number` in the given base to the narrowest integer
    type that holds it.  Returns `None` if it is not an integer or does not
    fit in a forced 64-bit integer."""
    try:
        value = int(number, base)
    except ValueError:
        return None

    if not force_long and INT32_INFO.min <= value <= INT32_INFO.max:
        return np.int32(value)
    if INT64_INFO.min <= value <= INT64_INFO.max:
        return np.int64(value)
    if not force_long:
        return value
    return None

def _decimal_value(number, force_float, force_double):
    """Convert the string `number` to a float, widening to `Decimal` when not
    forced.  Returns `None` for values too big for a forced width."""
    value = float(number)
    if force_float:
        if math.isinf(value) or abs(value) > FLOAT32_MAX:
            return None
        return np.float32(value)
    if not math.isinf(value):
        return np.float64(value)
    if not force_double:
        return decimal.Decimal(number)
    return None

def _verify_result(result, m, stream):
    if result is None:
        stream.die("Illegal numeric literal")
    stream.inc(len(m.group(1)))
    return result

