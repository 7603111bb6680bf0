"""

The `TextStream` class.  This is the cursor into the text being parsed: it
holds the text and the current offset into it, gives bounded lookahead, and
raises the located exceptions used for all syntax errors.

Lookahead past the end of the text never raises; it returns the sentinel
`END_OF_TEXT` instead, so the scanning code can peek freely.

"""

if __name__ == "__main__": # Run tests when invoked as a script.
    import pytest_helper
    pytest_helper.script_run("../../test/test_text_stream.py", pytest_args="-v")

import logging

from .shared_settings_and_exceptions import (END_OF_TEXT, ErrorInParsedLanguage,
                                             ImpossibleParserState)

__all__ = ["TextStream"]

logger = logging.getLogger(__name__)


class TextStream:
    """A cursor over a string of text.  The `index` attribute is the 0-based
    offset of the next unread character."""

    def __init__(self, text, index=0):
        """Initialize with the text to scan and an optional starting offset."""
        self.text = text
        self.index = index

    def get(self):
        """Return the current offset."""
        return self.index

    def set(self, index):
        """Move the cursor to offset `index`."""
        self.index = index

    def inc(self, count=1):
        """Advance the cursor by `count` characters."""
        self.index += count

    def ch(self, offset=0):
        """Return the character `offset` places past the cursor.  Returns
        `END_OF_TEXT` if that position is outside the text."""
        i = self.index + offset
        if 0 <= i < len(self.text):
            return self.text[i]
        return END_OF_TEXT

    def at_end(self):
        """True if all the text has been read."""
        return self.index >= len(self.text)

    def startswith(self, symbol):
        """Test whether the unread text begins with the string `symbol`."""
        return self.text.startswith(symbol, self.index)

    def remaining(self):
        """Return the unread part of the text."""
        return self.text[self.index:]

    #
    # Errors.
    #

    def die(self, message):
        """Raise an `ErrorInParsedLanguage` for a syntax error at the current
        offset."""
        message = self._message_with_details(message)
        logger.debug("Syntax error: %s", message)
        raise ErrorInParsedLanguage(message, self.index)

    def fail(self, message):
        """Raise an `ImpossibleParserState` exception for a configuration
        which drove the parse into an unhandled state."""
        message = self._message_with_details(message)
        logger.debug("Parser state error: %s", message)
        raise ImpossibleParserState(message, self.index)

    def assert_that(self, condition, message):
        """Call `fail` with `message` unless `condition` is true."""
        if not condition:
            self.fail(message)

    def _message_with_details(self, message):
        return "{0} at index {1}".format(message, self.index)

    #
    # Representations.
    #

    def __str__(self):
        """Show the text with a caret under the current offset.  Handy when
        stepping through a parse in a debugger."""
        return "{0}\n{1}^".format(self.text, " " * self.index)

    def __repr__(self):
        return "TextStream({0!r}, index={1})".format(self.text, self.index)

