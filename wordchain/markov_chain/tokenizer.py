import io

from wordchain import config

STOP = config.STOP_CHAR


class Tokenizer:
    """
    Splits a character stream into words and stop tokens.

    Words are runs of characters that are neither spaces nor the stop
    character. A run of one or more stop characters is returned as a single
    STOP token. The stop character that ends a word is only peeked at, never
    consumed, so the STOP token comes back from its own call to `next`.

    Only the `space` character separates words. Tabs and other whitespace
    stay inside the word they touch ("a\\tb" is one token).
    """
    def __init__(self, stream, stop=STOP, space=config.SPACE_CHAR):
        if isinstance(stream, str):
            stream = io.StringIO(stream)
        self.stream = stream
        self.stop = stop
        self.space = space
        self._lookahead = None

    def peek(self):
        """Returns the next character without consuming it, or '' at the end."""
        if self._lookahead is None:
            self._lookahead = self.stream.read(1)
        return self._lookahead

    def _get(self):
        char = self.peek()
        self._lookahead = None
        return char

    def done(self):
        return self.peek() == ''

    def next(self):
        """
        Returns the next word or STOP token.
        Returns '' when the stream is already exhausted, so callers must check
        `done()` before trusting the result.
        """
        buff = []

        # Skip any preceding whitespace
        while not self.done() and self.peek() == self.space:
            self._get()

        # A run of stop characters collapses into one STOP token
        if not self.done() and self.peek() == self.stop:
            while not self.done() and self.peek() == self.stop:
                self._get()
            return self.stop

        while not self.done():
            char = self.peek()
            if char == self.space or char == self.stop:
                break
            buff.append(self._get())

        return ''.join(buff)

    def __iter__(self):
        while not self.done():
            token = self.next()
            # Trailing spaces leave nothing to read after the skip
            if token:
                yield token


def tokenize(text, stop=STOP):
    """Converts a string to its list of tokens."""
    return list(Tokenizer(text, stop=stop))


def detokenize(tokens, stop=STOP):
    """
    Joins tokens back into text. Words are separated by single spaces and
    STOP tokens are rendered as one stop character.
    """
    parts = []
    for token in tokens:
        if token == stop:
            parts.append(stop)
        else:
            if parts and parts[-1] != stop:
                parts.append(config.SPACE_CHAR)
            parts.append(token)
    return ''.join(parts)
