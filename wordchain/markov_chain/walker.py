"""A cursor that walks a built chain one token at a time."""
from wordchain.markov_chain.errors import EmptyToken, ModelNotBuilt


class Walker:
    """
    Holds its own current token and borrows the model's tables. Several walkers
    can share one model; give each its own `rng` to keep their draws apart.
    """
    def __init__(self, model, rng=None):
        if not model.built:
            raise ModelNotBuilt("Cannot walk a model that has not been built")
        self.model = model
        self.rng = rng if rng is not None else model.rng
        self.current_token = ''

    def current(self):
        if not self.current_token:
            raise EmptyToken("Walker has not produced a token yet")
        return self.current_token

    def next(self):
        self.current_token = self.model.step(self.current_token, rng=self.rng)
        return self.current_token

    def reset(self):
        """Puts the cursor back before the start of a sequence."""
        self.current_token = ''

    def done(self):
        """True exactly when the last token produced was the model's stop token."""
        return self.current_token == self.model.stop

    def take(self, count):
        """Returns the next `count` tokens, STOP tokens included."""
        return [self.next() for _ in range(count)]

    def sentence(self, max_tokens=None):
        """
        Returns the words up to the next STOP. The STOP itself is consumed but
        not returned. `max_tokens` caps the length for chains that rarely stop.
        """
        words = []
        while max_tokens is None or len(words) < max_tokens:
            token = self.next()
            if self.done():
                break
            words.append(token)
        return words

    def __iter__(self):
        return self

    def __next__(self):
        return self.next()
