import io
import logging
from collections import Counter

import numpy as np
from tqdm import tqdm

from wordchain.markov_chain.errors import (
    EmptyToken,
    WordChainError,
    ModelAlreadyBuilt,
    ModelNotBuilt,
    NoTransitionsForState,
)
from wordchain.markov_chain.tokenizer import STOP, Tokenizer
from wordchain.markov_chain.walker import Walker

logger = logging.getLogger(__name__)

# The stop token doubles as the start state: a finished sequence transitions to
# STOP, and the STOP table holds the words that begin a sequence.
START = STOP


class TransitionTable:
    """
    Counts the tokens that followed one token in the corpus and turns those
    counts into a discrete distribution to sample from.
    """
    def __init__(self, token=''):
        self.token = token
        self.transitions = Counter()
        self.total = 0
        # Filled in by `compile`. Index i of `lookup` matches index i of `probabilities`.
        self.lookup = []
        self.probabilities = np.empty(0)
        self._compiled_total = 0

    def update_transition(self, next_token):
        self.transitions[next_token] += 1
        self.total += 1

    def compile(self):
        """Regenerates the lookup list and probability vector from the counts."""
        if self.total == 0:
            raise NoTransitionsForState(self.token)

        self.lookup = sorted(self.transitions)
        counts = np.array([self.transitions[t] for t in self.lookup], dtype=float)
        self.probabilities = counts / self.total
        self._compiled_total = self.total

    @property
    def compiled(self):
        return bool(self.lookup) and self._compiled_total == self.total

    def sample(self, rng):
        """Draws the next token using `rng`, a numpy Generator."""
        if not self.lookup:
            raise NoTransitionsForState(self.token)
        if self._compiled_total != self.total:
            raise ModelNotBuilt(f"Transitions of {self.token!r} changed since the last compile")
        index = rng.choice(len(self.lookup), p=self.probabilities)
        return self.lookup[index]

    def probability(self, next_token):
        if not self.compiled:
            raise ModelNotBuilt(f"Transitions of {self.token!r} are not compiled")
        try:
            return float(self.probabilities[self.lookup.index(next_token)])
        except ValueError:
            return 0.0

    def value(self):
        if self.token == '':
            raise EmptyToken("Transition table has no token value")
        return self.token

    def inspect(self):
        """Returns one line per transition plus a totals line."""
        lines = [repr(self.token)]
        prob_count = 0.0
        for next_token, count in sorted(self.transitions.items()):
            prob = count / self.total
            prob_count += prob
            lines.append(f"\t -> {next_token!r} probability ({count} / {self.total}): {prob:g}")
        lines.append(f"\t total transitions: {sum(self.transitions.values())} / {self.total} => {prob_count:g}")
        return lines

    def __len__(self):
        return len(self.transitions)

    def __repr__(self):
        return f"TransitionTable({self.token!r}, total={self.total})"


class ChainModel:
    """
    A first-order Markov chain over words.

    Build it once from a corpus, then walk it with `next` or with independent
    `Walker` cursors. No transitions can be added after the model is cached.
    """
    def __init__(self, rng=None, stop=START):
        self.rng = rng if rng is not None else np.random.default_rng()
        self.stop = stop
        self.tables = {stop: TransitionTable(stop)}
        self.built = False
        self.current_token = ''

    @property
    def start(self):
        return self.tables[self.stop]

    def update(self, current, next_token):
        """
        Records `current -> next_token`. The table for `current` is created on
        its first transition.
        """
        if self.built:
            raise ModelAlreadyBuilt("Cannot add transitions to a cached model; build a new one")
        table = self.tables.get(current)
        if table is None:
            table = self.tables[current] = TransitionTable(current)
        table.update_transition(next_token)

    def build(self, source, progress=False):
        """
        Scans `source` (a Tokenizer, a text stream or a string) and caches the
        resulting tables. Every sequence ends with a transition to the stop
        token, so a walk can always start over. A Tokenizer's own stop
        character becomes the model's stop and start state.

        Lines holding nothing but spaces do not count as sequences: the stop
        state never transitions to itself.
        """
        if isinstance(source, (str, io.TextIOBase)):
            source = Tokenizer(source, stop=self.stop)
        elif source.stop != self.stop:
            if self.built or len(self.tables) > 1 or self.start.total:
                raise WordChainError(
                    f"Tokenizer stops on {source.stop!r} but the model already uses {self.stop!r}")
            self.stop = source.stop
            self.tables = {self.stop: TransitionTable(self.stop)}

        stop = self.stop
        current = stop
        while not source.done():
            next_token = source.next()

            # Only whitespace was left: the stream ends the current sequence.
            if next_token == '':
                next_token = stop

            if not (current == stop and next_token == stop):
                self.update(current, next_token)
            current = next_token

            # A corpus without a trailing stop character still ends in a stop.
            if source.done() and current != stop:
                self.update(current, stop)

        self.cache(progress=progress)
        logger.info("Built chain with %d states and %d transitions",
                    len(self.tables), sum(t.total for t in self.tables.values()))
        return self

    def cache(self, progress=False):
        """Compiles every table. The start table stays empty for an empty corpus."""
        if self.built:
            raise ModelAlreadyBuilt("Model is already cached")
        for table in tqdm(self.tables.values(), desc="Compiling transition tables", disable=not progress):
            if table.total:
                table.compile()
                logger.debug("Compiled %r with %d destinations", table.token, len(table))
        self.built = True

    def check_build(self):
        if not self.built:
            raise ModelNotBuilt("Need to build the model before using it")

    def table(self, token):
        """Returns the table for `token`, falling back to the start table for ''."""
        self.check_build()
        key = token or self.stop
        try:
            return self.tables[key]
        except KeyError:
            raise NoTransitionsForState(key) from None

    def step(self, token, rng=None):
        """Samples the token that follows `token` without touching the model's cursor."""
        return self.table(token).sample(rng if rng is not None else self.rng)

    def current(self):
        self.check_build()
        return self.current_token

    def next(self):
        """Returns the next word from the current one."""
        self.current_token = self.step(self.current_token)
        return self.current_token

    def reset(self):
        self.current_token = ''

    def walker(self, rng=None):
        return Walker(self, rng=rng)

    def num_words(self):
        return len(self.tables)

    def stats(self):
        """Returns basic statistics about the model."""
        total = sum(t.total for t in self.tables.values())
        return {
            "states": len(self.tables),
            "transitions": total,
            "avg_transitions_per_state": total / len(self.tables),
        }

    def __len__(self):
        return len(self.tables)

    def __contains__(self, token):
        return token in self.tables
