"""Tests for walking a built chain with independent cursors."""

from itertools import islice

import numpy as np
import pytest

from wordchain.markov_chain.errors import EmptyToken, ModelNotBuilt
from wordchain.markov_chain.markov_chain import ChainModel
from wordchain.markov_chain.tokenizer import STOP
from wordchain.markov_chain.walker import Walker


@pytest.fixture
def model():
    return ChainModel(rng=np.random.default_rng(5)).build("a b\na c\nd e f\n")


def test_walker_requires_built_model():
    with pytest.raises(ModelNotBuilt):
        Walker(ChainModel())


def test_current_before_first_step_raises(model):
    with pytest.raises(EmptyToken):
        model.walker().current()


def test_single_word_corpus_reports_done_after_word():
    walker = ChainModel(rng=np.random.default_rng(1)).build("hello\n").walker()

    assert walker.next() == "hello"
    assert not walker.done()
    assert walker.next() == STOP
    assert walker.done()


def test_take_ignores_done(model):
    tokens = model.walker().take(30)

    assert len(tokens) == 30
    assert STOP in tokens


def test_sentence_stops_at_stop_token(model):
    walker = model.walker()

    for _ in range(10):
        sentence = walker.sentence()
        assert walker.done()
        assert sentence in (["a", "b"], ["a", "c"], ["d", "e", "f"])


def test_sentence_max_tokens_caps_length():
    model = ChainModel(rng=np.random.default_rng(0)).build("a a a a a a a a a a a a\n")

    assert len(model.walker().sentence(max_tokens=3)) <= 3


def test_walkers_with_own_seeds_are_independent_and_repeatable(model):
    first = model.walker(rng=np.random.default_rng(9))
    second = model.walker(rng=np.random.default_rng(9))

    assert first.take(40) == second.take(40)
    assert model.current() == ""


def test_walker_is_iterable(model):
    assert len(list(islice(model.walker(), 7))) == 7


def test_reset_starts_a_fresh_sequence():
    walker = ChainModel(rng=np.random.default_rng(0)).build("x y z\n").walker()
    walker.take(2)

    walker.reset()

    assert walker.next() == "x"
