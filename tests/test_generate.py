"""Tests for the command-line entry point."""

import numpy as np
import pytest
from click.testing import CliRunner

from wordchain.markov_chain.generate import generate_sentences, main
from wordchain.markov_chain.markov_chain import ChainModel


@pytest.fixture
def corpus(tmp_path):
    path = tmp_path / "corpus.txt"
    path.write_text("the cat sat\nthe dog ran\n")
    return path


def test_generate_fixed_count(corpus, tmp_path):
    output = tmp_path / "out.txt"
    result = CliRunner().invoke(
        main, ["generate", str(corpus), "--count", "5", "--seed", "1", "--output", str(output)])

    assert result.exit_code == 0, result.output
    lines = output.read_text().splitlines()
    assert len(lines) == 5
    assert set(lines) <= {"the", "cat", "sat", "dog", "ran", ""}


def test_generate_is_repeatable_with_seed(corpus, tmp_path):
    outputs = []
    for name in ("one.txt", "two.txt"):
        output = tmp_path / name
        CliRunner().invoke(
            main, ["generate", str(corpus), "-n", "12", "--seed", "7", "-o", str(output)])
        outputs.append(output.read_text())

    assert outputs[0] == outputs[1]


def test_generate_sentences(tmp_path):
    corpus = tmp_path / "hello.txt"
    corpus.write_text("hello\n")
    output = tmp_path / "out.txt"

    result = CliRunner().invoke(main, ["generate", str(corpus), "--sentences", "3", "-o", str(output)])

    assert result.exit_code == 0, result.output
    assert output.read_text().splitlines() == ["hello", "hello", "hello"]


def test_generate_prints_to_stdout(tmp_path):
    corpus = tmp_path / "hello.txt"
    corpus.write_text("hello\n")

    result = CliRunner().invoke(main, ["generate", str(corpus), "-s", "1"])

    assert result.exit_code == 0
    assert "hello" in result.output


def test_missing_corpus_exits_with_error(tmp_path):
    result = CliRunner().invoke(main, ["generate", str(tmp_path / "missing.txt")])

    assert result.exit_code == 1
    assert "Could not read corpus" in result.output


def test_empty_corpus_exits_with_error(tmp_path):
    corpus = tmp_path / "empty.txt"
    corpus.write_text("")

    result = CliRunner().invoke(main, ["generate", str(corpus)])

    assert result.exit_code == 1
    assert "No transitions recorded" in result.output


def test_inspect_single_token(corpus):
    result = CliRunner().invoke(main, ["inspect", str(corpus), "--token", "the"])

    assert result.exit_code == 0
    assert "'the'" in result.output
    assert "'cat' probability (1 / 2): 0.5" in result.output


def test_inspect_unknown_token(corpus):
    result = CliRunner().invoke(main, ["inspect", str(corpus), "-t", "zebra"])

    assert result.exit_code == 1


def test_truncated_sentence_does_not_leak_into_the_next():
    model = ChainModel(rng=np.random.default_rng(0)).build("x y z\n")

    assert generate_sentences(model, 3, max_tokens=2) == ["x y", "x y", "x y"]
