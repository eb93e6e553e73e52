"""
Command-line entry point for building a word chain from text files and
generating new text from it.
"""
import logging
import sys
from pathlib import Path

import click
import numpy as np

from wordchain import config
from wordchain.markov_chain.corpus import load_model
from wordchain.markov_chain.errors import WordChainError

corpus_argument = click.argument(
    'corpus', nargs=-1, type=click.Path(dir_okay=False, path_type=Path))


def generate_sequence(model, count):
    """Fixed-count mode: the next `count` tokens, STOP tokens rendered as blank lines."""
    return ['' if token == model.stop else token for token in model.walker().take(count)]


def generate_sentences(model, sentences, max_tokens=config.DEFAULT_MAX_SENTENCE_TOKENS):
    """Stop-driven mode: `sentences` space-joined sentences."""
    walker = model.walker()
    lines = []
    for _ in range(sentences):
        lines.append(' '.join(walker.sentence(max_tokens=max_tokens)))
        # A sentence cut at max_tokens leaves the cursor mid-chain.
        if not walker.done():
            walker.reset()
    return lines


def _load(corpus, seed, progress):
    paths = corpus or (config.DEFAULT_CORPUS_PATH,)
    try:
        return load_model(paths, rng=np.random.default_rng(seed), progress=progress)
    except WordChainError as e:
        click.secho(f"Error: {e}", fg='red', err=True)
        sys.exit(1)


@click.group()
@click.option('--verbose', '-v', is_flag=True, help="Log per-table details.")
def main(verbose):
    """Generate text from a first-order Markov chain over words."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format=config.LOG_FORMAT)


@main.command()
@corpus_argument
@click.option('--count', '-n', type=int, default=config.DEFAULT_COUNT, show_default=True,
              help="Number of tokens to generate.")
@click.option('--sentences', '-s', type=int, default=None,
              help="Generate this many whole sentences instead of a fixed token count.")
@click.option('--seed', type=int, default=config.SEED, help="Seed for the random source.")
@click.option('--output', '-o', 'output_file', type=click.Path(dir_okay=False, writable=True, path_type=Path),
              default=None, help="Save the generated text here instead of printing it.")
@click.option('--progress', is_flag=True, help="Show a progress bar while compiling.")
def generate(corpus, count, sentences, seed, output_file, progress):
    """Builds the chain from CORPUS files and prints generated text."""
    model = _load(corpus, seed, progress)

    try:
        if sentences is not None:
            lines = generate_sentences(model, sentences)
        else:
            lines = generate_sequence(model, count)
    except WordChainError as e:
        click.secho(f"Error: {e}", fg='red', err=True)
        sys.exit(1)

    if output_file:
        output_file.write_text('\n'.join(lines) + '\n', encoding=config.CORPUS_ENCODING)
        click.echo(f"Saved {len(lines)} lines to {output_file}")
    else:
        for line in lines:
            click.echo(line)


@main.command()
@corpus_argument
@click.option('--token', '-t', default=None, help="Only show the table for this token.")
def inspect(corpus, token):
    """Prints the transition tables built from CORPUS files."""
    model = _load(corpus, None, False)

    if token is not None:
        if token not in model:
            click.secho(f"Token {token!r} is not in the corpus", fg='red', err=True)
            sys.exit(1)
        tables = [model.tables[token]]
    else:
        tables = model.tables.values()

    for table in tables:
        for line in table.inspect():
            click.echo(line)

    stats = model.stats()
    click.echo(f"{stats['states']} states, {stats['transitions']} transitions, "
               f"{stats['avg_transitions_per_state']:.2f} per state")


if __name__ == '__main__':
    main()
