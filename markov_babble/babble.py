"""
Command-line entry point: read a corpus, build a Markov chain over its
tokens, and print randomly generated text.

    markov-babble corpus.txt --order 2 --max-tokens 50 --seed 7
    cat play.txt | markov-babble --boundaries line-endings --respect-boundaries
"""
import logging
import sys
from pathlib import Path

import click

from markov_babble import config
from markov_babble.errors import ConfigurationError, EmptyModelError
from markov_babble.markov_chain import generate, train_from_paths, train_from_stream
from markov_babble.tokenizer import boundary_set_for, join_tokens


def format_size(num_bytes):
    """Render a byte count with a binary unit, e.g. '1.5 KiB'."""
    size = float(num_bytes)
    for unit in ('B', 'KiB', 'MiB', 'GiB'):
        if size < 1024 or unit == 'GiB':
            return f"{size:.0f} {unit}" if unit == 'B' else f"{size:.1f} {unit}"
        size /= 1024


@click.command()
@click.argument('inputs', nargs=-1, type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--order', '-o', type=int, default=config.DEFAULT_ORDER, envvar='BABBLE_ORDER',
              show_default=True,
              help="Number of preceding tokens used to predict the next one.")
@click.option('--max-tokens', '-m', type=int, default=config.DEFAULT_MAX_TOKENS,
              envvar='BABBLE_MAX_TOKENS', show_default=True,
              help="Maximum number of tokens to generate per sample.")
@click.option('--boundaries', '-b', type=click.Choice(list(config.BOUNDARY_MODES)),
              default=config.DEFAULT_BOUNDARY_MODE, show_default=True,
              help="Whether lines or sentences mark utterance edges.")
@click.option('--boundary-token', 'boundary_tokens', multiple=True,
              help="Extra token treated as a boundary. Can be repeated.")
@click.option('--respect-boundaries/--ignore-boundaries', default=False, show_default=True,
              help="Start and stop generation at boundary tokens.")
@click.option('--seed', type=int, default=None, help="Random seed for reproducible output.")
@click.option('--count', '-n', type=click.IntRange(min=1), default=1, show_default=True,
              help="Number of samples to generate from the same model.")
@click.option('--start', default=None,
              help="Whitespace separated start state; must contain exactly ORDER tokens.")
@click.option('--show-memory/--no-show-memory', default=True, show_default=True,
              help="Report model size and estimated memory use on stderr.")
@click.option('--verbose', '-v', is_flag=True, help="Enable debug logging.")
def main(inputs, order, max_tokens, boundaries, boundary_tokens, respect_boundaries,
         seed, count, start, show_memory, verbose):
    """
    Generates text from a Markov chain trained on INPUTS (or stdin when no
    files are given).
    """
    logging.basicConfig(level=logging.DEBUG if verbose else config.LOG_LEVEL, format=config.LOG_FORMAT)

    try:
        if inputs:
            model, state_count, entry_count = train_from_paths(inputs, order, boundaries)
        else:
            model, state_count, entry_count = train_from_stream(sys.stdin, order, boundaries)

        if show_memory:
            click.echo(f"{state_count} states, {entry_count} transitions trained with corpus "
                       f"(~{format_size(model.estimated_size_bytes())} estimated)", err=True)

        boundary_set = boundary_set_for(boundaries, boundary_tokens)
        start_state = tuple(start.split()) if start is not None else None

        for k in range(count):
            tokens = generate(
                model,
                order,
                max_tokens,
                boundary_set=boundary_set,
                respect_boundaries=respect_boundaries,
                rng_seed=seed + k if seed is not None else None,
                start=start_state,
            )
            click.echo(join_tokens(tokens))
    except (ConfigurationError, EmptyModelError) as e:
        raise click.ClickException(str(e))


if __name__ == '__main__':
    main()
