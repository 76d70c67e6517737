import logging
import random

from markov_babble import config
from markov_babble.errors import ConfigurationError, EmptyModelError
from .markov_chain import validate_order

logger = logging.getLogger(__name__)


def choose_start_state(model, rng, boundary_set=None):
    """
    Pick a start state uniformly at random.

    With a boundary set, only states that open a sentence are considered:
    those first seen at the start of the corpus or right after a boundary token.
    """
    states = model.states()
    if not states:
        raise EmptyModelError("Model is empty. Build it from a longer corpus first.")

    if boundary_set is not None:
        openers = [
            state for state in states
            if any(before is None or before in boundary_set for before in model.preceding(state))
        ]
        # The corpus's first window is always an opener, so this only falls
        # through for hand-built models.
        if openers:
            states = openers

    return rng.choice(states)


def iter_tokens(model, max_length, rng, start=None, boundary_set=None, respect_boundaries=False):
    """
    Lazily walk the model, yielding at most max_length tokens.

    Stops early when the current state has no successors or, when respecting
    boundaries, right after a boundary token has been yielded.
    """
    if respect_boundaries and boundary_set is None:
        boundary_set = config.BOUNDARY_MODES[config.DEFAULT_BOUNDARY_MODE]

    if start is None:
        current_state = choose_start_state(model, rng, boundary_set if respect_boundaries else None)
    else:
        current_state = tuple(start)

    emitted = 0
    while emitted < max_length:
        next_tokens = model.successors(current_state)
        if not next_tokens:
            logger.debug(f"Dead end at state {current_state!r} after {emitted} tokens")
            return

        next_token = rng.choice(next_tokens)
        yield next_token
        emitted += 1

        current_state = (*current_state[1:], next_token)

        if respect_boundaries and next_token in boundary_set:
            return


def generate(model, order, max_length, boundary_set=None, respect_boundaries=False,
             rng_seed=None, start=None, rng=None):
    """
    Generate up to max_length tokens from a built model.

    The output is fully determined by the model and the randomness source:
    either pass rng (a random.Random) or rng_seed. Short output is a normal
    result; only an empty model raises (EmptyModelError).
    """
    validate_order(order)
    if order != model.order:
        raise ConfigurationError(f"Requested order {order} does not match the model's order {model.order}")
    if isinstance(max_length, bool) or not isinstance(max_length, int) or max_length < 1:
        raise ConfigurationError(f"Maximum length must be a positive integer, got {max_length!r}")
    if len(model) == 0:
        raise EmptyModelError("Model is empty. Build it from a longer corpus first.")
    if isinstance(start, str):
        raise ConfigurationError(f"Start state must be a sequence of {order} tokens, not the string {start!r}")
    if start is not None and len(tuple(start)) != order:
        raise ConfigurationError(f"Start state must have exactly {order} tokens, got {len(tuple(start))}")

    if rng is None:
        rng = random.Random(rng_seed)
    if boundary_set is not None:
        boundary_set = frozenset(boundary_set)

    return list(iter_tokens(
        model,
        max_length,
        rng,
        start=start,
        boundary_set=boundary_set,
        respect_boundaries=respect_boundaries,
    ))
