import logging
from collections import defaultdict
from typing import NamedTuple

from markov_babble import config
from markov_babble.errors import ConfigurationError

logger = logging.getLogger(__name__)


class MarkovChain:
    """
    A read-only transition model of order N.

    Maps each state (a tuple of N consecutive tokens) to the bag of tokens
    observed to follow it. A token appears in a bag once per observed
    occurrence, so sampling uniformly from the bag is frequency-weighted.
    Use build_model() to create one.
    """
    def __init__(self, order, transitions, preceding):
        self._order = order
        self._transitions = transitions
        self._preceding = preceding

    @property
    def order(self):
        return self._order

    @property
    def distinct_state_count(self):
        return len(self._transitions)

    @property
    def total_entry_count(self):
        return sum(len(bag) for bag in self._transitions.values())

    def states(self):
        """All states, in the order they were first seen in the corpus."""
        return list(self._transitions)

    def successors(self, state):
        """The bag of successors for a state, or an empty tuple if unknown."""
        return self._transitions.get(tuple(state), ())

    def preceding(self, state):
        """
        Tokens seen immediately before the state's first token.
        None in the result marks the start of the token sequence.
        """
        return self._preceding.get(tuple(state), frozenset())

    def estimated_size_bytes(self):
        """Ballpark in-memory size of the model, for diagnostic display."""
        vocabulary = set()
        for state, bag in self._transitions.items():
            vocabulary.update(state)
            vocabulary.update(bag)

        per_state = (config.DICT_ENTRY_BYTES
                     + 2 * config.TUPLE_HEADER_BYTES
                     + self._order * config.TUPLE_SLOT_BYTES)
        size = self.distinct_state_count * per_state
        size += self.total_entry_count * config.TUPLE_SLOT_BYTES
        size += sum(config.STRING_HEADER_BYTES + len(token.encode('utf-8')) for token in vocabulary)
        return size

    def __len__(self):
        return len(self._transitions)

    def __contains__(self, state):
        return tuple(state) in self._transitions

    def __repr__(self):
        return (f"MarkovChain(order={self._order}, states={self.distinct_state_count}, "
                f"transitions={self.total_entry_count})")


class BuildResult(NamedTuple):
    model: MarkovChain
    distinct_state_count: int
    total_entry_count: int


def validate_order(order):
    if isinstance(order, bool) or not isinstance(order, int) or order < 1:
        raise ConfigurationError(f"Model order must be a positive integer, got {order!r}")


def build_model(tokens, order=1):
    """
    Build a transition model from a token sequence in a single left-to-right pass.

    For every position i where tokens[i:i+order] is a full window and a
    successor tokens[i+order] exists, the successor is appended to that
    window's bag. Sequences shorter than order + 1 give an empty model.
    """
    validate_order(order)
    tokens = list(tokens)

    transitions = defaultdict(list)
    preceding = defaultdict(set)
    for i in range(len(tokens) - order):
        state = tuple(tokens[i:i + order])
        transitions[state].append(tokens[i + order])
        preceding[state].add(tokens[i - 1] if i > 0 else None)

    model = MarkovChain(
        order,
        {state: tuple(bag) for state, bag in transitions.items()},
        {state: frozenset(before) for state, before in preceding.items()},
    )
    logger.debug(f"Built order-{order} model from {len(tokens)} tokens: "
                 f"{model.distinct_state_count} states, {model.total_entry_count} transitions")
    return BuildResult(model, model.distinct_state_count, model.total_entry_count)
