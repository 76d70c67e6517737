import logging
from pathlib import Path

from tqdm import tqdm

from markov_babble import config
from markov_babble.tokenizer import read_tokens
from .markov_chain import build_model

logger = logging.getLogger(__name__)


def train_from_stream(stream, order=config.DEFAULT_ORDER, boundaries=config.DEFAULT_BOUNDARY_MODE):
    """Tokenize an open text stream and build a model from it."""
    tokens = list(read_tokens(stream, boundaries))
    logger.info(f"Read {len(tokens)} tokens from {getattr(stream, 'name', 'stream')}")
    return _build(tokens, order)


def train_from_paths(paths, order=config.DEFAULT_ORDER, boundaries=config.DEFAULT_BOUNDARY_MODE,
                     show_progress=True):
    """
    Read UTF-8 text files in order and build one model over their combined tokens.
    The last token of one file transitions into the first token of the next.
    """
    paths = [Path(p) for p in paths]
    tokens = []
    for path in tqdm(paths, desc="Reading corpus", unit="file", disable=not show_progress):
        with open(path, 'r', encoding='utf-8', errors='replace') as f:
            file_tokens = list(read_tokens(f, boundaries))
        logger.info(f"Read {len(file_tokens)} tokens from {path}")
        tokens.extend(file_tokens)
    return _build(tokens, order)


def _build(tokens, order):
    result = build_model(tokens, order)
    if result.distinct_state_count == 0:
        logger.warning(f"Corpus of {len(tokens)} tokens is too short for an order-{order} model")
    else:
        logger.info(f"Trained order-{order} Markov chain: {result.distinct_state_count} states, "
                    f"{result.total_entry_count} transitions")
    return result
