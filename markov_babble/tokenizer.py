import re

from markov_babble import config
from markov_babble.errors import ConfigurationError

# A word is a run of letters, digits or apostrophes, optionally joined by
# inner hyphens ("well-known"). Any other non-space character is punctuation
# and becomes a token of its own.
TOKEN_PATTERN = re.compile(r"[\w']+(?:-[\w']+)*|[^\w\s]")


def tokenize(line):
    """Split one line of text into word and punctuation tokens."""
    return TOKEN_PATTERN.findall(line)


def read_tokens(lines, boundaries=config.DEFAULT_BOUNDARY_MODE):
    """
    Yield the tokens of every line in a stream as one continuous sequence.

    Line breaks do not cut transitions: the last token of a line is followed
    by the first token of the next. In 'line-endings' mode a LINE_BREAK token
    is emitted after each non-empty line so that lines act as utterances.
    """
    if boundaries not in config.BOUNDARY_MODES:
        raise ConfigurationError(
            f"Unknown boundary mode '{boundaries}'. Choose from: {', '.join(config.BOUNDARY_MODES)}")

    for line in lines:
        tokens = tokenize(line)
        if not tokens:
            continue
        yield from tokens
        if boundaries == 'line-endings':
            yield config.LINE_BREAK


def boundary_set_for(boundaries=config.DEFAULT_BOUNDARY_MODE, extra=()):
    """The boundary tokens for a mode, extended with any caller-supplied tokens."""
    try:
        base = config.BOUNDARY_MODES[boundaries]
    except KeyError:
        raise ConfigurationError(
            f"Unknown boundary mode '{boundaries}'. Choose from: {', '.join(config.BOUNDARY_MODES)}") from None
    return base | frozenset(extra)


def join_tokens(tokens):
    """
    Join tokens with single spaces, turning LINE_BREAK tokens into newlines.
    No punctuation-aware spacing is attempted.
    """
    lines = [[]]
    for token in tokens:
        if token == config.LINE_BREAK:
            lines.append([])
        else:
            lines[-1].append(token)
    return config.LINE_BREAK.join(" ".join(line) for line in lines).rstrip(config.LINE_BREAK)
