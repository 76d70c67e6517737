import os

# --- Generation Defaults ---
# Each default can be overridden from the environment so the CLI can be
# tuned without editing code.
DEFAULT_ORDER = int(os.environ.get('BABBLE_ORDER', 1))
DEFAULT_MAX_TOKENS = int(os.environ.get('BABBLE_MAX_TOKENS', 100))

# --- Boundary Configuration ---
# Token emitted by the corpus reader at the end of each line in 'line-endings' mode.
LINE_BREAK = '\n'
SENTENCE_ENDINGS = frozenset({'.', '!', '?'})
LINE_ENDINGS = frozenset({LINE_BREAK})

BOUNDARY_MODES = {
    'line-endings': LINE_ENDINGS,
    'sentence-endings': SENTENCE_ENDINGS,
}
DEFAULT_BOUNDARY_MODE = 'line-endings'

# --- Logging ---
LOG_LEVEL = os.environ.get('BABBLE_LOG_LEVEL', 'WARNING').upper()
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

# --- Memory Estimate ---
# Rough CPython costs used when estimating the size of a trained model.
# These are ballpark figures for display, not measurements.
DICT_ENTRY_BYTES = 100
TUPLE_SLOT_BYTES = 8
TUPLE_HEADER_BYTES = 56
STRING_HEADER_BYTES = 49
