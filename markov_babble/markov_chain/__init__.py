from markov_babble.errors import ConfigurationError, EmptyModelError
from .markov_chain import BuildResult, MarkovChain, build_model
from .generate import choose_start_state, generate, iter_tokens
from .train import train_from_paths, train_from_stream
