"""
hmmtag: Hidden Markov model part-of-speech tagger.

Counts tag transitions and word/tag emissions from labeled text, converts
them to log probabilities and tags new sentences with the Viterbi algorithm.
"""

__version__ = "1.0.0"

from hmmtag.check import evaluate, evaluate_corpus
from hmmtag.config import HMMTaggerConfig, load_config
from hmmtag.errors import ConfigurationError, DecoderStateError, HMMTagError, LengthMismatchError
from hmmtag.model import HMMModel, to_log_probs, train_model, train_model_from_inputs
from hmmtag.viterbi import decode, viterbi_tag_sentence

__all__ = [
    'ConfigurationError',
    'DecoderStateError',
    'HMMModel',
    'HMMTagError',
    'HMMTaggerConfig',
    'LengthMismatchError',
    'decode',
    'evaluate',
    'evaluate_corpus',
    'load_config',
    'to_log_probs',
    'train_model',
    'train_model_from_inputs',
    'viterbi_tag_sentence',
    '__version__',
]
