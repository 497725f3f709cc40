"""
HMM model construction for hmmtag.

Training walks paired tag/word sentences, counts transitions (previous tag ->
tag, starting from the start tag) and emissions (tag -> word), and converts
every count row to natural-log probabilities.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, List, Mapping, Sequence, Tuple, Union

from .config import START_TAG
from .counts import CountTable
from .errors import ConfigurationError, LengthMismatchError
from .normalization import normalize_sentence

logger = logging.getLogger(__name__)

LogProbTable = Mapping[str, Mapping[str, float]]
SentenceInput = Union[str, Sequence[str]]


@dataclass(frozen=True, eq=False)
class HMMModel:
    """A trained tagger: transition and emission log-probability tables."""
    transitions: LogProbTable
    emissions: LogProbTable
    num_sentences: int = 0
    num_tokens: int = 0

    @property
    def tags(self) -> List[str]:
        """Emitting tags in first-seen order."""
        return list(self.emissions)


def to_log_probs(table: CountTable) -> LogProbTable:
    """Convert every row of a count table to ln(count / row total)."""
    result = {}
    for state, row in table.rows().items():
        total = float(row.total)
        result[state] = MappingProxyType(
            {key: math.log(count / total) for key, count in row.counts.items()}
        )
    return MappingProxyType(result)


def count_corpus(
    tag_corpus: Iterable[SentenceInput],
    word_corpus: Iterable[SentenceInput],
    start_tag: str = START_TAG,
) -> Tuple[CountTable, CountTable]:
    """
    Count transitions and emissions over paired tag and word sentences.

    Args:
        tag_corpus: One entry per sentence, a raw line or a token list of tags
        word_corpus: The matching sentences, a raw line or a token list of words
        start_tag: Pseudo-tag that precedes the first tag of every sentence

    Returns:
        (transition counts, emission counts)

    Raises:
        ConfigurationError: if the corpora hold a different number of sentences
        LengthMismatchError: if a sentence has a different number of tags and words
    """
    tag_sentences = list(tag_corpus)
    word_sentences = list(word_corpus)
    if len(tag_sentences) != len(word_sentences):
        raise ConfigurationError(
            f"Training corpora are not a matched pair: {len(tag_sentences)} tag lines "
            f"but {len(word_sentences)} sentences"
        )

    transitions = CountTable()
    emissions = CountTable()
    for index, (tag_line, word_line) in enumerate(zip(tag_sentences, word_sentences)):
        tags = normalize_sentence(tag_line)
        words = normalize_sentence(word_line)
        if len(tags) != len(words):
            raise LengthMismatchError(len(tags), len(words), index=index, what="words")
        prev = start_tag
        for tag, word in zip(tags, words):
            emissions.increment(tag, word)
            transitions.increment(prev, tag)
            prev = tag
    logger.debug(
        "Counted %d sentences: %d transition rows, %d emission rows",
        len(tag_sentences), len(transitions), len(emissions),
    )
    return transitions, emissions


def train_model(
    tag_corpus: Iterable[SentenceInput],
    word_corpus: Iterable[SentenceInput],
    start_tag: str = START_TAG,
) -> HMMModel:
    """Train an HMM from paired tag and word sentences."""
    tag_sentences = list(tag_corpus)
    word_sentences = list(word_corpus)
    transitions, emissions = count_corpus(tag_sentences, word_sentences, start_tag=start_tag)
    num_tokens = sum(row.total for row in emissions.rows().values())
    model = HMMModel(
        transitions=to_log_probs(transitions),
        emissions=to_log_probs(emissions),
        num_sentences=len(tag_sentences),
        num_tokens=num_tokens,
    )
    logger.info(
        "Trained model on %d sentences (%d tokens, %d tags)",
        model.num_sentences, model.num_tokens, len(model.emissions),
    )
    return model


def train_model_from_inputs(training_inputs: Sequence[Iterable[SentenceInput]], start_tag: str = START_TAG) -> HMMModel:
    """Train from a ``[tags, sentences]`` pair of training sources."""
    if len(training_inputs) != 2:
        raise ConfigurationError(
            "Training input must be exactly two corpora: the tag corpus first and the "
            f"matching sentence corpus second (got {len(training_inputs)})"
        )
    return train_model(training_inputs[0], training_inputs[1], start_tag=start_tag)
