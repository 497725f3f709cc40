"""
Partition-based cross-validation for hmmtag.

A labeled corpus is split into N partitions, either by line number (line i
goes to partition i % N) or at random. Each partition is tagged in turn by a
model trained from scratch on the other N - 1 partitions.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from .check import CorpusReport, evaluate_corpus
from .config import HMMTaggerConfig
from .errors import ConfigurationError
from .model import SentenceInput, train_model

logger = logging.getLogger(__name__)


@dataclass
class Partition:
    sentences: List[SentenceInput] = field(default_factory=list)
    tags: List[SentenceInput] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.sentences)


@dataclass
class CrossValidationResult:
    folds: List[CorpusReport]
    total: CorpusReport


def partition_corpus(
    sentences: Sequence[SentenceInput],
    tags: Sequence[SentenceInput],
    num_partitions: int,
    random_partition: bool = False,
    seed: Optional[int] = None,
) -> List[Partition]:
    """Split a sentence/tag corpus pair into ``num_partitions`` partitions."""
    if num_partitions < 2:
        raise ConfigurationError(f"Cross-validation needs at least 2 partitions, got {num_partitions}")
    if len(sentences) != len(tags):
        raise ConfigurationError(
            f"Corpora are not a matched pair: {len(tags)} tag lines but {len(sentences)} sentences"
        )
    rng = random.Random(seed)
    partitions = [Partition() for _ in range(num_partitions)]
    for line_num, (sentence, tag_line) in enumerate(zip(sentences, tags)):
        index = rng.randrange(num_partitions) if random_partition else line_num % num_partitions
        partitions[index].sentences.append(sentence)
        partitions[index].tags.append(tag_line)
    return partitions


def _training_split(partitions: Sequence[Partition], held_out: int) -> Tuple[List[SentenceInput], List[SentenceInput]]:
    sentences: List[SentenceInput] = []
    tags: List[SentenceInput] = []
    for index, partition in enumerate(partitions):
        if index != held_out:
            sentences.extend(partition.sentences)
            tags.extend(partition.tags)
    return sentences, tags


def cross_validate(
    sentences: Sequence[SentenceInput],
    tags: Sequence[SentenceInput],
    config: Optional[HMMTaggerConfig] = None,
) -> CrossValidationResult:
    """Train and evaluate one fresh model per partition."""
    config = config or HMMTaggerConfig()
    partitions = partition_corpus(
        sentences, tags, config.num_partitions,
        random_partition=config.random_partition, seed=config.seed,
    )
    folds: List[CorpusReport] = []
    total = CorpusReport(name="total")
    for held_out, partition in enumerate(partitions):
        train_sentences, train_tags = _training_split(partitions, held_out)
        name = f"fold {held_out + 1}"
        if not partition:
            logger.warning("%s is empty, nothing to evaluate", name)
            report = CorpusReport(name=name)
        else:
            model = train_model(train_tags, train_sentences, start_tag=config.start_tag)
            report = evaluate_corpus(model, partition.sentences, partition.tags, config=config, name=name)
        logger.info("%s: %d/%d correct", name, report.metric.correct, report.metric.total)
        folds.append(report)
        total.merge(report)
    return CrossValidationResult(folds=folds, total=total)
