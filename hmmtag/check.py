from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

from tabulate import tabulate

from .config import HMMTaggerConfig
from .errors import ConfigurationError, DecoderStateError, LengthMismatchError
from .model import HMMModel, SentenceInput
from .normalization import normalize_sentence
from .viterbi import tag_with_model

logger = logging.getLogger(__name__)


@dataclass
class Metric:
    correct: int = 0
    total: int = 0

    def add(self, is_correct: bool) -> None:
        self.correct += int(bool(is_correct))
        self.total += 1

    def merge(self, other: "Metric") -> None:
        self.correct += other.correct
        self.total += other.total

    @property
    def accuracy(self) -> float | None:
        if self.total == 0:
            return None
        return self.correct / self.total


@dataclass
class CorpusReport:
    """Tagging accuracy over a test corpus."""

    name: str = "test"
    metric: Metric = field(default_factory=Metric)
    sentences: int = 0
    skipped: List[int] = field(default_factory=list)

    def merge(self, other: "CorpusReport") -> None:
        self.metric.merge(other.metric)
        self.sentences += other.sentences
        self.skipped.extend(other.skipped)


def evaluate(predicted: Sequence[str], gold: Sequence[str]) -> Tuple[int, int]:
    """
    Compare predicted tags to gold tags position by position.

    Returns:
        (number of matching positions, number of positions)

    Raises:
        LengthMismatchError: if the sequences differ in length
    """
    if len(predicted) != len(gold):
        raise LengthMismatchError(len(gold), len(predicted))
    metric = Metric()
    for pred_tag, gold_tag in zip(predicted, gold):
        metric.add(pred_tag == gold_tag)
    return metric.correct, metric.total


def evaluate_corpus(
    model: HMMModel,
    sentences: Iterable[SentenceInput],
    gold_tags: Iterable[SentenceInput],
    config: Optional[HMMTaggerConfig] = None,
    name: str = "test",
) -> CorpusReport:
    """
    Tag every sentence of a test corpus and score it against the gold tags.

    Sentences whose predicted and gold lengths differ, or that cannot be
    decoded, are skipped: they add nothing to either tally and their index is
    recorded in ``report.skipped``.
    """
    sentences = list(sentences)
    gold_tags = list(gold_tags)
    if len(sentences) != len(gold_tags):
        raise ConfigurationError(
            f"Test corpora are not a matched pair: {len(gold_tags)} tag lines "
            f"but {len(sentences)} sentences"
        )

    report = CorpusReport(name=name)
    for index, (sentence, gold_line) in enumerate(zip(sentences, gold_tags)):
        report.sentences += 1
        gold = normalize_sentence(gold_line)
        try:
            predicted = tag_with_model(sentence, model, config=config)
            correct, total = evaluate(predicted, gold)
        except LengthMismatchError as exc:
            logger.warning("Resulting tags are not equal in length (sentence %d): %s", index, exc)
            report.skipped.append(index)
            continue
        except DecoderStateError as exc:
            logger.warning("Could not tag sentence %d: %s", index, exc)
            report.skipped.append(index)
            continue
        report.metric.merge(Metric(correct=correct, total=total))
    return report


def format_report(reports: Sequence[CorpusReport], total: Optional[CorpusReport] = None) -> str:
    """Render one or more corpus reports as a table plus a summary line."""
    rows = []
    for report in list(reports) + ([total] if total is not None else []):
        accuracy = report.metric.accuracy
        rows.append([
            report.name,
            report.sentences,
            len(report.skipped),
            report.metric.correct,
            report.metric.total,
            f"{accuracy:.2%}" if accuracy is not None else "-",
        ])
    table = tabulate(rows, headers=["Corpus", "Sentences", "Skipped", "Correct", "Total", "Accuracy"])
    summary = total if total is not None else (reports[-1] if reports else CorpusReport())
    return f"{table}\n\n{summary.metric.correct}/{summary.metric.total} are correct."
