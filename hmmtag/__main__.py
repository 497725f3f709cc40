from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .cli.console import tag_from_console
from .cli.crossval import partitioned_test
from .cli.evaluate import file_test_tags
from .config import HMMTaggerConfig, load_config
from .data_loading import load_corpus_pair
from .errors import HMMTagError
from .model import HMMModel, train_model

TASK_CHOICES = ["console", "test", "crossval"]


def _configure_logging(args: argparse.Namespace) -> None:
    if getattr(args, "debug", False):
        level = logging.DEBUG
    elif getattr(args, "verbose", False):
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)


def _config_from_args(args: argparse.Namespace) -> HMMTaggerConfig:
    overrides = {
        "unseen_observation_score": getattr(args, "unseen_score", None),
        "num_partitions": getattr(args, "partitions", None),
        "random_partition": True if getattr(args, "random", False) else None,
        "seed": getattr(args, "seed", None),
        "debug": True if getattr(args, "debug", False) else None,
    }
    return load_config(overrides)


def _train_from_args(args: argparse.Namespace, config: HMMTaggerConfig) -> HMMModel:
    tags, sentences = load_corpus_pair(args.train_tags, args.train_sentences)
    model = train_model(tags, sentences, start_tag=config.start_tag)
    if args.verbose or args.debug:
        print(
            f"Trained on {model.num_sentences} sentences ({model.num_tokens} tokens, {len(model.tags)} tags)",
            file=sys.stderr,
        )
    return model


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hmmtag",
        description="HMM part-of-speech tagger with Viterbi decoding",
    )
    parser.add_argument("--version", "-V", action="version", version=f"hmmtag {__version__}")
    subparsers = parser.add_subparsers(dest="task", required=False)

    # Common arguments that all subcommands inherit
    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument("--debug", action="store_true", help="Enable verbose debug logging")
    parent_parser.add_argument("--verbose", action="store_true", help="Print high-level progress messages")
    parent_parser.add_argument(
        "--unseen-score",
        type=float,
        default=None,
        help="Log score for a word never seen under a tag (default: -100, or config/HMMTAG_UNSEEN_SCORE)",
    )

    train_parent = argparse.ArgumentParser(add_help=False)
    train_parent.add_argument("--train-tags", required=True, help="Training tags file (one sentence per line)")
    train_parent.add_argument("--train-sentences", required=True, help="Training sentences file (one sentence per line)")

    subparsers.add_parser(
        "console",
        help="Train, then tag sentences typed on the console",
        parents=[parent_parser, train_parent],
    )

    test_parser = subparsers.add_parser(
        "test",
        help="Train, then report tagging accuracy on a test corpus",
        parents=[parent_parser, train_parent],
    )
    test_parser.add_argument("--test-tags", required=True, help="Gold tags file for the test sentences")
    test_parser.add_argument("--test-sentences", required=True, help="Test sentences file")

    crossval_parser = subparsers.add_parser(
        "crossval",
        help="Cross-validate over a single labeled corpus",
        parents=[parent_parser],
    )
    crossval_parser.add_argument("--tags", required=True, help="Tags file (one sentence per line)")
    crossval_parser.add_argument("--sentences", required=True, help="Sentences file (one sentence per line)")
    crossval_parser.add_argument("--partitions", type=int, default=None, help="Number of partitions (default: 5)")
    crossval_parser.add_argument(
        "--random",
        action="store_true",
        help="Assign sentences to partitions at random instead of by line number",
    )
    crossval_parser.add_argument("--seed", type=int, default=None, help="Random seed for --random")
    return parser


def run_console(args: argparse.Namespace) -> int:
    config = _config_from_args(args)
    model = _train_from_args(args, config)
    tag_from_console(model, config)
    return 0


def run_test(args: argparse.Namespace) -> int:
    config = _config_from_args(args)
    model = _train_from_args(args, config)
    test_tags, test_sentences = load_corpus_pair(args.test_tags, args.test_sentences)
    file_test_tags(model, test_tags, test_sentences, config=config)
    return 0


def run_crossval(args: argparse.Namespace) -> int:
    config = _config_from_args(args)
    tags, sentences = load_corpus_pair(args.tags, args.sentences)
    partitioned_test(tags, sentences, config=config)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.task:
        parser.error("No task specified. Use one of: " + ", ".join(TASK_CHOICES))

    _configure_logging(args)
    try:
        if args.task == "console":
            return run_console(args)
        if args.task == "test":
            return run_test(args)
        if args.task == "crossval":
            return run_crossval(args)
    except (HMMTagError, FileNotFoundError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    parser.error(f"Unknown task '{args.task}'. Supported tasks: {', '.join(TASK_CHOICES)}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
