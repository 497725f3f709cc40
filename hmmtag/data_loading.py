"""
Data Loading module for hmmtag.

Corpora are plain text, one sentence per line: a sentences file with
space-separated words and a tags file with the matching space-separated tags.
"""
import logging
from pathlib import Path
from typing import List, Tuple, Union

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_lines(path: PathLike) -> List[str]:
    """Read a corpus file, one sentence per line, without line endings."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Corpus file not found: {path}")
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        lines = [line.rstrip("\r\n") for line in f]
    # A final empty line is just the file's trailing newline
    while lines and not lines[-1].strip():
        lines.pop()
    logger.debug("Read %d lines from %s", len(lines), path)
    return lines


def load_corpus_pair(tags_path: PathLike, sentences_path: PathLike) -> Tuple[List[str], List[str]]:
    """
    Load a tags file and its sentences file.

    Returns:
        (tag lines, sentence lines)

    Raises:
        ConfigurationError: if the files hold a different number of lines
    """
    tags = read_lines(tags_path)
    sentences = read_lines(sentences_path)
    if len(tags) != len(sentences):
        raise ConfigurationError(
            f"{tags_path} has {len(tags)} lines but {sentences_path} has {len(sentences)}"
        )
    return tags, sentences
