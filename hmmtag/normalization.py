"""
Token normalization for hmmtag.

Training corpora, test corpora and console input all go through the same
normalization so that counts and lookups agree.
"""
from typing import Iterable, List, Union


def normalize_token(token: str) -> str:
    """Trim whitespace and lowercase a single token."""
    return token.strip().lower()


def process_line(line: str) -> List[str]:
    """Split a line on single spaces and normalize each piece.

    Empty pieces (from repeated spaces or a trailing newline) are dropped.
    """
    words = []
    for piece in line.split(" "):
        word = normalize_token(piece)
        if word:
            words.append(word)
    return words


def normalize_sentence(sentence: Union[str, Iterable[str]]) -> List[str]:
    """Normalize either a raw line or an already tokenized sentence.

    A token list keeps one entry per token, blank tokens included.
    """
    if isinstance(sentence, str):
        return process_line(sentence)
    return [normalize_token(tok) for tok in sentence]
