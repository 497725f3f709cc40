"""
Viterbi module for hmmtag.
"""
import logging
from typing import Dict, Iterable, List, Optional, Union

from .config import DEFAULT_UNSEEN_OBSERVATION_SCORE, START_TAG, HMMTaggerConfig
from .errors import DecoderStateError
from .model import HMMModel, LogProbTable
from .normalization import normalize_sentence

logger = logging.getLogger(__name__)


def viterbi_tag_sentence(sentence: List[str], emissions: LogProbTable, transitions: LogProbTable,
                         unseen_score: float = DEFAULT_UNSEEN_OBSERVATION_SCORE,
                         start_tag: str = START_TAG) -> List[str]:
    """
    Tag a normalized sentence using the Viterbi algorithm.

    Candidate tags at each position are the targets of the transition rows of
    the tags reachable at the previous position. Rows and targets are visited
    in table order and a candidate only changes predecessor on a strictly
    better score, so the first predecessor wins ties.

    Args:
        sentence: List of normalized word forms
        emissions: Emission log probabilities (tag -> word -> log prob)
        transitions: Transition log probabilities (tag -> next tag -> log prob)
        unseen_score: Log score used when a word was never seen under a tag
        start_tag: Pseudo-tag the path starts from

    Returns:
        List of predicted tags, one per word

    Raises:
        DecoderStateError: if no tag is reachable at some position, or the best
            path passes through the start tag before the first word
    """
    if not sentence or start_tag not in transitions:
        return []

    # frontier[tag] = best log score of a path ending in tag at the previous position
    frontier: Dict[str, float] = {start_tag: 0.0}
    backpointer: List[Dict[str, str]] = []

    for position, word in enumerate(sentence):
        next_frontier: Dict[str, float] = {}
        pointers: Dict[str, str] = {}
        for curr_tag, curr_score in frontier.items():
            trans_row = transitions.get(curr_tag)
            if trans_row is None:
                # Tag never seen with a successor
                continue
            for next_tag, trans_log in trans_row.items():
                emit_log = emissions.get(next_tag, {}).get(word, unseen_score)
                score = curr_score + trans_log + emit_log
                if next_tag not in next_frontier or score > next_frontier[next_tag]:
                    next_frontier[next_tag] = score
                    pointers[next_tag] = curr_tag
        if not next_frontier:
            error = DecoderStateError(position, word)
            logger.error("Viterbi frontier is empty: %s", error)
            raise error
        frontier = next_frontier
        backpointer.append(pointers)

    # Termination: best final tag, first one wins ties
    best_tag = None
    best_score = None
    for tag, score in frontier.items():
        if best_score is None or score > best_score:
            best_tag = tag
            best_score = score

    # Backtrack: follow pointers until the start tag
    path: List[str] = [""] * len(sentence)
    tag = best_tag
    position = len(sentence)
    while tag != start_tag:
        position -= 1
        path[position] = tag
        tag = backpointer[position][tag]
    if position != 0:
        error = DecoderStateError(
            position - 1, sentence[position - 1],
            f"backpointer chain reached {start_tag!r} at position {position}, before the first word",
        )
        logger.error("Viterbi backtrack failed: %s", error)
        raise error

    logger.debug("Tagged %d words, best log score %.4f", len(sentence), best_score)
    return path


def decode(sentence: Union[str, Iterable[str]], emissions: LogProbTable, transitions: LogProbTable,
           config: Optional[HMMTaggerConfig] = None) -> List[str]:
    """Normalize a raw sentence (line or token list) and tag it."""
    config = config or HMMTaggerConfig()
    words = normalize_sentence(sentence)
    return viterbi_tag_sentence(
        words, emissions, transitions,
        unseen_score=config.unseen_observation_score,
        start_tag=config.start_tag,
    )


def tag_with_model(sentence: Union[str, Iterable[str]], model: HMMModel,
                   config: Optional[HMMTaggerConfig] = None) -> List[str]:
    """Tag a sentence with a trained :class:`HMMModel`."""
    return decode(sentence, model.emissions, model.transitions, config=config)


def format_tagged(words: List[str], tags: List[str]) -> str:
    """Render a tagged sentence as ``word/tag word/tag``."""
    return " ".join(f"{word}/{tag}" for word, tag in zip(words, tags))
