#!/usr/bin/env python3
"""
Console command for hmmtag - tag sentences typed interactively.
"""

import logging
import sys
from typing import Optional, TextIO

from hmmtag.config import HMMTaggerConfig
from hmmtag.errors import DecoderStateError
from hmmtag.model import HMMModel
from hmmtag.normalization import process_line
from hmmtag.viterbi import format_tagged, viterbi_tag_sentence

logger = logging.getLogger(__name__)


def tag_from_console(model: HMMModel, config: Optional[HMMTaggerConfig] = None,
                     stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> int:
    """
    Read sentences from ``stdin`` and print them tagged as ``word/tag``.

    The session ends on the configured quit command or end of input.

    Returns:
        Number of sentences tagged
    """
    config = config or HMMTaggerConfig()
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    tagged = 0
    while True:
        print(f"Write sentence to be tagged. Write '{config.quit_command}' to exit", file=stdout)
        stdout.flush()
        line = stdin.readline()
        if not line:
            break
        line = line.rstrip("\r\n")
        if line.strip() == config.quit_command:
            break
        words = process_line(line)
        try:
            tags = viterbi_tag_sentence(
                words, model.emissions, model.transitions,
                unseen_score=config.unseen_observation_score,
                start_tag=config.start_tag,
            )
        except DecoderStateError as exc:
            logger.warning("Could not tag sentence: %s", exc)
            continue
        print(format_tagged(words, tags), file=stdout)
        tagged += 1
    return tagged
