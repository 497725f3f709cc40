#!/usr/bin/env python3
"""
File test command for hmmtag - tag a test corpus and report accuracy.
"""

import sys
from typing import Optional, Sequence, TextIO

from hmmtag.check import CorpusReport, evaluate_corpus, format_report
from hmmtag.config import HMMTaggerConfig
from hmmtag.model import HMMModel


def file_test_tags(model: HMMModel, test_tags: Sequence[str], test_sentences: Sequence[str],
                   config: Optional[HMMTaggerConfig] = None, stdout: Optional[TextIO] = None,
                   name: str = "test") -> CorpusReport:
    """Evaluate ``model`` on a test corpus pair and print the report."""
    stdout = stdout or sys.stdout
    report = evaluate_corpus(model, test_sentences, test_tags, config=config, name=name)
    print(format_report([report]), file=stdout)
    return report
