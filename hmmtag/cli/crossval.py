#!/usr/bin/env python3
"""
Cross-validation command for hmmtag - partitioned train/test over one corpus.
"""

import sys
from typing import Optional, Sequence, TextIO

from hmmtag.check import format_report
from hmmtag.config import HMMTaggerConfig
from hmmtag.crossval import CrossValidationResult, cross_validate


def partitioned_test(tags: Sequence[str], sentences: Sequence[str],
                     config: Optional[HMMTaggerConfig] = None,
                     stdout: Optional[TextIO] = None) -> CrossValidationResult:
    """Run cross-validation and print one row per fold plus the total."""
    stdout = stdout or sys.stdout
    result = cross_validate(sentences, tags, config=config)
    print(format_report(result.folds, total=result.total), file=stdout)
    return result
