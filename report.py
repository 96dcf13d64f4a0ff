# -*- coding: utf-8 -*-
"""
Turn the groups and diagnostics into the lines that the user sees.
"""
import typing
from   typing import *

import logging

from   fpindex import DuplicateGroup
from   traversal import Diagnostic

###
# Credits
###
__author__ = 'George Flanagin'
__copyright__ = 'Copyright 2025'
__credits__ = None
__version__ = 0.1
__maintainer__ = 'George Flanagin'
__email__ = ['gflanagin@richmond.edu']
__status__ = 'in progress'
__license__ = 'MIT'

NO_DUPLICATES = "No duplicates found."
GROUP_HEADER = "There are duplicate files:"
INDENT = " "*4


def render(groups:Optional[List[DuplicateGroup]]) -> List[str]:
    """
    groups -- what FingerprintIndex.report() (or confirm()) returned.
        None means there is nothing to report.
    """
    if groups is None: return [NO_DUPLICATES]

    lines = []
    for group in groups:
        lines.append(GROUP_HEADER)
        lines.extend(f"{INDENT}{p}" for p in group.paths)
    return lines


def render_diagnostic(d:Diagnostic) -> str:
    return f"{logging.getLevelName(d.level)}: {d.message}"
