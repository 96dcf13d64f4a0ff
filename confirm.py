# -*- coding: utf-8 -*-
"""
A CRC-16 match is only a probable duplicate. When the user asks for
--confirm, each group is split again on a full 128 bit hash of the
contents, and the members that are left alone are dropped.
"""
import typing
from   typing import *

###
# Standard imports
###
import io

###
# Other standard distro imports
###
import collections
import logging
from   logging import ERROR

###
# Installed libraries.
###
import xxhash
hashfoo=xxhash.xxh128

###
# imports and objects that are a part of this project
###
from   fpindex import DuplicateGroup
from   traversal import Diagnostic

logger = logging.getLogger(__name__)

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

HASHBLOCK = io.DEFAULT_BUFFER_SIZE << 8


def full_hash(filename:str) -> str:
    """
    Hash the whole file.
    """
    h = hashfoo()
    with open(filename, 'rb') as f:
        while (chunk := f.read(HASHBLOCK)):
            h.update(chunk)
    return h.hexdigest()


def confirm(groups:Optional[List[DuplicateGroup]],
    emit:Callable[[Diagnostic], None]=None
    ) -> Tuple[Optional[List[DuplicateGroup]], List[Diagnostic]]:
    """
    groups -- the result of FingerprintIndex.report()
    emit -- called with each diagnostic the moment it occurs.

    returns -- the groups whose members really do match, None if
        there are none, and a diagnostic for each file that could
        not be read a second time.
    """
    diagnostics = []
    if not groups: return None, diagnostics

    confirmed = []
    for group in groups:
        by_content = collections.defaultdict(list)
        for path in group.paths:
            try:
                by_content[full_hash(path)].append(path)
            except OSError as e:
                message = f"Unable to confirm contents of {path!r} for reason {e}"
                logger.error(message)
                d = Diagnostic(path, message, e, ERROR)
                diagnostics.append(d)
                if emit is not None: emit(d)

        survivors = [ DuplicateGroup(group.fingerprint, tuple(v))
            for v in by_content.values() if len(v) > 1 ]
        if len(survivors) != 1 or len(survivors[0].paths) != len(group.paths):
            logger.info(f"fingerprint {group.fingerprint:#06x} split into {len(survivors)} groups")
        confirmed.extend(survivors)

    return (confirmed if confirmed else None), diagnostics
