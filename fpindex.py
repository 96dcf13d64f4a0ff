# -*- coding: utf-8 -*-
"""
FingerprintIndex maps a fingerprint to the files that produced it.
"""
import typing
from   typing import *

###
# Standard imports
###
import collections

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


class DuplicateGroup(NamedTuple):
    fingerprint: int
    paths: Tuple[str, ...]


class FingerprintIndex(collections.defaultdict):
    """
    A defaultdict of lists. Each file is hashed once, so each path
    is in one group at most; groups are only ever appended to.

    The order of the paths within a group is the order in which the
    traversal found them.
    """
    def __init__(self) -> None:
        collections.defaultdict.__init__(self, list)


    def insert(self, fingerprint:int, path:str) -> None:
        self[fingerprint].append(path)


    @property
    def path_count(self) -> int:
        return sum(len(v) for v in self.values())


    def report(self) -> Optional[List[DuplicateGroup]]:
        """
        Every group with more than one member, in the dict's order.

        returns -- the groups, or None when there are no duplicates
            at all. An empty list is never returned.
        """
        groups = [ DuplicateGroup(k, tuple(v)) for k, v in self.items() if len(v) > 1 ]
        return groups if groups else None
