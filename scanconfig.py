# -*- coding: utf-8 -*-
"""
The configuration that a scan consumes, and the errors that stop a
run before it touches the file system.
"""
import typing
from   typing import *

min_py = (3, 9)

###
# Standard imports, starting with os and sys
###
import os
import sys
if sys.version_info < min_py:
    print(f"This program requires Python {min_py[0]}.{min_py[1]}, or higher.")
    sys.exit(os.EX_SOFTWARE)

###
# Other standard distro imports
###
import enum

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


class DupescanError(Exception):
    """
    Base for the errors that end the whole run.
    """
    exit_code = os.EX_SOFTWARE


class MissingPathError(DupescanError):
    exit_code = os.EX_USAGE

    def __init__(self) -> None:
        DupescanError.__init__(self, "No path to scan specified, exiting...")


class ConflictingPathsError(DupescanError):
    exit_code = os.EX_USAGE

    def __init__(self, first:str, second:str) -> None:
        self.first = first
        self.second = second
        DupescanError.__init__(self,
            f"You've specified two paths, {first} and {second}")


@enum.unique
class ErrorPolicy(enum.Enum):
    """
    What to do with the rest of a directory after one of its files
    cannot be read.
    """
    ABANDON_DIRECTORY = 'abandon-directory'
    SKIP_FILE = 'skip-file'


class ScanConfig(NamedTuple):
    root_path: Optional[str] = None
    recursive: bool = False
    verbose: bool = False
    on_error: ErrorPolicy = ErrorPolicy.ABANDON_DIRECTORY
    confirm: bool = False


def config_from_args(paths:Sequence[str], **kwargs) -> ScanConfig:
    """
    Build the one ScanConfig for this run.

    paths -- every positional argument from the command line. More
        than one is fatal; none is allowed here, and is caught by
        traversal.scan() before any I/O.
    kwargs -- the remaining ScanConfig fields.
    """
    paths = list(paths)
    if len(paths) > 1:
        raise ConflictingPathsError(paths[0], paths[1])

    return ScanConfig(root_path=paths[0] if paths else None, **kwargs)
