# -*- coding: utf-8 -*-
"""
Walk a directory (and, if asked, everything below it), fingerprint
every non-empty regular file, and put it in a FingerprintIndex.

Nothing here stops the scan once it has started. A directory that
cannot be listed, or a file that cannot be read, becomes a Diagnostic
and the walk goes on.
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
import logging
from   logging import INFO, ERROR

###
# imports and objects that are a part of this project
###
import fingerprint
from   fpindex import FingerprintIndex
from   scanconfig import ErrorPolicy, MissingPathError, ScanConfig

###
# Global objects and initializations
###
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


class Diagnostic(NamedTuple):
    path: str
    message: str
    error: Optional[OSError] = None
    level: int = INFO


class _Notes:
    """
    Collects the diagnostics for one scan, logging each one as it
    arrives and handing it to emit, if there is one. Informational
    notes are only kept when the scan is verbose; they are still
    written to the log at DEBUG.
    """
    def __init__(self, verbose:bool,
        emit:Callable[[Diagnostic], None]=None) -> None:
        self.verbose = verbose
        self.emit = emit
        self.diagnostics = []


    def add(self, d:Diagnostic) -> None:
        self.diagnostics.append(d)
        if self.emit is not None: self.emit(d)


    def info(self, path:str, message:str) -> None:
        if not self.verbose:
            logger.debug(message)
            return
        logger.info(message)
        self.add(Diagnostic(path, message, None, INFO))


    def error(self, path:str, message:str, e:OSError) -> None:
        logger.error(message)
        self.add(Diagnostic(path, message, e, ERROR))


def scan(config:ScanConfig,
    index:FingerprintIndex=None,
    emit:Callable[[Diagnostic], None]=None) -> Tuple[FingerprintIndex, List[Diagnostic]]:
    """
    Depth first walk from config.root_path.

    config -- what to scan, and how.
    index -- an index to add to. A new one is made if this is None.
    emit -- called with each diagnostic the moment it occurs.

    returns -- the index, and the diagnostics in the order they
        occurred.
    """
    if not config.root_path:
        raise MissingPathError()

    index = FingerprintIndex() if index is None else index
    notes = _Notes(config.verbose, emit)

    logger.info(f"scan of {config.root_path} begun")
    stack = [config.root_path]
    while stack:
        subdirs = scan_directory(stack.pop(), config, index, notes)
        # reversed, so that they are popped in the order listed.
        stack.extend(reversed(subdirs))

    logger.info(f"scan of {config.root_path} finished")
    logger.info(f"{index.path_count} files in {len(index)} distinct fingerprints.")
    return index, notes.diagnostics


def scan_directory(directory:str,
    config:ScanConfig,
    index:FingerprintIndex,
    notes:_Notes) -> List[str]:
    """
    Index the regular files in one directory.

    returns -- the subdirectories to visit next, which is always
        empty unless the scan is recursive. Subdirectories found
        before the listing was abandoned are still returned.
    """
    notes.info(directory, f"Scanning directory `{directory}`")
    subdirs = []

    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                if entry.is_dir():
                    if config.recursive: subdirs.append(entry.path)
                    continue

                if not entry.is_file():
                    notes.info(entry.path, f"Skipping {entry.path}; not a regular file")
                    continue

                try:
                    fp, length = fingerprint.fingerprint_file(entry.path)

                except OSError as e:
                    notes.error(entry.path,
                        f"Unable to read contents of {entry.path!r} for reason {e}", e)
                    if config.on_error is ErrorPolicy.SKIP_FILE: continue
                    logger.warning(f"abandoning the rest of {directory}")
                    break

                if not length:
                    notes.info(entry.path, f"Skipping empty file {entry.path}")
                    continue

                index.insert(fp, entry.path)

    except OSError as e:
        notes.error(directory, f"Unable to read dir `{directory}` because {e}", e)

    return subdirs
