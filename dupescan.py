# -*- coding: utf-8 -*-
import typing
from   typing import *


# Credits
__author__ =        'George Flanagin'
__copyright__ =     'Copyright 2025 George Flanagin'
__credits__ =       'None. This idea has been around forever.'
__version__ =       '1.0'
__maintainer__ =    'George Flanagin'
__email__ =         'me+undeux@georgeflanagin.com'
__status__ =        'continual development.'
__license__ =       'MIT'

import os
import sys

min_py = (3, 9)

if sys.version_info < min_py:
    print(f"This program requires at least Python {min_py[0]}.{min_py[1]}")
    sys.exit(os.EX_SOFTWARE)

import argparse
import contextlib
import logging
from   logging import CRITICAL, ERROR, WARNING, INFO, DEBUG, NOTSET

#####################################
# Parts of this project
#####################################

import confirm
from   dupehelp import dupescan_help
import report
from   scanconfig import DupescanError, ErrorPolicy, MissingPathError, ScanConfig, config_from_args
import traversal

logger = logging.getLogger('dupescan')

LOG_FORMAT = "#%(levelname)s [%(asctime)s] (%(process)d %(module)s) %(message)s"


def dupescan_args(argv:Sequence[str]=None) -> argparse.Namespace:

    parser = argparse.ArgumentParser(prog='dupescan',
        description='dupescan: Find files with the same contents.')

    parser.add_argument('-?', '--explain', action='store_true',
        help="print a longer explanation and exit.")

    parser.add_argument('paths', nargs='*', metavar='path',
        help="the directory to scan (exactly one)")

    parser.add_argument('--confirm', action='store_true',
        help="check each group with a full hash before reporting it.")

    parser.add_argument('--keep-going', action='store_true',
        help="after a file cannot be read, go on with the rest of its directory.")

    parser.add_argument('--logfile', type=str,
        default=os.path.join(os.getcwd(), 'dupescan.log'),
        help="where to write the log; defaults to $PWD/dupescan.log")

    parser.add_argument('--loglevel', type=int, default=WARNING,
        choices=(CRITICAL, ERROR, WARNING, INFO, DEBUG, NOTSET),
        help=f"Logging level, defaults to {WARNING}")

    parser.add_argument('--nice', type=int, default=0, choices=range(0, 21),
        help="how nicely to run; defaults to 0")

    parser.add_argument('-o', '--output', type=str, default="",
        help="write the report to this file rather than stdout.")

    parser.add_argument('--recursive', action='store_true',
        help="descend into subdirectories.")

    parser.add_argument('--verbose', action='store_true',
        help="report each directory scanned and each file skipped.")

    parser.add_argument('-z', '--zap', action='store_true',
        help="remove old logfile")

    return parser.parse_args(argv)


def start_logging(logfile:str, level:int, zap:bool=False) -> logging.Handler:
    """
    Send everything at level or above to logfile. The handler is
    returned so that the caller can take it away again.
    """
    if zap:
        try:
            os.unlink(logfile)
        except FileNotFoundError:
            pass

    handler = logging.FileHandler(logfile)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(level)
    return handler


def stop_logging(handler:logging.Handler) -> None:
    logging.getLogger().removeHandler(handler)
    handler.close()


def show_diagnostic(d:traversal.Diagnostic) -> None:
    print(report.render_diagnostic(d), file=sys.stderr, flush=True)


def dupescan_config(myargs:argparse.Namespace) -> ScanConfig:
    """
    The one configuration for this run. Anything fatal about the
    command line is raised from here, before a single file is
    opened, created, or removed.
    """
    config = config_from_args(myargs.paths,
        recursive=myargs.recursive,
        verbose=myargs.verbose,
        on_error=ErrorPolicy.SKIP_FILE if myargs.keep_going else ErrorPolicy.ABANDON_DIRECTORY,
        confirm=myargs.confirm)
    if not config.root_path: raise MissingPathError()
    return config


def dupescan_main(config:ScanConfig) -> int:
    """
    [1] Walk the tree and build the index.
    [2] Optionally, confirm the groups.
    [3] Report.
    """
    logger.info(f"{config=}")

    # [1]
    index, _ = traversal.scan(config, emit=show_diagnostic)
    groups = index.report()
    logger.info(f"{len(groups) if groups else 0} groups of probable duplicates.")

    # [2]
    if config.confirm:
        groups, _ = confirm.confirm(groups, emit=show_diagnostic)
        logger.info(f"{len(groups) if groups else 0} groups survived confirmation.")

    # [3]
    for line in report.render(groups):
        print(line)

    return os.EX_OK


def main(argv:Sequence[str]=None) -> int:
    myargs = dupescan_args(argv)
    if myargs.explain: return dupescan_help()

    try:
        config = dupescan_config(myargs)
    except DupescanError as e:
        print(str(e), file=sys.stderr)
        return e.exit_code

    try:
        handler = start_logging(myargs.logfile, myargs.loglevel, myargs.zap)
    except OSError as e:
        print(f"Unable to open log file {myargs.logfile}: {e}", file=sys.stderr)
        return os.EX_CANTCREAT

    try:
        if myargs.nice: os.nice(myargs.nice)
        with contextlib.ExitStack() as stack:
            try:
                outfile = (sys.stdout if not myargs.output
                    else stack.enter_context(open(myargs.output, 'w')))
            except OSError as e:
                logger.critical(f"cannot write {myargs.output}: {e}")
                print(f"Unable to open output file {myargs.output}: {e}", file=sys.stderr)
                return os.EX_CANTCREAT

            with contextlib.redirect_stdout(outfile):
                return dupescan_main(config)

    except DupescanError as e:
        logger.critical(str(e))
        print(str(e), file=sys.stderr)
        return e.exit_code

    except Exception as e:
        logger.exception(e)
        print(f"Escaped or re-raised exception: {e}", file=sys.stderr)
        return os.EX_SOFTWARE

    finally:
        stop_logging(handler)


if __name__ == "__main__":
    sys.exit(main())
