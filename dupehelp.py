# -*- coding: utf-8 -*-

#pragma pylint=off

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
import textwrap


def dupescan_help() -> int:
    """
    `dupescan` is a utility to find files in a directory whose contents
    appear to be the same. It reads every file, computes a CRC-16 of
    the contents, and reports each set of files that share a CRC.

    Nothing is removed, moved, or linked. The program only reads.

    Usage:

        dupescan [options] {directory}

    Exactly one directory may be named. Naming two is an error, and
    so is naming none.

    A word of caution about the CRC. There are only 65536 of them, so
    on a large tree two files with nothing in common will now and then
    land in the same group. If that matters to you, use --confirm.
    Empty files are never reported; they are all the same, and there
    is nothing to be gained by telling you so.

    THE OPTIONS:
    ==================================================================

    -? / --explain :: This is it; you are here. There is no more.

    -h / --help
        The short version of this text.

    --confirm
        After the scan, read each of the suspect files a second time
        and compare a 128 bit hash of the contents. Groups that do not
        survive are not reported.

    --keep-going
        Ordinarily, when a file cannot be read the rest of the files
        in the same directory are not examined. The error is reported,
        and the scan moves on to the next directory. With --keep-going
        only the unreadable file is skipped.

    --logfile {file-name}
        Where the log goes. The default is dupescan.log in the current
        directory.

    --loglevel {int}
        The usual Python logging levels. The default is 30 (WARNING).

    --nice {int}
        Reading every byte of a large tree takes a while. The default
        value is 0; 20 is as nice as you can be.

    -o / --output {file-name}
        Write the report to this file rather than to stdout. Errors
        and other messages still go to stderr.

    --recursive
        Examine the subdirectories, and theirs, and so on. Without it,
        only the files directly in {directory} are read.

    --verbose
        Tell all: each directory as it is entered, and each file that
        is skipped.

    -z / --zap
        Remove the old log file before starting.
    """

    print(textwrap.dedent(dupescan_help.__doc__).strip())
    return os.EX_OK
