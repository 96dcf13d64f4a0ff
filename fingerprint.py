# -*- coding: utf-8 -*-
"""
The fingerprint is a CRC-16/USB of the whole of a file's contents.
Sixteen bits gives only 65536 distinct values, so two unrelated
files will collide now and then on any tree of real size. Files with
the same fingerprint are reported as duplicates; see confirm.py for
the optional check that separates them.
"""
import typing
from   typing import *

min_py = (3, 9)

###
# Standard imports, starting with os and sys
###
from   io import DEFAULT_BUFFER_SIZE
import os
import sys
if sys.version_info < min_py:
    print(f"This program requires Python {min_py[0]}.{min_py[1]}, or higher.")
    sys.exit(os.EX_SOFTWARE)

###
# Installed libraries.
###
import crcmod.predefined

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

# Reflected 0x8005, init 0xFFFF, xorout 0xFFFF.
CRC_NAME = 'crc-16-usb'
FINGERPRINT_BITS = 16

_crcfun = crcmod.predefined.mkPredefinedCrcFun(CRC_NAME)
_prototype = crcmod.predefined.Crc(CRC_NAME)


def crc16_usb(data:bytes) -> int:
    """
    The fingerprint of data, an int in [0 .. 0xFFFF].
    """
    return _crcfun(data)


def fingerprint_file(filename:str) -> Tuple[int, int]:
    """
    Run the whole file through the CRC, a buffer at a time.

    filename -- the file to read. Errors opening or reading it
        are the caller's to deal with.

    returns -- (fingerprint, number of bytes read)
    """
    crc = _prototype.new()
    length = 0
    with open(filename, 'rb') as f:
        while (segment := f.read(DEFAULT_BUFFER_SIZE)):
            crc.update(segment)
            length += len(segment)

    return crc.crcValue, length
