# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2015 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

"""Where the reader gets its lines from. Anything with next_line() and
close() will do, these cover files on disk and already open streams.
"""

import gzip
import logging
import os
from ldapaccesslog._constants import GZIP_SUFFIX

log = logging.getLogger(__name__)


def _strip_terminator(line):
    return line.rstrip('\r\n')


class LineSource(object):
    """Forward only supplier of log lines"""

    def next_line(self):
        """Return the next line without its terminator, or None at the end"""
        raise NotImplementedError

    def close(self):
        pass


class FileLineSource(LineSource):
    """Read a log file. Rotated logs that have been compressed (.gz) are
    decompressed as they are read.

    Bytes that are not valid in the encoding are dropped rather than
    failing the read, the rest of the line is still parsed.

    :param path: Path to the log file
    :type path: str
    """

    def __init__(self, path, encoding='utf-8', errors='ignore'):
        self.path = os.fspath(path)
        log.debug("Opening access log %s", self.path)
        if self.path.endswith(GZIP_SUFFIX):
            self._fh = gzip.open(self.path, 'rt', encoding=encoding, errors=errors)
        else:
            self._fh = open(self.path, 'r', encoding=encoding, errors=errors)

    def next_line(self):
        line = self._fh.readline()
        if line == '':
            return None
        return _strip_terminator(line)

    def close(self):
        self._fh.close()


class StreamLineSource(LineSource):
    """Read lines from an open text stream, or any iterable of str

    :param stream: The lines to read
    :type stream: iterable
    :param close_stream: Close the stream when the source is closed
    :type close_stream: bool
    """

    def __init__(self, stream, close_stream=True):
        self._stream = stream
        self._lines = iter(stream)
        self._close_stream = close_stream

    def next_line(self):
        line = next(self._lines, None)
        if line is None:
            return None
        return _strip_terminator(line)

    def close(self):
        if self._close_stream and hasattr(self._stream, 'close'):
            self._stream.close()
