# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2015 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

import logging
import os
from ldapaccesslog._constants import COMMENT_PREFIX
from ldapaccesslog.exceptions import LogException
from ldapaccesslog.linesource import LineSource, FileLineSource, StreamLineSource
from ldapaccesslog.registry import parse_message

log = logging.getLogger(__name__)


class AccessLogReader(object):
    """Read access log messages one at a time.

    Blank lines, and lines starting with '#', are skipped. A line that
    can not be parsed raises LogException, but it is consumed all the same,
    so the caller may log it and call read() again to carry on.

    Example::

        with AccessLogReader('/var/log/ds/access') as reader:
            for message in reader:
                print(message.get_message_type())

    :param source: A LineSource, a path to a log file, or an iterable of lines
    :type source: LineSource, str or iterable
    """

    def __init__(self, source):
        if isinstance(source, LineSource):
            self._source = source
        elif isinstance(source, (str, os.PathLike)):
            self._source = FileLineSource(source)
        else:
            self._source = StreamLineSource(source)
        self._line_number = 0
        self._closed = False

    @property
    def closed(self):
        return self._closed

    @property
    def line_number(self):
        """Number of the last line taken from the source, from 1"""
        return self._line_number

    def read(self):
        """Read the next message

        :returns: An AccessLogMessage, or None at the end of the log
        :raises: LogException, ValueError if the reader is closed
        """
        if self._closed:
            raise ValueError("read() on a closed AccessLogReader")

        while True:
            line = self._source.next_line()
            if line is None:
                return None
            self._line_number += 1

            if line.strip() == '' or line.startswith(COMMENT_PREFIX):
                log.debug("Skipping line %d", self._line_number)
                continue

            try:
                return parse_message(line)
            except LogException as e:
                if e.line is None:
                    e.line = line
                e.line_number = self._line_number
                log.debug("Unable to parse line %d: %s", self._line_number, e.message)
                raise

    def close(self):
        if not self._closed:
            self._closed = True
            self._source.close()

    def __iter__(self):
        while True:
            message = self.read()
            if message is None:
                return
            yield message

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False
