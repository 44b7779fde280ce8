# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2015 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

"""The ldapaccesslog module.
    Turns the lines of a directory server access log into typed, immutable
    message objects.

    parse_message() handles a single line, AccessLogReader a whole log.
"""

from ldapaccesslog._constants import (
    AccessLogMessageType,
    AccessLogOperationType,
    SearchScope,
    BindAuthenticationType,
    AssuredReplicationLocalLevel,
    AssuredReplicationRemoteLevel,
)
from ldapaccesslog.exceptions import (
    LogException,
    MalformedTimestamp,
    MalformedMessage,
    MalformedToken,
    UnrecognizedMessageType,
    FieldCoercionError,
)
from ldapaccesslog.resultcode import ResultCode, UnrecognizedResultCode
from ldapaccesslog.utils import UnrecognizedValue
from ldapaccesslog.logmessage import LogMessage
from ldapaccesslog.linesource import LineSource, FileLineSource, StreamLineSource
from ldapaccesslog.registry import parse_message
from ldapaccesslog.reader import AccessLogReader
from ldapaccesslog.summary import AccessLogSummary

__version__ = '1.0.0'
