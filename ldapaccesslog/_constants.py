# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2015 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

from enum import Enum, IntEnum

# Config file for the ds-accesslog tool, in the same spirit as ~/.dsrc
DSACCESSLOGRC_HOME = '~/.dsaccesslogrc'
DSACCESSLOGRC_SECTION = 'accesslog'

COMMENT_PREFIX = '#'
GZIP_SUFFIX = '.gz'

# The server logs search attrs=ALL when no attributes were requested.
ALL_ATTRIBUTES = 'ALL'

# Bounds used when coercing integer fields.
INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1
LONG_MIN = -2 ** 63
LONG_MAX = 2 ** 63 - 1

MONTH_LOOKUP = {
    'Jan': 1,
    'Feb': 2,
    'Mar': 3,
    'Apr': 4,
    'May': 5,
    'Jun': 6,
    'Jul': 7,
    'Aug': 8,
    'Sep': 9,
    'Oct': 10,
    'Nov': 11,
    'Dec': 12,
}


class AccessLogMessageType(Enum):
    """The second (or only) bareword token of an access log line"""
    CONNECT = 'CONNECT'
    DISCONNECT = 'DISCONNECT'
    CLIENT_CERTIFICATE = 'CLIENT-CERTIFICATE'
    SECURITY_NEGOTIATION = 'SECURITY-NEGOTIATION'
    ENTRY_REBALANCING_REQUEST = 'ENTRY-REBALANCING-REQUEST'
    ENTRY_REBALANCING_RESULT = 'ENTRY-REBALANCING-RESULT'
    REQUEST = 'REQUEST'
    FORWARD = 'FORWARD'
    FORWARD_FAILED = 'FORWARD-FAILED'
    RESULT = 'RESULT'
    ASSURANCE_COMPLETE = 'ASSURANCE-COMPLETE'
    ENTRY = 'ENTRY'
    REFERENCE = 'REFERENCE'
    INTERMEDIATE_RESPONSE = 'INTERMEDIATE-RESPONSE'


class AccessLogOperationType(Enum):
    ABANDON = 'ABANDON'
    ADD = 'ADD'
    BIND = 'BIND'
    COMPARE = 'COMPARE'
    DELETE = 'DELETE'
    EXTENDED = 'EXTENDED'
    MODIFY = 'MODIFY'
    MODDN = 'MODDN'
    SEARCH = 'SEARCH'
    UNBIND = 'UNBIND'


class SearchScope(IntEnum):
    BASE = 0
    ONE = 1
    SUB = 2
    SUBORDINATE_SUBTREE = 3


class BindAuthenticationType(Enum):
    SIMPLE = 'SIMPLE'
    SASL = 'SASL'
    INTERNAL = 'INTERNAL'


class AssuredReplicationLocalLevel(Enum):
    NONE = 'NONE'
    RECEIVED_ANY_SERVER = 'RECEIVED_ANY_SERVER'
    PROCESSED_ALL_SERVERS = 'PROCESSED_ALL_SERVERS'


class AssuredReplicationRemoteLevel(Enum):
    NONE = 'NONE'
    RECEIVED_ANY_REMOTE_LOCATION = 'RECEIVED_ANY_REMOTE_LOCATION'
    RECEIVED_ALL_REMOTE_LOCATIONS = 'RECEIVED_ALL_REMOTE_LOCATIONS'
    PROCESSED_ALL_REMOTE_SERVERS = 'PROCESSED_ALL_REMOTE_SERVERS'


# Message types that only make sense with an operation token in front.
OPERATION_MESSAGE_TYPES = frozenset([
    AccessLogMessageType.REQUEST,
    AccessLogMessageType.FORWARD,
    AccessLogMessageType.FORWARD_FAILED,
    AccessLogMessageType.RESULT,
    AccessLogMessageType.ASSURANCE_COMPLETE,
    AccessLogMessageType.ENTRY,
    AccessLogMessageType.REFERENCE,
    AccessLogMessageType.INTERMEDIATE_RESPONSE,
])
