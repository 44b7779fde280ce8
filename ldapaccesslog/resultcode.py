# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2015 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

"""LDAP result codes as they appear in resultCode= fields.
"""

from enum import IntEnum


class ResultCode(IntEnum):
    SUCCESS = 0
    OPERATIONS_ERROR = 1
    PROTOCOL_ERROR = 2
    TIME_LIMIT_EXCEEDED = 3
    SIZE_LIMIT_EXCEEDED = 4
    COMPARE_FALSE = 5
    COMPARE_TRUE = 6
    AUTH_METHOD_NOT_SUPPORTED = 7
    STRONG_AUTH_REQUIRED = 8
    REFERRAL = 10
    ADMIN_LIMIT_EXCEEDED = 11
    UNAVAILABLE_CRITICAL_EXTENSION = 12
    CONFIDENTIALITY_REQUIRED = 13
    SASL_BIND_IN_PROGRESS = 14
    NO_SUCH_ATTRIBUTE = 16
    UNDEFINED_ATTRIBUTE_TYPE = 17
    INAPPROPRIATE_MATCHING = 18
    CONSTRAINT_VIOLATION = 19
    ATTRIBUTE_OR_VALUE_EXISTS = 20
    INVALID_ATTRIBUTE_SYNTAX = 21
    NO_SUCH_OBJECT = 32
    ALIAS_PROBLEM = 33
    INVALID_DN_SYNTAX = 34
    ALIAS_DEREFERENCING_PROBLEM = 36
    INAPPROPRIATE_AUTHENTICATION = 48
    INVALID_CREDENTIALS = 49
    INSUFFICIENT_ACCESS_RIGHTS = 50
    BUSY = 51
    UNAVAILABLE = 52
    UNWILLING_TO_PERFORM = 53
    LOOP_DETECT = 54
    SORT_CONTROL_MISSING = 60
    OFFSET_RANGE_ERROR = 61
    NAMING_VIOLATION = 64
    OBJECT_CLASS_VIOLATION = 65
    NOT_ALLOWED_ON_NONLEAF = 66
    NOT_ALLOWED_ON_RDN = 67
    ENTRY_ALREADY_EXISTS = 68
    OBJECT_CLASS_MODS_PROHIBITED = 69
    AFFECTS_MULTIPLE_DSAS = 71
    VIRTUAL_LIST_VIEW_ERROR = 76
    OTHER = 80
    # Client side codes
    SERVER_DOWN = 81
    LOCAL_ERROR = 82
    ENCODING_ERROR = 83
    DECODING_ERROR = 84
    TIMEOUT = 85
    AUTH_UNKNOWN = 86
    FILTER_ERROR = 87
    USER_CANCELED = 88
    PARAM_ERROR = 89
    NO_MEMORY = 90
    CONNECT_ERROR = 91
    NOT_SUPPORTED = 92
    CONTROL_NOT_FOUND = 93
    NO_RESULTS_RETURNED = 94
    MORE_RESULTS_TO_RETURN = 95
    CLIENT_LOOP = 96
    REFERRAL_LIMIT_EXCEEDED = 97
    # RFC 3909 cancel
    CANCELED = 118
    NO_SUCH_OPERATION = 119
    TOO_LATE = 120
    CANNOT_CANCEL = 121
    ASSERTION_FAILED = 122
    AUTHORIZATION_DENIED = 123
    E_SYNC_REFRESH_REQUIRED = 4096
    NO_OPERATION = 16654
    # Vendor specific
    INTERACTIVE_TRANSACTION_ABORTED = 30221001
    DATABASE_LOCK_CONFLICT = 30221002
    MIRRORED_SUBTREE_DIGEST_MISMATCH = 30221003
    TOKEN_DELIVERY_MECHANISM_UNAVAILABLE = 30221004
    TOKEN_DELIVERY_ATTEMPT_FAILED = 30221005
    TOKEN_DELIVERY_INVALID_RECIPIENT_ID = 30221006
    TOKEN_DELIVERY_INVALID_ACCOUNT_STATE = 30221007


class UnrecognizedResultCode(object):
    """A result code the table does not know about. Keeps the raw value,
    and compares equal to it so callers can still do ``rc == 12345``.
    """

    name = 'UNRECOGNIZED'

    def __init__(self, value):
        self.value = value

    def __int__(self):
        return self.value

    def __eq__(self, other):
        if isinstance(other, UnrecognizedResultCode):
            return self.value == other.value
        if isinstance(other, int):
            return self.value == other
        return NotImplemented

    def __hash__(self):
        return hash(self.value)

    def __repr__(self):
        return "UnrecognizedResultCode(%d)" % self.value

    def __str__(self):
        return "%s (%d)" % (self.name, self.value)


def result_code_for(value):
    """Map an integer onto the canonical result code.

    :param value: The numeric result code
    :type value: int
    :returns: ResultCode or UnrecognizedResultCode
    """
    try:
        return ResultCode(value)
    except ValueError:
        return UnrecognizedResultCode(value)
