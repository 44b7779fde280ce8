# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2015 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---


class Error(Exception):
    pass


class LogException(Error):
    """Raised when a line of the access log can not be turned into a message.

    :param message: A human readable description of the problem
    :type message: str
    :param line: The offending log line, if known
    :type line: str
    :param cause: The underlying exception, if any
    :type cause: Exception
    """

    def __init__(self, message, line=None, cause=None):
        super(LogException, self).__init__(message)
        self.message = message
        self.line = line
        self.cause = cause
        # Filled in by the reader, which is the only one who counts lines.
        self.line_number = None

    def __str__(self):
        if self.line_number is not None:
            return "line %d: %s" % (self.line_number, self.message)
        return self.message


class MalformedTimestamp(LogException):
    pass


class MalformedMessage(LogException):
    """Token count or token ordering is wrong."""
    pass


class MalformedToken(MalformedMessage):
    pass


class UnrecognizedMessageType(LogException):
    pass


class FieldCoercionError(LogException):
    """A field is present but its value does not fit the field type."""

    def __init__(self, message, field=None, line=None, cause=None):
        super(FieldCoercionError, self).__init__(message, line=line, cause=cause)
        self.field = field
