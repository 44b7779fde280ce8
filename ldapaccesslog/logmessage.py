# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2015 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

"""Break an access log line up into its timestamp, the bareword tokens that
identify the kind of message, and the name=value pairs.

    [27/Apr/2016:12:49:49.726 +1000] SEARCH RESULT conn=1 op=2 base="dc=example,dc=com"
"""

import logging
from types import MappingProxyType
from ldapaccesslog import utils
from ldapaccesslog.exceptions import (
    MalformedTimestamp, MalformedMessage, MalformedToken, FieldCoercionError
)

log = logging.getLogger(__name__)

MAX_UNNAMED_VALUES = 2


class LogMessage(object):
    """A tokenized access log line. Holds the raw text of every field, the
    typed views are produced on demand by the get_named_value_as_* methods.

    :param line: A single line of the access log, without the line terminator
    :type line: str
    :raises: MalformedTimestamp, MalformedMessage, MalformedToken
    """

    def __init__(self, line):
        self._line = line
        if not line.startswith('['):
            raise MalformedTimestamp("Line does not start with a timestamp", line=line)
        end = line.find(']')
        if end < 0:
            raise MalformedTimestamp("Unterminated timestamp", line=line)
        try:
            self._timestamp = utils.parse_timestamp(line[1:end])
        except MalformedTimestamp as e:
            e.line = line
            raise
        if end + 1 < len(line) and not line[end + 1].isspace():
            raise MalformedMessage("Expected a space after the timestamp", line=line)

        unnamed, named = self._tokenize(line, end + 1)
        self._unnamed_values = tuple(unnamed)
        self._named_values = MappingProxyType(named)

    def _tokenize(self, line, pos):
        unnamed = []
        named = {}
        length = len(line)

        while True:
            while pos < length and line[pos].isspace():
                pos += 1
            if pos >= length:
                break

            start = pos
            while pos < length and not line[pos].isspace() and line[pos] != '=':
                pos += 1

            if pos >= length or line[pos] != '=':
                # A bareword, these identify the message and have to come first.
                if named:
                    raise MalformedMessage("Unexpected token '%s' after named values" %
                                           line[start:pos], line=line)
                unnamed.append(line[start:pos])
                if len(unnamed) > MAX_UNNAMED_VALUES:
                    raise MalformedMessage("Too many unnamed tokens", line=line)
                continue

            name = line[start:pos]
            if name == '':
                raise MalformedToken("Token at position %d has an empty name" % start, line=line)
            pos += 1

            if pos < length and line[pos] == '"':
                close = line.find('"', pos + 1)
                if close < 0:
                    raise MalformedToken("Unterminated quoted value for '%s'" % name, line=line)
                value = line[pos + 1:close]
                pos = close + 1
                if pos < length and not line[pos].isspace():
                    raise MalformedToken("Unexpected text after the quoted value for '%s'" % name,
                                         line=line)
            else:
                vstart = pos
                while pos < length and not line[pos].isspace():
                    pos += 1
                value = line[vstart:pos]

            # The first occurrence of a name wins.
            if name in named:
                log.debug("Ignoring duplicate value for %s", name)
            else:
                named[name] = value

        return unnamed, named

    def __str__(self):
        return self._line

    def __repr__(self):
        return "LogMessage(%r)" % self._line

    def get_timestamp(self):
        return self._timestamp

    def get_named_values(self):
        """Read only view of the name=value pairs, in the order they appear
        on the line.
        """
        return self._named_values

    def get_unnamed_values(self):
        return self._unnamed_values

    def has_unnamed_value(self, value):
        return value in self._unnamed_values

    def get_named_value(self, name):
        """Get the raw text of a field

        :param name: The field name, case sensitive
        :type name: str
        :returns: str or None if the field is not on the line
        """
        return self._named_values.get(name)

    def _coerce(self, name, convert, *args):
        value = self._named_values.get(name)
        if value is None:
            return None
        try:
            return convert(*args, value)
        except ValueError as e:
            raise FieldCoercionError("Invalid value for field '%s': %s" % (name, e),
                                     field=name, line=self._line, cause=e) from e

    def get_named_value_as_int(self, name):
        return self._coerce(name, utils.to_int)

    def get_named_value_as_long(self, name):
        return self._coerce(name, utils.to_long)

    def get_named_value_as_double(self, name):
        return self._coerce(name, utils.to_double)

    def get_named_value_as_boolean(self, name):
        return self._coerce(name, utils.to_boolean)

    def get_named_value_as_list(self, name):
        """Comma separated field, an absent field is an empty list."""
        value = self._named_values.get(name)
        if value is None:
            return []
        return utils.to_string_list(value)

    def get_named_value_as_referral_urls(self, name):
        value = self._named_values.get(name)
        if value is None:
            return []
        return utils.to_referral_urls(value)

    def get_named_value_as_enum(self, name, enum_type):
        return self._coerce(name, utils.to_enum, enum_type)

    def get_named_value_as_result_code(self, name):
        return self._coerce(name, utils.to_result_code)
