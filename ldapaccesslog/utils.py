# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2015 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

"""Helpers to turn the raw text of an access log field into a python value.

All of these are pure functions. They raise ValueError when the text does
not fit the requested type, and the caller decides how to report that.
"""

import re
import datetime
from enum import IntEnum
from dateutil.tz import tzoffset
from ldapaccesslog._constants import (
    MONTH_LOOKUP, INT_MIN, INT_MAX, LONG_MIN, LONG_MAX
)
from ldapaccesslog.exceptions import MalformedTimestamp
from ldapaccesslog.resultcode import result_code_for

# [27/Apr/2016:12:49:49.726 +1000], the brackets are removed by the caller.
prog_timestamp = re.compile(r'^(?P<day>\d{1,2})/(?P<month>\w{3})/(?P<year>\d{4}):(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})(\.(?P<fraction>\d{1,9}))?\s(?P<tz>[+\-]\d{4})$')  # noqa
prog_integer = re.compile(r'^[+\-]?\d+$')
prog_double = re.compile(r'^[+\-]?(\d+(\.\d*)?|\.\d+)([eE][+\-]?\d+)?$')
prog_referral_split = re.compile(r',(?=ldap)')


class UnrecognizedValue(object):
    """Stands in for an enumerated field whose text is not a known member."""

    name = 'UNRECOGNIZED'

    def __init__(self, value):
        self.value = value

    def __eq__(self, other):
        if isinstance(other, UnrecognizedValue):
            return self.value == other.value
        return NotImplemented

    def __hash__(self):
        return hash(self.value)

    def __repr__(self):
        return "UnrecognizedValue(%r)" % self.value

    def __str__(self):
        return self.value


def parse_timestamp(ts):
    """Parse a logs timestamp into a timezone aware datetime

    :param ts: The timestamp text, without the surrounding brackets,
               such as ``27/Apr/2016:12:49:49.726 +1000``
    :type ts: str
    :returns: datetime.datetime with millisecond precision
    :raises: MalformedTimestamp
    """
    mres = prog_timestamp.match(ts)
    if mres is None:
        raise MalformedTimestamp("Unable to parse timestamp '%s'" % ts)
    timedata = mres.groupdict()

    month = MONTH_LOOKUP.get(timedata['month'])
    if month is None:
        raise MalformedTimestamp("Unknown month '%s' in timestamp '%s'" % (timedata['month'], ts))

    tz = timedata['tz']
    tz_hours = int(tz[1:3])
    tz_minutes = int(tz[3:5])
    if tz_hours > 23 or tz_minutes > 59:
        raise MalformedTimestamp("Invalid timezone offset '%s' in timestamp '%s'" % (tz, ts))
    offset = (tz_hours * 3600) + (tz_minutes * 60)
    if tz[0] == '-':
        offset = -offset
    tzinfo = tzoffset(None, offset)

    millis = 0
    if timedata['fraction']:
        millis = int(timedata['fraction'][:3].ljust(3, '0'))

    try:
        return datetime.datetime(int(timedata['year']), month, int(timedata['day']),
                                 int(timedata['hour']), int(timedata['minute']),
                                 int(timedata['second']), millis * 1000,
                                 tzinfo=tzinfo)
    except ValueError as e:
        raise MalformedTimestamp("Invalid timestamp '%s'" % ts, cause=e) from e


def _to_bounded_int(value, low, high, kind):
    if not prog_integer.match(value):
        raise ValueError("'%s' is not a valid %s" % (value, kind))
    result = int(value)
    if result < low or result > high:
        raise ValueError("'%s' is out of range for %s" % (value, kind))
    return result


def to_int(value):
    """32 bit signed integer"""
    return _to_bounded_int(value, INT_MIN, INT_MAX, 'int')


def to_long(value):
    """64 bit signed integer"""
    return _to_bounded_int(value, LONG_MIN, LONG_MAX, 'long')


def to_double(value):
    """Plain decimal notation only, float() alone would take nan, inf and 1_0"""
    if not prog_double.match(value):
        raise ValueError("'%s' is not a valid number" % value)
    return float(value)


def to_boolean(value):
    if value == 'true':
        return True
    if value == 'false':
        return False
    raise ValueError("'%s' is not one of true or false" % value)


def to_string_list(value):
    """Split a comma separated value. Empty elements are dropped, so an
    empty string gives an empty list.
    """
    return [v for v in value.split(',') if v != '']


def to_referral_urls(value):
    """Referral URLs may contain commas of their own (the DN part of an
    LDAP URL), so only split where the next URL starts.
    """
    return [v for v in prog_referral_split.split(value) if v != '']


def to_enum(enum_type, value):
    """Look value up in enum_type, falling back to UnrecognizedValue.

    Integer enumerations are looked up by their numeric value.
    """
    try:
        if issubclass(enum_type, IntEnum):
            return enum_type(int(value))
        return enum_type(value)
    except ValueError:
        return UnrecognizedValue(value)


def to_result_code(value):
    return result_code_for(to_int(value))
