# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2015 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

"""Count what happened in one or more access logs.

Every counter is updated from a single message at a time. Search scopes and
extended operation OIDs are taken from the RESULT line, which repeats the
request fields, so REQUEST and RESULT never have to be matched up.
"""

from collections import Counter, OrderedDict
from ldapaccesslog._constants import (
    AccessLogMessageType, AccessLogOperationType, SearchScope
)
from ldapaccesslog.resultcode import ResultCode

# Upper bounds, in milliseconds, of the processing time histogram.
PROCESSING_TIME_BUCKETS = [1, 2, 3, 5, 10, 20, 30, 50, 100, 1000, None]

DEFAULT_TOP = 10


def _bucket_label(bound):
    if bound is None:
        return 'over 1000 ms'
    return 'up to %d ms' % bound


def _result_code_label(rc):
    if rc is None:
        return "none"
    return "%d (%s)" % (int(rc), rc.name)


class AccessLogSummary(object):
    """Aggregate counters over a stream of access log messages

    :param top: How many entries to keep in the "most common" lists
    :type top: int
    """

    def __init__(self, top=DEFAULT_TOP):
        self.top = top
        self.total_messages = 0
        self.invalid_lines = 0
        self.first_timestamp = None
        self.last_timestamp = None

        self.connects = 0
        self.disconnects = 0
        self.client_addresses = Counter()
        self.client_connection_policies = Counter()
        self.disconnect_reasons = Counter()
        self.security_protocols = Counter()

        self.operations = Counter()
        self.processing_time = Counter()
        self.processing_times = {}
        self.result_codes = {}
        self.uncached = Counter()

        self.search_scopes = Counter()
        self.non_base_searches = 0
        self.search_entry_counts = Counter()
        self.unindexed_attempts = 0
        self.unindexed_successful = 0
        self.unindexed_failed = 0
        self.extended_operations = Counter()

    def update(self, message):
        """Account for one parsed message

        :param message: Any access log message
        :type message: AccessLogMessage
        """
        self.total_messages += 1
        ts = message.get_timestamp()
        if self.first_timestamp is None or ts < self.first_timestamp:
            self.first_timestamp = ts
        if self.last_timestamp is None or ts > self.last_timestamp:
            self.last_timestamp = ts

        message_type = message.get_message_type()
        operation_type = message.get_operation_type()

        if message_type == AccessLogMessageType.CONNECT:
            self._update_connect(message)
        elif message_type == AccessLogMessageType.DISCONNECT:
            self.disconnects += 1
            reason = message.get_disconnect_reason()
            if reason is not None:
                self.disconnect_reasons[reason] += 1
        elif message_type == AccessLogMessageType.SECURITY_NEGOTIATION:
            if message.get_protocol() is not None:
                self.security_protocols[message.get_protocol()] += 1
        elif message_type == AccessLogMessageType.REQUEST and \
                operation_type in (AccessLogOperationType.ABANDON, AccessLogOperationType.UNBIND):
            # These two never get a RESULT worth counting.
            self.operations[operation_type.value] += 1
        elif message_type == AccessLogMessageType.RESULT and \
                operation_type != AccessLogOperationType.ABANDON:
            self._update_result(message)

    def _update_connect(self, message):
        self.connects += 1
        if message.get_source_address() is not None:
            self.client_addresses[message.get_source_address()] += 1
        if message.get_client_connection_policy() is not None:
            self.client_connection_policies[message.get_client_connection_policy()] += 1

    def _update_result(self, message):
        op = message.get_operation_type().value
        self.operations[op] += 1

        codes = self.result_codes.setdefault(op, Counter())
        codes[_result_code_label(message.get_result_code())] += 1

        etime = message.get_processing_time_millis()
        if etime is not None:
            self.processing_time[op] += etime
            buckets = self.processing_times.setdefault(op, Counter())
            for bound in PROCESSING_TIME_BUCKETS:
                if bound is None or etime <= bound:
                    buckets[_bucket_label(bound)] += 1
                    break

        if message.get_uncached_data_accessed():
            self.uncached[op] += 1

        operation_type = message.get_operation_type()
        if operation_type == AccessLogOperationType.SEARCH:
            self._update_search_result(message)
        elif operation_type == AccessLogOperationType.EXTENDED:
            if message.get_request_oid() is not None:
                self.extended_operations[message.get_request_oid()] += 1

    def _update_search_result(self, message):
        scope = message.get_scope()
        if scope is not None:
            self.search_scopes[scope.name] += 1
            if scope != SearchScope.BASE:
                self.non_base_searches += 1

        if message.get_entries_returned() is not None:
            self.search_entry_counts[message.get_entries_returned()] += 1

        if message.get_unindexed():
            self.unindexed_attempts += 1
            if message.get_result_code() == ResultCode.SUCCESS:
                self.unindexed_successful += 1
            else:
                self.unindexed_failed += 1

    def get_average_processing_time(self, operation_type):
        """Average etime of an operation type in milliseconds, or None

        :param operation_type: The operation type
        :type operation_type: AccessLogOperationType
        """
        op = operation_type.value
        count = sum(self.processing_times.get(op, Counter()).values())
        if count == 0:
            return None
        return self.processing_time[op] / count

    def get_duration(self):
        """Seconds between the first and the last message"""
        if self.first_timestamp is None:
            return None
        return (self.last_timestamp - self.first_timestamp).total_seconds()

    def _most_common(self, counter):
        return [{'name': str(k), 'count': v} for k, v in counter.most_common(self.top)]

    def get_report(self):
        """Everything counted so far, as a json serialisable dict"""
        operations = OrderedDict()
        for operation_type in AccessLogOperationType:
            op = operation_type.value
            if self.operations[op] == 0:
                continue
            operations[op] = {
                'count': self.operations[op],
                'average_etime': self.get_average_processing_time(operation_type),
                'uncached': self.uncached[op],
                'result_codes': self._most_common(self.result_codes.get(op, Counter())),
                'processing_times': [
                    {'name': _bucket_label(b),
                     'count': self.processing_times.get(op, Counter())[_bucket_label(b)]}
                    for b in PROCESSING_TIME_BUCKETS
                ],
            }

        return {
            'total_messages': self.total_messages,
            'invalid_lines': self.invalid_lines,
            'first_timestamp': self.first_timestamp.isoformat() if self.first_timestamp else None,
            'last_timestamp': self.last_timestamp.isoformat() if self.last_timestamp else None,
            'duration': self.get_duration(),
            'connects': self.connects,
            'disconnects': self.disconnects,
            'client_addresses': self._most_common(self.client_addresses),
            'client_connection_policies': self._most_common(self.client_connection_policies),
            'disconnect_reasons': self._most_common(self.disconnect_reasons),
            'security_protocols': self._most_common(self.security_protocols),
            'operations': operations,
            'search_scopes': self._most_common(self.search_scopes),
            'non_base_searches': self.non_base_searches,
            'search_entry_counts': self._most_common(self.search_entry_counts),
            'unindexed_searches': {
                'attempts': self.unindexed_attempts,
                'successful': self.unindexed_successful,
                'failed': self.unindexed_failed,
            },
            'extended_operations': self._most_common(self.extended_operations),
        }
