# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2015 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

from ldapaccesslog._constants import (
    AccessLogMessageType, AccessLogOperationType, SearchScope, ALL_ATTRIBUTES
)
from ldapaccesslog.messages.operation import (
    OperationRequestAccessLogMessage,
    OperationForwardAccessLogMessage,
    OperationForwardFailedAccessLogMessage,
    OperationResultAccessLogMessage,
    OperationIntermediateResponseAccessLogMessage,
)


class SearchFields(object):

    def __init__(self, message):
        super(SearchFields, self).__init__(message)
        m = self._message
        self._base_dn = m.get_named_value('base')
        self._scope = m.get_named_value_as_enum('scope', SearchScope)
        self._filter = m.get_named_value('filter')
        attrs = m.get_named_value('attrs')
        if attrs is None or attrs == ALL_ATTRIBUTES:
            self._requested_attributes = []
        else:
            self._requested_attributes = m.get_named_value_as_list('attrs')
        self._dereference_policy = m.get_named_value('deref')
        self._size_limit = m.get_named_value_as_int('sizeLimit')
        self._time_limit = m.get_named_value_as_int('timeLimit')
        self._types_only = m.get_named_value_as_boolean('typesOnly')

    def get_base_dn(self):
        return self._base_dn

    def get_scope(self):
        """SearchScope, or UnrecognizedValue"""
        return self._scope

    def get_filter(self):
        return self._filter

    def get_requested_attributes(self):
        """An empty list means all user attributes were requested"""
        return list(self._requested_attributes)

    def get_dereference_policy(self):
        return self._dereference_policy

    def get_size_limit(self):
        return self._size_limit

    def get_time_limit(self):
        return self._time_limit

    def get_types_only(self):
        return self._types_only


class SearchResultFields(object):

    def __init__(self, message):
        super(SearchResultFields, self).__init__(message)
        m = self._message
        self._entries_returned = m.get_named_value_as_long('entriesReturned')
        self._unindexed = m.get_named_value_as_boolean('unindexed')
        self._indexes_near_entry_limit = m.get_named_value_as_list('indexesWithKeysAccessedNearEntryLimit')
        self._indexes_exceeding_entry_limit = \
            m.get_named_value_as_list('indexesWithKeysAccessedExceedingEntryLimit')

    def get_entries_returned(self):
        return self._entries_returned

    def get_unindexed(self):
        return self._unindexed

    def get_indexes_with_keys_accessed_near_entry_limit(self):
        return list(self._indexes_near_entry_limit)

    def get_indexes_with_keys_accessed_exceeding_entry_limit(self):
        return list(self._indexes_exceeding_entry_limit)


class SearchRequestAccessLogMessage(SearchFields, OperationRequestAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.SEARCH


class SearchForwardAccessLogMessage(SearchFields, OperationForwardAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.SEARCH


class SearchForwardFailedAccessLogMessage(SearchFields, OperationForwardFailedAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.SEARCH


class SearchResultAccessLogMessage(SearchResultFields, SearchFields, OperationResultAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.SEARCH


class SearchEntryAccessLogMessage(SearchFields, OperationRequestAccessLogMessage):
    """One entry returned to the client"""

    OPERATION_TYPE = AccessLogOperationType.SEARCH
    MESSAGE_TYPE = AccessLogMessageType.ENTRY

    def __init__(self, message):
        super(SearchEntryAccessLogMessage, self).__init__(message)
        self._dn = self._message.get_named_value('dn')
        self._response_control_oids = self._message.get_named_value_as_list('responseControls')

    def get_dn(self):
        return self._dn

    def get_response_control_oids(self):
        return list(self._response_control_oids)


class SearchReferenceAccessLogMessage(SearchFields, OperationRequestAccessLogMessage):
    """A search result reference returned to the client"""

    OPERATION_TYPE = AccessLogOperationType.SEARCH
    MESSAGE_TYPE = AccessLogMessageType.REFERENCE

    def __init__(self, message):
        super(SearchReferenceAccessLogMessage, self).__init__(message)
        self._referral_urls = self._message.get_named_value_as_referral_urls('referralURLs')
        self._response_control_oids = self._message.get_named_value_as_list('responseControls')

    def get_referral_urls(self):
        return list(self._referral_urls)

    def get_response_control_oids(self):
        return list(self._response_control_oids)


class SearchIntermediateResponseAccessLogMessage(SearchFields,
                                                 OperationIntermediateResponseAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.SEARCH
