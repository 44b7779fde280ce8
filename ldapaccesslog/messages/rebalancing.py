# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2015 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

"""Entry rebalancing moves a subtree between backend sets behind a proxy.
These are administrative messages, they do not belong to a client connection.
"""

from ldapaccesslog._constants import AccessLogMessageType
from ldapaccesslog.messages.base import AccessLogMessage


class EntryRebalancingRequestAccessLogMessage(AccessLogMessage):

    MESSAGE_TYPE = AccessLogMessageType.ENTRY_REBALANCING_REQUEST

    def __init__(self, message):
        super(EntryRebalancingRequestAccessLogMessage, self).__init__(message)
        m = self._message
        self._rebalancing_operation_id = m.get_named_value_as_long('rebalancingOp')
        self._triggering_connection_id = m.get_named_value_as_long('triggeredByConn')
        self._triggering_operation_id = m.get_named_value_as_long('triggeredByOp')
        self._subtree_base_dn = m.get_named_value('base')
        self._size_limit = m.get_named_value_as_int('sizeLimit')
        self._source_backend_set_name = m.get_named_value('sourceBackendSet')
        self._source_backend_server = m.get_named_value('sourceServer')
        self._target_backend_set_name = m.get_named_value('targetBackendSet')
        self._target_backend_server = m.get_named_value('targetServer')

    def get_rebalancing_operation_id(self):
        return self._rebalancing_operation_id

    def get_triggering_connection_id(self):
        return self._triggering_connection_id

    def get_triggering_operation_id(self):
        return self._triggering_operation_id

    def get_subtree_base_dn(self):
        return self._subtree_base_dn

    def get_size_limit(self):
        return self._size_limit

    def get_source_backend_set_name(self):
        return self._source_backend_set_name

    def get_source_backend_server(self):
        return self._source_backend_server

    def get_target_backend_set_name(self):
        return self._target_backend_set_name

    def get_target_backend_server(self):
        return self._target_backend_server


class EntryRebalancingResultAccessLogMessage(EntryRebalancingRequestAccessLogMessage):

    MESSAGE_TYPE = AccessLogMessageType.ENTRY_REBALANCING_RESULT

    def __init__(self, message):
        super(EntryRebalancingResultAccessLogMessage, self).__init__(message)
        m = self._message
        self._result_code = m.get_named_value_as_result_code('resultCode')
        self._error_message = m.get_named_value('errorMessage')
        self._admin_action_required = m.get_named_value('adminActionRequired')
        self._source_altered = m.get_named_value_as_boolean('sourceAltered')
        self._target_altered = m.get_named_value_as_boolean('targetAltered')
        self._entries_read_from_source = m.get_named_value_as_int('entriesReadFromSource')
        self._entries_added_to_target = m.get_named_value_as_int('entriesAddedToTarget')
        self._entries_deleted_from_source = m.get_named_value_as_int('entriesDeletedFromSource')

    def get_result_code(self):
        return self._result_code

    def get_error_message(self):
        return self._error_message

    def get_admin_action_required(self):
        return self._admin_action_required

    def get_source_altered(self):
        return self._source_altered

    def get_target_altered(self):
        return self._target_altered

    def get_entries_read_from_source(self):
        return self._entries_read_from_source

    def get_entries_added_to_target(self):
        return self._entries_added_to_target

    def get_entries_deleted_from_source(self):
        return self._entries_deleted_from_source
