# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2015 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

"""The phases an operation goes through. Each operation type combines one of
these with its own field mixin, for example

    class AddResultAccessLogMessage(AddResultFields, AddFields,
                                    OperationResultAccessLogMessage)
"""

from ldapaccesslog._constants import (
    AccessLogMessageType, AssuredReplicationLocalLevel, AssuredReplicationRemoteLevel
)
from ldapaccesslog.messages.base import OperationAccessLogMessage


class OperationRequestAccessLogMessage(OperationAccessLogMessage):
    """Logged when the server receives a request"""

    MESSAGE_TYPE = AccessLogMessageType.REQUEST

    def __init__(self, message):
        super(OperationRequestAccessLogMessage, self).__init__(message)
        m = self._message
        self._requester_ip_address = m.get_named_value('requesterIP')
        self._requester_dn = m.get_named_value('requesterDN')
        self._intermediate_client_request = m.get_named_value('via')
        self._operation_purpose = m.get_named_value('opPurpose')
        self._request_control_oids = m.get_named_value_as_list('requestControls')
        self._using_admin_session_worker_thread = \
            m.get_named_value_as_boolean('usingAdminSessionWorkerThread')

    def get_requester_ip_address(self):
        return self._requester_ip_address

    def get_requester_dn(self):
        return self._requester_dn

    def get_intermediate_client_request(self):
        return self._intermediate_client_request

    def get_operation_purpose(self):
        return self._operation_purpose

    def get_request_control_oids(self):
        return list(self._request_control_oids)

    def get_using_admin_session_worker_thread(self):
        return self._using_admin_session_worker_thread


class OperationForwardAccessLogMessage(OperationRequestAccessLogMessage):
    """Logged when a request is forwarded to a backend server"""

    MESSAGE_TYPE = AccessLogMessageType.FORWARD

    def __init__(self, message):
        super(OperationForwardAccessLogMessage, self).__init__(message)
        m = self._message
        self._target_host = m.get_named_value('targetHost')
        self._target_port = m.get_named_value_as_int('targetPort')
        self._target_protocol = m.get_named_value('targetProtocol')

    def get_target_host(self):
        return self._target_host

    def get_target_port(self):
        return self._target_port

    def get_target_protocol(self):
        return self._target_protocol


class OperationForwardFailedAccessLogMessage(OperationForwardAccessLogMessage):
    """Logged when forwarding a request failed. The result code is kept as the
    number the server logged, it has not been through the result code table.
    """

    MESSAGE_TYPE = AccessLogMessageType.FORWARD_FAILED

    def __init__(self, message):
        super(OperationForwardFailedAccessLogMessage, self).__init__(message)
        self._result_code = self._message.get_named_value_as_int('resultCode')
        self._diagnostic_message = self._message.get_named_value('message')

    def get_result_code(self):
        return self._result_code

    def get_diagnostic_message(self):
        return self._diagnostic_message


class OperationResultAccessLogMessage(OperationRequestAccessLogMessage):
    """Logged when the server sends the response to an operation"""

    MESSAGE_TYPE = AccessLogMessageType.RESULT

    def __init__(self, message):
        super(OperationResultAccessLogMessage, self).__init__(message)
        m = self._message
        self._result_code = m.get_named_value_as_result_code('resultCode')
        self._diagnostic_message = m.get_named_value('message')
        self._additional_information = m.get_named_value('additionalInfo')
        self._matched_dn = m.get_named_value('matchedDN')
        self._processing_time_millis = m.get_named_value_as_double('etime')
        self._queue_time_millis = m.get_named_value_as_double('qtime')
        self._intermediate_client_result = m.get_named_value('from')
        self._referral_urls = m.get_named_value_as_referral_urls('referralURLs')
        self._alternate_authorization_dn = m.get_named_value('authzDN')
        self._response_control_oids = m.get_named_value_as_list('responseControls')
        self._servers_accessed = m.get_named_value_as_list('serversAccessed')
        self._used_privileges = m.get_named_value_as_list('usedPrivileges')
        self._pre_authorization_used_privileges = m.get_named_value_as_list('preAuthZUsedPrivileges')
        self._missing_privileges = m.get_named_value_as_list('missingPrivileges')
        self._uncached_data_accessed = m.get_named_value_as_boolean('uncachedDataAccessed')
        self._intermediate_responses_returned = \
            m.get_named_value_as_long('intermediateResponsesReturned')
        self._target_host = m.get_named_value('targetHost')
        self._target_port = m.get_named_value_as_int('targetPort')
        self._target_protocol = m.get_named_value('targetProtocol')
        self._replication_change_id = m.get_named_value('replicationChangeID')

    def get_result_code(self):
        """ResultCode, or UnrecognizedResultCode for codes not in the table"""
        return self._result_code

    def get_diagnostic_message(self):
        return self._diagnostic_message

    def get_additional_information(self):
        return self._additional_information

    def get_matched_dn(self):
        return self._matched_dn

    def get_processing_time_millis(self):
        return self._processing_time_millis

    def get_queue_time_millis(self):
        return self._queue_time_millis

    def get_intermediate_client_result(self):
        return self._intermediate_client_result

    def get_referral_urls(self):
        return list(self._referral_urls)

    def get_alternate_authorization_dn(self):
        return self._alternate_authorization_dn

    def get_response_control_oids(self):
        return list(self._response_control_oids)

    def get_servers_accessed(self):
        return list(self._servers_accessed)

    def get_used_privileges(self):
        return list(self._used_privileges)

    def get_pre_authorization_used_privileges(self):
        return list(self._pre_authorization_used_privileges)

    def get_missing_privileges(self):
        return list(self._missing_privileges)

    def get_uncached_data_accessed(self):
        return self._uncached_data_accessed

    def get_intermediate_responses_returned(self):
        return self._intermediate_responses_returned

    def get_target_host(self):
        return self._target_host

    def get_target_port(self):
        return self._target_port

    def get_target_protocol(self):
        return self._target_protocol

    def get_replication_change_id(self):
        return self._replication_change_id


class OperationAssuranceCompletedAccessLogMessage(OperationResultAccessLogMessage):
    """Logged once replication assurance for a write has been resolved"""

    MESSAGE_TYPE = AccessLogMessageType.ASSURANCE_COMPLETE

    def __init__(self, message):
        super(OperationAssuranceCompletedAccessLogMessage, self).__init__(message)
        m = self._message
        self._assured_replication_local_level = \
            m.get_named_value_as_enum('localAssuranceLevel', AssuredReplicationLocalLevel)
        self._assured_replication_remote_level = \
            m.get_named_value_as_enum('remoteAssuranceLevel', AssuredReplicationRemoteLevel)
        self._assured_replication_timeout_millis = m.get_named_value_as_long('assuranceTimeoutMillis')
        self._response_delayed_by_assurance = m.get_named_value_as_boolean('responseDelayedByAssurance')
        self._local_assurance_satisfied = m.get_named_value_as_boolean('localAssuranceSatisfied')
        self._remote_assurance_satisfied = m.get_named_value_as_boolean('remoteAssuranceSatisfied')
        self._server_assurance_results = m.get_named_value('serverAssuranceResults')

    def get_assured_replication_local_level(self):
        return self._assured_replication_local_level

    def get_assured_replication_remote_level(self):
        return self._assured_replication_remote_level

    def get_assured_replication_timeout_millis(self):
        return self._assured_replication_timeout_millis

    def get_response_delayed_by_assurance(self):
        return self._response_delayed_by_assurance

    def get_local_assurance_satisfied(self):
        return self._local_assurance_satisfied

    def get_remote_assurance_satisfied(self):
        return self._remote_assurance_satisfied

    def get_server_assurance_results(self):
        return self._server_assurance_results


class OperationIntermediateResponseAccessLogMessage(OperationRequestAccessLogMessage):
    """Logged when the server sends an intermediate response to the client"""

    MESSAGE_TYPE = AccessLogMessageType.INTERMEDIATE_RESPONSE

    def __init__(self, message):
        super(OperationIntermediateResponseAccessLogMessage, self).__init__(message)
        m = self._message
        self._oid = m.get_named_value('oid')
        self._intermediate_response_name = m.get_named_value('name')
        self._value_string = m.get_named_value('value')
        self._response_control_oids = m.get_named_value_as_list('responseControls')

    def get_oid(self):
        return self._oid

    def get_intermediate_response_name(self):
        return self._intermediate_response_name

    def get_value_string(self):
        return self._value_string

    def get_response_control_oids(self):
        return list(self._response_control_oids)
