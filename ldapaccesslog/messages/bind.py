# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2015 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

from ldapaccesslog._constants import AccessLogOperationType, BindAuthenticationType
from ldapaccesslog.messages.operation import (
    OperationRequestAccessLogMessage,
    OperationForwardAccessLogMessage,
    OperationForwardFailedAccessLogMessage,
    OperationResultAccessLogMessage,
    OperationIntermediateResponseAccessLogMessage,
)


class BindFields(object):

    def __init__(self, message):
        super(BindFields, self).__init__(message)
        m = self._message
        # Kept as text, the server logs whatever the client sent.
        self._protocol_version = m.get_named_value('version')
        self._dn = m.get_named_value('dn')
        self._authentication_type = m.get_named_value_as_enum('authType', BindAuthenticationType)
        if self._authentication_type == BindAuthenticationType.SASL:
            self._sasl_mechanism_name = m.get_named_value('saslMechanism')
        else:
            self._sasl_mechanism_name = None

    def get_protocol_version(self):
        return self._protocol_version

    def get_dn(self):
        return self._dn

    def get_authentication_type(self):
        """BindAuthenticationType, or UnrecognizedValue"""
        return self._authentication_type

    def get_sasl_mechanism_name(self):
        return self._sasl_mechanism_name


class BindResultFields(object):

    def __init__(self, message):
        super(BindResultFields, self).__init__(message)
        m = self._message
        self._authentication_dn = m.get_named_value('authDN')
        self._authorization_dn = m.get_named_value('authzDN')
        self._authentication_failure_id = m.get_named_value_as_long('authFailureID')
        self._authentication_failure_reason = m.get_named_value('authFailureReason')
        self._client_connection_policy = m.get_named_value('clientConnectionPolicy')
        self._retired_password_used = m.get_named_value_as_boolean('retiredPasswordUsed')

    def get_authentication_dn(self):
        return self._authentication_dn

    def get_authorization_dn(self):
        return self._authorization_dn

    def get_authentication_failure_id(self):
        return self._authentication_failure_id

    def get_authentication_failure_reason(self):
        return self._authentication_failure_reason

    def get_client_connection_policy(self):
        return self._client_connection_policy

    def get_retired_password_used(self):
        return self._retired_password_used


class BindRequestAccessLogMessage(BindFields, OperationRequestAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.BIND


class BindForwardAccessLogMessage(BindFields, OperationForwardAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.BIND


class BindForwardFailedAccessLogMessage(BindFields, OperationForwardFailedAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.BIND


class BindResultAccessLogMessage(BindResultFields, BindFields, OperationResultAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.BIND


class BindIntermediateResponseAccessLogMessage(BindFields, OperationIntermediateResponseAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.BIND
