# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2015 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

from ldapaccesslog._constants import AccessLogOperationType
from ldapaccesslog.messages.operation import (
    OperationRequestAccessLogMessage,
    OperationForwardAccessLogMessage,
    OperationForwardFailedAccessLogMessage,
    OperationResultAccessLogMessage,
    OperationIntermediateResponseAccessLogMessage,
)


class ExtendedFields(object):

    def __init__(self, message):
        super(ExtendedFields, self).__init__(message)
        self._request_oid = self._message.get_named_value('requestOID')
        # Name of the request, when the server knows it
        self._request_type = self._message.get_named_value('requestType')

    def get_request_oid(self):
        return self._request_oid

    def get_request_type(self):
        return self._request_type


class ExtendedResultFields(object):

    def __init__(self, message):
        super(ExtendedResultFields, self).__init__(message)
        self._response_oid = self._message.get_named_value('responseOID')
        self._response_type = self._message.get_named_value('responseType')

    def get_response_oid(self):
        return self._response_oid

    def get_response_type(self):
        return self._response_type


class ExtendedRequestAccessLogMessage(ExtendedFields, OperationRequestAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.EXTENDED


class ExtendedForwardAccessLogMessage(ExtendedFields, OperationForwardAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.EXTENDED


class ExtendedForwardFailedAccessLogMessage(ExtendedFields, OperationForwardFailedAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.EXTENDED


class ExtendedResultAccessLogMessage(ExtendedResultFields, ExtendedFields, OperationResultAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.EXTENDED


class ExtendedIntermediateResponseAccessLogMessage(ExtendedFields,
                                                   OperationIntermediateResponseAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.EXTENDED
