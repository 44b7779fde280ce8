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


class CompareFields(object):

    def __init__(self, message):
        super(CompareFields, self).__init__(message)
        self._dn = self._message.get_named_value('dn')
        self._attribute_name = self._message.get_named_value('attr')

    def get_dn(self):
        return self._dn

    def get_attribute_name(self):
        return self._attribute_name


class CompareRequestAccessLogMessage(CompareFields, OperationRequestAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.COMPARE


class CompareForwardAccessLogMessage(CompareFields, OperationForwardAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.COMPARE


class CompareForwardFailedAccessLogMessage(CompareFields, OperationForwardFailedAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.COMPARE


class CompareResultAccessLogMessage(CompareFields, OperationResultAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.COMPARE


class CompareIntermediateResponseAccessLogMessage(CompareFields,
                                                  OperationIntermediateResponseAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.COMPARE
