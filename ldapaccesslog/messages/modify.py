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
    OperationAssuranceCompletedAccessLogMessage,
    OperationIntermediateResponseAccessLogMessage,
)


class ModifyFields(object):

    def __init__(self, message):
        super(ModifyFields, self).__init__(message)
        self._dn = self._message.get_named_value('dn')
        self._attribute_names = self._message.get_named_value_as_list('attrs')

    def get_dn(self):
        return self._dn

    def get_attribute_names(self):
        """Names of the attributes targeted by the modifications"""
        return list(self._attribute_names)


class ModifyRequestAccessLogMessage(ModifyFields, OperationRequestAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.MODIFY


class ModifyForwardAccessLogMessage(ModifyFields, OperationForwardAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.MODIFY


class ModifyForwardFailedAccessLogMessage(ModifyFields, OperationForwardFailedAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.MODIFY


class ModifyResultAccessLogMessage(ModifyFields, OperationResultAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.MODIFY


class ModifyAssuranceCompletedAccessLogMessage(ModifyFields, OperationAssuranceCompletedAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.MODIFY


class ModifyIntermediateResponseAccessLogMessage(ModifyFields,
                                                 OperationIntermediateResponseAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.MODIFY
