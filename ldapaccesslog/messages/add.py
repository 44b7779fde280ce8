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


class AddFields(object):

    def __init__(self, message):
        super(AddFields, self).__init__(message)
        self._dn = self._message.get_named_value('dn')
        # Set when the add restores a soft deleted entry
        self._undelete_from_dn = self._message.get_named_value('undeleteFromDN')

    def get_dn(self):
        return self._dn

    def get_undelete_from_dn(self):
        return self._undelete_from_dn


class AddResultFields(object):

    def __init__(self, message):
        super(AddResultFields, self).__init__(message)
        self._change_to_soft_deleted_entry = \
            self._message.get_named_value_as_boolean('changeToSoftDeletedEntry')

    def get_change_to_soft_deleted_entry(self):
        return self._change_to_soft_deleted_entry


class AddRequestAccessLogMessage(AddFields, OperationRequestAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.ADD


class AddForwardAccessLogMessage(AddFields, OperationForwardAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.ADD


class AddForwardFailedAccessLogMessage(AddFields, OperationForwardFailedAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.ADD


class AddResultAccessLogMessage(AddResultFields, AddFields, OperationResultAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.ADD


class AddAssuranceCompletedAccessLogMessage(AddResultFields, AddFields,
                                            OperationAssuranceCompletedAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.ADD


class AddIntermediateResponseAccessLogMessage(AddFields, OperationIntermediateResponseAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.ADD
