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


class DeleteFields(object):

    def __init__(self, message):
        super(DeleteFields, self).__init__(message)
        self._dn = self._message.get_named_value('dn')

    def get_dn(self):
        return self._dn


class DeleteResultFields(object):
    """A delete may be turned into a soft delete, which moves the entry
    rather than removing it.
    """

    def __init__(self, message):
        super(DeleteResultFields, self).__init__(message)
        self._soft_delete_entry_dn = self._message.get_named_value('softDeleteEntryDN')
        self._change_to_soft_deleted_entry = \
            self._message.get_named_value_as_boolean('changeToSoftDeletedEntry')

    def get_soft_delete_entry_dn(self):
        return self._soft_delete_entry_dn

    def get_change_to_soft_deleted_entry(self):
        return self._change_to_soft_deleted_entry


class DeleteRequestAccessLogMessage(DeleteFields, OperationRequestAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.DELETE


class DeleteForwardAccessLogMessage(DeleteFields, OperationForwardAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.DELETE


class DeleteForwardFailedAccessLogMessage(DeleteFields, OperationForwardFailedAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.DELETE


class DeleteResultAccessLogMessage(DeleteResultFields, DeleteFields, OperationResultAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.DELETE


class DeleteAssuranceCompletedAccessLogMessage(DeleteResultFields, DeleteFields,
                                               OperationAssuranceCompletedAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.DELETE


class DeleteIntermediateResponseAccessLogMessage(DeleteFields,
                                                 OperationIntermediateResponseAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.DELETE
