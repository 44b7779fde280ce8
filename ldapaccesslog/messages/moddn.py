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


class ModifyDNFields(object):

    def __init__(self, message):
        super(ModifyDNFields, self).__init__(message)
        m = self._message
        self._dn = m.get_named_value('dn')
        self._new_rdn = m.get_named_value('newRDN')
        self._delete_old_rdn = m.get_named_value_as_boolean('deleteOldRDN')
        self._new_superior_dn = m.get_named_value('newSuperior')

    def get_dn(self):
        return self._dn

    def get_new_rdn(self):
        return self._new_rdn

    def get_delete_old_rdn(self):
        return self._delete_old_rdn

    def get_new_superior_dn(self):
        """None when the entry keeps its parent"""
        return self._new_superior_dn


class ModifyDNRequestAccessLogMessage(ModifyDNFields, OperationRequestAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.MODDN


class ModifyDNForwardAccessLogMessage(ModifyDNFields, OperationForwardAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.MODDN


class ModifyDNForwardFailedAccessLogMessage(ModifyDNFields, OperationForwardFailedAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.MODDN


class ModifyDNResultAccessLogMessage(ModifyDNFields, OperationResultAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.MODDN


class ModifyDNAssuranceCompletedAccessLogMessage(ModifyDNFields,
                                                 OperationAssuranceCompletedAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.MODDN


class ModifyDNIntermediateResponseAccessLogMessage(ModifyDNFields,
                                                   OperationIntermediateResponseAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.MODDN
