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
)


class AbandonFields(object):

    def __init__(self, message):
        super(AbandonFields, self).__init__(message)
        self._message_id_to_abandon = self._message.get_named_value_as_int('idToAbandon')

    def get_message_id_to_abandon(self):
        return self._message_id_to_abandon


class AbandonRequestAccessLogMessage(AbandonFields, OperationRequestAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.ABANDON


class AbandonForwardAccessLogMessage(AbandonFields, OperationForwardAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.ABANDON


class AbandonForwardFailedAccessLogMessage(AbandonFields, OperationForwardFailedAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.ABANDON


class AbandonResultAccessLogMessage(AbandonFields, OperationResultAccessLogMessage):
    OPERATION_TYPE = AccessLogOperationType.ABANDON
