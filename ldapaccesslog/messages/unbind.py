# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2015 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

from ldapaccesslog._constants import AccessLogOperationType
from ldapaccesslog.messages.operation import OperationRequestAccessLogMessage


class UnbindRequestAccessLogMessage(OperationRequestAccessLogMessage):
    """Unbind has no response, so the request is the only message logged"""

    OPERATION_TYPE = AccessLogOperationType.UNBIND
