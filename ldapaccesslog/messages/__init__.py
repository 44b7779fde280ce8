# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2015 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

"""The typed access log messages.

Connection level messages live in connection.py, entry rebalancing in
rebalancing.py, and each operation type has its own module that combines the
phases in operation.py with the fields of that operation.
"""

from ldapaccesslog.messages.base import (
    AccessLogMessage,
    ConnectionAccessLogMessage,
    OperationAccessLogMessage,
)
from ldapaccesslog.messages.operation import (
    OperationRequestAccessLogMessage,
    OperationForwardAccessLogMessage,
    OperationForwardFailedAccessLogMessage,
    OperationResultAccessLogMessage,
    OperationAssuranceCompletedAccessLogMessage,
    OperationIntermediateResponseAccessLogMessage,
)
from ldapaccesslog.messages.connection import (
    ConnectAccessLogMessage,
    DisconnectAccessLogMessage,
    ClientCertificateAccessLogMessage,
    SecurityNegotiationAccessLogMessage,
)
from ldapaccesslog.messages.rebalancing import (
    EntryRebalancingRequestAccessLogMessage,
    EntryRebalancingResultAccessLogMessage,
)
from ldapaccesslog.messages.abandon import (
    AbandonRequestAccessLogMessage,
    AbandonForwardAccessLogMessage,
    AbandonForwardFailedAccessLogMessage,
    AbandonResultAccessLogMessage,
)
from ldapaccesslog.messages.add import (
    AddRequestAccessLogMessage,
    AddForwardAccessLogMessage,
    AddForwardFailedAccessLogMessage,
    AddResultAccessLogMessage,
    AddAssuranceCompletedAccessLogMessage,
    AddIntermediateResponseAccessLogMessage,
)
from ldapaccesslog.messages.bind import (
    BindRequestAccessLogMessage,
    BindForwardAccessLogMessage,
    BindForwardFailedAccessLogMessage,
    BindResultAccessLogMessage,
    BindIntermediateResponseAccessLogMessage,
)
from ldapaccesslog.messages.compare import (
    CompareRequestAccessLogMessage,
    CompareForwardAccessLogMessage,
    CompareForwardFailedAccessLogMessage,
    CompareResultAccessLogMessage,
    CompareIntermediateResponseAccessLogMessage,
)
from ldapaccesslog.messages.delete import (
    DeleteRequestAccessLogMessage,
    DeleteForwardAccessLogMessage,
    DeleteForwardFailedAccessLogMessage,
    DeleteResultAccessLogMessage,
    DeleteAssuranceCompletedAccessLogMessage,
    DeleteIntermediateResponseAccessLogMessage,
)
from ldapaccesslog.messages.extended import (
    ExtendedRequestAccessLogMessage,
    ExtendedForwardAccessLogMessage,
    ExtendedForwardFailedAccessLogMessage,
    ExtendedResultAccessLogMessage,
    ExtendedIntermediateResponseAccessLogMessage,
)
from ldapaccesslog.messages.modify import (
    ModifyRequestAccessLogMessage,
    ModifyForwardAccessLogMessage,
    ModifyForwardFailedAccessLogMessage,
    ModifyResultAccessLogMessage,
    ModifyAssuranceCompletedAccessLogMessage,
    ModifyIntermediateResponseAccessLogMessage,
)
from ldapaccesslog.messages.moddn import (
    ModifyDNRequestAccessLogMessage,
    ModifyDNForwardAccessLogMessage,
    ModifyDNForwardFailedAccessLogMessage,
    ModifyDNResultAccessLogMessage,
    ModifyDNAssuranceCompletedAccessLogMessage,
    ModifyDNIntermediateResponseAccessLogMessage,
)
from ldapaccesslog.messages.search import (
    SearchRequestAccessLogMessage,
    SearchForwardAccessLogMessage,
    SearchForwardFailedAccessLogMessage,
    SearchResultAccessLogMessage,
    SearchEntryAccessLogMessage,
    SearchReferenceAccessLogMessage,
    SearchIntermediateResponseAccessLogMessage,
)
from ldapaccesslog.messages.unbind import UnbindRequestAccessLogMessage
