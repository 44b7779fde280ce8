# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2015 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

"""Decide which message class a line belongs to.

A line has one bareword token for connection and administrative messages
(CONNECT, DISCONNECT, ...) or two for operations (SEARCH RESULT, ...).
Only the combinations listed here are accepted.
"""

import logging
from types import MappingProxyType
from ldapaccesslog._constants import AccessLogMessageType as MT
from ldapaccesslog._constants import AccessLogOperationType as OP
from ldapaccesslog.exceptions import UnrecognizedMessageType
from ldapaccesslog.logmessage import LogMessage
from ldapaccesslog.messages import (
    ConnectAccessLogMessage,
    DisconnectAccessLogMessage,
    ClientCertificateAccessLogMessage,
    SecurityNegotiationAccessLogMessage,
    EntryRebalancingRequestAccessLogMessage,
    EntryRebalancingResultAccessLogMessage,
    AbandonRequestAccessLogMessage,
    AbandonForwardAccessLogMessage,
    AbandonForwardFailedAccessLogMessage,
    AbandonResultAccessLogMessage,
    AddRequestAccessLogMessage,
    AddForwardAccessLogMessage,
    AddForwardFailedAccessLogMessage,
    AddResultAccessLogMessage,
    AddAssuranceCompletedAccessLogMessage,
    AddIntermediateResponseAccessLogMessage,
    BindRequestAccessLogMessage,
    BindForwardAccessLogMessage,
    BindForwardFailedAccessLogMessage,
    BindResultAccessLogMessage,
    BindIntermediateResponseAccessLogMessage,
    CompareRequestAccessLogMessage,
    CompareForwardAccessLogMessage,
    CompareForwardFailedAccessLogMessage,
    CompareResultAccessLogMessage,
    CompareIntermediateResponseAccessLogMessage,
    DeleteRequestAccessLogMessage,
    DeleteForwardAccessLogMessage,
    DeleteForwardFailedAccessLogMessage,
    DeleteResultAccessLogMessage,
    DeleteAssuranceCompletedAccessLogMessage,
    DeleteIntermediateResponseAccessLogMessage,
    ExtendedRequestAccessLogMessage,
    ExtendedForwardAccessLogMessage,
    ExtendedForwardFailedAccessLogMessage,
    ExtendedResultAccessLogMessage,
    ExtendedIntermediateResponseAccessLogMessage,
    ModifyRequestAccessLogMessage,
    ModifyForwardAccessLogMessage,
    ModifyForwardFailedAccessLogMessage,
    ModifyResultAccessLogMessage,
    ModifyAssuranceCompletedAccessLogMessage,
    ModifyIntermediateResponseAccessLogMessage,
    ModifyDNRequestAccessLogMessage,
    ModifyDNForwardAccessLogMessage,
    ModifyDNForwardFailedAccessLogMessage,
    ModifyDNResultAccessLogMessage,
    ModifyDNAssuranceCompletedAccessLogMessage,
    ModifyDNIntermediateResponseAccessLogMessage,
    SearchRequestAccessLogMessage,
    SearchForwardAccessLogMessage,
    SearchForwardFailedAccessLogMessage,
    SearchResultAccessLogMessage,
    SearchEntryAccessLogMessage,
    SearchReferenceAccessLogMessage,
    SearchIntermediateResponseAccessLogMessage,
    UnbindRequestAccessLogMessage,
)

log = logging.getLogger(__name__)

CONNECTION_MESSAGE_CLASSES = MappingProxyType({
    MT.CONNECT: ConnectAccessLogMessage,
    MT.DISCONNECT: DisconnectAccessLogMessage,
    MT.CLIENT_CERTIFICATE: ClientCertificateAccessLogMessage,
    MT.SECURITY_NEGOTIATION: SecurityNegotiationAccessLogMessage,
    MT.ENTRY_REBALANCING_REQUEST: EntryRebalancingRequestAccessLogMessage,
    MT.ENTRY_REBALANCING_RESULT: EntryRebalancingResultAccessLogMessage,
})

OPERATION_MESSAGE_CLASSES = MappingProxyType({
    (OP.ABANDON, MT.REQUEST): AbandonRequestAccessLogMessage,
    (OP.ABANDON, MT.FORWARD): AbandonForwardAccessLogMessage,
    (OP.ABANDON, MT.FORWARD_FAILED): AbandonForwardFailedAccessLogMessage,
    (OP.ABANDON, MT.RESULT): AbandonResultAccessLogMessage,

    (OP.ADD, MT.REQUEST): AddRequestAccessLogMessage,
    (OP.ADD, MT.FORWARD): AddForwardAccessLogMessage,
    (OP.ADD, MT.FORWARD_FAILED): AddForwardFailedAccessLogMessage,
    (OP.ADD, MT.RESULT): AddResultAccessLogMessage,
    (OP.ADD, MT.ASSURANCE_COMPLETE): AddAssuranceCompletedAccessLogMessage,
    (OP.ADD, MT.INTERMEDIATE_RESPONSE): AddIntermediateResponseAccessLogMessage,

    (OP.BIND, MT.REQUEST): BindRequestAccessLogMessage,
    (OP.BIND, MT.FORWARD): BindForwardAccessLogMessage,
    (OP.BIND, MT.FORWARD_FAILED): BindForwardFailedAccessLogMessage,
    (OP.BIND, MT.RESULT): BindResultAccessLogMessage,
    (OP.BIND, MT.INTERMEDIATE_RESPONSE): BindIntermediateResponseAccessLogMessage,

    (OP.COMPARE, MT.REQUEST): CompareRequestAccessLogMessage,
    (OP.COMPARE, MT.FORWARD): CompareForwardAccessLogMessage,
    (OP.COMPARE, MT.FORWARD_FAILED): CompareForwardFailedAccessLogMessage,
    (OP.COMPARE, MT.RESULT): CompareResultAccessLogMessage,
    (OP.COMPARE, MT.INTERMEDIATE_RESPONSE): CompareIntermediateResponseAccessLogMessage,

    (OP.DELETE, MT.REQUEST): DeleteRequestAccessLogMessage,
    (OP.DELETE, MT.FORWARD): DeleteForwardAccessLogMessage,
    (OP.DELETE, MT.FORWARD_FAILED): DeleteForwardFailedAccessLogMessage,
    (OP.DELETE, MT.RESULT): DeleteResultAccessLogMessage,
    (OP.DELETE, MT.ASSURANCE_COMPLETE): DeleteAssuranceCompletedAccessLogMessage,
    (OP.DELETE, MT.INTERMEDIATE_RESPONSE): DeleteIntermediateResponseAccessLogMessage,

    (OP.EXTENDED, MT.REQUEST): ExtendedRequestAccessLogMessage,
    (OP.EXTENDED, MT.FORWARD): ExtendedForwardAccessLogMessage,
    (OP.EXTENDED, MT.FORWARD_FAILED): ExtendedForwardFailedAccessLogMessage,
    (OP.EXTENDED, MT.RESULT): ExtendedResultAccessLogMessage,
    (OP.EXTENDED, MT.INTERMEDIATE_RESPONSE): ExtendedIntermediateResponseAccessLogMessage,

    (OP.MODIFY, MT.REQUEST): ModifyRequestAccessLogMessage,
    (OP.MODIFY, MT.FORWARD): ModifyForwardAccessLogMessage,
    (OP.MODIFY, MT.FORWARD_FAILED): ModifyForwardFailedAccessLogMessage,
    (OP.MODIFY, MT.RESULT): ModifyResultAccessLogMessage,
    (OP.MODIFY, MT.ASSURANCE_COMPLETE): ModifyAssuranceCompletedAccessLogMessage,
    (OP.MODIFY, MT.INTERMEDIATE_RESPONSE): ModifyIntermediateResponseAccessLogMessage,

    (OP.MODDN, MT.REQUEST): ModifyDNRequestAccessLogMessage,
    (OP.MODDN, MT.FORWARD): ModifyDNForwardAccessLogMessage,
    (OP.MODDN, MT.FORWARD_FAILED): ModifyDNForwardFailedAccessLogMessage,
    (OP.MODDN, MT.RESULT): ModifyDNResultAccessLogMessage,
    (OP.MODDN, MT.ASSURANCE_COMPLETE): ModifyDNAssuranceCompletedAccessLogMessage,
    (OP.MODDN, MT.INTERMEDIATE_RESPONSE): ModifyDNIntermediateResponseAccessLogMessage,

    (OP.SEARCH, MT.REQUEST): SearchRequestAccessLogMessage,
    (OP.SEARCH, MT.FORWARD): SearchForwardAccessLogMessage,
    (OP.SEARCH, MT.FORWARD_FAILED): SearchForwardFailedAccessLogMessage,
    (OP.SEARCH, MT.RESULT): SearchResultAccessLogMessage,
    (OP.SEARCH, MT.ENTRY): SearchEntryAccessLogMessage,
    (OP.SEARCH, MT.REFERENCE): SearchReferenceAccessLogMessage,
    (OP.SEARCH, MT.INTERMEDIATE_RESPONSE): SearchIntermediateResponseAccessLogMessage,

    (OP.UNBIND, MT.REQUEST): UnbindRequestAccessLogMessage,
})


def _lookup_token(enum_type, token, line):
    try:
        return enum_type(token)
    except ValueError:
        raise UnrecognizedMessageType("Unrecognized token '%s'" % token, line=line)


def get_message_class(tokens, line=None):
    """Find the message class for the bareword tokens of a line

    :param tokens: The unnamed values of the line, in order
    :type tokens: tuple
    :param line: The line, only used in error messages
    :type line: str
    :returns: A subclass of AccessLogMessage
    :raises: UnrecognizedMessageType
    """
    if len(tokens) == 1:
        message_type = _lookup_token(MT, tokens[0], line)
        cls = CONNECTION_MESSAGE_CLASSES.get(message_type)
        if cls is None:
            raise UnrecognizedMessageType("Message type %s requires an operation type" %
                                          message_type.value, line=line)
        return cls
    elif len(tokens) == 2:
        # Check both tokens before looking at the pair, so the error names
        # the token that is actually wrong.
        operation_type = _lookup_token(OP, tokens[0], line)
        message_type = _lookup_token(MT, tokens[1], line)
        cls = OPERATION_MESSAGE_CLASSES.get((operation_type, message_type))
        if cls is None:
            raise UnrecognizedMessageType("%s %s is not a supported message" %
                                          (operation_type.value, message_type.value), line=line)
        return cls
    raise UnrecognizedMessageType("Line has no message type", line=line)


def parse_message(line):
    """Parse a single access log line into its message class

    :param line: A line of the access log, without the line terminator
    :type line: str
    :returns: An AccessLogMessage, str() of which is the line
    :raises: LogException
    """
    message = LogMessage(line)
    cls = get_message_class(message.get_unnamed_values(), line)
    log.debug("%s -> %s", ' '.join(message.get_unnamed_values()), cls.__name__)
    return cls(message)
