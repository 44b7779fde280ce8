# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2015 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

from ldapaccesslog._constants import AccessLogMessageType
from ldapaccesslog.messages.base import ConnectionAccessLogMessage


class ConnectAccessLogMessage(ConnectionAccessLogMessage):
    """A client connection was accepted"""

    MESSAGE_TYPE = AccessLogMessageType.CONNECT

    def __init__(self, message):
        super(ConnectAccessLogMessage, self).__init__(message)
        m = self._message
        self._source_address = m.get_named_value('from')
        self._target_address = m.get_named_value('to')
        self._protocol_name = m.get_named_value('protocol')
        self._client_connection_policy = m.get_named_value('clientConnectionPolicy')

    def get_source_address(self):
        return self._source_address

    def get_target_address(self):
        return self._target_address

    def get_protocol_name(self):
        return self._protocol_name

    def get_client_connection_policy(self):
        return self._client_connection_policy


class DisconnectAccessLogMessage(ConnectionAccessLogMessage):
    """A client connection was closed"""

    MESSAGE_TYPE = AccessLogMessageType.DISCONNECT

    def __init__(self, message):
        super(DisconnectAccessLogMessage, self).__init__(message)
        self._disconnect_reason = self._message.get_named_value('reason')
        self._message_text = self._message.get_named_value('msg')

    def get_disconnect_reason(self):
        return self._disconnect_reason

    def get_message(self):
        return self._message_text


class ClientCertificateAccessLogMessage(ConnectionAccessLogMessage):

    MESSAGE_TYPE = AccessLogMessageType.CLIENT_CERTIFICATE

    def __init__(self, message):
        super(ClientCertificateAccessLogMessage, self).__init__(message)
        self._peer_subject = self._message.get_named_value('peerSubject')
        self._issuer_subject = self._message.get_named_value('issuerSubject')

    def get_peer_subject(self):
        return self._peer_subject

    def get_issuer_subject(self):
        return self._issuer_subject


class SecurityNegotiationAccessLogMessage(ConnectionAccessLogMessage):
    """TLS was negotiated on a connection"""

    MESSAGE_TYPE = AccessLogMessageType.SECURITY_NEGOTIATION

    def __init__(self, message):
        super(SecurityNegotiationAccessLogMessage, self).__init__(message)
        self._protocol = self._message.get_named_value('protocol')
        self._cipher = self._message.get_named_value('cipher')

    def get_protocol(self):
        return self._protocol

    def get_cipher(self):
        return self._cipher
