# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2015 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

import pytest
from ldapaccesslog import parse_message
from ldapaccesslog._constants import AccessLogMessageType
from ldapaccesslog.exceptions import UnrecognizedMessageType
from ldapaccesslog.messages import (
    ConnectAccessLogMessage,
    DisconnectAccessLogMessage,
    ClientCertificateAccessLogMessage,
    SecurityNegotiationAccessLogMessage,
    EntryRebalancingRequestAccessLogMessage,
    EntryRebalancingResultAccessLogMessage,
)
from ldapaccesslog.resultcode import ResultCode

CONN = 'instanceName="server.example.com:389" startupID="ABCDEFG" conn=1'

REBALANCING = ('product="Directory Server" instanceName="server.example.com:389" startupID="ABCDEFG" '
               'rebalancingOp=1 triggeredByConn=2 triggeredByOp=3 base="ou=subtree,dc=example,dc=com" '
               'sizeLimit=4 sourceBackendSet="source set" sourceServer="source.example.com:1389" '
               'targetBackendSet="target set" targetServer="target.example.com:2389"')


def _check_common(m, line):
    assert str(m) == line
    assert m.get_timestamp() is not None
    assert m.get_instance_name() == 'server.example.com:389'
    assert m.get_startup_id() == 'ABCDEFG'
    assert m.get_operation_type() is None


def test_connect(fields):
    line = fields.line('CONNECT', CONN, 'from="1.2.3.4" to="5.6.7.8" protocol="LDAP"')
    m = parse_message(line)
    assert isinstance(m, ConnectAccessLogMessage)
    _check_common(m, line)
    assert m.get_message_type() is AccessLogMessageType.CONNECT
    assert m.get_product_name() is None
    assert m.get_thread_id() is None
    assert m.get_connection_id() == 1
    assert m.get_source_address() == '1.2.3.4'
    assert m.get_target_address() == '5.6.7.8'
    assert m.get_protocol_name() == 'LDAP'
    assert m.get_client_connection_policy() is None


def test_connect_policy_and_thread(fields):
    line = fields.line('CONNECT', CONN, 'threadID=17 from="1.2.3.4" clientConnectionPolicy="default"')
    m = parse_message(line)
    assert m.get_thread_id() == 17
    assert m.get_client_connection_policy() == 'default'
    assert m.get_target_address() is None


def test_disconnect(fields):
    line = fields.line('DISCONNECT', CONN,
                       'reason="Client Unbind" msg="The client has closed the connection"')
    m = parse_message(line)
    assert isinstance(m, DisconnectAccessLogMessage)
    _check_common(m, line)
    assert m.get_message_type() is AccessLogMessageType.DISCONNECT
    assert m.get_connection_id() == 1
    assert m.get_disconnect_reason() == 'Client Unbind'
    assert m.get_message() == 'The client has closed the connection'


def test_client_certificate(fields):
    line = fields.line('CLIENT-CERTIFICATE', CONN,
                       'peerSubject="CN=Peer,O=Test" issuerSubject="CN=Issuer,O=Test"')
    m = parse_message(line)
    assert isinstance(m, ClientCertificateAccessLogMessage)
    _check_common(m, line)
    assert m.get_message_type() is AccessLogMessageType.CLIENT_CERTIFICATE
    assert m.get_peer_subject() == 'CN=Peer,O=Test'
    assert m.get_issuer_subject() == 'CN=Issuer,O=Test'


def test_security_negotiation(fields):
    line = fields.line('SECURITY-NEGOTIATION', CONN,
                       'protocol="TLSv1.2" cipher="TLS_DHE_RSA_WITH_AES_128_CBC_SHA"')
    m = parse_message(line)
    assert isinstance(m, SecurityNegotiationAccessLogMessage)
    _check_common(m, line)
    assert m.get_protocol() == 'TLSv1.2'
    assert m.get_cipher() == 'TLS_DHE_RSA_WITH_AES_128_CBC_SHA'


def test_entry_rebalancing_request(fields):
    line = fields.line('ENTRY-REBALANCING-REQUEST', REBALANCING)
    m = parse_message(line)
    assert isinstance(m, EntryRebalancingRequestAccessLogMessage)
    _check_common(m, line)
    assert m.get_message_type() is AccessLogMessageType.ENTRY_REBALANCING_REQUEST
    assert m.get_product_name() == 'Directory Server'
    assert not hasattr(m, 'get_connection_id')
    assert m.get_rebalancing_operation_id() == 1
    assert m.get_triggering_connection_id() == 2
    assert m.get_triggering_operation_id() == 3
    assert m.get_subtree_base_dn() == 'ou=subtree,dc=example,dc=com'
    assert m.get_size_limit() == 4
    assert m.get_source_backend_set_name() == 'source set'
    assert m.get_source_backend_server() == 'source.example.com:1389'
    assert m.get_target_backend_set_name() == 'target set'
    assert m.get_target_backend_server() == 'target.example.com:2389'


def test_entry_rebalancing_result(fields):
    line = fields.line('ENTRY-REBALANCING-RESULT', REBALANCING,
                       'resultCode=80 errorMessage="error message" adminActionRequired="admin action" '
                       'sourceAltered=false targetAltered=true entriesReadFromSource=5 '
                       'entriesAddedToTarget=4 entriesDeletedFromSource=0')
    m = parse_message(line)
    assert isinstance(m, EntryRebalancingResultAccessLogMessage)
    _check_common(m, line)
    assert m.get_message_type() is AccessLogMessageType.ENTRY_REBALANCING_RESULT
    assert m.get_rebalancing_operation_id() == 1
    assert m.get_target_backend_server() == 'target.example.com:2389'
    assert m.get_result_code() is ResultCode.OTHER
    assert m.get_error_message() == 'error message'
    assert m.get_admin_action_required() == 'admin action'
    assert m.get_source_altered() is False
    assert m.get_target_altered() is True
    assert m.get_entries_read_from_source() == 5
    assert m.get_entries_added_to_target() == 4
    assert m.get_entries_deleted_from_source() == 0


def test_minimal_connect(fields):
    # Every field is optional
    line = fields.line('CONNECT')
    m = parse_message(line)
    assert str(m) == line
    assert m.get_connection_id() is None
    assert m.get_source_address() is None
    assert len(m.get_named_values()) == 0
    assert m.get_unnamed_values() == ('CONNECT',)


def test_direct_construction(fields):
    line = fields.line('DISCONNECT', CONN, 'reason="Client Unbind"')
    m = DisconnectAccessLogMessage(line)
    assert m.get_disconnect_reason() == 'Client Unbind'
    with pytest.raises(UnrecognizedMessageType):
        ConnectAccessLogMessage(line)


def test_to_dict(fields):
    line = fields.line('CONNECT', CONN, 'from="1.2.3.4"')
    d = parse_message(line).to_dict()
    assert d['message_type'] == 'CONNECT'
    assert d['operation_type'] is None
    assert d['timestamp'] == '2011-06-29T14:33:20.123000-05:00'
    assert d['fields']['from'] == '1.2.3.4'
    assert d['fields']['conn'] == '1'
