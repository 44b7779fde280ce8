# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2015 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

from ldapaccesslog import parse_message
from ldapaccesslog._constants import AccessLogMessageType, AccessLogOperationType
from ldapaccesslog.messages import (
    AbandonRequestAccessLogMessage,
    AbandonForwardAccessLogMessage,
    AbandonForwardFailedAccessLogMessage,
    AbandonResultAccessLogMessage,
)
from ldapaccesslog.resultcode import ResultCode


def _check_request(m):
    assert m.get_operation_type() is AccessLogOperationType.ABANDON
    assert m.get_instance_name() == 'server.example.com:389'
    assert m.get_startup_id() == 'ABCDEFG'
    assert m.get_connection_id() == 1
    assert m.get_operation_id() == 2
    assert m.get_message_id() == 3
    assert m.get_origin() == 'internal'
    assert m.get_requester_ip_address() == '1.2.3.4'
    assert m.get_requester_dn() == 'uid=test.user,ou=People,dc=example,dc=com'
    assert m.get_intermediate_client_request() == "app='UnboundID Directory Proxy Server'"
    assert m.get_operation_purpose() == "app='Some Client' purpose='foo'"
    assert m.get_message_id_to_abandon() == 4


def test_abandon_request(fields):
    line = fields.operation_line('ABANDON', 'REQUEST', 'idToAbandon=4')
    m = parse_message(line)
    assert isinstance(m, AbandonRequestAccessLogMessage)
    assert str(m) == line
    assert m.get_message_type() is AccessLogMessageType.REQUEST
    _check_request(m)
    assert m.get_request_control_oids() == []
    assert m.get_using_admin_session_worker_thread() is None


def test_abandon_forward(fields):
    line = fields.operation_line('ABANDON', 'FORWARD', 'idToAbandon=4')
    m = parse_message(line)
    assert isinstance(m, AbandonForwardAccessLogMessage)
    assert str(m) == line
    assert m.get_message_type() is AccessLogMessageType.FORWARD
    _check_request(m)
    assert m.get_target_host() == '5.6.7.8'
    assert m.get_target_port() == 389
    assert m.get_target_protocol() == 'LDAP'


def test_abandon_forward_failed(fields):
    line = fields.operation_line('ABANDON', 'FORWARD-FAILED', 'idToAbandon=4')
    m = parse_message(line)
    assert isinstance(m, AbandonForwardFailedAccessLogMessage)
    assert str(m) == line
    assert m.get_message_type() is AccessLogMessageType.FORWARD_FAILED
    _check_request(m)
    assert m.get_target_host() == '5.6.7.8'
    # Forward failures keep the raw number
    assert m.get_result_code() == 80
    assert type(m.get_result_code()) is int
    assert m.get_diagnostic_message() == 'oops'


def test_abandon_result(fields):
    line = fields.line('ABANDON RESULT', fields.OPERATION, fields.REQUESTER, 'idToAbandon=4',
                       'resultCode=121 message="Cannot cancel" etime=0.5')
    m = parse_message(line)
    assert isinstance(m, AbandonResultAccessLogMessage)
    assert str(m) == line
    assert m.get_message_type() is AccessLogMessageType.RESULT
    _check_request(m)
    assert m.get_result_code() is ResultCode.CANNOT_CANCEL
    assert m.get_diagnostic_message() == 'Cannot cancel'
    assert m.get_processing_time_millis() == 0.5
    assert m.get_referral_urls() == []
    assert m.get_matched_dn() is None
