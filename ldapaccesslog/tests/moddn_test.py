# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2015 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

import pytest
from ldapaccesslog import parse_message
from ldapaccesslog._constants import AccessLogMessageType, AccessLogOperationType
from ldapaccesslog.exceptions import FieldCoercionError
from ldapaccesslog.messages import (
    ModifyDNRequestAccessLogMessage,
    ModifyDNForwardAccessLogMessage,
    ModifyDNForwardFailedAccessLogMessage,
    ModifyDNResultAccessLogMessage,
    ModifyDNAssuranceCompletedAccessLogMessage,
    ModifyDNIntermediateResponseAccessLogMessage,
)

MODDN = ('dn="uid=test.user,ou=People,dc=example,dc=com" newRDN="uid=test.user" '
         'deleteOldRDN=false newSuperior="ou=Users,dc=example,dc=com"')


@pytest.mark.parametrize('phase,cls', [
    ('REQUEST', ModifyDNRequestAccessLogMessage),
    ('FORWARD', ModifyDNForwardAccessLogMessage),
    ('FORWARD-FAILED', ModifyDNForwardFailedAccessLogMessage),
    ('RESULT', ModifyDNResultAccessLogMessage),
    ('ASSURANCE-COMPLETE', ModifyDNAssuranceCompletedAccessLogMessage),
])
def test_moddn(fields, phase, cls):
    line = fields.operation_line('MODDN', phase, MODDN)
    m = parse_message(line)
    assert type(m) is cls
    assert str(m) == line
    assert m.get_message_type() is AccessLogMessageType(phase)
    assert m.get_operation_type() is AccessLogOperationType.MODDN
    assert m.get_dn() == 'uid=test.user,ou=People,dc=example,dc=com'
    assert m.get_new_rdn() == 'uid=test.user'
    assert m.get_delete_old_rdn() is False
    assert m.get_new_superior_dn() == 'ou=Users,dc=example,dc=com'


def test_moddn_same_parent(fields):
    line = fields.operation_line('MODDN', 'REQUEST',
                                 'dn="uid=a,dc=example,dc=com" newRDN="uid=b" deleteOldRDN=true')
    m = parse_message(line)
    assert m.get_delete_old_rdn() is True
    assert m.get_new_superior_dn() is None


def test_moddn_bad_delete_old_rdn(fields):
    line = fields.operation_line('MODDN', 'REQUEST', 'newRDN="uid=b" deleteOldRDN=yes')
    with pytest.raises(FieldCoercionError) as excinfo:
        parse_message(line)
    assert excinfo.value.field == 'deleteOldRDN'


def test_moddn_intermediate_response(fields):
    m = parse_message(fields.operation_line('MODDN', 'INTERMEDIATE-RESPONSE'))
    assert isinstance(m, ModifyDNIntermediateResponseAccessLogMessage)
    assert m.get_new_rdn() is None
    assert m.get_delete_old_rdn() is None
