# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2015 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

import gzip
import pytest
from ldapaccesslog.cli_base import LogCapture


class LogFields(object):
    """Pieces of access log lines, put together by the tests"""

    TIMESTAMP = '[29/Jun/2011:14:33:20.123 -0500]'

    SERVER = 'product="Directory Server" instanceName="server.example.com:389" startupID="ABCDEFG"'

    OPERATION = ('instanceName="server.example.com:389" startupID="ABCDEFG" '
                 'conn=1 op=2 msgID=3 origin="internal"')

    REQUESTER = ('requesterIP="1.2.3.4" requesterDN="uid=test.user,ou=People,dc=example,dc=com" '
                 'via="app=\'UnboundID Directory Proxy Server\'" '
                 'opPurpose="app=\'Some Client\' purpose=\'foo\'"')

    FORWARD = 'targetHost="5.6.7.8" targetPort=389 targetProtocol="LDAP"'

    FORWARD_FAILED = FORWARD + ' resultCode=80 message="oops"'

    RESULT = ('resultCode=32 message="The entry doesn\'t exist" additionalInfo="foo" '
              'matchedDN="dc=example,dc=com" etime=0.123 qtime=4 '
              'referralURLs="ldap://server1.example.com:389/,ldap://server2.example.com:389/" '
              'from="app=\'UnboundID Directory Server\'" '
              'authzDN="uid=someone,ou=People,dc=example,dc=com"')

    ASSURANCE = (RESULT + ' localAssuranceLevel="PROCESSED_ALL_SERVERS" '
                 'remoteAssuranceLevel="PROCESSED_ALL_REMOTE_SERVERS" assuranceTimeoutMillis=5000 '
                 'responseDelayedByAssurance=false localAssuranceSatisfied=true '
                 'remoteAssuranceSatisfied=false serverAssuranceResults="assurance-results"')

    INTERMEDIATE = ('oid="1.3.6.1.4.1.30221.2.6.7" '
                    'name="Stream Directory Values Intermediate Response" '
                    'value="result=\'more values to return\' valueCount=\'1000\'" '
                    'responseControls="8.7.6.5"')

    # Extra fields for each phase, in the order the server writes them.
    PHASES = {
        'REQUEST': [REQUESTER],
        'FORWARD': [REQUESTER, FORWARD],
        'FORWARD-FAILED': [REQUESTER, FORWARD_FAILED],
        'RESULT': [REQUESTER, RESULT],
        'ASSURANCE-COMPLETE': [REQUESTER, ASSURANCE],
        'INTERMEDIATE-RESPONSE': [INTERMEDIATE],
    }

    def line(self, tokens, *parts):
        """Build a line from the bareword tokens and any number of field strings"""
        return ' '.join([self.TIMESTAMP, tokens] + [p for p in parts if p])

    def operation_line(self, operation, phase, extra=''):
        return self.line('%s %s' % (operation, phase), self.OPERATION,
                         *(self.PHASES[phase] + [extra]))


@pytest.fixture
def fields():
    return LogFields()


@pytest.fixture
def logcap(request):
    logcap = LogCapture()

    def fin():
        logcap.log.removeHandler(logcap)
        logcap.flush()
    request.addfinalizer(fin)
    return logcap


@pytest.fixture
def write_log(tmp_path):
    """Write lines to a log file, gzip compressed if the name ends in .gz"""

    def _write(lines, name='access'):
        path = tmp_path / name
        content = '\n'.join(lines) + '\n'
        if name.endswith('.gz'):
            with gzip.open(str(path), 'wt', encoding='utf-8') as f:
                f.write(content)
        else:
            with open(str(path), 'w', encoding='utf-8') as f:
                f.write(content)
        return str(path)

    return _write
