# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2015 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

from ldapaccesslog.resultcode import ResultCode, UnrecognizedResultCode, result_code_for


def test_result_code_known():
    test = [
        (0, ResultCode.SUCCESS),
        (32, ResultCode.NO_SUCH_OBJECT),
        (49, ResultCode.INVALID_CREDENTIALS),
        (80, ResultCode.OTHER),
        (121, ResultCode.CANNOT_CANCEL),
        (16654, ResultCode.NO_OPERATION),
        (30221001, ResultCode.INTERACTIVE_TRANSACTION_ABORTED),
        (30221007, ResultCode.TOKEN_DELIVERY_INVALID_ACCOUNT_STATE),
    ]
    for k, v in test:
        r = result_code_for(k)
        assert r is v, "Mismatch %r vs %r" % (r, v)
        assert int(r) == k


def test_result_code_unrecognized():
    rc = result_code_for(9999)
    assert isinstance(rc, UnrecognizedResultCode)
    assert rc.value == 9999
    assert int(rc) == 9999
    assert rc == 9999
    assert rc == UnrecognizedResultCode(9999)
    assert rc != UnrecognizedResultCode(9998)
    assert rc.name == 'UNRECOGNIZED'
    assert '9999' in str(rc)
    assert len({rc, UnrecognizedResultCode(9999)}) == 1


def test_result_code_gaps():
    # Codes between defined values are not invented
    for value in [9, 15, 35, 70, 124]:
        assert isinstance(result_code_for(value), UnrecognizedResultCode)
