# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2015 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

import io
import pytest
from ldapaccesslog import AccessLogReader, FileLineSource, StreamLineSource
from ldapaccesslog._constants import AccessLogMessageType
from ldapaccesslog.exceptions import LogException, MalformedTimestamp, UnrecognizedMessageType
from ldapaccesslog.messages import (
    ConnectAccessLogMessage,
    SearchRequestAccessLogMessage,
    SearchResultAccessLogMessage,
    DisconnectAccessLogMessage,
)

CONNECT = ('[01/Jan/2024:10:00:00.000 +0000] CONNECT conn=1 from="1.2.3.4:5678" '
           'to="5.6.7.8:389" protocol="LDAP"')
SEARCH_REQUEST = ('[01/Jan/2024:10:00:00.100 +0000] SEARCH REQUEST conn=1 op=1 msgID=2 '
                  'base="dc=example,dc=com" scope=2 filter="(uid=a)" attrs="ALL"')
SEARCH_RESULT = ('[01/Jan/2024:10:00:00.200 +0000] SEARCH RESULT conn=1 op=1 msgID=2 '
                 'base="dc=example,dc=com" scope=2 filter="(uid=a)" attrs="ALL" '
                 'resultCode=0 etime=0.5 entriesReturned=1')
DISCONNECT = ('[01/Jan/2024:10:00:01.000 +0000] DISCONNECT conn=1 reason="Client Unbind"')

LOG = [CONNECT, SEARCH_REQUEST, SEARCH_RESULT, DISCONNECT]
CLASSES = [ConnectAccessLogMessage, SearchRequestAccessLogMessage,
           SearchResultAccessLogMessage, DisconnectAccessLogMessage]


def _read_all(reader):
    messages = []
    while True:
        m = reader.read()
        if m is None:
            return messages
        messages.append(m)


def test_read_file(write_log):
    path = write_log(LOG)
    with AccessLogReader(path) as reader:
        messages = _read_all(reader)
        assert [type(m) for m in messages] == CLASSES
        assert [str(m) for m in messages] == LOG
        assert reader.line_number == 4
        # Stays at the end
        assert reader.read() is None


def test_read_gzip_file(write_log):
    path = write_log(LOG, name='access.20240101.gz')
    with AccessLogReader(FileLineSource(path)) as reader:
        assert [str(m) for m in reader] == LOG


def test_read_stream():
    stream = io.StringIO('\r\n'.join(LOG) + '\r\n')
    reader = AccessLogReader(stream)
    assert [type(m) for m in reader] == CLASSES
    reader.close()
    assert stream.closed


def test_read_stream_left_open():
    stream = io.StringIO('\n'.join(LOG))
    reader = AccessLogReader(StreamLineSource(stream, close_stream=False))
    assert len(list(reader)) == 4
    reader.close()
    assert not stream.closed


def test_read_list_of_lines():
    with AccessLogReader(LOG) as reader:
        assert isinstance(reader.read(), ConnectAccessLogMessage)
        assert reader.line_number == 1


def test_skip_comments_and_blank_lines():
    lines = ['# Access log for server.example.com', '', CONNECT, '   ', '\t',
             '# rotated', DISCONNECT, '']
    with AccessLogReader(lines) as reader:
        m = reader.read()
        assert m.get_message_type() is AccessLogMessageType.CONNECT
        assert reader.line_number == 3
        m = reader.read()
        assert m.get_message_type() is AccessLogMessageType.DISCONNECT
        assert reader.line_number == 7
        assert reader.read() is None
        assert reader.line_number == 8


def test_invalid_line_then_continue():
    lines = [CONNECT, 'this is not a log line', '[01/Jan/2024:10:00:00.000 +0000] BOGUS conn=1',
             DISCONNECT]
    with AccessLogReader(lines) as reader:
        assert isinstance(reader.read(), ConnectAccessLogMessage)

        with pytest.raises(MalformedTimestamp) as excinfo:
            reader.read()
        assert excinfo.value.line == 'this is not a log line'
        assert excinfo.value.line_number == 2
        assert str(excinfo.value).startswith('line 2: ')

        with pytest.raises(UnrecognizedMessageType) as excinfo:
            reader.read()
        assert excinfo.value.line_number == 3

        # The reader carries on after the bad lines
        assert isinstance(reader.read(), DisconnectAccessLogMessage)
        assert reader.line_number == 4
        assert reader.read() is None


def test_iteration_stops_at_invalid_line():
    reader = AccessLogReader([CONNECT, 'garbage', DISCONNECT])
    it = iter(reader)
    assert isinstance(next(it), ConnectAccessLogMessage)
    with pytest.raises(LogException):
        next(it)
    # A fresh iterator resumes after the bad line
    assert [type(m) for m in reader] == [DisconnectAccessLogMessage]


def test_read_after_close():
    reader = AccessLogReader(LOG)
    reader.close()
    assert reader.closed
    with pytest.raises(ValueError):
        reader.read()
    # Closing again does nothing
    reader.close()
    assert reader.closed


def test_context_manager_closes(write_log):
    path = write_log(LOG)
    with AccessLogReader(path) as reader:
        assert not reader.closed
    assert reader.closed


def test_missing_file(tmp_path):
    with pytest.raises(OSError):
        AccessLogReader(str(tmp_path / 'missing'))


def test_read_file_with_invalid_bytes(tmp_path):
    path = tmp_path / 'access'
    path.write_bytes(b'[01/Jan/2024:10:00:00.000 +0000] CONNECT conn=1 from="\xff1.2.3.4:5678"\n' +
                     CONNECT.replace('conn=1', 'conn=2').encode('utf-8') + b'\n')
    with AccessLogReader(str(path)) as reader:
        m = reader.read()
        assert m.get_connection_id() == 1
        assert m.get_source_address() == '1.2.3.4:5678'
        m = reader.read()
        assert m.get_connection_id() == 2
        assert reader.read() is None


def test_read_file_with_bad_timezone():
    lines = ['[01/Jan/2024:10:00:00.000 +9999] CONNECT conn=1', DISCONNECT]
    with AccessLogReader(lines) as reader:
        with pytest.raises(MalformedTimestamp) as excinfo:
            reader.read()
        assert excinfo.value.line_number == 1
        assert isinstance(reader.read(), DisconnectAccessLogMessage)
