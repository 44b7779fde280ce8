# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2015 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

from ldapaccesslog._constants import OPERATION_MESSAGE_TYPES
from ldapaccesslog.exceptions import UnrecognizedMessageType
from ldapaccesslog.logmessage import LogMessage


class AccessLogMessage(object):
    """The root of all access log messages. Every field is read once from
    the tokenized line when the object is created and never changes after.

    Concrete classes set MESSAGE_TYPE, and for operations OPERATION_TYPE.

    :param message: The tokenized line, or the raw line text
    :type message: LogMessage or str
    """

    MESSAGE_TYPE = None
    OPERATION_TYPE = None

    def __init__(self, message):
        if not isinstance(message, LogMessage):
            message = LogMessage(message)
        self._check_tokens(message)
        self._message = message
        self._timestamp = message.get_timestamp()
        self._product_name = message.get_named_value('product')
        self._instance_name = message.get_named_value('instanceName')
        self._startup_id = message.get_named_value('startupID')
        self._thread_id = message.get_named_value_as_long('threadID')

    @classmethod
    def expected_tokens(cls):
        """The bareword tokens a line must carry to be this class of message,
        or None for classes that are only used as a base.
        """
        if cls.OPERATION_TYPE is not None:
            return (cls.OPERATION_TYPE.value, cls.MESSAGE_TYPE.value)
        if cls.MESSAGE_TYPE is not None and cls.MESSAGE_TYPE not in OPERATION_MESSAGE_TYPES:
            return (cls.MESSAGE_TYPE.value,)
        return None

    def _check_tokens(self, message):
        expected = self.expected_tokens()
        if expected is not None and message.get_unnamed_values() != expected:
            raise UnrecognizedMessageType("%s expects the tokens %s, not %s" %
                                          (self.__class__.__name__, ' '.join(expected),
                                           ' '.join(message.get_unnamed_values())),
                                          line=str(message))

    def __str__(self):
        return str(self._message)

    def __repr__(self):
        return "%s(%r)" % (self.__class__.__name__, str(self._message))

    def get_log_message(self):
        return self._message

    def get_message_type(self):
        return self.MESSAGE_TYPE

    def get_operation_type(self):
        """None for anything that is not part of an operation"""
        return self.OPERATION_TYPE

    def get_timestamp(self):
        return self._timestamp

    def get_named_values(self):
        return self._message.get_named_values()

    def get_unnamed_values(self):
        return self._message.get_unnamed_values()

    def get_product_name(self):
        return self._product_name

    def get_instance_name(self):
        return self._instance_name

    def get_startup_id(self):
        return self._startup_id

    def get_thread_id(self):
        return self._thread_id

    def to_dict(self):
        """A json serialisable view of the message"""
        result = {
            'timestamp': self._timestamp.isoformat(),
            'message_type': self.MESSAGE_TYPE.value,
            'operation_type': None,
            'fields': dict(self.get_named_values()),
        }
        if self.OPERATION_TYPE is not None:
            result['operation_type'] = self.OPERATION_TYPE.value
        return result


class ConnectionAccessLogMessage(AccessLogMessage):
    """A message tied to a client connection"""

    def __init__(self, message):
        super(ConnectionAccessLogMessage, self).__init__(message)
        self._connection_id = self._message.get_named_value_as_long('conn')

    def get_connection_id(self):
        return self._connection_id


class OperationAccessLogMessage(ConnectionAccessLogMessage):
    """Fields shared by every phase of every operation"""

    def __init__(self, message):
        super(OperationAccessLogMessage, self).__init__(message)
        m = self._message
        self._operation_id = m.get_named_value_as_long('op')
        self._message_id = m.get_named_value_as_int('msgID')
        self._origin = m.get_named_value('origin')
        self._triggered_by_connection_id = m.get_named_value_as_long('triggeredByConn')
        self._triggered_by_operation_id = m.get_named_value_as_long('triggeredByOp')

    def get_operation_id(self):
        return self._operation_id

    def get_message_id(self):
        return self._message_id

    def get_origin(self):
        return self._origin

    def get_triggered_by_connection_id(self):
        return self._triggered_by_connection_id

    def get_triggered_by_operation_id(self):
        return self._triggered_by_operation_id
