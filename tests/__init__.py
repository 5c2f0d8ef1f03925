import logging
import socket
import threading
import unittest
from unittest import mock


class TestCase(unittest.TestCase):
    def setUp(self):
        self.addCleanup(mock.patch.stopall)

    def stub(self, obj, attr, new):
        """Replace an attribute for the duration of the test."""

        return mock.patch.object(obj, attr, new).start()


class LoggingTestCase(TestCase):
    def setUp(self):
        super(LoggingTestCase, self).setUp()

        self.logmsg = []

        def log_message(logger, message):
            self.logmsg.append(message)

        self.stub(logging.Logger, 'debug', log_message)
        self.stub(logging.Logger, 'error', log_message)


class FakeSocket(object):
    throw = None
    throw_on_close = None

    def __init__(self, host, port):
        self.open = True
        self.host = host
        self.port = port
        self.buffer = []

    def close(self):
        self.open = False
        if self.throw_on_close:
            raise self.throw_on_close

    def sendall(self, body):
        if self.throw:
            raise self.throw
        self.buffer.append(body)


class FakeCollector(object):
    """Loopback carbon server accepting a single connection."""

    def __init__(self):
        self.sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self.sock.bind(('127.0.0.1', 0))
        self.sock.listen(1)
        self.host, self.port = self.sock.getsockname()
        self.received = []

        self._thread = threading.Thread(target=self._serve)
        self._thread.daemon = True
        self._thread.start()

    def _serve(self):
        conn, _addr = self.sock.accept()
        chunks = []
        try:
            while True:
                data = conn.recv(4096)
                if not data:
                    break
                chunks.append(data)
        finally:
            conn.close()
        self.received.append(b''.join(chunks).decode('utf-8'))

    def wait(self):
        """Wait for the client to hang up; return what it sent."""

        self._thread.join(5)
        self.sock.close()
        return self.received[0]


def unused_port():
    """Find a local port with nothing listening on it."""

    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(('127.0.0.1', 0))
    port = sock.getsockname()[1]
    sock.close()
    return port
