import collections
import logging
import numbers
import operator
import socket
import time

from simplegraphite import exceptions


LOG = logging.getLogger(__name__)

DEFAULT_PORT = 2003


class GraphiteClient(object):
    """Simple client for writing one shot metrics to graphite.

    Every send opens a new connection, writes one plaintext protocol
    line per metric and closes the connection again.  No socket reuse,
    buffering or retry is implemented.
    """

    def __init__(self, host, port=DEFAULT_PORT):
        """Initialize a Graphite client.

        :param host: Host name of the carbon server to write to.
        :param port: Plaintext protocol port.  Default is 2003.
        """

        self.host = host
        self.port = port

    def send_metrics(self, metrics, timestamp=None):
        """Send a set of integer metrics to graphite.

        :param metrics: The metrics as a mapping of key to value.
        :param timestamp: Unix timestamp in seconds; defaults to the
                          current time.

        :raises HostResolutionError: if the host cannot be resolved.
        :raises TransportError: if writing to graphite fails.
        """

        if timestamp is None:
            timestamp = self.current_timestamp()

        self._send([self.format_metric(key, value, timestamp)
                    for key, value in metrics.items()])

    def send_metrics_precise(self, metrics, timestamp=None):
        """Send a set of floating point metrics to graphite.

        Values are written in exponential notation with six fractional
        digits.  Arguments and errors are as for send_metrics().
        """

        if timestamp is None:
            timestamp = self.current_timestamp()

        self._send([self.format_precise_metric(key, value, timestamp)
                    for key, value in metrics.items()])

    def send_metric(self, key, value, timestamp=None):
        """Send a single metric to graphite.

        Integral values are sent as integers, any other real number in
        the precise format.
        """

        metrics = collections.OrderedDict([(key, value)])
        if isinstance(value, numbers.Integral):
            self.send_metrics(metrics, timestamp)
        else:
            self.send_metrics_precise(metrics, timestamp)

    @staticmethod
    def format_metric(key, value, timestamp):
        """Format an integer metric as a protocol line.

        :raises TypeError: if value is not an integer.
        """

        return "%s %d %d\n" % (key, operator.index(value), timestamp)

    @staticmethod
    def format_precise_metric(key, value, timestamp):
        """Format a floating point metric as a protocol line."""

        return "%s %e %d\n" % (key, value, timestamp)

    def current_timestamp(self):
        """Compute the current graphite timestamp.

        :returns: Whole seconds passed since 1.1.1970.
        """

        return int(time.time() * 1000) // 1000

    def create_socket(self):
        """Open a TCP connection to the carbon server."""

        return socket.create_connection((self.host, self.port))

    def _send(self, lines):
        """Deliver protocol lines over a fresh connection."""

        # Connect; a resolution failure happens before any data is sent
        try:
            sock = self.create_socket()
        except socket.gaierror:
            raise exceptions.HostResolutionError(self.host)
        except OSError as e:
            raise exceptions.TransportError(self.host, e) from e

        LOG.debug("Sending %d metrics to %s:%s" %
                  (len(lines), self.host, self.port))

        try:
            try:
                for line in lines:
                    LOG.debug("Sending metric line %r" % line)
                    sock.sendall(line.encode('utf-8'))
            finally:
                # Closed on every path; a failed close is a failed send
                sock.close()
        except OSError as e:
            raise exceptions.TransportError(self.host, e) from e
