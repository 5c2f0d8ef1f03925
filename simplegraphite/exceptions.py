class GraphiteError(Exception):
    """Base class for all errors raised by simplegraphite."""

    pass


class HostResolutionError(GraphiteError):
    """The configured host name could not be resolved."""

    def __init__(self, host):
        super(HostResolutionError, self).__init__("Unknown host: %s" % host)
        self.host = host


class TransportError(GraphiteError):
    """Connecting to, writing to or closing the connection failed."""

    def __init__(self, host, reason):
        super(TransportError, self).__init__(
            "Error while writing data to graphite at %s: %s" % (host, reason))
        self.host = host
        self.reason = str(reason)
