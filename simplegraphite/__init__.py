from simplegraphite.client import DEFAULT_PORT, GraphiteClient
from simplegraphite.exceptions import (GraphiteError, HostResolutionError,
                                       TransportError)


__all__ = ['DEFAULT_PORT', 'GraphiteClient', 'GraphiteError',
           'HostResolutionError', 'TransportError']
