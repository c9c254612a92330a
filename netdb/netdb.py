from __future__ import annotations


PROTOCOLS_PATH = '/etc/protocols'
SERVICES_PATH = '/etc/services'

COMMENT_CHAR = '#'
PORT_SEPARATOR = '/'

MIN_FIELDS = 2                  # name + value

INT32_MIN = -0x80000000
INT32_MAX = 0x7fffffff


class NetdbError(Exception):
    pass


class NetdbSourceUnavailable(NetdbError):
    pass


class NetdbBadFormat(NetdbError):
    '''
    Raised when a numeric field of a table line cannot be parsed. The
    whole load is aborted when this happens.
    '''
    def __init__(self, message: str, lineno: int = None, line: str = None) -> None:
        '''
        Parameters:
            message         description of the problem
            lineno          1-based physical line number within the source
            line            the offending line as found in the source

        Returns:
            None
        '''
        if lineno is not None:
            message = f'line {lineno}: {message}'

        super().__init__(message)

        self.lineno = lineno
        self.line = line


class NetdbMissingSeparator(NetdbBadFormat):
    pass
