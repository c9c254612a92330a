from __future__ import annotations

import netdb
import threading

from pathlib import Path
from loguru import logger

from netdb.types import ProtocolRecord, ServiceRecord
from netdb.protocols import ProtocolTable, load_protocol_file
from netdb.services import ServiceTable, load_service_file


_lock = threading.Lock()

_protocols: ProtocolTable = None
_services: ServiceTable = None


def init(protocols_path: str | Path = None, services_path: str | Path = None) -> None:
    '''
    Load the process wide protocol and service tables. Loading happens only
    once, subsequent calls return immediately. The function is safe to call
    from multiple threads, concurrent first callers wait for the load of the
    first one.

    If either table fails to load, neither is installed and the error is
    raised. A later call may retry.

    Parameters:
        protocols_path      location of the protocols database (default: netdb.PROTOCOLS_PATH)
        services_path       location of the services database (default: netdb.SERVICES_PATH)

    Returns:
        None
    '''
    global _protocols, _services

    if _protocols is not None and _services is not None:
        return

    with _lock:

        if _protocols is not None and _services is not None:
            return

        protocols = load_protocol_file(protocols_path or netdb.PROTOCOLS_PATH)
        services = load_service_file(services_path or netdb.SERVICES_PATH)

        _protocols, _services = protocols, services
        logger.info(f'netdb ready: {len(protocols)} protocols, {len(services)} services')


def reset() -> None:
    '''
    Drop the process wide tables. The next query loads them again.
    '''
    global _protocols, _services

    with _lock:
        _protocols = None
        _services = None


def get_protocols() -> ProtocolTable:
    '''
    Return the process wide protocol table, loading it on first use.
    '''
    init()
    return _protocols


def get_services() -> ServiceTable:
    '''
    Return the process wide service table, loading it on first use.
    '''
    init()
    return _services


def getprotobynumber(number: int) -> ProtocolRecord:
    return get_protocols().by_number(number)


def getprotobyname(name: str) -> ProtocolRecord:
    return get_protocols().by_name(name)


def getservbyname(name: str, protocol: str = '') -> ServiceRecord:
    return get_services().by_name(name, protocol)


def getservbyport(port: int, protocol: str = '') -> ServiceRecord:
    return get_services().by_port(port, protocol)
