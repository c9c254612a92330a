from __future__ import annotations

import netdb

from pathlib import Path
from typing import Iterator
from loguru import logger

from netdb.types import ServiceRecord
from netdb.utils import iter_fields, parse_int32, read_source


class ServiceTable:
    '''
    Ordered, read-only collection of service records as found in a
    services database. Lookups return the first match in source order.
    An empty protocol argument matches services of any protocol.
    '''

    def __init__(self, records: list[ServiceRecord] = None) -> None:
        '''
        Parameters:
            records         service records in source order

        Returns:
            None
        '''
        self._records = tuple(records) if records else ()

    def by_name(self, name: str, protocol: str = '') -> ServiceRecord:
        '''
        Return the first service whose canonical name or one of whose
        aliases matches the specified name. If a protocol is specified,
        services offered over other protocols are ignored.

        Parameters:
            name            service name or alias to look up
            protocol        protocol name to restrict the lookup to ('' = any)

        Returns:
            ServiceRecord or None if no service matches
        '''
        for record in self._records:

            if protocol and record.protocol != protocol:
                continue

            if record.name == name or name in record.aliases:
                return record

        return None

    def by_port(self, port: int, protocol: str = '') -> ServiceRecord:
        '''
        Return the first service listening on the specified port. If a
        protocol is specified, the service also needs to match it.

        Parameters:
            port            port number to look up
            protocol        protocol name to restrict the lookup to ('' = any)

        Returns:
            ServiceRecord or None if no service matches
        '''
        for record in self._records:
            if record.port == port and (record.protocol == protocol or not protocol):
                return record

        return None

    def protocols(self) -> list[str]:
        '''
        Return the distinct protocol names used by the table in order of
        first appearance.
        '''
        return list(dict.fromkeys(record.protocol for record in self._records))

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ServiceRecord]:
        return iter(self._records)

    def __getitem__(self, index: int) -> ServiceRecord:
        return self._records[index]

    def __repr__(self) -> str:
        return f'<ServiceTable with {len(self._records)} records>'


def parse_port_protocol(value: str, lineno: int = None, line: str = None) -> tuple[int, str]:
    '''
    Split a 'port/protocol' field on the first separator. The protocol part
    is taken as is, the port part needs to be a valid 32 bit integer.

    Parameters:
        value           the field to parse
        lineno          line number for error messages
        line            offending line for error messages

    Returns:
        tuple           tuple[port, protocol]
    '''
    if netdb.PORT_SEPARATOR not in value:
        raise netdb.NetdbMissingSeparator(f'missing port/protocol separator in {value!r}', lineno, line)

    port, protocol = value.split(netdb.PORT_SEPARATOR, 1)
    return parse_int32(port, 'port', lineno, line), protocol


def load_service_table(text: str) -> ServiceTable:
    '''
    Parse the content of a services database. Each usable line has the form
    'name port/protocol [alias...]'. A malformed port/protocol field aborts
    the load with NetdbBadFormat.

    Parameters:
        text            full content of the database

    Returns:
        ServiceTable    the parsed table
    '''
    records = []

    for lineno, line, fields in iter_fields(text):

        try:
            port, protocol = parse_port_protocol(fields[1], lineno, line)

        except netdb.NetdbBadFormat as e:
            logger.error(f'service table rejected: {e}')
            raise

        records.append(ServiceRecord(fields[0], port, protocol, fields[2:]))

    logger.debug(f'loaded {len(records)} service records')
    return ServiceTable(records)


def load_service_file(path: str | Path = netdb.SERVICES_PATH) -> ServiceTable:
    '''
    Read and parse a services database from disk.

    Parameters:
        path            location of the database (default: /etc/services)

    Returns:
        ServiceTable    the parsed table
    '''
    logger.debug(f'reading services from {path}')
    return load_service_table(read_source(path))
