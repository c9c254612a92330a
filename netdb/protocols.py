from __future__ import annotations

import netdb

from pathlib import Path
from typing import Iterator
from loguru import logger

from netdb.types import ProtocolRecord
from netdb.utils import iter_fields, parse_int32, read_source


class ProtocolTable:
    '''
    Ordered, read-only collection of protocol records as found in a
    protocols database. Records with duplicate numbers or names are kept;
    all lookups return the first match in source order.
    '''

    def __init__(self, records: list[ProtocolRecord] = None) -> None:
        '''
        Parameters:
            records         protocol records in source order

        Returns:
            None
        '''
        self._records = tuple(records) if records else ()

    def by_number(self, number: int) -> ProtocolRecord:
        '''
        Return the first protocol record with the specified protocol number.

        Parameters:
            number          protocol number to look up

        Returns:
            ProtocolRecord or None if the number is unknown
        '''
        for record in self._records:
            if record.number == number:
                return record

        return None

    def by_name(self, name: str) -> ProtocolRecord:
        '''
        Return the first protocol record whose canonical name or one of
        whose aliases matches the specified name. The comparison is case
        sensitive.

        Parameters:
            name            protocol name or alias to look up

        Returns:
            ProtocolRecord or None if the name is unknown
        '''
        for record in self._records:

            if record.name == name:
                return record

            if name in record.aliases:
                return record

        return None

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ProtocolRecord]:
        return iter(self._records)

    def __getitem__(self, index: int) -> ProtocolRecord:
        return self._records[index]

    def __repr__(self) -> str:
        return f'<ProtocolTable with {len(self._records)} records>'


def load_protocol_table(text: str) -> ProtocolTable:
    '''
    Parse the content of a protocols database. Each usable line has the form
    'name number [alias...]'. A number that is not a valid 32 bit integer
    aborts the load with NetdbBadFormat.

    Parameters:
        text            full content of the database

    Returns:
        ProtocolTable   the parsed table
    '''
    records = []

    for lineno, line, fields in iter_fields(text):

        try:
            number = parse_int32(fields[1], 'protocol number', lineno, line)

        except netdb.NetdbBadFormat as e:
            logger.error(f'protocol table rejected: {e}')
            raise

        records.append(ProtocolRecord(fields[0], number, fields[2:]))

    logger.debug(f'loaded {len(records)} protocol records')
    return ProtocolTable(records)


def load_protocol_file(path: str | Path = netdb.PROTOCOLS_PATH) -> ProtocolTable:
    '''
    Read and parse a protocols database from disk.

    Parameters:
        path            location of the database (default: /etc/protocols)

    Returns:
        ProtocolTable   the parsed table
    '''
    logger.debug(f'reading protocols from {path}')
    return load_protocol_table(read_source(path))
