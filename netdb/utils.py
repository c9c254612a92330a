from __future__ import annotations

import re
import netdb

from pathlib import Path
from typing import Iterator
from loguru import logger
from termcolor import cprint


int_regex = re.compile(r'[+-]?[0-9]+')


def read_source(path: str | Path) -> str:
    '''
    Read the full text of a table source. Undecodable bytes are replaced
    rather than rejected. Line endings are left untouched.

    Parameters:
        path            location of the source file

    Returns:
        str             content of the file
    '''
    try:
        with open(path, encoding='utf-8', errors='replace', newline='') as f:
            return f.read()

    except OSError as e:
        logger.error(f'cannot read {path}: {e}')
        raise netdb.NetdbSourceUnavailable(f'cannot read {path}: {e.strerror or e}') from e


def split_fields(line: str) -> list[str]:
    '''
    Split a single physical line into its whitespace separated fields. The
    line is stripped and everything starting at the first comment character
    is dropped.

    Parameters:
        line            a single line of a table source

    Returns:
        list            fields of the line (possibly empty)
    '''
    line = line.strip()
    line = line.split(netdb.COMMENT_CHAR, 1)[0]

    return line.split()


def iter_fields(text: str) -> Iterator[tuple[int, str, list[str]]]:
    '''
    Walk over all lines of a table source and yield the lines that carry at
    least a name and a value. Blank lines, comment lines and short lines are
    skipped without complaint.

    Parameters:
        text            full content of a table source

    Returns:
        iterator        tuple[lineno, line, fields] for each usable line
    '''
    for lineno, line in enumerate(text.split('\n'), start=1):

        fields = split_fields(line)

        if len(fields) < netdb.MIN_FIELDS:
            if fields:
                logger.trace(f'skipping short line {lineno}: {line!r}')
            continue

        yield lineno, line, fields


def parse_int32(value: str, what: str, lineno: int = None, line: str = None) -> int:
    '''
    Parse a base-10 integer that has to fit into a signed 32 bit range. An
    optional sign is accepted, anything else than ASCII digits is not.

    Parameters:
        value           the field to parse
        what            name of the field for error messages
        lineno          line number for error messages
        line            offending line for error messages

    Returns:
        int             the parsed value
    '''
    if not int_regex.fullmatch(value):
        raise netdb.NetdbBadFormat(f'invalid {what} {value!r}', lineno, line)

    number = int(value)

    if number < netdb.INT32_MIN or number > netdb.INT32_MAX:
        raise netdb.NetdbBadFormat(f'{what} {value} out of range', lineno, line)

    return number


def format_names(record: netdb.ProtocolRecord | netdb.ServiceRecord) -> str:
    '''
    Return the name of a record followed by its aliases in parentheses.
    '''
    if not record.aliases:
        return record.name

    return f'{record.name} ({" ".join(record.aliases)})'


def print_protocol(record: netdb.ProtocolRecord, color: str = 'green') -> None:
    '''
    Display a protocol record as a single line.

    Parameters:
        record          protocol record to display
        color           color the number is displayed in

    Returns:
        None
    '''
    cprint('{:>5} '.format(record.number), color, end='')
    print(format_names(record))


def print_service(record: netdb.ServiceRecord, color: str = 'green') -> None:
    '''
    Display a service record as a single line.

    Parameters:
        record          service record to display
        color           color the port/protocol is displayed in

    Returns:
        None
    '''
    cprint('{:>11} '.format(f'{record.port}/{record.protocol}'), color, end='')
    print(format_names(record))


def print_table(table: netdb.ProtocolTable | netdb.ServiceTable, color: str = 'green') -> None:
    '''
    Display all records of a table in source order.

    Parameters:
        table           protocol or service table
        color           color used for the numeric column

    Returns:
        None
    '''
    for record in table:

        if isinstance(record, netdb.ProtocolRecord):
            print_protocol(record, color)

        else:
            print_service(record, color)
