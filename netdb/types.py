from __future__ import annotations

from typing import Any


class ProtocolRecord:
    '''
    A single entry of the protocol database: the canonical protocol name,
    its aliases and the protocol number.
    '''

    def __init__(self, name: str, number: int, aliases: list[str] = None) -> None:
        '''
        Parameters:
            name            canonical protocol name
            number          protocol number
            aliases         alternate names (optional)

        Returns:
            None
        '''
        self.name = name
        self.number = number
        self.aliases = list(aliases) if aliases else []

    def equal(self, other: ProtocolRecord) -> bool:
        '''
        Two protocol records describe the same protocol if their protocol
        numbers are identical. Name and aliases are ignored.

        Parameters:
            other           record to compare with

        Returns:
            bool            True if both records carry the same number
        '''
        return self.number == other.number

    def names(self) -> list[str]:
        '''
        Return the canonical name followed by all aliases.
        '''
        return [self.name] + self.aliases

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ProtocolRecord):
            return NotImplemented

        return (self.name, self.number, self.aliases) == (other.name, other.number, other.aliases)

    def __hash__(self) -> int:
        return hash((self.name, self.number, tuple(self.aliases)))

    def __repr__(self) -> str:
        return f'ProtocolRecord(name={self.name!r}, number={self.number}, aliases={self.aliases!r})'


class ServiceRecord:
    '''
    A single entry of the service database: the canonical service name, its
    aliases, the port and the transport protocol the service is offered over.
    '''

    def __init__(self, name: str, port: int, protocol: str, aliases: list[str] = None) -> None:
        '''
        Parameters:
            name            canonical service name
            port            port number
            protocol        transport protocol name (e.g. tcp or udp)
            aliases         alternate names (optional)

        Returns:
            None
        '''
        self.name = name
        self.port = port
        self.protocol = protocol
        self.aliases = list(aliases) if aliases else []

    def names(self) -> list[str]:
        '''
        Return the canonical name followed by all aliases.
        '''
        return [self.name] + self.aliases

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ServiceRecord):
            return NotImplemented

        return (self.name, self.port, self.protocol, self.aliases) == \
               (other.name, other.port, other.protocol, other.aliases)

    def __hash__(self) -> int:
        return hash((self.name, self.port, self.protocol, tuple(self.aliases)))

    def __repr__(self) -> str:
        return (f'ServiceRecord(name={self.name!r}, port={self.port}, '
                f'protocol={self.protocol!r}, aliases={self.aliases!r})')
