#!/usr/bin/env python3

from __future__ import annotations

import sys
import netdb
import argparse

from loguru import logger


parser = argparse.ArgumentParser(description='''netdb-lookup - query the protocol and service databases''')

parser.add_argument('--protocols', default=netdb.PROTOCOLS_PATH, help='protocols database to use')
parser.add_argument('--services', default=netdb.SERVICES_PATH, help='services database to use')
parser.add_argument('--debug', action='store_true', help='show loader log messages')

subparsers = parser.add_subparsers(dest='action')

parser_proto = subparsers.add_parser('proto', help='lookup a protocol by number or name')
parser_proto.add_argument('key', help='protocol number, name or alias')

parser_serv = subparsers.add_parser('serv', help='lookup a service by port or name')
parser_serv.add_argument('key', help='port number, service name or alias')
parser_serv.add_argument('protocol', nargs='?', default='', help='restrict the lookup to this protocol')

parser_dump = subparsers.add_parser('dump', help='dump a whole table')
parser_dump.add_argument('table', choices=['protocols', 'services'], help='table to dump')


def main():
    '''
    Main method :)
    '''
    args = parser.parse_args()

    if args.debug:
        logger.enable('netdb')

    try:
        netdb.init(args.protocols, args.services)

    except netdb.NetdbError as e:
        print(f'[-] Unable to load databases: {e}')
        return 1

    if args.action == 'proto':

        if args.key.isdigit():
            record = netdb.getprotobynumber(int(args.key))
        else:
            record = netdb.getprotobyname(args.key)

        if record is None:
            print(f'[-] Unknown protocol: {args.key}')
            return 1

        netdb.utils.print_protocol(record)

    elif args.action == 'serv':

        if args.key.isdigit():
            record = netdb.getservbyport(int(args.key), args.protocol)
        else:
            record = netdb.getservbyname(args.key, args.protocol)

        if record is None:
            print(f'[-] Unknown service: {args.key}')
            return 1

        netdb.utils.print_service(record)

    elif args.action == 'dump':

        if args.table == 'protocols':
            netdb.utils.print_table(netdb.get_protocols())
        else:
            netdb.utils.print_table(netdb.get_services())

    else:
        print('[-] Unknown action :(')
        return 1

    return 0


sys.exit(main())
