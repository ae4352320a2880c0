# -*- coding: utf-8 -*-
#
#    CoinNetworks - Cryptocurrency Network Parameters Library
#
#    NETWORKINFO - Command line network parameters lookup
#    Find a network by name, alias, port, version byte or other value and show its parameters
#
#    © 2026 October - 1200 Web Development <http://1200wd.com/>
#

import sys
import json
import argparse
from coinnetworks.main import CNW_VERSION
from coinnetworks.networks import networks
from coinnetworks.services.services import Service, ServiceError


# Show all errors in simple format without tracelog
def exception_handler(exception_type, exception, traceback):
    print("%s: %s" % (exception_type.__name__, exception))


def parse_args(args=None):
    parser = argparse.ArgumentParser(description='CoinNetworks network parameters lookup')
    parser.add_argument('key', nargs='?',
                        help="Network name, alias or any other network value, such as a port, version byte or "
                             "network magic. Numbers can be decimal or hexadecimal with 0x prefix")
    parser.add_argument('--field', '-f', action='append', metavar='FIELD',
                        help="Only match value of this network field, i.e. 'port' or 'network_magic'. Can be "
                             "used multiple times")
    parser.add_argument('--list', '-l', action='store_true',
                        help="List all known networks")
    parser.add_argument('--json', '-j', action='store_true',
                        help="Output network information as json")
    parser.add_argument('--blockcount', '-b', action='store_true',
                        help="Get latest block number from the block explorers of this network")
    parser.add_argument('--version', action='version', version='%(prog)s ' + CNW_VERSION)

    pa = parser.parse_args(args)
    if not pa.key and not pa.list:
        parser.error("Please specify a network or use --list to show all networks")
    return pa


def find_network(key, fields=None, registry=None):
    """
    Find network for a command line argument. The argument is used as text first, then as integer.

    :param key: Command line argument
    :type key: str
    :param fields: Limit search to these network fields
    :type fields: list of str
    :param registry: Network registry to search, default is the library's registry
    :type registry: NetworkRegistry

    :return Network:
    """
    if registry is None:
        registry = networks
    candidates = [key]
    try:
        candidates.append(int(key, 0))
    except ValueError:
        pass
    for candidate in candidates:
        network = registry.get(candidate, fields)
        if network is not None:
            return network
    return None


def network_info(network):
    info = "Network %s\n" % network.name
    for field, value in network.as_dict().items():
        if value is None:
            continue
        if field in ['xpubkey', 'xprivkey']:
            value = '0x%08x' % value
        elif isinstance(value, list):
            value = ', '.join(value)
        info += "  %-14s %s\n" % (field, value)
    return info.rstrip()


def main(args=None):
    pa = parse_args(args)

    if pa.list:
        if pa.json:
            print(json.dumps([nw.as_dict() for nw in networks], indent=4))
        else:
            for nw in networks:
                print("%-18s %-6s %s" % (nw.name, nw.alias, '' if nw.port is None else nw.port))
        return 0

    network = find_network(pa.key, pa.field)
    if network is None:
        print("Network %s not found" % pa.key)
        return 1

    if pa.blockcount:
        try:
            blockcount = Service(network).blockcount()
        except ServiceError as e:
            print(e)
            return 1
        if not blockcount:
            print("Could not get block count from explorers of network %s" % network.name)
            return 1
        print(blockcount)
    elif pa.json:
        print(json.dumps(network.as_dict(), indent=4))
    else:
        print(network_info(network))
    return 0


if __name__ == '__main__':
    sys.excepthook = exception_handler
    sys.exit(main())
