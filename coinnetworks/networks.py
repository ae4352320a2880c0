# -*- coding: utf-8 -*-
#
#    CoinNetworks - Cryptocurrency Network Parameters Library
#    NETWORKS - Network class and registry with lookup by name, alias or any network value
#    © 2026 October - 1200 Web Development <http://1200wd.com/>
#
#    This program is free software: you can redistribute it and/or modify
#    it under the terms of the GNU Affero General Public License as
#    published by the Free Software Foundation, either version 3 of the
#    License, or (at your option) any later version.
#
#    This program is distributed in the hope that it will be useful,
#    but WITHOUT ANY WARRANTY; without even the implied warranty of
#    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#    GNU Affero General Public License for more details.
#
#    You should have received a copy of the GNU Affero General Public License
#    along with this program.  If not, see <http://www.gnu.org/licenses/>.
#

import json
from coinnetworks.encoding import *


_logger = logging.getLogger(__name__)

# Fields stored as hexadecimal strings in network definition files
HEX_FIELDS = ['xpubkey', 'xprivkey', 'network_magic']


class NetworkError(Exception):
    """
    Network Exception class
    """
    def __init__(self, msg=''):
        self.msg = msg
        _logger.error(msg)

    def __str__(self):
        return self.msg


def _format_value(field, value):
    if field in HEX_FIELDS and isinstance(value, TYPE_TEXT):
        return int(value, 16)
    return value


def read_network_definitions(filename):
    """
    Read network definitions from a json file. Hexadecimal strings for extended key prefixes and network magic are
    converted to integers.

    :param filename: Path to json file with a dictionary of network name: network fields
    :type filename: str, Path

    :return dict: Network definitions
    """
    fn = Path(filename)
    try:
        with fn.open() as f:
            definitions = json.loads(f.read())
    except OSError as e:
        raise NetworkError("Could not open network definitions file %s: %s" % (fn, e))
    except json.decoder.JSONDecodeError as e:
        raise NetworkError("Error reading network definitions from %s: %s" % (fn, e))
    if not isinstance(definitions, dict):
        raise NetworkError("Network definitions in %s must be a dictionary with network names as keys" % fn)

    network_definitions = {}
    for name, data in definitions.items():
        try:
            network_definitions[name] = {field: _format_value(field, value) for field, value in data.items()}
        except (AttributeError, ValueError) as e:
            raise NetworkError("Invalid definition for network %s in %s: %s" % (name, fn, e))
    return network_definitions


class Network(object):
    """
    Network class with all network parameters: address and WIF version bytes, extended key prefixes, the p2p network
    magic, default port, bech32 prefix, DNS seeds, block explorers and BIP44 cointype.

    A Network object is read-only after creation, use :class:`NetworkRegistry` to create and publish networks.

    """

    REQUIRED_FIELDS = ('name', 'alias', 'pubkeyhash', 'privatekey', 'scripthash', 'bech32prefix', 'xpubkey',
                       'xprivkey')
    OPTIONAL_FIELDS = ('network_magic', 'port', 'dns_seeds', 'explorers', 'coin_type')
    FIELDS = REQUIRED_FIELDS + OPTIONAL_FIELDS
    # Scalar fields added to the registry index, network_magic is indexed as integer
    INDEX_FIELDS = ('name', 'alias', 'pubkeyhash', 'privatekey', 'scripthash', 'bech32prefix', 'xpubkey',
                    'xprivkey', 'network_magic', 'port', 'coin_type')

    def __init__(self, name, alias, pubkeyhash, privatekey, scripthash, bech32prefix, xpubkey, xprivkey,
                 network_magic=None, port=None, dns_seeds=None, explorers=None, coin_type=None):
        """
        Create a new network. All arguments up to xprivkey are required, bech32prefix can be None.

        :param name: Unique name of the network, i.e. 'bitcoin'
        :type name: str
        :param alias: Short name, i.e. 'btc'
        :type alias: str
        :param pubkeyhash: Version byte of public key hash addresses
        :type pubkeyhash: int
        :param privatekey: Version byte of WIF private keys
        :type privatekey: int
        :param scripthash: Version byte of script hash addresses
        :type scripthash: int
        :param bech32prefix: Human readable part of native segwit addresses
        :type bech32prefix: str
        :param xpubkey: Extended public key version
        :type xpubkey: int
        :param xprivkey: Extended private key version
        :type xprivkey: int
        :param network_magic: Message start of p2p network messages, stored as 4 big-endian bytes
        :type network_magic: int, bytes
        :param port: Default p2p port
        :type port: int
        :param dns_seeds: List of DNS seed host names
        :type dns_seeds: list of str
        :param explorers: List of Blockbook explorer api urls
        :type explorers: list of str
        :param coin_type: BIP44 cointype
        :type coin_type: int
        """
        if network_magic is not None and not isinstance(network_magic, bytes):
            network_magic = integer_as_bytes(network_magic, NETWORK_MAGIC_LENGTH)
        values = {
            'name': name,
            'alias': alias,
            'pubkeyhash': pubkeyhash,
            'privatekey': privatekey,
            'scripthash': scripthash,
            'bech32prefix': bech32prefix,
            'xpubkey': xpubkey,
            'xprivkey': xprivkey,
            'network_magic': network_magic,
            'port': port,
            'dns_seeds': None if dns_seeds is None else tuple(dns_seeds),
            'explorers': None if explorers is None else tuple(explorers),
            'coin_type': coin_type,
        }
        for field, value in values.items():
            object.__setattr__(self, field, value)

    def __setattr__(self, key, value):
        raise NetworkError("Network %s is read-only, cannot set attribute %s" % (self.name, key))

    def __delattr__(self, key):
        raise NetworkError("Network %s is read-only, cannot delete attribute %s" % (self.name, key))

    def __repr__(self):
        return "<Network: %s>" % self.name

    def __str__(self):
        return self.name

    @property
    def network_magic_int(self):
        """
        Network magic as integer or None if this network has no magic defined

        :return int:
        """
        if self.network_magic is None:
            return None
        return bytes_as_integer(self.network_magic)

    def index_values(self):
        """
        Iterate over all (field, value) pairs of this network which can be used for lookups in a registry. Fields
        without value are skipped. The network magic is returned as integer, DNS seeds and explorers are never
        returned.

        >>> list(Network('x', 'x1', 10, 20, 30, None, 1, 2, port=1000).index_values())
        [('name', 'x'), ('alias', 'x1'), ('pubkeyhash', 10), ('privatekey', 20), ('scripthash', 30), ('xpubkey', 1), ('xprivkey', 2), ('port', 1000)]

        :return generator:
        """
        for field in self.INDEX_FIELDS:
            value = self.network_magic_int if field == 'network_magic' else getattr(self, field)
            if value is not None:
                yield field, value

    def matches(self, field, value):
        """
        Does value of specified field equal given value? For the network_magic field the value can be bytes or an
        integer.

        :param field: Name of network field
        :type field: str
        :param value: Value to compare
        :type value: str, int, bytes

        :return bool:
        """
        own_value = getattr(self, field, None)
        if own_value is None:
            return False
        if field == 'network_magic' and not isinstance(value, bytes):
            return self.network_magic_int == value
        return own_value == value

    def extended_key_prefix(self, is_private=False):
        """
        Get prefix for extended keys of this network

        >>> bitcoin.extended_key_prefix()
        b'\\x04\\x88\\xb2\\x1e'

        :param is_private: Private or public key, default is False
        :type is_private: bool

        :return bytes:
        """
        return integer_as_bytes(self.xprivkey if is_private else self.xpubkey, EXTENDED_KEY_PREFIX_LENGTH)

    def as_dict(self):
        """
        Network fields as dictionary. Network magic as hexadecimal string, seeds and explorers as lists.

        :return dict:
        """
        nw_dict = {}
        for field in self.FIELDS:
            value = getattr(self, field)
            if isinstance(value, bytes):
                value = value.hex()
            elif isinstance(value, tuple):
                value = list(value)
            nw_dict[field] = value
        return nw_dict


class NetworkRegistry(object):
    """
    Registry of networks with an index of all scalar network values.

    Networks can be retrieved by name, alias or any other indexed value, such as a port or version byte. When more
    networks share a value the first registered network is returned.

    >>> registry = NetworkRegistry()
    >>> nw = registry.add(name='x', alias='x1', pubkeyhash=10, privatekey=20, scripthash=30, bech32prefix='xt',
    ...                   xpubkey=1, xprivkey=2, port=1000)
    >>> registry.get(1000)
    <Network: x>

    The registry is not thread safe, protect add and remove calls with a lock if the registry is shared between
    threads.

    """

    def __init__(self, definitions=None):
        """
        Create a new network registry, optionally filled with networks from a definitions dictionary.

        :param definitions: Dictionary with network names as keys and network fields as values
        :type definitions: dict
        """
        self.catalog = []
        self.index = {}
        if definitions:
            self.load(definitions)

    def __len__(self):
        return len(self.catalog)

    def __iter__(self):
        return iter(list(self.catalog))

    def __contains__(self, item):
        if isinstance(item, TYPE_TEXT):
            return self.network_defined(item)
        return any(nw is item for nw in self.catalog)

    def __repr__(self):
        return "<NetworkRegistry: %s>" % ', '.join(nw.name for nw in self.catalog)

    def add(self, data=None, **kwargs):
        """
        Create a new network and add it to this registry. All scalar values of the network are added to the index.

        Keyword arguments are merged with the data dictionary, unknown fields are ignored.

        :param data: Dictionary with network fields, see :class:`Network` for the list of fields
        :type data: dict

        :return Network: The new network
        """
        fields = dict(data or {})
        fields.update(kwargs)
        ignored = [f for f in fields if f not in Network.FIELDS]
        if ignored:
            _logger.debug("Ignoring unknown fields for network %s: %s" % (fields.get('name'), ignored))
        network = Network(**{f: v for f, v in fields.items() if f in Network.FIELDS})

        self.catalog.append(network)
        for _, value in network.index_values():
            self.index.setdefault(value, []).append(network)
        _logger.debug("Added network %s" % network.name)
        return network

    def get(self, key, fields=None):
        """
        Get network by name, alias or any other indexed value. Returns the first registered network which
        matches, or None if no network is found.

        Use the fields argument to limit the search to one or more network fields.

        Keys are compared by type: the text '5' and the integer 5 are different keys, booleans and floats never
        match. The network magic is indexed as integer, use the network_magic field to search with 4 bytes.

        >>> networks.get('ltc')
        <Network: litecoin>
        >>> networks.get(0xFBC0B6DB, 'network_magic')
        <Network: litecoin>

        :param key: Network object, name, alias or other network value
        :type key: Network, str, int, bytes
        :param fields: Only match values of this field or list of fields
        :type fields: str, list of str

        :return Network:
        """
        if any(nw is key for nw in self.catalog):
            return key
        if isinstance(key, (bool, float)):
            return None
        if fields is not None:
            if isinstance(fields, TYPE_TEXT):
                fields = [fields]
            for network in self.catalog:
                if any(network.matches(field, key) for field in fields):
                    return network
            return None
        slot = self.index.get(key)
        if slot:
            return slot[0]
        return None

    def get_all(self, key):
        """
        Get all networks indexed under this value, in order of registration. A network is listed once for every
        field which has this value.

        :param key: Network name, alias or other network value
        :type key: str, int

        :return list of Network:
        """
        return list(self.index.get(key, []))

    def remove(self, network):
        """
        Remove network from registry and from all index entries. Does nothing if network is not registered.

        :param network: Network to remove
        :type network: Network
        """
        found = any(nw is network for nw in self.catalog)
        self.catalog[:] = [nw for nw in self.catalog if nw is not network]
        for value in list(self.index):
            slot = self.index[value]
            if not any(nw is network for nw in slot):
                continue
            slot[:] = [nw for nw in slot if nw is not network]
            if not slot:
                del self.index[value]
        if found:
            _logger.debug("Removed network %s" % network.name)

    def load(self, definitions):
        """
        Add networks from a definitions dictionary with network names as keys, in order of the dictionary.

        :param definitions: Network definitions, as returned by :func:`read_network_definitions`
        :type definitions: dict

        :return list of Network: New networks
        """
        return [self.add(data, name=name) for name, data in definitions.items()]

    def network_defined(self, network):
        """
        Is network with this name defined?

        >>> networks.network_defined('bitcoin')
        True
        >>> networks.network_defined('ethereum')
        False

        :param network: Network name
        :type network: str

        :return bool:
        """
        return any(nw.name == network for nw in self.catalog)

    def network_values_for(self, field):
        """
        Return values of all networks for field, i.e.: pubkeyhash, port, etc

        >>> networks.network_values_for('port')[:3]
        [8333, 18333, 8333]

        :param field: Name of network field
        :type field: str

        :return list:
        """
        return [getattr(nw, field, None) for nw in self.catalog]

    def network_by_value(self, field, value):
        """
        Return names of all networks where field has the given value, in order of registration.

        >>> networks.network_by_value('bech32prefix', 'tb')
        ['bitcoin-testnet']
        >>> networks.network_by_value('network_magic', 0x5241564E)
        ['bitcoin-cash', 'ravencoin']

        Text values are retried in upper and lower case if no network is found.

        :param field: Name of network field
        :type field: str
        :param value: Value of network field
        :type value: str, int, bytes

        :return list: Of network name strings
        """
        nws = [nw.name for nw in self.catalog if nw.matches(field, value)]
        if not nws and isinstance(value, TYPE_TEXT):
            for case_value in (value.upper(), value.lower()):
                nws = [nw.name for nw in self.catalog if nw.matches(field, case_value)]
                if nws:
                    break
        return nws

    def extended_key_prefix_search(self, prefix, network=None):
        """
        Find networks which use this extended key prefix for public or private keys.

        >>> networks.extended_key_prefix_search('04358394')
        [{'prefix': '04358394', 'is_private': True, 'network': 'bitcoin-testnet'}]

        :param prefix: Prefix as integer, 4 bytes or hexadecimal string
        :type prefix: int, bytes, str
        :param network: Limit search to specified network
        :type network: str, Network

        :return list of dict:
        """
        if isinstance(prefix, bytes):
            prefix = bytes_as_integer(prefix[:EXTENDED_KEY_PREFIX_LENGTH])
        elif isinstance(prefix, TYPE_TEXT):
            try:
                prefix = int(prefix[:EXTENDED_KEY_PREFIX_LENGTH * 2], 16)
            except ValueError:
                return []
        if network is not None:
            network = self.get(network, ['name', 'alias']) if not isinstance(network, Network) else network
            if network is None:
                return []

        matches = []
        for nw in self.catalog:
            if network is not None and nw is not network:
                continue
            for is_private, value in ((False, nw.xpubkey), (True, nw.xprivkey)):
                if value == prefix:
                    matches.append({
                        'prefix': '%08X' % prefix,
                        'is_private': is_private,
                        'network': nw.name,
                    })
        return matches


def _builtin_networks():
    registry = NetworkRegistry(NETWORK_DEFINITIONS)
    if CNW_NETWORKS_FILE:
        registry.load(read_network_definitions(CNW_NETWORKS_FILE))
    return registry


NETWORK_DEFINITIONS = read_network_definitions(Path(CNW_INSTALL_DIR, 'data', 'networks.json'))
networks = _builtin_networks()

bitcoin = networks.get('bitcoin', 'name')
bitcointest = networks.get('bitcoin-testnet', 'name')
bitcoinsv = networks.get('bitcoin-sv', 'name')
bitcoincash = networks.get('bitcoin-cash', 'name')
bitcoingold = networks.get('bitcoin-gold', 'name')
litecoin = networks.get('litecoin', 'name')
dogecoin = networks.get('dogecoin', 'name')
digibyte = networks.get('digibyte', 'name')
komodo = networks.get('komodo', 'name')
reddcoin = networks.get('reddcoin', 'name')
ravencoin = networks.get('ravencoin', 'name')
verge = networks.get('verge', 'name')

defaultnetwork = networks.get(DEFAULT_NETWORK, ['name', 'alias'])
if defaultnetwork is None:
    _logger.warning("Default network %s not found, using %s" % (DEFAULT_NETWORK, networks.catalog[0].name))
    defaultnetwork = networks.catalog[0]


def add_network(data=None, **kwargs):
    """
    Add a custom network to the library's network registry

    :param data: Dictionary with network fields
    :type data: dict

    :return Network:
    """
    return networks.add(data, **kwargs)


def get_network(key, fields=None):
    """
    Get network from the library's network registry by name, alias or other value. Returns None if not found.

    >>> get_network('doge')
    <Network: dogecoin>

    :param key: Network object, name, alias or other network value
    :type key: Network, str, int, bytes
    :param fields: Only match values of this field or list of fields
    :type fields: str, list of str

    :return Network:
    """
    return networks.get(key, fields)


def remove_network(network):
    """
    Remove a network from the library's network registry

    :param network: Network to remove
    :type network: Network
    """
    networks.remove(network)
