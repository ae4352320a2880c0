# -*- coding: utf-8 -*-
#
#    CoinNetworks - Cryptocurrency Network Parameters Library
#
#    EXAMPLES - Network registry
#
#    © 2026 October - 1200 Web Development <http://1200wd.com/>
#

from coinnetworks.networks import *

#
# Network examples
#

print("\n=== Get network by name, alias, port or network magic ===")
print("Name 'bitcoin-testnet': %s" % get_network('bitcoin-testnet'))
print("Alias 'doge': %s" % get_network('doge'))
print("Port 9333: %s" % get_network(9333))
print("Network magic 0xF9BEB4D9: %s" % get_network(0xF9BEB4D9))

print("\n=== Networks sharing a value, first registered network is returned ===")
print("Networks with magic 0x5241564E: %s" % networks.network_by_value('network_magic', 0x5241564E))
print("Get 0x5241564E: %s" % get_network(0x5241564E))
print("Get scripthash 5 only: %s" % get_network(5, 'scripthash'))

print("\n=== Get all public key hash prefixes ===")
print("Pubkeyhash prefixes: %s" % networks.network_values_for('pubkeyhash'))

print("\n=== Search for extended key prefix ===")
print(networks.extended_key_prefix_search('02FAC398'))

print("\n=== Network parameters ===")
for k, v in defaultnetwork.as_dict().items():
    print("%25s: %s" % (k, v))

print("\n=== Add and remove a custom network ===")
mycoin = add_network(name='mycoin', alias='myc', pubkeyhash=50, privatekey=178, scripthash=55, bech32prefix='my',
                     xpubkey=0x0488B21E, xprivkey=0x0488ADE4, network_magic=0x4D594331, port=9999,
                     dns_seeds=['seed.mycoin.example.com'], coin_type=9999)
print("Port 9999: %s" % get_network(9999))
remove_network(mycoin)
print("Port 9999 after removal: %s" % get_network(9999))

print("\n=== Separate registry ===")
registry = NetworkRegistry()
registry.add(name='x', alias='x1', pubkeyhash=10, privatekey=20, scripthash=30, bech32prefix='xt', xpubkey=1,
             xprivkey=2, port=1000)
print("Registry: %s, lookup 1000: %s" % (registry, registry.get(1000)))
