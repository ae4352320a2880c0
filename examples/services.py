# -*- coding: utf-8 -*-
#
#    CoinNetworks - Cryptocurrency Network Parameters Library
#
#    EXAMPLES - Query block explorers of a network
#
#    © 2026 October - 1200 Web Development <http://1200wd.com/>
#

from coinnetworks.services.services import *


srv = Service('litecoin')
print("Latest block on litecoin: %s" % srv.blockcount())
print("Errors: %s" % srv.errors)

print("Hash of block 1: %s" % Service('btc').getblockhash(1))
