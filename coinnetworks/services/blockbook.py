# -*- coding: utf-8 -*-
#
#    CoinNetworks - Cryptocurrency Network Parameters Library
#    Blockbook Client api/v2 - available on various servers or run on your own see https://github.com/trezor/blockbook
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

import logging
from coinnetworks.config.config import TIMEOUT_REQUESTS
from coinnetworks.services.baseclient import BaseClient

PROVIDERNAME = 'blockbook'

_logger = logging.getLogger(__name__)


class BlockbookClient(BaseClient):

    def __init__(self, network, base_url, timeout=TIMEOUT_REQUESTS):
        super(BlockbookClient, self).__init__(network, PROVIDERNAME, base_url, timeout)

    def compose_request(self, category='', data='', cmd='', variables=None):
        url_path = category
        if data:
            url_path += '/' + data + ('' if not cmd else '/' + cmd)
        if variables is None:
            variables = {}
        return self.request(url_path, variables)

    def status(self):
        return self.compose_request()

    def blockcount(self):
        res = self.status()
        return int(res['backend']['blocks'])

    def getblockhash(self, height):
        res = self.compose_request('block-index', str(height))
        return res['blockHash']
