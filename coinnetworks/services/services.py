# -*- coding: utf-8 -*-
#
#    CoinNetworks - Cryptocurrency Network Parameters Library
#    SERVICES - Query the block explorers of a network
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

import time
from coinnetworks.main import *
from coinnetworks.networks import Network, get_network
from coinnetworks.services.baseclient import ClientError
from coinnetworks.services.blockbook import BlockbookClient


_logger = logging.getLogger(__name__)


class ServiceError(Exception):
    def __init__(self, msg=''):
        self.msg = msg
        _logger.error(msg)

    def __str__(self):
        return self.msg


class Service(object):
    """
    Class to connect to the Blockbook explorers listed in a network's definition. Use to check the status of a
    network or to get the latest block.

    Explorers are tried in the order they are listed. If an explorer fails to correctly respond the Service class
    will try the next one.

    """

    def __init__(self, network=DEFAULT_NETWORK, timeout=TIMEOUT_REQUESTS, max_errors=SERVICE_MAX_ERRORS,
                 explorers=None):
        """
        Create a service object for the specified network.

        :param network: Network name, alias or Network object
        :type network: str, Network
        :param timeout: Timeout for web requests. Leave empty to use default from config settings
        :type timeout: int
        :param max_errors: Stop after this number of failing explorers
        :type max_errors: int
        :param explorers: List of explorer urls to use instead of the explorers of the network
        :type explorers: list of str

        """
        self.network = network
        if not isinstance(network, Network):
            self.network = get_network(network, ['name', 'alias'])
        if self.network is None:
            raise ServiceError("Network %s not found in network registry" % network)
        if explorers is None:
            explorers = self.network.explorers or []
        if isinstance(explorers, TYPE_TEXT):
            explorers = [explorers]
        self.explorers = list(explorers)
        if not self.explorers:
            raise ServiceError("No explorers found for network %s" % self.network.name)
        self.results = {}
        self.errors = {}
        self.resultcount = 0
        self.max_errors = max_errors
        self.timeout = timeout
        self._blockcount_update = 0
        self._blockcount = None

    def _reset_results(self):
        self.results = {}
        self.errors = {}
        self.resultcount = 0

    def _provider_execute(self, method, *arguments):
        self._reset_results()

        for url in self.explorers:
            try:
                client = BlockbookClient(self.network, url, self.timeout)
                res = getattr(client, method)(*arguments)
                self.results.update(
                    {url: res}
                )
                _logger.debug("Executed method %s on explorer %s" % (method, url))
                self.resultcount += 1
                break
            except (ClientError, KeyError, TypeError, ValueError) as e:
                try:
                    err = e.msg
                except AttributeError:
                    err = str(e)
                self.errors.update(
                    {url: err}
                )
                _logger.debug("Error %s on explorer %s" % (err, url))

                if len(self.errors) >= self.max_errors:
                    _logger.warning("No successful response from explorers, max errors exceeded: %s" %
                                    list(self.errors.keys()))
                    return False

        if not self.resultcount:
            _logger.warning("No successful response from any explorer: %s" % self.explorers)
            return False
        return list(self.results.values())[0]

    def status(self):
        """
        Get status of the first responding explorer, with information about explorer and backend node

        :return dict:
        """
        return self._provider_execute('status')

    def blockcount(self):
        """
        Get latest block number: The block number of last block in longest chain on the Blockchain.

        Block count is cached for BLOCK_COUNT_CACHE_TIME seconds to avoid to many calls to explorers.

        :return int:
        """
        current_timestamp = time.time()
        if self._blockcount is None or self._blockcount_update < current_timestamp - BLOCK_COUNT_CACHE_TIME:
            new_count = self._provider_execute('blockcount')
            if not self._blockcount or (new_count and new_count > self._blockcount):
                self._blockcount = new_count
                self._blockcount_update = time.time()
        return self._blockcount

    def getblockhash(self, height):
        """
        Get hash of block at specified height

        :param height: Block height
        :type height: int

        :return str:
        """
        return self._provider_execute('getblockhash', height)
