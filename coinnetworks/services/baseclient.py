# -*- coding: utf-8 -*-
#
#    CoinNetworks - Cryptocurrency Network Parameters Library
#    Base Client
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

import requests
from urllib.parse import urlencode
import json
from coinnetworks.main import *
from coinnetworks.networks import Network, get_network

_logger = logging.getLogger(__name__)


class ClientError(Exception):
    def __init__(self, msg=''):
        self.msg = msg
        _logger.info(msg)

    def __str__(self):
        return self.msg


class BaseClient(object):

    def __init__(self, network, provider, base_url, timeout=TIMEOUT_REQUESTS):
        self.network = network
        if not isinstance(network, Network):
            self.network = get_network(network, ['name', 'alias'])
        if self.network is None:
            raise ClientError("Network %s is not supported by %s Client" % (network, provider))
        self.provider = provider
        self.base_url = base_url
        if base_url and not base_url.endswith('/'):
            self.base_url += '/'
        self.resp = None
        self.timeout = timeout

    def request(self, url_path, variables=None):
        if not self.base_url:
            raise ClientError("No (complete) url provided for %s" % self.provider)
        url = self.base_url + url_path
        headers = {
            'User-Agent': 'CoinNetworks/%s' % CNW_VERSION,
            'Accept': 'application/json',
        }
        if variables:
            url += '?' + urlencode(variables)
        log_url = url if '@' not in url else url.split('@')[1]
        _logger.info("Url get request %s" % log_url)
        try:
            self.resp = requests.get(url, timeout=self.timeout, headers=headers)
        except requests.exceptions.RequestException as e:
            raise ClientError("Error connecting to %s on url %s: %s" % (self.provider, log_url, e))

        resp_text = self.resp.text
        if len(resp_text) > 1000:
            resp_text = self.resp.text[:970] + '... truncated, length %d' % len(resp_text)
        _logger.debug("Response [%d] %s" % (self.resp.status_code, resp_text))
        if self.resp.status_code == 429:
            raise ClientError("Maximum number of requests reached for %s with url %s, response [%d] %s" %
                              (self.provider, log_url, self.resp.status_code, resp_text))
        elif not(self.resp.status_code == 200 or self.resp.status_code == 201):
            raise ClientError("Error connecting to %s on url %s, response [%d] %s" %
                              (self.provider, log_url, self.resp.status_code, resp_text))
        try:
            return json.loads(self.resp.text)
        except ValueError:
            raise ClientError("Invalid response from %s on url %s: %s" % (self.provider, log_url, resp_text))
