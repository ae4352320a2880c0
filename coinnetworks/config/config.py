# -*- coding: utf-8 -*-
#
#    CoinNetworks - Cryptocurrency Network Parameters Library
#    CONFIG - Configuration settings
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

import os
import configparser
from pathlib import Path

# General defaults
TYPE_TEXT = str
TYPE_INT = int
LOGLEVEL = 'WARNING'


# File locations
CNW_CONFIG_FILE = ''
CNW_INSTALL_DIR = Path(__file__).parents[1]
CNW_DATA_DIR = ''
CNW_NETWORKS_FILE = ''
CNW_LOG_FILE = ''

# Main
ENABLE_COINNETWORKS_LOGGING = True

# Services
TIMEOUT_REQUESTS = 5
BLOCK_COUNT_CACHE_TIME = 3
SERVICE_MAX_ERRORS = 4  # Stop querying explorers when more then max errors occur

# Networks
DEFAULT_NETWORK = 'bitcoin'
NETWORK_MAGIC_LENGTH = 4
EXTENDED_KEY_PREFIX_LENGTH = 4


def read_config():
    config = configparser.ConfigParser()

    def config_get(section, var, fallback, is_boolean=False):
        try:
            if is_boolean:
                val = config.getboolean(section, var, fallback=fallback)
            else:
                val = config.get(section, var, fallback=fallback)
            return val
        except (configparser.Error, ValueError):
            return fallback

    global CNW_CONFIG_FILE, CNW_DATA_DIR, CNW_NETWORKS_FILE, CNW_LOG_FILE
    global LOGLEVEL, ENABLE_COINNETWORKS_LOGGING
    global TIMEOUT_REQUESTS, SERVICE_MAX_ERRORS, BLOCK_COUNT_CACHE_TIME, DEFAULT_NETWORK

    # Read settings from configuration file provided in OS environment or ~/.coinnetworks/ directory
    config_file_name = os.environ.get('CNW_CONFIG_FILE')
    if not config_file_name:
        CNW_CONFIG_FILE = Path('~/.coinnetworks/config.ini').expanduser()
    else:
        CNW_CONFIG_FILE = Path(config_file_name)
        if not CNW_CONFIG_FILE.is_absolute():
            CNW_CONFIG_FILE = Path(Path.home(), '.coinnetworks', CNW_CONFIG_FILE)
        if not CNW_CONFIG_FILE.exists():
            CNW_CONFIG_FILE = Path(CNW_INSTALL_DIR, 'data', config_file_name)
        if not CNW_CONFIG_FILE.exists():
            raise IOError('CoinNetworks configuration file not found: %s' % str(CNW_CONFIG_FILE))
    data = config.read(str(CNW_CONFIG_FILE))
    CNW_DATA_DIR = Path(config_get('locations', 'data_dir', fallback='~/.coinnetworks')).expanduser()

    # Additional network definitions, appended to the built-in networks
    networks_file = config_get('locations', 'networks_file', fallback='')
    CNW_NETWORKS_FILE = Path(CNW_DATA_DIR, networks_file).expanduser() if networks_file else ''

    # Log settings
    ENABLE_COINNETWORKS_LOGGING = config_get("logs", "enable_coinnetworks_logging", fallback=True, is_boolean=True)
    CNW_LOG_FILE = Path(CNW_DATA_DIR, config_get('logs', 'log_file', fallback='coinnetworks.log'))
    LOGLEVEL = config_get('logs', 'loglevel', fallback='WARNING')

    # Service settings
    TIMEOUT_REQUESTS = int(config_get('common', 'timeout_requests', fallback=5))
    SERVICE_MAX_ERRORS = int(config_get('common', 'service_max_errors', fallback=4))
    BLOCK_COUNT_CACHE_TIME = int(config_get('common', 'block_count_cache_time', fallback=3))

    # Other settings
    DEFAULT_NETWORK = config_get('common', 'default_network', fallback='bitcoin')

    if not data:
        return False
    return True


# Initialize library
read_config()
CNW_VERSION = Path(CNW_INSTALL_DIR, 'config/VERSION').open().read().strip()
