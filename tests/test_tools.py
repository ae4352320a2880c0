# -*- coding: utf-8 -*-
#
#    CoinNetworks - Cryptocurrency Network Parameters Library
#    Unit Tests for CoinNetworks Tools
#    © 2026 October - 1200 Web Development <http://1200wd.com/>
#

import io
import os
import sys
import json
import unittest
from unittest import mock
from contextlib import redirect_stdout
from subprocess import Popen, PIPE

from coinnetworks.networks import NetworkRegistry, bitcoin, litecoin
from coinnetworks.tools.networkinfo import main, find_network, parse_args


def run_networkinfo(args):
    output = io.StringIO()
    with redirect_stdout(output):
        exit_code = main(args)
    return exit_code, output.getvalue()


class TestToolsNetworkInfo(unittest.TestCase):

    def test_tools_networkinfo_by_name(self):
        exit_code, output = run_networkinfo(['bitcoin'])
        self.assertEqual(exit_code, 0)
        self.assertIn('Network bitcoin', output)
        self.assertIn('0x0488b21e', output)
        self.assertIn('f9beb4d9', output)
        self.assertIn('seed.bitcoin.sipa.be', output)

    def test_tools_networkinfo_by_value(self):
        self.assertIn('Network litecoin', run_networkinfo(['9333'])[1])
        self.assertIn('Network bitcoin-testnet', run_networkinfo(['0x0B110907'])[1])
        self.assertIn('Network reddcoin', run_networkinfo(['45444', '--field', 'port'])[1])

    def test_tools_networkinfo_json(self):
        exit_code, output = run_networkinfo(['doge', '--json'])
        self.assertEqual(exit_code, 0)
        info = json.loads(output)
        self.assertEqual(info['name'], 'dogecoin')
        self.assertEqual(info['network_magic'], 'c0c0c0c0')

    def test_tools_networkinfo_list(self):
        exit_code, output = run_networkinfo(['--list'])
        self.assertEqual(exit_code, 0)
        lines = output.splitlines()
        self.assertTrue(lines[0].startswith('bitcoin '))
        self.assertIn('verge', lines[-1])
        nws = json.loads(run_networkinfo(['-l', '-j'])[1])
        self.assertEqual(nws[1]['alias'], 'tbtc')

    def test_tools_networkinfo_not_found(self):
        exit_code, output = run_networkinfo(['ethereum'])
        self.assertEqual(exit_code, 1)
        self.assertIn('Network ethereum not found', output)

    def test_tools_networkinfo_blockcount(self):
        with mock.patch('coinnetworks.tools.networkinfo.Service') as mock_service:
            mock_service.return_value.blockcount.return_value = 865001
            exit_code, output = run_networkinfo(['btc', '--blockcount'])
        self.assertEqual(exit_code, 0)
        self.assertEqual(output.strip(), '865001')
        mock_service.assert_called_once_with(bitcoin)

    def test_tools_networkinfo_blockcount_no_explorers(self):
        exit_code, output = run_networkinfo(['tbtc', '-b'])
        self.assertEqual(exit_code, 1)
        self.assertIn('No explorers found for network bitcoin-testnet', output)

    def test_tools_networkinfo_no_arguments(self):
        with redirect_stdout(io.StringIO()), mock.patch('sys.stderr', new_callable=io.StringIO):
            self.assertRaises(SystemExit, parse_args, [])

    def test_tools_find_network(self):
        self.assertIs(find_network('ltc'), litecoin)
        self.assertIs(find_network('0x30'), litecoin)
        self.assertIsNone(find_network('0x30', ['port']))
        registry = NetworkRegistry()
        nw = registry.add(name='5', alias='five', pubkeyhash=5, privatekey=6, scripthash=7, bech32prefix=None,
                          xpubkey=8, xprivkey=9)
        self.assertIs(find_network('5', registry=registry), nw)

    def test_tools_networkinfo_script(self):
        cmd = [sys.executable, '-m', 'coinnetworks.tools.networkinfo', 'ravencoin']
        process = Popen(cmd, stdout=PIPE, cwd=os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
        poutput = process.communicate()
        self.assertEqual(process.returncode, 0)
        self.assertIn('Network ravencoin', poutput[0].decode())


if __name__ == '__main__':
    unittest.main()
