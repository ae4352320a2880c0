# -*- coding: utf-8 -*-
#
#    CoinNetworks - Cryptocurrency Network Parameters Library
#    ENCODING - Methods for encoding and conversion
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

import numbers
from coinnetworks.main import *
_logger = logging.getLogger(__name__)


class EncodingError(Exception):
    """ Log and raise encoding errors """
    def __init__(self, msg=''):
        self.msg = msg

    def __str__(self):
        return self.msg


def integer_as_bytes(value, length=NETWORK_MAGIC_LENGTH):
    """
    Convert a non-negative integer to a fixed width big-endian byte string.

    >>> integer_as_bytes(0xF9BEB4D9)
    b'\\xf9\\xbe\\xb4\\xd9'
    >>> integer_as_bytes(5, 2)
    b'\\x00\\x05'

    :param value: Integer to convert
    :type value: int
    :param length: Number of bytes in output, default is 4
    :type length: int

    :return bytes:
    """
    if not isinstance(value, numbers.Integral) or isinstance(value, bool):
        raise EncodingError("Integer expected, got %s" % type(value).__name__)
    if value < 0:
        raise EncodingError("Cannot convert negative value %d to bytes" % value)
    try:
        return int(value).to_bytes(length, 'big')
    except OverflowError:
        raise EncodingError("Value %d does not fit in %d bytes" % (value, length))


def bytes_as_integer(value):
    """
    Convert a big-endian byte string to an integer.

    >>> bytes_as_integer(b'\\x04\\x88\\xb2\\x1e') == 0x0488B21E
    True

    :param value: Bytes to convert
    :type value: bytes

    :return int:
    """
    return int.from_bytes(value, 'big')


def to_bytes(string, unhexlify=True):
    """
    Convert string, hexadecimal string  to bytes

    :param string: String to convert
    :type string: str, bytes
    :param unhexlify: Try to unhexlify hexstring
    :type unhexlify: bool

    :return: Bytes var
    """
    if not string:
        return b''
    if unhexlify:
        try:
            if isinstance(string, bytes):
                string = string.decode()
            s = bytes.fromhex(string)
            return s
        except (TypeError, ValueError):
            pass
    if isinstance(string, bytes):
        return string
    else:
        return bytes(string, 'utf8')


def to_hexstring(string):
    """
    Convert bytes, string to a hexadecimal string. Use instead of built-in hex() method if format
    of input string is not known.

    >>> to_hexstring(b'\\x12\\xaa\\xdd')
    '12aadd'

    :param string: Variable to convert to hex string
    :type string: bytes, str

    :return: hexstring
    """
    if not string:
        return ''
    try:
        bytes.fromhex(string)
        return string
    except (ValueError, TypeError):
        pass

    if not isinstance(string, bytes):
        string = bytes(string, 'utf8')
    return string.hex()
