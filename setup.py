# -*- coding: utf-8 -*-
#
#    CoinNetworks - Cryptocurrency Network Parameters Library
#    PyPi Setup Tool
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

from setuptools import setup
from codecs import open
import os

here = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(here, 'coinnetworks', 'config', 'VERSION'), encoding='utf-8') as f:
    version = f.read().strip()

# Get the long description from the relevant file
readmetxt = ''
try:
    with open(os.path.join(here, 'README.rst'), encoding='utf-8') as f:
        readmetxt = f.read()
except IOError:
    pass

kwargs = {}


install_requires = [
    'requests>=2.25.0',
]

kwargs['install_requires'] = install_requires
kwargs['extras_require'] = {
    'test': ['pytest>=7.0'],
}

setup(
    name='coinnetworks',
    version=version,
    description='Cryptocurrency Network Parameters Library',
    long_description=readmetxt,
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: GNU Affero General Public License v3 or later (AGPLv3+)',
        'Natural Language :: English',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
    url='http://github.com/1200wd/coinnetworks',
    author='1200wd',
    author_email='info@1200wd.com',
    license='AGPL3',
    packages=['coinnetworks', 'coinnetworks.config', 'coinnetworks.services', 'coinnetworks.tools'],
    package_data={'coinnetworks': ['config/VERSION', 'data/*.json', 'data/*.ini']},
    entry_points={
        'console_scripts': ['networkinfo=coinnetworks.tools.networkinfo:main']
    },
    test_suite='tests',
    include_package_data=True,
    keywords='bitcoin litecoin dogecoin cryptocurrency network parameters magic prefix',
    zip_safe=False,
    **kwargs
)
