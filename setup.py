#! /usr/bin/env python

import os.path
import sys

from setuptools import setup

version = "0.1.0"

if (not os.path.exists(os.path.join("vcardio","version.py"))
                                    or "make_version" in sys.argv):
    with open("vcardio/version.py", "w") as version_py:
        version_py.write("# pylint: disable=C0111,C0103\n")
        version_py.write("version = {0!r}\n".format(version))
    if "make_version" in sys.argv:
        sys.exit(0)
else:
    exec(open(os.path.join("vcardio", "version.py")).read())

setup(
    name =      'vcardio',
    version =   version,
    description =   'vCard property marshaling: plain-text, xCard, jCard'
                                                                ' and hCard',
    author =    'Jacek Konieczny',
    author_email =  'jajcus@jajcus.net',
    classifiers = [
            "Development Status :: 3 - Alpha",
            "Intended Audience :: Developers",
            "License :: OSI Approved :: GNU Library or Lesser General Public License (LGPL)",
            "Operating System :: OS Independent",
            "Programming Language :: Python",
            "Programming Language :: Python :: 3",
            "Topic :: Communications :: Email :: Address Book",
            "Topic :: Text Processing :: Markup :: XML",
            "Topic :: Software Development :: Libraries :: Python Modules",
        ],
    license =   'LGPL',
    python_requires = '>=3.5',
    install_requires = ['beautifulsoup4'],
    extras_require = {
        'test': ['pytest'],
    },
    packages = [
        'vcardio',
        'vcardio.scribe',
        'vcardio.test',
    ],
    test_suite = "vcardio.test.discover",
)
