#
# (C) Copyright 2011 Jacek Konieczny <jajcus@jajcus.net>
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License Version
# 2.1 as published by the Free Software Foundation.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public
# License along with this program; if not, write to the Free Software
# Foundation, Inc., 675 Mass Ave, Cambridge, MA 02139, USA.
#

"""vCard versions.

Normative references:
  - `vCard 2.1 <http://www.imc.org/pdi/vcard-21.txt>`__
  - :RFC:`2426` (vCard 3.0)
  - :RFC:`6350` (vCard 4.0)
"""

__docformat__ = "restructuredtext en"

from .constants import XCARD_NS

class VCardVersion(object):
    """A vCard version.

    Instances are singletons, compare them with ``is`` or ``==``.

    :Ivariables:
        - `version`: the version string, as found in the VERSION property
        - `xml_namespace`: the XML namespace used for the version in xCard
          documents, `None` if the version has no XML representation
    :Types:
        - `version`: `str`
        - `xml_namespace`: `str`
    """
    __slots__ = ("version", "xml_namespace")
    _versions = {}
    def __init__(self, version, xml_namespace = None):
        self.version = version
        self.xml_namespace = xml_namespace
        self._versions[version] = self

    @classmethod
    def value_of(cls, version):
        """Find a version object by its version string.

        :Parameters:
            - `version`: the version string (e.g. "3.0")
        :Types:
            - `version`: `str`

        :return: the version object or `None` if the version is unknown
        :returntype: `VCardVersion`
        """
        return cls._versions.get(version.strip())

    @property
    def legacy(self):
        """`True` for the versions which encode binary data with the TYPE and
        ENCODING parameters instead of data URIs."""
        return self is not V4_0

    def __str__(self):
        return self.version

    def __repr__(self):
        return "<VCardVersion {0}>".format(self.version)

V2_1 = VCardVersion("2.1")
V3_0 = VCardVersion("3.0")
V4_0 = VCardVersion("4.0", XCARD_NS)

ALL_VERSIONS = (V2_1, V3_0, V4_0)
