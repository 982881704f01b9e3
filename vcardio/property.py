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

"""vCard property objects.

Only the value model lives here, marshaling is done by the scribes in
`vcardio.scribe`.
"""

__docformat__ = "restructuredtext en"

from .parameters import VCardParameters
from .vcardversion import ALL_VERSIONS, V2_1, V3_0, V4_0

class VCardProperty(object):
    """Base class for vCard properties.

    :CVariables:
        - `property_name`: the property name (e.g. "PHOTO")
        - `supported_versions`: versions the property may be used in
        - `membership_reference`: `True` for properties referencing group
          members, valid only in vCards of KIND "group"
    :Ivariables:
        - `group`: the group name or `None`
        - `qname`: explicit XML element name for xCard output, overriding
          the default (lower-cased `property_name` in the xCard namespace)
    :Types:
        - `property_name`: `str`
        - `supported_versions`: `tuple` of `VCardVersion`
        - `membership_reference`: `bool`
        - `group`: `str`
        - `qname`: `str` (ElementTree '{namespace}local-name' notation)
    """
    property_name = None
    supported_versions = ALL_VERSIONS
    membership_reference = False
    qname = None
    def __init__(self):
        self.group = None
        self._parameters = VCardParameters()

    @property
    def parameters(self):
        """The property parameters.

        The object is owned by the property. Assigning stores a copy.

        :returntype: `VCardParameters`"""
        return self._parameters

    @parameters.setter
    def parameters(self, value):
        self._parameters = VCardParameters(value)

    def is_supported_by(self, version):
        """Check if the property may be used in a vCard of given version."""
        return version in self.supported_versions

class BinaryProperty(VCardProperty):
    """A property holding a resource either by URL or inline.

    Only one of `url` and `data` is set at a time, setting one of them
    clears the other.

    :Ivariables:
        - `content_type`: the content type of the resource
    :Types:
        - `content_type`: `MediaTypeParameter`
    """
    def __init__(self, url_or_data = None, content_type = None):
        """
        :Parameters:
            - `url_or_data`: the resource URL or its contents
            - `content_type`: the content type of the resource
        :Types:
            - `url_or_data`: `str` or `bytes`
            - `content_type`: `MediaTypeParameter`
        """
        VCardProperty.__init__(self)
        self._url = None
        self._data = None
        self.content_type = content_type
        if isinstance(url_or_data, (bytes, bytearray)):
            self.data = url_or_data
        elif url_or_data is not None:
            self.url = url_or_data

    @property
    def url(self):
        """The URL of the resource."""
        return self._url

    @url.setter
    def url(self, value):
        self._url = value
        if value is not None:
            self._data = None

    @property
    def data(self):
        """The resource contents.

        :returntype: `bytes`"""
        return self._data

    @data.setter
    def data(self, value):
        if value is not None:
            value = bytes(value)
            self._url = None
        self._data = value

    def __repr__(self):
        if self._url is not None:
            what = "url={0!r}".format(self._url)
        elif self._data is not None:
            what = "{0} bytes".format(len(self._data))
        else:
            what = "empty"
        return "<{0} {1} content_type={2!r}>".format(self.__class__.__name__,
                                                    what, self.content_type)

class Photo(BinaryProperty):
    """PHOTO property."""
    property_name = "PHOTO"

class Logo(BinaryProperty):
    """LOGO property."""
    property_name = "LOGO"

class Sound(BinaryProperty):
    """SOUND property."""
    property_name = "SOUND"

class TextProperty(VCardProperty):
    """A property with a single text value.

    :Ivariables:
        - `value`: the property value
    :Types:
        - `value`: `str`
    """
    def __init__(self, value = None):
        VCardProperty.__init__(self)
        self.value = value

    def __repr__(self):
        return "<{0} {1!r}>".format(self.__class__.__name__, self.value)

class FormattedName(TextProperty):
    """FN property: the display name."""
    property_name = "FN"

class ProductId(TextProperty):
    """PRODID property: identifies the software that created the vCard."""
    property_name = "PRODID"
    supported_versions = (V3_0, V4_0)

class Mailer(TextProperty):
    """MAILER property: the e-mail software of the person."""
    property_name = "MAILER"
    supported_versions = (V2_1, V3_0)

class Kind(TextProperty):
    """KIND property: the kind of object the vCard represents."""
    property_name = "KIND"
    supported_versions = (V4_0,)
    INDIVIDUAL = "individual"
    GROUP = "group"
    ORG = "org"
    LOCATION = "location"

    def is_individual(self):
        return _lower(self.value) == self.INDIVIDUAL

    def is_group(self):
        return _lower(self.value) == self.GROUP

    def is_org(self):
        return _lower(self.value) == self.ORG

    def is_location(self):
        return _lower(self.value) == self.LOCATION

class Member(TextProperty):
    """MEMBER property: a member of a group vCard.

    Valid only in vCards with KIND set to "group".

    :Ivariables:
        - `value`: URI of the member (e.g. "urn:uuid:...")
    """
    property_name = "MEMBER"
    supported_versions = (V4_0,)
    membership_reference = True

    @property
    def uri(self):
        return self.value

class RawProperty(TextProperty):
    """Any property without a dedicated class, e.g. an extension
    (X-...) property.

    :Ivariables:
        - `property_name`: the property name
        - `data_type`: the data type of the value, `None` if unknown
    :Types:
        - `data_type`: `VCardDataType`
    """
    def __init__(self, property_name, value = None, data_type = None,
                                                            qname = None):
        TextProperty.__init__(self, value)
        self.property_name = property_name.upper()
        self.data_type = data_type
        self.qname = qname

    def __repr__(self):
        return "<RawProperty {0} {1!r}>".format(self.property_name,
                                                                self.value)

def _lower(value):
    if value is None:
        return None
    return value.lower()
