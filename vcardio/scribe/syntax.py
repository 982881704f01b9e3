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

"""Syntax-specific views of a property value, as seen by the scribes.

  - `XCardElement`: a property element of an xCard document
  - `JCardValue`: a property value of a jCard document
  - `HCardElement`: an HTML element of an hCard
"""

__docformat__ = "restructuredtext en"

import logging

from urllib.parse import urljoin

from bs4 import BeautifulSoup
from bs4.element import Tag

from ..etree import ElementTree, ElementClass
from ..vcardversion import V4_0

logger = logging.getLogger("vcardio.scribe.syntax")

UNKNOWN_VALUE_NAME = "unknown"

class XCardElement(object):
    """Wrapper for an xCard property element.

    Value elements are named after the value data type ("uri", "text",
    ...) and live in the namespace of the vCard version.

    :Ivariables:
        - `element`: the property element
        - `version`: the vCard version of the document
    :Types:
        - `element`: :etree:`ElementTree.Element`
        - `version`: `VCardVersion`
    """
    def __init__(self, element, version = V4_0):
        if not isinstance(element, ElementClass):
            raise TypeError("ElementTree.Element required")
        self.element = element
        self.version = version
        self._qnp = "{{{0}}}".format(version.xml_namespace)

    def _value_tag(self, data_type):
        if data_type is None:
            return self._qnp + UNKNOWN_VALUE_NAME
        return self._qnp + str(data_type).lower()

    def append(self, data_type, value):
        """Add a value element.

        :Parameters:
            - `data_type`: the data type of the value, `None` for "unknown"
            - `value`: the value
        :Types:
            - `data_type`: `VCardDataType`
            - `value`: `str`

        :return: the new element
        """
        child = ElementTree.SubElement(self.element, self._value_tag(data_type))
        child.text = value
        return child

    def all(self, data_type):
        """Get the text of all value elements of given data type.

        :returntype: `list` of `str`"""
        tag = self._value_tag(data_type)
        return [child.text or "" for child in self.element
                                                    if child.tag == tag]

    def first(self, data_type):
        """Get the text of the first value element of given data type.

        :return: the value or `None` when there is no such element
        :returntype: `str`"""
        tag = self._value_tag(data_type)
        for child in self.element:
            if child.tag == tag:
                return child.text or ""
        return None

class JCardValue(object):
    """A jCard property value.

    :Ivariables:
        - `values`: the value items (strings, numbers, lists of those)
    :Types:
        - `values`: `list`
    """
    def __init__(self, values = None):
        if values is None:
            values = []
        self.values = list(values)

    @classmethod
    def single(cls, value):
        """Create a single-valued jCard value."""
        return cls([value])

    def as_single(self):
        """Get the value as a single string.

        Nested lists are descended into, `None` and missing values become
        an empty string."""
        if not self.values:
            return ""
        value = self.values[0]
        while isinstance(value, (list, tuple)):
            if not value:
                return ""
            value = value[0]
        if value is None:
            return ""
        return str(value)

    def __eq__(self, other):
        if not isinstance(other, JCardValue):
            return False
        return self.values == other.values

    def __ne__(self, other):
        return not self.__eq__(other)

    __hash__ = None

    def __repr__(self):
        return "JCardValue({0!r})".format(self.values)

class HCardElement(object):
    """Wrapper for an HTML element of an hCard.

    :Ivariables:
        - `tag`: the element
        - `base_url`: URL of the HTML document, for resolving relative URLs
    :Types:
        - `tag`: `bs4.element.Tag`
        - `base_url`: `str`
    """
    def __init__(self, tag, base_url = None):
        if not isinstance(tag, Tag):
            raise TypeError("bs4 Tag required")
        self.tag = tag
        self.base_url = base_url

    @classmethod
    def from_html(cls, html, base_url = None):
        """Parse an HTML fragment and wrap its first element."""
        soup = BeautifulSoup(html, "html.parser")
        tag = soup.find(True)
        if tag is None:
            raise ValueError("No HTML element found")
        return cls(tag, base_url)

    def tag_name(self):
        """The lower-cased element name."""
        return self.tag.name.lower()

    def attr(self, name):
        """Get an attribute value, empty string if not present."""
        value = self.tag.get(name)
        if value is None:
            return ""
        if isinstance(value, list):
            return " ".join(value)
        return value

    def abs_url(self, name):
        """Get an attribute value as an absolute URL.

        Relative URLs are resolved against `base_url`. Empty string if
        the attribute is not present."""
        value = self.attr(name).strip()
        if not value:
            return ""
        if self.base_url and not value.lower().startswith("data:"):
            return urljoin(self.base_url, value)
        return value

    def value(self):
        """The text content of the element."""
        return self.tag.get_text().strip()
