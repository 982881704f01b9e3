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

"""Scribes for properties with a single text value."""

__docformat__ = "restructuredtext en"

import logging

from ..datatype import VCardDataType
from ..property import FormattedName, ProductId, Mailer, Kind, Member
from ..property import RawProperty
from .core import VCardPropertyScribe, Omit, property_scribe
from .syntax import JCardValue, UNKNOWN_VALUE_NAME

logger = logging.getLogger("vcardio.scribe.text")

class TextPropertyScribe(VCardPropertyScribe):
    """Scribe for `TextProperty` subclasses.

    Properties without a value are left out of xCard output.

    :CVariables:
        - `value_data_type`: the data type of the value in all versions
    :Types:
        - `value_data_type`: `VCardDataType`
    """
    value_data_type = VCardDataType.TEXT

    def _default_data_type(self, version):
        return self.value_data_type

    def _write_text(self, prop, version):
        if prop.value is None:
            return ""
        return self.escape(prop.value)

    def _parse_text(self, value, data_type, version, parameters, warnings):
        return self.property_class(self.unescape(value))

    def _write_xml(self, prop, element):
        if prop.value is None:
            return Omit("Property has no value.")
        element.append(self.data_type(prop, element.version), prop.value)
        return None

    def _write_json(self, prop):
        if prop.value is None:
            return JCardValue.single("")
        return JCardValue.single(prop.value)

@property_scribe(FormattedName)
class FormattedNameScribe(TextPropertyScribe):
    """FN scribe."""
    pass

@property_scribe(ProductId)
class ProductIdScribe(TextPropertyScribe):
    """PRODID scribe."""
    pass

@property_scribe(Mailer)
class MailerScribe(TextPropertyScribe):
    """MAILER scribe."""
    pass

@property_scribe(Kind)
class KindScribe(TextPropertyScribe):
    """KIND scribe."""
    pass

@property_scribe(Member)
class MemberScribe(TextPropertyScribe):
    """MEMBER scribe. The value is an URI."""
    value_data_type = VCardDataType.URI

class RawPropertyScribe(TextPropertyScribe):
    """Scribe for properties without a dedicated scribe.

    Not registered, one is created on demand for every unknown property
    name. Values are kept verbatim (not unescaped) and the data type is
    taken from the property object, if known.
    """
    property_class = RawProperty
    def __init__(self, property_name):
        self.property_name = property_name.upper()

    def _default_data_type(self, version):
        return None

    def _data_type(self, prop, version):
        return prop.data_type

    def _write_text(self, prop, version):
        if prop.value is None:
            return ""
        return prop.value

    def _parse_text(self, value, data_type, version, parameters, warnings):
        return RawProperty(self.property_name, value, data_type)

    def _parse_xml(self, element, parameters, warnings):
        # take the first value element, whatever its data type
        for child in element.element:
            if child.tag.endswith("}parameters"):
                continue
            name = child.tag.split("}", 1)[-1]
            if name == UNKNOWN_VALUE_NAME:
                data_type = None
            else:
                data_type = VCardDataType.get(name)
            return RawProperty(self.property_name, child.text or "",
                                                                    data_type)
        return RawProperty(self.property_name, element.element.text or "")
