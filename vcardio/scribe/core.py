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

"""Scribe base classes and registry.

A scribe marshals and unmarshals a single property type in all of the
supported syntaxes (plain-text, xCard, jCard, hCard) and versions.

Public methods of `VCardPropertyScribe` implement the common logic and
delegate the property-specific parts to the ``_``-prefixed hooks, which
subclasses override.

Marshaling to xCard returns one of the outcome values:

  - `Emit`: the property element was built
  - `Omit`: the property should be left out of the output
  - `Unsupported`: the property value cannot be represented in the syntax
    (e.g. an embedded vCard)
"""

__docformat__ = "restructuredtext en"

import logging

from abc import ABCMeta, abstractmethod
from collections import namedtuple

from ..exceptions import MissingValueElementError
from ..parameters import VCardParameters
from ..vcardversion import V3_0, V4_0
from ..utils import escape, unescape
from .syntax import JCardValue

logger = logging.getLogger("vcardio.scribe.core")

Emit = namedtuple("Emit", "element")
Omit = namedtuple("Omit", "reason")
Unsupported = namedtuple("Unsupported", "reason")

ParseResult = namedtuple("ParseResult", "property warnings")

SCRIBES_BY_CLASS = {}
SCRIBES_BY_NAME = {}

class VCardPropertyScribe(metaclass = ABCMeta):
    """Base class for property scribes.

    Scribes are stateless and may be shared freely.

    :CVariables:
        - `property_class`: the property class handled
        - `property_name`: the property name handled (upper case)
    :Types:
        - `property_class`: `type`
        - `property_name`: `str`
    """
    property_class = None
    property_name = None

    def default_data_type(self, version):
        """Get the data type a value of this property has by default,
        ignoring the contents of any property instance.

        :Parameters:
            - `version`: the vCard version
        :Types:
            - `version`: `VCardVersion`

        :return: the data type or `None` if there is no default
        :returntype: `VCardDataType`
        """
        return self._default_data_type(version)

    def data_type(self, prop, version):
        """Get the data type of the value of a property instance.

        :Parameters:
            - `prop`: the property
            - `version`: the vCard version
        :Types:
            - `prop`: `VCardProperty`
            - `version`: `VCardVersion`

        :returntype: `VCardDataType`
        """
        return self._data_type(prop, version)

    def prepare_parameters(self, prop, version, vcard = None):
        """Compute the parameters to be written for a property.

        The property parameters are not modified, a new working copy
        is returned. The VALUE parameter is set when the data type of the
        value differs from the default for the version.

        :Parameters:
            - `prop`: the property
            - `version`: the vCard version
            - `vcard`: the vCard the property belongs to
        :Types:
            - `prop`: `VCardProperty`
            - `version`: `VCardVersion`
            - `vcard`: `VCard`

        :returntype: `VCardParameters`
        """
        copy = prop.parameters.copy()
        self._prepare_parameters(prop, copy, version, vcard)
        data_type = self.data_type(prop, version)
        if data_type is not None and data_type != self.default_data_type(
                                                                    version):
            copy.value = data_type
        else:
            copy.value = None
        return copy

    def write_text(self, prop, version):
        """Marshal the property value to the plain-text syntax.

        :returntype: `str`"""
        return self._write_text(prop, version)

    def parse_text(self, value, data_type, version, parameters = None):
        """Unmarshal a plain-text property value.

        :Parameters:
            - `value`: the (escaped) property value
            - `data_type`: the data type from the VALUE parameter or `None`
            - `version`: the vCard version
            - `parameters`: the property parameters
        :Types:
            - `value`: `str`
            - `data_type`: `VCardDataType`
            - `version`: `VCardVersion`
            - `parameters`: `VCardParameters`

        :raise CannotParseError: if the value cannot be unmarshalled at all

        :returntype: `ParseResult`
        """
        parameters = VCardParameters(parameters)
        warnings = []
        prop = self._parse_text(value, data_type, version, parameters,
                                                                    warnings)
        return self._result(prop, parameters, warnings)

    def write_xml(self, prop, element):
        """Marshal the property value into an xCard property element.

        :Parameters:
            - `prop`: the property
            - `element`: the property element, value elements are appended
              to it
        :Types:
            - `prop`: `VCardProperty`
            - `element`: `XCardElement`

        :return: `Emit` with the property element, or `Omit` or
            `Unsupported` with the reason
        """
        outcome = self._write_xml(prop, element)
        if outcome is None:
            return Emit(element.element)
        logger.debug("{0} not marshalled: {1!r}".format(self.property_name,
                                                                    outcome))
        return outcome

    def parse_xml(self, element, parameters = None):
        """Unmarshal an xCard property element.

        :Parameters:
            - `element`: the property element
            - `parameters`: the parameters decoded from the element
        :Types:
            - `element`: `XCardElement`
            - `parameters`: `VCardParameters`

        :raise CannotParseError: if a required value element is missing

        :returntype: `ParseResult`
        """
        parameters = VCardParameters(parameters)
        warnings = []
        prop = self._parse_xml(element, parameters, warnings)
        return self._result(prop, parameters, warnings)

    def write_json(self, prop):
        """Marshal the property value to a jCard value.

        :returntype: `JCardValue`"""
        return self._write_json(prop)

    def parse_json(self, value, data_type, parameters = None):
        """Unmarshal a jCard property value.

        :Parameters:
            - `value`: the value
            - `data_type`: the data type declared in the jCard
            - `parameters`: the property parameters
        :Types:
            - `value`: `JCardValue`
            - `data_type`: `VCardDataType`
            - `parameters`: `VCardParameters`

        :returntype: `ParseResult`
        """
        parameters = VCardParameters(parameters)
        warnings = []
        prop = self._parse_json(value, data_type, parameters, warnings)
        return self._result(prop, parameters, warnings)

    def parse_html(self, element):
        """Unmarshal an hCard property element.

        :Parameters:
            - `element`: the element
        :Types:
            - `element`: `HCardElement`

        :raise CannotParseError: if the element cannot be understood

        :returntype: `ParseResult`
        """
        warnings = []
        prop = self._parse_html(element, warnings)
        return ParseResult(prop, warnings)

    @staticmethod
    def _result(prop, parameters, warnings):
        prop.parameters = parameters
        return ParseResult(prop, warnings)

    @abstractmethod
    def _default_data_type(self, version):
        raise NotImplementedError

    def _data_type(self, prop, version):
        return self.default_data_type(version)

    def _prepare_parameters(self, prop, copy, version, vcard):
        """Modify the working copy of the parameters. Does nothing by
        default."""
        pass

    @abstractmethod
    def _write_text(self, prop, version):
        raise NotImplementedError

    @abstractmethod
    def _parse_text(self, value, data_type, version, parameters, warnings):
        raise NotImplementedError

    def _write_xml(self, prop, element):
        data_type = self.data_type(prop, element.version)
        element.append(data_type, self._write_text(prop, element.version))

    def _parse_xml(self, element, parameters, warnings):
        data_type = self.default_data_type(element.version)
        value = element.first(data_type)
        if value is None:
            raise MissingValueElementError([data_type])
        return self._parse_text(escape(value), data_type, element.version,
                                                        parameters, warnings)

    def _write_json(self, prop):
        return JCardValue.single(self._write_text(prop, V4_0))

    def _parse_json(self, value, data_type, parameters, warnings):
        return self._parse_text(escape(value.as_single()), data_type, V4_0,
                                                        parameters, warnings)

    def _parse_html(self, element, warnings):
        return self._parse_text(escape(element.value()), None, V3_0,
                                        VCardParameters(), warnings)

    @staticmethod
    def escape(value):
        """Escape a plain-text value."""
        return escape(value)

    @staticmethod
    def unescape(value):
        """Unescape a plain-text value."""
        return unescape(value)

def property_scribe(property_class):
    """Class decorator generator for `VCardPropertyScribe` subclasses.

    Registers an instance of the decorated class as the scribe for
    `property_class` and for its property name.

    :Parameters:
        - `property_class`: the property class handled by the scribe
    :Types:
        - `property_class`: `type`
    """
    def decorator(klass):
        """The decorator."""
        if not issubclass(klass, VCardPropertyScribe):
            raise TypeError("Not a VCardPropertyScribe class")
        klass.property_class = property_class
        klass.property_name = property_class.property_name
        scribe = klass()
        if property_class in SCRIBES_BY_CLASS:
            logger.warning("Overriding scribe for {0!r}".format(
                                                    property_class.__name__))
        SCRIBES_BY_CLASS[property_class] = scribe
        SCRIBES_BY_NAME[property_class.property_name.upper()] = scribe
        return klass
    return decorator

def scribe_for_property(prop):
    """Find the scribe for a property object or class.

    Subclasses of registered property classes use the scribe of their
    closest registered base. Properties of unregistered classes get
    a `RawPropertyScribe` for their name.

    :returntype: `VCardPropertyScribe`
    """
    klass = prop if isinstance(prop, type) else type(prop)
    for base in klass.__mro__:
        if base in SCRIBES_BY_CLASS:
            return SCRIBES_BY_CLASS[base]
    logger.debug("No scribe registered for {0!r}".format(klass.__name__))
    return scribe_for_name(prop.property_name)

def scribe_for_name(property_name):
    """Find the scribe for a property name.

    Unknown names get a `RawPropertyScribe`.

    :returntype: `VCardPropertyScribe`
    """
    scribe = SCRIBES_BY_NAME.get(property_name.upper())
    if scribe is not None:
        return scribe
    from .text import RawPropertyScribe
    return RawPropertyScribe(property_name)
