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

"""Property parameters.

Parameters of a vCard property are kept in a `VCardParameters` object: an
ordered multimap from (case-insensitive) parameter names to lists of string
values. The typed accessors (`VCardParameters.encoding`,
`VCardParameters.media_type`, ...) are layered over the raw multimap and
translate the strings to and from richer objects.
"""

__docformat__ = "restructuredtext en"

import logging

from collections import OrderedDict
from collections.abc import Mapping

from .datatype import VCardDataType, Encoding

logger = logging.getLogger("vcardio.parameters")

ALTID = "altid"
CALSCALE = "calscale"
CHARSET = "charset"
ENCODING = "encoding"
GEO = "geo"
LABEL = "label"
LANGUAGE = "language"
MEDIATYPE = "mediatype"
PID = "pid"
PREF = "pref"
SORT_AS = "sort-as"
TYPE = "type"
TZ = "tz"
VALUE = "value"

class VCardParameters(object):
    """Parameters of a single vCard property.

    Parameter names are normalized to lower case. Iteration yields the
    names in the order they were first added.

    :Ivariables:
        - `_params`: parameter name to value list mapping
    :Types:
        - `_params`: `OrderedDict`
    """
    def __init__(self, data = None):
        """Create a parameter set, optionally initialized with `data`.

        :Parameters:
            - `data`: initial parameters: another `VCardParameters` object,
              a mapping of names to values (a single string or a list of
              strings) or an iterable of (name, value) pairs
        """
        self._params = OrderedDict()
        if data is None:
            return
        if isinstance(data, VCardParameters):
            for name, values in data._params.items():
                self._params[name] = list(values)
            return
        if isinstance(data, Mapping):
            data = data.items()
        for name, value in data:
            if isinstance(value, (list, tuple)):
                for item in value:
                    self.put(name, item)
            else:
                self.put(name, value)

    def copy(self):
        """Return an independent copy of the parameters."""
        return VCardParameters(self)

    def get(self, name, default = None):
        """Get the first value of a parameter.

        :Parameters:
            - `name`: the parameter name
            - `default`: value to return when the parameter is not set
        :Types:
            - `name`: `str`

        :returntype: `str`
        """
        values = self._params.get(name.lower())
        if not values:
            return default
        return values[0]

    def get_all(self, name):
        """Get all the values of a parameter.

        :returntype: `list` of `str`
        """
        return list(self._params.get(name.lower(), []))

    def put(self, name, value):
        """Add a parameter value, keeping the values already present."""
        if value is None:
            raise ValueError("Parameter value cannot be None")
        self._params.setdefault(name.lower(), []).append(str(value))

    def replace(self, name, value):
        """Replace all the values of a parameter with `value`.

        `None` removes the parameter.

        :return: the values replaced
        :returntype: `list` of `str`
        """
        old = self.remove(name)
        if value is not None:
            self._params[name.lower()] = [str(value)]
        return old

    def remove(self, name):
        """Remove a parameter with all its values.

        :return: the values removed
        :returntype: `list` of `str`
        """
        return self._params.pop(name.lower(), [])

    def remove_value(self, name, value):
        """Remove a single value of a parameter.

        :return: `True` if the value was there
        """
        name = name.lower()
        values = self._params.get(name)
        if not values or value not in values:
            return False
        values.remove(value)
        if not values:
            del self._params[name]
        return True

    def names(self):
        """Return the parameter names, in order."""
        return list(self._params.keys())

    def items(self):
        """Return (name, values) pairs, in order."""
        return [(name, list(values)) for name, values in self._params.items()]

    def is_empty(self):
        """Check if there are no parameters at all."""
        return not self._params

    def __contains__(self, name):
        return name.lower() in self._params

    def __iter__(self):
        return iter(list(self._params.keys()))

    def __len__(self):
        return len(self._params)

    def __eq__(self, other):
        if not isinstance(other, VCardParameters):
            return False
        return self._params == other._params

    def __ne__(self, other):
        return not self.__eq__(other)

    __hash__ = None

    def __repr__(self):
        return "VCardParameters({0!r})".format(dict(self._params))

    @property
    def encoding(self):
        """The ENCODING parameter.

        :returntype: `Encoding`"""
        return Encoding.get(self.get(ENCODING))

    @encoding.setter
    def encoding(self, value):
        self.replace(ENCODING, value)

    @property
    def value(self):
        """The VALUE parameter (value data type hint).

        :returntype: `VCardDataType`"""
        return VCardDataType.get(self.get(VALUE))

    @value.setter
    def value(self, data_type):
        self.replace(VALUE, data_type)

    @property
    def media_type(self):
        """The MEDIATYPE parameter (vCard 4.0)."""
        return self.get(MEDIATYPE)

    @media_type.setter
    def media_type(self, value):
        self.replace(MEDIATYPE, value)

    @property
    def type(self):
        """The first value of the TYPE parameter."""
        return self.get(TYPE)

    @type.setter
    def type(self, value):
        self.replace(TYPE, value)

    @property
    def types(self):
        """All the values of the TYPE parameter.

        :returntype: `list` of `str`"""
        return self.get_all(TYPE)

    @property
    def pref(self):
        """The PREF parameter.

        :returntype: `int`"""
        value = self.get(PREF)
        if value is None:
            return None
        try:
            return int(value)
        except ValueError:
            logger.debug("Bad PREF value: {0!r}".format(value))
            return None

    @pref.setter
    def pref(self, value):
        if value is not None:
            value = int(value)
            if value < 1 or value > 100:
                raise ValueError("PREF must be in the 1-100 range")
        self.replace(PREF, value)

    @property
    def language(self):
        """The LANGUAGE parameter."""
        return self.get(LANGUAGE)

    @language.setter
    def language(self, value):
        self.replace(LANGUAGE, value)

    @property
    def charset(self):
        """The CHARSET parameter (vCard 2.1)."""
        return self.get(CHARSET)

    @charset.setter
    def charset(self, value):
        self.replace(CHARSET, value)

    @property
    def alt_id(self):
        """The ALTID parameter (vCard 4.0)."""
        return self.get(ALTID)

    @alt_id.setter
    def alt_id(self, value):
        self.replace(ALTID, value)

    @property
    def label(self):
        """The LABEL parameter (vCard 4.0)."""
        return self.get(LABEL)

    @label.setter
    def label(self, value):
        self.replace(LABEL, value)
