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

"""Named parameter values: property data types and encodings.

Both are compared case-insensitively on the wire, but their canonical
spelling is kept for output."""

__docformat__ = "restructuredtext en"

import logging

logger = logging.getLogger("vcardio.datatype")

class NamedValue(object):
    """Base for case-insensitive named values.

    Every subclass keeps its own registry of the well-known values.
    `get` returns the registered instance or creates a new (unregistered)
    one, `find` returns only registered ones.

    :Ivariables:
        - `name`: canonical spelling of the value
    :Types:
        - `name`: `str`
    """
    __slots__ = ("name",)
    _registry = None
    def __init__(self, name):
        self.name = name

    @classmethod
    def register(cls, name):
        """Create a well-known value."""
        if cls._registry is None or "_registry" not in cls.__dict__:
            cls._registry = {}
        value = cls(name)
        cls._registry[name.lower()] = value
        return value

    @classmethod
    def find(cls, name):
        """Return a well-known value or `None`."""
        if name is None or not cls.__dict__.get("_registry"):
            return None
        return cls._registry.get(name.lower())

    @classmethod
    def get(cls, name):
        """Return a well-known value or a new value object for `name`."""
        if name is None:
            return None
        value = cls.find(name)
        if value is None:
            logger.debug("Unknown {0} value: {1!r}".format(cls.__name__,
                                                                    name))
            value = cls(name)
        return value

    @classmethod
    def all(cls):
        """Return all the well-known values."""
        return list(cls.__dict__.get("_registry", {}).values())

    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            return False
        return self.name.lower() == other.name.lower()

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash(self.name.lower())

    def __str__(self):
        return self.name

    def __repr__(self):
        return "<{0} {1!r}>".format(self.__class__.__name__, self.name)

class VCardDataType(NamedValue):
    """Property value data type (the VALUE parameter).

    The name is also the local name of the value element in xCard."""
    __slots__ = ()
    URL = None
    URI = None
    TEXT = None

VCardDataType.BINARY = VCardDataType.register("binary")
VCardDataType.BOOLEAN = VCardDataType.register("boolean")
VCardDataType.CONTENT_ID = VCardDataType.register("content-id")
VCardDataType.DATE = VCardDataType.register("date")
VCardDataType.DATE_TIME = VCardDataType.register("date-time")
VCardDataType.DATE_AND_OR_TIME = VCardDataType.register("date-and-or-time")
VCardDataType.FLOAT = VCardDataType.register("float")
VCardDataType.INTEGER = VCardDataType.register("integer")
VCardDataType.LANGUAGE_TAG = VCardDataType.register("language-tag")
VCardDataType.TEXT = VCardDataType.register("text")
VCardDataType.TIME = VCardDataType.register("time")
VCardDataType.TIMESTAMP = VCardDataType.register("timestamp")
VCardDataType.URI = VCardDataType.register("uri")
VCardDataType.URL = VCardDataType.register("url")
VCardDataType.UTC_OFFSET = VCardDataType.register("utc-offset")

class Encoding(NamedValue):
    """Value encoding (the ENCODING parameter).

    vCard 2.1 spells base64 as "BASE64", vCard 3.0 as "b". Both spellings
    are distinct values."""
    __slots__ = ()
    BASE64 = None
    B = None

Encoding.BASE64 = Encoding.register("BASE64")
Encoding.B = Encoding.register("b")
Encoding.QUOTED_PRINTABLE = Encoding.register("QUOTED-PRINTABLE")
Encoding.BIT7 = Encoding.register("7BIT")
Encoding.BIT8 = Encoding.register("8BIT")
