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

"""vcardio exceptions."""

__docformat__ = "restructuredtext en"

class VCardError(Exception):
    """Base class for all vcardio exceptions."""
    pass

class CannotParseError(VCardError, ValueError):
    """Raised when a property value cannot be unmarshalled at all.

    Aborts parsing of the single property only, the caller decides what to
    do with the rest of the document."""
    pass

class MissingValueElementError(CannotParseError):
    """Raised when a required value element is missing in an xCard property.

    :Ivariables:
        - `data_types`: the data types of the value elements expected
    :Types:
        - `data_types`: `list` of `VCardDataType`
    """
    def __init__(self, data_types):
        self.data_types = list(data_types)
        names = ", ".join("<{0}>".format(data_type)
                                            for data_type in self.data_types)
        CannotParseError.__init__(self,
                        "Property value empty (missing expected value"
                                            " element: {0}).".format(names))
