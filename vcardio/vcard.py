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

"""The vCard container."""

__docformat__ = "restructuredtext en"

import logging

from .property import VCardProperty, FormattedName, Kind
from .vcardversion import V3_0

logger = logging.getLogger("vcardio.vcard")

class VCard(object):
    """A vCard: an ordered collection of properties.

    :Ivariables:
        - `version`: the version the vCard was read as, or should be written
          as (when the output syntax supports more than one)
        - `_properties`: the properties, in order
    :Types:
        - `version`: `VCardVersion`
        - `_properties`: `list` of `VCardProperty`
    """
    def __init__(self, properties = None, version = V3_0):
        self.version = version
        self._properties = []
        if properties:
            for prop in properties:
                self.add_property(prop)

    def add_property(self, prop, group = None):
        """Append a property.

        :Parameters:
            - `prop`: the property
            - `group`: group name to set on the property, if not `None`
        :Types:
            - `prop`: `VCardProperty`
            - `group`: `str`

        :return: `prop`
        """
        if not isinstance(prop, VCardProperty):
            raise TypeError("VCardProperty required, got {0!r}".format(prop))
        if group is not None:
            prop.group = group
        self._properties.append(prop)
        return prop

    def remove_property(self, prop):
        """Remove a single property object."""
        self._properties.remove(prop)

    def remove_properties(self, klass):
        """Remove all the properties of given class.

        :return: the properties removed
        :returntype: `list` of `VCardProperty`
        """
        removed = [p for p in self._properties if isinstance(p, klass)]
        self._properties = [p for p in self._properties
                                                if not isinstance(p, klass)]
        return removed

    def get_properties(self, klass = None):
        """Return the properties, all or only the ones of class `klass`.

        :returntype: `list` of `VCardProperty`
        """
        if klass is None:
            return list(self._properties)
        return [p for p in self._properties if isinstance(p, klass)]

    def get_property(self, klass):
        """Return the first property of class `klass` or `None`."""
        for prop in self._properties:
            if isinstance(prop, klass):
                return prop
        return None

    def set_property(self, klass, prop):
        """Replace all properties of class `klass` with `prop`.

        `None` just removes them."""
        self.remove_properties(klass)
        if prop is not None:
            self.add_property(prop)
        return prop

    @property
    def formatted_name(self):
        """The first FN property.

        :returntype: `FormattedName`"""
        return self.get_property(FormattedName)

    @formatted_name.setter
    def formatted_name(self, value):
        if isinstance(value, str):
            value = FormattedName(value)
        self.set_property(FormattedName, value)

    @property
    def kind(self):
        """The KIND property.

        :returntype: `Kind`"""
        return self.get_property(Kind)

    @kind.setter
    def kind(self, value):
        if isinstance(value, str):
            value = Kind(value)
        self.set_property(Kind, value)

    def is_group(self):
        """Check if the vCard represents a group (KIND:group)."""
        kind = self.kind
        return kind is not None and kind.is_group()

    def __iter__(self):
        return iter(list(self._properties))

    def __len__(self):
        return len(self._properties)

    def __repr__(self):
        return "<VCard {0!r}>".format(self._properties)
