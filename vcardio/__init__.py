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

"""
vcardio - vCard property marshaling
===================================

Project Information
-------------------

vcardio reads and writes vCard properties in the syntaxes defined for
them: the plain-text vCard format (versions 2.1, 3.0 and 4.0, :RFC:`6350`),
xCard (:RFC:`6351`), jCard (:RFC:`7095`) and hCard.

Basic components
----------------

vCard Data
----------

A vCard is represented by the `vcard.VCard` class, an ordered collection of
`property.VCardProperty` objects. Every property carries its own
`parameters.VCardParameters` and an optional group name.

Properties with binary values (`property.Photo`, `property.Logo`,
`property.Sound`) hold either an URL or the resource contents, together
with a content type descriptor (`mediatype.MediaTypeParameter`).

Scribes
-------

Marshaling of a property value is done by a scribe, a
`scribe.VCardPropertyScribe` subclass registered for the property class with
the `scribe.property_scribe` class decorator. The scribe for a property is
found with `scribe.scribe_for_property` or `scribe.scribe_for_name`.

xCard documents
---------------

`xcard.XCardDocument` builds an xCard document from `vcard.VCard` objects
and writes it using `xcardserializer.XCardSerializer`.

Component configuration
-----------------------

The document writers are configured with a `settings.VCardSettings`
object, which also provides the defaults.
"""

__docformat__ = "restructuredtext en"

# vi: sts=4 et sw=4
