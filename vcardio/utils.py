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

"""Utility functions for the vcardio package."""

__docformat__ = "restructuredtext en"

import re

ESCAPE_RE = re.compile(r"([\\,;])")
UNESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)

def escape(value):
    """Escape a plain-text property value (backslash, comma and semicolon).

    :Parameters:
        - `value`: the raw value
    :Types:
        - `value`: `str`

    :returntype: `str`
    """
    return ESCAPE_RE.sub(r"\\\1", value)

def _unescape_char(match):
    char = match.group(1)
    if char in "nN":
        return "\n"
    return char

def unescape(value):
    """Reverse the plain-text value escaping.

    "\\n" and "\\N" become newlines, any other escaped character is taken
    literally.

    :Parameters:
        - `value`: the escaped value
    :Types:
        - `value`: `str`

    :returntype: `str`
    """
    return UNESCAPE_RE.sub(_unescape_char, value)

def xml_elements_equal(element1, element2, ignore_level1_cdata = False):
    """Check if two XML elements are equal.

    :Parameters:
        - `element1`: the first element to compare
        - `element2`: the other element to compare
        - `ignore_level1_cdata`: if direct text children of the elements
          should be ignored for the comparision
    :Types:
        - `element1`: :etree:`ElementTree.Element`
        - `element2`: :etree:`ElementTree.Element`
        - `ignore_level1_cdata`: `bool`

    :Returntype: `bool`
    """
    # pylint: disable=R0911
    if None in (element1, element2) or element1.tag != element2.tag:
        return False
    attrs1 = sorted(element1.items())
    attrs2 = sorted(element2.items())

    if not ignore_level1_cdata:
        if (element1.text or "").strip() != (element2.text or "").strip():
            return False

    if attrs1 != attrs2:
        return False

    if len(element1) != len(element2):
        return False
    for child1, child2 in zip(element1, element2):
        if not xml_elements_equal(child1, child2):
            return False
    return True
