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

"""Property marshaling.

Importing this package registers the scribes of all the property classes
in `vcardio.property`. Scribes for other property classes are registered
with the `property_scribe` class decorator.
"""

__docformat__ = "restructuredtext en"

from .core import VCardPropertyScribe, property_scribe
from .core import scribe_for_property, scribe_for_name
from .core import Emit, Omit, Unsupported, ParseResult
from .syntax import XCardElement, JCardValue, HCardElement

from . import binary
from . import text

from .binary import BinaryPropertyScribe
from .text import TextPropertyScribe, RawPropertyScribe
