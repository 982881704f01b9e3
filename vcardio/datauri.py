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

"""Base64 and data URI helpers.

Normative reference:
  - :RFC:`2397`
"""

__docformat__ = "restructuredtext en"

import re
import base64
import binascii
import logging

logger = logging.getLogger("vcardio.datauri")

DATA_URI_RE = re.compile(r"^data:(.*?);base64,(.*)$", re.IGNORECASE | re.DOTALL)
NON_BASE64_RE = re.compile(r"[^A-Za-z0-9+/]")

def encode_base64(data):
    """Encode binary data with base64.

    :Parameters:
        - `data`: the data
    :Types:
        - `data`: `bytes`

    :returntype: `str`"""
    return base64.b64encode(data).decode("ascii")

def decode_base64(value):
    """Decode base64 data, ignoring anything that does not belong there.

    Line breaks and other whitespace, characters outside of the base64
    alphabet and anything after the first padding character are dropped.
    The URL-safe alphabet is accepted too. Never fails: garbage input
    produces garbage (possibly empty) output.

    :Parameters:
        - `value`: base64-encoded text
    :Types:
        - `value`: `str`

    :returntype: `bytes`"""
    value = value.split("=", 1)[0]
    value = value.replace("-", "+").replace("_", "/")
    value = NON_BASE64_RE.sub("", value)
    if len(value) % 4 == 1:
        logger.debug("Truncated base64 data, dropping the last character")
        value = value[:-1]
    value += "=" * (-len(value) % 4)
    try:
        return base64.b64decode(value)
    except (binascii.Error, ValueError) as err:
        logger.debug("base64 decoding failed: {0}".format(err))
        return b""

class DataUri(object):
    """A data URI with base64-encoded payload.

    :Ivariables:
        - `content_type`: the media type of the data
        - `data`: the payload
    :Types:
        - `content_type`: `str`
        - `data`: `bytes`
    """
    __slots__ = ("content_type", "data")
    def __init__(self, content_type, data):
        self.content_type = content_type
        self.data = data

    @classmethod
    def parse(cls, uri):
        """Parse a data URI string.

        :Parameters:
            - `uri`: the URI
        :Types:
            - `uri`: `str`

        :raise ValueError: if `uri` is not a base64 data URI

        :returntype: `DataUri`"""
        if uri is None:
            raise ValueError("Not a data URI: None")
        match = DATA_URI_RE.match(uri)
        if not match:
            raise ValueError("Not a data URI: {0!r}".format(uri[:40]))
        content_type, payload = match.groups()
        return cls(content_type, decode_base64(payload))

    def __str__(self):
        return "data:{0};base64,{1}".format(self.content_type,
                                                    encode_base64(self.data))

    def __eq__(self, other):
        if not isinstance(other, DataUri):
            return False
        return (self.content_type == other.content_type
                                                and self.data == other.data)

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash((self.content_type, self.data))

    def __repr__(self):
        return "<DataUri {0} ({1} bytes)>".format(self.content_type,
                                                            len(self.data))
