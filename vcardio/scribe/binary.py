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

"""Scribes for properties with binary values (PHOTO, LOGO, SOUND).

A binary property either links to a resource by URL or embeds it.

How an embedded resource is written depends on the version:

  - vCard 2.1 and 3.0 write base64 data, with the ENCODING parameter
    ("BASE64" or "b") and the content type in the TYPE parameter
  - vCard 4.0 writes a data URI, the content type being part of it

URLs are written as they are, with the content type in the TYPE (2.1, 3.0)
or MEDIATYPE (4.0) parameter.
"""

__docformat__ = "restructuredtext en"

import logging

from abc import abstractmethod
from collections import namedtuple

from ..constants import DEFAULT_MEDIA_TYPE
from ..datatype import VCardDataType, Encoding
from ..datauri import DataUri, encode_base64, decode_base64
from ..exceptions import CannotParseError, MissingValueElementError
from ..mediatype import ImageType, SoundType
from ..property import Photo, Logo, Sound
from ..vcardversion import V2_1, V3_0, V4_0
from .core import VCardPropertyScribe, property_scribe
from .syntax import JCardValue

logger = logging.getLogger("vcardio.scribe.binary")

BinaryPolicy = namedtuple("BinaryPolicy", ["url_data_type", "data_data_type",
                            "default_data_type", "base64_encoding", "legacy"])

# data types and encodings of binary values, per version
BINARY_POLICIES = {
        V2_1: BinaryPolicy(VCardDataType.URL, None, None, Encoding.BASE64,
                                                                        True),
        V3_0: BinaryPolicy(VCardDataType.URI, None, None, Encoding.B, True),
        V4_0: BinaryPolicy(VCardDataType.URI, VCardDataType.URI,
                                            VCardDataType.URI, None, False),
    }

BASE64_ENCODINGS = (Encoding.BASE64, Encoding.B)

class BinaryPropertyScribe(VCardPropertyScribe):
    """Base class for scribes of `BinaryProperty` subclasses.

    Subclasses provide the content type builders and the property
    constructors.
    """
    def _default_data_type(self, version):
        return BINARY_POLICIES[version].default_data_type

    def _data_type(self, prop, version):
        policy = BINARY_POLICIES[version]
        if prop.url is not None:
            return policy.url_data_type
        if prop.data is not None:
            return policy.data_data_type
        return self.default_data_type(version)

    def _prepare_parameters(self, prop, copy, version, vcard):
        policy = BINARY_POLICIES[version]
        content_type = prop.content_type
        if content_type is None:
            content_type = self._empty_content_type()

        if prop.url is not None:
            copy.encoding = None
            if policy.legacy:
                copy.type = content_type.value
                copy.media_type = None
            else:
                copy.media_type = content_type.media_type
            return

        if prop.data is not None:
            copy.media_type = None
            copy.encoding = policy.base64_encoding
            if policy.legacy:
                copy.type = content_type.value
            # TYPE is kept for 4.0, it may hold "home", "work", etc.

    def _write_text(self, prop, version):
        return self._write(prop, version)

    def _parse_text(self, value, data_type, version, parameters, warnings):
        value = self.unescape(value)
        return self._parse(value, data_type, parameters, version, warnings)

    def _write_xml(self, prop, element):
        element.append(VCardDataType.URI, self._write(prop, element.version))

    def _parse_xml(self, element, parameters, warnings):
        value = element.first(VCardDataType.URI)
        if value is None:
            raise MissingValueElementError([VCardDataType.URI])
        return self._parse(value, VCardDataType.URI, parameters,
                                                    element.version, warnings)

    def _write_json(self, prop):
        return JCardValue.single(self._write(prop, V4_0))

    def _parse_json(self, value, data_type, parameters, warnings):
        return self._parse(value.as_single(), data_type, parameters, V4_0,
                                                                    warnings)

    def _parse_html(self, element, warnings):
        tag_name = element.tag_name()
        if tag_name != "object":
            raise CannotParseError("Cannot parse <{0}> tag (<object> tag"
                                                " expected).".format(tag_name))
        data = element.abs_url("data")
        if not data:
            raise CannotParseError("<object> tag does not have a \"data\""
                                                                " attribute.")
        try:
            uri = DataUri.parse(data)
        except ValueError:
            content_type = None
            type_attr = element.attr("type")
            if type_attr:
                content_type = self._build_media_type_obj(type_attr)
            return self._new_instance_url(data, content_type)
        content_type = self._build_media_type_obj(uri.content_type)
        return self._new_instance_data(uri.data, content_type)

    def _cannot_unmarshal_value(self, value, version, warnings, content_type):
        """Build a property from a value whose form could not be determined
        from the data type and parameters.

        For vCard 2.1 and 3.0 values starting with "http" are taken as URLs,
        anything else is decoded as base64, even if it is not valid base64.
        vCard 4.0 values are taken as URLs.

        Never fails.
        """
        if BINARY_POLICIES[version].legacy:
            if value.startswith("http"):
                return self._new_instance_url(value, content_type)
            warnings.append("{0} value has no base64 ENCODING parameter,"
                        " decoding it as base64 anyway.".format(
                                                        self.property_name))
            return self._new_instance_data(decode_base64(value), content_type)
        return self._new_instance_url(value, content_type)

    def _parse_content_type(self, parameters, version):
        """Get the content type from the TYPE (2.1, 3.0) or MEDIATYPE (4.0)
        parameter."""
        if BINARY_POLICIES[version].legacy:
            type_value = parameters.type
            if type_value is not None:
                return self._build_type_obj(type_value)
        else:
            media_type = parameters.media_type
            if media_type is not None:
                return self._build_media_type_obj(media_type)
        return None

    def _parse(self, value, data_type, parameters, version, warnings):
        content_type = self._parse_content_type(parameters, version)
        if BINARY_POLICIES[version].legacy:
            if data_type in (VCardDataType.URL, VCardDataType.URI):
                return self._new_instance_url(value, content_type)
            if parameters.encoding in BASE64_ENCODINGS:
                return self._new_instance_data(decode_base64(value),
                                                                content_type)
        else:
            try:
                uri = DataUri.parse(value)
            except ValueError:
                logger.debug("{0} value is not a data URI".format(
                                                        self.property_name))
            else:
                content_type = self._build_media_type_obj(uri.content_type)
                return self._new_instance_data(uri.data, content_type)
        return self._cannot_unmarshal_value(value, version, warnings,
                                                                content_type)

    def _write(self, prop, version):
        if prop.url is not None:
            return prop.url
        if prop.data is not None:
            if BINARY_POLICIES[version].legacy:
                return encode_base64(prop.data)
            content_type = prop.content_type
            if content_type is not None and content_type.media_type:
                media_type = content_type.media_type
            else:
                media_type = DEFAULT_MEDIA_TYPE
            return str(DataUri(media_type, prop.data))
        return ""

    @abstractmethod
    def _empty_content_type(self):
        """Build a content type object with no type or media type."""
        raise NotImplementedError

    @abstractmethod
    def _build_media_type_obj(self, media_type):
        """Build a content type object from a vCard 4.0 MEDIATYPE parameter
        or data URI media type ("image/jpeg")."""
        raise NotImplementedError

    @abstractmethod
    def _build_type_obj(self, type_value):
        """Build a content type object from a vCard 2.1/3.0 TYPE parameter
        ("JPEG")."""
        raise NotImplementedError

    def _new_instance_url(self, url, content_type):
        """Create a property linking to `url`."""
        return self.property_class(url, content_type)

    def _new_instance_data(self, data, content_type):
        """Create a property embedding `data`."""
        return self.property_class(data, content_type)

class ImagePropertyScribe(BinaryPropertyScribe):
    """Base for scribes of properties with `ImageType` content type."""
    def _empty_content_type(self):
        return ImageType(None, None, None)

    def _build_media_type_obj(self, media_type):
        return ImageType.from_media_type(media_type)

    def _build_type_obj(self, type_value):
        return ImageType.from_type_parameter(type_value)

@property_scribe(Photo)
class PhotoScribe(ImagePropertyScribe):
    """PHOTO scribe."""
    pass

@property_scribe(Logo)
class LogoScribe(ImagePropertyScribe):
    """LOGO scribe."""
    pass

@property_scribe(Sound)
class SoundScribe(BinaryPropertyScribe):
    """SOUND scribe."""
    def _empty_content_type(self):
        return SoundType(None, None, None)

    def _build_media_type_obj(self, media_type):
        return SoundType.from_media_type(media_type)

    def _build_type_obj(self, type_value):
        return SoundType.from_type_parameter(type_value)
