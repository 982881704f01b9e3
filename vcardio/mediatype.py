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

"""Content type descriptors of binary properties.

vCard 2.1 and 3.0 describe the content type of embedded or linked resources
with a short TYPE parameter token (e.g. "JPEG"), vCard 4.0 with a MEDIATYPE
parameter holding a full media type ("image/jpeg"). A `MediaTypeParameter`
carries both forms, plus the usual file extension.
"""

__docformat__ = "restructuredtext en"

import logging

logger = logging.getLogger("vcardio.mediatype")

class MediaTypeParameter(object):
    """Content type descriptor.

    :Ivariables:
        - `value`: the TYPE parameter token used by vCard 2.1 and 3.0
        - `media_type`: the media type ("type/subtype") used by vCard 4.0
        - `extension`: the file extension, without the dot
    :Types:
        - `value`: `str`
        - `media_type`: `str`
        - `extension`: `str`
    """
    _known = None
    def __init__(self, value = None, media_type = None, extension = None):
        self.value = value
        self.media_type = media_type
        self.extension = extension

    @property
    def type(self):
        """Top-level part of the media type (e.g. "image")."""
        if not self.media_type:
            return None
        return self.media_type.split("/", 1)[0]

    @property
    def subtype(self):
        """The subtype part of the media type (e.g. "jpeg")."""
        if not self.media_type or "/" not in self.media_type:
            return None
        return self.media_type.split("/", 1)[1]

    @classmethod
    def register(cls, value, media_type, extension):
        """Create a well-known content type of this class."""
        if "_known" not in cls.__dict__ or cls.__dict__["_known"] is None:
            cls._known = []
        obj = cls(value, media_type, extension)
        cls._known.append(obj)
        return obj

    @classmethod
    def find(cls, value = None, media_type = None, extension = None):
        """Look up a well-known content type.

        All the criteria given must match (case-insensitively).

        :return: the content type found or `None`
        :returntype: `cls`
        """
        if value is None and media_type is None and extension is None:
            return None
        for known in cls.__dict__.get("_known") or []:
            if not _match(value, known.value):
                continue
            if not _match(media_type, known.media_type):
                continue
            if not _match(extension, known.extension):
                continue
            return known
        return None

    @classmethod
    def get(cls, value = None, media_type = None, extension = None):
        """Look up a well-known content type or create a new one.

        :returntype: `cls`
        """
        known = cls.find(value, media_type, extension)
        if known is not None:
            return known
        logger.debug("Unknown {0}: value={1!r} media_type={2!r}".format(
                                    cls.__name__, value, media_type))
        return cls(value, media_type, extension)

    @classmethod
    def from_type_parameter(cls, value):
        """Build a content type from a vCard 2.1/3.0 TYPE parameter."""
        known = cls.find(value = value)
        if known is None and value and "/" in value:
            known = cls.find(media_type = value)
        if known is not None:
            return known
        return cls(value, None, None)

    @classmethod
    def from_media_type(cls, media_type):
        """Build a content type from a vCard 4.0 MEDIATYPE parameter or
        a data URI."""
        return cls.get(media_type = media_type)

    def __eq__(self, other):
        if not isinstance(other, MediaTypeParameter):
            return False
        return (self.value, self.media_type, self.extension) == (
                        other.value, other.media_type, other.extension)

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash((self.value, self.media_type, self.extension))

    def __repr__(self):
        return "<{0} value={1!r} media_type={2!r}>".format(
                        self.__class__.__name__, self.value, self.media_type)

def _match(wanted, actual):
    """Case-insensitive comparision, `None` as `wanted` matches anything."""
    if wanted is None:
        return True
    if actual is None:
        return False
    return wanted.lower() == actual.lower()

class ImageType(MediaTypeParameter):
    """Content type of PHOTO and LOGO properties."""
    pass

ImageType.GIF = ImageType.register("GIF", "image/gif", "gif")
ImageType.JPEG = ImageType.register("JPEG", "image/jpeg", "jpg")
ImageType.PNG = ImageType.register("PNG", "image/png", "png")

class SoundType(MediaTypeParameter):
    """Content type of SOUND properties."""
    pass

SoundType.AAC = SoundType.register("AAC", "audio/aac", "aac")
SoundType.MIDI = SoundType.register("MIDI", "audio/midi", "mid")
SoundType.MP3 = SoundType.register("MP3", "audio/mp3", "mp3")
SoundType.MPEG = SoundType.register("MPEG", "audio/mpeg", "mpeg")
SoundType.MPEG4 = SoundType.register("MPEG4", "audio/mp4", "mp4")
SoundType.OGG = SoundType.register("OGG", "audio/ogg", "ogg")
SoundType.WAV = SoundType.register("WAV", "audio/wav", "wav")
