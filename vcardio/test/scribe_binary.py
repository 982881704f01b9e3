#!/usr/bin/python
# -*- coding: UTF-8 -*-
# pylint: disable=C0111

"""Tests for vcardio.scribe.binary"""

import unittest

from vcardio.etree import ElementTree
from vcardio.constants import XCARD_QNP
from vcardio.datatype import VCardDataType, Encoding
from vcardio.exceptions import CannotParseError, MissingValueElementError
from vcardio.mediatype import ImageType, SoundType
from vcardio.parameters import VCardParameters
from vcardio.property import Photo, Logo, Sound
from vcardio.scribe import scribe_for_property, Emit
from vcardio.scribe import XCardElement, JCardValue, HCardElement
from vcardio.scribe.binary import PhotoScribe, SoundScribe
from vcardio.vcardversion import V2_1, V3_0, V4_0, ALL_VERSIONS

URL = "http://example.com/photo.jpg"
DATA = b"ABC"
DATA_B64 = "QUJD"
DATA_URI = "data:image/jpeg;base64,QUJD"

class TestBinaryDataType(unittest.TestCase):
    def setUp(self):
        self.scribe = scribe_for_property(Photo)

    def test_registered(self):
        self.assertIsInstance(self.scribe, PhotoScribe)
        self.assertIsInstance(scribe_for_property(Sound), SoundScribe)
        self.assertEqual(scribe_for_property(Logo).property_name, "LOGO")

    def test_default_data_type(self):
        self.assertIsNone(self.scribe.default_data_type(V2_1))
        self.assertIsNone(self.scribe.default_data_type(V3_0))
        self.assertEqual(self.scribe.default_data_type(V4_0),
                                                        VCardDataType.URI)

    def test_url_data_type(self):
        photo = Photo(URL)
        self.assertEqual(self.scribe.data_type(photo, V2_1),
                                                        VCardDataType.URL)
        self.assertEqual(self.scribe.data_type(photo, V3_0),
                                                        VCardDataType.URI)
        self.assertEqual(self.scribe.data_type(photo, V4_0),
                                                        VCardDataType.URI)

    def test_data_data_type(self):
        photo = Photo(DATA)
        self.assertIsNone(self.scribe.data_type(photo, V2_1))
        self.assertIsNone(self.scribe.data_type(photo, V3_0))
        self.assertEqual(self.scribe.data_type(photo, V4_0),
                                                        VCardDataType.URI)

    def test_empty(self):
        photo = Photo()
        for version in ALL_VERSIONS:
            self.assertEqual(self.scribe.write_text(photo, version), "")
            self.assertEqual(self.scribe.data_type(photo, version),
                                    self.scribe.default_data_type(version))

    def test_url_data_exclusive(self):
        photo = Photo(URL)
        photo.data = DATA
        self.assertIsNone(photo.url)
        self.assertEqual(self.scribe.write_text(photo, V3_0), DATA_B64)
        photo.url = URL
        self.assertIsNone(photo.data)
        self.assertEqual(self.scribe.write_text(photo, V3_0), URL)

class TestBinaryPrepareParameters(unittest.TestCase):
    def setUp(self):
        self.scribe = scribe_for_property(Photo)

    def test_url_legacy(self):
        photo = Photo(URL, ImageType.JPEG)
        photo.parameters = {"ENCODING": "b", "MEDIATYPE": "image/jpeg"}
        params = self.scribe.prepare_parameters(photo, V2_1)
        self.assertIsNone(params.encoding)
        self.assertIsNone(params.media_type)
        self.assertEqual(params.type, "JPEG")
        self.assertEqual(params.value, VCardDataType.URL)
        params = self.scribe.prepare_parameters(photo, V3_0)
        self.assertIsNone(params.encoding)
        self.assertEqual(params.type, "JPEG")
        self.assertEqual(params.value, VCardDataType.URI)

    def test_url_4_0(self):
        photo = Photo(URL, ImageType.JPEG)
        photo.parameters = {"TYPE": "home", "ENCODING": "b"}
        params = self.scribe.prepare_parameters(photo, V4_0)
        self.assertEqual(params.media_type, "image/jpeg")
        self.assertEqual(params.types, ["home"])
        self.assertIsNone(params.encoding)
        # uri is the default data type for 4.0
        self.assertFalse("value" in params)

    def test_url_no_content_type(self):
        photo = Photo(URL)
        photo.parameters = {"TYPE": "JPEG", "MEDIATYPE": "image/jpeg"}
        params = self.scribe.prepare_parameters(photo, V3_0)
        self.assertIsNone(params.type)
        self.assertIsNone(params.media_type)
        params = self.scribe.prepare_parameters(photo, V4_0)
        self.assertIsNone(params.media_type)

    def test_data_2_1(self):
        photo = Photo(DATA, ImageType.PNG)
        photo.parameters = {"MEDIATYPE": "image/png"}
        params = self.scribe.prepare_parameters(photo, V2_1)
        self.assertIs(params.encoding, Encoding.BASE64)
        self.assertEqual(params.get("encoding"), "BASE64")
        self.assertEqual(params.type, "PNG")
        self.assertIsNone(params.media_type)
        self.assertFalse("value" in params)

    def test_data_3_0(self):
        photo = Photo(DATA, ImageType.PNG)
        params = self.scribe.prepare_parameters(photo, V3_0)
        self.assertIs(params.encoding, Encoding.B)
        self.assertEqual(params.get("encoding"), "b")
        self.assertEqual(params.type, "PNG")
        self.assertFalse("value" in params)

    def test_data_4_0(self):
        photo = Photo(DATA, ImageType.PNG)
        photo.parameters = {"TYPE": "work", "ENCODING": "b"}
        params = self.scribe.prepare_parameters(photo, V4_0)
        self.assertIsNone(params.encoding)
        self.assertIsNone(params.media_type)
        self.assertEqual(params.types, ["work"])
        self.assertFalse("value" in params)

    def test_stale_value_removed(self):
        photo = Photo(DATA, ImageType.PNG)
        photo.parameters = {"VALUE": "uri"}
        params = self.scribe.prepare_parameters(photo, V3_0)
        self.assertFalse("value" in params)

    def test_property_parameters_untouched(self):
        for prop in (Photo(URL, ImageType.JPEG), Photo(DATA, ImageType.JPEG),
                                                                    Photo()):
            prop.parameters = {"TYPE": "home", "ENCODING": "b",
                                                    "MEDIATYPE": "x/y"}
            before = prop.parameters.copy()
            for version in ALL_VERSIONS:
                params = self.scribe.prepare_parameters(prop, version)
                params.put("x-test", "1")
                self.assertEqual(prop.parameters, before)
                self.assertIsNot(params, prop.parameters)

class TestBinaryText(unittest.TestCase):
    def setUp(self):
        self.scribe = scribe_for_property(Photo)

    def test_write_url(self):
        photo = Photo(URL, ImageType.JPEG)
        for version in ALL_VERSIONS:
            self.assertEqual(self.scribe.write_text(photo, version), URL)

    def test_write_data(self):
        photo = Photo(DATA, ImageType.JPEG)
        self.assertEqual(self.scribe.write_text(photo, V2_1), DATA_B64)
        self.assertEqual(self.scribe.write_text(photo, V3_0), DATA_B64)
        self.assertEqual(self.scribe.write_text(photo, V4_0), DATA_URI)

    def test_write_data_no_content_type(self):
        photo = Photo(DATA)
        self.assertEqual(self.scribe.write_text(photo, V4_0),
                            "data:application/octet-stream;base64,QUJD")

    def test_parse_base64_2_1(self):
        params = VCardParameters({"ENCODING": "BASE64", "TYPE": "JPEG"})
        result = self.scribe.parse_text(DATA_B64, None, V2_1, params)
        photo = result.property
        self.assertIsInstance(photo, Photo)
        self.assertEqual(photo.data, DATA)
        self.assertIsNone(photo.url)
        self.assertIs(photo.content_type, ImageType.JPEG)
        self.assertEqual(result.warnings, [])
        self.assertEqual(photo.parameters, params)

    def test_parse_base64_3_0(self):
        params = VCardParameters({"ENCODING": "b", "TYPE": "png"})
        result = self.scribe.parse_text(DATA_B64, None, V3_0, params)
        self.assertEqual(result.property.data, DATA)
        self.assertIs(result.property.content_type, ImageType.PNG)
        self.assertEqual(result.warnings, [])

    def test_legacy_round_trip(self):
        for version in (V2_1, V3_0):
            photo = Photo(DATA, ImageType.GIF)
            params = self.scribe.prepare_parameters(photo, version)
            text = self.scribe.write_text(photo, version)
            self.assertEqual(text, DATA_B64)
            result = self.scribe.parse_text(text, params.value, version,
                                                                    params)
            self.assertEqual(result.property.data, DATA)
            self.assertIs(result.property.content_type, ImageType.GIF)

    def test_parse_url(self):
        params = VCardParameters({"TYPE": "JPEG"})
        result = self.scribe.parse_text(URL, VCardDataType.URL, V2_1, params)
        self.assertEqual(result.property.url, URL)
        self.assertIsNone(result.property.data)
        self.assertIs(result.property.content_type, ImageType.JPEG)
        result = self.scribe.parse_text(URL, VCardDataType.URI, V3_0)
        self.assertEqual(result.property.url, URL)
        self.assertIsNone(result.property.content_type)

    def test_parse_unescapes(self):
        result = self.scribe.parse_text("http://example.com/a\\,b.jpg",
                                                VCardDataType.URI, V3_0)
        self.assertEqual(result.property.url, "http://example.com/a,b.jpg")

    def test_parse_legacy_http_without_hints(self):
        result = self.scribe.parse_text(URL, None, V3_0)
        self.assertEqual(result.property.url, URL)
        self.assertEqual(result.warnings, [])

    def test_parse_legacy_base64_without_encoding(self):
        result = self.scribe.parse_text(DATA_B64, None, V2_1)
        self.assertEqual(result.property.data, DATA)
        self.assertEqual(len(result.warnings), 1)
        self.assertTrue("PHOTO" in result.warnings[0])

    def test_parse_legacy_garbage(self):
        result = self.scribe.parse_text("not base64 at all!", None, V3_0)
        self.assertIsNotNone(result.property.data)
        self.assertIsNone(result.property.url)
        self.assertEqual(len(result.warnings), 1)

    def test_parse_data_uri(self):
        params = VCardParameters({"MEDIATYPE": "image/png"})
        result = self.scribe.parse_text(DATA_URI, VCardDataType.URI, V4_0,
                                                                    params)
        photo = result.property
        self.assertEqual(photo.data, DATA)
        self.assertIsNone(photo.url)
        # the media type of the data URI wins
        self.assertEqual(photo.content_type.media_type, "image/jpeg")
        self.assertEqual(self.scribe.write_text(photo, V4_0), DATA_URI)

    def test_parse_4_0_url(self):
        params = VCardParameters({"MEDIATYPE": "image/png"})
        result = self.scribe.parse_text("http://example.com/a.png",
                                    VCardDataType.URI, V4_0, params)
        self.assertEqual(result.property.url, "http://example.com/a.png")
        self.assertIs(result.property.content_type, ImageType.PNG)
        result = self.scribe.parse_text("photo.png", None, V4_0)
        self.assertEqual(result.property.url, "photo.png")
        self.assertEqual(result.warnings, [])

    def test_sound(self):
        scribe = scribe_for_property(Sound)
        params = VCardParameters({"ENCODING": "b", "TYPE": "WAV"})
        result = scribe.parse_text(DATA_B64, None, V3_0, params)
        self.assertIsInstance(result.property, Sound)
        self.assertIs(result.property.content_type, SoundType.WAV)
        sound = Sound(DATA, SoundType.OGG)
        self.assertEqual(scribe.write_text(sound, V4_0),
                                            "data:audio/ogg;base64,QUJD")
        params = scribe.prepare_parameters(sound, V3_0)
        self.assertEqual(params.type, "OGG")

class TestBinaryXML(unittest.TestCase):
    def setUp(self):
        self.scribe = scribe_for_property(Photo)

    def test_write(self):
        element = XCardElement(ElementTree.Element(XCARD_QNP + "photo"))
        outcome = self.scribe.write_xml(Photo(DATA, ImageType.JPEG), element)
        self.assertIsInstance(outcome, Emit)
        self.assertIs(outcome.element, element.element)
        self.assertEqual(len(outcome.element), 1)
        self.assertEqual(outcome.element[0].tag, XCARD_QNP + "uri")
        self.assertEqual(outcome.element[0].text, DATA_URI)

    def test_write_url(self):
        element = XCardElement(ElementTree.Element(XCARD_QNP + "photo"))
        self.scribe.write_xml(Photo(URL), element)
        self.assertEqual(element.all(VCardDataType.URI), [URL])

    def test_parse(self):
        xml = ElementTree.XML("<photo xmlns='urn:ietf:params:xml:ns:vcard-4.0'>"
                        "<uri>data:image/png;base64,QUJD</uri></photo>")
        result = self.scribe.parse_xml(XCardElement(xml))
        self.assertEqual(result.property.data, DATA)
        self.assertIs(result.property.content_type, ImageType.PNG)

    def test_parse_url(self):
        xml = ElementTree.XML("<photo xmlns='urn:ietf:params:xml:ns:vcard-4.0'>"
                        "<uri>http://example.com/a,b.jpg</uri></photo>")
        params = VCardParameters({"MEDIATYPE": "image/jpeg"})
        result = self.scribe.parse_xml(XCardElement(xml), params)
        self.assertEqual(result.property.url, "http://example.com/a,b.jpg")
        self.assertIs(result.property.content_type, ImageType.JPEG)

    def test_parse_missing_uri(self):
        xml = ElementTree.XML("<photo xmlns='urn:ietf:params:xml:ns:vcard-4.0'>"
                        "<text>http://example.com/a.jpg</text></photo>")
        with self.assertRaises(MissingValueElementError) as context:
            self.scribe.parse_xml(XCardElement(xml))
        self.assertIsInstance(context.exception, CannotParseError)
        self.assertEqual(context.exception.data_types, [VCardDataType.URI])
        self.assertTrue("<uri>" in str(context.exception))

class TestBinaryJSON(unittest.TestCase):
    def setUp(self):
        self.scribe = scribe_for_property(Photo)

    def test_write(self):
        value = self.scribe.write_json(Photo(DATA, ImageType.JPEG))
        self.assertEqual(value, JCardValue([DATA_URI]))
        value = self.scribe.write_json(Photo(URL))
        self.assertEqual(value.as_single(), URL)
        value = self.scribe.write_json(Photo())
        self.assertEqual(value.as_single(), "")

    def test_parse(self):
        result = self.scribe.parse_json(JCardValue.single(DATA_URI),
                                                        VCardDataType.URI)
        self.assertEqual(result.property.data, DATA)
        self.assertIs(result.property.content_type, ImageType.JPEG)
        result = self.scribe.parse_json(JCardValue.single(URL),
                                                        VCardDataType.URI)
        self.assertEqual(result.property.url, URL)

class TestBinaryHTML(unittest.TestCase):
    def setUp(self):
        self.scribe = scribe_for_property(Photo)

    def test_data_uri(self):
        element = HCardElement.from_html(
                '<object class="photo" data="data:image/png;base64,QUJD" />')
        result = self.scribe.parse_html(element)
        self.assertEqual(result.property.data, DATA)
        self.assertIs(result.property.content_type, ImageType.PNG)
        self.assertEqual(result.warnings, [])

    def test_url(self):
        element = HCardElement.from_html(
                '<object data="photo.jpg" type="image/jpeg"></object>',
                "http://example.com/people/")
        result = self.scribe.parse_html(element)
        self.assertEqual(result.property.url,
                                    "http://example.com/people/photo.jpg")
        self.assertIs(result.property.content_type, ImageType.JPEG)

    def test_url_no_type(self):
        element = HCardElement.from_html('<object data="%s"></object>' % URL)
        result = self.scribe.parse_html(element)
        self.assertEqual(result.property.url, URL)
        self.assertIsNone(result.property.content_type)

    def test_wrong_tag(self):
        element = HCardElement.from_html('<img src="%s" />' % URL)
        with self.assertRaises(CannotParseError):
            self.scribe.parse_html(element)

    def test_missing_data(self):
        element = HCardElement.from_html('<object type="image/png"></object>')
        with self.assertRaises(CannotParseError):
            self.scribe.parse_html(element)

# pylint: disable=W0611
from vcardio.test._support import load_tests, setup_logging

def setUpModule():
    setup_logging()

if __name__ == "__main__":
    unittest.main()
