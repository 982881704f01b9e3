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

"""xCard document builder.

An `XCardDocument` collects any number of vCards as ``<vcard/>`` elements
under a single ``<vcards/>`` root and writes them out as XML.

Normative reference:
  - :RFC:`6351`
"""

__docformat__ = "restructuredtext en"

import io
import logging

from collections import OrderedDict
from types import MappingProxyType

from .etree import ElementTree
from .property import ProductId
from .scribe import scribe_for_property, XCardElement, Omit, Unsupported
from .settings import VCardSettings
from .vcardversion import V4_0
from .xcardserializer import XCardSerializer

logger = logging.getLogger("vcardio.xcard")

# parameter name -> name of the elements holding its values
PARAMETER_CHILD_ELEMENT_NAMES = MappingProxyType({
        "altid": "text",
        "calscale": "text",
        "label": "text",
        "mediatype": "text",
        "pid": "text",
        "sort-as": "text",
        "type": "text",
        "geo": "uri",
        "tz": "uri",
        "language": "language-tag",
        "pref": "integer",
    })

UNKNOWN_PARAMETER_ELEMENT_NAME = "unknown"

class XCardDocument(object):
    """An xCard document under construction.

    :Ivariables:
        - `settings`: the writer settings
        - `target_version`: the vCard version of the document
        - `add_prodid`: whether to replace the PRODID property of every
          vCard added with one naming this library
        - `root`: the ``<vcards/>`` element
        - `_warnings`: the warnings of the last `add_vcard` call
    :Types:
        - `settings`: `VCardSettings`
        - `target_version`: `VCardVersion`
        - `add_prodid`: `bool`
        - `root`: :etree:`ElementTree.Element`
        - `_warnings`: `list` of `str`
    """
    target_version = V4_0
    def __init__(self, settings = None):
        """
        :Parameters:
            - `settings`: the writer settings: "add_prodid", "prodid_name",
              "xml_indent" and "xml_extra_prefixes" are used
        :Types:
            - `settings`: `VCardSettings`
        """
        if settings is None:
            settings = VCardSettings()
        self.settings = settings
        self.add_prodid = self.settings["add_prodid"]
        self._qnp = "{{{0}}}".format(self.target_version.xml_namespace)
        self.root = ElementTree.Element(self._qnp + "vcards")
        self._warnings = []

    @property
    def warnings(self):
        """The warnings of the most recent `add_vcard` call.

        :returntype: `list` of `str` (a copy)"""
        return list(self._warnings)

    def add_vcard(self, vcard):
        """Marshal a vCard and append it to the document.

        Properties which cannot be represented in xCard are skipped and
        a warning is recorded for each of them.

        :Parameters:
            - `vcard`: the vCard
        :Types:
            - `vcard`: `VCard`

        :return: the ``<vcard/>`` element appended
        """
        self._warnings = []
        version = self.target_version

        if vcard.formatted_name is None:
            self._warn("vCard version {0} requires that a formatted name"
                                                " be defined.".format(version))

        groups = OrderedDict()
        for prop in vcard:
            if self.add_prodid and isinstance(prop, ProductId):
                logger.debug("Dropping the original PRODID: {0!r}".format(
                                                                    prop))
                continue
            if not prop.is_supported_by(version):
                supported = ", ".join(str(ver)
                                        for ver in prop.supported_versions)
                self._warn("The {0} property is not supported by xCard"
                        " (vCard version {1}) and will not be added to"
                        " the xCard. Supported versions are [{2}]".format(
                                    prop.property_name, version, supported))
                continue
            if prop.membership_reference and not vcard.is_group():
                self._warn("The value of KIND must be set to \"group\" in"
                                    " order to add MEMBERs to the vCard.")
                continue
            groups.setdefault(prop.group, []).append(prop)

        if self.add_prodid:
            prodid = ProductId(self.settings["prodid_name"])
            groups.setdefault(None, []).append(prodid)

        vcard_element = ElementTree.Element(self._qnp + "vcard")
        for group, props in groups.items():
            if group is None:
                parent = vcard_element
            else:
                parent = ElementTree.SubElement(vcard_element,
                                    self._qnp + "group", {"name": group})
            for prop in props:
                element = self._marshal_property(prop, vcard)
                if element is not None:
                    parent.append(element)
        self.root.append(vcard_element)
        return vcard_element

    def _marshal_property(self, prop, vcard):
        """Build the xCard element of a single property.

        :return: the element or `None` when the property cannot be written
        """
        scribe = scribe_for_property(prop)
        if prop.qname:
            tag = prop.qname
        else:
            tag = self._qnp + prop.property_name.lower()
        element = ElementTree.Element(tag)

        parameters = scribe.prepare_parameters(prop, self.target_version,
                                                                        vcard)
        parameters.value = None
        if not parameters.is_empty():
            element.append(self._build_parameters(parameters))

        outcome = scribe.write_xml(prop, XCardElement(element,
                                                        self.target_version))
        if isinstance(outcome, Omit):
            self._warn("{0} property will not be marshalled: {1}".format(
                                        prop.property_name, outcome.reason))
            return None
        if isinstance(outcome, Unsupported):
            self._warn("{0} property will not be marshalled: xCard does not"
                        " support embedded vCards.".format(prop.property_name))
            return None
        return outcome.element

    def _build_parameters(self, parameters):
        """Build the ``<parameters/>`` element."""
        parameters_element = ElementTree.Element(self._qnp + "parameters")
        for name, values in parameters.items():
            param_element = ElementTree.SubElement(parameters_element,
                                                        self._qnp + name)
            child_name = PARAMETER_CHILD_ELEMENT_NAMES.get(name,
                                            UNKNOWN_PARAMETER_ELEMENT_NAME)
            for value in values:
                child = ElementTree.SubElement(param_element,
                                                    self._qnp + child_name)
                child.text = value
        return parameters_element

    def _warn(self, message):
        logger.debug("Warning: {0}".format(message))
        self._warnings.append(message)

    def _serializer(self):
        return XCardSerializer(self.target_version.xml_namespace,
                                        self.settings["xml_extra_prefixes"])

    def write(self, indent = None):
        """Serialize the document.

        :Parameters:
            - `indent`: number of spaces to indent each level with, negative
              to disable; the "xml_indent" setting when `None`
        :Types:
            - `indent`: `int`

        :returntype: `str`
        """
        if indent is None:
            indent = self.settings["xml_indent"]
        return self._serializer().emit_document(self.root, indent)

    def write_stream(self, stream, indent = None):
        """Write the document to a stream.

        Binary streams get UTF-8 encoded data.

        :Parameters:
            - `stream`: text or binary file-like object
            - `indent`: as for `write`
        """
        data = self.write(indent)
        if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
            data = data.encode("utf-8")
        stream.write(data)

    def write_file(self, path, indent = None):
        """Write the document to a file.

        :Parameters:
            - `path`: the file name
            - `indent`: as for `write`
        :Types:
            - `path`: `str`
        """
        data = self.write(indent)
        logger.debug("Writing xCard document to {0!r}".format(path))
        with open(path, "wb") as xml_file:
            xml_file.write(data.encode("utf-8"))

    def __str__(self):
        return self.write()
