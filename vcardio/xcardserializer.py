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

"""xCard serializer for ElementTree data.

The vCard namespace is always the default (unprefixed) namespace of the
document, foreign namespaces (of extension properties) get prefixes
declared on the top-most element using them.

Normative reference:
  - :RFC:`6351`
"""

__docformat__ = "restructuredtext en"

import re
import logging

from xml.sax.saxutils import escape, quoteattr

from .constants import XML_NS

logger = logging.getLogger("vcardio.xcardserializer")

STANDARD_PREFIXES = {
        XML_NS: 'xml',
    }

EVIL_CHARACTERS_RE = re.compile(r"[\000-\010\013\014\016-\037]", re.UNICODE)

XML_DECLARATION = "<?xml version='1.0' encoding='{0}'?>"

def remove_evil_characters(data):
    """Remove control characters (not allowed in XML) from a string."""
    return EVIL_CHARACTERS_RE.sub("\ufffd", data)

class XCardSerializer(object):
    """xCard document serializer.

    :Ivariables:
        - `namespace`: the default namespace of the document
        - `_prefixes`: mapping (namespace -> prefix) of known namespace
          prefixes
        - `_next_id`: the next sequence number to be used in auto-generated
          prefixes.
    :Types:
        - `namespace`: `str`
        - `_prefixes`: `dict`
        - `_next_id`: `int`
    """
    def __init__(self, namespace, extra_prefixes = None):
        """
        :Parameters:
            - `namespace`: the default namespace of the document
              (the vCard namespace)
            - `extra_prefixes`: mapping of namespaces to prefixes (not the
              other way) to be used for foreign namespaces.
        :Types:
            - `namespace`: `str`
            - `extra_prefixes`: `str` to `str` mapping.
        """
        self.namespace = namespace
        self._prefixes = dict(STANDARD_PREFIXES)
        if extra_prefixes:
            for ns, prefix in extra_prefixes.items():
                self.add_prefix(ns, prefix)
        self._next_id = 1

    def add_prefix(self, namespace, prefix):
        """Add a new namespace prefix.

        :Parameters:
            - `namespace`: the namespace URI
            - `prefix`: the prefix string
        :Types:
            - `namespace`: `str`
            - `prefix`: `str`
        """
        if prefix == "xml" and namespace != XML_NS:
            raise ValueError("Cannot change 'xml' prefix meaning")
        self._prefixes[namespace] = prefix

    @staticmethod
    def _split_qname(name, is_element):
        """Split an element or attribute qname into namespace and local
        name.

        :Parameters:
            - `name`: element or attribute QName
            - `is_element`: `True` for an element, `False` for an attribute
        :Types:
            - `name`: `str`
            - `is_element`: `bool`

        :Return: namespace URI, local name
        :returntype: `str`, `str`"""
        if name.startswith("{"):
            namespace, name = name[1:].split("}", 1)
        elif is_element:
            raise ValueError("Element with no namespace: {0!r}".format(name))
        else:
            namespace = None
        return namespace, name

    def _make_prefix(self, declared_prefixes):
        """Make up a new namespace prefix, which won't conflict
        with `_prefixes` and prefixes declared in the current scope.

        :Parameters:
            - `declared_prefixes`: namespace to prefix mapping for the current
              scope
        :Types:
            - `declared_prefixes`: `str` to `str` dictionary

        :Returns: a new prefix
        :Returntype: `str`
        """
        used_prefixes = set(self._prefixes.values())
        used_prefixes |= set(declared_prefixes.values())
        while True:
            prefix = "ns{0}".format(self._next_id)
            self._next_id += 1
            if prefix not in used_prefixes:
                break
        return prefix

    def _make_prefixed(self, name, is_element, declared_prefixes, declarations):
        """Return namespace-prefixed tag or attribute name.

        Add appropriate declaration to `declarations` when neccessary.

        The document namespace is the default one. Elements of other
        namespaces get the prefix from `_prefixes` or a new one.

        :Parameters:
            - `name`: QName ('{namespace-uri}local-name')
              to convert
            - `is_element`: `True` for element, `False` for an attribute
            - `declared_prefixes`: mapping of prefixes already declared
              at this scope
            - `declarations`: XMLNS declarations on the current element.
        :Types:
            - `name`: `str`
            - `is_element`: `bool`
            - `declared_prefixes`: `str` to `str` dictionary
            - `declarations`: `str` to `str` dictionary

        :Returntype: `str`"""
        namespace, name = self._split_qname(name, is_element)
        if namespace is None:
            prefix = None
        elif namespace in declared_prefixes:
            prefix = declared_prefixes[namespace]
        elif namespace == XML_NS:
            prefix = "xml"
        elif is_element and namespace == self.namespace:
            prefix = None
            declarations[namespace] = prefix
            declared_prefixes[namespace] = prefix
        elif namespace in self._prefixes:
            prefix = self._prefixes[namespace]
            declarations[namespace] = prefix
            declared_prefixes[namespace] = prefix
        else:
            prefix = self._make_prefix(declared_prefixes)
            declarations[namespace] = prefix
            declared_prefixes[namespace] = prefix
        if prefix:
            return prefix + ":" + name
        else:
            return name

    @staticmethod
    def _make_ns_declarations(declarations):
        """Build namespace declarations.

        :Parameters:
            - `declarations`: namespace to prefix mapping of the new
              declarations
        :Types:
            - `declarations`: `str` to `str` dictionary

        :Return: string of namespace declarations to be used in a start tag
        :Returntype: `str`
        """
        result = []
        for namespace, prefix in declarations.items():
            if prefix:
                result.append('xmlns:{0}={1}'.format(prefix,
                                                        quoteattr(namespace)))
            else:
                result.append('xmlns={0}'.format(quoteattr(namespace)))
        return " ".join(result)

    def _emit_element(self, element, level, declared_prefixes, indent):
        """Recursive XML element serializer.

        :Parameters:
            - `element`: the element to serialize
            - `level`: nest level (0 - root element, 1 - vcard, etc.)
            - `declared_prefixes`: namespace to prefix mapping of already
              declared prefixes.
            - `indent`: number of spaces to indent each level with, negative
              to disable pretty-printing
        :Types:
            - `element`: :etree:`ElementTree.Element`
            - `level`: `int`
            - `declared_prefixes`: `str` to `str` dictionary
            - `indent`: `int`

        :Return: serialized element
        :Returntype: `str`
        """
        declarations = {}
        declared_prefixes = dict(declared_prefixes)
        name = element.tag
        prefixed = self._make_prefixed(name, True, declared_prefixes,
                                                                declarations)
        start_tag = "<{0}".format(prefixed)
        end_tag = "</{0}>".format(prefixed)
        for name, value in element.items():
            prefixed = self._make_prefixed(name, False, declared_prefixes,
                                                                declarations)
            start_tag += ' {0}={1}'.format(prefixed, quoteattr(value))

        declarations = self._make_ns_declarations(declarations)
        if declarations:
            start_tag += " " + declarations
        children = []
        for child in element:
            children.append(self._emit_element(child, level + 1,
                                                declared_prefixes, indent))
        text = element.text or ""
        if indent >= 0 and children:
            text = text.strip()
        if not children and not text:
            return start_tag + "/>"
        start_tag += ">"
        if indent >= 0 and children:
            inner = "\n" + " " * (indent * (level + 1))
            outer = "\n" + " " * (indent * level)
            return (start_tag + escape(text) + inner + inner.join(children)
                                                            + outer + end_tag)
        return start_tag + escape(text) + "".join(children) + end_tag

    def emit_element(self, element, indent = -1):
        """Serialize an element (without the XML declaration).

        The default namespace is declared on the top-most element using it.

        :Parameters:
            - `element`: the element to serialize
            - `indent`: indentation width, negative to disable
        :Types:
            - `element`: :etree:`ElementTree.Element`
            - `indent`: `int`

        :Returntype: `str`
        """
        string = self._emit_element(element, 0, {}, indent)
        return remove_evil_characters(string)

    def emit_document(self, element, indent = -1, encoding = "utf-8"):
        """Serialize a whole document: the XML declaration and the root
        element.

        :Parameters:
            - `element`: the root element
            - `indent`: indentation width, negative to disable
            - `encoding`: encoding name to put into the XML declaration
        :Types:
            - `element`: :etree:`ElementTree.Element`
            - `indent`: `int`
            - `encoding`: `str`

        :Returntype: `str`
        """
        logger.debug("Serializing {0!r}, indent={1}".format(element.tag,
                                                                    indent))
        separator = "\n" if indent >= 0 else ""
        return (XML_DECLARATION.format(encoding) + separator
                        + self.emit_element(element, indent) + separator)

def serialize(element, namespace = None, indent = -1):
    """Serialize an element.

    Utility function for debugging or logging.

    :Parameters:
        - `element`: the element to serialize
        - `namespace`: the default namespace, the namespace of `element` if
          not given
        - `indent`: indentation width, negative to disable
    :Types:
        - `element`: :etree:`ElementTree.Element`
        - `namespace`: `str`
        - `indent`: `int`

    :Return: serialized element
    :Returntype: `str`
    """
    if namespace is None:
        namespace = XCardSerializer._split_qname(element.tag, True)[0]
    return XCardSerializer(namespace).emit_element(element, indent)
