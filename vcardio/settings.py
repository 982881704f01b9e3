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
# pylint: disable-msg=W0201

"""General settings container.

The behaviour of the document writers may be controlled by a few
parameters, like whether to add the PRODID property or how to indent the
output. Instead of passing all of them around as function arguments
a `VCardSettings` object is used. It also provides the defaults.
"""

__docformat__ = "restructuredtext en"

from collections.abc import MutableMapping

class _SettingDefinition(object):
    # pylint: disable=R0903,R0913
    def __init__(self, name, type = str, default = None, factory = None,
                        cache = False, doc = None, validator = None):
        self.name = name
        self.type = type
        self.default = default
        self.factory = factory
        self.cache = cache
        self.doc = doc
        self.validator = validator

class VCardSettings(MutableMapping):
    """Container for various parameters used all over vcardio.

    It can be used like a regular dictionary, but will provide reasonable
    defaults for parameters which are not explicitely set.

    :CVariables:
        - `_defs`: registered setting definitions
    :Ivariables:
        - `_settings`: current values of the parameters explicitely set.
    """
    _defs = {}
    def __init__(self, data = None):
        """Create settings, optionally initialized with `data`.

        :Parameters:
            - `data`: initial data
        :Types:
            - `data`: any mapping, including `VCardSettings`
        """
        self._settings = {}
        if data is not None:
            for key, value in dict(data).items():
                self[key] = value

    def __len__(self):
        """Number of parameters set."""
        return len(self._settings)

    def __iter__(self):
        """Iterate over the parameter names."""
        return iter(list(self._settings.keys()))

    def __contains__(self, key):
        """Check if a parameter is set.

        :Parameters:
            - `key`: the parameter name
        :Types:
            - `key`: `str`
        """
        return key in self._settings

    def __getitem__(self, key):
        """Get a parameter value. Return the default if no value is set
        and a default is defined.

        :Parameters:
            - `key`: the parameter name
        :Types:
            - `key`: `str`
        """
        return self.get(key, required = True)

    def __setitem__(self, key, value):
        """Set a parameter value.

        The value is checked with the validator of the setting, if any.

        :Parameters:
            - `key`: the parameter name
            - `value`: the new value
        :Types:
            - `key`: `str`
        """
        key = str(key)
        setting_def = self._defs.get(key)
        if setting_def is not None and setting_def.validator is not None:
            value = setting_def.validator(value)
        self._settings[key] = value

    def __delitem__(self, key):
        """Unset a parameter value.

        :Parameters:
            - `key`: the parameter name
        :Types:
            - `key`: `str`
        """
        del self._settings[key]

    def get(self, key, local_default = None, required = False):
        """Get a parameter value.

        If parameter is not set, return `local_default` if it is not `None`
        or the global default otherwise.

        :Raise `KeyError`: if parameter has no value and no global default

        :Return: parameter value
        """
        # pylint: disable-msg=W0221
        if key in self._settings:
            return self._settings[key]
        if local_default is not None:
            return local_default
        if key in self._defs:
            setting_def = self._defs[key]
            if setting_def.default is not None:
                return setting_def.default
            factory = setting_def.factory
            if factory is None:
                return None
            value = factory(self)
            if setting_def.cache is True:
                setting_def.default = value
            return value
        if required:
            raise KeyError(key)
        return local_default

    def keys(self):
        """Return names of parameters set.

        :Returntype: - `list` of `str`
        """
        return list(self._settings.keys())

    def items(self):
        """Return names and values of parameters set.

        :Returntype: - `list` of tuples
        """
        return list(self._settings.items())

    @classmethod
    def add_setting(cls, name, **kwargs):
        """Register a setting definition."""
        setting_def = _SettingDefinition(name, **kwargs)
        if name not in cls._defs:
            cls._defs[name] = setting_def
            return
        duplicate = cls._defs[name]
        if duplicate.type != setting_def.type:
            raise ValueError("Setting duplicate, with a different type")
        if duplicate.default != setting_def.default:
            raise ValueError("Setting duplicate, with a different default")
        if duplicate.factory != setting_def.factory:
            raise ValueError("Setting duplicate, with a different factory")

    @classmethod
    def list_settings(cls):
        """Return the registered setting definitions, sorted by name."""
        return [cls._defs[name] for name in sorted(cls._defs)]

    @staticmethod
    def validate_string_list(value):
        """Convert a comma-separated string to a list of strings."""
        if isinstance(value, (list, tuple)):
            return [str(x).strip() for x in value]
        try:
            return [x.strip() for x in value.split(",")]
        except (AttributeError, TypeError):
            raise ValueError("Bad string list")

    @staticmethod
    def validate_positive_int(value):
        """Require an integer greater than zero."""
        value = int(value)
        if value <= 0:
            raise ValueError("Positive number required")
        return value

    @staticmethod
    def validate_bool(value):
        """Convert common string spellings of a boolean."""
        if isinstance(value, str):
            lvalue = value.strip().lower()
            if lvalue in ("1", "yes", "true", "on"):
                return True
            if lvalue in ("0", "no", "false", "off"):
                return False
            raise ValueError("Bad boolean value: {0!r}".format(value))
        return bool(value)

    @staticmethod
    def get_int_range_validator(start, stop):
        """Return a validator accepting integers in the <start, stop)
        range."""
        def validate_int_range(value):
            """Integer range validator."""
            value = int(value)
            if value >= start and value < stop:
                return value
            raise ValueError("Not in <{0},{1}) range".format(start, stop))
        return validate_int_range

def _prodid_name_factory(settings):
    """Default PRODID value: the library name and version."""
    # pylint: disable=W0613
    from .version import version
    return "vcardio {0}".format(version)

VCardSettings.add_setting("add_prodid", type = bool, default = True,
        validator = VCardSettings.validate_bool,
        doc = """Replace any PRODID property of a written vCard with one
identifying this library.""")
VCardSettings.add_setting("prodid_name", type = str,
        factory = _prodid_name_factory, cache = True,
        doc = """The PRODID value used when `add_prodid` is set.""")
VCardSettings.add_setting("xml_indent", type = int, default = -1,
        validator = VCardSettings.get_int_range_validator(-1, 17),
        doc = """Indentation width of the xCard output, -1 for no
indentation.""")
VCardSettings.add_setting("xml_extra_prefixes", type = dict,
        factory = lambda settings: {},
        doc = """Namespace to prefix mapping for foreign namespaces in xCard
output.""")
