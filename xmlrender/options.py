"""Rendering options

Options are a flat map of names to values. Any of the recognized names
missing from the map falls back to its default, e.g.,

  Version: "1.0"
  Charset: "UTF-8"
  SuperParentName: "xml_body"
  DefaultListItemName: "list_item"
  Indent: ""

An empty Indent renders the whole body on a single line.

Options can also be kept in a YAML file, "xmlrender.yaml" by default.
"""

import logging
import os
from collections import namedtuple

import yaml


OPTION_VERSION = 'Version'
OPTION_CHARSET = 'Charset'
OPTION_SUPER_PARENT_NAME = 'SuperParentName'
OPTION_DEFAULT_LIST_ITEM_NAME = 'DefaultListItemName'
OPTION_INDENT = 'Indent'

DEFAULTS = (
  (OPTION_VERSION, '1.0'),
  (OPTION_CHARSET, 'UTF-8'),
  (OPTION_SUPER_PARENT_NAME, 'xml_body'),
  (OPTION_DEFAULT_LIST_ITEM_NAME, 'list_item'),
  (OPTION_INDENT, ''),
)


class ConfigError(Exception):
  pass


class Options(namedtuple('Options', [
    'version', 'charset', 'super_parent_name', 'default_list_item_name',
    'indent'])):

  @classmethod
  def from_dict(cls, options=None):
    """Returns options with defaults for every missing name."""
    options = dict(options or {})
    for key in options:
      if key not in dict(DEFAULTS):
        logging.warning("ignoring unknown option %s", key)
    return cls(*[options.get(key, default) for key, default in DEFAULTS])


def load(filename='xmlrender.yaml'):
  """Return the options (dict) stored in the given YAML file."""
  if not os.path.exists(filename):
    return dict()
  with open(filename) as stream:
    options = yaml.safe_load(stream)
  if options is None:
    return dict()
  if not isinstance(options, dict):
    raise ConfigError("expected a map of options in %s" % filename)
  return options
