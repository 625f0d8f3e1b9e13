import logging
from collections.abc import Mapping

from .document import Document
from .options import Options, load
from .to_xml import append_element


class AlreadyRenderedError(Exception):
  pass


class Renderer:
  """Renders a dict as an XML document wrapped in a single body element.

  A renderer owns one document and renders it once; use a new renderer
  for every document.
  """

  def __init__(self, options=None):
    self.options = Options.from_dict(options)
    self.document = Document(
      version=self.options.version,
      encoding=self.options.charset)
    self.rendered = False

  @classmethod
  def from_yaml(cls, filename='xmlrender.yaml'):
    """Returns a renderer configured from the given YAML file."""
    return cls(load(filename))

  def render(self, variables=None):
    """Returns the XML document for the given variables."""
    if self.rendered:
      raise AlreadyRenderedError("a renderer can only render once")
    if variables is None:
      variables = {}
    if not isinstance(variables, Mapping):
      raise TypeError("expected a mapping, got %s" % type(variables).__name__)
    self.rendered = True
    self.document.appendChild(self.body_element(variables))
    logging.debug("rendered %d variables", len(variables))
    return self.document.serialize(indent=self.options.indent)

  def body_element(self, variables):
    """Returns the body element holding every variable."""
    body = self.document.createElement(self.options.super_parent_name)
    for key, value in variables.items():
      append_element(
        self.document, body, key, value,
        default_name=self.options.default_list_item_name)
    return body
