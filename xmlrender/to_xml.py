import logging

from .value import Scalar, classify, is_collection, is_name


def to_xml(value, options=None):
  """Returns an XML document from a dict of scalars, seqs and dicts."""
  from .renderer import Renderer
  return Renderer(options).render(value)

def append_element(doc, parent, name, value, default_name='list_item'):
  """Adds value to document under parent as name."""
  add(doc, parent, name, classify(value), default_name)

def append_list_elements(doc, element, value, default_name='list_item'):
  """Adds each entry of a seq or dict to element."""
  populate(doc, element, classify(value), default_name)

def add(doc, parent, name, shape, default_name):
  if isinstance(shape, Scalar):
    child = doc.createElement(name)
    child.appendChild(doc.createTextNode(shape.text))
    parent.appendChild(child)
  elif is_collection(shape):
    child = doc.createElement(name)
    populate(doc, child, shape, default_name)
    parent.appendChild(child)
  else:
    logging.debug("skipping %s: unsupported value %r", name, shape.value)

def populate(doc, element, shape, default_name):
  if not is_collection(shape):
    return
  for key, item in shape.entries():
    item_shape = classify(item)
    if is_collection(item_shape):
      # positional entries fall back to the default name
      name = key if is_name(key) else default_name
    elif isinstance(item_shape, Scalar):
      name = key
    else:
      logging.debug("skipping %s: unsupported value %r", key, item)
      continue
    add(doc, element, name, item_shape, default_name)
