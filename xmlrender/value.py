"""Shapes of the data accepted by the renderer.

Every value handed to the renderer is classified into exactly one of

  Scalar  -- a leaf with a text form
  List    -- an ordered sequence, entries keyed by position
  Keyed   -- a mapping, entries keyed as given, insertion order kept
  Invalid -- anything else; it produces no element
"""

import numbers
from collections import namedtuple
from collections.abc import Mapping


Scalar = namedtuple('Scalar', 'text')
Invalid = namedtuple('Invalid', 'value')


class List(namedtuple('List', 'items')):
  def entries(self):
    """Yields (index, item) pairs."""
    return enumerate(self.items)


class Keyed(namedtuple('Keyed', 'items')):
  def entries(self):
    """Yields (key, item) pairs in insertion order."""
    return iter(self.items)


def classify(value):
  """Returns the Scalar, List, Keyed or Invalid shape of value."""
  if value is None:
    return Invalid(value)
  if isinstance(value, str):
    return Scalar(value)
  if isinstance(value, bool):
    return Scalar('true' if value else 'false')
  if isinstance(value, numbers.Number):
    return Scalar(str(value))
  if isinstance(value, (bytes, bytearray)):
    try:
      return Scalar(bytes(value).decode('utf8'))
    except UnicodeDecodeError:
      return Invalid(value)
  if isinstance(value, Mapping):
    return Keyed(tuple(value.items()))
  if hasattr(value, '__iter__'):
    # a iterable sequence
    return List(tuple(value))
  if type(value).__str__ is not object.__str__:
    # a stringifiable object
    return Scalar(str(value))
  return Invalid(value)

def is_collection(shape):
  return isinstance(shape, (List, Keyed))

def is_name(key):
  """Returns if key can name an element on its own."""
  return isinstance(key, str) and key != ''
