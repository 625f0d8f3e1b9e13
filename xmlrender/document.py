import io
from xml.dom import minidom


class Document(minidom.Document):
  """A minidom document which writes its own XML declaration."""

  def __init__(self, version='1.0', encoding='UTF-8'):
    minidom.Document.__init__(self)
    self.version = version
    self.encoding = encoding

  def createElement(self, tagName):
    # list entries are named by their position
    return minidom.Document.createElement(self, str(tagName))

  def declaration(self):
    return '<?xml version="%s" encoding="%s"?>' % (
      self.version, self.encoding.upper())

  def serialize(self, indent=''):
    """Returns the declaration and every top-level node, one per line."""
    writer = io.StringIO()
    writer.write(self.declaration())
    writer.write('\n')
    for node in self.childNodes:
      if indent:
        node.writexml(writer, '', indent, '\n')
      else:
        node.writexml(writer)
        writer.write('\n')
    return writer.getvalue()
