import os
import tempfile
import unittest

from xmlrender import Renderer, AlreadyRenderedError


class TestRenderer(unittest.TestCase):
  def test_defaults(self):
    renderer = Renderer()
    self.assertEqual(
      renderer.render(),
      '<?xml version="1.0" encoding="UTF-8"?>\n<xml_body/>\n',
    )
  def test_declaration(self):
    renderer = Renderer(dict(Version='1.1', Charset='shift_jis'))
    self.assertEqual(
      renderer.render(dict(a='b')),
      '<?xml version="1.1" encoding="SHIFT_JIS"?>\n'
      '<xml_body><a>b</a></xml_body>\n',
    )
  def test_super_parent_name(self):
    for name in ('xml_body', 'root'):
      renderer = Renderer(dict(SuperParentName=name))
      self.assertEqual(
        renderer.render(),
        '<?xml version="1.0" encoding="UTF-8"?>\n<%s/>\n' % name,
      )
  def test_indent(self):
    renderer = Renderer(dict(Indent='  '))
    self.assertEqual(
      renderer.render(dict(a=dict(b='c'), d=[])),
      '<?xml version="1.0" encoding="UTF-8"?>\n'
      '<xml_body>\n'
      '  <a>\n'
      '    <b>c</b>\n'
      '  </a>\n'
      '  <d/>\n'
      '</xml_body>\n',
    )
  def test_render_once(self):
    renderer = Renderer()
    renderer.render(dict(a='b'))
    self.assertRaises(AlreadyRenderedError, renderer.render, dict(a='b'))
  def test_not_a_mapping(self):
    renderer = Renderer()
    self.assertRaises(TypeError, renderer.render, ['a', 'b'])
    # a rejected call does not use up the renderer
    self.assertEqual(
      renderer.render(dict(a='b')),
      '<?xml version="1.0" encoding="UTF-8"?>\n'
      '<xml_body><a>b</a></xml_body>\n',
    )
  def test_deterministic(self):
    variables = dict(
      members=[dict(name='hogehoge', tags=['a']), dict(name='foobar')],
      count=2,
      empty={},
    )
    options = dict(SuperParentName='members')
    self.assertEqual(
      Renderer(options).render(variables),
      Renderer(options).render(variables),
    )
  def test_from_yaml(self):
    handle, filename = tempfile.mkstemp(suffix='.yaml')
    with os.fdopen(handle, 'w') as stream:
      stream.write('SuperParentName: response\nDefaultListItemName: item\n')
    try:
      renderer = Renderer.from_yaml(filename)
    finally:
      os.remove(filename)
    self.assertEqual(
      renderer.render(dict(items=[dict(a='b')])),
      '<?xml version="1.0" encoding="UTF-8"?>\n'
      '<response><items><item><a>b</a></item></items></response>\n',
    )

if __name__ == '__main__':
  unittest.main()
