# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
tagmu builds HTML elements programmatically and renders them to strings, escaping text and attribute values.

  from tagmu import Tag, tags
  tags.a(tags.em('Home'), href='/').render() # '<a href="&#x2F;"><em>Home</em></a>'
'''

from . import tags
from .escape import default_escaper, Escaper, HtmlEscaper
from .exceptions import DuplicateAttribute, InvalidArgument, MissingAttribute
from .tag import Present, Tag, TagAttrs, TagChild, TagValue, XhtmlTag


__all__ = [
  'default_escaper',
  'DuplicateAttribute',
  'Escaper',
  'HtmlEscaper',
  'InvalidArgument',
  'MissingAttribute',
  'Present',
  'Tag',
  'TagAttrs',
  'TagChild',
  'tags',
  'TagValue',
  'XhtmlTag',
]
