# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
HTML semantics data.
'''

# Void elements have no content and no end tag.
void_tags = frozenset({
  'area',
  'base',
  'br',
  'col',
  'embed',
  'hr',
  'img',
  'input',
  'link',
  'meta',
  'param',
  'source',
  'track',
  'wbr',
})

# Attributes whose presence alone is meaningful.
# The catalog renders these in the XHTML-compatible form `selected="selected"`.
boolean_attrs = frozenset({
  'checked',
  'disabled',
  'multiple',
  'readonly',
  'required',
  'reversed',
  'selected',
})
