# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
The tag constructor catalog.

Each row of `tag_descs` describes one convenience constructor:
the tag name, the name of its content parameter (None for void tags),
and its named attribute parameters in order.
`mk_constructor` turns a row into a function with a real signature, e.g.:

  a(value='', href=None, attributes=None, **kw_attrs) -> Tag
  img(src=None, alt=None, width=None, height=None, attributes=None, **kw_attrs) -> Tag

Named parameters that are left as None produce no attribute.
The `attributes` mapping and then `kw_attrs` are merged on top, so they win on key collision.

A parameter spec is either an attribute name or `name:conv`, where `conv` is one of:
* `int`: the value is converted with `loose_int()`; values that are not positive produce no attribute.
* `flag`: a truthy value produces the attribute with its own name as value, e.g. `selected="selected"`.
'''

import re
from inspect import Parameter, Signature
from keyword import iskeyword
from typing import Any, Callable, Mapping, NamedTuple

from .exceptions import InvalidArgument
from .semantics import boolean_attrs, void_tags
from .tag import Tag, TagAttrs


TagConstructor = Callable[..., Tag]


class TagDesc(NamedTuple):
  name:str
  content:str|None # Name of the content parameter; None for void tags.
  params:tuple[str,...] = ()

  @property
  def is_void(self) -> bool: return self.content is None

  @property
  def py_name(self) -> str:
    'The constructor function name, e.g. `del_` for the `del` tag.'
    return py_name_for_attr(self.name)


class ParamDesc(NamedTuple):
  attr:str
  py_name:str
  conv:Callable[[str,Any],Any]


def _conv_none(attr:str, val:Any) -> Any: return val


def _conv_int(attr:str, val:Any) -> int|None:
  i = loose_int(val)
  return i if i > 0 else None


def loose_int(val:Any) -> int:
  '''
  Convert a value to an int without failing.
  Strings yield their leading integer (`'10px'` -> 10, `'2.5'` -> 2); values that cannot be converted yield 0.
  '''
  if isinstance(val, str):
    m = _int_prefix_re.match(val)
    return int(m[0]) if m else 0
  try: return int(val)
  except (TypeError, ValueError, OverflowError): return 0


_int_prefix_re = re.compile(r'\s*[-+]?[0-9]+')


def _conv_flag(attr:str, val:Any) -> str|None:
  return attr if val else None


param_convs:dict[str,Callable[[str,Any],Any]] = {
  '': _conv_none,
  'int': _conv_int,
  'flag': _conv_flag,
}


def py_name_for_attr(attr:str) -> str:
  'Return the Python parameter name for an attribute: `class` -> `cl`, `http-equiv` -> `http_equiv`, `for` -> `for_`.'
  if attr == 'class': return 'cl'
  name = attr.replace('-', '_')
  return name + '_' if iskeyword(name) else name


def attr_for_kw(key:str) -> str:
  'Return the attribute name for a keyword argument: `data_id` -> `data-id`, `class_` and `cl` -> `class`.'
  if key == 'cl': return 'class'
  return key.rstrip('_').replace('_', '-')


def parse_param(spec:str) -> ParamDesc:
  attr, _, conv_name = spec.partition(':')
  try: conv = param_convs[conv_name]
  except KeyError: raise ValueError(f'invalid parameter conversion: {spec!r}') from None
  return ParamDesc(attr=attr, py_name=py_name_for_attr(attr), conv=conv)


def mk_constructor(desc:TagDesc, tag_class:type[Tag]=Tag) -> TagConstructor:
  'Create the convenience constructor function described by `desc`.'
  params = tuple(parse_param(p) for p in desc.params)
  content = desc.content

  sig_params:list[Parameter] = []
  if content is not None:
    sig_params.append(Parameter(content, Parameter.POSITIONAL_OR_KEYWORD, default=''))
  for p in params:
    sig_params.append(Parameter(p.py_name, Parameter.POSITIONAL_OR_KEYWORD, default=None))
  sig_params.append(Parameter('attributes', Parameter.POSITIONAL_OR_KEYWORD, default=None))
  sig_params.append(Parameter('kw_attrs', Parameter.VAR_KEYWORD))
  sig = Signature(sig_params, return_annotation=tag_class)

  def constructor(*args:Any, **kwargs:Any) -> Tag:
    arguments = sig.bind(*args, **kwargs).arguments
    attrs:TagAttrs = {}
    for p in params:
      val = arguments.get(p.py_name)
      if val is None: continue
      val = p.conv(p.attr, val)
      if val is None: continue
      attrs[p.attr] = val
    extra = arguments.get('attributes')
    if extra is not None:
      if not isinstance(extra, Mapping):
        raise InvalidArgument(f'{desc.name}(): attributes must be a mapping; received: {extra!r}')
      attrs.update(extra)
    for k, v in arguments.get('kw_attrs', {}).items():
      attrs[attr_for_kw(k)] = v
    value = None if content is None else arguments.get(content, '')
    return tag_class(desc.name, value, attrs)

  constructor.__name__ = constructor.__qualname__ = desc.py_name
  constructor.__signature__ = sig # type: ignore[attr-defined]
  constructor.__doc__ = f'Create a {"void " if desc.is_void else ""}`{desc.name}` element.'
  return constructor


def mk_constructors(tag_class:type[Tag]=Tag) -> dict[str,TagConstructor]:
  'Create a constructor for every row of the catalog, keyed by tag name.'
  return { desc.name: mk_constructor(desc, tag_class) for desc in tag_descs }


tag_descs:tuple[TagDesc,...] = (
  TagDesc('a', 'value', ('href',)),
  TagDesc('abbr', 'value', ('title',)),
  TagDesc('address', 'value'),
  TagDesc('area', None, ('href', 'alt', 'shape', 'coords')),
  TagDesc('article', 'value'),
  TagDesc('aside', 'value'),
  TagDesc('audio', 'value', ('controls', 'loop', 'muted', 'preload')),
  TagDesc('b', 'value'),
  TagDesc('base', None, ('href', 'target')),
  TagDesc('blockquote', 'value', ('cite',)),
  TagDesc('body', 'value'),
  TagDesc('br', None),
  TagDesc('button', 'value', ('type', 'name')),
  TagDesc('canvas', 'value', ('width', 'height')),
  TagDesc('caption', 'value'),
  TagDesc('cite', 'value'),
  TagDesc('code', 'value'),
  TagDesc('col', None, ('span',)),
  TagDesc('colgroup', 'value', ('span',)),
  TagDesc('dd', 'value'),
  TagDesc('del', 'value', ('cite', 'datetime')),
  TagDesc('dfn', 'value'),
  TagDesc('div', 'value', ('id', 'class')),
  TagDesc('dl', 'value'),
  TagDesc('dt', 'value'),
  TagDesc('em', 'value'),
  TagDesc('embed', None, ('src', 'type', 'width:int', 'height:int')),
  TagDesc('fieldset', 'value', ('name',)),
  TagDesc('figcaption', 'value'),
  TagDesc('figure', 'value'),
  TagDesc('footer', 'value'),
  TagDesc('form', 'value', ('action', 'method', 'enctype', 'name')),
  TagDesc('h1', 'value'),
  TagDesc('h2', 'value'),
  TagDesc('h3', 'value'),
  TagDesc('h4', 'value'),
  TagDesc('h5', 'value'),
  TagDesc('h6', 'value'),
  TagDesc('head', 'value'),
  TagDesc('header', 'value'),
  TagDesc('hr', None),
  TagDesc('html', 'value', ('lang',)),
  TagDesc('i', 'value'),
  TagDesc('iframe', 'value', ('src', 'name')),
  TagDesc('img', None, ('src', 'alt', 'width:int', 'height:int')),
  TagDesc('input', None, ('type', 'name', 'value')),
  TagDesc('ins', 'value'),
  TagDesc('kbd', 'value'),
  TagDesc('label', 'value', ('for',)),
  TagDesc('legend', 'value'),
  TagDesc('li', 'value'),
  TagDesc('link', None, ('rel', 'type', 'href')),
  TagDesc('main', 'value'),
  TagDesc('map', 'value', ('name',)),
  TagDesc('mark', 'value'),
  TagDesc('meta', None, ('name', 'content', 'charset', 'http-equiv')),
  TagDesc('nav', 'value'),
  TagDesc('noscript', 'value'),
  TagDesc('object', 'value', ('name', 'type', 'data', 'width:int', 'height:int')),
  TagDesc('ol', 'value', ('type', 'start', 'reversed')),
  TagDesc('optgroup', 'value', ('label',)),
  TagDesc('option', 'text', ('value', 'selected:flag')),
  TagDesc('p', 'value'),
  TagDesc('param', None, ('name', 'value')),
  TagDesc('pre', 'value'),
  TagDesc('q', 'value'),
  TagDesc('s', 'value'),
  TagDesc('samp', 'value'),
  TagDesc('script', 'value', ('src', 'type')),
  TagDesc('section', 'value'),
  TagDesc('select', 'value', ('name', 'multiple:flag', 'size:int')),
  TagDesc('small', 'value'),
  TagDesc('source', None, ('src', 'type')),
  TagDesc('span', 'value'),
  TagDesc('strong', 'value'),
  TagDesc('style', 'value', ('type',)),
  TagDesc('sub', 'value'),
  TagDesc('sup', 'value'),
  TagDesc('table', 'value'),
  TagDesc('tbody', 'value'),
  TagDesc('td', 'value', ('colspan:int', 'rowspan:int')),
  TagDesc('textarea', 'value', ('name', 'rows:int', 'cols:int')),
  TagDesc('tfoot', 'value'),
  TagDesc('th', 'value', ('colspan:int', 'rowspan:int')),
  TagDesc('thead', 'value'),
  TagDesc('time', 'value', ('datetime',)),
  TagDesc('title', 'value'),
  TagDesc('tr', 'value'),
  TagDesc('track', None, ('src', 'kind', 'srclang', 'label')),
  TagDesc('u', 'value'),
  TagDesc('ul', 'value'),
  TagDesc('wbr', None),
)


def check_tag_descs(descs:tuple[TagDesc,...]=tag_descs) -> None:
  'Check the catalog for internal consistency; raises ValueError on the first problem.'
  names:set[str] = set()
  for desc in descs:
    if desc.name in names: raise ValueError(f'duplicate tag: {desc.name!r}')
    names.add(desc.name)
    if desc.is_void != (desc.name in void_tags):
      raise ValueError(f'tag {desc.name!r}: void mismatch with semantics.void_tags')
    py_names = [desc.content] if desc.content else []
    for spec in desc.params:
      p = parse_param(spec)
      if p.conv is _conv_flag and p.attr not in boolean_attrs:
        raise ValueError(f'tag {desc.name!r}: flag parameter is not a boolean attribute: {p.attr!r}')
      py_names.append(p.py_name)
    if len(set(py_names)) != len(py_names) or 'attributes' in py_names:
      raise ValueError(f'tag {desc.name!r}: conflicting parameter names: {py_names}')
