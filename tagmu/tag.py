# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
`tag` provides the `Tag` class, which represents a single HTML element and renders it to a string.
'''

from types import MappingProxyType
from typing import Any, ClassVar, Iterable, Iterator, Mapping, Self, Union

from .escape import default_escaper, Escaper
from .exceptions import DuplicateAttribute, InvalidArgument, MissingAttribute
from .reprs import attr_summary, repr_lim


TagAttrs = dict[str,Any]
TagChild = Union[str,'Tag']
TagChildren = list[TagChild]|tuple[TagChild,...]
TagValue = Union[None,str,'Tag',TagChildren]


class Present:
  '''
  The Present class is used to only set an attribute key if `is_present` evaluates to True.
  If an attribute has a `Present(True)` value, then the markup output will have an empty value set.
  https://html.spec.whatwg.org/multipage/syntax.html#attributes-2.
  For attributes that are unconditionally set, just use `key=''`.
  '''
  def __init__(self, is_present:Any):
    self.is_present = bool(is_present)

  def __repr__(self) -> str: return f'Present({self.is_present})'


class Tag:
  '''
  A single HTML element: a tag name, a value, and an ordered mapping of attributes.

  The value determines how the element renders:
  * `None`: a void element, e.g. `<br>`, or `<br />` in XHTML mode.
  * `str`: text content, escaped unless escaping has been turned off.
  * `Tag`: a nested element, rendered with its own escape and XHTML settings.
  * list or tuple: a sequence of text and nested elements, concatenated in order.
    Entries of any other type are skipped.

  Attributes are rendered in insertion order.
  Attribute names and values are always escaped, regardless of the escape setting.

  Mutators return `self` so that calls can be chained.
  '''

  xhtml_default:ClassVar[bool] = False # Initial XHTML mode for new instances; subclasses can override.

  __slots__ = ('_name', '_value', '_attrs', '_escape', '_escaper', '_xhtml', '_closing_bracket')

  # Instance attributes.
  _name:str
  _value:TagValue
  _attrs:TagAttrs
  _escape:bool
  _escaper:Escaper|None
  _xhtml:bool
  _closing_bracket:str|None

  def __init__(self, name:str, value:TagValue=None, attributes:Mapping[str,Any]|None=None, escape:Any=True,
   escaper:Escaper|None=None) -> None:
    '''
    Note: `attributes` is copied, and each key is validated as if by `set_attribute`.
    If `escaper` is omitted, the shared default escaper is used.
    '''
    if not isinstance(name, str):
      raise InvalidArgument(f'tag name must be a string; received: {name!r}')
    if not name.strip():
      raise InvalidArgument(f'tag name cannot be empty; received: {name!r}')
    self._name = name
    self._value = _validate_value(value)
    self._attrs = {}
    if attributes is not None: self.set_attributes(attributes)
    self._escape = bool(escape)
    self._escaper = _validate_escaper(escaper)
    self._xhtml = self.xhtml_default
    self._closing_bracket = None


  def __repr__(self) -> str:
    try: return f'{type(self).__name__}{self.summary()}'
    except AttributeError: return super().__repr__() # Possible if initialization failed.


  def __str__(self) -> str: return self.render()

  def __bytes__(self) -> bytes: return self.render().encode('utf-8')

  def __contains__(self, name:str) -> bool: return name in self._attrs

  def __getitem__(self, name:str) -> Any: return self.get_attribute(name)

  def __setitem__(self, name:str, value:Any) -> None: self.set_attribute(name, value)

  def __delitem__(self, name:str) -> None: self.remove_attribute(name)

  def get(self, name:str, default:Any=None) -> Any: return self._attrs.get(name, default)


  @property
  def name(self) -> str:
    'The tag name. It can only be set by the initializer.'
    return self._name


  # Value.

  def get_value(self) -> TagValue:
    return self._value


  def set_value(self, value:TagValue) -> Self:
    self._value = _validate_value(value)
    return self


  def append(self, child:TagChild) -> TagChild:
    '''
    Append a text or element child.
    The value is replaced with a new list, so a sequence passed in by the caller is never mutated.
    '''
    if not isinstance(child, (str, Tag)):
      raise InvalidArgument(f'tag child must be a string or Tag; received: {child!r}')
    value = self._value
    if value is None: self._value = [child]
    elif isinstance(value, (str, Tag)): self._value = [value, child]
    else: self._value = [*value, child]
    return child


  def extend(self, *children:TagChild|Iterable[TagChild]) -> Self:
    'Append each child; list and tuple arguments are flattened by one level.'
    for c in children:
      if isinstance(c, (list, tuple)):
        for el in c: self.append(el)
      else:
        self.append(c) # type: ignore[arg-type]
    return self


  # Attributes.

  def get_attributes(self) -> Mapping[str,Any]:
    'Return a read-only view of the attributes.'
    return MappingProxyType(self._attrs)


  def set_attributes(self, attributes:Mapping[str,Any]) -> Self:
    'Replace all attributes.'
    if not isinstance(attributes, Mapping):
      raise InvalidArgument(f'tag attributes must be a mapping; received: {attributes!r}')
    items = list(attributes.items()) # `attributes` might be a view of our own dict.
    self._attrs = {}
    for k, v in items:
      self.set_attribute(k, v)
    return self


  def has_attribute(self, name:str) -> bool:
    'Test if the attribute exists. The attribute value is not considered.'
    return name in self._attrs


  def get_attribute(self, name:str) -> Any:
    try: return self._attrs[name]
    except KeyError: pass
    raise MissingAttribute(f'attribute does not exist: {name!r}')


  def set_attribute(self, name:str, value:Any) -> Self:
    'Set the attribute, replacing any existing value.'
    if not isinstance(name, str) or not name.strip():
      raise InvalidArgument(f'attribute name must be a non-empty string; received: {name!r}')
    self._attrs[name] = value
    return self


  def add_attribute(self, name:str, value:Any) -> Self:
    'Add a new attribute; raises DuplicateAttribute if it already exists.'
    if name in self._attrs:
      raise DuplicateAttribute(f'attribute already exists: {name!r}')
    return self.set_attribute(name, value)


  def add_attributes(self, attributes:Mapping[str,Any]) -> Self:
    '''
    Add each attribute in order.
    If a duplicate is encountered, the preceding attributes remain added.
    '''
    for k, v in attributes.items():
      self.add_attribute(k, v)
    return self


  def remove_attribute(self, name:str) -> Self:
    try: del self._attrs[name]
    except KeyError: pass
    else: return self
    raise MissingAttribute(f'attribute does not exist: {name!r}')


  def discard_attribute(self, name:str) -> Self:
    self._attrs.pop(name, None)
    return self


  @property
  def classes(self) -> list[str]:
    'The `class` attribute split into individual words.'
    return fmt_attr_val(self._attrs.get('class', '')).split()

  @classes.setter
  def classes(self, val:str|Iterable[str]) -> None:
    if not isinstance(val, str): val = ' '.join(val)
    self._attrs['class'] = val

  @classes.deleter
  def classes(self) -> None: self._attrs.pop('class', None)


  def append_class(self, cl:str) -> Self:
    try: existing = self._attrs['class']
    except KeyError: self._attrs['class'] = cl
    else:
      if isinstance(existing, (list, tuple)): self._attrs['class'] = [*existing, cl]
      else: self._attrs['class'] = f'{existing} {cl}'
    return self


  def prepend_class(self, cl:str) -> Self:
    try: existing = self._attrs['class']
    except KeyError: self._attrs['class'] = cl
    else:
      if isinstance(existing, (list, tuple)): self._attrs['class'] = [cl, *existing]
      else: self._attrs['class'] = f'{cl} {existing}'
    return self


  # Options.

  def escape(self, escape:Any=None) -> Any:
    '''
    With no argument, return whether text content is escaped.
    Otherwise set the option and return `self`.
    '''
    if escape is None: return self._escape
    self._escape = bool(escape)
    return self


  def is_xhtml(self, is_xhtml:Any=None) -> Any:
    '''
    With no argument, return whether void elements render in XHTML style.
    Otherwise set the option, reset the cached closing bracket, and return `self`.
    '''
    if is_xhtml is None: return self._xhtml
    self._closing_bracket = None
    self._xhtml = bool(is_xhtml)
    return self


  @property
  def closing_bracket(self) -> str:
    'The closing bracket for void elements: " />" in XHTML mode, ">" otherwise.'
    if self._closing_bracket is None:
      self._closing_bracket = ' />' if self._xhtml else '>'
    return self._closing_bracket


  @property
  def escaper(self) -> Escaper:
    if self._escaper is None:
      self._escaper = default_escaper()
    return self._escaper

  @escaper.setter
  def escaper(self, escaper:Escaper) -> None:
    if escaper is None: raise InvalidArgument('escaper cannot be None')
    self._escaper = _validate_escaper(escaper)


  # Rendering.

  @staticmethod
  def quote(value:str) -> str:
    '''
    Quote an attribute value that has already been escaped.
    Double quotes are used unless the value contains a double quote, in which case single quotes are used.
    '''
    if '"' in value: return f"'{value}'"
    return f'"{value}"'


  def fmt_attrs(self) -> str:
    'Return a string that is either empty or with a leading space, containing all of the formatted attributes.'
    escaper = self.escaper
    parts:list[str] = []
    for k, v in self._attrs.items():
      if isinstance(v, Present):
        if v.is_present: v = ''
        else: continue
      parts.append(f' {escaper.escape_html(k)}={self.quote(escaper.escape_attribute(fmt_attr_val(v)))}')
    return ''.join(parts)


  def open_tag(self) -> str:
    return f'<{self._name}{self.fmt_attrs()}>'


  def close_tag(self) -> str:
    return f'</{self._name}>'


  def render_parts(self) -> Iterator[str]:
    'Render the element as a stream of strings.'
    if self._value is None:
      yield self.open_tag()[:-1]
      yield self.closing_bracket
      return
    yield self.open_tag()
    yield from self.render_value()
    yield self.close_tag()


  def render_value(self) -> Iterator[str]:
    'Render the content of the element as a stream of strings.'
    value = self._value
    if isinstance(value, (list, tuple)):
      for child in value:
        if isinstance(child, (str, Tag)): yield self.render_child(child)
        # Other entry types are skipped.
    elif value is not None:
      yield self.render_child(value)


  def render_child(self, child:TagChild) -> str:
    if isinstance(child, Tag): return child.render()
    return self.escaper.escape_html(child) if self._escape else child


  def render(self) -> str:
    'Render the element into a single string.'
    return ''.join(self.render_parts())


  # Text summary.

  def summary(self, text_limit=32) -> str:
    'Return a single-line summary of the element for debugging.'
    attr_words = ''.join(attr_summary(k, v, text_limit=text_limit) for k, v in self._attrs.items())
    return f'<{self._name}:{attr_words}{"".join(_child_summary(c, text_limit) for c in self._children())}>'


  def summarize(self, levels=1, indent=0) -> str:
    'Return a multi-line summary of the element tree, expanding `levels` levels of nested elements.'
    nl_indent = '\n' + '  ' * indent
    return ''.join(self._summarize(levels, nl_indent))

  def _summarize(self, levels:int, nl_indent:str) -> Iterator[str]:
    if levels == 0 or self._value is None:
      yield self.summary()
      return
    attr_words = ''.join(attr_summary(k, v, text_limit=32) for k, v in self._attrs.items())
    nl_indent1 = nl_indent + '  '
    yield f'<{self._name}:{attr_words}'
    for c in self._children():
      yield nl_indent1
      if isinstance(c, Tag):
        yield from c._summarize(levels-1, nl_indent1)
      else:
        yield repr_lim(c, 64)
    yield '>'


  def _children(self) -> Iterator[Any]:
    value = self._value
    if value is None: return
    if isinstance(value, (list, tuple)): yield from value
    else: yield value


class XhtmlTag(Tag):
  'A Tag that renders void elements in XHTML style by default.'
  __slots__ = ()
  xhtml_default = True


def fmt_attr_val(val:Any) -> str:
  '''
  Convert an attribute value to a string prior to escaping.
  Sequences are joined with single spaces; `Present` entries within them are skipped.
  '''
  if isinstance(val, (list, tuple)): return ' '.join(fmt_attr_val(el) for el in val if not isinstance(el, Present))
  if val is None: return ''
  if val is True or val is False: return str(val).lower()
  if isinstance(val, float): return str(prefer_int(val))
  return str(val)


def prefer_int(v:float) -> int|float:
  'Convert integral floats to int.'
  return int(v) if v.is_integer() else v


def _validate_value(value:Any) -> TagValue:
  if value is None or isinstance(value, (str, Tag, list, tuple)): return value
  raise InvalidArgument(f'tag value must be None, a string, a Tag, or a list or tuple; received: {repr_lim(value)}')


def _validate_escaper(escaper:Any) -> Escaper|None:
  if escaper is None or isinstance(escaper, Escaper): return escaper
  raise InvalidArgument(f'escaper must provide `escape_html` and `escape_attribute`; received: {escaper!r}')


def _child_summary(child:Any, text_limit:int) -> str:
  if isinstance(child, Tag): return ' ' + child._name
  return ' ' + repr_lim(child, limit=text_limit)
