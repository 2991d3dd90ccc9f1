# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
HTML escaping utilities.

`Tag` renders through an `Escaper`, which provides one operation for text (and attribute names)
and one for attribute values.
The default `HtmlEscaper` follows the OWASP recommendations for attribute values:
every character outside of a small safe set is encoded as a character reference.
'''

import re
from codecs import lookup as lookup_codec
from functools import lru_cache
from typing import Any, Protocol, runtime_checkable

from .exceptions import InvalidArgument


@runtime_checkable
class Escaper(Protocol):
  'The escaping collaborator used by `Tag` when rendering.'

  def escape_html(self, text:Any) -> str: ...

  def escape_attribute(self, text:Any) -> str: ...


class HtmlEscaper:
  '''
  Default escaper.
  `encoding` is used to decode bytes arguments; invalid byte sequences are replaced with U+FFFD.
  '''

  __slots__ = ('encoding',)

  def __init__(self, encoding:str='utf-8') -> None:
    if not isinstance(encoding, str) or not encoding.strip():
      raise InvalidArgument(f'escaper encoding must be a non-empty string; received: {encoding!r}')
    try: codec = lookup_codec(encoding)
    except LookupError as e: raise InvalidArgument(f'unsupported escaper encoding: {encoding!r}') from e
    self.encoding = codec.name


  def __repr__(self) -> str: return f'{type(self).__name__}({self.encoding!r})'


  def __eq__(self, other:Any) -> bool:
    return isinstance(other, HtmlEscaper) and self.encoding == other.encoding


  def __hash__(self) -> int: return hash((type(self), self.encoding))


  def to_str(self, text:Any) -> str:
    if isinstance(text, str): return text
    if isinstance(text, (bytes, bytearray)): return bytes(text).decode(self.encoding, errors='replace')
    return str(text)


  def escape_html(self, text:Any) -> str:
    'Escape `&`, `<`, `>`, and both quote characters.'
    return self.to_str(text).translate(_html_table)


  def escape_attribute(self, text:Any) -> str:
    '''
    Escape an attribute value.
    Empty strings and strings of ASCII digits are returned unchanged.
    All other characters outside of `[a-zA-Z0-9,._-]` are replaced with character references.
    '''
    text = self.to_str(text)
    if not text or _digits_re.fullmatch(text): return text
    return _attr_unsafe_re.sub(_attr_char_ref, text)


def _attr_char_ref(match:re.Match) -> str:
  c = match[0]
  o = ord(c)
  # Characters that are undefined in HTML get the replacement character.
  if (o <= 0x1f and c not in '\t\n\r') or (0x7f <= o <= 0x9f): return '&#xFFFD;'
  try: return f'&{_attr_named_entities[o]};'
  except KeyError: pass
  if o > 0xff: return f'&#x{o:04X};'
  return f'&#x{o:02X};'


@lru_cache(maxsize=1)
def default_escaper() -> HtmlEscaper:
  'The shared escaper used by tags that were not given one explicitly. It is stateless.'
  return HtmlEscaper()


_html_table = str.maketrans({
  '&': '&amp;', # Single pass; ampersands in the other replacements are not re-escaped.
  '<': '&lt;',
  '>': '&gt;',
  '"': '&quot;',
  "'": '&#039;',
})

_attr_named_entities = {
  0x22: 'quot',
  0x26: 'amp',
  0x3c: 'lt',
  0x3e: 'gt',
}

_attr_unsafe_re = re.compile(r'[^a-zA-Z0-9,.\-_]')
_digits_re = re.compile(r'[0-9]+')
