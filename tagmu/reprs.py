# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

import re
from typing import Any


def repr_lim(obj:Any, limit=64) -> str:
  'Return a repr of `obj` that is at most `limit` characters long.'
  r = repr(obj)
  if limit > 2 and len(r) > limit:
    q = r[0]
    if q in '\'"': return f'{r[:limit-2]}{q}…'
    else: return f'{r[:limit-1]}…'
  return r


def attr_summary(key:str, val:Any, *, text_limit:int) -> str:
  'Summarize an attribute as a word; keys that are not simple words are shown as reprs.'
  ks = key if _word_re.fullmatch(key) else repr(key)
  return f' {ks}={repr_lim(val, text_limit)}'


_word_re = re.compile(r'[-\w]+')
