# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Convenience constructors, one per catalog row, e.g. `tags.a('Home', href='/')` or `tags.img('logo.png', 'Logo')`.
Tags whose names are Python keywords get a trailing underscore: `tags.del_`.

`tags.xhtml` provides the same constructors, building `XhtmlTag` elements.
`constructors` maps tag names to constructors, for dispatch by name.
'''

from types import SimpleNamespace

from .catalog import mk_constructors, tag_descs, TagConstructor
from .tag import XhtmlTag


constructors:dict[str,TagConstructor] = mk_constructors()

xhtml_constructors:dict[str,TagConstructor] = mk_constructors(XhtmlTag)

xhtml = SimpleNamespace(**{ c.__name__: c for c in xhtml_constructors.values() })

globals().update((c.__name__, c) for c in constructors.values())

__all__ = ['constructors', 'xhtml', 'xhtml_constructors', *(desc.py_name for desc in tag_descs)]
