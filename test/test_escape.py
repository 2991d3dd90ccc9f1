# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

import pytest

from tagmu.escape import default_escaper, Escaper, HtmlEscaper
from tagmu.exceptions import InvalidArgument


esc = HtmlEscaper()


def test_escape_html() -> None:
  assert esc.escape_html('Hello World!') == 'Hello World!'
  assert esc.escape_html('info@phower.com') == 'info@phower.com'
  assert esc.escape_html('<a href=\'x\'>&"') == '&lt;a href=&#039;x&#039;&gt;&amp;&quot;'
  assert esc.escape_html('&amp;') == '&amp;amp;'


def test_escape_attribute_urls() -> None:
  assert esc.escape_attribute('http://phower.com') == 'http&#x3A;&#x2F;&#x2F;phower.com'
  assert esc.escape_attribute('Phower Website') == 'Phower&#x20;Website'
  assert esc.escape_attribute('audio/mpeg') == 'audio&#x2F;mpeg'


def test_escape_attribute_safe_chars() -> None:
  assert esc.escape_attribute('') == ''
  assert esc.escape_attribute('123') == '123'
  assert esc.escape_attribute('_blank') == '_blank'
  assert esc.escape_attribute('a-b.c,d') == 'a-b.c,d'


def test_escape_attribute_named_entities() -> None:
  assert esc.escape_attribute('"&<>') == '&quot;&amp;&lt;&gt;'
  assert esc.escape_attribute("it's") == 'it&#x27;s'


def test_escape_attribute_control_chars() -> None:
  assert esc.escape_attribute('a\x01b') == 'a&#xFFFD;b'
  assert esc.escape_attribute('\x7f\x85') == '&#xFFFD;&#xFFFD;'
  assert esc.escape_attribute('\t\n\r') == '&#x09;&#x0A;&#x0D;'


def test_escape_attribute_non_ascii() -> None:
  assert esc.escape_attribute('café') == 'caf&#xE9;'
  assert esc.escape_attribute('€') == '&#x20AC;'
  assert esc.escape_attribute('\U0001F600') == '&#x1F600;'


def test_escape_non_str() -> None:
  assert esc.escape_attribute(800) == '800'
  assert esc.escape_html(1.5) == '1.5'


def test_encoding() -> None:
  latin = HtmlEscaper('latin-1')
  assert latin.encoding == 'iso8859-1'
  assert latin.escape_attribute(b'caf\xe9') == 'caf&#xE9;'
  assert esc.escape_html(b'caf\xc3\xa9') == 'café'
  assert esc.escape_attribute(b'\xff') == '&#xFFFD;'
  assert HtmlEscaper('UTF8') == HtmlEscaper()


@pytest.mark.parametrize('encoding', ['', '  ', 'no-such-encoding', None])
def test_invalid_encoding(encoding) -> None:
  with pytest.raises(InvalidArgument):
    HtmlEscaper(encoding)


def test_default_escaper() -> None:
  assert default_escaper() is default_escaper()
  assert isinstance(default_escaper(), Escaper)
  assert not isinstance(object(), Escaper)
