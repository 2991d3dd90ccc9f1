# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Exception classes for tag construction and mutation.
'''


class InvalidArgument(ValueError, TypeError):
  '''
  Raised when a tag name, tag value, attribute name, or escaper option is rejected.
  A rejected argument can be the wrong type or the right type with a bad value,
  so this subclasses both ValueError and TypeError.
  '''


class DuplicateAttribute(InvalidArgument, KeyError):
  'Raised when adding an attribute whose name is already present.'

  def __str__(self) -> str: return str(self.args[0]) if self.args else ''


class MissingAttribute(InvalidArgument, KeyError):
  'Raised when reading or removing an attribute that is not present.'

  def __str__(self) -> str: return str(self.args[0]) if self.args else ''
