# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

__version__ = '0.1.0'
