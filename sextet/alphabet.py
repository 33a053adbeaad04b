# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Base64 alphabets and the shared decode table.
'''

from enum import Enum


# The standard alphabet of RFC 4648 section 4.
std_alphabet = b'ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/'
assert len(std_alphabet) == 64

# The URL and filename safe alphabet of RFC 4648 section 5; only the last two symbols differ.
url_alphabet = b'ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_'
assert len(url_alphabet) == 64
assert std_alphabet[:62] == url_alphabet[:62]

pad_char = ord('=')


class Variant(Enum):
  'Selects the encode alphabet. Decoding accepts either.'
  STD = std_alphabet
  URL = url_alphabet

STD = Variant.STD
URL = Variant.URL


UNRECOGNIZED = 0xff
PAD_VALUE = 0x40 # Recognized as a symbol; contributes a zero sextet (`PAD_VALUE & 0x3f`).


def _decode_value(byte:int) -> int:
  if byte == pad_char: return PAD_VALUE
  for alphabet in (std_alphabet, url_alphabet):
    i = alphabet.find(byte)
    if i >= 0: return i
  return UNRECOGNIZED

# Maps every byte value to its sextet, PAD_VALUE, or UNRECOGNIZED.
# Note that 'A' legitimately maps to 0; see `decode(..., zero_is_noise=True)`.
decode_table = bytes(_decode_value(b) for b in range(0x100))
assert len(decode_table) == 0x100


def symbol_value(byte:int) -> int|None:
  'Return the sextet value of a symbol byte (0 for padding), or None if the decoder treats it as noise.'
  v = decode_table[byte]
  if v == UNRECOGNIZED: return None
  return v & 0x3f
