# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from .alphabet import pad_char, STD, Variant
from .buffers import ByteBuf, check_capacity, encoded_len, MutByteBuf


def encode(target:MutByteBuf, source:ByteBuf, length:int|None=None, variant:Variant=STD) -> int:
  '''
  Encode the first `length` bytes of `source` into `target` using the alphabet of `variant`,
  and return the number of symbols written, which is always `encoded_len(length)`.
  Padding symbols are included; no terminator byte is written.

  `target` must hold at least `encoded_len(length)` bytes; see also `encode_capacity`.
  `target` may be the same buffer as `source` (in-place growth),
  provided that the buffer is long enough for the encoded result.
  This works because both streams are processed back to front:
  each group of source bytes is read before its symbols are written,
  and the symbols always land at or above the positions of the bytes they came from.
  '''
  if length is None: length = len(source)
  if length < 0: raise ValueError(f'encode: length must be >= 0; received {length!r}.')
  if length > len(source): raise ValueError(f'encode: length {length} exceeds source length {len(source)}.')
  size = encoded_len(length)
  check_capacity(target, size, op='encode')

  a = variant.value
  groups, mod = divmod(length, 3)
  r = length # Read index; one past the next byte to read.
  w = size # Write index; one past the next symbol to write.

  if mod == 2:
    b1 = source[r-2]
    b2 = source[r-1]
    r -= 2
    target[w-1] = pad_char
    target[w-2] = a[(b2 & 0x0f) << 2]
    target[w-3] = a[((b1 & 0x03) << 4) | (b2 >> 4)]
    target[w-4] = a[b1 >> 2]
    w -= 4
  elif mod == 1:
    b1 = source[r-1]
    r -= 1
    target[w-1] = pad_char
    target[w-2] = pad_char
    target[w-3] = a[(b1 & 0x03) << 4]
    target[w-4] = a[b1 >> 2]
    w -= 4

  for _ in range(groups):
    b1 = source[r-3]
    b2 = source[r-2]
    b3 = source[r-1]
    r -= 3
    target[w-1] = a[b3 & 0x3f]
    target[w-2] = a[((b2 & 0x0f) << 2) | (b3 >> 6)]
    target[w-3] = a[((b1 & 0x03) << 4) | (b2 >> 4)]
    target[w-4] = a[b1 >> 2]
    w -= 4

  assert r == 0 and w == 0, (r, w)
  return size
