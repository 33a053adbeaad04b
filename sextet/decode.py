# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from typing import cast

from .alphabet import decode_table, pad_char, UNRECOGNIZED
from .buffers import ByteBuf, MutByteBuf


def decode(target:MutByteBuf|None, encoded:ByteBuf, length:int|None=None, *, zero_is_noise=False) -> int:
  '''
  Decode the first `length` bytes of `encoded` into `target` and return the number of bytes written.
  If `target` is None, the result is written over `encoded`, which must then be mutable.
  Either alphabet is accepted; no terminator byte is written.

  The decoder is lenient and never fails on malformed input:
  * bytes that are neither alphabet symbols nor '=' are skipped wherever they occur;
  * symbols are consumed four at a time, each quartet producing three bytes;
  * a trailing group of 1-3 symbols still produces 1-3 bytes, with the missing sextets taken as zero;
  * if the last symbol consumed is '=', the count is reduced by one, and by one more if the symbol before it is also '='.
  Entirely unrecognized input decodes to zero bytes.

  A separate `target` should hold at least `decode_capacity(length)` bytes.
  Writing past the end of a smaller buffer raises IndexError.

  `zero_is_noise` reproduces a lookup table that conflated the sextet 0 ('A') with "unrecognized":
  when set, every 'A' is skipped as noise.
  '''
  out = cast(MutByteBuf, encoded) if target is None else target
  if length is None: length = len(encoded)
  if length <= 0: return 0
  if length > len(encoded): raise ValueError(f'decode: length {length} exceeds encoded length {len(encoded)}.')

  table = decode_table # Local alias.
  w = 0 # Write index. Trails the read index, so decoding in place is safe.
  quad = [0, 0, 0, 0]
  n = 0 # Number of sextets held in `quad`.
  last = -1 # The last two symbols consumed, for trimming padding.
  prev = -1

  for i in range(length):
    c = encoded[i]
    v = table[c]
    if v == UNRECOGNIZED or (zero_is_noise and v == 0): continue
    prev = last
    last = c
    quad[n] = v & 0x3f
    n += 1
    if n == 4:
      v1, v2, v3, v4 = quad
      out[w] = ((v1 << 2) | (v2 >> 4)) & 0xff
      out[w+1] = ((v2 << 4) | (v3 >> 2)) & 0xff
      out[w+2] = ((v3 << 6) | v4) & 0xff
      w += 3
      n = 0

  if n: # Truncated group; not valid base64, but decode what we can.
    v1 = quad[0]
    v2 = quad[1] if n > 1 else 0
    v3 = quad[2] if n > 2 else 0
    tail = (((v1 << 2) | (v2 >> 4)) & 0xff, ((v2 << 4) | (v3 >> 2)) & 0xff, (v3 << 6) & 0xff)
    for j in range(n):
      out[w+j] = tail[j]
    w += n

  if last == pad_char:
    w -= 1
    if prev == pad_char: w -= 1
  return w
