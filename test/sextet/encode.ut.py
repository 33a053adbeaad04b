# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from sextet.alphabet import STD, URL, Variant
from sextet.buffers import CapacityError, encode_capacity, encoded_len
from sextet.encode import encode
from utest import utest, utest_exc, utest_val


def enc(data:bytes, variant:Variant=STD) -> bytes:
  target = bytearray(encode_capacity(len(data)))
  size = encode(target, data, variant=variant)
  return bytes(target[:size])


def enc_in_place(data:bytes, variant:Variant=STD) -> bytes:
  'Encode with the source at the front of the target buffer.'
  buf = bytearray(encode_capacity(len(data)))
  buf[:len(data)] = data
  size = encode(buf, buf, len(data), variant=variant)
  return bytes(buf[:size])


man = (b'Man is distinguished, not only by his reason, but by this singular passion from other animals, '
  b'which is a lust of the mind, that by a perseverance of delight in the continued and indefatigable generation '
  b'of knowledge, exceeds the short vehemence of any carnal pleasure.')

man_b64 = (b'TWFuIGlzIGRpc3Rpbmd1aXNoZWQsIG5vdCBvbmx5IGJ5IGhpcyByZWFzb24sIGJ1dCBieSB'
  b'0aGlzIHNpbmd1bGFyIHBhc3Npb24gZnJvbSBvdGhlciBhbmltYWxzLCB3aGljaCBpcyBhIG'
  b'x1c3Qgb2YgdGhlIG1pbmQsIHRoYXQgYnkgYSBwZXJzZXZlcmFuY2Ugb2YgZGVsaWdodCBpb'
  b'iB0aGUgY29udGludWVkIGFuZCBpbmRlZmF0aWdhYmxlIGdlbmVyYXRpb24gb2Yga25vd2xl'
  b'ZGdlLCBleGNlZWRzIHRoZSBzaG9ydCB2ZWhlbWVuY2Ugb2YgYW55IGNhcm5hbCBwbGVhc3V'
  b'yZS4=')

vectors = [
  (b'', b''),
  (b'f', b'Zg=='),
  (b'fo', b'Zm8='),
  (b'foo', b'Zm9v'),
  (b'foob', b'Zm9vYg=='),
  (b'fooba', b'Zm9vYmE='),
  (b'foobar', b'Zm9vYmFy'),
  (b'any carnal pleasure.', b'YW55IGNhcm5hbCBwbGVhc3VyZS4='),
  (b'any carnal pleasure', b'YW55IGNhcm5hbCBwbGVhc3VyZQ=='),
  (b'any carnal pleasur', b'YW55IGNhcm5hbCBwbGVhc3Vy'),
  (man, man_b64),
]

for data, exp in vectors:
  utest(exp, enc, data)
  utest(exp, enc_in_place, data)

# The two variants differ only in the last two symbols.
utest(b'+/8=', enc, b'\xfb\xff')
utest(b'-_8=', enc, b'\xfb\xff', variant=URL)
utest(b'++++', enc, b'\xfb\xef\xbe')
utest(b'----', enc, b'\xfb\xef\xbe', variant=URL)
utest(b'////', enc, b'\xff\xff\xff')
utest(b'____', enc, b'\xff\xff\xff', variant=URL)
utest(b'Zm9vYmFy', enc, b'foobar', variant=URL)
utest(b'AA==', enc, b'\x00')
utest(b'AAAA', enc, b'\x00\x00\x00')

# Return value and exact capacity.
utest(0, encode, bytearray(), b'')
utest(4, encode, bytearray(4), b'f')
utest(4, encode, bytearray(4), b'foo')
utest(8, encode, bytearray(8), b'foob')

# Output length and padding laws.
for length in range(0, 64):
  out = enc(bytes(range(length)))
  utest_val(encoded_len(length), len(out), f'encoded length of {length} bytes')
  utest_val((length + 2) // 3 * 4, len(out), f'ceil({length}/3)*4')
  utest_val({0: 0, 1: 2, 2: 1}[length % 3], out.count(b'='), f'padding count for {length} bytes')
  if length % 3: utest_val(True, out.endswith(b'=' * (3 - length % 3)), f'trailing padding for {length} bytes')

# Bytes past the encoded result are untouched; no terminator is written.
buf = bytearray(b'\xaa' * 10)
utest(4, encode, buf, b'fo')
utest_val(b'Zm8=' + b'\xaa' * 6, bytes(buf))

# An explicit length encodes a prefix of the source.
buf = bytearray(8)
utest(4, encode, buf, b'foobar', 3)
utest_val(b'Zm9v', bytes(buf[:4]))
utest(0, encode, buf, b'foobar', 0)

# Memoryview targets and sources.
buf = bytearray(8)
utest(4, encode, memoryview(buf)[2:6], b'foo')
utest_val(b'\0\0Zm9v\0\0', bytes(buf))

# In place, with the source given as a view of the target buffer.
buf = bytearray(b'foobar\0\0')
utest(8, encode, buf, memoryview(buf)[:6])
utest_val(b'Zm9vYmFy', bytes(buf))

# In place, for every length residue.
for data in [b'a', b'ab', b'abc', b'abcd', b'abcde', b'\xff\xfe\xfd\xfc\xfb\xfa\xf9', bytes(range(0x100))]:
  for variant in Variant:
    utest(enc(data, variant), enc_in_place, data, variant)

# Caller misuse.
utest_exc(CapacityError(op='encode', required=4, capacity=3), encode, bytearray(3), b'foo')
utest_exc(CapacityError(op='encode', required=8, capacity=6), encode, bytearray(6), b'foob')
utest_exc(ValueError, encode, bytearray(8), b'foo', -1)
utest_exc(ValueError, encode, bytearray(8), b'foo', 4)
utest_exc(TypeError, encode, bytes(4), b'foo')
