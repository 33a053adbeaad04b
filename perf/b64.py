# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Benchmark the sextet codec with pyperf.
Usage: python3 perf/b64.py [pyperf options, e.g. -o results.json]
'''

from pyperf import Runner

from sextet.alphabet import URL
from sextet.buffers import decode_capacity, encode_capacity
from sextet.decode import decode
from sextet.encode import encode


message = b'any carnal pleasure.'
long_message = bytes(range(0x100)) * 16


def encode_then_decode(data:bytes) -> None:
  'Encode `data` into a scratch buffer, then decode it into a second one.'
  enc_buf = bytearray(encode_capacity(len(data)))
  size = encode(enc_buf, data)
  dec_buf = bytearray(decode_capacity(size))
  decode(dec_buf, enc_buf, size)


def main() -> None:
  runner = Runner()
  enc_buf = bytearray(encode_capacity(len(long_message)))
  size = encode(enc_buf, long_message)
  dec_buf = bytearray(decode_capacity(size))

  runner.bench_func('round trip short', encode_then_decode, message)
  runner.bench_func('encode 4KiB', encode, enc_buf, long_message)
  runner.bench_func('encode 4KiB url', encode, enc_buf, long_message, len(long_message), URL)
  runner.bench_func('decode 4KiB', decode, dec_buf, enc_buf, size)


if __name__ == '__main__': main()
