#!/usr/bin/env python3
# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'Encode or decode base64. With no paths, read from std in.'

from argparse import ArgumentParser
from sys import stdin
from typing import Iterator

from ..alphabet import STD, URL, Variant
from ..buffers import encode_capacity
from ..decode import decode
from ..encode import encode
from ..io import errSL, outB


def main() -> None:
  parser = ArgumentParser(description='Encode or decode base64. With no paths, read from std in.')
  parser.add_argument('-decode', action='store_true', help='Decode instead of encode.')
  parser.add_argument('-url', action='store_true', help='Encode with the URL-safe alphabet. Decoding accepts both alphabets.')
  parser.add_argument('-zero-noise', action='store_true',
    help="When decoding, treat 'A' as noise, as the historical lookup table did.")
  parser.add_argument('-wrap', type=int, default=76, help='Wrap encoded output at this many columns; 0 disables wrapping.')
  parser.add_argument('-v', '-verbose', dest='verbose', action='store_true', help='Log byte counts to std err.')
  parser.add_argument('paths', nargs='*', help="Files to read; '-' reads std in.")
  args = parser.parse_args()

  if args.wrap < 0: exit(f'error: -wrap must be >= 0; received {args.wrap}.')
  variant = URL if args.url else STD

  for path, data in read_inputs(args.paths or ['-']):
    if args.decode:
      res = decode_data(data, zero_is_noise=args.zero_noise)
    else:
      res = encode_data(data, variant=variant, wrap=args.wrap)
    outB(res)
    if args.verbose: errSL(f'{path}:', len(data), '->', len(res), 'bytes.')


def read_inputs(paths:list[str]) -> Iterator[tuple[str,bytes]]:
  for path in paths:
    if path == '-':
      yield '<stdin>', stdin.buffer.read()
      continue
    try:
      with open(path, 'rb') as f: data = f.read()
    except OSError as e: exit(f'error: could not read {path!r}: {e.strerror}.')
    yield path, data


def encode_data(data:bytes, variant:Variant=STD, wrap=76) -> bytes:
  '''
  Encode `data` in place, within a single buffer of `encode_capacity` bytes.
  The result is split into lines of `wrap` columns (0 for a single line), each terminated by a newline.
  Empty input produces empty output.
  '''
  length = len(data)
  buf = bytearray(encode_capacity(length))
  buf[:length] = data
  size = encode(buf, buf, length, variant=variant)
  del buf[size:] # Drop the unused capacity.
  step = wrap or max(size, 1)
  return b''.join(bytes(buf[i:i+step]) + b'\n' for i in range(0, size, step))


def decode_data(data:bytes, zero_is_noise=False) -> bytes:
  'Decode `data` in place. Line breaks and any other noise are skipped by the decoder.'
  buf = bytearray(data)
  size = decode(None, buf, zero_is_noise=zero_is_noise)
  return bytes(buf[:size])


if __name__ == '__main__': main()
