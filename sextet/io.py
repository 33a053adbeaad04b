# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Output helpers for the command line tool.
Diagnostics are plain lines on std err; encoded and decoded data is written to std out.
'''

from sys import stderr, stdout
from typing import Any, BinaryIO


def writeB(file:BinaryIO, *chunks:bytes|bytearray|memoryview, flush=False) -> None:
  'Write binary `chunks` to file with no separators.'
  for chunk in chunks:
    file.write(chunk)
  if flush: file.flush()


def outB(*chunks:bytes|bytearray|memoryview, flush=False) -> None:
  'Write binary `chunks` to the std out buffer.'
  stdout.flush() # Keep any prior text output ordered before the binary output.
  writeB(stdout.buffer, *chunks, flush=flush)


def errSL(*items:Any, flush=False) -> None:
  "Write items to std err; sep=' ', end='\\n'."
  print(*items, sep=' ', end='\n', file=stderr, flush=flush)
