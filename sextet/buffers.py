# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Buffer types and sizing contracts.
The codec never allocates; callers size their target buffers with these functions.
'''


ByteBuf = bytes|bytearray|memoryview
MutByteBuf = bytearray|memoryview


class CapacityError(IndexError):
  'Raised when a caller-supplied target buffer is too small for the requested operation.'

  def __init__(self, op:str, required:int, capacity:int) -> None:
    self.op = op
    self.required = required
    self.capacity = capacity
    super().__init__(f'{op}: target capacity {capacity} is less than required {required}.')


def encoded_len(length:int) -> int:
  'The exact number of symbols that `encode` writes for `length` source bytes: ceil(length/3)*4.'
  return (length + 2) // 3 * 4


def encode_capacity(length:int) -> int:
  '''
  A safe over-provision for encode targets: length*4/3 + 4.
  Always at least `encoded_len(length)`.
  '''
  return length * 4 // 3 + 4


def decode_capacity(length:int) -> int:
  '''
  The target capacity required to decode `length` encoded bytes: floor(length/4)*3 + 3.
  The decoded count may be smaller, because padding is trimmed and noise is skipped.
  '''
  return max(0, length) // 4 * 3 + 3


def check_capacity(target:MutByteBuf, required:int, op:str) -> None:
  capacity = len(target)
  if capacity < required: raise CapacityError(op=op, required=required, capacity=capacity)
