# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from sextet.buffers import CapacityError, check_capacity, decode_capacity, encode_capacity, encoded_len
from utest import utest, utest_exc, utest_val


utest(0, encoded_len, 0)
utest(4, encoded_len, 1)
utest(4, encoded_len, 2)
utest(4, encoded_len, 3)
utest(8, encoded_len, 4)
utest(28, encoded_len, 20)

for length in range(0, 100):
  utest_val(True, encode_capacity(length) >= encoded_len(length), f'encode_capacity({length}) covers encoded_len')

utest(4, encode_capacity, 0)
utest(5, encode_capacity, 1)
utest(8, encode_capacity, 3)

utest(3, decode_capacity, 0)
utest(3, decode_capacity, 3)
utest(6, decode_capacity, 4)
utest(24, decode_capacity, 28)
utest(3, decode_capacity, -1)

utest(None, check_capacity, bytearray(4), 4, 'encode')
utest_exc(CapacityError(op='encode', required=4, capacity=3), check_capacity, bytearray(3), 4, 'encode')
utest_exc(IndexError, check_capacity, memoryview(bytearray(1)), 2, 'encode')

e = CapacityError(op='encode', required=8, capacity=5)
utest_val(('encode', 8, 5), (e.op, e.required, e.capacity))
utest_val('encode: target capacity 5 is less than required 8.', str(e))
