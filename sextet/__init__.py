# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
sextet is a lenient base64 codec that works on caller-supplied buffers.
'''

from .alphabet import decode_table, pad_char, std_alphabet, STD, symbol_value, url_alphabet, URL, Variant
from .buffers import CapacityError, decode_capacity, encode_capacity, encoded_len
from .decode import decode
from .encode import encode
