# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='sextet',
  version='0.0.1',
  description='Sextet is a lenient base64 codec for caller-supplied buffers, with standard and URL-safe alphabets.',
  python_requires='>=3.10',

  packages=['sextet', 'sextet.bin'],
  py_modules=['utest'],
  entry_points={'console_scripts': ['sextet=sextet.bin.sextet:main']},
  extras_require={'perf': ['pyperf']},
)
