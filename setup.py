# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='sri',
  version='0.0.1',
  description='Compute Subresource Integrity hashes for files, standard input, and HTTP URLs.',
  python_requires='>=3.10',

  packages=['sri'],
  install_requires=['requests'],
  extras_require={'test': ['pytest']},
  entry_points={'console_scripts': ['sri=sri.__main__:main']},
)
