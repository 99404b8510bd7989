#!/usr/bin/python3

# The MIT License (MIT)
# 
# Copyright (c) 2018-2022 Yury Gribov
# 
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

import setuptools

with open('README.md', 'r') as f:
  long_description = f.read()

setuptools.setup(
  name='availtree',
  version='0.1',
  author='Yury Gribov',
  author_email='tetra2005@gmail.com',
  description="Aggregation of availability windows with coverage queries",
  long_description=long_description,
  long_description_content_type='text/markdown',
  url='https://github.com/yugr/availtree',
  # Packages have no __init__.py
  packages=setuptools.find_namespace_packages(include=['availtree', 'availtree.*'],
                                              exclude=['availtree.test']),
  python_requires='>=3.6',
  extras_require={
    'test': ['pytest'],
  },
  entry_points={
    'console_scripts': ['availtree=availtree.__main__:main'],
  },
  classifiers=[
    'Programming Language :: Python :: 3',
    'License :: OSI Approved :: MIT License',
    'Operating System :: OS Independent',
  ],
)
