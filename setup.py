#!/usr/bin/env python
#
# -----------------------------------------------------------------------------
# Copyright (c) 2026 The Regents of the University of California
#
# This file is part of fastamut and is licensed under the MIT license: see
# LICENSE.
# -----------------------------------------------------------------------------

from setuptools import setup


dependencies = ['numpy>=1.17', 'pysam>=0.15']

setup(name='fastamut',
      version='0.1.0',
      description=('Simulate single-nucleotide polymorphisms in large '
                   'reference genomes'),
      license='MIT',
      packages=['fastamut', 'fastamut.cli', 'fastamut.tests'],
      package_data={
          'fastamut': ['tests/data/*']
      },
      include_package_data=True,
      install_requires=dependencies,
      extras_require={
          'test': ['pytest>=3.6', 'scipy>=1.1'],
      },
      python_requires='>=3.6',
      entry_points={
          'console_scripts': ['fastamut = fastamut.__main__:main']
      },
      classifiers=[
          'Development Status :: 4 - Beta',
          'Environment :: Console',
          'License :: OSI Approved :: MIT License',
          'Programming Language :: Python :: 3',
          'Topic :: Scientific/Engineering :: Bio-Informatics'
      ],
      zip_safe=False)
