#!/usr/bin/env python

from setuptools import setup

setup(name='basecalc',
      version='1.0',
      description='Console-based arbitrary precision calculator for bases 2 through 36',
      author='Vernon Mauery',
      author_email='vernon@mauery.com',
      url='',
      packages=['basecalc'],
      python_requires='>=3.7',
      install_requires=['mpmath'],
      extras_require={'test': ['pytest']},
      entry_points={
          'console_scripts': ['basecalc = basecalc.calculator:main'],
      },
     )
