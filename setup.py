#!/usr/bin/env python

from setuptools import setup

setup(name='fretwork',
      version='1.0',
      description='A python library for finding, naming and exploring chord voicings on fretted string instruments',
      author='Andrey Barsky',
      author_email='andrey.barsky@gmail.com',
      install_requires=['numpy'],
      extras_require={
        'dev': [ 'ipdb' ],
        'test': [ 'pytest' ],
      },
      package_dir = {'fretwork': 'src'},
      packages = ['fretwork', 'fretwork.config', 'fretwork.test'],
     )
