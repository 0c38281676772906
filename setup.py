#!/usr/bin/env python
from setuptools import setup

setup(name='twconfig',
      version='0.1',
      description='Parser for Teeworlds/DDNet config variable headers and settings files',
      packages=['twconfig'],
      install_requires=['lark', 'dataslots>=1.1'],
)
