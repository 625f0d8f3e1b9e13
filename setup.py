#!/usr/bin/env python

from setuptools import setup

setup(
  name='xmlrender',
  version='0.1.0',
  description='Render nested dicts and lists as XML documents',
  packages=['xmlrender'],
  install_requires=['PyYAML'],
  python_requires='>=3.8',
)
