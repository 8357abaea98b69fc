#!/usr/bin/python3

from setuptools import setup, find_packages

setup(
	# package declaration
	name='pylinkarm',
	version='0.1.0',
	python_requires='>=3.8',
	install_requires=[
		'pyglm>=2.5.5',
		'numpy>=1.1',
		'pyyaml>=5',
		],
	extras_require={
		'test': ['pytest>=6'],
		},
	# source declaration
	packages=find_packages(include=['linkarm', 'linkarm.*']),

	# metadata for pypi
	description="Direct and inverse kinematic of serial linkage chains, using cyclic coordinate descent",
	long_description=open('README.md').read(),
	long_description_content_type='text/markdown',
	license='GNU LGPL v3',
	keywords='kinematic inverse-kinematic ccd linkage chain robot arm solver',
	classifiers=[
		'Topic :: Scientific/Engineering',
		'Development Status :: 3 - Alpha',
		'Programming Language :: Python :: 3.8',
		'Programming Language :: Python :: 3.9',
		'Programming Language :: Python :: 3.10',
		'Programming Language :: Python :: Implementation :: CPython',
		'License :: OSI Approved :: GNU Lesser General Public License v3 (LGPLv3)',
		'Intended Audience :: Science/Research',
		'Intended Audience :: Education',
		],
	)
