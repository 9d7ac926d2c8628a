import setuptools

setuptools.setup(
	name='hexfloat',
	version='0.1.0',
	packages=[
		'hexfloat',
		'hexfloat.conversion',
		'hexfloat.parsing',
		'hexfloat.scanning',
		'hexfloat.support',
	],
	description='Parse hexadecimal floating-point literals and convert them to IEEE-754 binary formats of any width',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	python_requires='>=3.9',
	extras_require={'test': ['pytest']},
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Software Development :: Compilers",
		"Development Status :: 3 - Alpha",
    ],
)
