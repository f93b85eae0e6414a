import setuptools

setuptools.setup(
	name='rangefinder',
	version='0.1.0',
	packages=[
		'rangefinder',
		'rangefinder.support',
	],
	package_data={'rangefinder': ['data/*.json']},
	python_requires='>=3.9',
	extras_require={'test': ['pytest']},
	description='Find Unicode codepoint ranges by category and print them as BNF character-class alternatives',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Software Development :: Compilers",
		"Topic :: Text Processing",
		"Development Status :: 3 - Alpha",
    ],
)
