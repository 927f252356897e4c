import setuptools

setuptools.setup(
	name='bfup',
	version='0.1.1',
	packages=['bfup'],
	description='Preprocessor for brainfuck-like languages',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	python_requires='>=3.9',
	entry_points={'console_scripts': ['bfup = bfup.__main__:entry']},
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
		"Operating System :: OS Independent",
		"Topic :: Software Development :: Compilers",
		"Topic :: Software Development :: Pre-processors",
		"Development Status :: 3 - Alpha",
    ],
)
