"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='retronym',
	version='0.0.1',
	packages=['retronym'],
	entry_points={
		'console_scripts': ["retronym = retronym.cmdline:main"],
	},
	license='BSD',
	description='A thoroughly modern assembler for retro consoles and computer systems',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: BSD License",
		"Operating System :: OS Independent",
		"Development Status :: 2 - Pre-Alpha",
		"Intended Audience :: Developers",
		"Topic :: Software Development :: Assemblers",
		"Environment :: Console",
    ],
	python_requires='>=3.9',
	install_requires=[
		"booze-tools>=0.6.2.1",
	]
)
