"""Package build script"""
import os
import re
import setuptools

ver_file = f'spheroidal{os.sep}VERSION'
__version__ = None

# Pull package version number from the VERSION file shipped with the package
with open(ver_file, 'r') as f:
    for line in f.readlines():
        verstr = re.match(r'^\s*(\d+\.\d+\.\d+(?:\.[a-zA-Z0-9]+)?)\s*$', line)
        if verstr is not None:
            __version__ = verstr.groups()[0]
            break

    if __version__ is None:
        raise EnvironmentError(f'Could not find valid version number in {ver_file}; aborting setup')

with open("./README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="spheroidal",
    version=__version__,
    author="",
    author_email="",
    description="Great ellipse and geocentric coordinate computations on an oblate spheroid.",
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=setuptools.find_packages(
        include=('spheroidal*', ),
        exclude=('*tests', 'tests*')
    ),
    package_data={"spheroidal": ["py.typed", "VERSION"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent"
    ],
    python_requires='>=3.8',
    install_requires=[
        'numpy>=1',
        'pydantic>=2',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
