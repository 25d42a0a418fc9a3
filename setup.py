import os
import re

from setuptools import setup, find_packages

# Utility function to read the README file.
# Used for the long_description.
def read(fname):
    with open(os.path.join(os.path.dirname(__file__), fname)) as f:
        return f.read()

# Read metadata from version file
metadata_file = read(os.path.join('rwt', '_version.py'))
metadata = dict(re.findall("__([a-z]+)__ = '([^']+)'", metadata_file))

setup(
    name = 'rwt',
    version = metadata['version'],
    description = ("Discrete and redundant wavelet transforms of 1D and 2D signals."),
    license = "BSD",
    keywords = "numpy, wavelet, discrete wavelet transform, undecimated wavelet transform",
    packages=find_packages(exclude=["*.tests", "*.tests.*", "tests.*", "tests"]),
    long_description=read('README.rst'),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "License :: OSI Approved :: BSD License",
        "Programming Language :: Python :: 3",
    ],

    install_requires=[ 'numpy', ],

    extras_require={
        'docs': [ 'sphinx', 'docutils', ],
        'test': [ 'pytest', 'coverage', ],
    },
)

# vim:sw=4:sts=4:et
