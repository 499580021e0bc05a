"""
Packaging for nxtbrick. Tests are run with `pytest`, after installing the test extra:

    pip install -e .[test]
"""

from setuptools import setup

setup(
    name='nxtbrick',
    version='0.0.1',
    description='Port attachment and interface management for LEGO NXT bricks.',
    url='',
    author='',
    author_email='',
    license='LGPL',
    package_dir={'': 'src'},
    packages=['nxtbrick', 'nxtbrick.commands', 'nxtbrick.config', 'nxtbrick.interface', 'nxtbrick.support'],
    package_data={'nxtbrick.interface': ['*.cfg'], 'nxtbrick.config': ['*.cfg']},
    install_requires=[
        'configobj',
        'pyserial',
        'pyusb',
    ],
    extras_require={
        'test': ['pytest', 'PyHamcrest'],
    },
    zip_safe=False,
)
