import os

from setuptools import setup, find_packages

with open(os.path.join(os.path.dirname(__file__), "readme.md"), "r") as fh:
    long_description = fh.read()

setup(
    name='bikestore',
    version='1.0.0',
    license='MIT',
    description='A small JSON API for managing the bikes in a store.',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires='>=3.10',
    install_requires=[
        'aiohttp',
        'marshmallow>=3.10,<4',
        'uvloop',
        'sentry-sdk',
    ],
    extras_require={
        'test': [
            'pytest',
            'Faker',
        ],
    },
    entry_points={
        'console_scripts': ['bikestore=bikestore.cli:run'],
    },
)
