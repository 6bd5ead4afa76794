import os

from setuptools import setup, find_packages

with open(os.path.join(os.path.dirname(__file__), "readme.md"), "r") as fh:
    long_description = fh.read()

setup(
    name='bikerental',
    version='1.0.0',
    license='MIT',
    description='An in-memory bike rental service.',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires='>=3.8',
    install_requires=[
        'marshmallow>=3',
        'shapely>=2',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-asyncio',
            'faker',
        ],
    },
)
