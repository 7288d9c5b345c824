import os

from setuptools import setup, find_packages

with open(os.path.join(os.path.dirname(__file__), "readme.md"), "r") as fh:
    long_description = fh.read()

setup(
    name='motorent',
    version='1.0.0',
    license='MIT',
    description='A back office API for renting motorcycles to delivery couriers.',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires='>=3.8',
    install_requires=[
        'aiohttp>=3.8',
        'aiohttp-apispec',
        'aiohttp-cors',
        'uvloop',
        'tortoise-orm',
        'marshmallow>=3.13,<4',
        'marshmallow-jsonschema',
        'python-jose',
        'sentry-sdk',
    ],
    extras_require={
        'tests': [
            'pytest',
            'pytest-aiohttp',
            'pytest-asyncio',
            'faker',
        ],
    },
    entry_points={
        'console_scripts': ['motorent=motorent.cli:run'],
    },
)
