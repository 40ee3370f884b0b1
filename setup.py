from setuptools import find_packages
from setuptools import setup

setup(
    name="yaml-pathfinder",
    version="0.1.0",
    license="BSD",

    python_requires=">=3.11",
    description="Typed, fault-tolerant field access to YAML and JSON documents via simple paths",

    packages=find_packages(exclude=("pathfinder.test",)),

    install_requires=[
        "Click~=8.1",
        "PyYAML~=6.0",
    ],

    extras_require={
        "test": [
            "pytest~=8.0",
        ],
    },

    classifiers=[
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.11',

    ],
    entry_points={
        'console_scripts': [
            'pathfinder = pathfinder.cli:main',
        ],
    },
)
