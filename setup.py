# setup.py
from setuptools import setup, find_packages

setup(
    name="tileset_assets",
    version="0.1.0",
    packages=find_packages(include=['tileset_assets', 'tileset_assets.*']),
    install_requires=[
        "construct>=2.10",
        "numpy>=1.20.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    python_requires=">=3.8",
    description="Decoders for CV5/VX4/VF4/VR4/WPE tileset files and megatile color/flag resolution",
    keywords="tileset, terrain, megatile, minitile, palette",
    entry_points={
        'console_scripts': [
            'inspect-tileset=tileset_assets.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Topic :: Games/Entertainment",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
