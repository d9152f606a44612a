""" tronlib build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import tronlib

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=tronlib.name,
    version=tronlib.__version__,
    url="https://github.com/tronlib/tronlib",
    project_urls={
        "GitHub": "https://github.com/tronlib/tronlib",
        "Issues": "https://github.com/tronlib/tronlib/issues",
    },
    license=tronlib.__license__,
    author=tronlib.__author__,
    author_email=tronlib.__author_email__,
    description="TRON addresses, Base58Check, ABI encoding, and transaction signing",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"tronlib": ["_data/*.json"]},
    install_requires=["dataclasses_json", "pycryptodome", "httpx"],
    extras_require={"secp256k1": ["coincurve"], "test": ["pytest", "coincurve"]},
    entry_points={"console_scripts": ["tronlib=tronlib.cli:main"]},
    keywords=(
        "tron trx cryptography elliptic-curves ecdsa secp256k1 RFC-6979 "
        "keccak base58check address abi multisig"
    ),
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
