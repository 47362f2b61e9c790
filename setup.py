#!/usr/bin/env python3

from setuptools import setup

setup(
    author="Elias Zamaria",
    description="Hex, Base64 and XOR tools with single-byte XOR key recovery.",
    extras_require={"test": ["pytest >= 7.0"]},
    install_requires="pycryptodomex >= 3.4.2",
    license="MIT",
    name="xor-cryptanalysis",
    py_modules=["challenges", "english", "util"],
    python_requires=">=3.8",
    url="https://github.com/mikez302/cryptopals_solutions",
    version="0.1.0",
)
