"""merkletrie setup - binary trie with a Merkle root."""
from setuptools import setup, find_packages

setup(
    name="merkletrie",
    version="1.0.0",
    description="merkletrie: binary prefix trie over key bits with a Merkle root",
    packages=find_packages(include=["merkletrie", "merkletrie.*", "merkletrie_cli", "merkletrie_cli.*"]),
    python_requires=">=3.10",
    install_requires=[
        "click>=8.0",
        "blake3>=0.3",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "merkletrie=merkletrie_cli.main:cli",
        ],
    },
)
