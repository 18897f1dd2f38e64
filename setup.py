# pylint: disable=missing-module-docstring
from pathlib import Path

from setuptools import setup, find_packages

this_directory = Path(__file__).parent

with open(this_directory / "requirements.in", encoding="utf-8") as f:
    requirements = f.read().splitlines()

long_description = (this_directory / "README.md").read_text()

setup(
    name="collectkit",
    version="1.0.0",
    description="collectkit provides a two-buffer FIFO queue, a lazy word sequence and generic "
    "batching over sliceable collections.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="collectkit Team",
    license="LGPL-2.1 license",
    classifiers=[
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    packages=find_packages(include=["collectkit", "collectkit.*"]),
    install_requires=["setuptools"] + requirements,
    extras_require={"dev": ["pytest"]},
    python_requires=">=3.10",
    entry_points={
        "console_scripts": [
            "collectkit = collectkit.run_collectkit:cli",
        ]
    },
)
