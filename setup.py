"""Packaging settings."""

from codecs import open as codecs_open
from os.path import abspath, dirname, join

from setuptools import find_packages, setup

THIS_DIR = abspath(dirname(__file__))


with codecs_open(join(THIS_DIR, "README.md"), encoding="utf-8") as readfile:
    LONG_DESCRIPTION = readfile.read()


INSTALL_REQUIRES = [
    "click>=8.0",
    "coloredlogs",
    "humanfriendly",  # terminal color detection, also required by coloredlogs
    "packaging",  # parsing of detected tool versions
    "pydantic>=2.0",
    "typing_extensions",
]

TEST_REQUIRES = [
    "pytest",
    "pytest-mock",
    "pytest-subprocess",
]


setup(
    name="iackit",
    version="0.1.0",
    description="Build and run Terraform and Terragrunt commands from CI inputs",
    long_description=LONG_DESCRIPTION,
    long_description_content_type="text/markdown",
    license="Apache License 2.0",
    classifiers=[
        "Intended Audience :: Developers",
        "Topic :: Utilities",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.9",
    keywords="cli",
    packages=find_packages(exclude=("tests*",)),
    install_requires=INSTALL_REQUIRES,
    extras_require={"test": TEST_REQUIRES},
    entry_points={"console_scripts": ["iackit=iackit._cli.main:cli"]},
)
