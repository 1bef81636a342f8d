import os
import re

import setuptools
from setuptools import find_packages

root = os.path.abspath(os.path.dirname(__file__))


def read_version(path):
    with open(os.path.join(root, path), encoding="utf-8") as fh:
        match = re.search(r'^__version__ = "([^"]+)"', fh.read(), re.MULTILINE)
    if match is None:
        raise RuntimeError("Unable to find version string.")
    return match.group(1)


def read_requirements(path):
    if not isinstance(path, list):
        path = [path]
    requirements = []
    for p in path:
        with open(os.path.join(root, p)) as fh:
            requirements.extend([line.strip() for line in fh if line.strip()])
    return requirements


with open(os.path.join(root, "README.md"), "r", encoding="utf-8") as fh:
    long_description = fh.read()


setuptools.setup(
    name="multipart-sdk",
    version=read_version("multipart_sdk/version.py"),
    description="Streaming multipart/form-data encoder with upload helpers for requests.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(
        where=root,
        exclude=(
            "docs",
            "requirements",
            "tests",
            "tests.*",
        ),
    ),
    install_requires=read_requirements(["requirements/requirements.sdk.http.txt"]),
    extras_require={
        "tests": read_requirements(["requirements/requirements.test.unit.txt"]),
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Topic :: Internet :: WWW/HTTP",
        "Topic :: Software Development :: Libraries",
        "Typing :: Typed",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
)
