from setuptools import find_packages, setup
import os

_dirname = os.path.dirname(os.path.abspath(__file__))
_readme_filename = os.path.join(_dirname, "README.md")
if not os.path.exists(_readme_filename):
    raise AssertionError("Expected: %s to exist." % (_readme_filename,))
README = open(_readme_filename, "r", encoding="utf-8").read()

setup(
    name="hashset",
    version="0.1.0",
    description="Generic unordered set container with set algebra backed by a dict",
    long_description=README,
    license="Apache License, Version 2.0",
    package_dir={"": "src"},
    packages=find_packages("src"),
    long_description_content_type="text/markdown",
    python_requires=">=3.8",
    # List run-time dependencies here. These will be installed by pip when
    # your project is installed.
    install_requires=[],
    # List additional groups of dependencies here (e.g. development
    # dependencies). You can install these using the following syntax,
    # for example:
    # $ pip install -e .[test]
    extras_require={
        "test": [
            "pytest",
            "pytest-xdist",
            "pytest-timeout",
        ]
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Libraries",
    ],
)
