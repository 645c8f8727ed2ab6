""" ecproj build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import ecproj

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=ecproj.name,
    version=ecproj.__version__,
    license=ecproj.__license__,
    author=ecproj.__author__,
    author_email=ecproj.__author_email__,
    description="Elliptic curve point arithmetic in projective coordinates",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"ecproj": ["data/*.json"]},
    include_package_data=True,
    install_requires=["dataclasses-json"],
    extras_require={"test": ["pytest"]},
    keywords="elliptic-curves secp256k1 projective-coordinates finite-fields",
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Scientific/Engineering",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
