""" eccproto build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import eccproto

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=eccproto.name,
    version=eccproto.__version__,
    license=eccproto.__license__,
    author=eccproto.__author__,
    author_email=eccproto.__author_email__,
    description="ECDH, ECDSA, and Schnorr signatures over integer messages",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=["ECPy"],
    extras_require={"tests": ["pytest"]},
    keywords=(
        "cryptography elliptic-curves ecdh ecdsa schnorr "
        "modular-inverse digital-signature key-agreement"
    ),
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
