"""
Setup script for Arbor.
"""

from setuptools import find_packages
from setuptools import setup

LIBRARY = "arbor"

__version__ = "notset"
__author__ = "notset"

# Read version and metadata
with open(f"{LIBRARY}/__version__.py", "r", encoding="UTF8") as v:
    exec(v.read())  # nosec

with open("README.md", "r", encoding="UTF8") as f:
    long_description = f.read()

# Setup configuration
setup(
    name=LIBRARY,
    version=__version__,
    description="In-memory B-tree with proactive node splitting",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author=__author__,
    license="Apache-2.0",
    packages=find_packages(include=[LIBRARY, f"{LIBRARY}.*"]),
    python_requires=">=3.9",
    install_requires=["orjson"],
    extras_require={"test": ["pytest", "rich"]},
    entry_points={"console_scripts": ["arbor=arbor.__main__:main"]},
    zip_safe=False,
)
