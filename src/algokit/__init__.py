"""
algokit
=======
A collection of independent algorithm and data-structure units.

Each subpackage is self-contained: plain functions or freely instantiable
classes, owned by the caller. Nothing here holds process-wide state.
"""
from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("algokit")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"
