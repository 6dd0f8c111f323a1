"""
Version
-------

Defines the version of the application.

.. autodata:: bikestore.version.__version__
"""

__version__ = "1.0.0"
"""The current version."""

name = "bikestore"
