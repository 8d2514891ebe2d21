"""bulk clone git repositories from a repo list"""

__version__ = "0.1.0"
