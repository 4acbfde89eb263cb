"""
searchpaths - layered search-path resolution

Maps relative resource names (assets, include files, plugins) to existing
filesystem locations by consulting an ordered set of search directories
seeded from an environment variable and extended at runtime.
"""

from searchpaths.core.resolver import Qualification, SearchPaths

__version__ = "1.0.0"
__all__ = ["__version__", "Qualification", "SearchPaths"]
