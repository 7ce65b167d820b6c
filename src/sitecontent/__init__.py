"""
sitecontent: Content collections for a static site.

This package registers the site's data collections (hero, page sections,
SEO metadata), binds each to a validation schema, and loads typed,
validated records from a content directory.
"""

from importlib.metadata import version

__version__ = version("sitecontent")

__all__ = ["__version__"]
