"""
Content Editables -- declarative editor metadata for content item properties.
"""

__version__ = "0.4.0"
