"""PO to CSV conversion package.

This package provides tools for:
- Scanning gettext PO files into key/source/target records
- Writing those records as CSV
- Converting files from the command line or over HTTP
"""

__version__ = "1.0.0"
