"""
bincli - a small command-line client for the JSONBin.io v3 API.

This CLI lets you:
- Create bins from local JSON files and remember their IDs
- Read, replace and delete bins by ID
- List the bin IDs saved locally
- Build local bin list files offline
"""

__version__ = "0.1.0"
__app_name__ = "bincli"
