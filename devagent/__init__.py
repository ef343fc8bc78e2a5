"""Parse, locate, list and create Markdown agent files kept in a .devai/ workspace folder."""

__version__ = "0.1.0"