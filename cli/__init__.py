"""Command-line interface for SMFBrowser."""
