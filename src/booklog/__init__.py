# ABOUTME: Booklog, a personal reading log with sortable listings and cover lookup.
# ABOUTME: Exposes the package version used in the CLI and HTTP User-Agent.

__version__ = "0.1.0"
