"""Logging configuration for the proxy and its command-line tool."""
