"""Core domain package for deckscope.

Core contains block parsing, config resolution, redaction and link encoding
without any HTML, terminal or browser-specific code, keeping the logic
portable across hosts.
"""
