"""Prompt Studio: versioned system-prompt store for the AI Fashion Studio."""

__version__ = "0.1.0"
