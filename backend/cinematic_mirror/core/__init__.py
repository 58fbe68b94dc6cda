"""Core configuration, logging, security and exceptions."""
