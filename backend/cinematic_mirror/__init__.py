"""Cinematic Mirror backend: audition interviews, personality profiles and styling consultations."""

__version__ = "0.1.0"
