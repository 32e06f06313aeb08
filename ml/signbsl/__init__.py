"""English to British Sign Language (BSL) gloss translation service."""

__version__ = '1.0.0'
