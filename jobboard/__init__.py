"""A small job board that runs a scripted session of member, recruitment and application commands."""

__version__ = "0.1.0"