"""PandaNexus: model routing and graceful fallback for a multi-model chat assistant."""

__version__ = '0.4.0'
