"""Workspace access for XQueryLS."""
from .corpus import CorpusCollector

__all__ = ['CorpusCollector']
