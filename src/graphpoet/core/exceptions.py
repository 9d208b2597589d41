"""
Custom exceptions for GraphPoet
"""

class GraphPoetError(Exception):
    """Base exception for GraphPoet"""
    pass

class InvalidArgumentError(GraphPoetError, ValueError):
    """Rejected graph mutation: self-loop, negative or non-integer weight"""
    pass

class CorpusReadError(GraphPoetError):
    """Corpus file missing or unreadable"""
    pass

class ConfigurationError(GraphPoetError):
    """Configuration-related errors"""
    pass
