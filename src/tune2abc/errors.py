"""
Error types raised while converting tune records to ABC
"""


class Tune2AbcError(Exception):
    """Base class for all conversion errors"""


class InputReadError(Tune2AbcError):
    """Input file is missing or unreadable"""


class DecodeError(Tune2AbcError):
    """Input data is not a well-formed array of tune records"""


class OutputDirError(Tune2AbcError):
    """Output directory could not be created"""


class FileCreateError(Tune2AbcError):
    """An output file could not be created or written"""


class ConfigError(Tune2AbcError):
    """Config file is unreadable or has unexpected content"""
