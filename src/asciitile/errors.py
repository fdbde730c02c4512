class AsciiTileError(Exception):
    """Base class for errors raised by asciitile."""


class ConfigurationError(AsciiTileError, ValueError):
    """Target grid dimensions or palette depth cannot produce a grid."""


class ImageLoadError(AsciiTileError, OSError):
    """An image could not be opened or decoded."""


class InternalConsistencyError(AsciiTileError, RuntimeError):
    """A pipeline stage received input its upstream stage should never produce."""
