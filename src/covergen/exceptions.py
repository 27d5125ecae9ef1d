"""Exception hierarchy for Covergen."""


class CovergenError(Exception):
    """Base exception for all Covergen errors."""


class ConfigError(CovergenError):
    """Error in configuration."""


class CanvasError(CovergenError):
    """The raster surface could not be created or was misused."""


class FontError(CovergenError):
    """A font required by a strict lookup could not be found."""


class RenderError(CovergenError):
    """Error while rendering or encoding a cover."""
