"""Error taxonomy of the delta engine. The CLI maps every DeltaError to exit status 2."""


class DeltaError(RuntimeError):
    """Base class for every failure that aborts a run."""


class ConfigurationError(DeltaError):
    """Missing flag or malformed ignore list. Raised before any file is read."""


class ManifestReadError(DeltaError):
    """A manifest file could not be read."""


class ManifestParseError(DeltaError):
    """A manifest stream is not valid YAML or a document lacks its identity."""


class ScriptWriteError(DeltaError):
    """The deletion script could not be created, written or flushed."""
