class DataSourceError(Exception):
    """Base class for failures raised while fetching rows from a data source."""


class SourceIOError(DataSourceError):
    """The backing file could not be read."""


class SourceParseError(DataSourceError):
    """The backing file was read but its contents could not be parsed."""
