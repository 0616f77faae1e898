class GlucoseChartError(ValueError):
    """Base class for pipeline errors that abort a run."""


class SchemaError(GlucoseChartError):
    """A required column is missing from the export."""


class EmptyInputError(GlucoseChartError):
    """No clean readings are left to aggregate."""


class NoDataError(GlucoseChartError):
    """No hourly statistics are available to build chart bands from."""
