# rasi_charts/errors.py


class ChartError(Exception):
    """Base class for chart rendering failures."""


class InvalidChartStyle(ChartError):
    def __init__(self, style):
        self.style = getattr(style, "value", style)
        if not self.style:
            message = "chart_type is required"
        else:
            message = f"unsupported chart type: {self.style}"
        super().__init__(message)


class ChartEncodingError(ChartError):
    """Raised when the finished drawing cannot be encoded to image bytes."""
