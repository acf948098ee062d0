# Weather Report System: load, view, filter, convert and summarize weather reports

__version__ = "0.1.0"

from weatherreport.models import Report, Unit

__all__ = ["Report", "Unit", "__version__"]
