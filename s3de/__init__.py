"""Scene file loading, linear interpolation, window bookkeeping and a free-look camera."""

__version__ = "0.1.0"

__all__ = ["parser", "loader", "interpolate", "windowing", "camera"]