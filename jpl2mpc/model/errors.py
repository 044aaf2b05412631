"""
Conversion Errors
=================

Every error is fatal: the converter stops at the first one and exits with the error's
`exit_code`.
"""


class Jpl2MpcError(Exception):
  """
  Base class for conversion errors.
  """
  exit_code = -1


class FileOpenError(Jpl2MpcError, OSError):
  """
  The input or output path cannot be opened.
  """
  exit_code = -1


class AmbiguousFrameError(Jpl2MpcError, ValueError):
  """
  The input header declares neither, or both, of the equatorial and ecliptic frames.
  """
  exit_code = -1

  def __init__(self):
    super().__init__(
      "Input coordinates must be in the Earth mean equator and equinox "
      "or in J2000 ecliptic coordinates"
    )


class UnsupportedSinkError(Jpl2MpcError, OSError):
  """
  The output does not support seeking, so the header cannot be corrected in place.
  """
  exit_code = -1


class HeaderWidthError(Jpl2MpcError, ValueError):
  """
  The final header fields would not fit in the span taken by the placeholder.
  """
  exit_code = -1


class TruncatedDataError(Jpl2MpcError, EOFError):
  """
  An epoch line was found but its coordinate line(s) are missing.
  """
  exit_code = -2

  def __init__(self, julian_date: float):
    super().__init__(f"Failed to get data from input file (epoch JD {julian_date:.5f})")
    self.julian_date = julian_date


class MalformedDataError(Jpl2MpcError, ValueError):
  """
  A coordinate line has no number where its column layout expects one.
  """
  exit_code = -2
