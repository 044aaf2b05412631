"""
Horizons Epoch Block Parser
===========================

Horizons vector tables are fixed-column. A data block is an epoch line

  2459000.500000000 = A.D. 2020-May-31 00:00:00.0000 TDB
  ^0               ^17                      ^42^45  ^50

followed by a position line and, for state-vector tables, a velocity line. Coordinate
lines come unlabelled

    1.234567890123456E-01 -2.345678901234567E+00  3.456789012345678E-03
   ^1                     ^24                    ^47

or labelled

   X = 1.234567890123456E-01 Y =-2.345678901234567E+00 Z = 3.456789012345678E-03
      ^4                        ^30                       ^56

The column positions below are a contract with the Horizons output format. Epoch lines
are told apart from prose by these positions alone.
"""
import numpy as np

from dataclasses import dataclass
from typing      import Iterator, Optional

from jpl2mpc.model.constants import JULIANDATE
from jpl2mpc.model.ephemeris import EpochRecord
from jpl2mpc.model.errors    import MalformedDataError, TruncatedDataError
from jpl2mpc.utility.parse   import parse_leading_float, parse_leading_int


@dataclass(frozen=True)
class LiteralMarker:
  offset : int # character offset in the line
  text   : str # literal expected at that offset

  def matches(
    self,
    line : str,
  ) -> bool:
    return line[self.offset:self.offset + len(self.text)] == self.text


@dataclass(frozen=True)
class EpochLineSchema:
  markers        : tuple[LiteralMarker, ...]
  min_length     : int   # raw line length, terminator included, must exceed this
  jd_min         : float # inclusive
  jd_max         : float # exclusive
  jd_frac_offset : int   # start of the fractional part of the date


@dataclass(frozen=True)
class ColumnLayout:
  name         : str
  label_column : Optional[tuple[int, ...]] # offsets where an "X" label selects this layout
  offsets      : tuple[int, int, int]      # start of the X, Y and Z values


EPOCH_LINE_SCHEMA = EpochLineSchema(
  markers = (
    LiteralMarker(17, " = A.D."),
    LiteralMarker(42, ":"),
    LiteralMarker(45, "."),
    LiteralMarker(50, " TDB"),
  ),
  min_length     = 54,
  jd_min         = JULIANDATE.MIN,
  jd_max         = JULIANDATE.MAX,
  jd_frac_offset = JULIANDATE.INT_FIELD_WIDTH,
)

LABELLED_LAYOUT   = ColumnLayout('labelled',   label_column=(1, 2), offsets=(4, 30, 56))
UNLABELLED_LAYOUT = ColumnLayout('unlabelled', label_column=None,   offsets=(1, 24, 47))


def select_layout(
  line : str,
) -> ColumnLayout:
  """
  Choose the column layout of a coordinate line: labelled if an "X" sits at offset 1
  (" X =") or 2 (" VX="), unlabelled otherwise.
  """
  for col in LABELLED_LAYOUT.label_column:
    if line[col:col + 1] == 'X':
      return LABELLED_LAYOUT
  return UNLABELLED_LAYOUT


def extract_coordinates(
  line : str,
) -> np.ndarray:
  """
  Extract the three values of a position or velocity line.

  Input:
  ------
    line : str
      Coordinate line, labelled or unlabelled.

  Output:
  -------
    vec : np.ndarray
      Three-element vector, in the units of the input.
  """
  layout = select_layout(line)
  values = []
  for axis, offset in zip('XYZ', layout.offsets):
    value = parse_leading_float(line, offset)
    if value is None:
      raise MalformedDataError(
        f"No {axis} value at column {offset} of {layout.name} coordinate line: {line.rstrip()!r}"
      )
    values.append(value)
  return np.array(values)


class EpochBlockParser:
  def __init__(
    self,
    schema : EpochLineSchema = EPOCH_LINE_SCHEMA,
  ):
    self.schema = schema

  def match_epoch_line(
    self,
    line : str,
  ) -> Optional[float]:
    """
    Test a line against the epoch-line signature.

    Input:
    ------
      line : str
        Raw input line, terminator included.

    Output:
    -------
      julian_date : float | None
        Date of the epoch if the line is an epoch line, None otherwise.
    """
    julian_date = parse_leading_float(line)
    if julian_date is None:
      return None
    if not (self.schema.jd_min <= julian_date < self.schema.jd_max):
      return None
    if len(line) <= self.schema.min_length:
      return None
    if not all(marker.matches(line) for marker in self.schema.markers):
      return None
    return julian_date

  def parse_block(
    self,
    epoch_line    : str,
    julian_date   : float,
    lines         : Iterator[str],
    with_velocity : bool,
  ) -> EpochRecord:
    """
    Read the coordinate line(s) that follow an epoch line.

    Input:
    ------
      epoch_line : str
        The matched epoch line.
      julian_date : float
        Date returned by match_epoch_line.
      lines : Iterator[str]
        Input positioned just after the epoch line. One line is consumed, two for
        state-vector tables.
      with_velocity : bool
        Read a velocity line after the position line.

    Output:
    -------
      record : EpochRecord
        Raw record, in the frame and units of the input.
    """
    pos_vec = extract_coordinates(self._next_line(lines, julian_date))

    vel_vec = None
    if with_velocity:
      vel_vec = extract_coordinates(self._next_line(lines, julian_date))

    jd_frac = parse_leading_float(epoch_line, self.schema.jd_frac_offset)

    return EpochRecord(
      julian_date = julian_date,
      pos_vec     = pos_vec,
      vel_vec     = vel_vec,
      jd_int      = parse_leading_int(epoch_line),
      jd_frac     = jd_frac if jd_frac is not None else 0.0,
    )

  @staticmethod
  def _next_line(
    lines       : Iterator[str],
    julian_date : float,
  ) -> str:
    line = next(lines, None)
    if line is None:
      raise TruncatedDataError(julian_date)
    return line
