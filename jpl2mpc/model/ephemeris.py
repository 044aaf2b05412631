"""
Ephemeris Data Model
====================

State threaded through a single conversion: the flags read from the Horizons header, one
record per epoch, and the running statistics that end up in the output header.
"""
import numpy as np

from dataclasses import dataclass, field
from typing      import Optional

from jpl2mpc.model.constants import OUTPUTFORMAT
from jpl2mpc.model.errors    import AmbiguousFrameError


@dataclass
class InputFlags:
  is_state_vector_table : bool = False # velocity line follows each position line
  is_equatorial_frame   : bool = False # Earth mean equator / ICRF
  is_ecliptic_frame     : bool = False # ecliptic and mean equinox of J2000
  is_km_s_units         : bool = False # km and km/s instead of AU and AU/day
  object_name           : str  = ""    # display name, "" if unknown
  frozen                : bool = False # set once the first epoch is accepted

  def check_frame(self) -> None:
    """
    Raise AmbiguousFrameError unless exactly one frame flag is set.
    """
    if self.is_equatorial_frame == self.is_ecliptic_frame:
      raise AmbiguousFrameError()

  def freeze(self) -> None:
    self.frozen = True


@dataclass
class EpochRecord:
  julian_date : float                       # [days] TDB
  pos_vec     : np.ndarray                  # position [km or AU]
  vel_vec     : Optional[np.ndarray] = None # velocity [km/s or AU/day]
  jd_int      : int   = 0                   # integer part of the date, as printed
  jd_frac     : float = 0.0                 # fractional part of the date, as printed


@dataclass
class OutputHeader:
  start_jd       : float = 0.0 # [days] TDB
  step_size_days : float = 0.0 # [days]
  record_count   : int   = 0
  object_name    : str   = ""
  _first_jd_int  : int   = field(default=0,   repr=False)
  _first_jd_frac : float = field(default=0.0, repr=False)

  def update(
    self,
    record : EpochRecord,
  ) -> None:
    """
    Account for one more written record.

    The first record sets the start date and the second sets the step size, assumed
    uniform for the rest of the ephemeris. Integer and fractional parts of the dates are
    differenced separately to keep the digits of the fraction.

    Input:
    ------
      record : EpochRecord
        Record just written.
    """
    if self.record_count == 0:
      self.start_jd       = record.julian_date
      self._first_jd_int  = record.jd_int
      self._first_jd_frac = record.jd_frac
    elif self.record_count == 1:
      self.step_size_days = (record.jd_frac - self._first_jd_frac) + float(record.jd_int - self._first_jd_int)
    self.record_count += 1

  def format_fields(self) -> str:
    """
    Fixed-width start date, step size and record count.
    """
    return OUTPUTFORMAT.HEADER_FIELDS.format(
      start_jd  = self.start_jd,
      step_size = self.step_size_days,
      count     = self.record_count,
    )

  def format_line(self) -> str:
    """
    Complete first output line: fields, frame/unit code and the optional name annotation.
    """
    line = self.format_fields() + OUTPUTFORMAT.FRAME_UNIT_CODE
    if self.object_name:
      line += OUTPUTFORMAT.OBJECT_NAME.format(object_name=self.object_name)
    return line + "\n"

  def placeholder(self) -> "OutputHeader":
    """
    Zero-valued header carrying the same name annotation.
    """
    return OutputHeader(object_name=self.object_name)
