"""
Horizons Header Scanner
=======================

Reads the metadata Horizons embeds in the free text around the data section: table type,
reference frame, units and target body.
"""
from jpl2mpc.model.constants     import HORIZONSMARKERS
from jpl2mpc.model.ephemeris     import InputFlags
from jpl2mpc.model.name_resolver import look_up_name
from jpl2mpc.utility.parse       import parse_leading_int


class HeaderScanner:
  """
  Accumulates InputFlags from non-data lines. Each line sets at most one flag; the
  checks run in a fixed order and the first one that matches wins.
  """
  def __init__(
    self,
    flags : InputFlags,
  ):
    self.flags = flags

  def scan_line(
    self,
    line : str,
  ) -> None:
    """
    Update the flags from one non-data line. Frozen flags are left untouched.

    Input:
    ------
      line : str
        Raw input line.
    """
    if self.flags.frozen:
      return

    if line.startswith(HORIZONSMARKERS.VELOCITY_LABELS):
      self.flags.is_state_vector_table = True
    elif any(marker in line for marker in HORIZONSMARKERS.EQUATORIAL):
      self.flags.is_equatorial_frame = True
    elif any(marker in line for marker in HORIZONSMARKERS.ECLIPTIC):
      self.flags.is_ecliptic_frame = True
    elif line.startswith(HORIZONSMARKERS.REVISED):
      self._set_object_name(parse_leading_int(line, HORIZONSMARKERS.REVISED_ID_COL))
    elif line.startswith(HORIZONSMARKERS.TARGET_BODY):
      # e.g. "Target body name: Gaia (spacecraft) (-139479)  {source: ...}"
      idx = line.find(HORIZONSMARKERS.TARGET_BODY_ID)
      if idx >= 0:
        self._set_object_name(parse_leading_int(line, idx + 1))
    elif line.startswith(HORIZONSMARKERS.KM_S_UNITS):
      self.flags.is_km_s_units = True

  def _set_object_name(
    self,
    naif_id : int,
  ) -> None:
    name = look_up_name(naif_id)
    if name:
      self.flags.object_name = name
