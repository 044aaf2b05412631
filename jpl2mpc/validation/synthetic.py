"""
Synthetic Horizons Text
=======================

Builders for Horizons vector ephemerides with exact column positions.
"""


STARS = "*" * 79 + "\n"


def build_epoch_line(
  julian_date : float,
  date_str    : str = "2020-May-31",
  time_str    : str = "00:00:00.0000",
) -> str:
  """Horizons epoch line: JDTDB, calendar date, TDB."""
  return f"{julian_date:.9f} = A.D. {date_str} {time_str} TDB \n"


def build_coordinate_line(
  vec         : tuple,
  labelled    : bool = False,
  is_velocity : bool = False,
) -> str:
  """Horizons coordinate line, unlabelled (offsets 1, 24, 47) or labelled (4, 30, 56)."""
  x, y, z = vec
  if not labelled:
    return f" {x: .15E} {y: .15E} {z: .15E}\n"
  if is_velocity:
    return f" VX={x: .15E} VY={y: .15E} VZ={z: .15E}\n"
  return f" X ={x: .15E} Y ={y: .15E} Z ={z: .15E}\n"


def build_horizons_lines(
  epochs       : list,
  frame        : str  = 'equatorial',
  km_s         : bool = False,
  labelled     : bool = False,
  target_line  : str  = "Target body name: Gaia (spacecraft) (-139479)     {source: Gaia_merged}\n",
  extra_header : list = (),
) -> list:
  """
  Build a complete synthetic Horizons vector ephemeris.

  Input:
  ------
    epochs : list
      (julian_date, pos_vec) or (julian_date, pos_vec, vel_vec) tuples. The table is a
      state-vector table if the first epoch carries a velocity.
    frame : str
      'equatorial', 'ecliptic', 'both' or 'none'.
    km_s : bool
      Declare km, km/s units.
    labelled : bool
      Write labelled coordinate lines.
    target_line : str
      Target body line of the header.
    extra_header : list
      Further header lines, placed just before $$SOE.

  Output:
  -------
    lines : list[str]
      Lines, terminators included.
  """
  with_velocity = len(epochs) > 0 and len(epochs[0]) == 3

  lines = [STARS, target_line, STARS]
  lines.append("Output units    : KM-S\n" if km_s else "Output units    : AU-D\n")
  if frame in ('equatorial', 'both'):
    lines.append("Reference frame : ICRF\n")
  if frame in ('ecliptic', 'both'):
    lines.append("Reference frame : Ecliptic of J2000.0\n")
  lines.append(STARS)
  lines.append("            JDTDB,            Calendar Date (TDB),\n")
  lines.append("   X     Y     Z\n")
  if with_velocity:
    lines.append("   VX    VY    VZ\n")
  lines.extend(extra_header)
  lines.append(STARS)
  lines.append("$$SOE\n")
  for epoch in epochs:
    lines.append(build_epoch_line(epoch[0]))
    lines.append(build_coordinate_line(epoch[1], labelled=labelled))
    if with_velocity:
      lines.append(build_coordinate_line(epoch[2], labelled=labelled, is_velocity=True))
  lines.append("$$EOE\n")
  lines.append(STARS)
  return lines


