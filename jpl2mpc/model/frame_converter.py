import numpy as np

from typing import Optional

from jpl2mpc.model.constants import CONVERTER, OBLIQUITY
from jpl2mpc.model.ephemeris import EpochRecord, InputFlags


class FrameConverter:
  @staticmethod
  def ecliptic_to_equatorial() -> np.ndarray:
    """
    Get rotation matrix from ecliptic J2000 to equatorial J2000.

    Output:
    -------
      rot_mat : np.ndarray
        3x3 rotation matrix about the X axis by the J2000 mean obliquity, such that:
        equatorial_vec = rot_mat @ ecliptic_vec
    """
    sin_obliq = OBLIQUITY.SIN_J2000
    cos_obliq = OBLIQUITY.COS_J2000
    return np.array([
      [1.0,       0.0,        0.0],
      [0.0, cos_obliq, -sin_obliq],
      [0.0, sin_obliq,  cos_obliq],
    ])

  @staticmethod
  def equatorial_to_ecliptic() -> np.ndarray:
    """
    Get rotation matrix from equatorial J2000 to ecliptic J2000.

    Output:
    -------
      rot_mat : np.ndarray
        3x3 rotation matrix such that: ecliptic_vec = rot_mat @ equatorial_vec

    Notes:
    ------
      The inverse of a rotation is its transpose.
    """
    return FrameConverter.ecliptic_to_equatorial().T


class UnitConverter:
  @staticmethod
  def km_to_au(
    pos_vec : np.ndarray,
  ) -> np.ndarray:
    return pos_vec / CONVERTER.KM_PER_AU

  @staticmethod
  def km_per_sec_to_au_per_day(
    vel_vec : np.ndarray,
  ) -> np.ndarray:
    return vel_vec * CONVERTER.AU_PER_DAY__PER__KM_PER_SEC


class VectorConverter:
  @staticmethod
  def to_equatorial_au(
    vec         : np.ndarray,
    flags       : InputFlags,
    is_velocity : bool = False,
  ) -> np.ndarray:
    """
    Rotate a raw Horizons vector to equatorial J2000 and rescale it to AU or AU/day.

    Input:
    ------
      vec : np.ndarray
        Position [km or AU] or velocity [km/s or AU/day] as read from the input.
      flags : InputFlags
        Frame and unit flags of the input.
      is_velocity : bool
        Select the velocity rescale (km/s -> AU/day) instead of km -> AU.

    Output:
    -------
      vec : np.ndarray
        Equatorial J2000 vector [AU or AU/day].
    """
    vec = np.asarray(vec, dtype=float)

    # Rotate to equatorial
    if flags.is_ecliptic_frame:
      vec = FrameConverter.ecliptic_to_equatorial() @ vec

    # Rescale to AU, AU/day
    if flags.is_km_s_units:
      if is_velocity:
        vec = UnitConverter.km_per_sec_to_au_per_day(vec)
      else:
        vec = UnitConverter.km_to_au(vec)

    return vec


def convert_epoch(
  record : EpochRecord,
  flags  : InputFlags,
) -> EpochRecord:
  """
  Convert one epoch to equatorial J2000, AU and AU/day.

  Input:
  ------
    record : EpochRecord
      Record with vectors as read from the input.
    flags : InputFlags
      Frame and unit flags of the input. Exactly one frame flag must be set.

  Output:
  -------
    record : EpochRecord
      New record with converted vectors. The input record is left unchanged.
  """
  vel_vec : Optional[np.ndarray] = None
  if record.vel_vec is not None:
    vel_vec = VectorConverter.to_equatorial_au(record.vel_vec, flags, is_velocity=True)

  return EpochRecord(
    julian_date = record.julian_date,
    pos_vec     = VectorConverter.to_equatorial_au(record.pos_vec, flags),
    vel_vec     = vel_vec,
    jd_int      = record.jd_int,
    jd_frac     = record.jd_frac,
  )
