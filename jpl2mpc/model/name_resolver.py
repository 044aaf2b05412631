"""
Spacecraft Name Resolver
========================

Human-readable names for the NAIF IDs of spacecraft commonly converted. Where one is
known, the name carries the international designation and NORAD number so that 'eph2tle'
can pick them up when fitting Two-Line Elements.
"""
from types import MappingProxyType


SPACECRAFT_NAMES = MappingProxyType({
        -21 : "SOHO",
        -37 : "Hayabusa 2 = 2014-076A = NORAD 40319",
        -48 : "Hubble Space Telescope",
        -79 : "Spitzer Space Telescope",
        -82 : "Cassini",
        -95 : "TESS = 2018-038A = NORAD 43435",
        -96 : "Parker Space Probe",
        -98 : "New Horizons",
       -144 : "Solar Orbiter",
       -151 : "Chandra = 1999-040B = NORAD 25867",
       -163 : "WISE",
       -234 : "STEREO-A",
       -235 : "STEREO-B",
    -139479 : "Gaia = 2013-074A = NORAD 39479",
   -9901491 : "Tianwen-1 = 2020-049A = NORAD 45935",
})


def look_up_name(
  naif_id : int,
) -> str:
  """
  Look up the display name of a spacecraft.

  Input:
  ------
    naif_id : int
      NAIF ID of the spacecraft (negative).

  Output:
  -------
    name : str
      Display name, or "" if the ID is not known.
  """
  return SPACECRAFT_NAMES.get(naif_id, "")
