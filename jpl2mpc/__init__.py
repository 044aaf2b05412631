"""
JPL Horizons to MPC Converter
=============================

Converts JPL Horizons vector ephemerides (position-only or state vectors) into the
fixed-width format read by MPC's DASO service and by 'eph2tle'. Output is always
equatorial J2000, AU and AU/day.
"""

__version__ = '1.0.0'
