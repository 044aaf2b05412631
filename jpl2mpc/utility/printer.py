from astropy.time import Time as AstropyTime

from jpl2mpc.model.ephemeris import InputFlags, OutputHeader


def format_epoch(
  julian_date : float,
) -> str:
  """
  Format a TDB Julian date as "YYYY-MM-DD HH:MM:SS TDB (JD ...)".
  """
  time_tdb = AstropyTime(julian_date, format='jd', scale='tdb')
  return f"{time_tdb.strftime('%Y-%m-%d %H:%M:%S')} TDB (JD {julian_date:.5f})"


def print_results_summary(
  header : OutputHeader,
  flags  : InputFlags,
) -> None:
  """
  Print a summary of the conversion.

  Input:
  ------
    header : OutputHeader
      Final header written to the output.
    flags : InputFlags
      Flags read from the input header.
  """
  frame_str = "Ecliptic J2000" if flags.is_ecliptic_frame else "Equatorial J2000"
  units_str = "km, km/s"       if flags.is_km_s_units     else "AU, AU/day"
  table_str = "State vectors"  if flags.is_state_vector_table else "Positions"

  print("\nResults Summary")
  print(f"  Object  : {flags.object_name or 'None'}")
  print(f"  Input")
  print(f"    Table : {table_str}")
  print(f"    Frame : {frame_str}")
  print(f"    Units : {units_str}")
  print(f"  Output")
  print(f"    Frame : Equatorial J2000")
  print(f"    Units : AU, AU/day")

  if header.record_count == 0:
    print(f"    Grid  : 0 points")
    return

  end_jd = header.start_jd + header.step_size_days * (header.record_count - 1)
  print(f"    Start : {format_epoch(header.start_jd)}")
  print(f"    End   : {format_epoch(end_jd)}")
  print(f"    Step  : {header.step_size_days:.10f} days")
  print(f"    Grid  : {header.record_count} points")
