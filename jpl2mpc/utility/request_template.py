"""
Horizons Request Template
=========================

Composes a Horizons batch URL that returns a text ephemeris this converter accepts:
geometric (uncorrected) vectors, J2000, no object data. The URL is only built here;
fetching it is left to the user (browser, curl, ...).

E-mail submissions use the same keywords in a job file sent to
horizons@ssd.jpl.nasa.gov with subject line JOB.
"""

HORIZONS_BATCH_URL = "https://ssd.jpl.nasa.gov/horizons_batch.cgi"


def build_horizons_batch_url(
  command    : str,
  start_time : str,
  stop_time  : str,
  step_size  : str,
  vec_table  : int  = 2,
  vec_labels : bool = False,
) -> str:
  """
  Build a Horizons batch URL for a vector table.

  Input:
  ------
    command : str
      Target, e.g. a NAIF ID such as '-139479' (Gaia).
    start_time : str
      Start of the ephemeris, e.g. '2020-01-01'.
    stop_time : str
      End of the ephemeris, e.g. '2021-01-01'.
    step_size : str
      Either a step ('1 day') or a number of equal intervals ('3660').
    vec_table : int
      1 for positions only (DASO), 2 for state vectors (eph2tle).
    vec_labels : bool
      Request labelled coordinate lines (" X =...").

  Output:
  -------
    url : str
      Batch URL.
  """
  params = [
    ('batch',      "1"),
    ('COMMAND',    f"'{command}'"),
    ('OBJ_DATA',   "'NO'"),
    ('TABLE_TYPE', "'V'"),
    ('START_TIME', f"'{start_time}'"),
    ('STOP_TIME',  f"'{stop_time}'"),
    ('STEP_SIZE',  f"'{step_size}'"),
    ('VEC_TABLE',  f"'{vec_table}'"),
    ('VEC_LABELS', "'Y'" if vec_labels else "'N'"),
  ]
  query = '&'.join(f"{key}={value}" for key, value in params)
  return f"{HORIZONS_BATCH_URL}?{query}"
