import sys
import argparse

from typing import Optional

from jpl2mpc.utility.request_template import build_horizons_batch_url


class ConverterArgumentParser(argparse.ArgumentParser):
  """
  Argument parser that reports usage errors on stdout and exits with -1.
  """
  def error(self, message: str):
    self.print_usage(sys.stdout)
    print(f"{self.prog}: error: {message}")
    sys.exit(-1)


def build_usage_epilog() -> str:
  """
  Usage notes printed below the argument list.
  """
  example_url = build_horizons_batch_url(
    command    = '-139479',
    start_time = '2020-01-01',
    stop_time  = '2021-01-01',
    step_size  = '3660',
    vec_table  = 2,
  )
  return (
    "jpl2mpc takes input ephemeri(de)s generated by HORIZONS and produces\n"
    "file(s) suitable for use in DASO or eph2tle. The JPL ephemeris must be\n"
    "in text form (the 'download/save' option can be used for this).\n"
    "\n"
    "Example:\n"
    "  jpl2mpc gaia.txt gaia.eph\n"
    "\n"
    "A suitable ephemeris (here: Gaia state vectors for 2020) can be requested with\n"
    f"  {example_url}\n"
  )


def parse_command_line_arguments(
  argv : Optional[list] = None,
) -> argparse.Namespace:
  """
  Parse command-line arguments for the converter.

  Input:
  ------
    argv : list | None
      Arguments without the program name. None reads sys.argv.

  Output:
  -------
    args : argparse.Namespace
      Parsed command-line arguments.
  """
  parser = ConverterArgumentParser(
    prog            = 'jpl2mpc',
    description     = 'Convert a JPL Horizons vector ephemeris to MPC DASO / eph2tle format',
    epilog          = build_usage_epilog(),
    formatter_class = argparse.RawDescriptionHelpFormatter,
  )

  # If no arguments provided, print help and exit
  if argv is None:
    argv = sys.argv[1:]
  if len(argv) == 0:
    parser.print_help(sys.stdout)
    sys.exit(-1)

  # Files
  parser.add_argument(
    'input_filepath',
    type = str,
    help = 'Horizons text ephemeris.',
  )
  parser.add_argument(
    'output_filepath',
    type    = str,
    nargs   = '?',
    default = None,
    help    = 'Output file (default: standard output).',
  )

  # Options
  parser.add_argument(
    '--in-place',
    dest    = 'in_place',
    action  = 'store_true',
    default = False,
    help    = "Stream records to the output and correct the header in place afterwards "
              "(requires a seekable output file). By default the output is buffered and written in one pass.",
  )
  parser.add_argument(
    '--log-file',
    dest    = 'log_filepath',
    type    = str,
    default = None,
    help    = 'Also write terminal output to this file.',
  )

  # Parse arguments
  args = parser.parse_args(argv)

  return args
