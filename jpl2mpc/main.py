"""
JPL Horizons to MPC Converter

Description:
  Converts an ephemeris gathered from JPL's Horizons system into the format used by MPC's
  DASO service, or for generating TLEs with 'eph2tle'.

  Either position-only ephemerides (what DASO uses) or state-vector ephemerides (what
  eph2tle fits TLEs to) are accepted. The output is always in equatorial J2000, AU and
  AU/day: ecliptic input is rotated and km, km/s input is rescaled.

  The script performs the following steps:
  1. Scans the Horizons file once, reading frame, units, table type and target from the
     header text and converting every epoch block.
  2. Writes the header (start JD, step size, record count), the Horizons preamble, the
     records and a provenance trailer.

Usage:

  Argument          Required   Description
  ----------------  --------   --------------------------------------------------
  input_filepath    Yes        Horizons text ephemeris
  output_filepath   No         Output file (default: standard output)
  --in-place        No         Stream records and correct the header in place
  --log-file        No         Also write terminal output to this file

  Example Commands:
    python -m jpl2mpc.main gaia.txt gaia.eph

    jpl2mpc tess.txt tess.eph --in-place --log-file tess.log

Exit status:
   0  success
  -1  file cannot be opened, ambiguous reference frame, output unusable for the header
  -2  truncated or malformed data block
"""
import sys

from contextlib import nullcontext
from pathlib    import Path
from types      import SimpleNamespace
from typing     import Optional, TextIO

from jpl2mpc.input.cli           import parse_command_line_arguments
from jpl2mpc.input.configuration import build_config, print_configuration
from jpl2mpc.input.loader        import load_horizons_ephemeris
from jpl2mpc.model.ephemeris     import InputFlags, OutputHeader
from jpl2mpc.model.errors        import FileOpenError, Jpl2MpcError
from jpl2mpc.output              import BufferedRecordWriter, InPlaceRecordWriter
from jpl2mpc.utility.logger      import start_logging, stop_logging
from jpl2mpc.utility.printer     import print_results_summary


def open_input(
  input_filepath : Path,
) -> TextIO:
  """
  Open the Horizons file. Each byte reads as one character and line terminators are
  kept, so preamble lines copy through unchanged.
  """
  try:
    return open(input_filepath, 'r', encoding='latin-1', newline='')
  except OSError as error:
    raise FileOpenError(f"Couldn't open the Horizons file '{input_filepath}'") from error


def open_output(
  output_filepath : Optional[Path],
  stdout          : TextIO,
):
  """
  Open the output file with the same byte-per-character encoding as the input, or wrap
  standard output in a context that leaves it open.
  """
  if output_filepath is None:
    return nullcontext(stdout)
  try:
    return open(output_filepath, 'w', encoding='latin-1', newline='')
  except OSError as error:
    raise FileOpenError(f"Couldn't open the output file '{output_filepath}'") from error


def convert_ephemeris(
  config : SimpleNamespace,
  stdout : TextIO,
) -> tuple[InputFlags, OutputHeader]:
  """
  Convert the configured Horizons file.

  Input:
  ------
    config : SimpleNamespace
      Configuration from build_config.
    stdout : TextIO
      Stream used when no output file is configured.

  Output:
  -------
    flags : InputFlags
      Flags read from the Horizons header.
    header : OutputHeader
      Header written to the output.
  """
  with open_input(config.input_filepath) as ifile, open_output(config.output_filepath, stdout) as ofile:
    if config.writer_strategy == 'in_place':
      writer = InPlaceRecordWriter(ofile, config.version)
    else:
      writer = BufferedRecordWriter(ofile, config.version)

    return load_horizons_ephemeris(ifile, writer)


def main(
  input_filepath  : str,
  output_filepath : Optional[str] = None,
  in_place        : bool          = False,
  log_filepath    : Optional[str] = None,
) -> int:
  """
  Main function to run the conversion.

  Input:
  ------
    input_filepath : str
      Horizons text ephemeris.
    output_filepath : str | None
      Output file. None writes to standard output.
    in_place : bool
      Stream records and correct the header in place (seekable output only).
    log_filepath : str | None
      File that receives a copy of the terminal output.

  Output:
  -------
    exit_code : int
      0 on success, the error's exit code otherwise.
  """
  # Process inputs and setup
  config = build_config(
    input_filepath,
    output_filepath,
    in_place,
    log_filepath,
  )

  # Records go to the real stdout, not to the log
  stdout = sys.stdout

  # Start logging to file
  try:
    logger = start_logging(config.log_filepath)
  except OSError:
    print(f"\nCouldn't open the log file '{config.log_filepath}'")
    return FileOpenError.exit_code

  try:
    if config.verbose:
      print_configuration(config)

    flags, header = convert_ephemeris(config, stdout)

    if config.verbose:
      print_results_summary(header, flags)

    return 0

  except Jpl2MpcError as error:
    print(f"\n{error}")
    return error.exit_code

  finally:
    stop_logging(logger)


def run() -> None:
  # Parse command-line arguments
  args = parse_command_line_arguments()

  # Run main function
  sys.exit(main(
    args.input_filepath,
    args.output_filepath,
    args.in_place,
    args.log_filepath,
  ))


if __name__ == "__main__":
  run()
