"""
Horizons Ephemeris Loader
=========================

Single forward pass over a Horizons text ephemeris. Every line is classified once: epoch
lines (with the coordinate lines that follow them) become records, any other line is
offered to the header scanner and, until the data section starts, kept as preamble.
"""
from typing import Iterable

from jpl2mpc.input.epoch_parser    import EpochBlockParser
from jpl2mpc.input.header_scanner  import HeaderScanner
from jpl2mpc.model.constants       import HORIZONSMARKERS
from jpl2mpc.model.ephemeris       import InputFlags, OutputHeader
from jpl2mpc.model.frame_converter import convert_epoch
from jpl2mpc.output.record_writer  import RecordWriter


def load_horizons_ephemeris(
  lines  : Iterable[str],
  writer : RecordWriter,
) -> tuple[InputFlags, OutputHeader]:
  """
  Convert a Horizons vector ephemeris, streaming each record to a writer.

  Input:
  ------
    lines : Iterable[str]
      Input lines, terminators included.
    writer : RecordWriter
      Destination of the preamble, the records and the final header.

  Output:
  -------
    flags : InputFlags
      Flags read from the input header, frozen at the first epoch.
    header : OutputHeader
      Start date, step size and record count written to the output.

  Code Structure:
  ---------------
  1. Classify each line: epoch line, or header/preamble line.
  2. At the first epoch, check the frame flags, freeze them and start the writer.
  3. Read the coordinate line(s) of the block, convert and write the record.
  4. Finish the writer with the final header.
  """
  flags   = InputFlags()
  header  = OutputHeader()
  scanner = HeaderScanner(flags)
  parser  = EpochBlockParser()

  in_preamble = True
  line_iter   = iter(lines)
  for line in line_iter:
    # 1. Classify
    julian_date = parser.match_epoch_line(line)
    if julian_date is None:
      if line.startswith(HORIZONSMARKERS.START_OF_EPHEMERIS):
        in_preamble = False
      if in_preamble:
        writer.add_preamble_line(line)
      scanner.scan_line(line)
      continue

    # 2. First epoch: flags are final from here on
    if not flags.frozen:
      flags.check_frame()
      flags.freeze()
      header.object_name = flags.object_name
      in_preamble        = False
      writer.begin(header)

    # 3. Read, convert, write
    raw_record = parser.parse_block(line, julian_date, line_iter, flags.is_state_vector_table)
    record     = convert_epoch(raw_record, flags)
    writer.write_record(record)
    header.update(record)

  # 4. Finish
  if not flags.frozen:
    header.object_name = flags.object_name
  writer.finish(header)

  return flags, header
