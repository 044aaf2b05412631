"""
Record Writer
=============

Writes the DASO / eph2tle file:

  header line      start JD, step size, record count, frame/unit code, object name
  preamble         Horizons text preceding $$SOE, copied verbatim
  records          one fixed-width line per epoch
  trailer          blank line and provenance line

The header values are only known once every record has been read. Two strategies are
provided:

  BufferedRecordWriter
    Holds the records in memory and writes the whole file in one forward pass after the
    scan. Works with any sink, including a pipe.
  InPlaceRecordWriter
    Streams records to the sink behind a zero-valued placeholder header, then seeks back
    and overwrites the header fields. Needs a seekable sink, and the final fields must
    occupy exactly the placeholder's width.
"""
import io

from typing import TextIO

from jpl2mpc.model.constants import OUTPUTFORMAT
from jpl2mpc.model.ephemeris import EpochRecord, OutputHeader
from jpl2mpc.model.errors    import HeaderWidthError, UnsupportedSinkError


def format_record(
  record : EpochRecord,
) -> str:
  """
  Format one converted epoch as a fixed-width output line.

  Input:
  ------
    record : EpochRecord
      Epoch in equatorial J2000, AU and AU/day.

  Output:
  -------
    line : str
      Julian date (13.5f) and position (3 x 16.10f), then either the line terminator or
      a blank and the velocity (3 x 16.12f) before it.
  """
  pos_vec = record.pos_vec
  line    = OUTPUTFORMAT.EPOCH.format(jd=record.julian_date)
  line   += OUTPUTFORMAT.POSITION.format(x=pos_vec[0], y=pos_vec[1], z=pos_vec[2])
  if record.vel_vec is not None:
    vel_vec = record.vel_vec
    line   += OUTPUTFORMAT.VELOCITY.format(vx=vel_vec[0], vy=vel_vec[1], vz=vel_vec[2])
  return line + "\n"


class RecordWriter:
  """
  Common interface of the two header strategies. Call order: add_preamble_line (any
  number of times), begin (once, at the first record), write_record (once per record),
  finish (once).
  """
  def __init__(
    self,
    ofile   : TextIO,
    version : str,
  ):
    self.ofile    = ofile
    self.version  = version
    self.preamble = []
    self.started  = False

  def add_preamble_line(
    self,
    line : str,
  ) -> None:
    self.preamble.append(line)

  def begin(
    self,
    header : OutputHeader,
  ) -> None:
    self.started = True

  def write_record(
    self,
    record : EpochRecord,
  ) -> None:
    raise NotImplementedError

  def finish(
    self,
    header : OutputHeader,
  ) -> None:
    raise NotImplementedError

  def trailer(self) -> str:
    return OUTPUTFORMAT.TRAILER.format(version=self.version)


class BufferedRecordWriter(RecordWriter):
  def __init__(
    self,
    ofile   : TextIO,
    version : str,
  ):
    super().__init__(ofile, version)
    self.body = io.StringIO()

  def write_record(
    self,
    record : EpochRecord,
  ) -> None:
    self.body.write(format_record(record))

  def finish(
    self,
    header : OutputHeader,
  ) -> None:
    """
    Write the final header, the preamble, the buffered records and the trailer.

    Input:
    ------
      header : OutputHeader
        Header with the totals of the completed scan.
    """
    self.ofile.write(header.format_line())
    self.ofile.writelines(self.preamble)
    self.ofile.write(self.body.getvalue())
    self.ofile.write(self.trailer())
    self.ofile.flush()


class InPlaceRecordWriter(RecordWriter):
  def __init__(
    self,
    ofile   : TextIO,
    version : str,
  ):
    if not ofile.seekable():
      raise UnsupportedSinkError(
        "Output is not seekable; the header cannot be corrected in place"
      )
    super().__init__(ofile, version)
    self.header_offset      = 0
    self.placeholder_fields = ""

  def begin(
    self,
    header : OutputHeader,
  ) -> None:
    """
    Write the zero-valued placeholder header and the preamble collected so far.

    Input:
    ------
      header : OutputHeader
        Header carrying the object name; its totals are not used yet.
    """
    placeholder = header.placeholder()

    self.header_offset      = self.ofile.tell()
    self.placeholder_fields = placeholder.format_fields()
    self.ofile.write(placeholder.format_line())
    self.ofile.writelines(self.preamble)
    self.preamble = []
    super().begin(header)

  def write_record(
    self,
    record : EpochRecord,
  ) -> None:
    self.ofile.write(format_record(record))

  def finish(
    self,
    header : OutputHeader,
  ) -> None:
    """
    Write the trailer, then seek back and overwrite the placeholder header fields.

    Input:
    ------
      header : OutputHeader
        Header with the totals of the completed scan.
    """
    if not self.started:
      self.begin(header)

    self.ofile.write(self.trailer())

    final_fields = header.format_fields()
    if len(final_fields) != len(self.placeholder_fields):
      raise HeaderWidthError(
        f"Header fields '{final_fields}' do not fit the {len(self.placeholder_fields)} "
        f"characters reserved for them"
      )

    end_offset = self.ofile.tell()
    self.ofile.seek(self.header_offset)
    self.ofile.write(final_fields)
    self.ofile.seek(end_offset)
    self.ofile.flush()
