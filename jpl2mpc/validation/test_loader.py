"""
Unit Tests for Horizons Ephemeris Loader
========================================

Tests for the single forward scan that drives the header scanner, the epoch parser, the
frame converter and the record writer.

Tests:
------
TestLoadHorizonsEphemeris
  - test_sanity_check_two_daily_epochs        : verify step 1.0 and count 2 for epochs 2459000.5 and 2459001.5
  - test_sanity_check_gaia_fixture            : verify flags, header and records for the km, km/s state-vector fixture
  - test_sanity_check_tess_fixture            : verify the ecliptic AU position fixture is rotated
  - test_sanity_check_preamble_verbatim       : verify every line before $$SOE is copied unchanged, in order
  - test_sanity_check_missing_frame_raises    : verify AmbiguousFrameError without frame markers, nothing written
  - test_sanity_check_both_frames_raises      : verify AmbiguousFrameError with both frame markers
  - test_sanity_check_truncated_block_raises  : verify TruncatedDataError when input ends after an epoch line
  - test_sanity_check_flags_frozen            : verify flag lines after the first epoch do not affect later records
  - test_sanity_check_labelled_state_vectors  : verify labelled state vectors convert like unlabelled ones
  - test_sanity_check_no_epochs               : verify an input without data still produces a zero header

Usage:
------
  python -m pytest jpl2mpc/validation/test_loader.py -v
"""
import io
import pytest
import numpy as np

from jpl2mpc.input.loader         import load_horizons_ephemeris
from jpl2mpc.model.constants      import CONVERTER, OBLIQUITY
from jpl2mpc.model.errors         import AmbiguousFrameError, TruncatedDataError
from jpl2mpc.output               import BufferedRecordWriter
from jpl2mpc.validation.synthetic import build_coordinate_line, build_epoch_line, build_horizons_lines


def convert_lines(lines):
  sink          = io.StringIO()
  flags, header = load_horizons_ephemeris(lines, BufferedRecordWriter(sink, 'test'))
  return flags, header, sink.getvalue()


def read_records(output: str) -> np.ndarray:
  """Parse the record block of an output (header line skipped) back into numbers."""
  rows = []
  for line in output.splitlines()[1:]:
    fields = line.split()
    if len(fields) in (4, 7) and line[:1].isdigit():
      rows.append([float(field) for field in fields])
  return np.array(rows)


class TestLoadHorizonsEphemeris:
  """
  Tests for load_horizons_ephemeris.
  """

  def test_sanity_check_two_daily_epochs(self):
    """
    Two epochs one day apart give step 1.0 and count 2 in the header.
    """
    lines = build_horizons_lines([
      (2459000.5, (0.1, 0.2, 0.3)),
      (2459001.5, (0.4, 0.5, 0.6)),
    ])
    _, header, output = convert_lines(lines)

    assert header.step_size_days == 1.0
    assert header.record_count   == 2

    fields = output.split("\n", 1)[0].split()
    assert float(fields[0]) == 2459000.5
    assert float(fields[1]) == 1.0
    assert int(fields[2])   == 2

  def test_sanity_check_gaia_fixture(self, gaia_filepath):
    """
    Equatorial km, km/s state vectors are rescaled, not rotated.
    """
    with open(gaia_filepath, 'r', newline='') as f:
      flags, header, output = convert_lines(f)

    assert flags.is_state_vector_table
    assert flags.is_equatorial_frame and not flags.is_ecliptic_frame
    assert flags.is_km_s_units
    assert flags.object_name == "Gaia = 2013-074A = NORAD 39479"

    assert output.startswith(
      "2459000.50000   1.0000000000    3 0,1,1 (500) Geocentric: Gaia = 2013-074A = NORAD 39479\n"
    )
    assert "2459000.50000    0.0100000000   -0.0200000000    0.0050000000 " in output

    records = read_records(output)
    assert records.shape == (3, 7)
    assert np.allclose(records[:, 0], [2459000.5, 2459001.5, 2459002.5])
    assert np.allclose(records[2, 1:4], [-0.01, 0.0, 0.0], atol=1e-10)
    assert np.allclose(records[0, 4:7], np.array([1.0, -0.5, 0.25]) * CONVERTER.AU_PER_DAY__PER__KM_PER_SEC, atol=1e-12)
    assert np.allclose(records[2, 4:7], [0.0, 0.0, -2.0 * CONVERTER.AU_PER_DAY__PER__KM_PER_SEC], atol=1e-12)

  def test_sanity_check_tess_fixture(self, tess_filepath):
    """
    Ecliptic AU positions are rotated to equatorial; the step is half a day.
    """
    with open(tess_filepath, 'r', newline='') as f:
      flags, header, output = convert_lines(f)

    assert not flags.is_state_vector_table
    assert flags.is_ecliptic_frame and not flags.is_km_s_units
    assert flags.object_name.startswith("TESS")

    assert header.step_size_days == 0.5
    assert header.record_count   == 2

    records = read_records(output)
    assert records.shape == (2, 4)
    assert np.allclose(records[0, 1:4], [0.0, OBLIQUITY.COS_J2000, OBLIQUITY.SIN_J2000], atol=1e-10)
    assert np.allclose(records[1, 1:4], [0.0, -OBLIQUITY.SIN_J2000, OBLIQUITY.COS_J2000], atol=1e-10)

  def test_sanity_check_preamble_verbatim(self, gaia_filepath):
    """
    Everything before $$SOE follows the header line unchanged.
    """
    with open(gaia_filepath, 'r', newline='') as f:
      input_lines = f.readlines()
    preamble = input_lines[:input_lines.index("$$SOE\n")]

    _, _, output = convert_lines(input_lines)

    output_lines = output.splitlines(keepends=True)
    assert output_lines[1:1 + len(preamble)] == preamble
    assert "$$SOE\n" not in output_lines

  def test_sanity_check_missing_frame_raises(self):
    """
    Neither frame declared: fatal, and no record is written.
    """
    lines = build_horizons_lines([(2459000.5, (0.1, 0.2, 0.3))], frame='none')
    sink  = io.StringIO()

    with pytest.raises(AmbiguousFrameError) as excinfo:
      load_horizons_ephemeris(lines, BufferedRecordWriter(sink, 'test'))

    assert excinfo.value.exit_code == -1
    assert sink.getvalue() == ""

  def test_sanity_check_both_frames_raises(self):
    """
    Both frames declared: fatal.
    """
    lines = build_horizons_lines([(2459000.5, (0.1, 0.2, 0.3))], frame='both')
    with pytest.raises(AmbiguousFrameError):
      convert_lines(lines)

  def test_sanity_check_truncated_block_raises(self):
    """
    An epoch line as the last line of input is a truncated block.
    """
    lines = build_horizons_lines([(2459000.5, (0.1, 0.2, 0.3))])
    lines = lines[:lines.index("$$SOE\n") + 1] + [build_epoch_line(2459000.5)]

    with pytest.raises(TruncatedDataError) as excinfo:
      convert_lines(lines)
    assert excinfo.value.exit_code == -2

  def test_sanity_check_flags_frozen(self):
    """
    A units line between epochs is ignored.
    """
    lines = build_horizons_lines([])
    soe   = lines.index("$$SOE\n")
    lines[soe + 1:soe + 1] = [
      build_epoch_line(2459000.5),
      build_coordinate_line((1.0, 2.0, 3.0)),
      "Output units    : KM-S\n",
      build_epoch_line(2459001.5),
      build_coordinate_line((1.0, 2.0, 3.0)),
    ]
    flags, _, output = convert_lines(lines)

    assert flags.frozen
    assert not flags.is_km_s_units

    records = read_records(output)
    assert np.allclose(records[:, 1:4], [[1.0, 2.0, 3.0], [1.0, 2.0, 3.0]])

  def test_sanity_check_labelled_state_vectors(self):
    """
    Labelled and unlabelled tables give the same output.
    """
    epochs = [
      (2459000.5, (1.2e6, -3.4e6, 5.6e5), (1.5, -2.5, 0.5)),
      (2459001.5, (1.3e6, -3.3e6, 5.5e5), (1.4, -2.4, 0.4)),
    ]
    _, _, unlabelled = convert_lines(build_horizons_lines(epochs, km_s=True))
    _, _, labelled   = convert_lines(build_horizons_lines(epochs, km_s=True, labelled=True))

    assert read_records(labelled).shape == (2, 7)
    assert np.array_equal(read_records(labelled), read_records(unlabelled))

  def test_sanity_check_no_epochs(self):
    """
    An input without data gives a zero header, the preamble and the trailer.
    """
    flags, header, output = convert_lines(build_horizons_lines([]))

    assert not flags.frozen
    assert header.record_count == 0
    assert output.startswith("      0.00000   0.0000000000    0 0,1,1 (500) Geocentric: Gaia")
    assert output.endswith("Created from Horizons data by 'jpl2mpc', ver test\n")
