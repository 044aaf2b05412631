"""
Pytest Configuration and Fixtures
=================================

Shared fixtures for all validation tests.
"""
import pytest

from pathlib import Path


@pytest.fixture(scope="session")
def fixtures_path():
  """Return path to test fixtures directory."""
  return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def gaia_filepath(fixtures_path):
  """Equatorial (ICRF), km and km/s, unlabelled state vectors, three daily epochs."""
  return fixtures_path / "gaia_state_vectors_km.txt"


@pytest.fixture(scope="session")
def tess_filepath(fixtures_path):
  """Ecliptic J2000, AU, labelled positions, two epochs half a day apart."""
  return fixtures_path / "tess_positions_ecliptic_au.txt"


@pytest.fixture
def write_horizons_file(tmp_path):
  """Write synthetic Horizons lines to a temporary file and return its path."""
  def _write(lines, name="horizons.txt"):
    filepath = tmp_path / name
    with open(filepath, 'w', newline='') as f:
      f.writelines(lines)
    return filepath
  return _write
