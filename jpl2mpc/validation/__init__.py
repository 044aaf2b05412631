"""
Validation Package
==================

Test suite for the Horizons to MPC converter.

Modules:
--------
- test_name_resolver    : Tests for spacecraft name look-up
- test_header_scanner   : Tests for Horizons header flag detection
- test_epoch_parser     : Tests for epoch line recognition and coordinate extraction
- test_frame_converter  : Tests for frame rotation and unit rescaling
- test_record_writer    : Tests for record formatting and header placement
- test_loader           : Tests for the single-pass scan
- test_regression       : End-to-end tests of main() and the CLI

Usage:
------
Run all tests:
  python -m pytest jpl2mpc/validation/ -v

Run a specific test module:
  python -m pytest jpl2mpc/validation/test_loader.py -v
"""
