from pathlib import Path
from types   import SimpleNamespace
from typing  import Optional

from jpl2mpc import __version__


def build_config(
  input_filepath  : str,
  output_filepath : Optional[str] = None,
  in_place        : bool          = False,
  log_filepath    : Optional[str] = None,
) -> SimpleNamespace:
  """
  Build the run configuration from the command-line inputs.

  Input:
  ------
    input_filepath : str
      Horizons text ephemeris.
    output_filepath : str | None
      Output file. None writes to standard output.
    in_place : bool
      Use the in-place header strategy instead of the buffered one.
    log_filepath : str | None
      File that receives a copy of the terminal output.

  Output:
  -------
    config : SimpleNamespace
      Configuration object.
  """
  config = SimpleNamespace()

  # Files
  config.input_filepath  = Path(input_filepath)
  config.output_filepath = Path(output_filepath) if output_filepath else None
  config.log_filepath    = Path(log_filepath)    if log_filepath    else None
  config.to_stdout       = config.output_filepath is None

  # Writer strategy
  config.writer_strategy = 'in_place' if in_place else 'buffered'

  # Provenance stamp in the output trailer
  config.version = __version__

  # Status output would mix with the records on stdout
  config.verbose = not config.to_stdout

  return config


def print_configuration(
  config : SimpleNamespace,
) -> None:
  """
  Print the configuration.

  Input:
  ------
    config : SimpleNamespace
      Configuration object from build_config.
  """
  output_str = str(config.output_filepath) if config.output_filepath else "<stdout>"
  log_str    = str(config.log_filepath)    if config.log_filepath    else "None"

  print("\nConfiguration")
  print(f"  Input Filepath  : {config.input_filepath}")
  print(f"  Output Filepath : {output_str}")
  print(f"  Log Filepath    : {log_str}")
  print(f"  Header Strategy : {config.writer_strategy}")
  print(f"  Version         : {config.version}")
