# logger_setup.py

import logging
import os

import constants


def setup_logging(config: dict, runs_dir: str = 'runs'):
    """
    Sets up logging for the application.

    Creates a run-specific log directory and configures a dedicated
    application logger (not the root logger) to output to both the console
    and a log file, so verbose output from pygame or Numba stays out of it.

    Data Contract:
    - Inputs:
        - config (dict): The loaded config.json contents.
        - runs_dir (str): Parent directory of the per-run log directories.
    - Outputs: The configured logger.
    - Side Effects:
        - Configures the "pointer_fx" logger.
        - Creates directories for log files.
    - Invariants: Missing 'run_id' or 'logging' entries fall back to
      "default" and INFO with a timestamped format.
    """
    run_id = config.get('run_id', 'default')
    log_config = config.get('logging', {})
    level = log_config.get('level', 'INFO').upper()
    log_format = log_config.get('format', '%(asctime)s - %(levelname)s - %(message)s')

    logger = logging.getLogger(constants.LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    log_dir = os.path.join(runs_dir, run_id)
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, 'effect.log')

    formatter = logging.Formatter(log_format)

    file_handler = logging.FileHandler(log_file)
    file_handler.setFormatter(formatter)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)

    # Clear existing handlers to avoid duplication if this function is called again
    if logger.hasHandlers():
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()
    logger.addHandler(file_handler)
    logger.addHandler(stream_handler)

    logger.info(f"Logging initialized. Run ID: {run_id}. Log file: {log_file}")
    return logger
