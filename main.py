# main.py

import cProfile
import io
import logging
import pstats

import numpy as np
import pygame

import constants
import logger_setup
from canvas import InteractiveCanvas
from config import EffectParameters, load_config

# Get the application's dedicated logger
logger = logging.getLogger(constants.LOGGER_NAME)


def create_display(window_config: dict) -> pygame.Surface:
    """Opens the window the effect draws into, sized to the screen when fullscreen."""
    title = window_config.get('title', constants.TITLE)
    if window_config.get('fullscreen', False):
        screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
    else:
        size = (window_config.get('width', constants.WIDTH), window_config.get('height', constants.HEIGHT))
        screen = pygame.display.set_mode(size, pygame.RESIZABLE)
    pygame.display.set_caption(title)
    return screen


def read_config(config_path: str) -> dict:
    """
    Loads config.json, or returns an empty config (every section at its
    built-in default) when the file does not exist, so an installed script
    can start from any directory. Malformed files still raise.
    """
    try:
        return load_config(config_path)
    except FileNotFoundError:
        print(f"WARNING: {config_path} not found. Using built-in defaults.")
        return {}


def main(config_path: str = 'config.json'):
    """
    Loads the configuration, opens the window and runs the effect until the
    window is closed or Escape is pressed.
    """
    # Logging is not set up yet, so config errors are printed.
    try:
        config = read_config(config_path)
    except (OSError, ValueError) as e:
        print(f"FATAL: Could not load {config_path}. Error: {e}")
        return

    logger_setup.setup_logging(config)
    logger.info("Application starting...")
    logger.info(f"Loaded configuration: {config}")

    window_config = config.get('window', {})
    run_control = config.get('run_control', {})
    defaults = EffectParameters.from_dict(config.get('effect', {}))
    logger.info(f"Effect defaults: {defaults.to_dict()}")

    # Initialize the master random number generator (RNG)
    rng = np.random.default_rng(config.get('master_seed'))
    logger.info(f"Master RNG initialized with seed: {config.get('master_seed')}")

    # --- Initialization ---
    pygame.init()
    screen = create_display(window_config)

    canvas = InteractiveCanvas(
        params=defaults.copy(),
        rng=rng,
        defaults=defaults,
        size=screen.get_size(),
        fps=window_config.get('fps', constants.FPS),
        log_throttle_ticks=run_control.get('log_throttle_ticks', 300),
    )

    max_ticks = run_control.get('max_ticks')
    if run_control.get('profile', False):
        profiler = cProfile.Profile()
        profiler.enable()
        canvas.run(max_ticks)
        profiler.disable()

        s = io.StringIO()
        stats = pstats.Stats(profiler, stream=s).sort_stats('cumtime')
        stats.print_stats(20) # Print the top 20 time-consuming functions
        logger.info(f"Profiling complete.\n{s.getvalue()}")
    else:
        canvas.run(max_ticks)

    canvas.teardown()
    logger.info("Application shutting down.")
    pygame.quit()


if __name__ == "__main__":
    main()
