"""
Configuration & Path Management
===============================
This module serves as the central registry for output paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents hardcoded output paths scattered through the demo
   and entry point.
2. Location: Images and logs are results for the caller, so they are written
   under the current working directory, never next to the installed package.

Exports:
    OUTPUT_DIRNAME (str): Name of the directory results are written to.
    get_output_path (function): Absolute path of a file in that directory.
    default_ppm_path (function): Absolute path of the projectile demo image.
    CANVAS_WIDTH, CANVAS_HEIGHT (int): Demo canvas size in pixels.
"""
import os

OUTPUT_DIRNAME: str = "output"
PPM_FILENAME: str = "projectile.ppm"
LOG_FILENAME: str = "raytracer.log"

CANVAS_WIDTH: int = 900
CANVAS_HEIGHT: int = 550


def get_output_path(filename: str) -> str:
    """
    Absolute path of `filename` inside the output directory.

    Resolved against the working directory at call time, so a later
    `os.chdir` is honored.
    """
    return os.path.join(os.getcwd(), OUTPUT_DIRNAME, filename)


def default_ppm_path() -> str:
    return get_output_path(PPM_FILENAME)
