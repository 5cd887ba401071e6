"""
Application Entry Point
=======================
Runs the projectile demo and writes the resulting image.

It:
1. Creates the output directory and sets up logging (console + log file).
2. Simulates the projectile until it lands.
3. Draws the path onto a Canvas and saves it as a PPM file.
"""
import logging
import os
from typing import Optional

from raytracer import config
from raytracer.demo.projectile import Environment, Projectile, plot_to_canvas, simulate
from raytracer.logging_config import setup_logging
from raytracer.model.canvas import Canvas

logger = logging.getLogger(__name__)


def main(output_path: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Run the projectile demo.

    Args:
        output_path: Where to write the PPM image. Defaults to
            `output/projectile.ppm` under the working directory.
        log_file: Where to write the log. Defaults to `raytracer.log`
            next to the image.
    """
    output_path = output_path or config.default_ppm_path()
    output_dir = os.path.dirname(output_path)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)
    log_file = log_file or os.path.join(output_dir, config.LOG_FILENAME)

    setup_logging(level=logging.INFO, log_file=log_file)

    canvas = Canvas(config.CANVAS_WIDTH, config.CANVAS_HEIGHT)
    path = list(simulate(Environment(), Projectile()))
    logger.info(f"Projectile landed after {len(path) - 1} ticks at {path[-1].position}.")

    plot_to_canvas(canvas, path)
    canvas.save(output_path)


if __name__ == "__main__":
    main()
