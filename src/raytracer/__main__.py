"""Command-line interface."""
from raytracer.main import main

if __name__ == "__main__":
    main()
