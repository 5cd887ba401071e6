import os

# Plotting tests must not open windows
os.environ.setdefault("MPLBACKEND", "Agg")
