# config.py
"""
Global constants shared by the vector library and the console lessons.

Command-line flags in main.py override the demo values; nothing here is
read from disk.
"""

# Tolerance used by every floating-point comparison (see core.vector.nearly_equal).
EPSILON = 1e-5

# Significant digits used when printing vectors and scalars.
OUTPUT_PRECISION = 4

# Number of random samples each lesson step draws.
DEMO_TRIALS = 10

# Range for the x/y components of the "same height" vectors in the triple product lesson.
HEIGHT_DEMO_RANGE = (-10.0, 10.0)

# Range for arbitrary vectors and shear coefficients.
UNIT_RANGE = (-1.0, 1.0)

# Number of rows used by the batched shear check.
BATCH_SAMPLES = 1000

PAUSE_PROMPT = "Press Enter to continue . . . "
