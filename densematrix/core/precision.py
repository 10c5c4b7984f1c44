"""
Element type and numerical comparison constants.

Every Matrix stores IEEE 754 double precision values. Equality is exact;
the tolerances here are only used by the opt-in Matrix.allclose().
"""

import numpy as np


# The one and only element type
DTYPE = np.float64

# Default tolerance for approximate comparisons (relative)
DEFAULT_RTOL: float = 1e-12

# Default tolerance for considering values as zero (absolute)
DEFAULT_ATOL: float = 1e-14
