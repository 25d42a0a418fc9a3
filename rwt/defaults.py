DEFAULT_WAVELET = 4
DEFAULT_PHASE = 'min'

# Largest deviation of sum(h**2) from one before scaling coefficients are
# reported as not being orthonormal.
ORTHONORMAL_TOLERANCE = 1e-4
