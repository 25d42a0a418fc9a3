import numpy as np

from rwt.common import Pyramid
from rwt.coeffs import scaling_coefficients
from rwt.defaults import DEFAULT_WAVELET
from rwt.lowlevel import analysis_filters, synthesis_filters, colfilter, colifilter
from rwt.utils import as_matrix, asfarray, check_nlevels, output_buffer

class RedundantTransform(object):
    """
    An implementation of the redundant (undecimated, shift-invariant) discrete
    wavelet transform via NumPy. Valid values for *h* are documented in
    :py:class:`rwt.Transform`.

    Rather than decimating, the filters are dilated by 2**(l-1) at level *l*
    so every subband keeps the length of the input signal. The signal length
    need not be a multiple of any power of two.

    """
    def __init__(self, h=DEFAULT_WAVELET):
        self.h = scaling_coefficients(h)

    def forward(self, X, nlevels=None):
        """Perform a *nlevels*-level redundant decomposition of *X*.

        :param X: 1D or 2D real array-like object
        :param nlevels: Number of levels of decomposition. If None, the
            largest number of levels the shape of *X* would allow for the
            decimated transform is used.

        :returns: A :py:class:`rwt.Pyramid` holding the lowpass signal and the
            highpass subbands of every level.

        """
        X = asfarray(X)
        signal = as_matrix(X)

        m, n = signal.shape
        nlevels = check_nlevels(nlevels, m, n, decimated=False)

        h0, h1 = analysis_filters(self.h)

        lowpass = np.array(signal)
        highpass = np.zeros((m, 3*n*nlevels) if m > 1 else (1, n*nlevels))
        for level in range(nlevels):
            lowpass = _level_xfm(lowpass, highpass, level, h0, h1)

        # Restore the orientation of 1D input
        lowpass = lowpass.reshape(X.shape)
        return Pyramid(lowpass, _highpass_like(highpass, X.shape, nlevels), nlevels)

    def inverse(self, pyramid, out=None):
        """Reconstruct a signal from its redundant representation.

        :param pyramid: A :py:class:`rwt.Pyramid`-like object with
            ``lowpass``, ``highpass`` and ``nlevels`` attributes.
        :param out: optional float64 array with the shape of the lowpass
            signal which will receive the reconstruction

        :returns: An array shaped like ``pyramid.lowpass``.

        """
        if not isinstance(pyramid, Pyramid):
            pyramid = Pyramid(pyramid.lowpass, pyramid.highpass, pyramid.nlevels)

        X = output_buffer(pyramid.lowpass, out)
        work = as_matrix(X)
        highpass = pyramid.highpass_matrix()

        g0, g1 = synthesis_filters(self.h)
        for level in range(pyramid.nlevels-1, -1, -1):
            work[...] = _level_ifm(work, highpass, level, g0, g1)

        return X

def _highpass_like(highpass, shape, nlevels):
    """Reshape a (1, n*L) 1D highpass matrix to match an input of *shape*."""
    if len(shape) == 1:
        return highpass.reshape(-1)
    if shape[1] == 1 and shape[0] > 1:
        return highpass.reshape((nlevels, -1)).T
    return highpass

def _level_xfm(lowpass, highpass, level, h0, h1):
    """Perform one level of the redundant transform on the *lowpass* matrix.
    Highpass subbands for *level* (0-based) are written into *highpass* and
    the new lowpass matrix is returned.

    """
    dilation = 1 << level
    m, n = lowpass.shape

    if m == 1:
        lo, hi = colfilter(lowpass.T, h0, h1, dilation)
        highpass[:, n*level:n*(level+1)] = hi.T
        return lo.T

    # Columns first, then the rows of both column subbands
    col_lo, col_hi = colfilter(lowpass, h0, h1, dilation)
    lo, lo_hi = colfilter(col_lo.T, h0, h1, dilation)
    hi_lo, hi_hi = colfilter(col_hi.T, h0, h1, dilation)

    offset = 3*n*level
    highpass[:, offset:offset+n] = hi_lo.T
    highpass[:, offset+n:offset+2*n] = lo_hi.T
    highpass[:, offset+2*n:offset+3*n] = hi_hi.T

    return lo.T

def _level_ifm(lowpass, highpass, level, g0, g1):
    """Invert one level of the redundant transform and return the lowpass
    matrix of the next finer level.

    """
    dilation = 1 << level
    m, n = lowpass.shape

    if m == 1:
        hi = highpass[:, n*level:n*(level+1)]
        return colifilter(lowpass.T, hi.T, g0, g1, dilation).T

    offset = 3*n*level
    hi_lo = highpass[:, offset:offset+n]
    lo_hi = highpass[:, offset+n:offset+2*n]
    hi_hi = highpass[:, offset+2*n:offset+3*n]

    # Rows first, then columns
    col_lo = colifilter(lowpass.T, lo_hi.T, g0, g1, dilation).T
    col_hi = colifilter(hi_lo.T, hi_hi.T, g0, g1, dilation).T
    return colifilter(col_lo, col_hi, g0, g1, dilation)

# vim:sw=4:sts=4:et
