from rwt.coeffs import scaling_coefficients
from rwt.defaults import DEFAULT_WAVELET
from rwt.lowlevel import analysis_filters, synthesis_filters, coldfilt, colifilt
from rwt.utils import as_matrix, asfarray, check_nlevels, output_buffer

class Transform(object):
    """
    An implementation of the decimating discrete wavelet transform via NumPy.

    :param h: the wavelet scaling coefficients, or an even integer *N*
        selecting the length *N* minimum phase Daubechies filter. See
        :py:func:`rwt.coeffs.daubcqf`.

    The coefficients should be orthonormal (sum to sqrt(2) with unit energy)
    for the inverse to reconstruct the original signal exactly.

    """
    def __init__(self, h=DEFAULT_WAVELET):
        self.h = scaling_coefficients(h)

    def forward(self, X, nlevels=None, out=None):
        """Perform a *nlevels*-level DWT decomposition of *X*.

        :param X: 1D or 2D real array-like object
        :param nlevels: Number of levels of wavelet decomposition. If None,
            the largest number of levels the shape of *X* allows is used.
        :param out: optional float64 array with the shape of *X* which will
            receive the result

        :returns: An array shaped like *X* holding the subbands of every level.

        At each level the lowpass (approximation) subband is packed into the
        leading half of each transformed dimension and the highpass subband
        into the trailing half. The next level then transforms the leading
        quarter (or half, for 1D signals) of the previous region.

        Every non-singleton dimension of *X* must be divisible by
        2**nlevels.

        """
        X = asfarray(X)
        Y = output_buffer(X, out)
        work = as_matrix(Y)

        rows, cols = work.shape
        nlevels = check_nlevels(nlevels, rows, cols)

        h0, h1 = analysis_filters(self.h)
        for level in range(nlevels):
            _level_xfm(work, rows, cols, h0, h1)
            if rows > 1:
                rows >>= 1
            cols >>= 1

        return Y

    def inverse(self, Y, nlevels=None, out=None):
        """Perform a *nlevels*-level DWT reconstruction from the packed
        subbands in *Y*.

        :param Y: transform domain signal as returned by :py:meth:`forward`
        :param nlevels: Number of levels to reconstruct. If None, the largest
            number of levels the shape of *Y* allows is used.
        :param out: optional float64 array with the shape of *Y* which will
            receive the reconstruction

        :returns: An array shaped like *Y* holding the reconstructed signal.

        """
        Y = asfarray(Y)
        X = output_buffer(Y, out)
        work = as_matrix(X)

        m, n = work.shape
        nlevels = check_nlevels(nlevels, m, n)
        if nlevels == 0:
            return X

        # Begin with the region holding the coarsest two subbands
        scale = 1 << (nlevels - 1)
        rows = m // scale if m > 1 else 1
        cols = n // scale

        g0, g1 = synthesis_filters(self.h)
        for level in range(nlevels, 0, -1):
            _level_ifm(work, rows, cols, g0, g1)
            if m > 1:
                rows <<= 1
            cols <<= 1

        return X

def _level_xfm(work, rows, cols, h0, h1):
    """Perform one level of the forward transform in place on the leading
    *rows* by *cols* region of *work*.

    """
    if rows > 1:
        # Columns first, lowpass to the top half, highpass to the bottom half.
        lo, hi = coldfilt(work[:rows, :cols], h0, h1)
        work[:rows >> 1, :cols] = lo
        work[rows >> 1:rows, :cols] = hi

    # Then rows, lowpass to the left half, highpass to the right half.
    lo, hi = coldfilt(work[:rows, :cols].T, h0, h1)
    work[:rows, :cols >> 1] = lo.T
    work[:rows, cols >> 1:cols] = hi.T

def _level_ifm(work, rows, cols, g0, g1):
    """Perform one level of the inverse transform in place on the leading
    *rows* by *cols* region of *work*. Rows are reconstructed before columns,
    undoing the forward transform in reverse order.

    """
    half = cols >> 1
    work[:rows, :cols] = colifilt(work[:rows, :half].T, work[:rows, half:cols].T, g0, g1).T

    if rows > 1:
        half = rows >> 1
        work[:rows, :cols] = colifilt(work[:half, :cols], work[half:rows, :cols], g0, g1)

# vim:sw=4:sts=4:et
