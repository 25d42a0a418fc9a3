"""
Filter derivation and the one dimensional filtering kernels. Every kernel
filters the columns of its input so that all the rows (or columns, via a
transpose) of a signal block are processed in one go. Boundaries are always
extended periodically.

"""
import numpy as np

from rwt.utils import asfarray

def analysis_filters(h):
    """Derive the decomposition filters from scaling coefficients *h*.

    :returns: a tuple (h0, h1) where h0 is *h* reversed and h1 is *h* with
        every even-indexed value negated.

    """
    h = asfarray(h)
    h0 = h[::-1].copy()
    h1 = h.copy()
    h1[::2] = -h1[::2]
    return h0, h1

def synthesis_filters(h):
    """Derive the reconstruction filters from scaling coefficients *h*.

    :returns: a tuple (g0, g1) where g0 is a copy of *h* and g1 is *h*
        reversed with every odd-indexed value negated.

    """
    h = asfarray(h)
    g0 = h.copy()
    g1 = h[::-1].copy()
    g1[1::2] = -g1[1::2]
    return g0, g1

def coldfilt(X, h0, h1):
    """Filter the columns of *X* with the analysis filters *h0* and *h1* and
    decimate the result by two.

    Each column of length lx is extended at its end by the first len(h0)-1
    samples. For the i-th output row::

        Lo[i] = sum_j X[2i+j] * h0[lh-1-j]
        Hi[i] = sum_j X[2i+j] * h1[lh-1-j]

    :param X: a matrix whose columns have even length
    :returns: a tuple (Lo, Hi) of matrices with half as many rows as *X*

    """
    X = asfarray(X)
    lx = X.shape[0]
    lh = h0.shape[0]

    Xe = X[np.arange(lx + lh - 1) % lx, ...]

    Lo = np.zeros((lx >> 1,) + X.shape[1:])
    Hi = np.zeros_like(Lo)
    for j in range(lh):
        taps = Xe[j:j+lx:2, ...]
        Lo += h0[lh-1-j] * taps
        Hi += h1[lh-1-j] * taps

    return Lo, Hi

def colifilt(Lo, Hi, g0, g1):
    """Reconstruct columns from lowpass columns *Lo* and highpass columns *Hi*
    using the synthesis filters *g0* and *g1*, interpolating by two.

    Both inputs are extended at their start by the last len(g0)/2-1 samples.
    Even and odd output rows use the even and odd filter taps respectively so
    that no zeros need to be inserted::

        Y[2i]   = sum_j Lo[i+j] * g0[lh-2-2j] + Hi[i+j] * g1[lh-2-2j]
        Y[2i+1] = sum_j Lo[i+j] * g0[lh-1-2j] + Hi[i+j] * g1[lh-1-2j]

    :returns: a matrix with twice as many rows as *Lo*

    """
    Lo, Hi = asfarray(Lo), asfarray(Hi)
    if Lo.shape != Hi.shape:
        raise ValueError('Lowpass and highpass shapes differ: {0} vs {1}'.format(
            Lo.shape, Hi.shape))

    lx = Lo.shape[0]
    lh = g0.shape[0]
    pad = (lh >> 1) - 1

    idx = (np.arange(lx + pad) - pad) % lx
    Le, He = Lo[idx, ...], Hi[idx, ...]

    Y = np.zeros((lx << 1,) + Lo.shape[1:])
    for j in range(lh >> 1):
        Y[0::2, ...] += Le[j:j+lx, ...] * g0[lh-2-2*j] + He[j:j+lx, ...] * g1[lh-2-2*j]
        Y[1::2, ...] += Le[j:j+lx, ...] * g0[lh-1-2*j] + He[j:j+lx, ...] * g1[lh-1-2*j]

    return Y

def colfilter(X, h0, h1, dilation=1):
    """Filter the columns of *X* with the analysis filters *h0* and *h1*
    without decimation. The filters are dilated by inserting *dilation*-1
    zeros between taps::

        Lo[k] = sum_j X[(k + j*dilation) mod lx] * h0[lh-1-j]

    and likewise for *Hi* with *h1*.

    :returns: a tuple (Lo, Hi) of matrices the same shape as *X*

    """
    X = asfarray(X)
    lh = h0.shape[0]

    Lo = np.zeros(X.shape)
    Hi = np.zeros(X.shape)
    for j in range(lh):
        shifted = np.roll(X, -j*dilation, axis=0)
        Lo += h0[lh-1-j] * shifted
        Hi += h1[lh-1-j] * shifted

    return Lo, Hi

def colifilter(Lo, Hi, g0, g1, dilation=1):
    """Invert :py:func:`colfilter`. *Lo* and *Hi* are filtered with the
    dilated synthesis filters *g0* and *g1* and the two paths are averaged::

        Y[k] = (sum_j Lo[k - (lh-1-j)*dilation] * g0[lh-1-j] +
                      Hi[k - (lh-1-j)*dilation] * g1[lh-1-j]) / 2

    with indices taken modulo the column length.

    :returns: a matrix the same shape as *Lo*

    """
    Lo, Hi = asfarray(Lo), asfarray(Hi)
    if Lo.shape != Hi.shape:
        raise ValueError('Lowpass and highpass shapes differ: {0} vs {1}'.format(
            Lo.shape, Hi.shape))

    lh = g0.shape[0]

    Y = np.zeros(Lo.shape)
    for j in range(lh):
        shift = (lh-1-j) * dilation
        Y += g0[lh-1-j] * np.roll(Lo, shift, axis=0) + g1[lh-1-j] * np.roll(Hi, shift, axis=0)

    return 0.5 * Y

# vim:sw=4:sts=4:et
