import numpy as np
from pytest import raises

from rwt import Pyramid, RedundantTransform, rdwt, irdwt, dwt, daubcqf
from rwt.common import highpass_shape

from tests.util import assert_almost_equal, haar, TOLERANCE

def setup_module():
    global h4, h8
    h4 = daubcqf(4)[0]
    h8 = daubcqf(8)[0]

def test_ramp_reference():
    a = 1 / np.sqrt(2)
    yl, yh, L = rdwt(np.arange(1, 9), haar(), 1)
    assert L == 1
    assert_almost_equal(yl, a * np.array([3, 5, 7, 9, 11, 13, 15, 9]))
    assert_almost_equal(yh, a * np.array([-1, -1, -1, -1, -1, -1, -1, 7]))

def test_shapes_1d():
    yl, yh, L = rdwt(np.random.rand(40), h4, 3)
    assert yl.shape == (40,)
    assert yh.shape == (120,)

def test_shapes_row():
    yl, yh, L = rdwt(np.random.rand(1, 40), h4, 3)
    assert yl.shape == (1, 40)
    assert yh.shape == (1, 120)

def test_shapes_column():
    yl, yh, L = rdwt(np.random.rand(40, 1), h4, 3)
    assert yl.shape == (40, 1)
    assert yh.shape == (40, 3)

def test_shapes_2d():
    yl, yh, L = rdwt(np.random.rand(20, 30), h4, 2)
    assert yl.shape == (20, 30)
    assert yh.shape == (20, 180)

def test_perfect_recon_1d():
    for h in (haar(), h4, h8):
        for N in (64, 37, 7):
            vec = np.random.rand(N)
            yl, yh, L = rdwt(vec, h, 3)
            vec_recon, L = irdwt(yl, yh, h, 3)
            assert_almost_equal(vec_recon, vec)

def test_perfect_recon_2d():
    for h in (haar(), h4, h8):
        X = np.random.rand(20, 30)
        yl, yh, L = rdwt(X, h, 2)
        X_recon, L = irdwt(yl, yh, h, 2)
        assert_almost_equal(X_recon, X)

def test_perfect_recon_column():
    vec = np.random.rand(50, 1)
    yl, yh, L = rdwt(vec, h4, 4)
    vec_recon, L = irdwt(yl, yh, h4)
    assert L == 4
    assert vec_recon.shape == (50, 1)
    assert_almost_equal(vec_recon, vec)

def test_infer_levels():
    yl, yh, L = rdwt(np.random.rand(16, 16), h4, 3)
    x, L = irdwt(yl, yh, h4)
    assert L == 3

def test_default_levels():
    yl, yh, L = rdwt(np.random.rand(48), h4)
    assert L == 4
    assert yh.shape == (48*4,)

def test_zero_levels():
    X = np.random.rand(12, 10)
    yl, yh, L = rdwt(X, h4, 0)
    assert L == 0
    assert np.all(yl == X)
    assert yh.size == 0
    x, L = irdwt(yl, yh, h4)
    assert np.all(x == X)

def test_matches_decimated_transform():
    # The even samples of the first level are the decimated subbands
    vec = np.random.rand(32)
    yl, yh, L = rdwt(vec, h4, 1)
    y, L = dwt(vec, h4, 1)
    assert_almost_equal(y[:16], yl[::2])
    assert_almost_equal(y[16:], yh[::2])

def test_shift_invariant():
    vec = np.random.rand(64)
    yl, yh, L = rdwt(vec, h4, 3)
    syl, syh, L = rdwt(np.roll(vec, 5), h4, 3)
    assert_almost_equal(syl, np.roll(yl, 5))
    assert_almost_equal(syh.reshape((3, 64)), np.roll(yh.reshape((3, 64)), 5, axis=1))

def test_identical_rows():
    row = np.random.rand(16)
    X = np.tile(row, (8, 1))
    res = RedundantTransform(h4).forward(X, 2)

    assert_almost_equal(res.lowpass, np.tile(res.lowpass[0, :], (8, 1)))
    for level in (1, 2):
        for subband in res.subbands(level):
            assert_almost_equal(subband, np.tile(subband[0, :], (8, 1)))

    # Nothing varies down the columns so the column highpass vanishes
    col_hi_row_lo, col_lo_row_hi, col_hi_row_hi = res.subbands(1)
    assert np.abs(col_hi_row_lo).max() < TOLERANCE
    assert np.abs(col_hi_row_hi).max() < TOLERANCE
    assert np.abs(col_lo_row_hi).max() > TOLERANCE

def test_repeatable():
    X = np.random.rand(16, 24)
    yl1, yh1, L = rdwt(X, h8, 2)
    yl2, yh2, L = rdwt(X, h8, 2)
    assert np.array_equal(yl1, yl2)
    assert np.array_equal(yh1, yh2)

def test_pyramid_subbands_1d():
    res = RedundantTransform(h4).forward(np.random.rand(32), 2)
    assert res.nlevels == 2
    bands = res.subbands(2)
    assert len(bands) == 1
    assert bands[0].shape == (32,)
    assert np.all(bands[0] == res.highpass[32:])

def test_pyramid_subbands_column():
    res = RedundantTransform(h4).forward(np.random.rand(32, 1), 2)
    bands = res.subbands(2)
    assert bands[0].shape == (32, 1)
    assert np.all(bands[0][:,0] == res.highpass[:,1])

def test_pyramid_subbands_2d():
    res = RedundantTransform(h4).forward(np.random.rand(8, 12), 2)
    bands = res.subbands(2)
    assert len(bands) == 3
    for band in bands:
        assert band.shape == (8, 12)
    assert np.all(bands[2] == res.highpass[:, 60:72])

def test_pyramid_bad_level():
    res = RedundantTransform(h4).forward(np.random.rand(8, 12), 2)
    with raises(ValueError):
        res.subbands(3)
    with raises(ValueError):
        res.subbands(0)

def test_pyramid_mismatched_highpass():
    with raises(ValueError):
        Pyramid(np.zeros((8, 12)), np.zeros((8, 30)))

def test_pyramid_highpass_wrong_shape():
    # Right number of values, wrong layout
    with raises(ValueError):
        Pyramid(np.zeros((8, 12)), np.zeros((4, 72)))
    with raises(ValueError):
        Pyramid(np.zeros((8, 12)), np.zeros(288))
    with raises(ValueError):
        Pyramid(np.zeros(16), np.zeros((1, 32)))
    with raises(ValueError):
        Pyramid(np.zeros((1, 16)), np.zeros((16, 2)))
    with raises(ValueError):
        Pyramid(np.zeros((16, 1)), np.zeros((1, 32)))

def test_irdwt_highpass_wrong_shape():
    with raises(ValueError):
        irdwt(np.zeros(16), np.zeros((4, 8)), h4)

def test_highpass_shape_matches_forward():
    trans = RedundantTransform(h4)
    for shape in ((16,), (1, 16), (16, 1), (8, 12)):
        res = trans.forward(np.random.rand(*shape), 2)
        assert res.highpass.shape == highpass_shape(shape, 2)
        Pyramid(res.lowpass, res.highpass, 2)

def test_pyramid_wrong_levels():
    with raises(ValueError):
        Pyramid(np.zeros(16), np.zeros(32), 3)

def test_inverse_out():
    X = np.random.rand(10, 14)
    trans = RedundantTransform(h4)
    out = np.empty((10, 14))
    x = trans.inverse(trans.forward(X, 2), out=out)
    assert x is out
    assert_almost_equal(out, X)

def test_negative_levels():
    with raises(ValueError):
        rdwt(np.random.rand(16), h4, -2)

# vim:sw=4:sts=4:et
