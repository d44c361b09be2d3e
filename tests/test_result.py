# fixed-width arithmetic and the tagged result

from smooth.result import ResultTag, SmoothInputError, SmoothOverflowError, SmoothResult
from smooth.uint import checked_mul, fits, max_value


def test_uint():
    assert max_value(1) == 1
    assert max_value(8) == 255
    assert max_value(64) == 18446744073709551615
    assert fits(255, 8)
    assert not fits(256, 8)
    assert not fits(-1, 8)
    assert checked_mul(15, 17, 8) == 255
    assert checked_mul(16, 16, 8) is None
    assert checked_mul(2, 2**63 - 1, 64) == 2**64 - 2
    assert checked_mul(2, 2**63, 64) is None
    for width in [0, -1, True, 8.0]:
        try:
            max_value(width)
        except SmoothInputError as err:
            print('max_value(%r): %s' % (width, err))
        else:
            assert False, 'max_value(%r) should fail' % (width,)


def test_result():
    res = SmoothResult.finish([1, 2, 4], 3, 64)
    assert res.is_complete() and not res.is_truncated() and not res.is_overflowed()
    assert list(res) == [1, 2, 4]
    assert len(res) == 3
    assert str(res) == 'COMPLETE: 3 of 3 values'
    assert res.expect() == [1, 2, 4]

    res = SmoothResult.finish([1], 5, 64)
    assert res.tag == ResultTag.TRUNCATED
    assert str(res) == 'TRUNCATED: 1 of 5 values'
    assert res.expect() == [1]

    res = SmoothResult.overflowed(5, 8)
    assert res.is_overflowed()
    assert len(res) == 0
    try:
        res.expect()
    except SmoothOverflowError as err:
        print(err)
        assert 'width 8' in str(err)
    else:
        assert False, 'expect() should raise'


def test():
    test_uint()
    test_result()


if __name__ == '__main__':
    test()
