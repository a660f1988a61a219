import pytest


def _do_round_trip_test_with_size(n: int, encoded_size: int, signed: bool) -> None:
    from http_serde.serialization import Deserializer, Serializer
    from http_serde.serialization.encoding.leb128 import decode_leb128, encode_leb128
    se = Serializer.build_bytes_serializer()
    encode_leb128(se, n, signed=signed)
    encoded_n = bytes(se.finalize())
    assert len(encoded_n) == encoded_size
    de = Deserializer.build_bytes_deserializer(encoded_n)
    assert decode_leb128(de, signed=signed) == n
    de.finalize()


EXAMPLES_SIGNED_BY_SIZE = {
    1: [
        0,
        1,
        2,
        50,
        63,
        -1,
        -2,
        -63,
        -64,
    ],
    2: [
        64,
        65,
        200,
        1000,
        8191,
        -65,
        -66,
        -3000,
        -8192,
    ],
    3: [
        8192,
        9000,
        100000,
        1048575,
        -8193,
        -100000,
        -1048576,
    ],
}


def gen_signed_test_cases():
    test_cases = []
    # convert example to test cases
    for size, examples in EXAMPLES_SIGNED_BY_SIZE.items():
        for example in examples:
            test_cases.append((example, size))
    # generate additional test cases
    for size in range(4, 10):
        n_pos_lo = (1 << (7 * (size - 1) - 1))
        n_pos_hi = (1 << (7 * size - 1)) - 1
        n_neg_lo = -(1 << (7 * size - 1))
        n_neg_hi = -(1 << (7 * (size - 1) - 1)) - 1
        test_cases.append((n_pos_lo, size))
        test_cases.append((n_pos_hi, size))
        test_cases.append((n_neg_lo, size))
        test_cases.append((n_neg_hi, size))
    return test_cases


@pytest.mark.parametrize('n, encoded_size', gen_signed_test_cases())
def test_signed_round_trip_with_size(n, encoded_size):
    _do_round_trip_test_with_size(n, encoded_size, True)


EXAMPLES_UNSIGNED_BY_SIZE = {
    1: [
        0,
        1,
        63,
        64,
        127,
    ],
    2: [
        128,
        300,
        8192,
        16383,
    ],
    3: [
        16384,
        65535,
        2097151,
    ],
}


def gen_unsigned_test_cases():
    test_cases = []
    # convert example to test cases
    for size, examples in EXAMPLES_UNSIGNED_BY_SIZE.items():
        for example in examples:
            test_cases.append((example, size))
    # generate additional test cases
    for size in range(4, 20):
        n_lo = 1 << (7 * (size - 1))
        n_hi = (1 << (7 * size)) - 1
        test_cases.append((n_lo, size))
        test_cases.append((n_hi, size))
    return test_cases


@pytest.mark.parametrize('n, encoded_size', gen_unsigned_test_cases())
def test_unsigned_round_trip_with_size(n, encoded_size):
    _do_round_trip_test_with_size(n, encoded_size, False)


def test_unsigned_rejects_negative():
    from http_serde.serialization import Serializer
    from http_serde.serialization.encoding.leb128 import encode_leb128
    se = Serializer.build_bytes_serializer()
    with pytest.raises(ValueError):
        encode_leb128(se, -1, signed=False)


def test_truncated_value():
    from http_serde.serialization import Deserializer
    from http_serde.serialization.encoding.leb128 import decode_leb128
    from http_serde.serialization.exceptions import OutOfDataError
    de = Deserializer.build_bytes_deserializer(b'\x80\x80')
    with pytest.raises(OutOfDataError):
        decode_leb128(de, signed=False)


def test_max_bytes():
    from http_serde.serialization import Deserializer, TooLongError
    from http_serde.serialization.encoding.leb128 import decode_leb128
    de = Deserializer.build_bytes_deserializer(bytes.fromhex('808001'))
    with pytest.raises(TooLongError):
        decode_leb128(de, signed=False, max_bytes=2)
    de = Deserializer.build_bytes_deserializer(bytes.fromhex('808001'))
    assert decode_leb128(de, signed=False, max_bytes=3) == 1 << 14
