import base64

from Cryptodome.Util.strxor import strxor, strxor_c

HEX_DIGITS = "0123456789abcdef"


class FormatError(ValueError):
    pass


def _nibble(hex_string, position):
    char = hex_string[position]
    value = HEX_DIGITS.find(char.lower())
    if value < 0:
        raise FormatError("invalid hex character {!r} at position {}".format(char, position))
    return value


def hex_to_bytes(hex_string):
    """Decode a hex string into bytes.

    Unlike bytes.fromhex, an odd-length string is accepted: the final lone
    digit becomes a byte of its own with a value from 0 to 15. Whitespace is
    not skipped.
    """
    result = bytearray((len(hex_string) + 1) // 2)
    for i in range(len(hex_string) // 2):
        result[i] = _nibble(hex_string, 2 * i) * 16 + _nibble(hex_string, 2 * i + 1)
    if len(hex_string) % 2:
        result[-1] = _nibble(hex_string, len(hex_string) - 1)
    return bytes(result)


def bytes_to_hex(data):
    return data.hex()


def bytes_to_base64(data):
    return base64.b64encode(data).decode("ascii")


def xor_bytes(bytes1, bytes2):
    if len(bytes1) != len(bytes2):
        raise ValueError("inputs must be of equal length")
    return strxor(bytes(bytes1), bytes(bytes2))


def xor_with_byte(data, key):
    return strxor_c(bytes(data), key)
