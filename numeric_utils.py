def bit_reverse(value: int, num_bits: int) -> int:
    """Reverse the low num_bits bits of value. Higher bits are dropped."""
    result = 0
    for _ in range(num_bits):
        result = (result << 1) | (value & 1)
        value >>= 1
    return result

def ceil_lg(n: int) -> int:
    """
    Ceiling of log2(n): 1 -> 0, 2 -> 1, 3..4 -> 2, 5..8 -> 3, etc.

    Computed as the position of the highest set bit, plus one if more than
    one bit is set. ceil_lg(0) is 0.
    """
    last_seen = 0
    num_seen = 0
    i = 0
    while n:
        if n & 1:
            last_seen = i
            num_seen += 1
        n >>= 1
        i += 1
    if num_seen > 1:
        last_seen += 1
    return last_seen

def is_2pow(n: int) -> bool:
    """Check if exactly one bit of n is set."""
    seen_one = False
    while n:
        if n & 1:
            if seen_one:
                return False
            seen_one = True
        n >>= 1
    return seen_one
