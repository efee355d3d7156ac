"""
Build alphabets by chaining character streams.
"""

from stepstream import chained, collect, from_range, mapped


def char_range(first, last):
    """Stream the characters from ``first`` to ``last`` inclusive."""
    return mapped(from_range(ord(first), ord(last) + 1), chr)


def alphabet():
    return char_range("a", "z")


def alpha_num():
    return chained(
        alphabet(),
        mapped(alphabet(), str.upper),
        char_range("0", "9"),
    )


if __name__ == "__main__":
    print("".join(collect(alphabet())))  # abcdefghijklmnopqrstuvwxyz
    print("".join(collect(alpha_num())))
