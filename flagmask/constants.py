"""Width constants for the 64-bit flag word."""

WIDTH = 64
MASK = (1 << WIDTH) - 1

# Bit positions are 0-indexed from the least significant bit
VALID_BIT_INDEXES = range(0, WIDTH)
