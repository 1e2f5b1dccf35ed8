"""Shared constants for CPU instruction tests."""

TEST_VALUE: int = 0xa5  # negative, stays negative when incremented or decremented
ZERO_PAGE_LOCATION: int = 0x20
INDEX: int = 0x05
ABSOLUTE_LOCATION: int = 0x0301  # lower byte + index must be less than 255
PAGE_CROSS_INDEX: int = 0xff
ZERO_PAGE_POINTER_LOCATION: int = 0x08
INDIRECT_DATA_LOCATION_ZERO_PAGE: int = 0x0010
INDIRECT_DATA_LOCATION: int = 0x0310
