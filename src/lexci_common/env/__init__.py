"""Environment variable readers."""

from lexci_common.env import reader
from lexci_common.env.reader import is_present, read_bool, read_str

__all__ = ["reader", "is_present", "read_bool", "read_str"]
