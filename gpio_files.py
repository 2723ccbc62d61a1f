#gpio_files.py ver 0.2.0
'''
sysfs GPIO file access
Functions:
1) write_to_file: open, write value + newline, flush, close
2) read_status_byte: open, read one character, close
3) SysfsPins: write/read capability handed to blink_led and switch_debounce
4) export / direction / unexport helpers
'''

import os
import sys

import gpio_config
from gpio_config import SYSFS_GPIO_ROOT


def export_path(root=SYSFS_GPIO_ROOT):
    return os.path.join(root, "export")


def unexport_path(root=SYSFS_GPIO_ROOT):
    return os.path.join(root, "unexport")


def direction_path(pin, root=SYSFS_GPIO_ROOT):
    return os.path.join(root, f"gpio{pin}", "direction")


def value_path(pin, root=SYSFS_GPIO_ROOT):
    return os.path.join(root, f"gpio{pin}", "value")


def _close_quietly(fp):
    try:
        fp.close()
    except OSError:
        pass# already reporting the earlier failure


def write_to_file(path, value):
    """Open path, write value followed by a newline, flush and close.

    Returns True on success. Any failure is printed to stderr and
    reported as False; nothing is retried.
    """
    try:
        fp = open(path, "w")
    except OSError as e:
        print(f"file open failed: {e}", file=sys.stderr)
        return False

    try:
        if fp.write(f"{value}\n") == 0:
            print("error writing to file", file=sys.stderr)
            _close_quietly(fp)
            return False
        fp.flush()
    except OSError as e:
        print(f"error writing to file: {e}", file=sys.stderr)
        _close_quietly(fp)
        return False

    try:
        fp.close()
    except OSError as e:
        print(f"close error: {e}", file=sys.stderr)
        return False

    return True


def read_status_byte(path):
    """Read a single status character from path, or None on failure.

    The byte is read raw and mapped one-to-one onto a character, so junk
    from the value file never fails to decode.
    """
    try:
        fp = open(path, "rb")
    except OSError as e:
        print(f"could not open value file: {e}", file=sys.stderr)
        return None

    try:
        data = fp.read(1)
    except OSError as e:
        print(f"error reading from file: {e}", file=sys.stderr)
        _close_quietly(fp)
        return None

    if len(data) < 1:
        print("error reading from file", file=sys.stderr)
        _close_quietly(fp)
        return None

    try:
        fp.close()
    except OSError as e:
        print(f"close error: {e}", file=sys.stderr)
        return None

    return data.decode("latin-1")


class SysfsPins:
    def __init__(self, root=SYSFS_GPIO_ROOT):
        self.root = root

    def write(self, path, value):
        return write_to_file(path, value)

    def read_byte(self, path):
        return read_status_byte(path)


def init_pin(pins, pin, direction, root=SYSFS_GPIO_ROOT):
    # enable the pin, then set it to "in" or "out"
    if not pins.write(export_path(root), str(pin)):
        print(f"could not enable gpio{pin}", file=sys.stderr)
        return False
    if not pins.write(direction_path(pin, root), direction):
        label = "an input" if direction == "in" else "an output"
        print(f"could not make gpio{pin} {label}", file=sys.stderr)
        return False
    return True


def release_pin(pins, pin, root=SYSFS_GPIO_ROOT):
    if not pins.write(unexport_path(root), str(pin)):
        print(f"could not release gpio{pin}", file=sys.stderr)
        return False
    return True


def open_pins(root=SYSFS_GPIO_ROOT):
    """Return the pin backend selected in gpio_config."""
    if gpio_config.USE_GPIOCHIP:
        from gpiochip_pins import GPIOChipPins
        return GPIOChipPins(gpio_config.GPIO_CHIP, root=root)
    return SysfsPins(root)
