#gpiochip_pins.py ver 0.2.0
# sysfs-style pin access on top of libgpiod v2, for kernels without /sys/class/gpio

import os
import re
import sys

import gpiod
from gpiod.line import Direction, Value, Bias

from gpio_config import GPIO_CHIP, SYSFS_GPIO_ROOT

_PIN_FILE = re.compile(r"^gpio(\d+)/(direction|value)$")


class GPIOChipPins:
    HIGH = Value.ACTIVE
    LOW = Value.INACTIVE

    def __init__(self, chip_name=GPIO_CHIP, root=SYSFS_GPIO_ROOT):
        self.chip_name = chip_name
        self.root = root
        self.exported = set()
        self.request = {}

    def _relative(self, path):
        return os.path.relpath(path, self.root).replace(os.sep, "/")

    def _request_line(self, line_num, direction):
        if direction == "out":
            line_settings = gpiod.LineSettings(
                direction=Direction.OUTPUT,
                output_value=self.LOW
            )
        elif direction == "in":
            line_settings = gpiod.LineSettings(
                direction=Direction.INPUT,
                bias=Bias.PULL_DOWN
            )
        else:
            print(f"invalid direction for gpio{line_num}: {direction}", file=sys.stderr)
            return False

        if line_num in self.request:
            self.request.pop(line_num).release()
        self.request[line_num] = gpiod.request_lines(
            f"/dev/{self.chip_name}",
            consumer="gpio_extra",
            config={line_num: line_settings}
        )
        return True

    def _release_line(self, line_num):
        self.exported.discard(line_num)
        line_request = self.request.pop(line_num, None)
        if line_request is not None:
            line_request.release()

    def write(self, path, value):
        rel = self._relative(path)
        try:
            if rel == "export":
                self.exported.add(int(value))
                return True
            if rel == "unexport":
                self._release_line(int(value))
                return True

            match = _PIN_FILE.match(rel)
            if match is None:
                print(f"unsupported gpio path: {path}", file=sys.stderr)
                return False
            line_num = int(match.group(1))
            if line_num not in self.exported:
                print(f"gpio{line_num} is not exported", file=sys.stderr)
                return False

            if match.group(2) == "direction":
                return self._request_line(line_num, value)
            if line_num not in self.request:
                print(f"gpio{line_num} has no direction set", file=sys.stderr)
                return False
            self.request[line_num].set_value(line_num, self.HIGH if value == "1" else self.LOW)
            return True
        except ValueError as e:
            print(f"invalid gpio value {value!r}: {e}", file=sys.stderr)
            return False
        except OSError as e:
            print(f"gpiod error on {path}: {e}", file=sys.stderr)
            return False

    def read_byte(self, path):
        match = _PIN_FILE.match(self._relative(path))
        if match is None or match.group(2) != "value":
            print(f"unsupported gpio path: {path}", file=sys.stderr)
            return None
        line_num = int(match.group(1))
        if line_num not in self.request:
            print(f"gpio{line_num} has no direction set", file=sys.stderr)
            return None
        try:
            value = self.request[line_num].get_value(line_num)
        except OSError as e:
            print(f"gpiod error on {path}: {e}", file=sys.stderr)
            return None
        return "1" if value == self.HIGH else "0"
