#!/usr/bin/env python3
# -*- coding: utf-8 -*-
'''
blink_led ver 0.2.0 - turns gpio4 high and low forever
Setup: Raspberry Pi - gpio4 drives the pull-up resistor -> LED -> ground
'''

import sys
import threading

from gpio_config import BLINK_INTERVAL, LED_PIN, SYSFS_GPIO_ROOT
from gpio_files import init_pin, open_pins, release_pin, value_path

OUTPUT_LOW = "OUTPUT_LOW"
OUTPUT_HIGH = "OUTPUT_HIGH"


class BlinkLoop:
    def __init__(self, pins, led_value_path, interval=BLINK_INTERVAL, stop_event=None):
        self.pins = pins
        self.led_value_path = led_value_path
        self.interval = interval
        self.stop_event = stop_event if stop_event is not None else threading.Event()
        self.state = OUTPUT_LOW

    def write_state(self):
        value = "1" if self.state == OUTPUT_HIGH else "0"
        # a missed write is not fatal, the next transition writes again
        if not self.pins.write(self.led_value_path, value):
            print(f"could not write {value} to {self.led_value_path}", file=sys.stderr)
            return False
        return True

    def toggle(self):
        self.state = OUTPUT_HIGH if self.state == OUTPUT_LOW else OUTPUT_LOW
        return self.state

    def run(self):
        while not self.stop_event.is_set():
            self.write_state()
            if self.stop_event.wait(self.interval):
                break
            self.toggle()

    def stop(self):
        self.stop_event.set()


def main(pins=None, root=SYSFS_GPIO_ROOT):
    if pins is None:
        pins = open_pins(root)

    if not init_pin(pins, LED_PIN, "out", root):
        return 1

    led_path = value_path(LED_PIN, root)
    blinker = BlinkLoop(pins, led_path)
    print(f"Blinking gpio{LED_PIN} every {blinker.interval}s (Ctrl-C to stop)")
    try:
        blinker.run()
    except KeyboardInterrupt:
        print("\nInterrupted by user. Turning LED off.")
    finally:
        pins.write(led_path, "0")
        release_pin(pins, LED_PIN, root)
    return 0


if __name__ == "__main__":
    sys.exit(main())
