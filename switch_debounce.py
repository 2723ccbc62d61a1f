#!/usr/bin/env python3
# -*- coding: utf-8 -*-
'''
switch_debounce ver 0.2.0 - LED on while the switch is pressed, off when released
Setup: Raspberry Pi - gpio4 runs the LED, gpio17 sits between the switch and
the pulldown resistor to ground
Functions:
1) Export gpio17 as input and gpio4 as output
2) Sample gpio17 WINDOW_CAPACITY times per cycle (software debounce)
3) Unanimous window -> pressed / released, mixed window -> leave the LED alone
'''

import sys
import threading

from gpio_config import LED_PIN, POLL_INTERVAL, SWITCH_PIN, SYSFS_GPIO_ROOT, WINDOW_CAPACITY
from gpio_files import init_pin, open_pins, release_pin, value_path

PRESSED = "PRESSED"
RELEASED = "RELEASED"


class DebounceWindow:
    def __init__(self, capacity=WINDOW_CAPACITY):
        self.values = [0] * capacity# most recent samples read from the switch value file
        self.high_status = 0# number of high values in the window
        self.low_status = 0# number of low values in the window

    @property
    def capacity(self):
        return len(self.values)


def get_debounce_vals(window, pins, switch_value_path):
    """Fill every slot of the window with a fresh sample of the switch.

    Each sample opens, reads one byte from and closes the value file.
    A failed read abandons the cycle and returns False; the partial
    window is not counted.
    """
    for i in range(window.capacity):
        status = pins.read_byte(switch_value_path)
        if status is None:
            return False
        window.values[i] = ord(status[0]) - ord("0")# '0' -> 0, '1' -> 1

    count_window(window)
    return True


def count_window(window):
    # anything that is not exactly 1 counts as low, including junk bytes
    window.high_status = 0
    window.low_status = 0
    for sample in window.values:
        if sample == 1:
            window.high_status += 1
        else:
            window.low_status += 1
    return window.high_status, window.low_status


def classify(window):
    if window.high_status == window.capacity:
        return PRESSED
    if window.low_status == window.capacity:
        return RELEASED
    return None


def switch_led(window, pins, led_value_path):
    """Report the switch state and drive the LED to match it.

    Only unanimous windows produce output; a bouncing switch leaves the
    LED at whatever it was last set to.
    """
    state = classify(window)
    if state == PRESSED:
        print("Switch pressed!")
        if not pins.write(led_value_path, "1"):
            print(f"could not write to gpio{LED_PIN} value file", file=sys.stderr)
    elif state == RELEASED:
        print("Switch released!")
        if not pins.write(led_value_path, "0"):
            print(f"could not write to gpio{LED_PIN} value file", file=sys.stderr)
    return state


class SwitchReader:
    def __init__(self, pins, switch_value_path, led_value_path, window=None,
                 poll_interval=POLL_INTERVAL, stop_event=None):
        self.pins = pins
        self.switch_value_path = switch_value_path
        self.led_value_path = led_value_path
        self.window = window if window is not None else DebounceWindow()
        self.poll_interval = poll_interval
        self.stop_event = stop_event if stop_event is not None else threading.Event()

    def run_cycle(self):
        if not get_debounce_vals(self.window, self.pins, self.switch_value_path):
            print("could not read values", file=sys.stderr)
            return None
        return switch_led(self.window, self.pins, self.led_value_path)

    def run(self):
        while not self.stop_event.is_set():
            self.run_cycle()
            if self.poll_interval and self.stop_event.wait(self.poll_interval):
                break

    def stop(self):
        self.stop_event.set()


def init_gpio(pins, root=SYSFS_GPIO_ROOT):
    # switch input first, then the LED output
    if not init_pin(pins, SWITCH_PIN, "in", root):
        return False
    if not init_pin(pins, LED_PIN, "out", root):
        return False
    return True


def main(pins=None, root=SYSFS_GPIO_ROOT):
    if pins is None:
        pins = open_pins(root)

    if not init_gpio(pins, root):
        print(f"could not initialize gpio{SWITCH_PIN}", file=sys.stderr)
        return 1

    led_path = value_path(LED_PIN, root)
    reader = SwitchReader(pins, value_path(SWITCH_PIN, root), led_path)
    print(f"Watching switch on gpio{SWITCH_PIN}, LED on gpio{LED_PIN} (Ctrl-C to stop)")
    try:
        reader.run()
    except KeyboardInterrupt:
        print("\nInterrupted by user. Turning LED off.")
    finally:
        pins.write(led_path, "0")
        release_pin(pins, SWITCH_PIN, root)
        release_pin(pins, LED_PIN, root)
    return 0


if __name__ == "__main__":
    sys.exit(main())
