#gpio_config.py ver 0.2.0
# Fixed pin and timing constants shared by blink_led.py and switch_debounce.py

SYSFS_GPIO_ROOT = "/sys/class/gpio"

LED_PIN = 4# gpio4 -> pull-up resistor -> LED -> ground
SWITCH_PIN = 17# gpio17 sits between the switch and the pulldown resistor

BLINK_INTERVAL = 0.5# seconds between LED transitions

WINDOW_CAPACITY = 10# samples that must agree before the switch state changes
POLL_INTERVAL = 0.0# seconds between debounce cycles, 0 = paced by file I/O only

# Character device backend (Raspberry Pi 5 / kernels without sysfs GPIO)
USE_GPIOCHIP = False
GPIO_CHIP = "gpiochip0"
