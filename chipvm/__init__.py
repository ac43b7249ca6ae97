"""A CHIP-8 virtual machine with a pygame window and keyboard front end."""

__version__ = "1.0.0"