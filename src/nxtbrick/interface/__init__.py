"""
The interface package provides the raw byte channels to a brick.
Concrete implementations include USB, a Bluetooth serial port and a TCP bridge.

An interface only moves bytes. Framing telegrams and interpreting replies is left to the
command classes that use it.
"""
