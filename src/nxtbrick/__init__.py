"""
Port and interface management for LEGO NXT bricks.

- Interface: a raw byte channel to a brick - USB, a Bluetooth serial port or a TCP bridge.
  Interfaces are selected by kind ('usb', 'bluetooth', 'serial', 'tcp') and pick up their
  defaults from the layered nxtbrick.cfg configuration.
- Brick: owns one interface and the handlers for the devices plugged into its ports.
  A handler is attached to a port under an identifier and retrieved by that identifier.
  Each port holds at most one handler.
- Commands: the byte values of the command types and ports, for the classes that build telegrams.

Everything runs on the caller's thread. The brick is half-duplex, so callers sharing a brick
between threads must serialize access themselves.
"""

from nxtbrick.brick import Brick, BrickError, InvalidIdentifierError, PortTakenError
from nxtbrick.interface.base import InterfaceError, InvalidInterfaceError
