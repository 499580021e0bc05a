"""
Implements an interface over a serial port, which is how a Bluetooth link to the brick
shows up once it is paired (rfcomm on linux, a tty.NXT-DevB style device on osx, a COM port on windows).
"""
import logging
import re

import serial
from serial.tools import list_ports

from nxtbrick.interface.base import AbstractInterface, InterfaceError

logger = logging.getLogger(__name__)

# configurable defaults, see nxtbrick.default.cfg
port = 'auto'
baudrate = 115200
timeout = 1.0           # seconds

# matched against the device name and the description of each port
nxt_port_patterns = (
    r".*rfcomm.*",
    r".*NXT.*",
)


def serial_port_info():
    """
    :return: a tuple of ListPortInfo for the serial ports present
    """
    return tuple(list_ports.comports())


def serial_ports():
    """
    Returns a generator for all available serial port device names.
    """
    for info in serial_port_info():
        yield info[0]


def matches(text, regex):
    """
    >>> bool(matches("/dev/tty.NXT-DevB", ".*nxt.*"))
    True
    >>> bool(matches("/dev/ttyS0", ".*nxt.*"))
    False
    """
    return re.match(regex, text or '', flags=re.IGNORECASE)


def is_nxt_port(info):
    """
    >>> is_nxt_port(("/dev/rfcomm0", "rfcomm0", "n/a"))
    True
    """
    device, description = info[0], info[1]
    return any(matches(device, p) or matches(description, p) for p in nxt_port_patterns)


def detect_port(name):
    """
    Resolves the port to use. If the name is not 'auto', it is returned as is.
    Otherwise the first port that looks like a brick is returned.
    """
    if name == 'auto':
        all_ports = serial_port_info()
        ports = [p for p in all_ports if is_nxt_port(p)]
        if not ports:
            raise InterfaceError("Could not find a brick in available ports. %s" % repr(all_ports))
        return ports[0][0]
    return name


class SerialPortInterface(AbstractInterface):
    """
    An interface that exchanges bytes with the brick via a serial port.
    """

    def __init__(self, port=None, baudrate=None, timeout=None):
        """
        :param port: the serial port device name, or 'auto' to pick the first port that looks like a brick.
        """
        super().__init__()
        module = globals()
        self.port = port if port is not None else module['port']
        self._serial = serial.Serial()
        self._serial.baudrate = baudrate if baudrate is not None else module['baudrate']
        self._serial.timeout = timeout if timeout is not None else module['timeout']

    @property
    def endpoint(self):
        return self.port

    @property
    def serial(self):
        return self._serial

    def _try_available(self):
        try:
            return self.port == 'auto' or self.port in serial_ports()
        except serial.SerialException:
            return False

    def _connected(self):
        return self._serial.is_open

    def _connect(self):
        s = self._serial
        try:
            s.port = detect_port(self.port)
            s.open()
            logger.info("opened serial port %s" % s.port)
            return s
        except serial.SerialException as e:
            logger.warning("error opening serial port %s: %s" % (s.port, e))
            raise InterfaceError("error opening serial port %s" % s.port) from e

    def _disconnect(self):
        self._serial.close()
        logger.info("closed serial port %s" % self._serial.port)

    def _write(self, data):
        return self._serial.write(data)

    def _read(self, size):
        return self._serial.read(size)
