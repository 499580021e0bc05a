"""
Resolves the kind of interface requested for a brick to the class implementing it.
"""
import logging
import sys
from enum import Enum
from types import MappingProxyType

from nxtbrick.config.config import configure_module
from nxtbrick.interface.base import InvalidInterfaceError
from nxtbrick.interface.serial_port import SerialPortInterface
from nxtbrick.interface.tcp import TcpInterface
from nxtbrick.interface.usb import UsbInterface

logger = logging.getLogger(__name__)

# the base name of the configuration files that hold the interface defaults
config_name = 'nxtbrick'

# names of the interface modules the configuration has been applied to
_configured = set()

INTERFACES = MappingProxyType({
    'usb': UsbInterface,
    'serial': SerialPortInterface,
    'bluetooth': SerialPortInterface,
    'tcp': TcpInterface,
})


def interface_class(kind):
    """
    Looks up the interface class for a kind. The kind is a name such as 'usb' (any case)
    or an Enum member with such a name.
    :raises InvalidInterfaceError: when the kind is not known.
    """
    name = kind.name if isinstance(kind, Enum) else kind
    if isinstance(name, str):
        cls = INTERFACES.get(name.lower())
        if cls is not None:
            return cls
    raise InvalidInterfaceError("Unknown interface %r, expected one of: %s" % (kind, ', '.join(INTERFACES)))


def configure_interface(cls):
    """ applies the configured defaults to the module defining the interface class. """
    configure_module(sys.modules[cls.__module__], config_name)


def create_interface(kind, configure=True, **options):
    """
    Creates an unconnected interface of the given kind.
    :param configure: when True, the configured defaults are applied to the interface module the first time
        it is used. Values assigned to the module afterwards are kept.
    :param options: passed to the interface constructor, overriding the configured defaults.
    """
    cls = interface_class(kind)
    if configure and cls.__module__ not in _configured:
        configure_interface(cls)
        _configured.add(cls.__module__)
    logger.debug("creating %s interface %s" % (kind, cls.__name__))
    return cls(**options)
