"""
The brick owns the interface to a single NXT and keeps track of the device handlers
attached to its ports.
"""
import logging
from enum import Enum
from types import MappingProxyType

from nxtbrick.commands.base import port_as_byte
from nxtbrick.interface.registry import create_interface
from nxtbrick.support.events import EventSource

logger = logging.getLogger(__name__)

# the ports a handler can be attached to, output ports first
PORT_SLOTS = ('a', 'b', 'c', 'one', 'two', 'three', 'four')


class BrickError(Exception):
    """ Indicates the brick's ports were used incorrectly. """


class InvalidIdentifierError(BrickError):
    """ Indicates an identifier would hide an existing attribute of the brick. """


class PortTakenError(BrickError):
    """ Indicates a handler is already attached to the port. """


class PortEvent:
    """ base class for port events. """
    def __init__(self, brick, port, identifier):
        self.brick = brick
        self.port = port
        self.identifier = identifier


class PortAttachedEvent(PortEvent):
    """ A handler was attached to a port. """


class PortDetachedEvent(PortEvent):
    """ An identifier was removed from the brick. """


def canonical_name(identifier) -> str:
    """
    Converts an identifier to the name it is registered under.
    A non-empty string is its own name, an Enum member contributes its name.

    >>> canonical_name('touch')
    'touch'
    :raises TypeError: for any other value
    """
    if isinstance(identifier, Enum):
        identifier = identifier.name
    if isinstance(identifier, str) and identifier:
        return identifier
    raise TypeError('Expected identifier to be convertible to a name')


def _port_property(port):
    def get(self):
        return self._ports[port]
    return property(get, doc="the handler attached to port %s, or None" % port)


class Brick:
    """
    A brick reached through one interface, with handlers for the devices plugged into its ports.

    Handlers are attached to a port under an identifier of the caller's choosing and retrieved
    by that identifier afterwards:

        with Brick('usb') as nxt:
            nxt.attach('one', 'touch', TouchSensor)
            nxt['touch'].pressed()
    """

    a = _port_property('a')
    b = _port_property('b')
    c = _port_property('c')
    one = _port_property('one')
    two = _port_property('two')
    three = _port_property('three')
    four = _port_property('four')

    def __init__(self, interface_kind, setup=None, **options):
        """
        :param interface_kind: the kind of interface, e.g. 'usb', 'bluetooth' or 'tcp'
        :param setup: optional callable invoked with the brick once it is constructed
        :param options: passed to the interface constructor
        :raises InvalidInterfaceError: when the kind of interface is unknown
        """
        self._interface = create_interface(interface_kind, **options)
        self._ports = dict.fromkeys(PORT_SLOTS)
        self._port_identifiers = {}
        self.events = EventSource()
        if setup is not None:
            setup(self)

    @property
    def interface(self):
        return self._interface

    @interface.setter
    def interface(self, interface):
        self._interface = interface

    @property
    def port_identifiers(self):
        """ a read-only view of the identifier to port mapping """
        return MappingProxyType(self._port_identifiers)

    def connect(self):
        return self._interface.connect()

    def disconnect(self):
        return self._interface.disconnect()

    def attach(self, port, identifier, klass):
        """
        Attaches a new handler to a port.
        The handler is constructed as klass(port_byte, interface) and is retrieved later via the identifier.
        Nothing is sent to the brick.
        Listeners to events are called once the handler is attached. An exception raised by a listener
        propagates from attach, and the handler stays attached.
        :return: the handler
        :raises TypeError: when the port is not one of PORT_SLOTS, the identifier isn't a name,
            or klass isn't a class.
        :raises InvalidIdentifierError: when the identifier names an attribute of the brick or is in use.
        :raises PortTakenError: when a handler is already attached to the port.
        """
        if not isinstance(port, str) or port not in PORT_SLOTS:
            raise TypeError('Expected port to be one of: ' + ', '.join(PORT_SLOTS))
        name = canonical_name(identifier)
        if not isinstance(klass, type):
            raise TypeError('Expected klass to be a class')
        if name in self._port_identifiers or hasattr(self, name):
            raise InvalidIdentifierError(
                "Cannot use identifier %s, a method on %s is already using it." % (name, type(self).__name__))
        if self._ports[port] is not None:
            raise PortTakenError("Port %s is already set, call detach first" % port)

        handler = klass(port_as_byte(port), self._interface)
        self._ports[port] = handler
        self._port_identifiers[name] = port
        logger.debug("attached %s to port %s as %s" % (klass.__name__, port, name))
        self.events.fire(PortAttachedEvent(self, port, name))
        return handler

    def detach(self, identifier):
        """
        Removes an identifier.
        The handler stays attached to its port, so the port cannot be attached to again.
        :return: True if the identifier was removed, False if it was not known.
        """
        name = canonical_name(identifier)
        if name not in self._port_identifiers:
            return False
        port = self._port_identifiers.pop(name)
        logger.debug("detached %s from port %s" % (name, port))
        self.events.fire(PortDetachedEvent(self, port, name))
        return True

    def handler(self, identifier):
        """
        Retrieves the handler attached under an identifier.
        :raises KeyError: when the identifier is not known.
        """
        name = canonical_name(identifier)
        try:
            port = self._port_identifiers[name]
        except KeyError:
            raise KeyError("No handler attached as %s" % name) from None
        return self._ports[port]

    def __getitem__(self, identifier):
        return self.handler(identifier)

    def __contains__(self, identifier):
        try:
            return canonical_name(identifier) in self._port_identifiers
        except TypeError:
            return False

    def __enter__(self):
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.disconnect()
