import logging
from abc import abstractmethod

from nxtbrick.support.events import EventSource

logger = logging.getLogger(__name__)


class InterfaceError(Exception):
    """ Indicates an error condition with an interface. """


class InvalidInterfaceError(InterfaceError):
    """ Indicates the requested kind of interface is not known. """


class InterfaceNotConnectedError(InterfaceError):
    """ Indicates an interface is in the disconnected state when a connection is required. """


class InterfaceNotAvailableError(InterfaceError):
    """ Indicates the endpoint of the interface is not available. """


class InterfaceEvent:
    """ base class for interface events. """
    def __init__(self, interface):
        self.interface = interface


class InterfaceConnectedEvent(InterfaceEvent):
    """ The interface was connected. """


class InterfaceDisconnectedEvent(InterfaceEvent):
    """ The interface was disconnected. """


class Interface:
    """ An interface is a two-way byte channel to a brick. """

    @property
    @abstractmethod
    def endpoint(self):
        """ the endpoint that this interface reaches out to """
        raise NotImplementedError

    @property
    @abstractmethod
    def connected(self) -> bool:
        """
        Determines if this interface is connected to the brick.
        :rtype: bool
        """
        raise NotImplementedError

    @property
    @abstractmethod
    def available(self) -> bool:
        """ Determines if the endpoint for this interface is available to be connected to.
        :rtype: bool
        """
        raise NotImplementedError

    @abstractmethod
    def connect(self):
        """
        Connects this interface to the brick.
        If the interface is already connected, this method returns silently.
        Raises InterfaceError if the connection cannot be established.
        """
        raise NotImplementedError

    @abstractmethod
    def disconnect(self):
        raise NotImplementedError

    @abstractmethod
    def write(self, data):
        """ writes the bytes in data to the brick. """
        raise NotImplementedError

    @abstractmethod
    def read(self, size):
        """ reads up to size bytes from the brick. """
        raise NotImplementedError


class AbstractInterface(Interface):
    """ Manages the connection cycle to an endpoint.
        Subclasses provide the template methods that open, close and use the underlying handle.
    """

    def __init__(self):
        self.events = EventSource()
        self._handle = None

    @property
    def available(self):
        return False if self.connected else self._try_available()

    @property
    def connected(self):
        return self._handle is not None and self._connected()

    def connect(self):
        if self.connected:
            return

        if not self.available:
            raise InterfaceNotAvailableError("%s is not available" % (self.endpoint,))

        try:
            self._handle = self._connect()
            self.events.fire(InterfaceConnectedEvent(self))
        finally:
            if self._handle is None:
                self.disconnect()

    def disconnect(self):
        if self._handle is None:
            return
        try:
            self._disconnect()
        finally:
            self._handle = None
        self.events.fire(InterfaceDisconnectedEvent(self))

    def write(self, data):
        self.check_connected()
        return self._write(bytes(data))

    def read(self, size):
        self.check_connected()
        return self._read(size)

    def check_connected(self):
        if not self.connected:
            raise InterfaceNotConnectedError("%s is not connected" % (self.endpoint,))

    @abstractmethod
    def _connect(self):
        """ Template method for subclasses to perform the connection.
            Returns the handle used for I/O. If connection is not possible, an exception should be thrown
        """
        raise NotImplementedError

    @abstractmethod
    def _try_available(self):
        """ Determine if this interface's endpoint is available. This method is only called when
            the interface is disconnected.
        :return: True if the endpoint is available or False otherwise.
        :rtype: bool
        """
        raise NotImplementedError

    @abstractmethod
    def _disconnect(self):
        """ releases the handle. The base class forgets the handle after this method has been called. """
        raise NotImplementedError

    def _connected(self):
        return True

    @abstractmethod
    def _write(self, data: bytes):
        raise NotImplementedError

    @abstractmethod
    def _read(self, size) -> bytes:
        raise NotImplementedError
