import logging
import socket

from nxtbrick.interface.base import AbstractInterface, InterfaceError

logger = logging.getLogger(__name__)

# configurable defaults, see nxtbrick.default.cfg
host = None
port = None
timeout = 5.0           # seconds, applies to connecting only


class TcpInterface(AbstractInterface):
    """
    An interface that exchanges bytes with a brick made reachable over TCP,
    such as a serial port shared by a network bridge.
    """

    def __init__(self, host=None, port=None, timeout=None):
        super().__init__()
        module = globals()
        self.host = host if host is not None else module['host']
        self.port = port if port is not None else module['port']
        self.timeout = timeout if timeout is not None else module['timeout']

    @property
    def endpoint(self):
        return self.host, self.port

    def _try_available(self):
        return self.host is not None and self.port is not None

    def _connected(self):
        return self._handle.fileno() >= 0

    def _connect(self):
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            sock.settimeout(self.timeout)
            sock.connect(self.endpoint)
            sock.settimeout(None)
            logger.info("opened socket to %s:%s" % self.endpoint)
            return sock
        except socket.error as e:
            sock.close()
            logger.warning("error opening socket to %s:%s: %s" % (self.host, self.port, e))
            raise InterfaceError("error opening socket to %s:%s" % self.endpoint) from e

    def _disconnect(self):
        sock = self._handle
        try:
            sock.shutdown(socket.SHUT_RDWR)
        except socket.error:
            pass    # the peer may have closed the socket
        finally:
            sock.close()
        logger.info("closed socket to %s:%s" % self.endpoint)

    def _write(self, data):
        self._handle.sendall(data)
        return len(data)

    def _read(self, size):
        return self._handle.recv(size)
