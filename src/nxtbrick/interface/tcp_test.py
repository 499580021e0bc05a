import socket
import unittest
from unittest.mock import patch

from hamcrest import assert_that, is_, calling, raises

from nxtbrick.interface.base import InterfaceError
from nxtbrick.interface.tcp import TcpInterface


@patch('nxtbrick.interface.tcp.socket.socket')
class TcpInterfaceTest(unittest.TestCase):

    def test_endpoint(self, socket_class):
        sut = TcpInterface('bridge.local', 2000)
        assert_that(sut.endpoint, is_(('bridge.local', 2000)))
        socket_class.assert_not_called()

    def test_available_needs_host_and_port(self, socket_class):
        assert_that(TcpInterface('bridge.local', 2000).available, is_(True))
        assert_that(TcpInterface(port=2000).available, is_(False))
        assert_that(TcpInterface('bridge.local').available, is_(False))

    def test_connect(self, socket_class):
        sock = socket_class.return_value
        sock.fileno.return_value = 3
        sut = TcpInterface('bridge.local', 2000, timeout=1.5)
        sut.connect()
        sock.settimeout.assert_any_call(1.5)
        sock.connect.assert_called_once_with(('bridge.local', 2000))
        assert_that(sut.connected, is_(True))

    def test_connect_error(self, socket_class):
        sock = socket_class.return_value
        sock.connect.side_effect = socket.error("refused")
        sut = TcpInterface('bridge.local', 2000)
        assert_that(calling(sut.connect), raises(InterfaceError, "error opening socket to bridge.local:2000"))
        sock.close.assert_called_once_with()
        assert_that(sut.connected, is_(False))

    def test_disconnect_swallows_shutdown_error(self, socket_class):
        sock = socket_class.return_value
        sock.fileno.return_value = 3
        sock.shutdown.side_effect = socket.error("not connected")
        sut = TcpInterface('bridge.local', 2000)
        sut.connect()
        sut.disconnect()
        sock.close.assert_called_once_with()
        assert_that(sut.connected, is_(False))

    def test_closed_socket_is_not_connected(self, socket_class):
        sock = socket_class.return_value
        sock.fileno.return_value = -1
        sut = TcpInterface('bridge.local', 2000)
        sut._handle = sock
        assert_that(sut.connected, is_(False))

    def test_write_read(self, socket_class):
        sock = socket_class.return_value
        sock.fileno.return_value = 3
        sock.recv.return_value = b'\x02\x0b\x00'
        sut = TcpInterface('bridge.local', 2000)
        sut.connect()
        assert_that(sut.write(b'\x00\x0b'), is_(2))
        sock.sendall.assert_called_once_with(b'\x00\x0b')
        assert_that(sut.read(3), is_(b'\x02\x0b\x00'))
        sock.recv.assert_called_once_with(3)
