"""
The command type and port byte tables used when composing telegrams.

>>> port_as_byte('three')
2
>>> command_type_as_byte('system')
1
"""
from types import MappingProxyType

COMMAND_TYPES = MappingProxyType({
    'direct': 0x00,
    'system': 0x01,
    'reply': 0x02,
})

# the brick has 3 output (motor) ports and 4 input (sensor) ports.
# output and input ports share byte values; 'four' has no output alias.
PORTS = MappingProxyType({
    'a': 0x00,
    'b': 0x01,
    'c': 0x02,
    'one': 0x00,
    'two': 0x01,
    'three': 0x02,
    'four': 0x03,
    'all': 0xFF,
})


def _lookup(table, kind, key):
    try:
        return table[key]
    except (KeyError, TypeError) as e:
        raise KeyError("Unknown %s %r, expected one of: %s" % (kind, key, ', '.join(table))) from e


def command_type_as_byte(command_type):
    """
    Retrieves the protocol byte for a command type.
    :param command_type: one of 'direct', 'system' or 'reply'
    :raises KeyError: for any other value
    """
    return _lookup(COMMAND_TYPES, 'command type', command_type)


def port_as_byte(port):
    """
    Retrieves the protocol byte for a port name.
    :param port: one of the output ports 'a', 'b', 'c', the input ports 'one' to 'four',
        or 'all' to address every output port.
    :raises KeyError: for any other value
    """
    return _lookup(PORTS, 'port', port)


class CommandBase:
    """
    Mixin for telegram builders. Provides the byte encoding of command types and ports.
    """

    def command_type_as_byte(self, command_type):
        return command_type_as_byte(command_type)

    def port_as_byte(self, port):
        return port_as_byte(port)
