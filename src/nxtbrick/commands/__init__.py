"""
Encoding helpers shared by the classes that build telegrams for the brick.

The concrete command sets (motor output, sensor input, system commands) live with the
device handlers. This package only supplies the byte values for command types and ports.
"""
