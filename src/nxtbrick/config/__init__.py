"""
A configuration helper built on top of ConfigObj that allows configuration files to be
layered - neutral / os-specific / user, with a schema to validate the types of the config data.

Used to apply default settings, such as USB ids and serial port names, to the interface modules.
"""
