"""
Implements an interface over the brick's USB port.
"""
import logging

import usb.core
import usb.util

from nxtbrick.interface.base import AbstractInterface, InterfaceError

logger = logging.getLogger(__name__)

# raised when the bus cannot be used, NoBackendError when libusb is missing
USB_ERRORS = (usb.core.USBError, usb.core.NoBackendError)

# configurable defaults, see nxtbrick.default.cfg
vendor_id = 0x0694      # LEGO
product_id = 0x0002     # NXT
out_endpoint = 0x01
in_endpoint = 0x82
timeout = 1000          # milliseconds


def find_brick(vendor, product):
    """
    Returns the first USB device with the given ids, or None.
    """
    return usb.core.find(idVendor=vendor, idProduct=product)


class UsbInterface(AbstractInterface):
    """
    An interface that exchanges bytes with the brick via USB bulk transfers.
    The device is located when connecting, so constructing the interface does not touch the bus.
    """

    def __init__(self, vendor_id=None, product_id=None, timeout=None):
        super().__init__()
        module = globals()
        self.vendor_id = vendor_id if vendor_id is not None else module['vendor_id']
        self.product_id = product_id if product_id is not None else module['product_id']
        self.timeout = timeout if timeout is not None else module['timeout']
        self.out_endpoint = out_endpoint
        self.in_endpoint = in_endpoint

    @property
    def endpoint(self):
        return "usb %04x:%04x" % (self.vendor_id, self.product_id)

    def _try_available(self):
        try:
            return find_brick(self.vendor_id, self.product_id) is not None
        except USB_ERRORS as e:
            logger.debug("unable to enumerate usb devices: %s" % e)
            return False

    def _connect(self):
        try:
            device = find_brick(self.vendor_id, self.product_id)
            if device is None:
                raise InterfaceError("no device found on %s" % self.endpoint)
            device.set_configuration()
            logger.info("opened %s" % self.endpoint)
            return device
        except USB_ERRORS as e:
            logger.warning("error opening %s: %s" % (self.endpoint, e))
            raise InterfaceError("error opening %s" % self.endpoint) from e

    def _disconnect(self):
        usb.util.dispose_resources(self._handle)
        logger.info("closed %s" % self.endpoint)

    def _write(self, data):
        return self._handle.write(self.out_endpoint, data, self.timeout)

    def _read(self, size):
        return bytes(self._handle.read(self.in_endpoint, size, self.timeout))
