import logging
import usb1
from . import exception
from .constant import *

logger = logging.getLogger(__name__)

_transfer_errors = [
    (usb1.USBErrorTimeout, exception.TransferTimeout),
    (usb1.USBErrorPipe, exception.TransferStalled),
    (usb1.USBErrorOverflow, exception.TransferOverflow),
    (usb1.USBErrorNoDevice, exception.DeviceError),
]

def _transfer_error(error):
    """
    Translate a libusb1 error raised by a transfer.
    """
    for usb_error, error_class in _transfer_errors:
        if isinstance(error, usb_error):
            return error_class(str(error))
    return exception.TransferError(str(error))

class Device:
    """
    Opened device handle. This object should be spawned by descriptor.Device.open().
    """

    def __init__(self, context, descriptor, handle):
        self.context = context
        self.descriptor = descriptor
        self.handle = handle

    def close(self):
        """
        Release device handle. Only the first call has an effect.
        """
        if self.handle is None:
            return
        handle, self.handle = self.handle, None
        handle.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    @property
    def configuration(self):
        """
        Current configuration value.
        """
        return self.handle.getConfiguration()

    @property
    def active_configuration(self):
        """
        Configuration descriptor for the active configuration.
        Raise DescriptorError if it cannot be retrieved.
        """
        try:
            return self.descriptor.configuration_get(self.configuration)
        except usb1.USBError as e:
            raise exception.DescriptorError("cannot read active configuration") from e
        except KeyError:
            raise exception.DescriptorError("device is not configured")

    def control(self, type, recipient, request, value, index, data_or_length,
                timeout = CONTROL_TIMEOUT):
        """
        Raw control IN/OUT request targetted on device. Blocks until
        completion or timeout (in ms).

        :param data_or_length: bytes to send (OUT), or length to read (IN)
        :returns: data read for IN requests, None for OUT requests
        """
        if isinstance(data_or_length, int):
            direction = RequestTypeDirection.DeviceToHost
        else:
            direction = RequestTypeDirection.HostToDevice
        bmRequestType = RequestType.pack(direction, type, recipient)

        logger.debug("control %02x %02x %04x %04x %r",
                     bmRequestType, request, value, index, data_or_length)
        try:
            if direction == RequestTypeDirection.DeviceToHost:
                return bytes(self.handle.controlRead(bmRequestType, request, value,
                                                     index, data_or_length, timeout))
            self.handle.controlWrite(bmRequestType, request, value,
                                     index, data_or_length, timeout)
        except usb1.USBError as e:
            raise _transfer_error(e) from e

    def class_control(self, request, value, index, data_or_length):
        """
        Class-specific control IN/OUT request targetted on device.
        """
        return self.control(RequestTypeType.Class,
                            RequestTypeRecipient.Device,
                            request, value, index, data_or_length)
