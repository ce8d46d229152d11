import logging
import usb1
from . import descriptor
from .constant import ClassCode
from .exception import ContextError, EnumerationError

__all__ = ["Context"]

logger = logging.getLogger(__name__)

class Context:
    """
    HubPower main context, owns the libusb1 context for the whole run.
    """
    def __init__(self, context = None):
        """
        :param context: usb1.USBContext-like object, a fresh
          usb1.USBContext is created if omitted
        """
        self.context = context
        self.opened = False

    def open(self):
        """
        Acquire the underlying USB subsystem handle.
        Raise ContextError if libusb cannot be initialized.
        """
        try:
            if self.context is None:
                self.context = usb1.USBContext()
            self.context.open()
        except usb1.USBError as e:
            raise ContextError("libusb init failed") from e
        self.opened = True
        return self

    def close(self):
        """
        Release the USB subsystem handle. Only the first call has an effect.
        """
        if not self.opened:
            return
        self.opened = False
        self.context.close()

    def __enter__(self):
        return self.open()

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def __iter__(self):
        """
        Iterate over a snapshot of available devices, yields
        descriptor.Device objects.

        Scanning stops silently on the first device whose descriptor
        cannot be read. Failing to allocate the snapshot raises
        EnumerationError.
        """
        devices = self.context.getDeviceIterator(skip_on_error = False)
        while True:
            try:
                d = next(devices)
            except StopIteration:
                return
            except usb1.USBErrorNoMem as e:
                raise EnumerationError("cannot allocate device list") from e
            except usb1.USBError as e:
                logger.debug("device scan stopped: %s", e)
                return
            yield descriptor.Device(self, d)

    def device_filter(self, **criteria):
        """
        Iterate through device descriptors matching all the criteria.
        Criteria are matched against device descriptor attributes.
        """
        for d in self:
            if all(criteria[k] == getattr(d, k) for k in criteria.keys()):
                yield d

    def device_get_any(self, **criteria):
        """
        Retrieve first device descriptor matching all the criteria.
        Criteria are matched against device descriptor attributes.
        Raise KeyError if no device matches.
        """
        for d in self.device_filter(**criteria):
            return d
        raise KeyError(criteria)

    def hubs(self):
        """
        Iterate over devices whose class is hub.
        """
        return self.device_filter(device_class = ClassCode.Hub)

    def hub_get(self, bus = None, address = None, vendor_id = None, product_id = None):
        """
        Retrieve first hub matching the given identifiers, in enumeration
        order. None or 0 leaves an identifier unconstrained.
        Raise KeyError if no hub matches.
        """
        criteria = dict(bus = bus, address = address,
                        vendor_id = vendor_id, product_id = product_id)
        criteria = {k: v for k, v in criteria.items() if v}
        logger.debug("looking for hub matching %r", criteria)
        return self.device_get_any(device_class = ClassCode.Hub, **criteria)
