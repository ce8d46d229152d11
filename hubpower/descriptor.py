import usb1
from .exception import OpenError

class Device:
    """
    Device descriptor, retrieved from main context.
    """

    def __init__(self, context, device):
        self.context = context
        self.device = device

    def __str__(self):
        return "Bus %03d Device %03d: ID %04x:%04x" % (
            self.bus, self.address, self.vendor_id, self.product_id)

    @property
    def configurations(self):
        """
        Iterator over configuration descriptors
        """
        for c in self.device.iterConfigurations():
            yield Configuration(self, c)

    def configuration_get(self, number):
        """
        Retrieve configuration descriptor by its bConfigurationValue.
        Raise KeyError if device has no such configuration.
        """
        for c in self.configurations:
            if c.number == number:
                return c
        raise KeyError(number)

    @property
    def bus(self):
        """
        Hosting bus number
        """
        return self.device.getBusNumber()

    @property
    def address(self):
        """
        Device Address
        """
        return self.device.getDeviceAddress()

    @property
    def device_class(self):
        """
        Device class code (bDeviceClass)
        """
        return self.device.getDeviceClass()

    @property
    def vendor_id(self):
        """
        VendorID from descriptor
        """
        return self.device.getVendorID()

    @property
    def product_id(self):
        """
        ProductID from descriptor
        """
        return self.device.getProductID()

    def open(self):
        """
        Open device, get a Device handle on it.
        Raise OpenError if the device cannot be opened.
        """
        from . import handle
        try:
            h = self.device.open()
        except usb1.USBError as e:
            raise OpenError("could not open device") from e
        return handle.Device(self.context, self, h)

class Configuration:
    """
    Configuration descriptor, should be spawned by Device.
    """
    def __init__(self, device, configuration):
        self.device = device
        self.configuration = configuration

    @property
    def number(self):
        """
        Configuration number
        """
        return self.configuration.getConfigurationValue()

    def __len__(self):
        """
        Count of interfaces in configuration
        """
        return self.configuration.getNumInterfaces()
