import struct

def hub_descriptor(ports = 4, characteristics = 0x0009, removable = 0):
    """
    Wire representation of a USB 2 hub descriptor.
    """
    bc = (ports + 8) // 8
    var = removable.to_bytes(bc, "little") + b"\xff" * bc
    fixed = struct.pack("<BBBHBB", 7 + len(var), 0x29, ports, characteristics, 50, 100)
    return fixed + var

class FakeConfiguration:
    def __init__(self, value = 1, interfaces = 1):
        self.value = value
        self.interfaces = interfaces

    def getConfigurationValue(self):
        return self.value

    def getNumInterfaces(self):
        return self.interfaces

class FakeHandle:
    """
    Stand-in for usb1.USBDeviceHandle, records every control transfer.
    """
    def __init__(self, descriptor = None, configuration = 1,
                 read_error = None, write_error = None, status = b"\x01\x01\x00\x00",
                 status_error = None, events = None):
        self.descriptor = hub_descriptor() if descriptor is None else descriptor
        self.configuration = configuration
        self.read_error = read_error
        self.write_error = write_error
        self.status = status
        self.status_error = status_error
        self.reads = []
        self.writes = []
        self.closed = 0
        self.events = events

    def getConfiguration(self):
        return self.configuration

    def controlRead(self, request_type, request, value, index, length, timeout = 0):
        self.reads.append((request_type, request, value, index, length, timeout))
        if self.read_error is not None:
            raise self.read_error
        if request == 6:
            return bytearray(self.descriptor[:length])
        if self.status_error is not None:
            raise self.status_error
        return bytearray(self.status[:length])

    def controlWrite(self, request_type, request, value, index, data, timeout = 0):
        self.writes.append((request_type, request, value, index, bytes(data), timeout))
        if self.write_error is not None:
            raise self.write_error
        return len(data)

    def close(self):
        self.closed += 1
        if self.events is not None:
            self.events.append("handle")

class FakeDevice:
    """
    Stand-in for usb1.USBDevice.
    """
    def __init__(self, bus = 1, address = 2, vendor_id = 0x05e3, product_id = 0x0608,
                 device_class = 9, configurations = None, handle = None, open_error = None):
        self.bus = bus
        self.address = address
        self.vendor_id = vendor_id
        self.product_id = product_id
        self.device_class = device_class
        self.configurations = configurations or [FakeConfiguration()]
        self.handle = handle or FakeHandle()
        self.open_error = open_error
        self.opened = 0

    def getBusNumber(self):
        return self.bus

    def getDeviceAddress(self):
        return self.address

    def getVendorID(self):
        return self.vendor_id

    def getProductID(self):
        return self.product_id

    def getDeviceClass(self):
        return self.device_class

    def iterConfigurations(self):
        return iter(self.configurations)

    def open(self):
        if self.open_error is not None:
            raise self.open_error
        self.opened += 1
        return self.handle

class FakeUSBContext:
    """
    Stand-in for usb1.USBContext. An exception instance in the device
    list is raised when the scan reaches it.
    """
    def __init__(self, devices = (), open_error = None, events = None):
        self.devices = list(devices)
        self.open_error = open_error
        self.opened = 0
        self.closed = 0
        self.scanned = 0
        self.events = events

    def open(self):
        if self.open_error is not None:
            raise self.open_error
        self.opened += 1
        return self

    def close(self):
        self.closed += 1
        if self.events is not None:
            self.events.append("context")

    def getDeviceIterator(self, skip_on_error = False):
        for d in self.devices:
            if isinstance(d, Exception):
                raise d
            self.scanned += 1
            yield d
