import enum

CONTROL_TIMEOUT = 1000

class RequestTypeDirection(enum.IntEnum):
    HostToDevice = 0
    DeviceToHost = 1

class RequestTypeType(enum.IntEnum):
    Standard = 0
    Class = 1
    Vendor = 2
    Reserved = 3

class RequestTypeRecipient(enum.IntEnum):
    Device = 0
    Interface = 1
    Endpoint = 2
    Other = 3

class RequestType:
    @staticmethod
    def pack(direction, type, recipient):
        return (int(direction) << 7) | (int(type) << 5) | int(recipient)

class ClassCode(enum.IntEnum):
    PerInterface = 0x00
    Hub = 0x09
    VendorSpecific = 0xff
