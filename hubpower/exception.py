__all__ = ["Error",
           "ContextError", "EnumerationError",
           "TransferError", "TransferTimeout", "TransferStalled",
           "TransferOverflow", "DeviceError", "DescriptorError",
           "OpenError", "Unsupported", "UnsupportedTopology",
           "PortError", "PowerSwitchingUnsupported"]

class Error(Exception):
    pass

# Fatal, nothing was acquired yet
class ContextError(Error):
    pass
class EnumerationError(Error):
    pass

# Device stopped cooperating once opened
class TransferError(Error):
    pass
class TransferTimeout(TransferError):
    pass
class TransferStalled(TransferError):
    pass
class TransferOverflow(TransferError):
    pass
class DeviceError(Error):
    pass
class DescriptorError(Error):
    pass

# Nothing to do with this device
class OpenError(Error):
    pass
class Unsupported(Error):
    pass
class UnsupportedTopology(Unsupported):
    pass
class PortError(Unsupported):
    pass
class PowerSwitchingUnsupported(Unsupported):
    pass
