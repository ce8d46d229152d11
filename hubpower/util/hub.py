import enum
import logging
import struct
from ..exception import *
from ..constant import *

logger = logging.getLogger(__name__)

class HubClassRequest(enum.IntEnum):
    GetStatus = 0
    ClearFeature = 1
    GetState = 2
    SetFeature = 3
    GetDescriptor = 6
    SetDescriptor = 7
    ClearTtBuffer = 8
    ResetTt = 9
    GetTtState = 10
    StopTt = 11

class HubPortFeature(enum.IntEnum):
    Connection       = 0
    Enable           = 1
    Suspend          = 2
    OverCurrent      = 3
    Reset            = 4
    Power            = 8
    LowSpeed         = 9
    CPortConnection  = 16
    CPortEnable      = 17
    CPortSuspend     = 18
    CPortOverCurrent = 19
    CPortReset       = 20
    Test             = 21
    Indicator        = 22

class HubStatus(enum.IntFlag):
    LocalPowerSource = 0x0001
    OverCurrent      = 0x0002

class PortStatus(enum.IntFlag):
    CurrentConnection = 0x0001
    Enable            = 0x0002
    Suspend           = 0x0004
    OverCurrent       = 0x0008
    Reset             = 0x0010
    Power             = 0x0100
    LowSpeed          = 0x0200
    HighSpeed         = 0x0400
    TestMode          = 0x0800
    Indicator         = 0x1000

class DescriptorType(enum.IntEnum):
    Hub = 0x0029
    SsHub = 0x002a

class PowerSwitching(enum.IntEnum):
    Ganged = 0
    PerPort = 1
    NoSwitching = 2

class HubDescriptor:
    """
    Hub class descriptor, decoded from its wire representation.
    """
    NONVAR_SIZE = 7
    MAX_SIZE = 71

    def __init__(self, length, type, port_count, characteristics,
                 power_good_delay, controller_current, removable_bitmap = 0):
        self.length = length
        self.type = type
        self.port_count = port_count
        self.characteristics = characteristics
        self.power_good_delay = power_good_delay
        self.controller_current = controller_current
        self.removable_bitmap = removable_bitmap

    @classmethod
    def decode(cls, desc):
        """
        Decode a hub descriptor. Raise DescriptorError if the non-variable
        part is incomplete.
        """
        if len(desc) < cls.NONVAR_SIZE:
            raise DescriptorError("short hub descriptor (%d bytes)" % len(desc))

        l, t, port_count, car, pwr, cont = struct.unpack("<BBBHBB", desc[:cls.NONVAR_SIZE])

        # DeviceRemovable has one bit per port, bit 0 reserved
        removable = 0
        if t == DescriptorType.Hub:
            bc = (port_count + 8) // 8
            removable = int.from_bytes(desc[7 : 7 + bc], "little")

        return cls(l, t, port_count, car, pwr, cont, removable)

    @property
    def power_switching(self):
        """
        Logical power switching mode, from wHubCharacteristics bits 1:0
        """
        mode = self.characteristics & 0x3
        if mode == 0:
            return PowerSwitching.Ganged
        if mode == 1:
            return PowerSwitching.PerPort
        return PowerSwitching.NoSwitching

    @property
    def power_switchable(self):
        return self.power_switching != PowerSwitching.NoSwitching

    @property
    def power_good_delay_ms(self):
        """
        Time from power-on to power good on a port, in ms
        """
        return self.power_good_delay * 2

    def removable(self, port):
        """
        Whether device attached to 1-based port is removable
        """
        return not (self.removable_bitmap >> port) & 1

class Port:
    def __init__(self, hub, index):
        self.hub = hub
        self.index = index

    @property
    def removable(self):
        return self.hub.descriptor.removable(self.index)

    def feature_clear(self, feature):
        self.hub.handle.control(RequestTypeType.Class,
                                RequestTypeRecipient.Other,
                                HubClassRequest.ClearFeature, feature, self.index, b'')

    def feature_set(self, feature):
        self.hub.handle.control(RequestTypeType.Class,
                                RequestTypeRecipient.Other,
                                HubClassRequest.SetFeature, feature, self.index, b'')

    def power_set(self, enabled):
        """
        Switch port power on or off. Current port state is not checked.
        Raise PowerSwitchingUnsupported if hub cannot switch power.
        """
        if not self.hub.descriptor.power_switchable:
            raise PowerSwitchingUnsupported("power switching not supported")

        logger.info("port %d power %s", self.index, "on" if enabled else "off")
        if enabled:
            self.feature_set(HubPortFeature.Power)
        else:
            self.feature_clear(HubPortFeature.Power)

    def status_get(self):
        st = self.hub.handle.control(RequestTypeType.Class,
                                     RequestTypeRecipient.Other,
                                     HubClassRequest.GetStatus, 0, self.index, 4)
        if len(st) < 4:
            raise TransferError("short port status")
        ps, cs = struct.unpack("<HH", st[:4])
        return PortStatus(ps), PortStatus(cs)

class Hub:
    """
    Hub session on an opened device handle. Use Hub.create() to get one
    with a validated hub descriptor.
    """
    def __init__(self, handle):
        self.handle = handle
        self.descriptor = None
        self.port = []

    @classmethod
    def create(cls, handle):
        self = cls(handle)
        self._init()
        return self

    def _init(self):
        configuration = self.handle.active_configuration
        if len(configuration) != 1:
            raise UnsupportedTopology("multiple interfaces found")

        self.descriptor = HubDescriptor.decode(self.descriptor_get_std(0))
        logger.debug("hub has %d ports, characteristics %04x",
                     self.descriptor.port_count, self.descriptor.characteristics)

        self.port = []
        for i in range(self.descriptor.port_count):
            self.port.append(Port(self, i + 1))

    def __getitem__(self, index):
        return self.port[index]

    def __len__(self):
        return len(self.port)

    def __iter__(self):
        return iter(self.port)

    def port_get(self, number):
        """
        Retrieve a port by its 1-based number.
        Raise PortError if hub has no such port.
        """
        if number < 1 or number > len(self.port):
            raise PortError("invalid port number")
        return self.port[number - 1]

    def descriptor_get(self, type, index):
        return self.handle.class_control(HubClassRequest.GetDescriptor,
                                         (type << 8) | index, 0,
                                         HubDescriptor.MAX_SIZE)

    def descriptor_get_std(self, index):
        return self.descriptor_get(DescriptorType.Hub, index)

    def status_get(self):
        st = self.handle.class_control(HubClassRequest.GetStatus, 0, 0, 4)
        if len(st) < 4:
            raise TransferError("short hub status")
        ps, cs = struct.unpack("<HH", st[:4])
        return HubStatus(ps), HubStatus(cs)
