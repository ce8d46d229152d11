__doc__ = """
USB hub port power switching on top of libusb1.

HubPower finds a hub and toggles power on one of its downstream ports::

  import hubpower
  from hubpower.util.hub import Hub

  with hubpower.Context() as ctx:
      device = ctx.hub_get(vendor_id = 0x05e3)
      with device.open() as handle:
          hub = Hub.create(handle)
          hub.port_get(3).power_set(True)

The same is available from the command line::

  hub-power -v 0x05e3 3 1
"""

from .exception import *
from .context import *
