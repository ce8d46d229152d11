import logging
import sys
from .. import *
from ..util.hub import Hub

logger = logging.getLogger("hub-list")

def hub_dump(device):
    try:
        with device.open() as handle:
            hub = Hub.create(handle)
    except (OpenError, Unsupported, TransferError, DeviceError, DescriptorError) as e:
        logger.warning("%s: %s", device, e)
        return

    desc = hub.descriptor
    print("%s, %d ports, %s power switching" % (
        device, len(hub), desc.power_switching.name))
    for port in hub:
        print("  * Port %d (%s)" % (port.index, "removable" if port.removable else "fixed"))

def hub_list(context):
    for d in context.hubs():
        hub_dump(d)

def main(context = None):
    logging.basicConfig(stream = sys.stderr, format = "%(name)s: %(message)s")
    try:
        with Context(context) as c:
            hub_list(c)
    except Error as e:
        logger.error("%s", e)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
