import argparse
import logging
import sys
from .. import *
from ..util.hub import Hub

logger = logging.getLogger("hub-power")

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_FAILURE = 2
EXIT_FATAL = -1

class UsageError(Exception):
    pass

class HelpRequested(Exception):
    pass

class HelpAction(argparse.Action):
    def __init__(self, option_strings, dest, help = None):
        super().__init__(option_strings, dest, nargs = 0,
                         default = argparse.SUPPRESS, help = help)

    def __call__(self, parser, namespace, values, option_string = None):
        raise HelpRequested()

class ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)

def hex_int(value):
    return int(value, 16)

def parser_build():
    parser = ArgumentParser(prog = "hub-power", add_help = False,
                            description = "Switch power of a USB hub port.")
    parser.add_argument("-h", action = HelpAction,
                        help = "show this help message")
    parser.add_argument("-b", dest = "bus", metavar = "BUS_NUM", type = int,
                        help = "bus number of hub")
    parser.add_argument("-d", dest = "address", metavar = "DEV_NUM", type = int,
                        help = "device address of hub")
    parser.add_argument("-v", dest = "vendor_id", metavar = "VENDOR_ID", type = hex_int,
                        help = "vendor ID of hub (hex)")
    parser.add_argument("-p", dest = "product_id", metavar = "PRODUCT_ID", type = hex_int,
                        help = "product ID of hub (hex)")
    parser.add_argument("-s", dest = "status", action = "store_true",
                        help = "report port status after switching")
    parser.add_argument("-V", dest = "verbose", action = "store_true",
                        help = "verbose output")
    parser.add_argument("port", metavar = "PORT_NUM", type = int,
                        help = "port number, starting at 1")
    parser.add_argument("power", choices = ["0", "1"],
                        help = "0 to switch power off, 1 to switch it on")
    return parser

def hub_power(context, port, enabled, bus = None, address = None,
              vendor_id = None, product_id = None, status = False):
    """
    Switch power of a port on the first matching hub.

    Raise KeyError if no hub matches, any hubpower.Error on failure.
    """
    device = context.hub_get(bus = bus, address = address,
                             vendor_id = vendor_id, product_id = product_id)
    logger.debug("using %s", device)

    with device.open() as handle:
        hub = Hub.create(handle)
        p = hub.port_get(port)
        p.power_set(enabled)
        if status:
            try:
                ps, _ = p.status_get()
            except (TransferError, DeviceError) as e:
                logger.warning("cannot read port %d status: %s", p.index, e)
                return
            print("Port %d: %r" % (p.index, ps))

def main(argv = None, context = None):
    parser = parser_build()
    try:
        args = parser.parse_args(argv)
    except HelpRequested:
        parser.print_help()
        return EXIT_USAGE
    except UsageError as e:
        parser.print_usage(sys.stderr)
        print("hub-power: %s" % e, file = sys.stderr)
        return EXIT_USAGE

    logging.basicConfig(stream = sys.stderr,
                        level = logging.DEBUG if args.verbose else logging.WARNING,
                        format = "%(name)s: %(message)s")

    try:
        with Context(context) as c:
            hub_power(c, args.port, args.power == "1",
                      bus = args.bus, address = args.address,
                      vendor_id = args.vendor_id, product_id = args.product_id,
                      status = args.status)
    except KeyError:
        logger.warning("no matching hub found")
    except (OpenError, Unsupported) as e:
        logger.warning("%s", e)
    except (ContextError, EnumerationError) as e:
        logger.error("%s", e)
        return EXIT_FATAL
    except Error as e:
        logger.error("libusb error: %s", e)
        return EXIT_FAILURE
    return EXIT_OK

if __name__ == "__main__":
    sys.exit(main())
