import sys

from rich.pretty import pprint

from argolite import *


registry = Registry()
helper = registry.add_flag("--help", "Display this message")
boolvalue = registry.add_option("--boolvalue", False, "True? False?")
floatvalue = registry.add_option("--floatvalue", 3.14, "Get real")
intvalue = registry.add_option("--intvalue", 123, "Making numbers whole")
stringvalue = registry.add_option("--stringvalue", "It's a default", "Tell me a story")
multivalue = registry.add_multi_option("--multivalue", "1.f,2.f,3.f", "The more the merrier", type=float)
multistringvalue = registry.add_multi_option("--multistringvalue", "one,two,three", "It's so easy!")


if __name__ == '__main__':
    registry.load("argolite.opts")
    registry.parse_env()
    registry.parse()

    registry.print_usage()

    if registry.is_parsed("--help"):
        sys.exit(0)

    pprint(registry.values())
    pprint(registry.remaining_arguments)
