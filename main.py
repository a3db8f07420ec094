from rich.console import Console
from rich.pretty import pprint

from clappers import *


clappers = (
    Clappers.build()
    .add_flags(["h|help", "v|verbose"])
    .add_singles(["o|output"])
    .add_multiples(["i|input", "I"])
)


if __name__ == '__main__':
    clappers.parse()
    pprint(clappers)
    Console().print(clappers.values)
